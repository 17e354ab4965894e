"""Tests for hexcodec.py - Hex color parsing and formatting."""

from __future__ import annotations

import pytest

from colorkit.hexcodec import HexParsingError, format_hex, parse_hex, try_parse_hex
from colorkit.rgba import RGBA


class TestParseHex:
    """Tests for parse_hex() function."""

    def test_six_digits(self):
        assert parse_hex("#FF0000") == RGBA(1.0, 0.0, 0.0, 1.0)

    def test_short_form(self):
        """Three digits are doubled: #F80 == #FF8800."""
        assert parse_hex("#F80") == parse_hex("#FF8800")

    def test_eight_digits_alpha(self):
        rgba = parse_hex("#00000080")
        assert rgba.a == pytest.approx(128 / 255)

    def test_without_hash(self):
        assert parse_hex("00ff00") == RGBA(0.0, 1.0, 0.0)

    def test_whitespace_and_case(self):
        assert parse_hex("  #aAbBcC \n") == parse_hex("#AABBCC")

    @pytest.mark.parametrize("bad", ["", "#", "#12", "#12345", "#1234567", "#123456789"])
    def test_bad_length(self, bad: str):
        with pytest.raises(HexParsingError):
            parse_hex(bad)

    @pytest.mark.parametrize("bad", ["#GG0000", "#12345Z", "#-12345", "#1 2 3"])
    def test_non_hex_digits(self, bad: str):
        """Non-hex digits are rejected instead of read as zero."""
        with pytest.raises(HexParsingError):
            parse_hex(bad)

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_hex("nope")


class TestTryParseHex:
    """Tests for try_parse_hex() function."""

    def test_valid(self):
        assert try_parse_hex("#FFFFFF") == RGBA(1.0, 1.0, 1.0)

    def test_invalid_returns_none(self):
        assert try_parse_hex("#XYZXYZ") is None

    def test_invalid_is_logged(self, debug_logs):
        try_parse_hex("not a color")
        assert "not a color" in debug_logs.text


class TestFormatHex:
    """Tests for format_hex() function."""

    def test_primary_colors(self, red, green, blue):
        assert format_hex(red) == "#FF0000"
        assert format_hex(green) == "#00FF00"
        assert format_hex(blue) == "#0000FF"

    def test_half_rounds_up(self):
        """0.5 * 255 = 127.5 rounds to 128 (0x80)."""
        assert format_hex(RGBA(0.5, 0.5, 0.5)) == "#808080"

    def test_out_of_range_clamped(self):
        assert format_hex(RGBA(1.5, -0.2, 0.0)) == "#FF0000"

    def test_include_alpha(self):
        assert format_hex(RGBA(1.0, 1.0, 1.0, 0.0), include_alpha=True) == "#FFFFFF00"

    def test_lowercase(self):
        assert format_hex(RGBA(0.0, 0.0, 1.0), uppercase=False) == "#0000ff"

    @pytest.mark.parametrize("hex_color", ["#000000", "#FFFFFF", "#123456", "#ABCDEF", "#7F7F7F"])
    def test_parse_then_format(self, hex_color: str):
        assert format_hex(parse_hex(hex_color)) == hex_color

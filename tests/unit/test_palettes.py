"""Tests for palettes.py - Palette tables and palette synthesis."""

from __future__ import annotations

import pytest

from colorkit.color import hex_to_lab
from colorkit.hexcodec import parse_hex
from colorkit.palettes import (
    BLUES,
    PALETTES,
    generate_diverging,
    generate_sequential,
    generate_tints_and_shades,
    subset,
)


class TestPaletteTables:
    """Sanity checks on the static palette tables."""

    @pytest.mark.parametrize("name", sorted(PALETTES))
    def test_all_entries_parse(self, name):
        for hex_color in PALETTES[name]:
            parse_hex(hex_color)

    @pytest.mark.parametrize("name", ["blues", "greens", "reds", "purples", "oranges"])
    def test_sequential_tables_get_darker(self, name):
        ls = [hex_to_lab(c).l for c in PALETTES[name]]
        assert ls == sorted(ls, reverse=True)


class TestSubset:
    """Tests for subset() function."""

    def test_evenly_spaced(self):
        assert subset(BLUES, 3) == ["#F7FBFF", "#6BAED6", "#08306B"]

    def test_single(self):
        assert subset(BLUES, 1) == ["#F7FBFF"]

    def test_count_exceeds_palette(self):
        assert subset(BLUES, 20) == BLUES

    def test_returns_copy(self):
        out = subset(BLUES, len(BLUES))
        out.append("#000000")
        assert len(BLUES) == 9

    @pytest.mark.parametrize("count", [0, -1])
    def test_non_positive_count(self, count):
        assert subset(BLUES, count) == []

    def test_empty_palette(self):
        assert subset([], 3) == []


class TestGenerateSequential:
    """Tests for generate_sequential() function."""

    def test_length_and_endpoints(self, channels):
        colors = generate_sequential("#08519C", 9)
        assert len(colors) == 9
        assert colors[0] == "#FAFAFA"
        assert all(abs(a - b) <= 1 for a, b in zip(channels(colors[-1]), channels("#08519C")))

    def test_gets_darker(self):
        ls = [hex_to_lab(c).l for c in generate_sequential("#08519C", 6)]
        assert ls == sorted(ls, reverse=True)

    def test_single_step_is_base(self):
        assert generate_sequential("#08519c", 1) == ["#08519C"]

    @pytest.mark.parametrize("steps", [0, -3])
    def test_non_positive_steps(self, steps):
        assert generate_sequential("#08519C", steps) == []

    def test_invalid_returns_input(self):
        assert generate_sequential("oops", 5) == ["oops"]


class TestGenerateDiverging:
    """Tests for generate_diverging() function."""

    def test_odd_steps_include_neutral(self):
        colors = generate_diverging("#B2182B", "#2166AC", 11)
        assert len(colors) == 11
        assert colors[5] == "#F7F7F7"

    def test_even_steps_skip_neutral(self):
        colors = generate_diverging("#B2182B", "#2166AC", 10)
        assert len(colors) == 10
        assert "#F7F7F7" not in colors

    def test_endpoints(self, channels):
        colors = generate_diverging("#B2182B", "#2166AC", 7)
        assert all(abs(a - b) <= 1 for a, b in zip(channels(colors[0]), channels("#B2182B")))
        assert all(abs(a - b) <= 1 for a, b in zip(channels(colors[-1]), channels("#2166AC")))

    def test_single_step_is_neutral(self):
        assert generate_diverging("#B2182B", "#2166AC", 1) == ["#F7F7F7"]

    def test_invalid_returns_inputs(self):
        assert generate_diverging("#B2182B", "???", 5) == ["#B2182B", "???"]


class TestTintsAndShades:
    """Tests for generate_tints_and_shades() function."""

    def test_gray(self):
        colors = generate_tints_and_shades("#808080", steps=5, range_=0.25)
        assert len(colors) == 11
        assert colors[0] == "#404040"
        assert colors[5] == "#808080"
        assert colors[-1] == "#C0C0C0"

    def test_ordered_dark_to_light(self):
        colors = generate_tints_and_shades("#3498DB", steps=3)
        ls = [hex_to_lab(c).l for c in colors]
        assert ls == sorted(ls)

    def test_clamps_at_white(self):
        colors = generate_tints_and_shades("#FFFFFF", steps=2, range_=0.5)
        assert colors[-1] == "#FFFFFF"

    def test_invalid_returns_empty(self):
        assert generate_tints_and_shades("zzz") == []

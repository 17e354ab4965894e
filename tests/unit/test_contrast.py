"""Tests for contrast.py - WCAG contrast and RGB adjustments."""

from __future__ import annotations

import pytest

from colorkit.contrast import (
    WCAGLevel,
    adjust_brightness,
    alpha_composite,
    contrast_ratio,
    contrast_ratio_hex,
    meets,
    meets_aa,
    meets_aaa,
    relative_luminance,
)
from colorkit.rgba import RGBA


class TestRelativeLuminance:
    """Tests for relative_luminance() function."""

    def test_black_and_white(self, black, white):
        assert relative_luminance(black) == 0.0
        assert relative_luminance(white) == pytest.approx(1.0)

    def test_green_dominates(self, red, green, blue):
        assert relative_luminance(green) > relative_luminance(red) > relative_luminance(blue)


class TestContrastRatio:
    """Tests for contrast_ratio() and the hex helpers."""

    def test_black_on_white_is_21(self, black, white):
        assert contrast_ratio(black, white) == pytest.approx(21.0)

    def test_same_color_is_1(self, red):
        assert contrast_ratio(red, red) == pytest.approx(1.0)

    def test_order_independent(self, red, blue):
        assert contrast_ratio(red, blue) == contrast_ratio(blue, red)

    def test_hex(self):
        assert contrast_ratio_hex("#000", "#FFF") == pytest.approx(21.0)

    def test_hex_invalid(self):
        assert contrast_ratio_hex("#000", "white") is None


class TestWcagLevels:
    """Tests for meets(), meets_aa() and meets_aaa()."""

    def test_thresholds(self):
        assert WCAGLevel.AA.min_ratio == 4.5
        assert WCAGLevel.AAA.min_ratio == 7.0

    def test_aa_boundary_grays(self):
        """#767676 is the lightest gray passing AA on white; #777777 fails."""
        assert meets_aa("#767676", "#FFFFFF")
        assert not meets_aa("#777777", "#FFFFFF")

    def test_aaa(self):
        assert meets_aaa("#000000", "#FFFFFF")
        assert not meets_aaa("#767676", "#FFFFFF")

    def test_meets_rgba(self, black, white):
        assert meets(WCAGLevel.AAA, black, white)

    def test_invalid_input_fails(self):
        assert meets_aa("nope", "#FFFFFF") is False
        assert meets_aaa("#000000", "") is False


class TestAdjustBrightness:
    """Tests for adjust_brightness() function."""

    def test_lighten_keeps_alpha(self):
        out = adjust_brightness(RGBA(0.5, 0.5, 0.5, 0.3), 0.2)
        assert out.r == pytest.approx(0.7)
        assert out.a == 0.3

    def test_darken(self):
        out = adjust_brightness(RGBA(0.5, 0.2, 0.9), -0.3)
        assert out.as_tuple() == pytest.approx((0.2, 0.0, 0.6, 1.0))

    def test_amount_is_clamped(self):
        assert adjust_brightness(RGBA(0.1, 0.2, 0.3), 5.0) == RGBA(1.0, 1.0, 1.0)


class TestAlphaComposite:
    """Tests for alpha_composite() function (source-over)."""

    def test_opaque_top_wins(self, red, blue):
        assert alpha_composite(red, blue) == red

    def test_transparent_top_shows_bottom(self, blue):
        assert alpha_composite(RGBA(1, 0, 0, 0.0), blue) == blue

    def test_half_over_opaque(self, white):
        out = alpha_composite(RGBA(0, 0, 0, 0.5), white)
        assert out.r == pytest.approx(0.5)
        assert out.a == pytest.approx(1.0)

    def test_both_transparent(self):
        assert alpha_composite(RGBA(1, 1, 1, 0), RGBA(0.5, 0.5, 0.5, 0)) == RGBA(0, 0, 0, 0)

"""Tests for perceptual.py - Delta E and Lab blending."""

from __future__ import annotations

import math

import pytest

from colorkit.color import CIELAB, rgba_to_lab
from colorkit.hexcodec import format_hex
from colorkit.perceptual import delta_e_2000, lerp_lab, perceptual_blend, perceptual_gradient
from colorkit.rgba import RGBA


def _weighted_delta_e(c1: RGBA, c2: RGBA) -> float:
    """Sl=1, Sc and Sh weighted by the first color's chroma."""
    lab1, lab2 = rgba_to_lab(c1), rgba_to_lab(c2)
    C1 = math.hypot(lab1.a, lab1.b)
    dC = math.hypot(lab2.a, lab2.b) - C1
    dH2 = (lab2.a - lab1.a) ** 2 + (lab2.b - lab1.b) ** 2 - dC**2
    Sc = 1 + 0.045 * C1
    Sh = 1 + 0.015 * C1
    return math.sqrt((lab2.l - lab1.l) ** 2 + (dC / Sc) ** 2 + max(0.0, dH2) / Sh**2)


class TestDeltaE2000:
    """Tests for delta_e_2000() function (simplified)."""

    def test_identical_colors_zero_distance(self, red):
        assert delta_e_2000(red, red) == 0.0

    def test_non_negative(self, sample_colors):
        for a in sample_colors:
            for b in sample_colors:
                assert delta_e_2000(a, b) >= 0.0

    def test_black_vs_white_large_distance(self, black, white):
        assert delta_e_2000(black, white) > 90

    def test_similar_colors_small_distance(self):
        """Colors one step apart should be close to imperceptible."""
        assert delta_e_2000(RGBA(1.0, 0.0, 0.0), RGBA(254 / 255, 0.0, 0.0)) < 2

    def test_red_to_blue(self, red, blue):
        """Weights use red's chroma: Sc = 1 + 0.045*C_red, Sh = 1 + 0.015*C_red."""
        assert delta_e_2000(red, blue) == pytest.approx(70.58, abs=0.1)
        assert delta_e_2000(red, blue) == pytest.approx(_weighted_delta_e(red, blue), rel=1e-9)

    def test_blue_to_red(self, red, blue):
        """Weights use blue's larger chroma, so this order comes out smaller."""
        assert delta_e_2000(blue, red) == pytest.approx(61.24, abs=0.1)
        assert delta_e_2000(blue, red) == pytest.approx(_weighted_delta_e(blue, red), rel=1e-9)

    def test_grays_only_differ_in_lightness(self):
        """For neutrals the result reduces to the L difference."""
        g1, g2 = RGBA(0.2, 0.2, 0.2), RGBA(0.6, 0.6, 0.6)
        dl = rgba_to_lab(g2).l - rgba_to_lab(g1).l
        assert delta_e_2000(g1, g2) == pytest.approx(abs(dl), abs=0.05)


class TestPerceptualBlend:
    """Tests for lerp_lab() and perceptual_blend()."""

    def test_lerp_lab_midpoint(self):
        mid = lerp_lab(CIELAB(0, -10, 20), CIELAB(100, 10, -20), 0.5)
        assert mid.l == pytest.approx(50)
        assert mid.a == pytest.approx(0)
        assert mid.b == pytest.approx(0)

    def test_ratio_endpoints(self, red, blue):
        assert format_hex(perceptual_blend(red, blue, 0.0)) == "#FF0000"
        assert format_hex(perceptual_blend(red, blue, 1.0)) == "#0000FF"

    def test_ratio_is_clamped(self, red, blue):
        assert perceptual_blend(red, blue, -3.0) == perceptual_blend(red, blue, 0.0)
        assert perceptual_blend(red, blue, 7.0) == perceptual_blend(red, blue, 1.0)

    def test_alpha_not_interpolated(self):
        """The result comes back from XYZ fully opaque."""
        c1 = RGBA(1.0, 0.0, 0.0, 0.2)
        c2 = RGBA(0.0, 0.0, 1.0, 0.4)
        assert perceptual_blend(c1, c2, 0.5).a == 1.0

    def test_black_white_midpoint_is_mid_lightness(self, black, white):
        mid = perceptual_blend(black, white, 0.5)
        assert rgba_to_lab(mid).l == pytest.approx(50.0, abs=0.5)


class TestPerceptualGradient:
    """Tests for perceptual_gradient() function."""

    def test_length(self, red, blue):
        assert len(perceptual_gradient(red, blue, 7)) == 7

    def test_single_step(self, red, blue):
        assert perceptual_gradient(red, blue, 1) == [red]

    def test_lightness_monotonic(self, black, white):
        ls = [rgba_to_lab(c).l for c in perceptual_gradient(black, white, 6)]
        assert ls == sorted(ls)

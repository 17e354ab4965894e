"""WCAG contrast checking and simple RGB adjustments."""

from __future__ import annotations

from enum import Enum

from .hexcodec import try_parse_hex
from .rgba import RGBA, clamp


class WCAGLevel(Enum):
    """WCAG conformance level with its minimum contrast ratio for normal text."""

    AA = 4.5
    AAA = 7.0

    @property
    def min_ratio(self) -> float:
        return self.value


def _linearize(v: float) -> float:
    # WCAG 2.x uses 0.03928 rather than the sRGB standard's 0.04045
    return v / 12.92 if v <= 0.03928 else ((v + 0.055) / 1.055) ** 2.4


def relative_luminance(c: RGBA) -> float:
    """WCAG relative luminance (0 = black, 1 = white)."""
    return 0.2126 * _linearize(c.r) + 0.7152 * _linearize(c.g) + 0.0722 * _linearize(c.b)


def contrast_ratio(c1: RGBA, c2: RGBA) -> float:
    """WCAG contrast ratio, from 1:1 up to 21:1. Argument order does not matter."""
    l1 = relative_luminance(c1)
    l2 = relative_luminance(c2)
    hi, lo = max(l1, l2), min(l1, l2)
    return (hi + 0.05) / (lo + 0.05)


def meets(level: WCAGLevel, foreground: RGBA, background: RGBA) -> bool:
    """Check a color pair against a WCAG level (normal text thresholds)."""
    return contrast_ratio(foreground, background) >= level.min_ratio


def contrast_ratio_hex(hex1: str, hex2: str) -> float | None:
    c1 = try_parse_hex(hex1)
    c2 = try_parse_hex(hex2)
    if c1 is None or c2 is None:
        return None
    return contrast_ratio(c1, c2)


def _meets_hex(level: WCAGLevel, foreground: str, background: str) -> bool:
    fg = try_parse_hex(foreground)
    bg = try_parse_hex(background)
    if fg is None or bg is None:
        return False
    return meets(level, fg, bg)


def meets_aa(foreground: str, background: str) -> bool:
    return _meets_hex(WCAGLevel.AA, foreground, background)


def meets_aaa(foreground: str, background: str) -> bool:
    return _meets_hex(WCAGLevel.AAA, foreground, background)


def adjust_brightness(c: RGBA, amount: float) -> RGBA:
    """
    Lighten (positive) or darken (negative) by adding amount to each channel.

    amount is clamped to -1..1; the result channels are clamped to 0-1.
    """
    amt = clamp(amount, -1.0, 1.0)
    return RGBA(clamp(c.r + amt), clamp(c.g + amt), clamp(c.b + amt), c.a)


def alpha_composite(top: RGBA, bottom: RGBA) -> RGBA:
    """Source-over compositing of top onto bottom."""
    a = top.a + bottom.a * (1 - top.a)
    if a <= 0:
        return RGBA(0.0, 0.0, 0.0, 0.0)

    def channel(ct: float, cb: float) -> float:
        return (ct * top.a + cb * bottom.a * (1 - top.a)) / a

    return RGBA(channel(top.r, bottom.r), channel(top.g, bottom.g), channel(top.b, bottom.b), a)

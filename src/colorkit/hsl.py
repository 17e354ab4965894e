"""HSL representation used for hue-based operations (harmonies, gradients, psychology)."""

from __future__ import annotations

from dataclasses import dataclass

from .rgba import RGBA


@dataclass(frozen=True)
class HSL:
    h: float  # 0-360
    s: float  # 0-1
    l: float  # noqa: E741  # 0-1


def wrap_hue(hue: float) -> float:
    """Normalize a hue angle into [0, 360)."""
    wrapped = hue % 360.0
    # -1e-20 % 360 rounds to 360.0
    return 0.0 if wrapped >= 360.0 else wrapped


def shortest_hue_delta(h1: float, h2: float) -> float:
    """Signed hue difference from h1 to h2 along the shorter arc."""
    diff = h2 - h1
    if diff > 180:
        diff -= 360
    elif diff < -180:
        diff += 360
    return diff


def rgba_to_hsl(rgba: RGBA) -> HSL:
    """Convert RGBA to HSL. Achromatic colors get hue 0 and saturation 0."""
    r, g, b = rgba.r, rgba.g, rgba.b

    cmax = max(r, g, b)
    cmin = min(r, g, b)
    delta = cmax - cmin

    l = (cmax + cmin) / 2.0  # noqa: E741

    if delta == 0:
        return HSL(0.0, 0.0, l)

    s = delta / (2.0 - cmax - cmin) if l > 0.5 else delta / (cmax + cmin)

    if cmax == r:
        h = ((g - b) / delta + (6 if g < b else 0)) * 60
    elif cmax == g:
        h = ((b - r) / delta + 2) * 60
    else:
        h = ((r - g) / delta + 4) * 60

    return HSL(h, s, l)


def _hue_to_rgb(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgba(hsl: HSL, alpha: float = 1.0) -> RGBA:
    """Convert HSL back to RGBA."""
    h = hsl.h / 360.0
    s = hsl.s
    l = hsl.l  # noqa: E741

    if s == 0:
        return RGBA(l, l, l, alpha)

    q = l * (1 + s) if l < 0.5 else l + s - l * s
    p = 2 * l - q

    return RGBA(
        _hue_to_rgb(p, q, h + 1 / 3),
        _hue_to_rgb(p, q, h),
        _hue_to_rgb(p, q, h - 1 / 3),
        alpha,
    )


def rotate_hue(hsl: HSL, degrees: float) -> HSL:
    return HSL(wrap_hue(hsl.h + degrees), hsl.s, hsl.l)

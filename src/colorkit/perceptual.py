"""
Perceptual color math in CIELAB space.

Delta E interpretation:
    < 1:    Imperceptible difference
    1-2:    Slight, noticeable by trained eye
    2-10:   Noticeable difference
    10-50:  Similar family of colors
    > 50:   Different colors
"""

from __future__ import annotations

import math

import numpy as np

from .color import CIELAB, lab_to_rgba, rgba_to_lab
from .rgba import RGBA


def delta_e_2000(c1: RGBA, c2: RGBA) -> float:
    """
    Simplified CIEDE2000-style color difference.

    This is not the full CIEDE2000 formula: there is no hue rotation term
    and the weighting functions are reduced to Sl = 1, Sc = 1 + 0.045*C1,
    Sh = 1 + 0.015*C1. Because Sc and Sh depend on the first color's chroma
    the result is not symmetric in its arguments.
    """
    lab1 = rgba_to_lab(c1)
    lab2 = rgba_to_lab(c2)

    dL = lab2.l - lab1.l
    da = lab2.a - lab1.a
    db = lab2.b - lab1.b

    C1 = math.sqrt(lab1.a**2 + lab1.b**2)
    C2 = math.sqrt(lab2.a**2 + lab2.b**2)
    dC = C2 - C1

    # Rounding can push the radicand slightly negative
    dH = math.sqrt(max(0.0, da**2 + db**2 - dC**2))

    Sl = 1.0
    Sc = 1 + 0.045 * C1
    Sh = 1 + 0.015 * C1

    return math.sqrt((dL / Sl) ** 2 + (dC / Sc) ** 2 + (dH / Sh) ** 2)


def lerp_lab(lab1: CIELAB, lab2: CIELAB, t: float) -> CIELAB:
    """Linear interpolation between two Lab colors."""
    v1 = np.array([lab1.l, lab1.a, lab1.b])
    v2 = np.array([lab2.l, lab2.a, lab2.b])
    L, a, b = v1 * (1 - t) + v2 * t
    return CIELAB(float(L), float(a), float(b))


def perceptual_blend(c1: RGBA, c2: RGBA, ratio: float) -> RGBA:
    """
    Blend two colors in Lab space.

    ratio is clamped to 0-1 (0 = c1, 1 = c2). Alpha is not interpolated:
    the result comes back from XYZ with alpha 1.0.
    """
    t = max(0.0, min(1.0, ratio))
    return lab_to_rgba(lerp_lab(rgba_to_lab(c1), rgba_to_lab(c2), t))


def perceptual_gradient(start: RGBA, end: RGBA, steps: int) -> list[RGBA]:
    """Evenly spaced Lab blends from start to end, inclusive."""
    if steps <= 1:
        return [start]
    return [perceptual_blend(start, end, i / (steps - 1)) for i in range(steps)]

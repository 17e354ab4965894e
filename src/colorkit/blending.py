"""
Separable blend modes (W3C Compositing Level 1).

Each mode defines B(cb, cs) per channel, where cb is the backdrop (base)
and cs the source (overlay). The result is mixed by the overlay alpha:

    c = cb + (B(cb, cs) - cb) * as
    a = as + ab * (1 - as)
"""

from __future__ import annotations

import math
from collections.abc import Callable
from enum import Enum

from .rgba import RGBA, clamp


class BlendMode(Enum):
    NORMAL = "normal"
    MULTIPLY = "multiply"
    SCREEN = "screen"
    OVERLAY = "overlay"
    DARKEN = "darken"
    LIGHTEN = "lighten"
    COLOR_DODGE = "color_dodge"
    COLOR_BURN = "color_burn"
    HARD_LIGHT = "hard_light"
    SOFT_LIGHT = "soft_light"
    DIFFERENCE = "difference"
    EXCLUSION = "exclusion"


def _multiply(cb: float, cs: float) -> float:
    return cb * cs


def _screen(cb: float, cs: float) -> float:
    return cb + cs - cb * cs


def _hard_light(cb: float, cs: float) -> float:
    if cs <= 0.5:
        return _multiply(cb, 2 * cs)
    return _screen(cb, 2 * cs - 1)


def _color_dodge(cb: float, cs: float) -> float:
    if cb == 0:
        return 0.0
    if cs >= 1:
        return 1.0
    return min(1.0, cb / (1 - cs))


def _color_burn(cb: float, cs: float) -> float:
    if cb >= 1:
        return 1.0
    if cs <= 0:
        return 0.0
    return 1 - min(1.0, (1 - cb) / cs)


def _soft_light(cb: float, cs: float) -> float:
    if cs <= 0.5:
        return cb - (1 - 2 * cs) * cb * (1 - cb)
    d = ((16 * cb - 12) * cb + 4) * cb if cb <= 0.25 else math.sqrt(cb)
    return cb + (2 * cs - 1) * (d - cb)


_BLEND_FUNCTIONS: dict[BlendMode, Callable[[float, float], float]] = {
    BlendMode.NORMAL: lambda cb, cs: cs,
    BlendMode.MULTIPLY: _multiply,
    BlendMode.SCREEN: _screen,
    BlendMode.OVERLAY: lambda cb, cs: _hard_light(cs, cb),
    BlendMode.DARKEN: min,
    BlendMode.LIGHTEN: max,
    BlendMode.COLOR_DODGE: _color_dodge,
    BlendMode.COLOR_BURN: _color_burn,
    BlendMode.HARD_LIGHT: _hard_light,
    BlendMode.SOFT_LIGHT: _soft_light,
    BlendMode.DIFFERENCE: lambda cb, cs: abs(cb - cs),
    BlendMode.EXCLUSION: lambda cb, cs: cb + cs - 2 * cb * cs,
}


def blend(overlay: RGBA, base: RGBA, mode: BlendMode = BlendMode.NORMAL) -> RGBA:
    """Blend overlay onto base with the given mode."""
    fn = _BLEND_FUNCTIONS[mode]
    a_s = clamp(overlay.a)

    def channel(cb: float, cs: float) -> float:
        cb, cs = clamp(cb), clamp(cs)
        return clamp(cb + (fn(cb, cs) - cb) * a_s)

    return RGBA(
        channel(base.r, overlay.r),
        channel(base.g, overlay.g),
        channel(base.b, overlay.b),
        clamp(a_s + clamp(base.a) * (1 - a_s)),
    )

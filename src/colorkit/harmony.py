"""Color harmony schemes built by rotating hue (or varying lightness) in HSL."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum

from .hexcodec import format_hex, try_parse_hex
from .hsl import HSL, hsl_to_rgba, rgba_to_hsl, rotate_hue


class ColorHarmonyType(Enum):
    COMPLEMENTARY = "complementary"
    ANALOGOUS = "analogous"
    TRIADIC = "triadic"
    TETRADIC = "tetradic"
    SPLIT_COMPLEMENTARY = "split_complementary"
    MONOCHROMATIC = "monochromatic"


MONOCHROMATIC_LIGHTNESS = (0.2, 0.4, None, 0.7, 0.9)  # None keeps the base lightness


def _rotations(*offsets: float) -> Callable[[HSL], list[HSL]]:
    def build(hsl: HSL) -> list[HSL]:
        return [rotate_hue(hsl, offset) for offset in offsets]

    return build


def _monochromatic(hsl: HSL) -> list[HSL]:
    return [HSL(hsl.h, hsl.s, hsl.l if l is None else l) for l in MONOCHROMATIC_LIGHTNESS]  # noqa: E741


_SCHEMES: dict[ColorHarmonyType, Callable[[HSL], list[HSL]]] = {
    ColorHarmonyType.COMPLEMENTARY: _rotations(0, 180),
    ColorHarmonyType.ANALOGOUS: _rotations(-30, 0, 30),
    ColorHarmonyType.TRIADIC: _rotations(0, 120, 240),
    ColorHarmonyType.TETRADIC: _rotations(0, 90, 180, 270),
    ColorHarmonyType.SPLIT_COMPLEMENTARY: _rotations(0, 150, 210),
    ColorHarmonyType.MONOCHROMATIC: _monochromatic,
}


def generate_harmony(base_hex: str, type_: ColorHarmonyType) -> list[str]:
    """
    Generate a harmony scheme from a base color.

    The base color itself is part of every scheme. Alpha is dropped.

    Args:
        base_hex: Base color in hex format
        type_: Harmony scheme

    Returns:
        Hex colors of the scheme, or [base_hex] if it cannot be parsed
    """
    base = try_parse_hex(base_hex)
    if base is None:
        return [base_hex]

    hsl = rgba_to_hsl(base)
    return [format_hex(hsl_to_rgba(c)) for c in _SCHEMES[type_](hsl)]

"""Approximate color-vision-deficiency simulation with 3x3 RGB matrices."""

from __future__ import annotations

from enum import Enum

import numpy as np

from .hexcodec import format_hex, try_parse_hex
from .rgba import RGBA


class ColorBlindnessType(Enum):
    PROTANOPIA = "protanopia"
    DEUTERANOPIA = "deuteranopia"
    TRITANOPIA = "tritanopia"


# Simple approximations, not clinically validated
SIMULATION_MATRICES: dict[ColorBlindnessType, np.ndarray] = {
    ColorBlindnessType.PROTANOPIA: np.array([
        [0.56667, 0.43333, 0.0],
        [0.55833, 0.44167, 0.0],
        [0.0, 0.24167, 0.75833],
    ]),
    ColorBlindnessType.DEUTERANOPIA: np.array([
        [0.625, 0.375, 0.0],
        [0.7, 0.3, 0.0],
        [0.0, 0.3, 0.7],
    ]),
    ColorBlindnessType.TRITANOPIA: np.array([
        [0.95, 0.05, 0.0],
        [0.0, 0.433, 0.567],
        [0.0, 0.475, 0.525],
    ]),
}


def simulate(type_: ColorBlindnessType, rgba: RGBA) -> RGBA:
    """Simulate how a color appears under a deficiency. Alpha is kept."""
    rgb = SIMULATION_MATRICES[type_] @ np.array([rgba.r, rgba.g, rgba.b])
    r, g, b = np.clip(rgb, 0.0, 1.0)
    return RGBA(float(r), float(g), float(b), rgba.a)


def simulate_hex(type_: ColorBlindnessType, hex_color: str) -> str | None:
    rgba = try_parse_hex(hex_color)
    if rgba is None:
        return None
    return format_hex(simulate(type_, rgba))

"""
Photo-editor style temperature and tint adjustment.

Temperature and tint inputs range from -100 to 100 and are applied as
offsets to the linear-light channels:

    temperature > 0   warmer (red/yellow up, blue down)
    temperature < 0   cooler (blue up)
    tint > 0          more magenta
    tint < 0          more green
"""

from __future__ import annotations

import logging
import math

from .color import linear_to_srgb, srgb_to_linear
from .hexcodec import format_hex, try_parse_hex
from .perceptual import perceptual_blend
from .rgba import RGBA, clamp

logger = logging.getLogger(__name__)

DEFAULT_TEMPERATURE_K = 6500.0

# (r, g, b) linear offsets per unit of adjustment, picked by sign
_WARM = (0.3, 0.1, -0.2)
_COOL = (0.2, 0.1, -0.3)
_MAGENTA = (0.2, -0.1, 0.1)
_GREEN = (0.1, -0.2, 0.05)


def _shift_linear(rgba: RGBA, factor: float, offsets: tuple[float, float, float]) -> RGBA:
    r, g, b = (
        clamp(linear_to_srgb(srgb_to_linear(c) + factor * k))
        for c, k in zip((rgba.r, rgba.g, rgba.b), offsets)
    )
    return RGBA(r, g, b, rgba.a)


def adjust_temperature(rgba: RGBA, temperature: float) -> RGBA:
    factor = clamp(temperature, -100.0, 100.0) / 100.0
    return _shift_linear(rgba, factor, _WARM if factor > 0 else _COOL)


def adjust_tint(rgba: RGBA, tint: float) -> RGBA:
    factor = clamp(tint, -100.0, 100.0) / 100.0
    return _shift_linear(rgba, factor, _MAGENTA if factor > 0 else _GREEN)


def adjust_temperature_and_tint(rgba: RGBA, temperature: float, tint: float) -> RGBA:
    """Temperature first, then tint."""
    return adjust_tint(adjust_temperature(rgba, temperature), tint)


def adjust_temperature_hex(hex_color: str, temperature: float) -> str:
    rgba = try_parse_hex(hex_color)
    if rgba is None:
        return hex_color
    return format_hex(adjust_temperature(rgba, temperature))


def adjust_tint_hex(hex_color: str, tint: float) -> str:
    rgba = try_parse_hex(hex_color)
    if rgba is None:
        return hex_color
    return format_hex(adjust_tint(rgba, tint))


def adjust_temperature_and_tint_hex(hex_color: str, temperature: float, tint: float) -> str:
    rgba = try_parse_hex(hex_color)
    if rgba is None:
        return hex_color
    return format_hex(adjust_temperature_and_tint(rgba, temperature, tint))


def color_temperature(rgba: RGBA) -> float:
    """
    Very rough color temperature estimate in Kelvin from the red/blue ratio.

    Warm colors land around 2000K and up, neutrals near 5500K, cool colors
    above 6500K.
    """
    ratio = rgba.r / max(rgba.b, 0.001)
    if ratio > 1.5:
        return 2000 + (ratio - 1.5) * 1000
    if ratio < 0.8:
        return 6500 + (0.8 - ratio) * 7000
    return 5500 + (ratio - 1.0) * 2000


def color_temperature_hex(hex_color: str) -> float:
    rgba = try_parse_hex(hex_color)
    if rgba is None:
        return DEFAULT_TEMPERATURE_K
    return color_temperature(rgba)


def kelvin_to_rgba(kelvin: float) -> RGBA:
    """
    Approximate blackbody color for a temperature.

    Uses Tanner Helland's curve fit; kelvin is clamped to 1000-40000.
    """
    temp = clamp(kelvin, 1000.0, 40000.0) / 100.0

    if temp <= 66:
        red = 255.0
        green = 99.4708025861 * math.log(temp) - 161.1195681661
    else:
        red = clamp(329.698727446 * (temp - 60) ** -0.1332047592, 0.0, 255.0)
        green = 288.1221695283 * (temp - 60) ** -0.0755148492
    green = clamp(green, 0.0, 255.0)

    if temp >= 66:
        blue = 255.0
    elif temp <= 19:
        blue = 0.0
    else:
        blue = clamp(138.5177312231 * math.log(temp - 10) - 305.0447927307, 0.0, 255.0)

    return RGBA(red / 255.0, green / 255.0, blue / 255.0, 1.0)


WHITE_BALANCE_KELVIN: dict[str, float] = {
    "Candlelight": 1900,
    "Tungsten": 2700,
    "Warm Fluorescent": 3000,
    "Cool White Fluorescent": 4100,
    "Daylight": 5500,
    "Flash": 5500,
    "Cloudy": 6500,
    "Shade": 7500,
}

WHITE_BALANCE_PRESETS: dict[str, RGBA] = {
    name: kelvin_to_rgba(k) for name, k in WHITE_BALANCE_KELVIN.items()
}


def apply_white_balance(hex_color: str, preset: str, strength: float = 1.0) -> str:
    """
    Nudge a color toward a white-balance preset.

    At full strength the color moves 30% of the way (in Lab) to the preset.
    Unknown presets and unparsable colors return hex_color unchanged.
    """
    rgba = try_parse_hex(hex_color)
    preset_color = WHITE_BALANCE_PRESETS.get(preset)
    if preset_color is None:
        logger.debug("unknown white balance preset %r", preset)
    if rgba is None or preset_color is None:
        return hex_color

    blended = perceptual_blend(rgba, preset_color, clamp(strength) * 0.3)
    return format_hex(blended)

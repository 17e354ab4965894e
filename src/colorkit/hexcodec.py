"""Hex color string parsing and formatting.

Accepted forms (case-insensitive, '#' optional, surrounding whitespace ignored):
    RGB        short form, each digit doubled
    RRGGBB     opaque color
    RRGGBBAA   color with trailing alpha
"""

from __future__ import annotations

import logging
import math
import string

from .rgba import RGBA

logger = logging.getLogger(__name__)

_HEX_DIGITS = frozenset(string.hexdigits.lower())


class HexParsingError(ValueError):
    """Raised when a string is not a valid hex color."""


def _channel(pair: str) -> float:
    return int(pair, 16) / 255.0


def parse_hex(hex_color: str) -> RGBA:
    """
    Parse a hex color string into RGBA.

    Raises:
        HexParsingError: wrong length or non-hex digits
    """
    cleaned = hex_color.strip().replace("#", "").lower()

    if not cleaned or not set(cleaned) <= _HEX_DIGITS:
        raise HexParsingError(f"invalid hex color: {hex_color!r}")

    if len(cleaned) == 3:
        r, g, b = (_channel(ch * 2) for ch in cleaned)
        return RGBA(r, g, b)
    if len(cleaned) == 6:
        r, g, b = (_channel(cleaned[i : i + 2]) for i in (0, 2, 4))
        return RGBA(r, g, b)
    if len(cleaned) == 8:
        r, g, b, a = (_channel(cleaned[i : i + 2]) for i in (0, 2, 4, 6))
        return RGBA(r, g, b, a)

    raise HexParsingError(f"invalid hex color length: {hex_color!r}")


def try_parse_hex(hex_color: str) -> RGBA | None:
    """Parse a hex color, returning None instead of raising."""
    try:
        return parse_hex(hex_color)
    except HexParsingError:
        logger.debug("could not parse hex color %r", hex_color)
        return None


def _to_byte(value: float) -> int:
    # Half away from zero, matching the usual "0.5 -> 128" expectation
    return max(0, min(255, int(math.floor(value * 255.0 + 0.5))))


def format_hex(rgba: RGBA, include_alpha: bool = False, uppercase: bool = True) -> str:
    """Format RGBA as #RRGGBB, or #RRGGBBAA when include_alpha is set."""
    channels = [rgba.r, rgba.g, rgba.b]
    if include_alpha:
        channels.append(rgba.a)
    fmt = "02X" if uppercase else "02x"
    return "#" + "".join(format(_to_byte(v), fmt) for v in channels)

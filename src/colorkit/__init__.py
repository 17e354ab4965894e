"""colorkit library modules."""

from .color import CIELAB, CIELUV, CIEXYZ, lab_to_rgba, luv_to_rgba, rgba_to_lab, rgba_to_luv, rgba_to_xyz, xyz_to_rgba
from .gradient import (
    DataVisualizationType,
    GradientInterpolation,
    TemperaturePreset,
    generate_gradient,
    generate_gradient_hex,
    generate_multi_stop_gradient,
    generate_multi_stop_gradient_hex,
)
from .harmony import ColorHarmonyType, generate_harmony
from .hexcodec import HexParsingError, format_hex, parse_hex, try_parse_hex
from .perceptual import delta_e_2000, perceptual_blend, perceptual_gradient
from .rgba import RGBA
from .themes import Theme, ThemeManager

__all__ = [
    "RGBA",
    "HexParsingError",
    "parse_hex",
    "try_parse_hex",
    "format_hex",
    "CIEXYZ",
    "CIELAB",
    "CIELUV",
    "rgba_to_xyz",
    "xyz_to_rgba",
    "rgba_to_lab",
    "lab_to_rgba",
    "rgba_to_luv",
    "luv_to_rgba",
    "delta_e_2000",
    "perceptual_blend",
    "perceptual_gradient",
    "GradientInterpolation",
    "DataVisualizationType",
    "TemperaturePreset",
    "generate_gradient",
    "generate_gradient_hex",
    "generate_multi_stop_gradient",
    "generate_multi_stop_gradient_hex",
    "ColorHarmonyType",
    "generate_harmony",
    "Theme",
    "ThemeManager",
]

"""
Gradient generation.

Every generator returns an ordered list of hex strings. Interpolation is
selected with GradientInterpolation:

    LINEAR      componentwise RGBA lerp
    PERCEPTUAL  lerp in CIELAB, alpha lerped separately
    HSL         lerp in HSL along the shorter hue arc
    BEZIER      cubic Bezier through control points at 1/3 and 2/3 of the RGBA line
    EASE        LINEAR with a cubic ease-in-out parametrization

String entry points never raise on malformed hex input: they return the
input strings unchanged.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Sequence
from enum import Enum

from . import palettes
from .color import lab_to_rgba, rgba_to_lab
from .hexcodec import format_hex, try_parse_hex
from .hsl import HSL, hsl_to_rgba, rgba_to_hsl, shortest_hue_delta, wrap_hue
from .perceptual import lerp_lab
from .rgba import RGBA, clamp

logger = logging.getLogger(__name__)

# Control point positions along the straight RGBA line
BEZIER_CONTROL_1 = 0.33
BEZIER_CONTROL_2 = 0.67


class GradientInterpolation(Enum):
    LINEAR = "linear"
    PERCEPTUAL = "perceptual"
    HSL = "hsl"
    BEZIER = "bezier"
    EASE = "ease"

    @property
    def display_name(self) -> str:
        return _INTERPOLATION_INFO[self][0]

    @property
    def description(self) -> str:
        return _INTERPOLATION_INFO[self][1]


_INTERPOLATION_INFO: dict[GradientInterpolation, tuple[str, str]] = {
    GradientInterpolation.LINEAR: (
        "Linear RGB",
        "Linear interpolation in RGB color space. Simple and fast, but may produce "
        "muddy colors in the middle.",
    ),
    GradientInterpolation.PERCEPTUAL: (
        "Perceptual (LAB)",
        "Perceptually uniform interpolation using LAB color space. Produces more "
        "natural-looking gradients.",
    ),
    GradientInterpolation.HSL: (
        "HSL",
        "Interpolation in HSL color space, maintaining hue relationships for more "
        "vibrant transitions.",
    ),
    GradientInterpolation.BEZIER: (
        "Bézier",
        "Smooth Bézier curve interpolation for elegant, non-linear color transitions.",
    ),
    GradientInterpolation.EASE: (
        "Ease",
        "Eased interpolation with smooth acceleration and deceleration for natural motion.",
    ),
}


def ease_in_out_cubic(t: float) -> float:
    if t < 0.5:
        return 4 * t**3
    return 1 - (-2 * t + 2) ** 3 / 2


def _lerp_linear(start: RGBA, end: RGBA, t: float) -> RGBA:
    v0, v1 = start.as_array(), end.as_array()
    return RGBA.from_array(v0 + (v1 - v0) * t)


def _lerp_perceptual(start: RGBA, end: RGBA, t: float) -> RGBA:
    blended = lab_to_rgba(lerp_lab(rgba_to_lab(start), rgba_to_lab(end), t))
    # Lab carries no alpha
    return blended.with_alpha(start.a + (end.a - start.a) * t)


def _lerp_hsl(start: RGBA, end: RGBA, t: float) -> RGBA:
    h0 = rgba_to_hsl(start)
    h1 = rgba_to_hsl(end)
    hue = wrap_hue(h0.h + shortest_hue_delta(h0.h, h1.h) * t)
    hsl = HSL(hue, h0.s + (h1.s - h0.s) * t, h0.l + (h1.l - h0.l) * t)
    return hsl_to_rgba(hsl, alpha=start.a + (end.a - start.a) * t)


def _lerp_bezier(start: RGBA, end: RGBA, t: float) -> RGBA:
    p0, p3 = start.as_array(), end.as_array()
    p1 = p0 + (p3 - p0) * BEZIER_CONTROL_1
    p2 = p0 + (p3 - p0) * BEZIER_CONTROL_2
    u = 1 - t
    point = u**3 * p0 + 3 * u**2 * t * p1 + 3 * u * t**2 * p2 + t**3 * p3
    return RGBA.from_array(point)


def _lerp_eased(start: RGBA, end: RGBA, t: float) -> RGBA:
    return _lerp_linear(start, end, ease_in_out_cubic(t))


_INTERPOLATORS: dict[GradientInterpolation, Callable[[RGBA, RGBA, float], RGBA]] = {
    GradientInterpolation.LINEAR: _lerp_linear,
    GradientInterpolation.PERCEPTUAL: _lerp_perceptual,
    GradientInterpolation.HSL: _lerp_hsl,
    GradientInterpolation.BEZIER: _lerp_bezier,
    GradientInterpolation.EASE: _lerp_eased,
}


def interpolate(
    start: RGBA,
    end: RGBA,
    t: float,
    interpolation: GradientInterpolation = GradientInterpolation.LINEAR,
) -> RGBA:
    """Evaluate a single point of a gradient at t in 0-1."""
    return _INTERPOLATORS[interpolation](start, end, t)


def _sample(start: RGBA, end: RGBA, count: int, interpolation: GradientInterpolation) -> list[RGBA]:
    """Exactly count (>= 2) colors from start to end inclusive."""
    return [interpolate(start, end, i / (count - 1), interpolation) for i in range(count)]


def generate_gradient(
    start: RGBA,
    end: RGBA,
    steps: int = 10,
    interpolation: GradientInterpolation = GradientInterpolation.LINEAR,
    include_alpha: bool = False,
) -> list[str]:
    """
    Generate a gradient between two colors.

    Args:
        start: First color
        end: Last color
        steps: Number of colors; steps <= 1 yields [start, end]
        interpolation: Interpolation strategy
        include_alpha: Emit #RRGGBBAA instead of #RRGGBB

    Returns:
        List of hex colors, first == start and last == end
    """
    if steps <= 1:
        return [format_hex(start, include_alpha), format_hex(end, include_alpha)]

    return [format_hex(c, include_alpha) for c in _sample(start, end, steps, interpolation)]


def generate_gradient_hex(
    start_hex: str,
    end_hex: str,
    steps: int = 10,
    interpolation: GradientInterpolation = GradientInterpolation.LINEAR,
    include_alpha: bool = False,
) -> list[str]:
    """Hex-string variant of generate_gradient. Returns [start_hex, end_hex] on parse failure."""
    start = try_parse_hex(start_hex)
    end = try_parse_hex(end_hex)
    if start is None or end is None:
        return [start_hex, end_hex]
    return generate_gradient(start, end, steps, interpolation, include_alpha)


def generate_multi_stop_gradient(
    colors: Sequence[RGBA],
    steps: int = 10,
    interpolation: GradientInterpolation = GradientInterpolation.LINEAR,
    include_alpha: bool = False,
) -> list[str]:
    """
    Generate a gradient through several color stops.

    Steps are split evenly across the N-1 segments and the last segment
    absorbs the remainder. Each stop appears once: segments after the first
    drop their leading color, which is the previous segment's last.
    With fewer steps than stops the result is cut short of the last stops.
    """
    if not colors:
        return []
    if len(colors) == 1:
        return [format_hex(colors[0], include_alpha)] * max(1, steps)
    if steps <= 1:
        return [format_hex(colors[0], include_alpha), format_hex(colors[-1], include_alpha)]

    segments = len(colors) - 1
    per_segment = max(1, steps // segments)

    # A segment always spans both of its stops
    result = _sample(colors[0], colors[1], max(per_segment, 2), interpolation)
    for i in range(1, segments):
        remaining = steps - len(result)
        if remaining <= 0:
            break
        count = remaining if i == segments - 1 else min(per_segment, remaining)
        result.extend(_sample(colors[i], colors[i + 1], count + 1, interpolation)[1:])

    return [format_hex(c, include_alpha) for c in result[:steps]]


def generate_multi_stop_gradient_hex(
    hex_colors: Sequence[str],
    steps: int = 10,
    interpolation: GradientInterpolation = GradientInterpolation.LINEAR,
    include_alpha: bool = False,
) -> list[str]:
    """Hex-string variant. Returns the input strings unchanged if any stop fails to parse."""
    parsed = [try_parse_hex(h) for h in hex_colors]
    if any(c is None for c in parsed):
        return list(hex_colors)
    return generate_multi_stop_gradient(parsed, steps, interpolation, include_alpha)


class TemperaturePreset(Enum):
    COOL_TO_WARM = "coolToWarm"
    THERMAL = "thermal"
    ARCTIC = "arctic"
    SUNSET = "sunset"
    OCEAN = "ocean"
    FIRE = "fire"

    @property
    def display_name(self) -> str:
        return _TEMPERATURE_PRESETS[self][0]

    @property
    def colors(self) -> list[str]:
        return list(_TEMPERATURE_PRESETS[self][1])


_TEMPERATURE_PRESETS: dict[TemperaturePreset, tuple[str, tuple[str, ...]]] = {
    TemperaturePreset.COOL_TO_WARM: ("Cool to Warm", ("#0066CC", "#FFFFFF", "#FF3366")),
    TemperaturePreset.THERMAL: (
        "Thermal",
        ("#000080", "#0000FF", "#00FFFF", "#00FF00", "#FFFF00", "#FF0000", "#FFFFFF"),
    ),
    TemperaturePreset.ARCTIC: ("Arctic", ("#001122", "#003366", "#0066CC", "#66CCFF", "#FFFFFF")),
    TemperaturePreset.SUNSET: ("Sunset", ("#FF6B35", "#F7931E", "#FFD23F", "#FF6B6B", "#C44569")),
    TemperaturePreset.OCEAN: ("Ocean Depths", ("#000080", "#0033AA", "#0066CC", "#0099FF", "#66CCFF")),
    TemperaturePreset.FIRE: ("Fire", ("#8B0000", "#FF0000", "#FF4500", "#FFA500", "#FFFF00", "#FFFFFF")),
}


def generate_temperature_gradient(
    preset: TemperaturePreset,
    steps: int = 10,
    interpolation: GradientInterpolation = GradientInterpolation.PERCEPTUAL,
) -> list[str]:
    return generate_multi_stop_gradient_hex(preset.colors, steps, interpolation)


class DataVisualizationType(Enum):
    SEQUENTIAL = "sequential"
    DIVERGING = "diverging"
    HEATMAP = "heatmap"
    VIRIDIS = "viridis"
    PLASMA = "plasma"
    TEMPERATURE = "temperature"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @property
    def stops(self) -> list[str]:
        return list(_DATA_VIZ_STOPS[self])

    @property
    def description(self) -> str:
        return _DATA_VIZ_INFO[self][0]

    @property
    def use_cases(self) -> list[str]:
        return list(_DATA_VIZ_INFO[self][1])


_DATA_VIZ_STOPS: dict[DataVisualizationType, Sequence[str]] = {
    DataVisualizationType.SEQUENTIAL: palettes.BLUES,
    DataVisualizationType.DIVERGING: palettes.RED_BLUE,
    DataVisualizationType.HEATMAP: palettes.HEATMAP,
    DataVisualizationType.VIRIDIS: palettes.VIRIDIS,
    DataVisualizationType.PLASMA: palettes.PLASMA,
    DataVisualizationType.TEMPERATURE: _TEMPERATURE_PRESETS[TemperaturePreset.THERMAL][1],
}

_DATA_VIZ_INFO: dict[DataVisualizationType, tuple[str, tuple[str, ...]]] = {
    DataVisualizationType.SEQUENTIAL: (
        "Progression from low to high values using a single hue with varying lightness.",
        ("Population density maps", "Sales performance charts", "Progress indicators", "Elevation maps"),
    ),
    DataVisualizationType.DIVERGING: (
        "Deviations from a central value, two contrasting hues meeting at a neutral midpoint.",
        ("Temperature anomalies", "Survey responses", "Financial gains/losses", "Correlation matrices"),
    ),
    DataVisualizationType.HEATMAP: (
        "Classic blue-to-red spectrum for intensity or density data.",
        ("Website analytics", "Correlation matrices", "Density plots", "Activity tracking"),
    ),
    DataVisualizationType.VIRIDIS: (
        "Perceptually uniform, colorblind-friendly colormap for scientific data.",
        ("Scientific data", "Medical imaging", "Accessibility-focused charts", "Academic publications"),
    ),
    DataVisualizationType.PLASMA: (
        "High contrast, perceptually uniform colormap for highlighting patterns and outliers.",
        ("Astronomical data", "High-contrast visualizations", "Pattern detection", "Outlier identification"),
    ),
    DataVisualizationType.TEMPERATURE: (
        "Thermal imaging look, from cool blues through warm reds to hot whites.",
        ("Thermal imaging", "Weather maps", "Heat distribution", "Energy consumption"),
    ),
}


def generate_data_visualization_gradient(type_: DataVisualizationType, steps: int = 10) -> list[str]:
    """Perceptual multi-stop gradient through a fixed color scheme."""
    return generate_multi_stop_gradient_hex(type_.stops, steps, GradientInterpolation.PERCEPTUAL)


def animation_steps(duration_seconds: float, fps: float = 60.0) -> int:
    """Frame count for an animation, rounded half away from zero."""
    frames = duration_seconds * fps
    return int(math.copysign(math.floor(abs(frames) + 0.5), frames))


def generate_animation_gradient(
    start: RGBA,
    end: RGBA,
    duration_seconds: float,
    fps: float = 60.0,
) -> list[str]:
    """One eased color per frame."""
    return generate_gradient(start, end, animation_steps(duration_seconds, fps), GradientInterpolation.EASE)


def generate_animation_gradient_hex(
    start_hex: str,
    end_hex: str,
    duration_seconds: float,
    fps: float = 60.0,
) -> list[str]:
    return generate_gradient_hex(
        start_hex, end_hex, animation_steps(duration_seconds, fps), GradientInterpolation.EASE
    )


def color_at_progress(gradient: Sequence[str], progress: float) -> str | None:
    """Pick the gradient color for an animation progress in 0-1."""
    if not gradient:
        return None
    # NaN progress counts as the start
    p = 0.0 if math.isnan(progress) else clamp(progress)
    index = min(int(p * (len(gradient) - 1)), len(gradient) - 1)
    return gradient[index]

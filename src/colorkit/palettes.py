"""
Predefined data-visualization palettes and palette synthesis.

Sequential palettes suit continuous data, diverging palettes data with a
meaningful center, qualitative palettes categorical data.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from .contrast import adjust_brightness
from .hexcodec import format_hex, try_parse_hex
from .perceptual import perceptual_blend
from .rgba import RGBA

# Sequential
BLUES = ["#F7FBFF", "#DEEBF7", "#C6DBEF", "#9ECAE1", "#6BAED6", "#4292C6", "#2171B5", "#08519C", "#08306B"]
GREENS = ["#F7FCF5", "#E5F5E0", "#C7E9C0", "#A1D99B", "#74C476", "#41AB5D", "#238B45", "#006D2C", "#00441B"]
REDS = ["#FFF5F0", "#FEE0D2", "#FCBBA1", "#FC9272", "#FB6A4A", "#EF3B2C", "#CB181D", "#A50F15", "#67000D"]
PURPLES = ["#FCFBFD", "#EFEDF5", "#DADAEB", "#BCBDDC", "#9E9AC8", "#807DBA", "#6A51A3", "#54278F", "#3F007D"]
ORANGES = ["#FFF5EB", "#FEE6CE", "#FDD0A2", "#FDAE6B", "#FD8D3C", "#F16913", "#D94801", "#A63603", "#7F2704"]

# Diverging
RED_BLUE = [
    "#67001F", "#B2182B", "#D6604D", "#F4A582", "#FDDBC7",
    "#F7F7F7", "#D1E5F0", "#92C5DE", "#4393C3", "#2166AC", "#053061",
]
RED_YELLOW_BLUE = [
    "#A50026", "#D73027", "#F46D43", "#FDAE61", "#FEE090",
    "#FFFFBF", "#E0F3F8", "#ABD9E9", "#74ADD1", "#4575B4", "#313695",
]
PURPLE_GREEN = [
    "#40004B", "#762A83", "#9970AB", "#C2A5CF", "#E7D4E8",
    "#F7F7F7", "#D9F0D3", "#A6DBA0", "#5AAE61", "#1B7837", "#00441B",
]
BROWN_TEAL = [
    "#8C510A", "#BF812D", "#DFC27D", "#F6E8C3", "#F5F5F5",
    "#C7EAE5", "#80CDC1", "#35978F", "#01665E", "#003C30",
]

# Qualitative
SET1 = ["#E41A1C", "#377EB8", "#4DAF4A", "#984EA3", "#FF7F00", "#FFFF33", "#A65628", "#F781BF", "#999999"]
SET2 = ["#66C2A5", "#FC8D62", "#8DA0CB", "#E78AC3", "#A6D854", "#FFD92F", "#E5C494", "#B3B3B3"]
SET3 = [
    "#8DD3C7", "#FFFFB3", "#BEBADA", "#FB8072", "#80B1D3", "#FDB462",
    "#B3DE69", "#FCCDE5", "#D9D9D9", "#BC80BD", "#CCEBC5", "#FFED6F",
]
DARK2 = ["#1B9E77", "#D95F02", "#7570B3", "#E7298A", "#66A61E", "#E6AB02", "#A6761D", "#666666"]
TABLEAU10 = [
    "#4E79A7", "#F28E2C", "#E15759", "#76B7B2", "#59A14F",
    "#EDC949", "#AF7AA1", "#FF9DA7", "#9C755F", "#BAB0AB",
]

# Accessibility
COLORBLIND_SAFE = [
    "#1F77B4", "#FF7F0E", "#2CA02C", "#D62728", "#9467BD",
    "#8C564B", "#E377C2", "#7F7F7F", "#BCBD22", "#17BECF",
]
HIGH_CONTRAST = ["#000000", "#FFFFFF", "#FF0000", "#00FF00", "#0000FF", "#FFFF00", "#FF00FF", "#00FFFF"]

# Specialized
TRAFFIC_LIGHT = ["#FF4444", "#FFAA00", "#00AA00"]
HEATMAP = ["#000428", "#004CFF", "#009FFF", "#00FFFF", "#5AFF00", "#FFFF00", "#FF9500", "#FF0000"]
VIRIDIS = ["#440154", "#482777", "#3F4A8A", "#31678E", "#26838F", "#1F9D8A", "#6CCE5A", "#B6DE2B", "#FEE825"]
PLASMA = [
    "#0C0786", "#40039A", "#6A00A7", "#8F0DA4", "#B12A90",
    "#CC4678", "#E16462", "#F1834C", "#FCA636", "#FCCE25",
]

PALETTES: dict[str, list[str]] = {
    "blues": BLUES,
    "greens": GREENS,
    "reds": REDS,
    "purples": PURPLES,
    "oranges": ORANGES,
    "red_blue": RED_BLUE,
    "red_yellow_blue": RED_YELLOW_BLUE,
    "purple_green": PURPLE_GREEN,
    "brown_teal": BROWN_TEAL,
    "set1": SET1,
    "set2": SET2,
    "set3": SET3,
    "dark2": DARK2,
    "tableau10": TABLEAU10,
    "colorblind_safe": COLORBLIND_SAFE,
    "high_contrast": HIGH_CONTRAST,
    "traffic_light": TRAFFIC_LIGHT,
    "heatmap": HEATMAP,
    "viridis": VIRIDIS,
    "plasma": PLASMA,
}

SEQUENTIAL_ANCHOR = RGBA(0.98, 0.98, 0.98, 1.0)
DIVERGING_NEUTRAL = RGBA(0.97, 0.97, 0.97, 1.0)


def subset(palette: Sequence[str], count: int) -> list[str]:
    """
    Pick count evenly distributed colors from a palette.

    Returns the whole palette when count is not smaller than its length.
    """
    if count <= 0 or not palette:
        return []
    if count >= len(palette):
        return list(palette)
    if count == 1:
        return [palette[0]]

    step = (len(palette) - 1) / (count - 1)
    return [palette[int(math.floor(i * step + 0.5))] for i in range(count)]


def generate_sequential(base_hex: str, steps: int = 9) -> list[str]:
    """
    Sequential palette from a near-white anchor to the base color.

    Args:
        base_hex: Base (darkest) color in hex format
        steps: Number of colors

    Returns:
        Hex colors light -> base, or [base_hex] if it cannot be parsed
    """
    base = try_parse_hex(base_hex)
    if base is None:
        return [base_hex]
    if steps <= 0:
        return []
    if steps == 1:
        return [format_hex(base)]

    return [
        format_hex(perceptual_blend(SEQUENTIAL_ANCHOR, base, i / (steps - 1)))
        for i in range(steps)
    ]


def generate_diverging(start_hex: str, end_hex: str, steps: int = 11) -> list[str]:
    """
    Diverging palette with a light-gray neutral center.

    The neutral itself is only emitted when steps is odd.

    Returns:
        Hex colors start -> neutral -> end, or [start_hex, end_hex]
        if either color cannot be parsed
    """
    start = try_parse_hex(start_hex)
    end = try_parse_hex(end_hex)
    if start is None or end is None:
        return [start_hex, end_hex]

    half = steps // 2
    colors = [
        format_hex(perceptual_blend(start, DIVERGING_NEUTRAL, i / half))
        for i in range(half)
    ]
    if steps % 2 == 1:
        colors.append(format_hex(DIVERGING_NEUTRAL))
    colors.extend(
        format_hex(perceptual_blend(DIVERGING_NEUTRAL, end, (i + 1) / half))
        for i in range(half)
    )
    return colors


def generate_tints_and_shades(base_hex: str, steps: int = 5, range_: float = 0.25) -> list[str]:
    """
    Tints and shades around a base color by additive brightness.

    Returns:
        Hex colors ordered darkest shade -> base -> lightest tint,
        or [] if the base cannot be parsed
    """
    base = try_parse_hex(base_hex)
    if base is None:
        return []

    colors: list[RGBA] = []
    for i in range(steps, 0, -1):
        colors.append(adjust_brightness(base, -range_ * i / steps))
    colors.append(base)
    for i in range(1, steps + 1):
        colors.append(adjust_brightness(base, range_ * i / steps))

    return [format_hex(c) for c in colors]

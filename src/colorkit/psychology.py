"""
Heuristic color psychology.

Maps colors to emotional categories from their HSL properties. The
associations are design folklore, not research results: use them for
suggestions, not for claims.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from enum import Enum

import numpy as np

from .hexcodec import try_parse_hex
from .hsl import rgba_to_hsl
from .rgba import RGBA

PROFILE_THRESHOLD = 0.1


class EmotionalCategory(Enum):
    CALM = "calm"
    ENERGETIC = "energetic"
    WARM = "warm"
    COOL = "cool"
    PROFESSIONAL = "professional"
    CREATIVE = "creative"
    TRUSTWORTHY = "trustworthy"
    LUXURIOUS = "luxurious"
    PLAYFUL = "playful"
    NATURAL = "natural"
    ROMANTIC = "romantic"
    MYSTERIOUS = "mysterious"
    CONFIDENT = "confident"
    PEACEFUL = "peaceful"
    EXCITING = "exciting"
    SOPHISTICATED = "sophisticated"
    FRIENDLY = "friendly"
    POWERFUL = "powerful"
    FRESH = "fresh"
    ELEGANT = "elegant"


E = EmotionalCategory

EMOTION_COLORS: dict[EmotionalCategory, tuple[str, ...]] = {
    E.CALM: ("#E8F4FD", "#B3D9F2", "#7FB8D3", "#4F94CD", "#2E8B57", "#87CEEB", "#F0F8FF", "#E6E6FA"),
    E.ENERGETIC: ("#FF6B35", "#F7931E", "#FFD23F", "#EE4B2B", "#FF4500", "#FF1493", "#32CD32", "#ADFF2F"),
    E.WARM: ("#FF6347", "#FF7F50", "#FFA500", "#FFD700", "#F4A460", "#DEB887", "#CD853F", "#D2691E"),
    E.COOL: ("#4169E1", "#00CED1", "#20B2AA", "#48D1CC", "#87CEEB", "#B0E0E6", "#E0FFFF", "#F0F8FF"),
    E.PROFESSIONAL: ("#2C3E50", "#34495E", "#7F8C8D", "#95A5A6", "#BDC3C7", "#1ABC9C", "#3498DB", "#9B59B6"),
    E.CREATIVE: ("#E74C3C", "#F39C12", "#F1C40F", "#2ECC71", "#3498DB", "#9B59B6", "#E67E22", "#1ABC9C"),
    E.TRUSTWORTHY: ("#3498DB", "#2980B9", "#1ABC9C", "#16A085", "#27AE60", "#2ECC71", "#34495E", "#2C3E50"),
    E.LUXURIOUS: ("#8E44AD", "#9B59B6", "#2C3E50", "#34495E", "#F39C12", "#E67E22", "#C0392B", "#A93226"),
    E.PLAYFUL: ("#FF69B4", "#FF1493", "#00FF7F", "#FFD700", "#FF6347", "#32CD32", "#FF4500", "#DA70D6"),
    E.NATURAL: ("#228B22", "#32CD32", "#9ACD32", "#6B8E23", "#556B2F", "#8FBC8F", "#98FB98", "#F0FFF0"),
    E.ROMANTIC: ("#FFB6C1", "#FFC0CB", "#FF69B4", "#FF1493", "#DC143C", "#B22222", "#CD5C5C", "#F08080"),
    E.MYSTERIOUS: ("#2F1B69", "#4B0082", "#483D8B", "#2E2E2E", "#36454F", "#1C1C1C", "#191970", "#000080"),
    E.CONFIDENT: ("#DC143C", "#B22222", "#8B0000", "#FF4500", "#FF6347", "#2F4F4F", "#000000", "#800000"),
    E.PEACEFUL: ("#E6E6FA", "#F0F8FF", "#F5F5DC", "#FFF8DC", "#FFFACD", "#F0FFF0", "#F5FFFA", "#FFFFF0"),
    E.EXCITING: ("#FF0000", "#FF4500", "#FF6347", "#FF1493", "#FF69B4", "#ADFF2F", "#00FF00", "#FFD700"),
    E.SOPHISTICATED: ("#2C2C2C", "#36454F", "#708090", "#2F4F4F", "#696969", "#A9A9A9", "#C0C0C0", "#D3D3D3"),
    E.FRIENDLY: ("#FFA500", "#FFD700", "#FFFF00", "#ADFF2F", "#32CD32", "#00CED1", "#87CEEB", "#DDA0DD"),
    E.POWERFUL: ("#000000", "#8B0000", "#B22222", "#2F4F4F", "#36454F", "#191970", "#4B0082", "#800080"),
    E.FRESH: ("#00FF7F", "#32CD32", "#98FB98", "#90EE90", "#ADFF2F", "#7CFC00", "#00FA9A", "#00FF00"),
    E.ELEGANT: ("#2C2C2C", "#36454F", "#C0C0C0", "#D3D3D3", "#E6E6FA", "#F5F5DC", "#FFF8DC", "#FFFFF0"),
}

COMPLEMENTARY_EMOTIONS: dict[EmotionalCategory, tuple[EmotionalCategory, ...]] = {
    E.CALM: (E.PEACEFUL, E.TRUSTWORTHY, E.PROFESSIONAL),
    E.ENERGETIC: (E.EXCITING, E.CONFIDENT, E.PLAYFUL),
    E.WARM: (E.FRIENDLY, E.ROMANTIC, E.NATURAL),
    E.COOL: (E.CALM, E.TRUSTWORTHY, E.PROFESSIONAL),
    E.PROFESSIONAL: (E.TRUSTWORTHY, E.SOPHISTICATED, E.CONFIDENT),
    E.CREATIVE: (E.PLAYFUL, E.ENERGETIC, E.EXCITING),
    E.TRUSTWORTHY: (E.PROFESSIONAL, E.CALM, E.CONFIDENT),
    E.LUXURIOUS: (E.SOPHISTICATED, E.ELEGANT, E.MYSTERIOUS),
    E.PLAYFUL: (E.CREATIVE, E.FRIENDLY, E.ENERGETIC),
    E.NATURAL: (E.FRESH, E.CALM, E.PEACEFUL),
    E.ROMANTIC: (E.WARM, E.ELEGANT, E.LUXURIOUS),
    E.MYSTERIOUS: (E.SOPHISTICATED, E.POWERFUL, E.LUXURIOUS),
    E.CONFIDENT: (E.POWERFUL, E.PROFESSIONAL, E.TRUSTWORTHY),
    E.PEACEFUL: (E.CALM, E.NATURAL, E.FRESH),
    E.EXCITING: (E.ENERGETIC, E.PLAYFUL, E.CREATIVE),
    E.SOPHISTICATED: (E.ELEGANT, E.LUXURIOUS, E.PROFESSIONAL),
    E.FRIENDLY: (E.WARM, E.PLAYFUL, E.TRUSTWORTHY),
    E.POWERFUL: (E.CONFIDENT, E.MYSTERIOUS, E.SOPHISTICATED),
    E.FRESH: (E.NATURAL, E.ENERGETIC, E.PEACEFUL),
    E.ELEGANT: (E.SOPHISTICATED, E.LUXURIOUS, E.ROMANTIC),
}

# Saturated, light colors by 60-degree hue band
_VIVID_BY_HUE = (E.ENERGETIC, E.FRESH, E.NATURAL, E.COOL, E.MYSTERIOUS, E.ROMANTIC)


def colors_for(emotion: EmotionalCategory) -> list[str]:
    return list(EMOTION_COLORS[emotion])


def complementary_emotions(emotion: EmotionalCategory) -> list[EmotionalCategory]:
    return list(COMPLEMENTARY_EMOTIONS[emotion])


def primary_emotion(rgba: RGBA) -> EmotionalCategory:
    """Single best-matching emotion, decided by lightness/saturation bands then hue."""
    hsl = rgba_to_hsl(rgba)
    hue, sat, light = hsl.h, hsl.s, hsl.l

    if light > 0.8 and sat < 0.3:
        return E.PEACEFUL
    if sat > 0.8 and light > 0.5:
        return _VIVID_BY_HUE[min(int(hue // 60), 5)]
    if light < 0.3:
        return E.POWERFUL if sat > 0.5 else E.SOPHISTICATED
    if sat < 0.2:
        return E.PROFESSIONAL
    if hue < 60:
        return E.WARM
    if 180 <= hue < 240:
        return E.TRUSTWORTHY
    return E.FRIENDLY


def primary_emotion_hex(hex_color: str) -> EmotionalCategory | None:
    rgba = try_parse_hex(hex_color)
    if rgba is None:
        return None
    return primary_emotion(rgba)


def _ramp(hue: float, full: tuple[float, float], fade: float) -> float:
    """1 inside the full band, linear falloff over fade degrees on either side."""
    lo, hi = full
    if lo <= hue <= hi:
        return 1.0
    if lo - fade <= hue < lo:
        return (hue - (lo - fade)) / fade
    if hi < hue <= hi + fade:
        return 1.0 - (hue - hi) / fade
    return 0.0


def _warm_score(hue: float) -> float:
    if hue <= 60 or hue >= 300:
        return 1.0
    if hue <= 120:
        return 1.0 - (hue - 60) / 60.0
    if hue >= 240:
        return (hue - 240) / 60.0
    return 0.0


def _cool_score(hue: float) -> float:
    return _ramp(hue, (180, 240), 60)


def _green_score(hue: float) -> float:
    return _ramp(hue, (90, 150), 30)


def _blue_score(hue: float) -> float:
    return _ramp(hue, (200, 260), 20)


def _purple_score(hue: float) -> float:
    return _ramp(hue, (260, 320), 20)


def _pink_red_score(hue: float) -> float:
    if hue >= 320 or hue <= 20:
        return 1.0
    if 300 <= hue < 320:
        return (hue - 300) / 20.0
    if 20 < hue <= 40:
        return 1.0 - (hue - 20) / 20.0
    return 0.0


def _luxury_score(hue: float) -> float:
    gold = 1.0 if 40 <= hue <= 60 else 0.0
    return max(_purple_score(hue), gold)


def emotional_profile(rgba: RGBA) -> dict[EmotionalCategory, float]:
    """
    Confidence scores (0-1) for the emotions a color evokes.

    Only emotions scoring above 0.1 are included.
    """
    hsl = rgba_to_hsl(rgba)
    h, s, l = hsl.h, hsl.s, hsl.l  # noqa: E741

    scores = {
        E.CALM: l * 0.4 + (1 - s) * 0.3 + _cool_score(h) * 0.3,
        E.ENERGETIC: s * 0.5 + _warm_score(h) * 0.5,
        E.PROFESSIONAL: (1 - abs(l - 0.5)) * 0.4 + (1 - s) * 0.6,
        E.LUXURIOUS: (1 - l) * 0.4 + s * 0.3 + _luxury_score(h) * 0.3,
        E.NATURAL: _green_score(h) * 0.7 + s * 0.3,
        E.TRUSTWORTHY: _blue_score(h) * 0.8 + s * 0.2,
        E.ROMANTIC: _pink_red_score(h) * 0.6 + l * 0.4,
        E.MYSTERIOUS: (1 - l) * 0.6 + _purple_score(h) * 0.4,
        E.PEACEFUL: l * 0.5 + (1 - s) * 0.5,
        E.POWERFUL: (1 - l) * 0.7 + s * 0.3,
    }
    capped = {emotion: min(1.0, score) for emotion, score in scores.items()}
    return {emotion: score for emotion, score in capped.items() if score > PROFILE_THRESHOLD}


def emotional_profile_hex(hex_color: str) -> dict[EmotionalCategory, float]:
    rgba = try_parse_hex(hex_color)
    if rgba is None:
        return {}
    return emotional_profile(rgba)


def _rgb_distance(c1: RGBA, c2: RGBA) -> float:
    return math.sqrt((c1.r - c2.r) ** 2 + (c1.g - c2.g) ** 2 + (c1.b - c2.b) ** 2)


def generate_emotion_palette(
    emotions: Iterable[EmotionalCategory],
    count: int = 5,
    rng: np.random.Generator | None = None,
) -> list[str]:
    """
    Pick count visually diverse colors associated with the given emotions.

    The first color is chosen at random; every following pick maximizes
    its minimum RGB distance to the colors already chosen. Pass a seeded
    numpy Generator for reproducible output.

    Returns:
        Hex colors; fewer than count when the emotions offer fewer unique colors
    """
    candidates = list(dict.fromkeys(hex_ for e in emotions for hex_ in EMOTION_COLORS[e]))
    if count <= 0:
        return []
    if len(candidates) <= count:
        return candidates

    rng = rng if rng is not None else np.random.default_rng()
    parsed = {hex_: try_parse_hex(hex_) for hex_ in candidates}

    first = candidates[int(rng.integers(len(candidates)))]
    selected = [first]
    remaining = [c for c in candidates if c != first]

    while len(selected) < count and remaining:
        best = remaining[0]
        best_distance = 0.0
        for candidate in remaining:
            nearest = min(_rgb_distance(parsed[candidate], parsed[s]) for s in selected)
            if nearest > best_distance:
                best_distance = nearest
                best = candidate
        selected.append(best)
        remaining.remove(best)

    return selected

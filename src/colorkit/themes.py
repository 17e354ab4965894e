"""Named color themes and an explicit theme manager."""

from __future__ import annotations

from dataclasses import dataclass, field

from .hexcodec import try_parse_hex
from .rgba import RGBA


@dataclass(frozen=True)
class Theme:
    """A named map of color tokens (e.g. "primary") to hex strings."""

    name: str
    colors: dict[str, str] = field(default_factory=dict)

    def rgba(self, key: str) -> RGBA | None:
        """Resolve a token to RGBA. Missing tokens and bad hex give None."""
        hex_color = self.colors.get(key)
        if hex_color is None:
            return None
        return try_parse_hex(hex_color)


DEFAULT_THEME = Theme(
    name="Default",
    colors={
        "primary": "#0A84FF",
        "secondary": "#5E5CE6",
        "background": "#FFFFFF",
        "text": "#000000",
        "danger": "#FF3B30",
    },
)

DEFAULT_LIGHT = Theme(
    name="Light",
    colors={
        "primary": "#007AFF",
        "secondary": "#5856D6",
        "success": "#34C759",
        "warning": "#FF9500",
        "danger": "#FF3B30",
        "background": "#FFFFFF",
        "surface": "#F2F2F7",
        "text": "#000000",
        "textSecondary": "#8E8E93",
    },
)

DEFAULT_DARK = Theme(
    name="Dark",
    colors={
        "primary": "#0A84FF",
        "secondary": "#5E5CE6",
        "success": "#30D158",
        "warning": "#FF9F0A",
        "danger": "#FF453A",
        "background": "#000000",
        "surface": "#1C1C1E",
        "text": "#FFFFFF",
        "textSecondary": "#8E8E93",
    },
)


def material_blue() -> Theme:
    return Theme(
        name="Material Blue",
        colors={
            "primary": "#2196F3",
            "primaryLight": "#BBDEFB",
            "primaryDark": "#1976D2",
            "accent": "#FF4081",
            "background": "#FAFAFA",
            "surface": "#FFFFFF",
            "text": "#212121",
            "textSecondary": "#757575",
        },
    )


BUILTIN_THEMES: dict[str, Theme] = {
    t.name.lower(): t for t in (DEFAULT_THEME, DEFAULT_LIGHT, DEFAULT_DARK, material_blue())
}


class ThemeManager:
    """
    Holds the active theme.

    Create one per application context and pass it where needed; there is
    no process-wide instance.
    """

    def __init__(self, initial: Theme = DEFAULT_THEME, dark_mode_fallback: Theme | None = None):
        self._current = initial
        self.dark_mode_fallback = dark_mode_fallback

    @property
    def current(self) -> Theme:
        return self._current

    def apply(self, theme: Theme) -> None:
        self._current = theme

    def resolve(self, dark_mode: bool = False) -> Theme:
        """Theme to render with: the dark fallback in dark mode when one is set."""
        if dark_mode and self.dark_mode_fallback is not None:
            return self.dark_mode_fallback
        return self._current

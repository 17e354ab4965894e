"""Core RGBA value type in the sRGB color space."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


def clamp(value: float, lo: float = 0.0, hi: float = 1.0) -> float:
    """Clamp a value into [lo, hi]."""
    return max(lo, min(hi, value))


@dataclass(frozen=True)
class RGBA:
    """
    Normalized sRGB color with alpha.

    Channels are nominally in 0-1 but are not clamped on construction;
    use clamped() or the module-level clamp() where a valid range is required.
    """

    r: float
    g: float
    b: float
    a: float = 1.0

    def clamped(self) -> RGBA:
        """Return a copy with every channel clamped to 0-1."""
        return RGBA(clamp(self.r), clamp(self.g), clamp(self.b), clamp(self.a))

    def with_alpha(self, a: float) -> RGBA:
        return RGBA(self.r, self.g, self.b, a)

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.r, self.g, self.b, self.a)

    def as_array(self) -> np.ndarray:
        """Channels as a float64 vector (r, g, b, a)."""
        return np.array(self.as_tuple(), dtype=np.float64)

    @classmethod
    def from_array(cls, values: np.ndarray) -> RGBA:
        r, g, b, a = (float(v) for v in values)
        return cls(r, g, b, a)


WHITE = RGBA(1.0, 1.0, 1.0)
BLACK = RGBA(0.0, 0.0, 0.0)

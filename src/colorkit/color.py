"""Color space conversions anchored to the D65 illuminant.

sRGB <-> CIE XYZ <-> CIE L*a*b* / CIE L*u*v*.

XYZ values are scaled so that the reference white has Y = 100.
Every function here is total: degenerate inputs (black in L*u*v*, zero
chromaticity denominators) produce defined values instead of raising.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .hexcodec import format_hex, parse_hex
from .rgba import RGBA, clamp

# D65 reference white
XN, YN, ZN = 95.047, 100.0, 108.883

# CIE constants in exact rational form
_DELTA = 6.0 / 29.0
_EPSILON = _DELTA**3  # ~0.008856
_KAPPA = (29.0 / 3.0) ** 3  # ~903.3

M_SRGB_TO_XYZ = np.array(
    [
        [0.4124564, 0.3575761, 0.1804375],
        [0.2126729, 0.7151522, 0.0721750],
        [0.0193339, 0.1191920, 0.9503041],
    ],
    dtype=np.float64,
)

M_XYZ_TO_SRGB = np.array(
    [
        [3.2404542, -1.5371385, -0.4985314],
        [-0.9692660, 1.8760108, 0.0415560],
        [0.0556434, -0.2040259, 1.0572252],
    ],
    dtype=np.float64,
)


@dataclass(frozen=True)
class CIEXYZ:
    x: float
    y: float
    z: float


@dataclass(frozen=True)
class CIELAB:
    l: float  # noqa: E741
    a: float
    b: float


@dataclass(frozen=True)
class CIELUV:
    l: float  # noqa: E741
    u: float
    v: float


def srgb_to_linear(c: float) -> float:
    """sRGB gamma decode for a single channel."""
    return c / 12.92 if c <= 0.04045 else ((c + 0.055) / 1.055) ** 2.4


def linear_to_srgb(c: float) -> float:
    """sRGB gamma encode for a single channel."""
    return c * 12.92 if c <= 0.0031308 else 1.055 * c ** (1 / 2.4) - 0.055


def rgba_to_xyz(rgba: RGBA) -> CIEXYZ:
    """Convert sRGB to XYZ colorspace."""
    linear = np.array([srgb_to_linear(c) for c in (rgba.r, rgba.g, rgba.b)])
    x, y, z = M_SRGB_TO_XYZ @ linear * 100.0
    return CIEXYZ(float(x), float(y), float(z))


def xyz_to_rgba(xyz: CIEXYZ) -> RGBA:
    """
    Convert XYZ to sRGB.

    Channels are clamped before the gamma curve (negative bases would
    produce NaN) and again after it. XYZ carries no alpha, so alpha is 1.0.
    """
    linear = M_XYZ_TO_SRGB @ (np.array([xyz.x, xyz.y, xyz.z]) / 100.0)
    r, g, b = (clamp(linear_to_srgb(clamp(float(c)))) for c in linear)
    return RGBA(r, g, b, 1.0)


def _lab_f(t: float) -> float:
    if t > _EPSILON:
        return t ** (1 / 3)
    return t / (3 * _DELTA**2) + 4 / 29


def _lab_f_inv(t: float) -> float:
    if t > _DELTA:
        return t**3
    return 3 * _DELTA**2 * (t - 4 / 29)


def xyz_to_lab(xyz: CIEXYZ) -> CIELAB:
    """Convert XYZ to CIELAB colorspace."""
    fx = _lab_f(xyz.x / XN)
    fy = _lab_f(xyz.y / YN)
    fz = _lab_f(xyz.z / ZN)

    L = 116 * fy - 16
    a = 500 * (fx - fy)
    b = 200 * (fy - fz)

    return CIELAB(L, a, b)


def lab_to_xyz(lab: CIELAB) -> CIEXYZ:
    """Convert CIELAB to XYZ colorspace."""
    fy = (lab.l + 16) / 116
    fx = lab.a / 500 + fy
    fz = fy - lab.b / 200

    return CIEXYZ(XN * _lab_f_inv(fx), YN * _lab_f_inv(fy), ZN * _lab_f_inv(fz))


def _uv_prime(x: float, y: float, z: float) -> tuple[float, float] | None:
    denom = x + 15 * y + 3 * z
    if denom == 0:
        return None
    return 4 * x / denom, 9 * y / denom


_UN_PRIME, _VN_PRIME = _uv_prime(XN, YN, ZN)


def xyz_to_luv(xyz: CIEXYZ) -> CIELUV:
    """Convert XYZ to CIELUV colorspace."""
    yr = xyz.y / YN
    L = 116 * yr ** (1 / 3) - 16 if yr > _EPSILON else _KAPPA * yr

    uv = _uv_prime(xyz.x, xyz.y, xyz.z)
    if uv is None:
        return CIELUV(L, 0.0, 0.0)

    u_prime, v_prime = uv
    return CIELUV(L, 13 * L * (u_prime - _UN_PRIME), 13 * L * (v_prime - _VN_PRIME))


def luv_to_xyz(luv: CIELUV) -> CIEXYZ:
    """Convert CIELUV to XYZ colorspace."""
    L = luv.l
    if L == 0:
        return CIEXYZ(0.0, 0.0, 0.0)

    y = YN * ((L + 16) / 116) ** 3 if L > _KAPPA * _EPSILON else YN * L / _KAPPA

    u_prime = luv.u / (13 * L) + _UN_PRIME
    v_prime = luv.v / (13 * L) + _VN_PRIME
    if v_prime == 0:
        return CIEXYZ(0.0, y, 0.0)

    x = y * 9 * u_prime / (4 * v_prime)
    z = y * (12 - 3 * u_prime - 20 * v_prime) / (4 * v_prime)
    return CIEXYZ(x, y, z)


def rgba_to_lab(rgba: RGBA) -> CIELAB:
    return xyz_to_lab(rgba_to_xyz(rgba))


def lab_to_rgba(lab: CIELAB) -> RGBA:
    return xyz_to_rgba(lab_to_xyz(lab))


def rgba_to_luv(rgba: RGBA) -> CIELUV:
    return xyz_to_luv(rgba_to_xyz(rgba))


def luv_to_rgba(luv: CIELUV) -> RGBA:
    return xyz_to_rgba(luv_to_xyz(luv))


def hex_to_lab(hex_color: str) -> CIELAB:
    """Convert hex color to Lab colorspace."""
    return rgba_to_lab(parse_hex(hex_color))


def lab_to_hex(lab: CIELAB) -> str:
    """Convert CIELAB to hex color string."""
    return format_hex(lab_to_rgba(lab))

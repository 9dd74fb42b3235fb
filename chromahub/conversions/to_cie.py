"""Direct conversions whose target is CIE XYZ or CIE Lab."""
from typing import Tuple

import numpy as np

from .constants import (
    CBRT_EPSILON, EPSILON, KAPPA, KAPPA_EPSILON, LAB_L_MAX,
    RGB_TO_XYZ, SRGB_A, SRGB_D, SRGB_DECODE_BYTE_THRESHOLD, SRGB_GAMMA,
    SRGB_LINEAR_SLOPE, WHITE_X, WHITE_Y, WHITE_Z,
)
from ..types.format_type import BYTE_MAX

XYZTuple = Tuple[float, float, float]
LabTuple = Tuple[float, float, float]


def srgb_to_linear(c: int) -> float:
    """Decode one sRGB byte to linear light (0..1)."""
    if c > SRGB_DECODE_BYTE_THRESHOLD:
        return ((c + SRGB_A * BYTE_MAX) / (SRGB_D * BYTE_MAX)) ** SRGB_GAMMA
    return c / (SRGB_LINEAR_SLOPE * BYTE_MAX)


def rgb_to_xyz(r: int, g: int, b: int) -> XYZTuple:
    """
    Digital RGB -> CIE XYZ (D65).

    Uses the sRGB conversion matrix from
    http://www.brucelindbloom.com/index.html?Calc.html
    """
    linear = np.array((srgb_to_linear(r), srgb_to_linear(g), srgb_to_linear(b)))
    with np.errstate(invalid="ignore", over="ignore"):
        x, y, z = (float(c) for c in RGB_TO_XYZ @ linear)
    return (x, y, z)


def _lab_f(t: float) -> float:
    if t > EPSILON:
        return t ** (1.0 / 3.0)
    return (KAPPA * t + 16.0) / 116.0


def xyz_to_lab(x: float, y: float, z: float) -> LabTuple:
    """
    CIE XYZ -> CIE Lab against the D65 white point.

    Out-of-gamut and negative inputs are accepted; negative tristimulus values
    fall on the linear branch of the companding function.
    """
    fx = _lab_f(x / WHITE_X)
    fy = _lab_f(y / WHITE_Y)
    fz = _lab_f(z / WHITE_Z)
    return (116.0 * fy - 16.0, 500.0 * (fx - fy), 200.0 * (fy - fz))


def lab_to_xyz(l: float, a: float, b: float) -> XYZTuple:
    """
    CIE Lab -> CIE XYZ.

    X and Z switch branch on the cube root of epsilon applied to the f-values,
    Y switches on epsilon * kappa applied to L itself. The two tests are not
    interchangeable near the threshold.
    """
    fy = (l + 16.0) / 116.0
    fx = a / 500.0 + fy
    fz = fy - b / 200.0

    xr = fx * fx * fx if fx > CBRT_EPSILON else (116.0 * fx - 16.0) / KAPPA
    yr = fy * fy * fy if l > KAPPA_EPSILON else l / KAPPA
    zr = fz * fz * fz if fz > CBRT_EPSILON else (116.0 * fz - 16.0) / KAPPA

    return (xr * WHITE_X, yr * WHITE_Y, zr * WHITE_Z)


def gray_to_lab(v: int) -> LabTuple:
    return (v / BYTE_MAX * LAB_L_MAX, 0.0, 0.0)


def unit_gray_to_lab(v: float) -> LabTuple:
    return (v * LAB_L_MAX, 0.0, 0.0)

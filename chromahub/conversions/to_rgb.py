"""Direct conversions whose target is RGB (digital or normalized)."""
from typing import Tuple

import numpy as np

from .constants import (
    CB_TO_B, CB_TO_G, CR_TO_G, CR_TO_R,
    SRGB_A, SRGB_D, SRGB_ENCODE_THRESHOLD, SRGB_GAMMA, SRGB_LINEAR_SLOPE,
    XYZ_TO_RGB,
)
from .numbers import round_to_byte, truncate_to_byte
from ..types.format_type import BYTE_MAX

RGBTuple = Tuple[int, int, int]
UnitRGBTuple = Tuple[float, float, float]


def unit_rgb_to_rgb(r: float, g: float, b: float) -> RGBTuple:
    """Normalized RGB -> digital RGB, truncating each channel."""
    return (
        truncate_to_byte(r * BYTE_MAX),
        truncate_to_byte(g * BYTE_MAX),
        truncate_to_byte(b * BYTE_MAX),
    )


def rgb_to_unit_rgb(r: int, g: int, b: int) -> UnitRGBTuple:
    """Digital RGB -> normalized RGB."""
    return (r / BYTE_MAX, g / BYTE_MAX, b / BYTE_MAX)


# Alpha is dropped on the way down to RGB.

def rgba_to_rgb(r: int, g: int, b: int, a: int) -> RGBTuple:
    return (r, g, b)


def rgba_to_unit_rgb(r: int, g: int, b: int, a: int) -> UnitRGBTuple:
    return rgb_to_unit_rgb(r, g, b)


def unit_rgba_to_rgb(r: float, g: float, b: float, a: float) -> RGBTuple:
    return unit_rgb_to_rgb(r, g, b)


def unit_rgba_to_unit_rgb(r: float, g: float, b: float, a: float) -> UnitRGBTuple:
    return (r, g, b)


def unit_ycbcr_to_unit_rgb(y: float, cb: float, cr: float) -> UnitRGBTuple:
    """
    Normalized YCbCr -> normalized RGB using the JFIF inverse transform.

    Each channel is capped at 1.0. There is no lower bound here: negative
    values survive and are saturated to 0 only if the result is later cast
    to a digital type.

    See https://www.w3.org/Graphics/JPEG/jfif3.pdf
    """
    return (
        min(y + CR_TO_R * cr, 1.0),
        min(y - CB_TO_G * cb - CR_TO_G * cr, 1.0),
        min(y + CB_TO_B * cb, 1.0),
    )


def gray_to_rgb(v: int) -> RGBTuple:
    return (v, v, v)


def unit_gray_to_unit_rgb(v: float) -> UnitRGBTuple:
    return (v, v, v)


def linear_to_srgb(c: float) -> float:
    """Convert linear-light RGB (0..1) to nonlinear sRGB."""
    if c > SRGB_ENCODE_THRESHOLD:
        return SRGB_D * (c ** (1 / SRGB_GAMMA)) - SRGB_A
    return SRGB_LINEAR_SLOPE * c


def xyz_to_rgb(x: float, y: float, z: float) -> RGBTuple:
    """
    CIE XYZ (D65) -> digital RGB.

    Applies the inverse sRGB matrix, sRGB-encodes each linear channel, scales
    to 0..255 and rounds to nearest. This is the only path into digital RGB
    that rounds instead of truncating.
    """
    # infinite inputs give inf - inf = nan, which the byte cast maps to 0
    with np.errstate(invalid="ignore", over="ignore"):
        linear = XYZ_TO_RGB @ np.array((x, y, z), dtype=float)
    r, g, b = (round_to_byte(linear_to_srgb(float(c)) * BYTE_MAX) for c in linear)
    return (r, g, b)

"""Direct conversions whose target is grayscale."""
from typing import Tuple

from .constants import LAB_L_MAX, LUMA_B, LUMA_G, LUMA_R
from .numbers import floor_to_byte, truncate_to_byte
from ..types.format_type import BYTE_MAX

GrayTuple = Tuple[int]
UnitGrayTuple = Tuple[float]


def luma(r: float, g: float, b: float) -> float:
    """BT.601 / JFIF weighted brightness, in the normalization of its inputs."""
    return LUMA_R * r + LUMA_G * g + LUMA_B * b


def rgb_to_gray(r: int, g: int, b: int) -> GrayTuple:
    return (truncate_to_byte(luma(r, g, b)),)


def rgb_to_unit_gray(r: int, g: int, b: int) -> UnitGrayTuple:
    return (luma(r / BYTE_MAX, g / BYTE_MAX, b / BYTE_MAX),)


def unit_rgb_to_gray(r: float, g: float, b: float) -> GrayTuple:
    return (truncate_to_byte(luma(r, g, b) * BYTE_MAX),)


def unit_rgb_to_unit_gray(r: float, g: float, b: float) -> UnitGrayTuple:
    return (luma(r, g, b),)


# YCbCr already carries luma in its Y channel.

def ycbcr_to_gray(y: int, cb: int, cr: int) -> GrayTuple:
    return (y,)


def ycbcr_to_unit_gray(y: int, cb: int, cr: int) -> UnitGrayTuple:
    return (y / BYTE_MAX,)


def unit_ycbcr_to_gray(y: float, cb: float, cr: float) -> GrayTuple:
    return (truncate_to_byte(y * BYTE_MAX),)


def unit_ycbcr_to_unit_gray(y: float, cb: float, cr: float) -> UnitGrayTuple:
    return (y,)


def gray_to_unit_gray(v: int) -> UnitGrayTuple:
    return (v / BYTE_MAX,)


def unit_gray_to_gray(v: float) -> GrayTuple:
    return (truncate_to_byte(v * BYTE_MAX),)


def lab_to_gray(l: float, a: float, b: float) -> GrayTuple:
    """CIE Lab -> digital grayscale from L alone. Floors, unlike the other byte casts."""
    return (floor_to_byte(l / LAB_L_MAX * BYTE_MAX),)


def lab_to_unit_gray(l: float, a: float, b: float) -> UnitGrayTuple:
    return (l / LAB_L_MAX,)

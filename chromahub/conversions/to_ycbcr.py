"""Direct conversions whose target is YCbCr (JFIF, full range)."""
from typing import Tuple

from .constants import (
    CB_B, CB_G, CB_R, CHROMA_OFFSET_FLOAT, CHROMA_OFFSET_INT,
    CR_B, CR_G, CR_R, LUMA_B, LUMA_G, LUMA_R,
)
from .numbers import truncate_to_byte
from ..types.format_type import BYTE_MAX

YCbCrTuple = Tuple[int, int, int]
UnitYCbCrTuple = Tuple[float, float, float]


def rgb_to_ycbcr(r: int, g: int, b: int) -> YCbCrTuple:
    """
    Digital RGB -> digital YCbCr.

    Works on byte values directly with the chroma offset of 128 and truncates
    each channel. See https://www.w3.org/Graphics/JPEG/jfif3.pdf
    """
    y = LUMA_R * r + LUMA_G * g + LUMA_B * b
    cb = CB_R * r + CB_G * g + CB_B * b + CHROMA_OFFSET_INT
    cr = CR_R * r + CR_G * g + CR_B * b + CHROMA_OFFSET_INT
    return (truncate_to_byte(y), truncate_to_byte(cb), truncate_to_byte(cr))


def ycbcr_to_unit_ycbcr(y: int, cb: int, cr: int) -> UnitYCbCrTuple:
    """Digital YCbCr -> normalized YCbCr (chroma centred on 0)."""
    return (
        y / BYTE_MAX,
        cb / BYTE_MAX - CHROMA_OFFSET_FLOAT,
        cr / BYTE_MAX - CHROMA_OFFSET_FLOAT,
    )


def unit_ycbcr_to_ycbcr(y: float, cb: float, cr: float) -> YCbCrTuple:
    return (
        truncate_to_byte(y * BYTE_MAX),
        truncate_to_byte((cb + CHROMA_OFFSET_FLOAT) * BYTE_MAX),
        truncate_to_byte((cr + CHROMA_OFFSET_FLOAT) * BYTE_MAX),
    )

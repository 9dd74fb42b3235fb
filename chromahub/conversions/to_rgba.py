"""Direct conversions whose target is RGBA. Alpha defaults to fully opaque."""
from typing import Tuple

from .numbers import truncate_to_byte
from ..types.format_type import BYTE_MAX, FormatType, channel_max

RGBATuple = Tuple[int, int, int, int]
UnitRGBATuple = Tuple[float, float, float, float]

OPAQUE_INT = channel_max[FormatType.INT]
OPAQUE_FLOAT = channel_max[FormatType.FLOAT]


def rgb_to_rgba(r: int, g: int, b: int) -> RGBATuple:
    return (r, g, b, OPAQUE_INT)


def unit_rgb_to_rgba(r: float, g: float, b: float) -> RGBATuple:
    return (
        truncate_to_byte(r * BYTE_MAX),
        truncate_to_byte(g * BYTE_MAX),
        truncate_to_byte(b * BYTE_MAX),
        OPAQUE_INT,
    )


def rgb_to_unit_rgba(r: int, g: int, b: int) -> UnitRGBATuple:
    return (r / BYTE_MAX, g / BYTE_MAX, b / BYTE_MAX, OPAQUE_FLOAT)


def unit_rgb_to_unit_rgba(r: float, g: float, b: float) -> UnitRGBATuple:
    return (r, g, b, OPAQUE_FLOAT)


def rgba_to_unit_rgba(r: int, g: int, b: int, a: int) -> UnitRGBATuple:
    """Digital RGBA -> normalized RGBA, alpha scaled like the color channels."""
    return (r / BYTE_MAX, g / BYTE_MAX, b / BYTE_MAX, a / BYTE_MAX)


def unit_rgba_to_rgba(r: float, g: float, b: float, a: float) -> RGBATuple:
    """Normalized RGBA -> digital RGBA, truncating all four channels."""
    return (
        truncate_to_byte(r * BYTE_MAX),
        truncate_to_byte(g * BYTE_MAX),
        truncate_to_byte(b * BYTE_MAX),
        truncate_to_byte(a * BYTE_MAX),
    )

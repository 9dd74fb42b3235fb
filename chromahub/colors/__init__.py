"""
Chromahub Color Classes
=======================

Immutable single-color types for RGB, RGBA, YCbCr and grayscale in digital
(0-255) and normalized (float) form, plus CIE Lab and CIE XYZ.

Features
--------
- Immutable color instances (frozen after initialization)
- Digital channels are cast to int and saturated to 0..255
- Normalized and CIE channels are never clamped
- Constructing a type from any other color converts it
- Bulk and lazy conversion of sequences through capability mixins
- Byte, packed integer and numpy array codec for device types

Usage
-----
>>> from chromahub.colors.rgb import ColorRGBINT, ColorUnitRGB
>>> from chromahub.colors.cie import ColorLab
>>>
>>> red = ColorRGBINT((255, 0, 0))
>>> lab = ColorLab(red)
>>> lab.l
53.24...
>>> ColorRGBINT(lab)
ColorRGBINT(r=255, g=0, b=0)
>>>
>>> # Conversion through the generic entry point
>>> red.convert("ycbcr")
ColorYCbCrINT(y=76, cb=84, cr=255)
>>>
>>> # Alpha
>>> red.with_alpha(128)
ColorRGBAINT(r=255, g=0, b=0, a=128)
>>>
>>> # Bytes
>>> ColorRGBINT.from_int(0xFF800000)
ColorRGBINT(r=255, g=128, b=0)

Color Classes
-------------
RGB variants:
    - ColorRGBINT / DigitalRGB
    - ColorRGBAINT / DigitalRGBA
    - ColorUnitRGB / NormalizedRGB
    - ColorUnitRGBA / NormalizedRGBA

YCbCr variants:
    - ColorYCbCrINT / DigitalYCbCr
    - ColorUnitYCbCr / NormalizedYCbCr

Grayscale variants:
    - ColorGrayINT / DigitalGrayscale
    - ColorUnitGray / NormalizedGrayscale

CIE:
    - ColorLab / CIELab
    - ColorXYZ / CIEXYZ
"""

from .color import color_convert, convert_color, get_color_class
from .color_base import ColorBase
from .color import unified_tuple_to_class
from .capabilities import LazyConversion
from .codec import (
    from_bytes,
    try_from_bytes,
    from_int,
    to_bytes,
    to_int,
    unpack_buffer,
    pack_buffer,
    colors_to_array,
    array_to_colors,
)


__all__ = [
    'color_convert',
    'convert_color',
    'get_color_class',
    'ColorBase',
    'unified_tuple_to_class',
    'LazyConversion',
    'from_bytes',
    'try_from_bytes',
    'from_int',
    'to_bytes',
    'to_int',
    'unpack_buffer',
    'pack_buffer',
    'colors_to_array',
    'array_to_colors',
]

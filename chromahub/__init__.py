"""Chromahub: exact per-sample colorspace conversion through RGB and XYZ hubs."""
import logging

from .colors.rgb import (
    ColorRGBINT,
    ColorRGBAINT,
    ColorUnitRGB,
    ColorUnitRGBA,
    DigitalRGB,
    DigitalRGBA,
    NormalizedRGB,
    NormalizedRGBA,
)
from .colors.ycbcr import (
    ColorYCbCrINT,
    ColorUnitYCbCr,
    DigitalYCbCr,
    NormalizedYCbCr,
)
from .colors.gray import (
    ColorGrayINT,
    ColorUnitGray,
    DigitalGrayscale,
    NormalizedGrayscale,
)
from .colors.cie import ColorLab, ColorXYZ, CIELab, CIEXYZ
from .colors.color_base import ColorBase
from .colors.color import color_convert, convert_color, get_color_class
from .colors.capabilities import (
    LazyConversion,
    RGBConvertible,
    RGBAConvertible,
    YCbCrConvertible,
    GrayscaleConvertible,
    CIELabConvertible,
    CIEXYZConvertible,
)
from .colors.codec import (
    unpack_buffer,
    pack_buffer,
    colors_to_array,
    array_to_colors,
)
from .conversions import convert, conversion_path, FormatType
from .errors import ColorConversionError, BufferTooSmall

# Friendly aliases for the digital hub type
ColorRGB = ColorRGBINT
ColorRGBA = ColorRGBAINT

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # core color types
    "ColorBase",
    "ColorRGBINT",
    "ColorRGBAINT",
    "ColorUnitRGB",
    "ColorUnitRGBA",
    "ColorYCbCrINT",
    "ColorUnitYCbCr",
    "ColorGrayINT",
    "ColorUnitGray",
    "ColorLab",
    "ColorXYZ",
    "ColorRGB",
    "ColorRGBA",
    # descriptive aliases
    "DigitalRGB",
    "DigitalRGBA",
    "NormalizedRGB",
    "NormalizedRGBA",
    "DigitalYCbCr",
    "NormalizedYCbCr",
    "DigitalGrayscale",
    "NormalizedGrayscale",
    "CIELab",
    "CIEXYZ",
    # capabilities
    "LazyConversion",
    "RGBConvertible",
    "RGBAConvertible",
    "YCbCrConvertible",
    "GrayscaleConvertible",
    "CIELabConvertible",
    "CIEXYZConvertible",
    # conversion entry points
    "color_convert",
    "convert_color",
    "get_color_class",
    "convert",
    "conversion_path",
    "FormatType",
    # codec
    "unpack_buffer",
    "pack_buffer",
    "colors_to_array",
    "array_to_colors",
    # errors
    "ColorConversionError",
    "BufferTooSmall",
]

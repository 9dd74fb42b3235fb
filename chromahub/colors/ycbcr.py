from typing import ClassVar, Tuple
from ..types.format_type import FormatType
from ..types.color_types import ColorSpace
from .color_base import ColorBase, build_registry
from .capabilities import (
    CIELabConvertible, CIEXYZConvertible, GrayscaleConvertible,
    RGBAConvertible, RGBConvertible, YCbCrConvertible,
)


class ColorYCbCrINT(
    ColorBase,
    RGBConvertible, RGBAConvertible, YCbCrConvertible,
    GrayscaleConvertible, CIELabConvertible, CIEXYZConvertible,
):
    """Digital JFIF YCbCr, chroma offset by 128."""
    channels: ClassVar[Tuple[str, ...]] = ("y", "cb", "cr")
    mode: ClassVar[ColorSpace] = "ycbcr"
    maxima: ClassVar[Tuple[int, int, int]] = (255, 255, 255)
    null_value: ClassVar[Tuple[int, int, int]] = (0, 128, 128)
    format_type: ClassVar[FormatType] = FormatType.INT


class ColorUnitYCbCr(
    ColorBase,
    RGBConvertible, RGBAConvertible, YCbCrConvertible,
    GrayscaleConvertible, CIELabConvertible, CIEXYZConvertible,
):
    """
    Normalized JFIF YCbCr.

    Y is nominally 0.0 to 1.0, Cb and Cr are centred on zero (-0.5 to 0.5).
    """
    channels: ClassVar[Tuple[str, ...]] = ("y", "cb", "cr")
    mode: ClassVar[ColorSpace] = "ycbcr"
    null_value: ClassVar[Tuple[float, float, float]] = (0.0, 0.0, 0.0)
    format_type: ClassVar[FormatType] = FormatType.FLOAT


DigitalYCbCr = ColorYCbCrINT
NormalizedYCbCr = ColorUnitYCbCr


ycbcr_tuple_to_class = build_registry(
    ColorYCbCrINT,
    ColorUnitYCbCr,
)

from typing import ClassVar, Tuple
from ..types.format_type import FormatType
from ..types.color_types import ColorSpace
from .color_base import ColorBase, build_registry
from .capabilities import (
    CIELabConvertible, CIEXYZConvertible, GrayscaleConvertible,
    RGBAConvertible, RGBConvertible, YCbCrConvertible,
)


class ColorGrayINT(
    ColorBase,
    RGBConvertible, RGBAConvertible, YCbCrConvertible,
    GrayscaleConvertible, CIELabConvertible, CIEXYZConvertible,
):
    channels: ClassVar[Tuple[str, ...]] = ("v",)
    mode: ClassVar[ColorSpace] = "gray"
    maxima: ClassVar[Tuple[int]] = (255,)
    null_value: ClassVar[Tuple[int]] = (0,)
    format_type: ClassVar[FormatType] = FormatType.INT


class ColorUnitGray(
    ColorBase,
    RGBConvertible, RGBAConvertible, YCbCrConvertible,
    GrayscaleConvertible, CIELabConvertible, CIEXYZConvertible,
):
    channels: ClassVar[Tuple[str, ...]] = ("v",)
    mode: ClassVar[ColorSpace] = "gray"
    null_value: ClassVar[Tuple[float]] = (0.0,)
    format_type: ClassVar[FormatType] = FormatType.FLOAT


DigitalGrayscale = ColorGrayINT
NormalizedGrayscale = ColorUnitGray


gray_tuple_to_class = build_registry(
    ColorGrayINT,
    ColorUnitGray,
)

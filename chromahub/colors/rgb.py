from typing import ClassVar, Tuple
from ..types.format_type import FormatType
from ..types.color_types import ColorSpace
from .color_base import ColorBase, WithAlpha, build_registry
from .capabilities import (
    CIELabConvertible, CIEXYZConvertible, GrayscaleConvertible,
    RGBAConvertible, RGBConvertible, YCbCrConvertible,
)


class ColorRGBINT(
    ColorBase,
    RGBConvertible, RGBAConvertible, YCbCrConvertible,
    GrayscaleConvertible, CIELabConvertible, CIEXYZConvertible,
):
    """Digital RGB, one byte per channel. Hub of all device conversions."""
    channels: ClassVar[Tuple[str, ...]] = ("r", "g", "b")
    mode: ClassVar[ColorSpace] = "rgb"
    maxima: ClassVar[Tuple[int, int, int]] = (255, 255, 255)
    null_value: ClassVar[Tuple[int, int, int]] = (0, 0, 0)
    format_type: ClassVar[FormatType] = FormatType.INT


class ColorRGBAINT(
    WithAlpha, ColorBase,
    RGBConvertible, RGBAConvertible, YCbCrConvertible,
    GrayscaleConvertible, CIELabConvertible, CIEXYZConvertible,
):
    channels: ClassVar[Tuple[str, ...]] = ("r", "g", "b", "a")
    mode: ClassVar[ColorSpace] = "rgba"
    maxima: ClassVar[Tuple[int, int, int, int]] = (255, 255, 255, 255)
    null_value: ClassVar[Tuple[int, int, int, int]] = (0, 0, 0, 0)
    format_type: ClassVar[FormatType] = FormatType.INT
    alpha_max: ClassVar[int] = 255


class ColorUnitRGB(
    ColorBase,
    RGBConvertible, RGBAConvertible, YCbCrConvertible,
    GrayscaleConvertible, CIELabConvertible, CIEXYZConvertible,
):
    """Normalized RGB. Channels are nominally 0.0-1.0 and are not clamped."""
    channels: ClassVar[Tuple[str, ...]] = ("r", "g", "b")
    mode: ClassVar[ColorSpace] = "rgb"
    null_value: ClassVar[Tuple[float, float, float]] = (0.0, 0.0, 0.0)
    format_type: ClassVar[FormatType] = FormatType.FLOAT


class ColorUnitRGBA(
    WithAlpha, ColorBase,
    RGBConvertible, RGBAConvertible, YCbCrConvertible,
    GrayscaleConvertible, CIELabConvertible, CIEXYZConvertible,
):
    channels: ClassVar[Tuple[str, ...]] = ("r", "g", "b", "a")
    mode: ClassVar[ColorSpace] = "rgba"
    null_value: ClassVar[Tuple[float, float, float, float]] = (0.0, 0.0, 0.0, 0.0)
    format_type: ClassVar[FormatType] = FormatType.FLOAT
    alpha_max: ClassVar[float] = 1.0


DigitalRGB = ColorRGBINT
NormalizedRGB = ColorUnitRGB
DigitalRGBA = ColorRGBAINT
NormalizedRGBA = ColorUnitRGBA


rgb_tuple_to_class = build_registry(
    ColorRGBINT,
    ColorRGBAINT,
    ColorUnitRGB,
    ColorUnitRGBA,
)

from typing import ClassVar, Tuple
from ..types.format_type import FormatType
from ..types.color_types import ColorSpace
from .color_base import ColorBase, build_registry
from .capabilities import (
    CIELabConvertible, CIEXYZConvertible, GrayscaleConvertible,
    RGBAConvertible, RGBConvertible, YCbCrConvertible,
)


class ColorLab(
    ColorBase,
    RGBConvertible, RGBAConvertible, YCbCrConvertible,
    GrayscaleConvertible, CIELabConvertible, CIEXYZConvertible,
):
    """
    CIE L*a*b* (D65).

    L is nominally 0 to 100, a and b roughly -100 to 100. Out-of-gamut values
    are kept as they are; see http://www.colourphil.co.uk/lab_lch_colour_space.shtml
    """
    channels: ClassVar[Tuple[str, ...]] = ("l", "a", "b")
    mode: ClassVar[ColorSpace] = "lab"
    null_value: ClassVar[Tuple[float, float, float]] = (0.0, 0.0, 0.0)
    format_type: ClassVar[FormatType] = FormatType.FLOAT


class ColorXYZ(
    ColorBase,
    RGBConvertible, RGBAConvertible, YCbCrConvertible,
    GrayscaleConvertible, CIELabConvertible, CIEXYZConvertible,
):
    """
    CIE 1931 XYZ tristimulus values referenced to D65.

    Hub of the device independent conversions. x and y are nominally 0 to
    about 1.5, z 0 to about 2.0.
    """
    channels: ClassVar[Tuple[str, ...]] = ("x", "y", "z")
    mode: ClassVar[ColorSpace] = "xyz"
    null_value: ClassVar[Tuple[float, float, float]] = (0.0, 0.0, 0.0)
    format_type: ClassVar[FormatType] = FormatType.FLOAT


CIELab = ColorLab
CIEXYZ = ColorXYZ


cie_tuple_to_class = build_registry(
    ColorLab,
    ColorXYZ,
)

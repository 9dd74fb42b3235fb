from __future__ import annotations
from typing import Optional

from .color_base import ColorBase
from .rgb import rgb_tuple_to_class
from .ycbcr import ycbcr_tuple_to_class
from .gray import gray_tuple_to_class
from .cie import cie_tuple_to_class
from ..conversions.wrapper import color_key
from ..types.color_types import ColorKey, ColorSpace, Scalar
from ..types.format_type import FormatType, channel_max

unified_tuple_to_class: dict[ColorKey, type[ColorBase]] = {
    **rgb_tuple_to_class,
    **ycbcr_tuple_to_class,
    **gray_tuple_to_class,
    **cie_tuple_to_class,
}

# Spaces that have a variant with an alpha channel appended.
ALPHA_VARIANTS = {"rgb": "rgba"}


def get_color_class(color_space: str, format_type: FormatType = FormatType.INT) -> type[ColorBase]:
    color_class = unified_tuple_to_class.get(color_key(color_space, format_type))  # type: ignore[arg-type]
    if color_class is None:
        raise ValueError(
            f"Unsupported color space/format combination: {color_space}/{format_type}"
        )
    return color_class


def color_convert(self: ColorBase, to_space: ColorSpace | None = None, to_format: FormatType | None = None) -> ColorBase:
    """
    Convert this color to a different color space and/or format.

    Args:
        to_space: Target color space (e.g., "rgb", "ycbcr", "lab")
        to_format: Target format type (INT, FLOAT). Defaults to current format.

    Returns:
        New ColorBase instance in the target space/format
    """
    to_space = to_space or self.mode
    to_format = to_format or self.format_type
    cls = get_color_class(to_space, to_format)
    return cls(self)


def with_alpha(self: ColorBase, alpha: Optional[Scalar] = None) -> ColorBase:
    """
    Return the RGBA counterpart of an RGB color with the given alpha.

    Args:
        alpha: Alpha value to set. If None, uses fully opaque for the format.

    Returns:
        New ColorBase instance with alpha channel.
    """
    new_mode = ALPHA_VARIANTS.get(self.mode)
    if new_mode is None:
        raise TypeError(f"{self.__class__.__name__} has no alpha variant")

    if alpha is None:
        alpha = channel_max[self.format_type]

    cls = get_color_class(new_mode, self.format_type)
    return cls(tuple(self.value) + (alpha,))


ColorBase.convert = color_convert
ColorBase.with_alpha = with_alpha


def convert_color(value, color_space: str, format_type: FormatType = FormatType.INT) -> ColorBase:
    """Build a color of the given space/format from a tuple or any other color."""
    color_class = get_color_class(color_space, format_type)
    return color_class(value)

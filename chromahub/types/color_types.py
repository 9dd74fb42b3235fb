from __future__ import annotations
from typing import Literal, Tuple, Union

from .format_type import FormatType

Scalar = int | float
IntVector = Tuple[int, ...]
FloatVector = Tuple[float, ...]
ColorElement = Union[IntVector, FloatVector]
ColorSpace = Literal["rgb", "rgba", "ycbcr", "gray", "lab", "xyz"]
ColorKey = Tuple[str, FormatType]

CIE_SPACES = {"lab", "xyz"}
ALPHA_SPACES = {"rgba"}

RGB_HUB: ColorKey = ("rgb", FormatType.INT)
XYZ_HUB: ColorKey = ("xyz", FormatType.FLOAT)


def is_cie_space(color_space: str) -> bool:
    """
    Check if the given color space is device independent (CIE Lab or XYZ).

    Args:
        color_space: Color space string
    Returns:
        True for lab/xyz, False otherwise
    """
    return color_space.lower() in CIE_SPACES

"""
Chromahub Color Space Conversions
=================================

Single-sample conversion formulas between digital/normalized RGB, RGBA,
YCbCr and grayscale and the device independent CIE Lab and CIE XYZ.

Every function takes the channels of one color as positional arguments and
returns a plain tuple. Nothing here allocates arrays per sample beyond the
3x3 matrix products of the RGB <-> XYZ step.

Direct Conversions
------------------

-> RGB:
    unit_rgb_to_rgb, rgb_to_unit_rgb, unit_ycbcr_to_unit_rgb, xyz_to_rgb,
    rgba_to_rgb, unit_rgba_to_unit_rgb, gray_to_rgb, ...

-> RGBA:
    rgb_to_rgba, unit_rgb_to_unit_rgba, rgba_to_unit_rgba, unit_rgba_to_rgba, ...

-> YCbCr:
    rgb_to_ycbcr, ycbcr_to_unit_ycbcr, unit_ycbcr_to_ycbcr

-> Grayscale:
    rgb_to_gray, unit_rgb_to_unit_gray, ycbcr_to_gray, lab_to_gray, ...

-> CIE:
    rgb_to_xyz, xyz_to_lab, lab_to_xyz, gray_to_lab, unit_gray_to_lab

Hub Routing
-----------
Pairs without a direct formula are composed through digital RGB or CIE XYZ.
The composition for each ordered pair is fixed in ``wrapper.ROUTES`` and
precomputed into ``wrapper.CONVERSIONS`` at import.

    convert(color, from_space, to_space, input_type, output_type)
        Universal converter on channel tuples
    conversion_path(src, dst)
        The (space, format) keys a conversion passes through

Rounding
--------
Normalized -> digital truncates, XYZ -> digital RGB rounds, Lab -> digital
grayscale floors. All three saturate to 0..255. A chain A -> B -> C can
therefore differ from A -> C by one unit.

Examples
--------
>>> from chromahub.conversions import convert, FormatType
>>> convert((255, 0, 0), "rgb", "lab")
(53.24..., 80.09..., 67.20...)
>>> convert((1.0, 0.0, 0.5), "rgb", "rgb", FormatType.FLOAT, FormatType.INT)
(255, 0, 127)
"""

from .to_rgb import (
    unit_rgb_to_rgb,
    rgb_to_unit_rgb,
    rgba_to_rgb,
    rgba_to_unit_rgb,
    unit_rgba_to_rgb,
    unit_rgba_to_unit_rgb,
    unit_ycbcr_to_unit_rgb,
    gray_to_rgb,
    unit_gray_to_unit_rgb,
    linear_to_srgb,
    xyz_to_rgb,
)
from .to_rgba import (
    rgb_to_rgba,
    unit_rgb_to_rgba,
    rgb_to_unit_rgba,
    unit_rgb_to_unit_rgba,
    rgba_to_unit_rgba,
    unit_rgba_to_rgba,
)
from .to_ycbcr import rgb_to_ycbcr, ycbcr_to_unit_ycbcr, unit_ycbcr_to_ycbcr
from .to_gray import (
    luma,
    rgb_to_gray,
    rgb_to_unit_gray,
    unit_rgb_to_gray,
    unit_rgb_to_unit_gray,
    ycbcr_to_gray,
    ycbcr_to_unit_gray,
    unit_ycbcr_to_gray,
    unit_ycbcr_to_unit_gray,
    gray_to_unit_gray,
    unit_gray_to_gray,
    lab_to_gray,
    lab_to_unit_gray,
)
from .to_cie import (
    srgb_to_linear,
    rgb_to_xyz,
    xyz_to_lab,
    lab_to_xyz,
    gray_to_lab,
    unit_gray_to_lab,
)

# High-level API
from .wrapper import (
    convert,
    conversion_path,
    color_key,
    get_converter,
    COLOR_KEYS,
    CONVERSIONS,
)

# Types and enums
from ..types.format_type import FormatType
from ..types.color_types import ColorSpace

__all__ = [
    # -> RGB
    'unit_rgb_to_rgb',
    'rgb_to_unit_rgb',
    'rgba_to_rgb',
    'rgba_to_unit_rgb',
    'unit_rgba_to_rgb',
    'unit_rgba_to_unit_rgb',
    'unit_ycbcr_to_unit_rgb',
    'gray_to_rgb',
    'unit_gray_to_unit_rgb',
    'linear_to_srgb',
    'xyz_to_rgb',

    # -> RGBA
    'rgb_to_rgba',
    'unit_rgb_to_rgba',
    'rgb_to_unit_rgba',
    'unit_rgb_to_unit_rgba',
    'rgba_to_unit_rgba',
    'unit_rgba_to_rgba',

    # -> YCbCr
    'rgb_to_ycbcr',
    'ycbcr_to_unit_ycbcr',
    'unit_ycbcr_to_ycbcr',

    # -> grayscale
    'luma',
    'rgb_to_gray',
    'rgb_to_unit_gray',
    'unit_rgb_to_gray',
    'unit_rgb_to_unit_gray',
    'ycbcr_to_gray',
    'ycbcr_to_unit_gray',
    'unit_ycbcr_to_gray',
    'unit_ycbcr_to_unit_gray',
    'gray_to_unit_gray',
    'unit_gray_to_gray',
    'lab_to_gray',
    'lab_to_unit_gray',

    # -> CIE
    'srgb_to_linear',
    'rgb_to_xyz',
    'xyz_to_lab',
    'lab_to_xyz',
    'gray_to_lab',
    'unit_gray_to_lab',

    # High-level API
    'convert',
    'conversion_path',
    'color_key',
    'get_converter',
    'COLOR_KEYS',
    'CONVERSIONS',

    # Types
    'FormatType',
    'ColorSpace',
]

from typing import Callable, Dict, List, Tuple

from ..types.color_types import ColorElement, ColorKey, ColorSpace, is_cie_space
from ..types.format_type import FormatType

from .to_rgb import (
    gray_to_rgb, rgb_to_unit_rgb, rgba_to_rgb, rgba_to_unit_rgb,
    unit_gray_to_unit_rgb, unit_rgb_to_rgb, unit_rgba_to_rgb,
    unit_rgba_to_unit_rgb, unit_ycbcr_to_unit_rgb, xyz_to_rgb,
)
from .to_rgba import (
    rgb_to_rgba, rgb_to_unit_rgba, rgba_to_unit_rgba, unit_rgb_to_rgba,
    unit_rgb_to_unit_rgba, unit_rgba_to_rgba,
)
from .to_ycbcr import rgb_to_ycbcr, unit_ycbcr_to_ycbcr, ycbcr_to_unit_ycbcr
from .to_gray import (
    gray_to_unit_gray, lab_to_gray, lab_to_unit_gray, rgb_to_gray,
    rgb_to_unit_gray, unit_gray_to_gray, unit_rgb_to_gray,
    unit_rgb_to_unit_gray, unit_ycbcr_to_gray, unit_ycbcr_to_unit_gray,
    ycbcr_to_gray, ycbcr_to_unit_gray,
)
from .to_cie import gray_to_lab, lab_to_xyz, rgb_to_xyz, unit_gray_to_lab, xyz_to_lab

Converter = Callable[[ColorElement], ColorElement]

RGB: ColorKey = ("rgb", FormatType.INT)
UNIT_RGB: ColorKey = ("rgb", FormatType.FLOAT)
RGBA: ColorKey = ("rgba", FormatType.INT)
UNIT_RGBA: ColorKey = ("rgba", FormatType.FLOAT)
YCBCR: ColorKey = ("ycbcr", FormatType.INT)
UNIT_YCBCR: ColorKey = ("ycbcr", FormatType.FLOAT)
GRAY: ColorKey = ("gray", FormatType.INT)
UNIT_GRAY: ColorKey = ("gray", FormatType.FLOAT)
LAB: ColorKey = ("lab", FormatType.FLOAT)
XYZ: ColorKey = ("xyz", FormatType.FLOAT)

COLOR_KEYS: Tuple[ColorKey, ...] = (
    RGB, UNIT_RGB, RGBA, UNIT_RGBA, YCBCR, UNIT_YCBCR, GRAY, UNIT_GRAY, LAB, XYZ,
)

# Edges that have their own formula.
DIRECT: Dict[Tuple[ColorKey, ColorKey], Converter] = {
    # -> digital RGB
    (UNIT_RGB, RGB): lambda c: unit_rgb_to_rgb(*c),
    (RGBA, RGB): lambda c: rgba_to_rgb(*c),
    (UNIT_RGBA, RGB): lambda c: unit_rgba_to_rgb(*c),
    (XYZ, RGB): lambda c: xyz_to_rgb(*c),
    (GRAY, RGB): lambda c: gray_to_rgb(*c),
    # -> normalized RGB
    (RGB, UNIT_RGB): lambda c: rgb_to_unit_rgb(*c),
    (RGBA, UNIT_RGB): lambda c: rgba_to_unit_rgb(*c),
    (UNIT_RGBA, UNIT_RGB): lambda c: unit_rgba_to_unit_rgb(*c),
    (UNIT_YCBCR, UNIT_RGB): lambda c: unit_ycbcr_to_unit_rgb(*c),
    (UNIT_GRAY, UNIT_RGB): lambda c: unit_gray_to_unit_rgb(*c),
    # -> RGBA
    (RGB, RGBA): lambda c: rgb_to_rgba(*c),
    (UNIT_RGB, RGBA): lambda c: unit_rgb_to_rgba(*c),
    (UNIT_RGBA, RGBA): lambda c: unit_rgba_to_rgba(*c),
    (RGB, UNIT_RGBA): lambda c: rgb_to_unit_rgba(*c),
    (UNIT_RGB, UNIT_RGBA): lambda c: unit_rgb_to_unit_rgba(*c),
    (RGBA, UNIT_RGBA): lambda c: rgba_to_unit_rgba(*c),
    # -> YCbCr
    (RGB, YCBCR): lambda c: rgb_to_ycbcr(*c),
    (UNIT_YCBCR, YCBCR): lambda c: unit_ycbcr_to_ycbcr(*c),
    (YCBCR, UNIT_YCBCR): lambda c: ycbcr_to_unit_ycbcr(*c),
    # -> grayscale
    (UNIT_GRAY, GRAY): lambda c: unit_gray_to_gray(*c),
    (RGB, GRAY): lambda c: rgb_to_gray(*c),
    (UNIT_RGB, GRAY): lambda c: unit_rgb_to_gray(*c),
    (YCBCR, GRAY): lambda c: ycbcr_to_gray(*c),
    (UNIT_YCBCR, GRAY): lambda c: unit_ycbcr_to_gray(*c),
    (LAB, GRAY): lambda c: lab_to_gray(*c),
    (GRAY, UNIT_GRAY): lambda c: gray_to_unit_gray(*c),
    (RGB, UNIT_GRAY): lambda c: rgb_to_unit_gray(*c),
    (UNIT_RGB, UNIT_GRAY): lambda c: unit_rgb_to_unit_gray(*c),
    (YCBCR, UNIT_GRAY): lambda c: ycbcr_to_unit_gray(*c),
    (UNIT_YCBCR, UNIT_GRAY): lambda c: unit_ycbcr_to_unit_gray(*c),
    (LAB, UNIT_GRAY): lambda c: lab_to_unit_gray(*c),
    # -> CIE
    (RGB, XYZ): lambda c: rgb_to_xyz(*c),
    (LAB, XYZ): lambda c: lab_to_xyz(*c),
    (XYZ, LAB): lambda c: xyz_to_lab(*c),
    (GRAY, LAB): lambda c: gray_to_lab(*c),
    (UNIT_GRAY, LAB): lambda c: unit_gray_to_lab(*c),
}

# Every other pair goes through one intermediate key; the two halves are
# resolved the same way. The intermediates are fixed per pair because each
# path applies its own byte cast, so A -> B -> C is not always A -> C.
ROUTES: Dict[Tuple[ColorKey, ColorKey], ColorKey] = {
    # -> digital RGB
    (UNIT_YCBCR, RGB): UNIT_RGB,
    (YCBCR, RGB): UNIT_RGB,
    (LAB, RGB): XYZ,
    (UNIT_GRAY, RGB): GRAY,
    # -> normalized RGB
    (YCBCR, UNIT_RGB): UNIT_YCBCR,
    (XYZ, UNIT_RGB): RGB,
    (LAB, UNIT_RGB): RGB,
    (GRAY, UNIT_RGB): UNIT_GRAY,
    # -> digital RGBA
    (YCBCR, RGBA): RGB,
    (UNIT_YCBCR, RGBA): RGB,
    (GRAY, RGBA): RGB,
    (UNIT_GRAY, RGBA): RGB,
    (LAB, RGBA): RGB,
    (XYZ, RGBA): RGB,
    # -> normalized RGBA
    (YCBCR, UNIT_RGBA): UNIT_RGB,
    (UNIT_YCBCR, UNIT_RGBA): UNIT_RGB,
    (GRAY, UNIT_RGBA): UNIT_RGB,
    (UNIT_GRAY, UNIT_RGBA): UNIT_RGB,
    (LAB, UNIT_RGBA): UNIT_RGB,
    (XYZ, UNIT_RGBA): UNIT_RGB,
    # -> digital YCbCr
    (UNIT_RGB, YCBCR): RGB,
    (RGBA, YCBCR): RGB,
    (UNIT_RGBA, YCBCR): UNIT_RGB,
    (GRAY, YCBCR): RGB,
    (UNIT_GRAY, YCBCR): RGB,
    (LAB, YCBCR): RGB,
    (XYZ, YCBCR): RGB,
    # -> normalized YCbCr
    (RGB, UNIT_YCBCR): YCBCR,
    (UNIT_RGB, UNIT_YCBCR): YCBCR,
    (RGBA, UNIT_YCBCR): RGB,
    (UNIT_RGBA, UNIT_YCBCR): UNIT_RGB,
    (GRAY, UNIT_YCBCR): RGB,
    (UNIT_GRAY, UNIT_YCBCR): RGB,
    (LAB, UNIT_YCBCR): RGB,
    (XYZ, UNIT_YCBCR): RGB,
    # -> digital grayscale
    (RGBA, GRAY): RGB,
    (UNIT_RGBA, GRAY): UNIT_RGB,
    (XYZ, GRAY): LAB,
    # -> normalized grayscale
    (RGBA, UNIT_GRAY): RGB,
    (UNIT_RGBA, UNIT_GRAY): UNIT_RGB,
    (XYZ, UNIT_GRAY): LAB,
    # -> CIE XYZ
    (UNIT_RGB, XYZ): RGB,
    (RGBA, XYZ): RGB,
    (UNIT_RGBA, XYZ): RGB,
    (YCBCR, XYZ): RGB,
    (UNIT_YCBCR, XYZ): RGB,
    (GRAY, XYZ): LAB,
    (UNIT_GRAY, XYZ): LAB,
    # -> CIE Lab
    (RGB, LAB): XYZ,
    (UNIT_RGB, LAB): XYZ,
    (RGBA, LAB): XYZ,
    (UNIT_RGBA, LAB): XYZ,
    (YCBCR, LAB): XYZ,
    (UNIT_YCBCR, LAB): XYZ,
}


def conversion_path(src: ColorKey, dst: ColorKey) -> List[ColorKey]:
    """
    Return every key a conversion from ``src`` to ``dst`` passes through,
    both ends included. Same-key conversions have a one-element path.
    """
    if src == dst:
        return [src]
    if (src, dst) in DIRECT:
        return [src, dst]
    mid = ROUTES[(src, dst)]
    return conversion_path(src, mid)[:-1] + conversion_path(mid, dst)


def _compose(first: Converter, second: Converter) -> Converter:
    return lambda c: second(first(c))


def _identity(c: ColorElement) -> ColorElement:
    return tuple(c)


def _resolve(src: ColorKey, dst: ColorKey) -> Converter:
    if src == dst:
        return _identity
    direct = DIRECT.get((src, dst))
    if direct is not None:
        return direct
    mid = ROUTES[(src, dst)]
    return _compose(_resolve(src, mid), _resolve(mid, dst))


CONVERSIONS: Dict[Tuple[ColorKey, ColorKey], Converter] = {
    (src, dst): _resolve(src, dst)
    for src in COLOR_KEYS
    for dst in COLOR_KEYS
}


def color_key(space: ColorSpace, fmt: FormatType = FormatType.INT) -> ColorKey:
    """
    Build the registry key for a space/format pair.

    CIE spaces only exist in float form, so their format argument is ignored.
    """
    space = space.lower()  # type: ignore
    if is_cie_space(space):
        return (space, FormatType.FLOAT)
    return (space, FormatType(fmt))


def get_converter(src: ColorKey, dst: ColorKey) -> Converter:
    try:
        return CONVERSIONS[(src, dst)]
    except KeyError:
        raise ValueError(f"Unsupported conversion: {src} -> {dst}") from None


def convert(
    color: ColorElement,
    from_space: ColorSpace,
    to_space: ColorSpace,
    input_type: FormatType = FormatType.INT,
    output_type: FormatType = FormatType.INT,
) -> ColorElement:
    """
    Convert one color given as a plain channel tuple.

    Args:
        color: Channel values in the order of the source space
        from_space: Source color space ("rgb", "rgba", "ycbcr", "gray", "lab", "xyz")
        to_space: Target color space
        input_type: Source format (ignored for lab/xyz)
        output_type: Target format (ignored for lab/xyz)

    Returns:
        Channel tuple in the target space and format
    """
    src = color_key(from_space, input_type)
    dst = color_key(to_space, output_type)
    return get_converter(src, dst)(tuple(color))

"""
Capability interfaces for converting whole sequences of colors.

Every color class lists the families it converts to in its bases, e.g.
``class ColorUnitRGB(ColorBase, RGBConvertible, ...)``. The mixins add
classmethods that apply the single-value conversion element by element:

>>> from chromahub import ColorUnitYCbCr
>>> ColorUnitYCbCr.convert_list_rgb([ColorUnitYCbCr((1.0, -0.5, -0.5))])
[ColorRGBINT(r=76, g=255, b=29)]

Output always has the length and order of the input. RGB and grayscale also
offer a lazy variant that converts while iterating.
"""
from __future__ import annotations
from collections.abc import Sized
from typing import TYPE_CHECKING, ClassVar, Generic, Iterable, Iterator, List, Type, TypeVar

from ..types.color_types import RGB_HUB, XYZ_HUB, ColorKey
from ..types.format_type import FormatType

if TYPE_CHECKING:
    from .color_base import ColorBase

T = TypeVar('T', bound='ColorBase')

RGBA_KEY: ColorKey = ("rgba", FormatType.INT)
YCBCR_KEY: ColorKey = ("ycbcr", FormatType.INT)
GRAY_KEY: ColorKey = ("gray", FormatType.INT)
LAB_KEY: ColorKey = ("lab", FormatType.FLOAT)


def _target_class(key: ColorKey) -> Type[ColorBase]:
    from .color import get_color_class  # local import to avoid cycles
    return get_color_class(*key)


class LazyConversion(Generic[T]):
    """
    Finite lazy sequence of converted colors.

    Holds no results: each iteration walks ``source`` again and converts one
    element at a time, so it can be restarted whenever ``source`` can.
    """

    __slots__ = ('_source', '_target')

    def __init__(self, source: Iterable[ColorBase], target: Type[T]) -> None:
        self._source = source
        self._target = target

    @property
    def target(self) -> Type[T]:
        return self._target

    def __iter__(self) -> Iterator[T]:
        target = self._target
        for item in self._source:
            yield target(item)

    def __len__(self) -> int:
        if not isinstance(self._source, Sized):
            raise TypeError(f"source of type {type(self._source).__name__} has no len()")
        return len(self._source)

    def __repr__(self) -> str:
        return f"LazyConversion(target={self._target.__name__})"


def convert_list(items: Iterable[ColorBase], target: Type[T]) -> List[T]:
    """Convert every item to ``target``, keeping order and length."""
    return [target(item) for item in items]


def convert_lazy(items: Iterable[ColorBase], target: Type[T]) -> LazyConversion[T]:
    return LazyConversion(items, target)


class RGBConvertible:
    """Converts sequences to digital RGB."""

    rgb_target: ClassVar[ColorKey] = RGB_HUB

    @classmethod
    def convert_list_rgb(cls, items: Iterable[ColorBase]) -> List[ColorBase]:
        return convert_list(items, _target_class(cls.rgb_target))

    @classmethod
    def convert_iter_rgb(cls, items: Iterable[ColorBase]) -> LazyConversion:
        """Lazily yield digital RGB values, one per input."""
        return convert_lazy(items, _target_class(cls.rgb_target))


class RGBAConvertible:
    """Converts sequences to digital RGBA."""

    rgba_target: ClassVar[ColorKey] = RGBA_KEY

    @classmethod
    def convert_list_rgba(cls, items: Iterable[ColorBase]) -> List[ColorBase]:
        return convert_list(items, _target_class(cls.rgba_target))


class YCbCrConvertible:
    """Converts sequences to digital YCbCr."""

    ycbcr_target: ClassVar[ColorKey] = YCBCR_KEY

    @classmethod
    def convert_list_ycbcr(cls, items: Iterable[ColorBase]) -> List[ColorBase]:
        return convert_list(items, _target_class(cls.ycbcr_target))


class GrayscaleConvertible:
    """Converts sequences to digital grayscale."""

    grayscale_target: ClassVar[ColorKey] = GRAY_KEY

    @classmethod
    def convert_list_grayscale(cls, items: Iterable[ColorBase]) -> List[ColorBase]:
        return convert_list(items, _target_class(cls.grayscale_target))

    @classmethod
    def convert_iter_grayscale(cls, items: Iterable[ColorBase]) -> LazyConversion:
        return convert_lazy(items, _target_class(cls.grayscale_target))


class CIELabConvertible:
    """Converts sequences to CIE Lab."""

    lab_target: ClassVar[ColorKey] = LAB_KEY

    @classmethod
    def convert_list_lab(cls, items: Iterable[ColorBase]) -> List[ColorBase]:
        return convert_list(items, _target_class(cls.lab_target))


class CIEXYZConvertible:
    """Converts sequences to CIE XYZ."""

    xyz_target: ClassVar[ColorKey] = XYZ_HUB

    @classmethod
    def convert_list_xyz(cls, items: Iterable[ColorBase]) -> List[ColorBase]:
        return convert_list(items, _target_class(cls.xyz_target))


ALL_CAPABILITIES = (
    RGBConvertible,
    RGBAConvertible,
    YCbCrConvertible,
    GrayscaleConvertible,
    CIELabConvertible,
    CIEXYZConvertible,
)

from __future__ import annotations
from operator import itemgetter
from typing import Any, Callable, ClassVar, Iterator, Optional, Tuple, Union, cast
from abc import ABC

from numpy import ndarray

from ..conversions.wrapper import get_converter
from ..types.color_types import ALPHA_SPACES, ColorElement, ColorKey, ColorSpace, Scalar
from ..types.format_type import FormatType, format_classes


class ColorBase:
    __slots__ = ('_value',)  # immutable after __init__

    num_channels: ClassVar[int] = 1
    channels:   ClassVar[Tuple[str, ...]]
    mode:       ClassVar[ColorSpace]
    maxima:     ClassVar[Optional[ColorElement]] = None
    null_value: ClassVar[ColorElement]
    format_type: ClassVar[FormatType]
    _is_frozen: bool = False   # class-level default (instance gets its own slot)

    # attached in colors/color.py
    convert: Callable[..., ColorBase]
    with_alpha: Callable[..., ColorBase]
    # attached in colors/codec.py
    from_bytes: ClassVar[Callable[..., Any]]
    try_from_bytes: ClassVar[Callable[..., Any]]
    from_int: ClassVar[Callable[..., Any]]
    to_bytes: Callable[..., bytes]
    to_int: Callable[..., int]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        # Named read-only access to each channel: rgb.r, lab.l, gray.v, ...
        for index, name in enumerate(cls.__dict__.get('channels', ())):
            setattr(cls, name, property(itemgetter(index), doc=f"{name} channel"))
        if 'channels' in cls.__dict__:
            cls.num_channels = len(cls.channels)

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: Union[ColorBase, ColorElement, ndarray, None] = None) -> None:
        if value is None:
            value = self.null_value

        # ---- Handle ColorBase input ----
        if isinstance(value, ColorBase):
            if value.key() == self.key():
                value = value.value
            else:
                value = get_converter(value.key(), self.key())(value.value)

        if isinstance(value, ndarray):
            if value.ndim != 1:
                raise ValueError(
                    f"{self.__class__.__name__} holds a single color, got array of shape {value.shape}"
                )
            value = tuple(value.tolist())

        value = tuple(cast(Tuple[Any, ...], value))
        if len(value) != self.num_channels:
            raise ValueError(
                f"{self.__class__.__name__} expects {self.num_channels} channel(s) "
                f"{self.channels}, got {len(value)}"
            )

        # type enforcement
        cast_to = format_classes[self.format_type]
        value = tuple(cast_to(v) for v in value)

        # digital channels are bytes; float channels are never clamped
        if self.maxima is not None:
            value = tuple(
                max(0, min(v, m)) for v, m in zip(value, cast(Tuple[Scalar, ...], self.maxima))
            )

        # safe assignment; __setattr__ still allows it during init
        self._value = value

        # freeze instance; no more writes allowed
        super().__setattr__('_is_frozen', True)

    @classmethod
    def key(cls) -> ColorKey:
        """Registry / routing key of this color type."""
        return (cls.mode, cls.format_type)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> ColorElement:
        return self._value

    @property
    def has_alpha(self) -> bool:
        """Check if this color space includes an alpha channel."""
        return self.mode in ALPHA_SPACES

    @property
    def is_digital(self) -> bool:
        return self.format_type == FormatType.INT

    # ------------------ VALUE SEMANTICS ------------------
    def __getitem__(self, index):
        return self._value[index]

    def __iter__(self) -> Iterator[Scalar]:
        return iter(self._value)

    def __len__(self) -> int:
        return self.num_channels

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        return type(other) is type(self) and other._value == self._value

    def __hash__(self) -> int:
        return hash((self.__class__.__name__, self._value))

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={v!r}" for name, v in zip(self.channels, self._value))
        return f"{self.__class__.__name__}({fields})"


class WithAlpha(ABC):
    """
    Mixin for a color class that includes an alpha channel.
    Assumes alpha is the *last* channel.
    """

    # Tell static checkers these come from the real subclass (ColorBase)
    num_channels: ClassVar[int]
    mode: ClassVar[ColorSpace]
    value: ColorElement

    alpha_index: ClassVar[int] = -1
    alpha_max:   ClassVar[Scalar]

    @property
    def alpha(self) -> Scalar:
        return cast(Tuple[Scalar, ...], self.value)[self.alpha_index]

    def with_alpha(self, alpha: Optional[Scalar] = None):
        """
        Return a new instance with the alpha channel replaced.

        Args:
            alpha: New alpha value. Defaults to fully opaque.

        Returns:
            New color instance with updated alpha.
        """
        if alpha is None:
            alpha = self.alpha_max
        values = cast(Tuple[Scalar, ...], self.value)
        return self.__class__(values[:-1] + (alpha,))  # type: ignore


def build_registry(*classes: type[ColorBase]):
    return {
        cls.key(): cls
        for cls in classes
    }

"""
Raw byte and packed integer codec for the device color types.

Digital types map one byte per channel. Normalized types are read and
written through their digital counterpart, so they pick up the usual
truncating cast on the way out. CIE types have no byte form.

Layouts
-------
=========  ==========  ===================  ==========================
space      min bytes   packed u32 (MSB->)   fixed forms
=========  ==========  ===================  ==========================
rgb        3           R G B 0              3 bytes, 4 (4th ignored)
rgba       3           R G B A              3 (alpha = 255), 4 bytes
ycbcr      3           Y Cb Cr 0            3 bytes, 4 (4th ignored)
gray       1           0 0 0 V              1 byte
=========  ==========  ===================  ==========================
"""
from __future__ import annotations
import logging
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Type, TypeVar, Union

import numpy as np

from .color_base import ColorBase
from ..errors import BufferTooSmall
from ..types.color_types import IntVector
from ..types.format_type import BYTE_MAX, FormatType, default_format_dtypes

logger = logging.getLogger(__name__)

C = TypeVar('C', bound=ColorBase)
ByteSource = Union[bytes, bytearray, memoryview, Sequence[int]]

OPAQUE = BYTE_MAX

# space -> (minimum length, channels read from a buffer, fixed lengths accepted)
BYTE_LAYOUTS: Dict[str, Tuple[int, int, Tuple[int, ...]]] = {
    "rgb": (3, 3, (3, 4)),
    "rgba": (3, 4, (3, 4)),
    "ycbcr": (3, 3, (3, 4)),
    "gray": (1, 1, (1,)),
}


def _layout(cls: Type[ColorBase]) -> Tuple[int, int, Tuple[int, ...]]:
    layout = BYTE_LAYOUTS.get(cls.mode)
    if layout is None:
        raise TypeError(f"{cls.__name__} has no byte representation")
    return layout


def _digital_class(cls: Type[ColorBase]) -> Type[ColorBase]:
    if cls.format_type == FormatType.INT:
        return cls
    from .color import get_color_class  # local import to avoid cycles
    return get_color_class(cls.mode, FormatType.INT)


def _build(cls: Type[C], octets: IntVector) -> C:
    """Create ``cls`` from digital channel bytes, converting if ``cls`` is normalized."""
    digital = _digital_class(cls)(octets)
    if digital.__class__ is cls:
        return digital  # type: ignore[return-value]
    return cls(digital)


def _channels_from(octets: IntVector, cls: Type[ColorBase]) -> IntVector:
    _, channels, _ = _layout(cls)
    if channels == 4 and len(octets) < 4:
        return tuple(octets[:3]) + (OPAQUE,)
    return tuple(octets[:channels])


def from_bytes(cls: Type[C], data: ByteSource) -> C:
    """
    Build a color from a fixed-size byte sequence.

    RGB, RGBA and YCbCr accept 3 or 4 bytes, grayscale exactly 1. An RGBA
    color built from 3 bytes is fully opaque.
    """
    _, _, fixed = _layout(cls)
    octets = tuple(bytes(data))
    if len(octets) not in fixed:
        raise ValueError(
            f"{cls.__name__} is built from {' or '.join(map(str, fixed))} bytes, got {len(octets)}"
        )
    return _build(cls, _channels_from(octets, cls))


def try_from_bytes(cls: Type[C], data: ByteSource) -> C:
    """
    Build a color from the start of a byte buffer of any length.

    Raises:
        BufferTooSmall: the buffer is shorter than the type's minimum
            (1 byte for grayscale, 3 for RGB, RGBA and YCbCr).
    """
    minimum, _, _ = _layout(cls)
    octets = tuple(bytes(data))
    if len(octets) < minimum:
        logger.debug("buffer of %d byte(s) too small for %s", len(octets), cls.__name__)
        raise BufferTooSmall(minimum, len(octets), cls.__name__)
    return _build(cls, _channels_from(octets, cls))


def from_int(cls: Type[C], packed: int) -> C:
    """Build a color from a big-endian packed 32-bit integer."""
    _, channels, _ = _layout(cls)
    octets = tuple((packed & 0xFFFFFFFF).to_bytes(4, "big"))
    if cls.mode == "gray":
        return _build(cls, octets[3:])
    return _build(cls, octets[:channels])


def to_bytes(color: ColorBase, size: Optional[int] = None) -> bytes:
    """
    Serialize a color to bytes.

    Args:
        color: Any device color
        size: 3 or 4 for RGB-like types (padding/alpha byte is 255, a 3-byte
            RGBA drops alpha). Defaults to the number of channels.
    """
    _, channels, fixed = _layout(color.__class__)
    digital = _digital_class(color.__class__)(color)
    octets = tuple(digital.value)
    size = channels if size is None else size
    if size not in fixed:
        raise ValueError(f"{color.__class__.__name__} serializes to {fixed} bytes, not {size}")
    if size > len(octets):
        octets = octets + (OPAQUE,) * (size - len(octets))
    return bytes(octets[:size])


def to_int(color: ColorBase) -> int:
    """Pack a color into a big-endian 32-bit integer, unused low bytes zero."""
    _layout(color.__class__)
    digital = _digital_class(color.__class__)(color)
    octets = tuple(digital.value)
    if color.mode == "gray":
        return octets[0]
    padded = octets + (0,) * (4 - len(octets))
    return int.from_bytes(bytes(padded), "big")


# ------------------ MULTI-PIXEL BUFFERS ------------------

def unpack_buffer(cls: Type[C], buffer: ByteSource) -> List[C]:
    """
    Read an interleaved pixel buffer (e.g. RGBRGB... or RGBARGBA...).

    The stride is the number of channels of ``cls``. A trailing partial pixel
    raises :class:`BufferTooSmall`.
    """
    _, stride, _ = _layout(cls)
    raw = np.frombuffer(bytes(buffer), dtype=np.uint8)
    remainder = raw.size % stride
    if remainder:
        logger.debug("buffer of %d byte(s) ends in a partial %s pixel", raw.size, cls.__name__)
        raise BufferTooSmall(raw.size + stride - remainder, raw.size, cls.__name__)
    return [_build(cls, tuple(row.tolist())) for row in raw.reshape(-1, stride)]


def pack_buffer(colors: Iterable[ColorBase]) -> bytes:
    """Write colors back to an interleaved byte buffer."""
    return b"".join(to_bytes(color) for color in colors)


def colors_to_array(colors: Sequence[ColorBase]) -> np.ndarray:
    """
    Stack colors of one type into an (N, channels) array.

    Digital types give ``uint8``, normalized and CIE types ``float64``.
    """
    if not colors:
        return np.empty((0, 0))
    cls = colors[0].__class__
    if any(color.__class__ is not cls for color in colors):
        raise ValueError("colors_to_array needs colors of a single type")
    return np.array([color.value for color in colors], dtype=default_format_dtypes[cls.format_type])


def array_to_colors(cls: Type[C], array: np.ndarray) -> List[C]:
    """Inverse of :func:`colors_to_array`: one ``cls`` instance per row."""
    array = np.asarray(array)
    if array.ndim != 2 or array.shape[-1] != cls.num_channels:
        raise ValueError(
            f"{cls.__name__} expects shape (N, {cls.num_channels}), got {array.shape}"
        )
    return [cls(tuple(row.tolist())) for row in array]


ColorBase.from_bytes = classmethod(from_bytes)  # type: ignore[assignment]
ColorBase.try_from_bytes = classmethod(try_from_bytes)  # type: ignore[assignment]
ColorBase.from_int = classmethod(from_int)  # type: ignore[assignment]
ColorBase.to_bytes = to_bytes
ColorBase.to_int = to_int

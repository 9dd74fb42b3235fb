"""Byte casts applied where a float crosses into a digital (8-bit) channel.

Three policies exist and each conversion path uses exactly one of them:

- ``truncate_to_byte``: normalized -> digital RGB/RGBA/YCbCr/grayscale
- ``round_to_byte``: linear XYZ -> digital RGB after sRGB encoding
- ``floor_to_byte``: CIE Lab -> digital grayscale

All three saturate to ``[0, 255]`` and map NaN to 0, so no input can make a
conversion fail.
"""
import math

import numpy as np

from ..types.format_type import BYTE_MAX


def _clip(value: float) -> float:
    """Clamp to ``[0, 255]``; every cast below keeps the clamped range."""
    return float(np.clip(value, 0.0, BYTE_MAX))


def truncate_to_byte(value: float) -> int:
    """Truncate toward zero, saturating to a byte."""
    if math.isnan(value):
        return 0
    return math.trunc(_clip(value))


def round_to_byte(value: float) -> int:
    """Round half away from zero, saturating to a byte."""
    if math.isnan(value):
        return 0
    return math.floor(_clip(value) + 0.5)


def floor_to_byte(value: float) -> int:
    """Floor, saturating to a byte."""
    if math.isnan(value):
        return 0
    return math.floor(_clip(value))

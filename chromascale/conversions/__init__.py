"""
Chromascale Channel Conversions
===============================

Conversions between normalized sRGB channels (float, 0.0-1.0) and 8-bit
channels (int, 0-255), with scalar and vectorized (numpy) variants.

Rounding
--------
Unit to byte conversion rounds ``value * 255`` to the nearest integer with
ties going to the even neighbour (``round`` / ``np.rint``), so 0.5 maps to
128 and scalar and array conversions always agree.

Functions
---------
    unit_to_byte(value)            -> int
    byte_to_unit(value)            -> float
    unit_rgb_to_bytes(r, g, b)     -> (int, int, int)
    np_unit_to_byte(arr)           -> uint8 ndarray
    np_byte_to_unit(arr)           -> float64 ndarray
    convert(color, input_type, output_type)
    np_convert(color, input_type, output_type)
"""
from typing import Tuple

import numpy as np

from ..types.format_type import FormatType, max_non_hue
from ..types.color_types import ColorElement, ScalarVector

MAX_BYTE_COLOR = max_non_hue[FormatType.INT]


def unit_to_byte(value: float) -> int:
    return int(round(value * MAX_BYTE_COLOR))


def byte_to_unit(value: int) -> float:
    return value / MAX_BYTE_COLOR


def unit_rgb_to_bytes(r: float, g: float, b: float) -> Tuple[int, int, int]:
    """Convert an sRGB triple to three 8-bit channels."""
    return unit_to_byte(r), unit_to_byte(g), unit_to_byte(b)


def np_unit_to_byte(arr: np.ndarray) -> np.ndarray:
    return np.rint(np.asarray(arr, dtype=np.float64) * MAX_BYTE_COLOR).astype(np.uint8)


def np_byte_to_unit(arr: np.ndarray) -> np.ndarray:
    return np.asarray(arr, dtype=np.float64) / MAX_BYTE_COLOR


def convert(color: ColorElement, input_type: FormatType, output_type: FormatType) -> ScalarVector:
    """
    Convert a scalar color tuple between formats.

    Args:
        color: Channel tuple in ``input_type`` format
        input_type: Format of ``color``
        output_type: Target format

    Returns:
        Channel tuple in ``output_type`` format
    """
    input_type = FormatType(input_type)
    output_type = FormatType(output_type)
    channels = color if isinstance(color, tuple) else (color,)
    if input_type == output_type:
        return tuple(channels)
    if output_type == FormatType.INT:
        return tuple(unit_to_byte(c) for c in channels)
    return tuple(byte_to_unit(c) for c in channels)


def np_convert(color: np.ndarray, input_type: FormatType, output_type: FormatType) -> np.ndarray:
    """Vectorized :func:`convert` for arrays whose last axis holds channels."""
    input_type = FormatType(input_type)
    output_type = FormatType(output_type)
    if input_type == output_type:
        return np.asarray(color)
    if output_type == FormatType.INT:
        return np_unit_to_byte(color)
    return np_byte_to_unit(color)


__all__ = [
    "MAX_BYTE_COLOR",
    "unit_to_byte",
    "byte_to_unit",
    "unit_rgb_to_bytes",
    "np_unit_to_byte",
    "np_byte_to_unit",
    "convert",
    "np_convert",
    "FormatType",
]

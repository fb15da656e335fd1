"""
Linear interpolation and segment lookup helpers shared by the gradient types.
"""
from __future__ import annotations
import math
from bisect import bisect_left
from typing import Callable, Generic, NamedTuple, Optional, Sequence, Tuple, TypeVar

import numpy as np

T = TypeVar("T")


def lerp_channels(low: Sequence[float], high: Sequence[float], factor: float) -> Tuple[float, ...]:
    """Interpolate each channel independently: ``low + (high - low) * factor``."""
    return tuple(lo + (hi - lo) * factor for lo, hi in zip(low, high))


def lerp_byte(start: int, end: int, factor: float) -> int:
    """Interpolate an 8-bit channel, rounding half to even."""
    return int(round(start + (end - start) * factor))


def np_lerp(low: np.ndarray, high: np.ndarray, factor: np.ndarray) -> np.ndarray:
    """Vectorized :func:`lerp_channels`; ``factor`` broadcasts over the channel axis."""
    return low + (high - low) * factor[..., None]


def split_index(position: float, last_index: int) -> Tuple[int, float]:
    """
    Map ``position`` in [0, 1) onto a sample array of ``last_index + 1`` entries.

    Returns:
        ``(low_index, factor)`` with the interpolated value lying between
        samples ``low_index`` and ``low_index + 1``.
    """
    index = position * last_index
    low_index = math.floor(index)
    return low_index, index - low_index


class Segment(NamedTuple, Generic[T]):
    """Result of a sorted segment lookup around a position."""
    exact: Optional[T]
    start: Optional[T]
    end: Optional[T]


def find_segment(items: Sequence[T], position: float, key: Callable[[T], float]) -> Segment[T]:
    """
    Locate ``position`` among ``items`` sorted ascending by ``key``.

    - ``exact``: first item whose key equals ``position``, if any
    - ``start``: last item whose key is strictly lower than ``position``
    - ``end``: first item whose key is strictly greater than ``position``

    ``start`` and ``end`` are only filled when there is no exact match.
    """
    index = bisect_left(items, position, key=key)
    if index < len(items) and key(items[index]) == position:
        return Segment(items[index], None, None)
    start = items[index - 1] if index > 0 else None
    end = items[index] if index < len(items) else None
    return Segment(None, start, end)


__all__ = ["lerp_channels", "lerp_byte", "np_lerp", "split_index", "Segment", "find_segment"]

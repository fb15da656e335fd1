from __future__ import annotations
from functools import cmp_to_key
from numbers import Real
from typing import Tuple, Union

import numpy as np
from boundednumbers import UnitFloat

from ..colors.color_base import ColorBase
from ..colors.rgb import ColorRGBAINT
from ..errors import check_unit_interval

ColorKeyColor = Union[ColorBase, Tuple[int, int, int], Tuple[int, int, int, int], np.ndarray]


def _as_rgba(color: ColorKeyColor) -> ColorRGBAINT:
    if isinstance(color, np.ndarray):
        if color.ndim != 1:
            raise TypeError(f"ColorKey color must be a single color, got array of shape {color.shape}")
        color = tuple(color.tolist())
    if isinstance(color, ColorRGBAINT):
        rgba = color
    elif isinstance(color, ColorBase):
        rgba = ColorRGBAINT(color)
    elif isinstance(color, (tuple, list)):
        channels = tuple(color)
        if len(channels) == 3:
            channels += (ColorRGBAINT.alpha_max,)
        rgba = ColorRGBAINT(channels)
    else:
        rgba = ColorRGBAINT(color)
    if rgba.is_array:
        raise TypeError("ColorKey color must be a single color, not an array")
    return rgba


def _as_position(position: Real) -> UnitFloat:
    if isinstance(position, bool) or not isinstance(position, Real):
        raise TypeError(f"position must be a real number, got {type(position).__name__}")
    return UnitFloat(check_unit_interval(float(position), "position"))


class ColorKey:
    """
    A color pinned at a relative position of a gradient.

    Keys are immutable values: two keys are equal when both their position
    and their color are equal. Ordering is by position only and is provided
    through :meth:`compare` rather than rich comparison operators.

    >>> key = ColorKey(0.25, (255, 0, 0))
    >>> key.color.value
    (255, 0, 0, 255)
    >>> float(key.with_position(0.5).position)
    0.5
    """

    __slots__ = ('_position', '_color')

    def __init__(self, position: Real, color: ColorKeyColor) -> None:
        self._position = _as_position(position)
        self._color = _as_rgba(color)

    @property
    def position(self) -> UnitFloat:
        """Relative position in ``[0, 1]``."""
        return self._position

    @property
    def color(self) -> ColorRGBAINT:
        return self._color

    def with_position(self, position: Real) -> ColorKey:
        """Return a copy of this key moved to ``position``."""
        return ColorKey(position, self._color)

    def with_color(self, color: ColorKeyColor) -> ColorKey:
        return ColorKey(float(self._position), color)

    @staticmethod
    def compare(x: ColorKey, y: ColorKey) -> int:
        """-1 if ``x`` sits before ``y``, 1 if after, 0 on equal positions."""
        x_pos, y_pos = float(x.position), float(y.position)
        if x_pos == y_pos:
            return 0
        return -1 if x_pos < y_pos else 1

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorKey):
            return NotImplemented
        return float(self._position) == float(other._position) and self._color == other._color

    def __hash__(self) -> int:
        return hash((float(self._position), self._color))

    def __repr__(self) -> str:
        return f"ColorKey({float(self._position)!r}, {self._color.value!r})"


sort_key = cmp_to_key(ColorKey.compare)


__all__ = ["ColorKey", "ColorKeyColor", "sort_key"]

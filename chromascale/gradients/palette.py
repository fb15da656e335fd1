from __future__ import annotations
from collections.abc import Sequence
from typing import Iterable, Union, overload

import numpy as np

from ..colors.rgb import ColorRGBAINT
from ..colors.pixel_layout import PixelLayout, as_pixel_layout


class Palette(Sequence):
    """
    Immutable, indexed sequence of :class:`ColorRGBAINT`.

    A palette is a snapshot: it never aliases the storage of the gradient
    that produced it.
    """

    __slots__ = ('_colors',)

    def __init__(self, colors: Iterable[ColorRGBAINT] = ()) -> None:
        self._colors: tuple[ColorRGBAINT, ...] = tuple(colors)
        for color in self._colors:
            if not isinstance(color, ColorRGBAINT) or color.is_array:
                raise TypeError(f"Palette entries must be scalar ColorRGBAINT, got {color!r}")

    @classmethod
    def from_array(cls, rgba: np.ndarray) -> Palette:
        """Build a palette from an ``(n, 4)`` RGBA array of 8-bit values."""
        rows = np.asarray(rgba).reshape(-1, 4).tolist()
        return cls(ColorRGBAINT(tuple(row)) for row in rows)

    @overload
    def __getitem__(self, index: int) -> ColorRGBAINT: ...
    @overload
    def __getitem__(self, index: slice) -> Palette: ...

    def __getitem__(self, index: Union[int, slice]) -> Union[ColorRGBAINT, Palette]:
        if isinstance(index, slice):
            return Palette(self._colors[index])
        return self._colors[index]

    def __len__(self) -> int:
        return len(self._colors)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Palette):
            return self._colors == other._colors
        if isinstance(other, (list, tuple)):
            return self._colors == tuple(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._colors)

    def __repr__(self) -> str:
        return f"Palette(<{len(self._colors)} colors>)"

    def to_array(self) -> np.ndarray:
        """Return a new ``(n, 4)`` uint8 array of ``(r, g, b, a)`` rows."""
        return np.array([c.value for c in self._colors], dtype=np.uint8).reshape(-1, 4)

    def to_color(self) -> ColorRGBAINT:
        """Return the palette as a single array-valued color."""
        return ColorRGBAINT(self.to_array())

    def to_bytes(self, layout: Union[PixelLayout, str] = PixelLayout.RGBA) -> bytes:
        """Pack the palette as raw pixels in the given channel order."""
        return as_pixel_layout(layout).pack_array(self.to_array())


__all__ = ["Palette"]

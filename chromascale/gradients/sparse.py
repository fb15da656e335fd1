"""
Sparse gradients: color keys positioned on [0, 1] and a cached palette.

A :class:`ColorsCollection` is a mutable sequence of :class:`ColorKey`. Every
mutation re-sorts the keys by position and rebuilds the whole palette, so the
palette always reflects the current keys:

- before the first key: transparent
- on a key: the key color, unchanged
- between two keys: linear interpolation of r, g, b, fully opaque
- after the last key: the last key color

>>> from chromascale import ColorsCollection, ColorKey
>>> colors = ColorsCollection(11, [ColorKey(0.0, (0, 0, 0)), ColorKey(1.0, (255, 255, 255))])
>>> colors.query_palette(0.5).value
(128, 128, 128, 255)
"""
from __future__ import annotations
import logging
import warnings
from collections.abc import MutableSequence
from numbers import Integral
from typing import Iterable, Iterator, List, Optional, Union, overload

from ..colors.rgb import ColorRGBAINT, TRANSPARENT
from ..config import DEFAULT_PALETTE_CONFIG, PaletteConfig
from ..errors import ErrorCode, OutOfRangeError, check_unit_interval
from ..observable import PropertyChangedCallback, PropertyChangedNotifier
from ..utils import value_or_default
from .color_key import ColorKey, sort_key
from .interpolation import find_segment, lerp_byte
from .palette import Palette

logger = logging.getLogger(__name__)


def _position_of(key: ColorKey) -> float:
    return float(key.position)


def _check_key(item: object) -> ColorKey:
    if not isinstance(item, ColorKey):
        raise TypeError(f"ColorsCollection items must be ColorKey, got {type(item).__name__}")
    return item


class ColorsCollection(PropertyChangedNotifier, MutableSequence):
    """
    Gradient defined by linear interpolation between color keys.

    Args:
        palette_size: Number of palette entries, strictly greater than 1.
            Defaults to ``config.DEFAULT_PALETTE_SIZE``.
        keys: Initial color keys.
        inverted: Build the palette from position 1 down to 0.
        config: Palette defaults.
        on_change: Optional callback subscribed after the initial build.

    Observable properties: ``"palette"`` (after every rebuild),
    ``"palette_size"`` and ``"inverted"``.
    """

    def __init__(
        self,
        palette_size: Optional[int] = None,
        keys: Iterable[ColorKey] = (),
        *,
        inverted: bool = False,
        config: Optional[PaletteConfig] = None,
        on_change: Optional[PropertyChangedCallback] = None,
    ) -> None:
        super().__init__()
        self._config = value_or_default(config, DEFAULT_PALETTE_CONFIG)
        self._keys: List[ColorKey] = [_check_key(k) for k in keys]
        self._warn_if_shadowed(self._keys, [])
        self._inverted = bool(inverted)
        self._palette: List[ColorRGBAINT] = []
        self.palette_size = value_or_default(palette_size, self._config.DEFAULT_PALETTE_SIZE)
        if on_change is not None:
            self.subscribe(on_change)

    # ------------------ COLOR KEYS ------------------
    @overload
    def __getitem__(self, index: int) -> ColorKey: ...
    @overload
    def __getitem__(self, index: slice) -> List[ColorKey]: ...

    def __getitem__(self, index: Union[int, slice]) -> Union[ColorKey, List[ColorKey]]:
        return self._keys[index]

    def __setitem__(self, index: Union[int, slice], value) -> None:
        if isinstance(index, slice):
            new_keys = [_check_key(k) for k in value]
            remaining = [k for i, k in enumerate(self._keys) if i not in range(*index.indices(len(self._keys)))]
            self._warn_if_shadowed(new_keys, remaining)
            self._keys[index] = new_keys
        else:
            key = _check_key(value)
            position = range(len(self._keys))[index]
            self._warn_if_shadowed([key], self._keys[:position] + self._keys[position + 1:])
            self._keys[index] = key
        self._update_palette()

    def __delitem__(self, index: Union[int, slice]) -> None:
        del self._keys[index]
        self._update_palette()

    def __len__(self) -> int:
        return len(self._keys)

    def __iter__(self) -> Iterator[ColorKey]:
        return iter(self._keys)

    def insert(self, index: int, value: ColorKey) -> None:
        key = _check_key(value)
        self._warn_if_shadowed([key], self._keys)
        self._keys.insert(index, key)
        self._update_palette()

    def extend(self, values: Iterable[ColorKey]) -> None:
        """Append several keys with a single palette rebuild."""
        new_keys = [_check_key(k) for k in values]
        self._warn_if_shadowed(new_keys, self._keys)
        self._keys.extend(new_keys)
        self._update_palette()

    def clear(self) -> None:
        """Remove all keys; the palette becomes fully transparent."""
        self._keys.clear()
        self._update_palette()

    def reverse(self) -> None:
        """Not supported: keys are always kept sorted by position. Use :attr:`inverted`."""
        raise TypeError("ColorsCollection keys are sorted by position and cannot be reversed; set inverted instead")

    @staticmethod
    def _warn_if_shadowed(new_keys: List[ColorKey], existing: List[ColorKey]) -> None:
        by_position = {}
        for key in existing:
            by_position.setdefault(float(key.position), key)
        for key in new_keys:
            other = by_position.setdefault(float(key.position), key)
            if other is not key and other.color != key.color:
                warnings.warn(
                    f"{key!r} shares its position with {other!r}; "
                    "the gradient is discontinuous at that position",
                    stacklevel=3,
                )

    # ------------------ PALETTE ------------------
    @property
    def palette_size(self) -> int:
        """Number of palette entries. Setting it rebuilds the palette."""
        return len(self._palette)

    @palette_size.setter
    def palette_size(self, value: int) -> None:
        if isinstance(value, bool) or not isinstance(value, Integral):
            raise TypeError(f"palette_size must be an integer, got {type(value).__name__}")
        if value <= 1:
            raise OutOfRangeError("palette_size", ErrorCode.VALUE_NOT_STRICTLY_POSITIVE, f"got {value}")
        changed = value != len(self._palette)
        self._palette = [TRANSPARENT] * int(value)
        self._update_palette()
        if changed:
            self._notify("palette_size")

    @property
    def inverted(self) -> bool:
        """When True the palette runs from position 1 down to position 0."""
        return self._inverted

    @inverted.setter
    def inverted(self, value: bool) -> None:
        value = bool(value)
        if value == self._inverted:
            return
        self._inverted = value
        self._update_palette()
        self._notify("inverted")

    @property
    def palette(self) -> Palette:
        """Snapshot of the current palette."""
        return Palette(self._palette)

    def query_palette(self, scale: float, inverse: bool = False) -> ColorRGBAINT:
        """
        Palette entry nearest to ``scale``.

        Args:
            scale: Relative position in ``[0, 1]``
            inverse: Read the palette from its end

        Raises:
            OutOfRangeError: ``scale`` is outside ``[0, 1]``.
        """
        check_unit_interval(scale, "scale")
        last_index = len(self._palette) - 1
        index = int(round(scale * last_index))
        return self._palette[last_index - index] if inverse else self._palette[index]

    def interpolate(self, position: float) -> ColorRGBAINT:
        """Color at ``position`` computed from the keys, not snapped to the palette."""
        check_unit_interval(position, "position")
        if self._inverted:
            position = 1 - position
        return self._compute_color(position)

    def _update_palette(self) -> None:
        self._keys.sort(key=sort_key)

        last_index = len(self._palette) - 1
        for index in range(len(self._palette)):
            position = index / last_index
            if self._inverted:
                position = 1 - position
            self._palette[index] = self._compute_color(position)

        logger.debug("palette rebuilt: %d entries from %d keys (inverted=%s)",
                     len(self._palette), len(self._keys), self._inverted)
        self._notify("palette")

    def _compute_color(self, position: float) -> ColorRGBAINT:
        if not self._keys:
            return TRANSPARENT

        exact, start, end = find_segment(self._keys, position, key=_position_of)
        if exact is not None:
            return exact.color
        if start is None:
            return TRANSPARENT
        if end is None:
            return start.color

        start_pos, end_pos = _position_of(start), _position_of(end)
        relative = (position - start_pos) / (end_pos - start_pos)
        start_rgb, end_rgb = start.color.value, end.color.value
        return ColorRGBAINT((
            lerp_byte(start_rgb[0], end_rgb[0], relative),
            lerp_byte(start_rgb[1], end_rgb[1], relative),
            lerp_byte(start_rgb[2], end_rgb[2], relative),
            ColorRGBAINT.alpha_max,
        ))

    def __repr__(self) -> str:
        return (f"ColorsCollection(palette_size={len(self._palette)}, "
                f"keys={self._keys!r}, inverted={self._inverted})")


SparseGradient = ColorsCollection


__all__ = ["ColorsCollection", "SparseGradient"]

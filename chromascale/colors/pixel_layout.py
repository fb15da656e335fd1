"""
Byte order of packed pixels.

Platform surfaces disagree on channel order (Direct2D/DirectX B8G8R8A8
surfaces want blue first, most image libraries want RGBA). The order is a
property of the destination pixel format, so it is passed in, never assumed.
"""
from __future__ import annotations
from enum import Enum
from typing import Iterable, Tuple, Union

import numpy as np

from .rgb import ColorRGBAINT

# Channel positions inside a ColorRGBAINT value
_CHANNEL_INDEX = {"r": 0, "g": 1, "b": 2, "a": 3}


class PixelLayout(str, Enum):
    RGBA = "rgba"
    BGRA = "bgra"
    ARGB = "argb"
    ABGR = "abgr"

    @property
    def channel_order(self) -> Tuple[int, int, int, int]:
        """Indices into an ``(r, g, b, a)`` value, in output order."""
        return tuple(_CHANNEL_INDEX[c] for c in self.value)  # type: ignore[return-value]

    def pack(self, color: ColorRGBAINT) -> bytes:
        """Pack a single color, or an array-valued color, into raw bytes."""
        if color.is_array:
            return self.pack_array(color.value)  # type: ignore[arg-type]
        channels = color.value
        return bytes(channels[i] for i in self.channel_order)  # type: ignore[index]

    def pack_array(self, rgba: np.ndarray) -> bytes:
        """Pack an ``(..., 4)`` uint8 RGBA array into raw bytes."""
        arr = np.asarray(rgba)
        if arr.shape[-1] != 4:
            raise ValueError(f"expected RGBA array with last dimension 4, got shape {arr.shape}")
        return np.ascontiguousarray(arr[..., list(self.channel_order)], dtype=np.uint8).tobytes()

    def pack_many(self, colors: Iterable[ColorRGBAINT]) -> bytes:
        return b"".join(self.pack(c) for c in colors)


def as_pixel_layout(layout: Union[PixelLayout, str]) -> PixelLayout:
    """Accept a PixelLayout or its case-insensitive name (``"bgra"``)."""
    if isinstance(layout, PixelLayout):
        return layout
    return PixelLayout(layout.lower())

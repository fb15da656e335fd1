from __future__ import annotations
from typing import ClassVar, Tuple
from ..types.format_type import FormatType
from ..types.color_types import ColorSpace
from .color_base import ColorBase, WithAlpha, WithRGB, build_registry


class ColorRGBINT(ColorBase, WithRGB):
    __slots__ = ()
    num_channels: ClassVar[int] = 3
    mode: ClassVar[ColorSpace] = "rgb"
    maxima: ClassVar[Tuple[int, int, int]] = (255, 255, 255)
    null_value: ClassVar[Tuple[int, int, int]] = (0, 0, 0)
    format_type: ClassVar[FormatType] = FormatType.INT


class ColorRGBAINT(ColorBase, WithRGB, WithAlpha):
    """
    8-bit RGBA color, value ``(r, g, b, a)``.

    This is the color type produced by every gradient query. Build one from
    ARGB components with :meth:`from_argb`.
    """
    __slots__ = ()
    num_channels: ClassVar[int] = 4
    mode: ClassVar[ColorSpace] = "rgba"
    maxima: ClassVar[Tuple[int, int, int, int]] = (255, 255, 255, 255)
    null_value: ClassVar[Tuple[int, int, int, int]] = (0, 0, 0, 0)
    format_type: ClassVar[FormatType] = FormatType.INT
    alpha_max: ClassVar[int] = 255

    @classmethod
    def from_argb(cls, a: int, r: int, g: int, b: int) -> ColorRGBAINT:
        return cls((r, g, b, a))

    @property
    def is_opaque(self) -> bool:
        return not self.is_array and self.alpha == self.alpha_max


class ColorUnitRGB(ColorBase, WithRGB):
    """Normalized sRGB triple, every channel in ``[0.0, 1.0]``."""
    __slots__ = ()
    num_channels: ClassVar[int] = 3
    mode: ClassVar[ColorSpace] = "rgb"
    maxima: ClassVar[Tuple[float, float, float]] = (1.0, 1.0, 1.0)
    null_value: ClassVar[Tuple[float, float, float]] = (0.0, 0.0, 0.0)
    format_type: ClassVar[FormatType] = FormatType.FLOAT


class ColorUnitRGBA(ColorBase, WithRGB, WithAlpha):
    __slots__ = ()
    num_channels: ClassVar[int] = 4
    mode: ClassVar[ColorSpace] = "rgba"
    maxima: ClassVar[Tuple[float, float, float, float]] = (1.0, 1.0, 1.0, 1.0)
    null_value: ClassVar[Tuple[float, float, float, float]] = (0.0, 0.0, 0.0, 0.0)
    format_type: ClassVar[FormatType] = FormatType.FLOAT
    alpha_max: ClassVar[float] = 1.0


Color = ColorRGBAINT

TRANSPARENT = ColorRGBAINT(ColorRGBAINT.null_value)


rgb_tuple_to_class = build_registry(
    ColorRGBINT,
    ColorRGBAINT,
    ColorUnitRGB,
    ColorUnitRGBA,
)

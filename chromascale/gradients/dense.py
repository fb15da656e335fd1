"""
Dense gradients: a fixed array of sRGB samples queried by linear interpolation.

Sample ``i`` of an ``L``-sample gradient sits at position ``i / (L - 1)``.
A query at ``position`` interpolates between the two samples surrounding
``position * (L - 1)`` and returns an opaque color.

``ColorScale`` and ``ColorMap`` are the 256-sample variants; ``ColorMap``
additionally packs palettes into raw pixel bytes for a configurable
:class:`PixelLayout`.
"""
from __future__ import annotations
import logging
from collections.abc import Sequence
from numbers import Integral
from typing import ClassVar, Iterable, Optional, Union

import numpy as np

from ..colors.color_base import ColorBase
from ..colors.pixel_layout import PixelLayout, as_pixel_layout
from ..colors.rgb import ColorRGBAINT, ColorUnitRGB
from ..config import ColorMapConfig, DEFAULT_COLOR_MAP_CONFIG
from ..conversions import np_unit_to_byte
from ..errors import (
    ErrorCode,
    InvalidLengthError,
    NullOrMissingInputError,
    OutOfRangeError,
    check_unit_interval,
)
from ..types.color_types import SRGBTriple
from ..utils import value_or_default
from .interpolation import lerp_channels, np_lerp, split_index
from .palette import Palette

logger = logging.getLogger(__name__)

ColorDataInput = Union[np.ndarray, Iterable[Union[SRGBTriple, ColorUnitRGB]]]


class DenseGradient:
    """
    Immutable gradient over an ordered array of sRGB triples.

    Args:
        color_data: Two or more ``(r, g, b)`` triples with channels in
            ``[0, 1]``, as a sequence, an ``(L, 3)`` array, or
            :class:`ColorUnitRGB` instances.

    Raises:
        NullOrMissingInputError: ``color_data`` is None or empty.
        InvalidLengthError: wrong number of samples, or a sample without
            exactly three channels.
        OutOfRangeError: a channel lies outside ``[0, 1]``.
    """

    expected_length: ClassVar[Optional[int]] = None
    min_length: ClassVar[int] = 2

    __slots__ = ('_color_data',)

    def __init__(self, color_data: ColorDataInput) -> None:
        self._color_data = self._validate_color_data(color_data)
        logger.debug("%s created with %d samples", type(self).__name__, len(self._color_data))

    def _required_length(self) -> Optional[int]:
        return self.expected_length

    def _validate_color_data(self, color_data: ColorDataInput) -> np.ndarray:
        if color_data is None:
            raise NullOrMissingInputError("color_data")

        if isinstance(color_data, np.ndarray):
            samples = color_data
        else:
            samples = [
                sample.value if isinstance(sample, ColorBase) else tuple(sample)
                for sample in color_data
            ]
        count = len(samples)
        if count == 0:
            raise NullOrMissingInputError("color_data")

        required = self._required_length()
        if required is not None and count != required:
            raise InvalidLengthError(
                "color_data", ErrorCode.WRONG_COLOR_DATA_ARRAY_SIZE, f"expected {required}, got {count}"
            )
        if count < self.min_length:
            raise InvalidLengthError(
                "color_data", ErrorCode.WRONG_COLOR_DATA_ARRAY_SIZE,
                f"at least {self.min_length} samples are required, got {count}",
            )

        if isinstance(samples, np.ndarray):
            if samples.ndim != 2 or samples.shape[1] != 3:
                raise InvalidLengthError(
                    "color_data", ErrorCode.WRONG_CHANNEL_COUNT, f"expected shape (L, 3), got {samples.shape}"
                )
        else:
            for index, sample in enumerate(samples):
                if len(sample) != 3:
                    raise InvalidLengthError(
                        "color_data", ErrorCode.WRONG_CHANNEL_COUNT, f"sample {index} is {sample!r}"
                    )

        data = np.array(samples, dtype=np.float64)
        in_range = (data >= 0.0) & (data <= 1.0)
        if not in_range.all():
            index = int(np.argmin(in_range.all(axis=1)))
            raise OutOfRangeError("color_data", detail=f"sample {index} is {tuple(data[index].tolist())}")

        data.flags.writeable = False
        return data

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def color_data(self) -> np.ndarray:
        """The samples as a read-only ``(L, 3)`` float array."""
        return self._color_data

    def __len__(self) -> int:
        return len(self._color_data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(<{len(self._color_data)} samples>)"

    # ------------------ QUERIES ------------------
    def _sample(self, position: float) -> SRGBTriple:
        data = self._color_data
        last_index = len(data) - 1
        if position == 1.0:
            return tuple(data[last_index].tolist())  # type: ignore[return-value]

        low_index, factor = split_index(position, last_index)
        if low_index >= last_index:
            return tuple(data[last_index].tolist())  # type: ignore[return-value]
        channels = lerp_channels(data[low_index].tolist(), data[low_index + 1].tolist(), factor)
        return tuple(min(max(c, 0.0), 1.0) for c in channels)  # type: ignore[return-value]

    def _sample_array(self, positions: np.ndarray) -> np.ndarray:
        data = self._color_data
        last_index = len(data) - 1
        index = positions * last_index
        low_index = np.floor(index).astype(np.intp)
        at_end = low_index >= last_index
        low_index = np.minimum(low_index, last_index - 1)
        factor = index - low_index
        values = np.clip(np_lerp(data[low_index], data[low_index + 1], factor), 0.0, 1.0)
        return np.where(at_end[..., None], data[last_index], values)

    def interpolate_srgb(self, position: float, inverse: bool = False) -> ColorUnitRGB:
        """
        Interpolated sRGB triple at ``position``.

        Args:
            position: Relative position in ``[0, 1]``
            inverse: Read the gradient from its end

        Raises:
            OutOfRangeError: ``position`` is outside ``[0, 1]``.
        """
        check_unit_interval(position, "position")
        if inverse:
            position = 1 - position
        return ColorUnitRGB(self._sample(position))

    def interpolate(self, position: float, inverse: bool = False) -> ColorRGBAINT:
        """
        Opaque 8-bit color at ``position``.

        Channels are rounded from ``value * 255`` to the nearest integer.

        >>> scale = DenseGradient([(0.0, 0.0, 0.0), (1.0, 1.0, 1.0)])
        >>> scale.interpolate(0.5).value
        (128, 128, 128, 255)
        """
        return self.interpolate_srgb(position, inverse).convert("rgba", "int")  # type: ignore[return-value]

    def interpolate_array(self, positions: Union[Sequence[float], np.ndarray], inverse: bool = False) -> ColorRGBAINT:
        """
        Vectorized :meth:`interpolate`.

        Returns:
            Array-valued ColorRGBAINT of shape ``positions.shape + (4,)``.
        """
        pos = np.asarray(positions, dtype=np.float64)
        if not np.all((pos >= 0.0) & (pos <= 1.0)):
            raise OutOfRangeError("positions")
        if inverse:
            pos = 1 - pos
        rgb = np_unit_to_byte(self._sample_array(pos))
        alpha = np.full(rgb.shape[:-1] + (1,), ColorRGBAINT.alpha_max, dtype=np.uint8)
        return ColorRGBAINT(np.concatenate([rgb, alpha], axis=-1))

    def indexed_palette(self, count: int) -> Palette:
        """
        Materialize ``count`` colors sampled at ``i / count`` for ``i`` in ``[0, count)``.

        The denominator is ``count``: the last entry lands one step short of
        position 1.0, unlike the palettes of ``ColorsCollection`` which
        include both ends.

        Raises:
            OutOfRangeError: ``count`` is lower than 1.
        """
        if isinstance(count, bool) or not isinstance(count, Integral):
            raise TypeError(f"count must be an integer, got {type(count).__name__}")
        if count < 1:
            raise OutOfRangeError("count", ErrorCode.VALUE_NOT_POSITIVE, f"got {count}")
        positions = np.arange(count, dtype=np.float64) / count
        return Palette.from_array(self.interpolate_array(positions).value)  # type: ignore[arg-type]


class ColorScale(DenseGradient):
    """256-sample dense gradient."""

    expected_length: ClassVar[Optional[int]] = DEFAULT_COLOR_MAP_CONFIG.COLOR_DATA_LENGTH

    __slots__ = ()


class ColorMap(DenseGradient):
    """
    256-sample dense gradient that can be exported as raw pixels.

    The sample count and the default pixel layout come from ``config``.
    """

    __slots__ = ('_config',)

    def __init__(self, color_data: ColorDataInput, config: Optional[ColorMapConfig] = None) -> None:
        self._config = value_or_default(config, DEFAULT_COLOR_MAP_CONFIG)
        super().__init__(color_data)

    def _required_length(self) -> Optional[int]:
        return self._config.COLOR_DATA_LENGTH

    @property
    def config(self) -> ColorMapConfig:
        return self._config

    def to_pixel_bytes(self, count: Optional[int] = None, layout: Union[PixelLayout, str, None] = None) -> bytes:
        """
        Indexed palette of ``count`` entries (default: one per sample) packed as raw pixels.

        Args:
            count: Number of palette entries
            layout: Channel order, defaults to ``config.PIXEL_LAYOUT``
        """
        pixel_layout = as_pixel_layout(value_or_default(layout, self._config.PIXEL_LAYOUT))
        palette = self.indexed_palette(value_or_default(count, len(self)))
        return palette.to_bytes(pixel_layout)


__all__ = ["DenseGradient", "ColorScale", "ColorMap", "ColorDataInput"]

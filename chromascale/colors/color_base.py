from __future__ import annotations
from typing import Any, ClassVar, Tuple, cast, Self, Callable, Union
from ..types.format_type import FormatType, format_classes, format_valid_dtypes, default_format_dtypes
from ..types.color_types import ColorElement, ColorValue, Scalar, ScalarVector, ColorSpace
from ..errors import ErrorCode, InvalidLengthError, OutOfRangeError
from ..utils import get_dimension
from abc import ABC
from numpy import ndarray
import numpy as np


class ColorBase:
    __slots__ = ('_value', '_is_frozen')  # prevents adding new attributes → immutability

    num_channels: ClassVar[int] = 1
    mode:       ClassVar[ColorSpace]
    maxima:     ClassVar[ColorElement]
    null_value: ClassVar[ColorElement]
    format_type: ClassVar[FormatType]
    convert: Callable[..., ColorBase]
    with_alpha: Callable[..., ColorBase]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: ColorValue) -> None:
        maxima_dim = get_dimension(self.maxima)

        if self.num_channels != maxima_dim:
            raise ValueError(f"{self.mode} expects {self.maxima!r}-shaped maxima")

        # ---- Handle ColorBase input ----
        if isinstance(value, ColorBase):
            if value.mode == self.mode and value.format_type == self.format_type:
                value = value.value
            else:
                value = value.convert(self.mode, self.format_type).value

        if isinstance(value, ndarray):
            value = self._validate_array(value)
        else:
            value = self._validate_scalar(value)

        # safe assignment; __setattr__ still allows it during init
        self._value = value

        # freeze instance, no more writes allowed
        super().__setattr__('_is_frozen', True)

    def _validate_array(self, arr: ndarray) -> ndarray:
        # Validate dtype
        valid_types = format_valid_dtypes[self.format_type]
        if not isinstance(arr.dtype.type(0), valid_types):
            raise TypeError(
                f"{self.mode} with format {self.format_type} expects dtype compatible with {valid_types}, "
                f"got {arr.dtype}"
            )

        # Validate shape: last dimension should match num_channels
        if arr.ndim == 0 or arr.shape[-1] != self.num_channels:
            raise InvalidLengthError(
                "value", ErrorCode.WRONG_CHANNEL_COUNT,
                f"{self.mode} expects last dimension {self.num_channels}, got shape {arr.shape}",
            )

        maxima_array = np.array(self.maxima, dtype=np.float64)
        as_float = arr.astype(np.float64)
        if not np.all((as_float >= 0) & (as_float <= maxima_array)):
            raise OutOfRangeError("value", ErrorCode.CHANNEL_OUT_OF_RANGE, f"{self.mode} maxima {self.maxima!r}")

        # Own a read-only copy with the format dtype
        arr = np.array(arr, dtype=default_format_dtypes[self.format_type], copy=True)
        arr.flags.writeable = False
        return arr

    def _validate_scalar(self, value: ColorElement) -> ColorElement:
        maxima_dim = get_dimension(self.maxima)
        value_dim = get_dimension(value)
        if maxima_dim != value_dim:
            raise InvalidLengthError(
                "value", ErrorCode.WRONG_CHANNEL_COUNT,
                f"{self.mode} expects {self.maxima!r}-shaped value, got {value!r}",
            )

        # type enforcement
        if value_dim == 1:
            value = self._cast_channel(value)
        else:
            value = tuple(self._cast_channel(v) for v in cast(Tuple[Any, ...], value))

        if isinstance(self.maxima, tuple):
            channels = cast(Tuple[Scalar, ...], value)
            in_range = all(0 <= v <= m for v, m in zip(channels, cast(Tuple[Scalar, ...], self.maxima)))
        else:
            in_range = 0 <= value <= self.maxima
        if not in_range:
            raise OutOfRangeError(
                "value", ErrorCode.CHANNEL_OUT_OF_RANGE, f"{value!r} not within {self.maxima!r}"
            )
        return value

    def _cast_channel(self, channel: Any) -> Scalar:
        # fractional bytes are rejected, not truncated
        if (self.format_type == FormatType.INT and isinstance(channel, (float, np.floating))
                and not float(channel).is_integer()):
            raise TypeError(f"{self.mode} with format {self.format_type} expects integral channels, got {channel!r}")
        return format_classes[self.format_type](channel)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> ColorValue:
        return self._value

    @property
    def is_array(self) -> bool:
        """Check if this color contains an array of colors."""
        return isinstance(self._value, ndarray)

    @property
    def shape(self) -> Tuple[int, ...] | None:
        """Return shape of the array, or None if scalar."""
        if isinstance(self._value, ndarray):
            return self._value.shape
        return None

    @property
    def has_alpha(self) -> bool:
        """Check if this color space includes an alpha channel."""
        return self.mode.endswith('a')

    def __len__(self) -> int:
        if isinstance(self._value, ndarray):
            return len(self._value)
        return self.num_channels

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        if (self.mode, self.format_type) != (other.mode, other.format_type):
            return False
        if self.is_array or other.is_array:
            return self.is_array and other.is_array and np.array_equal(self._value, other._value)
        return self._value == other._value

    def __hash__(self) -> int:
        if self.is_array:
            raise TypeError(f"unhashable array-valued {self.__class__.__name__}")
        return hash((self.mode, self.format_type, self._value))

    def __repr__(self) -> str:
        if isinstance(self._value, ndarray):
            return f"{self.__class__.__name__}(<array shape={self._value.shape}>)"
        return f"{self.__class__.__name__}({self._value!r})"


class WithRGB(ABC):
    """
    Mixin exposing the red, green and blue channels of an RGB(A) color.

    Channel accessors return scalars for scalar colors and 1D arrays for
    array-valued colors.
    """

    __slots__ = ()

    value: ColorValue

    def _channel(self, index: int) -> Union[Scalar, ndarray]:
        if isinstance(self.value, ndarray):
            return self.value[..., index]
        return cast(Tuple[Scalar, ...], self.value)[index]

    @property
    def r(self) -> Union[Scalar, ndarray]:
        return self._channel(0)

    @property
    def g(self) -> Union[Scalar, ndarray]:
        return self._channel(1)

    @property
    def b(self) -> Union[Scalar, ndarray]:
        return self._channel(2)


class WithAlpha(ABC):
    """
    Mixin for a ColorBase subclass that includes an alpha channel.
    Assumes alpha is the *last* channel.

    Note: For array values, alpha operations work on the entire array.
    Use array indexing arr[..., -1] to access alpha channel.
    """

    __slots__ = ()

    # Tell static checkers these come from the real subclass
    num_channels: ClassVar[int]
    maxima: ClassVar[ColorElement]
    mode: ClassVar[ColorSpace]
    value: ColorValue  # Can be scalar tuple or ndarray
    is_array: bool

    format_type: ClassVar[FormatType]

    alpha_index: ClassVar[int] = -1
    alpha_max:   ClassVar[Scalar]

    @property
    def alpha(self) -> Union[Scalar, ndarray]:
        """
        Get alpha channel value.

        Returns:
            Scalar if value is tuple/scalar, ndarray if value is array.
        """
        if isinstance(self.value, ndarray):
            return self.value[..., self.alpha_index]
        else:
            return cast(Tuple[Scalar, ...], self.value)[self.alpha_index]

    def with_alpha(self, alpha: Union[Scalar, ndarray]) -> Self:
        """
        Return a new instance with modified alpha channel.

        Args:
            alpha: New alpha value(s). Can be scalar or array matching shape.

        Returns:
            New color instance with updated alpha.

        Raises:
            OutOfRangeError: If alpha is outside ``[0, alpha_max]``.
        """
        if isinstance(self.value, ndarray):
            if isinstance(alpha, ndarray) and alpha.shape != self.value.shape[:-1]:
                raise InvalidLengthError(
                    "alpha", ErrorCode.WRONG_CHANNEL_COUNT,
                    f"alpha shape {alpha.shape} doesn't match color shape {self.value.shape[:-1]}",
                )
            # Widen so out-of-range alpha reaches validation instead of wrapping
            work_dtype = np.float64 if self.format_type == FormatType.FLOAT else np.int64
            a = np.broadcast_to(np.asarray(alpha, dtype=work_dtype), self.value.shape[:-1])
            new_vals = np.concatenate([
                self.value[..., :-1].astype(work_dtype),
                np.expand_dims(a, axis=-1),
            ], axis=-1)
        else:
            if isinstance(alpha, ndarray):
                raise TypeError("Cannot use array alpha with scalar color value")
            values = cast(Tuple[Scalar, ...], self.value)
            new_vals = values[:-1] + (alpha,)

        return self.__class__(new_vals)  # type: ignore


def build_registry(*classes: type[ColorBase]):
    return {
        (cls.mode, cls.format_type): cls
        for cls in classes
    }

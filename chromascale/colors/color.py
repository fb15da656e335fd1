from __future__ import annotations
from .color_base import ColorBase, WithAlpha
from .rgb import rgb_tuple_to_class
from ..types.format_type import FormatType, max_non_hue
from ..conversions import convert, np_convert
from ..types.color_types import ColorSpace, ColorValue
from typing import Optional
from numpy import ndarray
import numpy as np

unified_tuple_to_class: dict[tuple[ColorSpace, FormatType], type[ColorBase]] = {**rgb_tuple_to_class}


def color_convert(self: ColorBase, to_space: ColorSpace | None = None, to_format: FormatType | None = None) -> ColorBase:
    """
    Convert this color to a different space (rgb/rgba) and/or format.

    Adding an alpha channel uses the maximum alpha of the target format;
    converting to "rgb" drops alpha.

    Args:
        to_space: Target color space ("rgb" or "rgba"). Defaults to current space.
        to_format: Target format type (INT, FLOAT). Defaults to current format.

    Returns:
        New ColorBase instance in the target space/format
    """
    to_space = (to_space or self.mode).lower()  # type: ignore
    to_format = FormatType(to_format or self.format_type)
    value = self.value

    if self.has_alpha and not to_space.endswith("a"):
        value = value[..., :-1] if isinstance(value, ndarray) else value[:-1]

    if isinstance(value, ndarray):
        result = np_convert(value, self.format_type, to_format)
    else:
        result = convert(value, self.format_type, to_format)

    if to_space.endswith("a") and not self.has_alpha:
        max_alpha = max_non_hue[to_format]
        if isinstance(result, ndarray):
            alpha = np.full(result.shape[:-1] + (1,), max_alpha, dtype=result.dtype)
            result = np.concatenate([result, alpha], axis=-1)
        else:
            result = tuple(result) + (max_alpha,)

    cls = get_color_class(to_space, to_format)
    return cls(result)


def with_alpha(self: ColorBase, alpha: Optional[ColorValue] = None) -> ColorBase:
    """
    Return an RGBA color with the specified alpha.

    Args:
        alpha: Alpha value to set. If None, uses maximum alpha for the format.

    Returns:
        New ColorBase instance with alpha channel.
    """
    if alpha is None:
        alpha = max_non_hue[self.format_type]

    if self.has_alpha:
        return WithAlpha.with_alpha(self, alpha)  # type: ignore

    if isinstance(self.value, ndarray):
        alpha_array = np.broadcast_to(np.asarray(alpha), self.value.shape[:-1])
        new_value = np.concatenate(
            [self.value, np.expand_dims(alpha_array, axis=-1).astype(self.value.dtype)], axis=-1
        )
    else:
        if isinstance(alpha, ndarray):
            raise TypeError("Cannot use array alpha with scalar color value")
        new_value = tuple(self.value) + (alpha,)

    cls = get_color_class(self.mode + "a", self.format_type)
    return cls(new_value)


ColorBase.convert = color_convert
ColorBase.with_alpha = with_alpha


def get_color_class(color_space: str, format_type: FormatType) -> type[ColorBase]:
    color_class = unified_tuple_to_class.get((color_space, FormatType(format_type)))
    if color_class is None:
        raise ValueError(
            f"Unsupported color space/format combination: {color_space}/{format_type}"
        )
    return color_class


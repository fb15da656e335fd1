"""
Chromascale Color Classes
=========================

Immutable RGB(A) color classes used as inputs and outputs of the gradient
types, in integer (0-255) and unit float (0.0-1.0) formats.

Features
--------
- Immutable color instances (frozen after initialization)
- Scalar colors (single color values) and array colors (batch results)
- Validation: wrong channel count raises InvalidLengthError, channel values
  outside the format maxima raise OutOfRangeError
- Value equality and hashing for scalar colors
- Conversion between rgb/rgba and INT/FLOAT

Usage
-----
>>> from chromascale.colors import ColorRGBAINT, ColorUnitRGB
>>> red = ColorRGBAINT.from_argb(255, 255, 0, 0)
>>> red.value
(255, 0, 0, 255)
>>> ColorUnitRGB((1.0, 0.5, 0.0)).convert("rgba", "int").value
(255, 128, 0, 255)

Color Classes
-------------
    - ColorRGBINT: Integer RGB (0-255)
    - ColorRGBAINT: Integer RGBA with alpha (alias Color)
    - ColorUnitRGB: Float RGB (0.0-1.0), an sRGB triple
    - ColorUnitRGBA: Float RGBA with alpha
"""

from .color_base import ColorBase
from .rgb import (
    ColorRGBINT,
    ColorRGBAINT,
    ColorUnitRGB,
    ColorUnitRGBA,
    Color,
    TRANSPARENT,
)
from .color import color_convert, unified_tuple_to_class, get_color_class
from .pixel_layout import PixelLayout, as_pixel_layout


__all__ = [
    "ColorBase",
    "ColorRGBINT",
    "ColorRGBAINT",
    "ColorUnitRGB",
    "ColorUnitRGBA",
    "Color",
    "TRANSPARENT",
    "color_convert",
    "unified_tuple_to_class",
    "get_color_class",
    "PixelLayout",
    "as_pixel_layout",
]

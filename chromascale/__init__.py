"""Chromascale: color scales, color maps and keyed palettes."""

from .colors import (
    ColorBase,
    ColorRGBINT,
    ColorRGBAINT,
    ColorUnitRGB,
    ColorUnitRGBA,
    Color,
    TRANSPARENT,
    PixelLayout,
)
from .gradients import (
    ColorKey,
    DenseGradient,
    ColorScale,
    ColorMap,
    ColorsCollection,
    SparseGradient,
    Palette,
)
from .errors import (
    ErrorCode,
    ChromascaleError,
    NullOrMissingInputError,
    InvalidLengthError,
    OutOfRangeError,
    set_message_provider,
    get_message,
)
from .config import ColorMapConfig, PaletteConfig
from .observable import PropertyChangedNotifier
from .types.format_type import FormatType

__version__ = "1.0.0"

__all__ = [
    # colors
    "ColorBase",
    "ColorRGBINT",
    "ColorRGBAINT",
    "ColorUnitRGB",
    "ColorUnitRGBA",
    "Color",
    "TRANSPARENT",
    "PixelLayout",
    "FormatType",
    # gradients
    "ColorKey",
    "DenseGradient",
    "ColorScale",
    "ColorMap",
    "ColorsCollection",
    "SparseGradient",
    "Palette",
    # errors
    "ErrorCode",
    "ChromascaleError",
    "NullOrMissingInputError",
    "InvalidLengthError",
    "OutOfRangeError",
    "set_message_provider",
    "get_message",
    # configuration and notification
    "ColorMapConfig",
    "PaletteConfig",
    "PropertyChangedNotifier",
    # version
    "__version__",
]

"""
Configuration defaults
"""

from dataclasses import dataclass

from .colors.pixel_layout import PixelLayout


@dataclass(frozen=True)
class ColorMapConfig:
    """Dense gradient settings"""
    COLOR_DATA_LENGTH: int = 256
    PIXEL_LAYOUT: PixelLayout = PixelLayout.BGRA  # DirectX B8G8R8A8 surfaces


@dataclass(frozen=True)
class PaletteConfig:
    """Sparse gradient settings"""
    DEFAULT_PALETTE_SIZE: int = 256


DEFAULT_COLOR_MAP_CONFIG = ColorMapConfig()
DEFAULT_PALETTE_CONFIG = PaletteConfig()

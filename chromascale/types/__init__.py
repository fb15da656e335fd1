from .format_type import FormatType
from .color_types import ColorSpace, ColorValue, SRGBTriple

__all__ = ["FormatType", "ColorSpace", "ColorValue", "SRGBTriple"]

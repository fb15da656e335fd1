from .color_key import ColorKey
from .dense import DenseGradient, ColorScale, ColorMap
from .sparse import ColorsCollection, SparseGradient
from .palette import Palette
from .interpolation import find_segment, Segment

__all__ = [
    "ColorKey",
    "DenseGradient",
    "ColorScale",
    "ColorMap",
    "ColorsCollection",
    "SparseGradient",
    "Palette",
    "find_segment",
    "Segment",
]

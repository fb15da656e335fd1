from .dimension import get_dimension
from .default import value_or_default

__all__ = ["get_dimension", "value_or_default"]

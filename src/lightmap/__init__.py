"""
LightMap - an insertion-ordered map with functional helpers.

Adds filter/map/reduce, searching, sorting and structural conversion on top
of an ordered key-value map, and builds nested maps from nested lists of
[key, value] pairs.
"""

from .light_map import LightMap, LightMapJSONEncoder
from .parser import LightMapParser
from .types import (
    LightMapOptions,
    ConversionHint,
    LightMapError,
    CircularReferenceError,
    InvalidInputError,
)

__version__ = "1.0.0"
__all__ = [
    "LightMap",
    "LightMapJSONEncoder",
    "LightMapParser",
    "LightMapOptions",
    "ConversionHint",
    "LightMapError",
    "CircularReferenceError",
    "InvalidInputError",
]

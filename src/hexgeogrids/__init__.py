"""
Hexagonal grids on locally flat UTM planes, with compact cell indices.
"""
from .cell import HexCell
from .errors import (
    HexGridError,
    InvalidCenterError,
    InvalidLengthError,
    InvalidSizeError,
    MalformedHashError,
    OutOfRangeError,
)
from .grid import center, index, polygon, polygon_geojson, vertices
from .hexagons import Hex
from .system import HexSystem

__all__ = [
    "Hex",
    "HexCell",
    "HexSystem",
    "center",
    "index",
    "polygon",
    "polygon_geojson",
    "vertices",
    "HexGridError",
    "InvalidCenterError",
    "InvalidLengthError",
    "InvalidSizeError",
    "MalformedHashError",
    "OutOfRangeError",
]

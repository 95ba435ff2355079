"""
Public conversions between lon-lat points, HexCells and index strings.

Functions taking a cell also accept its 17 character index, e.g.

    >>> hs = HexSystem(-74, 41, 500)
    >>> ind = index(-74.0060, 40.7128, hs)
    >>> center(ind) == center(HexCell.from_index(ind))
    True
"""
from typing import List, Optional, Tuple, Union

from shapely.geometry import Polygon, mapping

from .cell import HexCell
from .hashing import encode_index
from .hexagons import hex_center, hex_vertices
from .system import HexSystem, hex_cartesian_to_lonlat

CellLike = Union[HexCell, str]


def _as_cell(cell: CellLike) -> HexCell:
    if isinstance(cell, str):
        return HexCell.from_index(cell)
    return cell


def center(cell: CellLike) -> Tuple[float, float]:
    """
    Center of a cell.

    Args:
        cell: HexCell or index string

    Returns:
        Tuple of (lon, lat)
    """
    cell = _as_cell(cell)
    size = cell.system.size
    x, y = hex_center(cell.hex)
    return hex_cartesian_to_lonlat(size * x, size * y, cell.system)


def vertices(cell: CellLike) -> List[Tuple[float, float]]:
    """
    Vertices of a cell, rightmost first and counter-clockwise in the
    projected plane.

    Args:
        cell: HexCell or index string

    Returns:
        List of six (lon, lat) tuples
    """
    cell = _as_cell(cell)
    size = cell.system.size
    return [
        hex_cartesian_to_lonlat(size * x, size * y, cell.system)
        for x, y in hex_vertices(cell.hex)
    ]


def index(cell: Union[HexCell, float], lat: Optional[float] = None,
          system: Optional[HexSystem] = None) -> str:
    """
    Compute the `prefix:body` index of a cell.

    Call as `index(cell)` or `index(lon, lat, system)`; the latter indexes
    the cell of `system` containing the point.
    """
    if isinstance(cell, HexCell):
        if lat is not None or system is not None:
            raise TypeError("index() takes a HexCell alone, without lat or system")
        return encode_index(cell.system, cell.hex)
    if lat is None or system is None:
        raise TypeError("index() takes a HexCell or (lon, lat, system)")
    return index(HexCell.from_lonlat(cell, lat, system))


def polygon(cell: CellLike) -> Polygon:
    """Cell outline as a closed shapely Polygon in (lon, lat)."""
    verts = vertices(cell)
    # double up the first point to close the ring
    return Polygon(verts + verts[:1])


def polygon_geojson(cell: CellLike) -> dict:
    """Cell outline as a GeoJSON Polygon geometry."""
    return mapping(polygon(cell))

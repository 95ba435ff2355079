"""
HexCell: one hexagon of a HexSystem.
"""
from dataclasses import dataclass

from .hashing import decode_index
from .hexagons import Hex, hex_containing
from .system import HexSystem, cart_coords


@dataclass(frozen=True)
class HexCell:
    """A hexagon addressed by axial coordinates within a HexSystem."""
    system: HexSystem
    hex: Hex

    @classmethod
    def from_lonlat(cls, lon: float, lat: float, system: HexSystem) -> "HexCell":
        """
        Find the cell of `system` containing a lon-lat point (degrees).

        Points far from the system anchor (roughly more than 40 degrees of
        longitude at moderate latitudes) are outside the range where the
        projection is accurate; no error is raised for them.
        """
        x, y = cart_coords(lon, lat, system)
        return cls(system, hex_containing(x / system.size, y / system.size))

    @classmethod
    def from_index(cls, index: str) -> "HexCell":
        """Decode a 17 character `prefix:body` index into a HexCell."""
        system, h = decode_index(index)
        return cls(system, h)

    @property
    def q(self) -> int:
        return self.hex.q

    @property
    def r(self) -> int:
        return self.hex.r

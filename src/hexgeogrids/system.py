"""
HexSystem: the immutable frame one hexagonal tiling lives in.

A HexSystem is an integer lon-lat anchor, the projection zone derived from
it, and a hexagon size in meters. The anchor is the origin of the system's
Cartesian plane; hexagon (0, 0) is centered on it.
"""
import logging
import math
import numbers
from dataclasses import dataclass, field
from typing import Tuple

from .errors import InvalidCenterError, InvalidSizeError
from .geodesy import UTMZone, lla_from_utm, shift_lon, shift_needed, utm_from_lla, utm_zone

logger = logging.getLogger(__name__)

MAX_SIZE = 0xFFFF  # size is serialized as an unsigned 16-bit integer

# Real-valued anchors are clamped to this latitude so they never sit on a pole
MAX_ANCHOR_LAT = 89


@dataclass(frozen=True)
class HexSystem:
    """
    Hexagonal tiling anchored at an integer lon-lat point.

    Integer arguments are validated as given. If any argument is not an
    integer, lon is rounded, lat is clamped to [-89, 89] and rounded, and
    size is rounded before validation. Two systems built from slightly
    different real inputs that round the same way are equal.

    Raises:
        InvalidCenterError: lat not strictly inside (-90, 90) or lon outside [-180, 180]
        InvalidSizeError: size outside [1, 65535]
    """
    lon: int
    lat: int
    size: int
    zone: UTMZone = field(init=False)

    def __post_init__(self):
        lon, lat, size = self.lon, self.lat, self.size
        if not all(isinstance(v, numbers.Integral) for v in (lon, lat, size)):
            if not (math.isfinite(lon) and math.isfinite(lat)):
                raise InvalidCenterError(f"Center ({lon}, {lat}) is not finite.")
            if not math.isfinite(size):
                raise InvalidSizeError(f"Size of {size} is not finite.")
            lon = round(lon)
            lat = round(min(max(lat, -MAX_ANCHOR_LAT), MAX_ANCHOR_LAT))
            size = round(size)
        lon, lat, size = int(lon), int(lat), int(size)

        if not -90 < lat < 90:
            raise InvalidCenterError(
                f"May not construct HexSystems centered at the poles (lat={lat})."
            )
        if not -180 <= lon <= 180:
            raise InvalidCenterError(f"Lon of {lon} not in [-180, 180].")
        if size < 1:
            raise InvalidSizeError(f"Size must be positive (size={size}).")
        if size > MAX_SIZE:
            raise InvalidSizeError(f"Size of {size} does not fit in 16 bits.")

        zone = utm_zone(lat, lon)
        logger.debug("HexSystem(%d, %d, %d) projects in %s", lon, lat, size, zone)

        object.__setattr__(self, "lon", lon)
        object.__setattr__(self, "lat", lat)
        object.__setattr__(self, "size", size)
        object.__setattr__(self, "zone", zone)

    @property
    def shift(self) -> float:
        """Longitude shift applied before every projection in this system."""
        return shift_needed(self.lon)

    def projected_anchor(self) -> Tuple[float, float]:
        """The shifted anchor in projected (x, y) meters."""
        lon, lat = shift_lon(self.lon, self.lat, self.shift)
        return utm_from_lla(self.zone)(lat, lon)


def cart_coords(lon: float, lat: float, hs: HexSystem) -> Tuple[float, float]:
    """
    Map lon-lat (degrees) into the Cartesian plane of a HexSystem.

    The anchor of the system is the origin of the plane; units are meters.
    """
    shifted_lon, shifted_lat = shift_lon(lon, lat, hs.shift)
    anchor_x, anchor_y = hs.projected_anchor()
    x, y = utm_from_lla(hs.zone)(shifted_lat, shifted_lon)
    return x - anchor_x, y - anchor_y


def hex_cartesian_to_lonlat(cart_x: float, cart_y: float, hs: HexSystem) -> Tuple[float, float]:
    """Map a point in a HexSystem's Cartesian plane back to (lon, lat)."""
    anchor_x, anchor_y = hs.projected_anchor()
    lat, lon, _ = lla_from_utm(hs.zone)(cart_x + anchor_x, cart_y + anchor_y)
    lon, lat = shift_lon(lon, lat, -hs.shift)
    return lon, lat

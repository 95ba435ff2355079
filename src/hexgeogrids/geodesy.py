"""
Projection adapter between WGS84 lon-lat and a UTM/UPS plane.

Projection math is delegated to pyproj. This module only decides which zone
a HexSystem projects in and hands out converters for that zone.

Zones:
- 1..60: standard six-degree UTM zones (no Norway/Svalbard irregular zones,
  so a zone's central meridian is always 3 mod 6 degrees)
- 0: Universal Polar Stereographic, used above 84N and below 80S
"""
import logging
import math
from dataclasses import dataclass
from functools import lru_cache
from typing import Callable, Tuple

from pyproj import CRS, Transformer

logger = logging.getLogger(__name__)

WGS84 = "EPSG:4326"

# UTM is defined between these latitudes; outside them we fall back to UPS
UTM_MAX_LAT = 84
UTM_MIN_LAT = -80


@dataclass(frozen=True)
class UTMZone:
    """Projection zone a HexSystem projects in."""
    zone: int
    isnorth: bool

    @property
    def is_polar(self) -> bool:
        return self.zone == 0


def utm_zone(lat: float, lon: float) -> UTMZone:
    """
    Find the projection zone for a lon-lat point.

    Args:
        lat: Latitude in degrees
        lon: Longitude in degrees (any value; normalized to [-180, 180))

    Returns:
        UTMZone with zone 0 for the polar regions
    """
    if lat > UTM_MAX_LAT or lat < UTM_MIN_LAT:
        return UTMZone(0, lat > 0)

    lon = (lon + 180) % 360 - 180
    zone = int(math.floor((lon + 180) / 6)) + 1
    return UTMZone(zone, lat >= 0)


def central_meridian(zone: UTMZone) -> int:
    """Central meridian of a UTM zone (0 for polar zones)."""
    if zone.is_polar:
        return 0
    return 6 * zone.zone - 183


def shift_needed(lon: float) -> float:
    """
    Longitude shift that moves `lon` onto a line of longitude 3 mod 6.

    To keep hexagons nearly north aligned everywhere, lon-lat points are
    shifted before projecting so the conversion happens as if the HexSystem
    anchor sat on its zone's central meridian. E.g. an anchor at 7 degrees
    is shifted by 2 degrees, so projection happens around 9 degrees.
    """
    return 3 - lon % 6


def shift_lon(lon: float, lat: float, dlon: float) -> Tuple[float, float]:
    """Shift a lon-lat point east by `dlon` degrees. Latitude is unchanged."""
    return lon + dlon, lat


def _proj_string(zone: UTMZone) -> str:
    if zone.is_polar:
        proj = "+proj=ups"
    else:
        proj = f"+proj=utm +zone={zone.zone}"
    if not zone.isnorth:
        proj += " +south"
    return proj + " +ellps=WGS84 +units=m +no_defs"


@lru_cache(maxsize=None)
def _transformers(zone: UTMZone) -> Tuple[Transformer, Transformer]:
    """Forward and inverse transformers for a zone, built once per zone."""
    logger.debug("Building transformers for zone %s", zone)
    crs = CRS.from_proj4(_proj_string(zone))
    forward = Transformer.from_crs(WGS84, crs, always_xy=True)
    inverse = Transformer.from_crs(crs, WGS84, always_xy=True)
    return forward, inverse


def utm_from_lla(zone: UTMZone) -> Callable[..., Tuple[float, float]]:
    """
    Get a lon-lat to plane converter for a zone.

    Returns:
        Function (lat, lon, alt=0.0) -> (x, y) in meters
    """
    forward, _ = _transformers(zone)

    def convert(lat: float, lon: float, alt: float = 0.0) -> Tuple[float, float]:
        x, y = forward.transform(lon, lat)
        return x, y

    return convert


def lla_from_utm(zone: UTMZone) -> Callable[[float, float], Tuple[float, float, float]]:
    """
    Get a plane to lon-lat converter for a zone.

    Returns:
        Function (x, y) -> (lat, lon, alt) with alt always 0.0
    """
    _, inverse = _transformers(zone)

    def convert(x: float, y: float) -> Tuple[float, float, float]:
        lon, lat = inverse.transform(x, y)
        return lat, lon, 0.0

    return convert

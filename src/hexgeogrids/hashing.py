"""
Index codec: HexSystem and hexagon coordinates <-> fixed-width strings.

Index format (17 ASCII characters):

    PPPPSSSS:QQQQRRRR

- PPPP: packed integer anchor, (lat + 90) + 181 * (lon + 180), in [0, 0xff3c]
- SSSS: hexagon size as an unsigned 16-bit integer
- QQQQ, RRRR: axial q and r, shifted from int16 to uint16 by adding 32768

The first 8 characters (the prefix) identify the HexSystem; the last 8 (the
body) identify the hexagon within it.
"""
import re
from typing import Tuple

from .errors import InvalidLengthError, MalformedHashError, OutOfRangeError
from .hexagons import Hex
from .system import HexSystem

# 65340 is 361 * 181 - 1: 361 legal integer lons, 181 legal integer lats
MAX_PACKED_LONLAT = 65340

INT16_MIN = -0x8000
INT16_MAX = 0x7FFF

PREFIX_LENGTH = 8
BODY_LENGTH = 8
SEPARATOR = ":"
INDEX_LENGTH = PREFIX_LENGTH + len(SEPARATOR) + BODY_LENGTH

_HEX4 = re.compile(r"[0-9a-fA-F]{4}")


def lonlat_to_int(lon: int, lat: int) -> int:
    """Pack integer lon in [-180, 180] and lat in [-90, 90] into [0, 65340]."""
    if not -180 <= lon <= 180:
        raise OutOfRangeError(f"Lon of {lon} not in [-180, 180].")
    if not -90 <= lat <= 90:
        raise OutOfRangeError(f"Lat of {lat} not in [-90, 90].")
    return (lat + 90) + 181 * (lon + 180)


def int_to_lonlat(x: int) -> Tuple[int, int]:
    """Unpack an integer in [0, 65340] into (lon, lat). Inverse of lonlat_to_int."""
    if not 0 <= x <= MAX_PACKED_LONLAT:
        raise OutOfRangeError(f"{x} not in [0, {MAX_PACKED_LONLAT}].")
    lon_shifted, lat_shifted = divmod(x, 181)
    return lon_shifted - 180, lat_shifted - 90


def _parse_hex4(digits: str) -> int:
    if not _HEX4.fullmatch(digits):
        raise MalformedHashError(f"{digits!r} is not 4 hexadecimal digits.")
    return int(digits, 16)


def system_to_prefix(hs: HexSystem) -> str:
    """Compute the 8 digit (base 16) prefix of a HexSystem."""
    packed = lonlat_to_int(hs.lon, hs.lat)
    return f"{packed:04x}{hs.size:04x}"


def prefix_to_system(prefix: str) -> HexSystem:
    """
    Construct a HexSystem from an 8 digit (base 16) prefix.

    Raises:
        InvalidLengthError: prefix is not 8 characters
        MalformedHashError: prefix holds non-hex characters
        OutOfRangeError: packed anchor above 65340
        InvalidCenterError, InvalidSizeError: decoded values rejected by HexSystem
    """
    if len(prefix) != PREFIX_LENGTH:
        raise InvalidLengthError(
            f"Prefix must be {PREFIX_LENGTH} characters, got {len(prefix)}."
        )
    lon, lat = int_to_lonlat(_parse_hex4(prefix[:4]))
    size = _parse_hex4(prefix[4:])
    return HexSystem(lon, lat, size)


def hex_coords_to_hash(h: Hex) -> str:
    """
    Create the 8 digit (base 16) body of an index from a hexagon.

    q and r must each fit in a signed 16-bit integer. They are shifted to
    unsigned so the string form never carries a leading '-'.
    """
    for name, value in (("q", h.q), ("r", h.r)):
        if not INT16_MIN <= value <= INT16_MAX:
            raise OutOfRangeError(
                f"{name} of {value} not in [{INT16_MIN}, {INT16_MAX}]; cannot be indexed."
            )
    return f"{h.q - INT16_MIN:04x}{h.r - INT16_MIN:04x}"


def hash_to_hex_coords(body: str) -> Hex:
    """Construct hexagon coordinates from an 8 digit (base 16) body."""
    if len(body) != BODY_LENGTH:
        raise InvalidLengthError(
            f"Body must be {BODY_LENGTH} characters, got {len(body)}."
        )
    q_offset = _parse_hex4(body[:4])
    r_offset = _parse_hex4(body[4:])
    return Hex(q_offset + INT16_MIN, r_offset + INT16_MIN)


def split_index(index: str) -> Tuple[str, str]:
    """
    Split a 17 character index into its prefix and body.

    Raises:
        InvalidLengthError: index is not exactly 17 characters
        MalformedHashError: index is not ASCII or has no ':' at position 9
    """
    if not index.isascii():
        raise MalformedHashError(f"Index {index!r} is not ASCII.")
    if len(index) != INDEX_LENGTH:
        raise InvalidLengthError(
            f"Index must be {INDEX_LENGTH} characters, got {len(index)}."
        )
    if index[PREFIX_LENGTH] != SEPARATOR:
        raise MalformedHashError(
            f"Index {index!r} has no {SEPARATOR!r} separator at position {PREFIX_LENGTH + 1}."
        )
    return index[:PREFIX_LENGTH], index[PREFIX_LENGTH + 1:]


def encode_index(hs: HexSystem, h: Hex) -> str:
    """Encode a HexSystem and hexagon as a `prefix:body` index."""
    return system_to_prefix(hs) + SEPARATOR + hex_coords_to_hash(h)


def decode_index(index: str) -> Tuple[HexSystem, Hex]:
    """Decode a `prefix:body` index into its HexSystem and hexagon."""
    prefix, body = split_index(index)
    return prefix_to_system(prefix), hash_to_hex_coords(body)

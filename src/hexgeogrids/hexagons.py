"""
Flat-top hexagon geometry in axial coordinates.

All functions work on unit-size hexagons (center-to-vertex distance 1)
with hexagon (0, 0) centered on the origin. Callers scale by their own size.

Axial (q, r) with implied cube coordinate s = -q - r.
"""
import math
from dataclasses import dataclass
from typing import List, Tuple

SQRT3 = math.sqrt(3)


@dataclass(frozen=True)
class Hex:
    """Immutable axial hexagon coordinate."""
    q: int
    r: int

    @property
    def s(self) -> int:
        """Implicit third cube coordinate."""
        return -self.q - self.r


# Rightmost vertex first, counter-clockwise
_VERTEX_ANGLES = [math.radians(60 * i) for i in range(6)]


def cube_round(q: float, r: float) -> Hex:
    """
    Round fractional axial coordinates to the nearest hexagon.

    Rounds all three cube components, then recomputes whichever one moved
    the most from the other two so that q + r + s == 0 holds.
    """
    s = -q - r

    rq = round(q)
    rr = round(r)
    rs = round(s)

    q_diff = abs(rq - q)
    r_diff = abs(rr - r)
    s_diff = abs(rs - s)

    if q_diff > r_diff and q_diff > s_diff:
        rq = -rr - rs
    elif r_diff > s_diff:
        rr = -rq - rs

    return Hex(int(rq), int(rr))


def hex_containing(x: float, y: float) -> Hex:
    """Find the hexagon containing the Cartesian point (x, y)."""
    q = 2.0 / 3.0 * x
    r = -1.0 / 3.0 * x + SQRT3 / 3.0 * y
    return cube_round(q, r)


def hex_center(h: Hex) -> Tuple[float, float]:
    """Cartesian center of a hexagon."""
    x = 3.0 / 2.0 * h.q
    y = SQRT3 * (h.r + h.q / 2.0)
    return x, y


def hex_vertices(h: Hex) -> List[Tuple[float, float]]:
    """The six Cartesian vertices of a hexagon."""
    cx, cy = hex_center(h)
    return [(cx + math.cos(theta), cy + math.sin(theta)) for theta in _VERTEX_ANGLES]

from __future__ import annotations

from .coords import Axial, Cube


def distance(a: Cube, b: Cube) -> int:
    """Grid steps between two cubes: the largest absolute component difference."""
    return max(abs(a.x - b.x), abs(a.y - b.y), abs(a.z - b.z))


def distance_axial(a: Axial, b: Axial) -> int:
    # axial pairs carry x and z; y is recovered from x + y + z == 0
    ax, ay, az = a.q, -a.q - a.r, a.r
    bx, by, bz = b.q, -b.q - b.r, b.r
    return max(abs(ax - bx), abs(ay - by), abs(az - bz))

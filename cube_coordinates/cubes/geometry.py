"""Cube-space interpolation, rounding and shape enumeration."""

from __future__ import annotations

from .coords import Axial, Cube, FractionalCube
from .heuristics import distance
from .neighbors import DIRECTIONS


def lerp(a: Cube | FractionalCube, b: Cube | FractionalCube, t: float) -> FractionalCube:
    return FractionalCube(
        a.x + (b.x - a.x) * t,
        a.y + (b.y - a.y) * t,
        a.z + (b.z - a.z) * t,
    )


def round_cube(cube: Cube | FractionalCube) -> Cube:
    """Snap a fractional cube point to the nearest valid cube coordinate.

    Components are rounded half-to-even, then the component with the largest
    rounding residual is rebuilt from the other two. Ties resolve x first,
    then y, else z.
    """

    x, y, z = cube.x, cube.y, cube.z
    rx = round(x)
    ry = round(y)
    rz = round(z)

    x_diff = abs(rx - x)
    y_diff = abs(ry - y)
    z_diff = abs(rz - z)

    if x_diff > y_diff and x_diff > z_diff:
        rx = -ry - rz
    elif y_diff > z_diff:
        ry = -rx - rz
    else:
        rz = -rx - ry
    return Cube(int(rx), int(ry), int(rz))


def round_axial(q: float, r: float) -> Axial:
    cube = round_cube(FractionalCube(q, -q - r, r))
    return Axial(cube.x, cube.z)


def line(a: Cube, b: Cube) -> list[Cube]:
    """Cubes on the straight line from ``a`` to ``b``, both ends included."""

    steps = distance(a, b)
    if steps == 0:
        return [a]
    results = [round_cube(lerp(a, b, i / steps)) for i in range(steps + 1)]
    if results[0] != a:
        results[0] = a
    return results


def point_on_line(a: Cube, b: Cube, steps: int) -> Cube:
    total = distance(a, b)
    if total == 0:
        return a
    return round_cube(lerp(a, b, steps / total))


def ring(origin: Cube, radius: int) -> list[Cube]:
    """The hexagonal boundary at exactly ``radius`` steps from ``origin``."""

    if radius < 0:
        raise ValueError("radius must be non-negative")
    if radius == 0:
        return [origin]
    results: list[Cube] = []
    current = origin + DIRECTIONS[4].scale(radius)
    for side in range(6):
        for _ in range(radius):
            results.append(current)
            current = current + DIRECTIONS[side]
    return results


def spiral(origin: Cube, radius: int) -> list[Cube]:
    """``origin`` followed by each ring out to ``radius``, innermost first."""

    if radius < 0:
        raise ValueError("radius must be non-negative")
    results = [origin]
    for step in range(1, radius + 1):
        results.extend(ring(origin, step))
    return results


def rotate_right(cube: Cube) -> Cube:
    return Cube(-cube.z, -cube.x, -cube.y)


def rotate_left(cube: Cube) -> Cube:
    return Cube(-cube.y, -cube.z, -cube.x)


__all__ = [
    "lerp",
    "line",
    "point_on_line",
    "ring",
    "rotate_left",
    "rotate_right",
    "round_axial",
    "round_cube",
    "spiral",
]

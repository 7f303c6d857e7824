from __future__ import annotations

from .coords import Cube

# Direction order is shared by ring/spiral enumeration; do not reorder.
DIRECTIONS: tuple[Cube, ...] = (
    Cube(+1, -1, 0),
    Cube(+1, 0, -1),
    Cube(0, +1, -1),
    Cube(-1, +1, 0),
    Cube(-1, 0, +1),
    Cube(0, -1, +1),
)

DIAGONALS: tuple[Cube, ...] = (
    Cube(+2, -1, -1),
    Cube(+1, +1, -2),
    Cube(-1, +2, -1),
    Cube(-2, +1, +1),
    Cube(-1, -1, +2),
    Cube(+1, -2, +1),
)


def _check_direction(direction: int) -> None:
    if not 0 <= direction < 6:
        raise IndexError(f"direction must be in 0..5, got {direction}")


def neighbor(cube: Cube, direction: int, distance: int = 1) -> Cube:
    _check_direction(direction)
    return cube + DIRECTIONS[direction].scale(distance)


def diagonal_neighbor(cube: Cube, direction: int, distance: int = 1) -> Cube:
    _check_direction(direction)
    return cube + DIAGONALS[direction].scale(distance)


def direct_neighbors(cube: Cube) -> list[Cube]:
    return [cube + d for d in DIRECTIONS]


def diagonal_neighbors(cube: Cube, distance: int = 1) -> list[Cube]:
    """Diagonal steps ``1..distance`` for each of the six diagonal directions."""
    return [
        diagonal_neighbor(cube, direction, step)
        for direction in range(6)
        for step in range(1, distance + 1)
    ]


def neighbors_within(origin: Cube, radius: int) -> list[Cube]:
    """Every cube within ``radius`` grid steps of ``origin``.

    A radius of 1 is a neighbour query and leaves ``origin`` out; any other
    radius is a region scan and keeps ``origin`` as its centre.
    """
    if radius < 0:
        raise ValueError("radius must be non-negative")
    results: list[Cube] = []
    for x in range(origin.x - radius, origin.x + radius + 1):
        for y in range(origin.y - radius, origin.y + radius + 1):
            for z in range(origin.z - radius, origin.z + radius + 1):
                if x + y + z != 0:
                    continue
                cube = Cube(x, y, z)
                if radius == 1 and cube == origin:
                    continue
                results.append(cube)
    return results

"""Topology queries restricted to the entities present in a container."""

from __future__ import annotations

from .cubes import (
    Cube,
    diagonal_neighbors,
    line,
    neighbors_within,
    point_on_line,
    ring,
    spiral,
)
from .index import Container, Entity


def neighbors_in(container: Container, origin: Cube, steps: int = 1) -> list[Entity]:
    return container.get_many(neighbors_within(origin, steps))


def diagonal_neighbors_in(
    container: Container, origin: Cube, distance: int = 1
) -> list[Entity]:
    return container.get_many(diagonal_neighbors(origin, distance))


def line_in(container: Container, a: Cube, b: Cube) -> list[Entity]:
    return container.get_many(line(a, b))


def point_on_line_in(container: Container, a: Cube, b: Cube, steps: int) -> Entity | None:
    return container.get(point_on_line(a, b, steps))


def ring_in(container: Container, origin: Cube, radius: int) -> list[Entity]:
    return container.get_many(ring(origin, radius))


def spiral_in(container: Container, origin: Cube, radius: int) -> list[Entity]:
    return container.get_many(spiral(origin, radius))


def reachable(container: Container, origin: Cube, steps: int) -> list[Cube]:
    """Cubes walkable from ``origin`` in at most ``steps`` moves.

    Breadth-first fringe expansion over direct neighbours present in the
    container. ``origin`` is always the first element; the rest follow in
    discovery order, layer by layer.
    """

    if steps < 0:
        raise ValueError("steps must be non-negative")
    visited: dict[Cube, None] = {origin: None}
    fringe = [origin]
    for _ in range(steps):
        next_fringe: list[Cube] = []
        for cube in fringe:
            for candidate in neighbors_within(cube, 1):
                if candidate in visited or candidate not in container:
                    continue
                visited[candidate] = None
                next_fringe.append(candidate)
        if not next_fringe:
            break
        fringe = next_fringe
    return list(visited)


__all__ = [
    "diagonal_neighbors_in",
    "line_in",
    "neighbors_in",
    "point_on_line_in",
    "reachable",
    "ring_in",
    "spiral_in",
]

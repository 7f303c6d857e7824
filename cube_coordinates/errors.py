"""Error taxonomy shared by the coordinate, index and path-search layers."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .cubes.coords import Cube


class CubeCoordinatesError(Exception):
    """Base class for every error raised by :mod:`cube_coordinates`."""


class InvalidCoordinate(CubeCoordinatesError, ValueError):
    """Raised when a cube coordinate does not satisfy ``x + y + z == 0``."""

    def __init__(self, x: int, y: int, z: int) -> None:
        self.components = (x, y, z)
        super().__init__(f"For cube coords, x + y + z must be 0 (got {x}, {y}, {z})")


class EntityNotFound(CubeCoordinatesError, KeyError):
    """Raised by ``Container[cube]`` when the cube has no entity."""

    def __init__(self, label: str, cube: Cube) -> None:
        self.label = label
        self.cube = cube
        super().__init__(f"no entity at {cube} in container {label!r}")

    def __str__(self) -> str:
        return str(self.args[0])


class PathNotFound(CubeCoordinatesError):
    """Describes a failed path search.

    Path searches return this as a value inside
    :class:`~cube_coordinates.pathfinding.PathResult`; it is only raised when
    the caller asks for it via ``PathResult.unwrap()``.
    """

    def __init__(self, origin: Cube, target: Cube, reason: str) -> None:
        self.origin = origin
        self.target = target
        self.reason = reason
        super().__init__(f"no path from {origin} to {target}: {reason}")


__all__ = [
    "CubeCoordinatesError",
    "EntityNotFound",
    "InvalidCoordinate",
    "PathNotFound",
]

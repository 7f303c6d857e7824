from __future__ import annotations
from dataclasses import dataclass

from ..errors import InvalidCoordinate


@dataclass(frozen=True, slots=True)
class Axial:
    """Storage-friendly pair; ``q`` and ``r`` are the cube ``x`` and ``z``."""

    q: int
    r: int


@dataclass(frozen=True, slots=True)
class Cube:
    """Hex cell on the plane ``x + y + z == 0``; other triples are rejected."""

    x: int
    y: int
    z: int

    def __post_init__(self) -> None:
        if self.x + self.y + self.z != 0:
            raise InvalidCoordinate(self.x, self.y, self.z)

    def __add__(self, other: Cube) -> Cube:
        return Cube(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Cube) -> Cube:
        return Cube(self.x - other.x, self.y - other.y, self.z - other.z)

    def scale(self, factor: int) -> Cube:
        return Cube(self.x * factor, self.y * factor, self.z * factor)

    def as_tuple(self) -> tuple[int, int, int]:
        return self.x, self.y, self.z


ORIGIN = Cube(0, 0, 0)


@dataclass(frozen=True, slots=True)
class FractionalCube:
    """Cube-space point with float components, e.g. a lerp sample."""

    x: float
    y: float
    z: float


@dataclass(frozen=True, slots=True)
class WorldPosition:
    x: float
    y: float
    z: float

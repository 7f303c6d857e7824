"""Cube-coordinate hex grids: geometry, spatial index and path search."""

from .builder import GridBuilder
from .config import GridSettings
from .cubes import Axial, Cube, FractionalCube, WorldPosition
from .display import NullDisplay, TileDisplay
from .errors import CubeCoordinatesError, EntityNotFound, InvalidCoordinate, PathNotFound
from .index import Container, Entity, SpatialIndex
from .pathfinding import PathFinder, PathResult

__version__ = "0.1.0"

__all__ = [
    "Axial",
    "Container",
    "Cube",
    "CubeCoordinatesError",
    "Entity",
    "EntityNotFound",
    "FractionalCube",
    "GridBuilder",
    "GridSettings",
    "InvalidCoordinate",
    "NullDisplay",
    "PathFinder",
    "PathNotFound",
    "PathResult",
    "SpatialIndex",
    "TileDisplay",
    "WorldPosition",
]

"""Columnar exports of coordinates and world positions for presentation layers."""

from __future__ import annotations

from typing import Dict, Iterable

import polars as pl

from .config import DEFAULT_SETTINGS, GridSettings
from .cubes import Cube, cube_to_world
from .index import Container
from .pathfinding import PathResult

_CUBE_FRAME_SCHEMA: Dict[str, pl.datatypes.DataType] = {
    "x": pl.Int64,
    "y": pl.Int64,
    "z": pl.Int64,
    "q": pl.Int64,
    "r": pl.Int64,
    "world_x": pl.Float64,
    "world_y": pl.Float64,
    "world_z": pl.Float64,
}

_PATH_FRAME_SCHEMA: Dict[str, pl.datatypes.DataType] = {
    "step": pl.Int64,
    **_CUBE_FRAME_SCHEMA,
}


def _cube_row(cube: Cube, settings: GridSettings) -> dict[str, int | float]:
    position = cube_to_world(cube, settings)
    return {
        "x": cube.x,
        "y": cube.y,
        "z": cube.z,
        "q": cube.x,
        "r": cube.z,
        "world_x": position.x,
        "world_y": position.y,
        "world_z": position.z,
    }


def cubes_frame(
    cubes: Iterable[Cube], settings: GridSettings = DEFAULT_SETTINGS
) -> pl.DataFrame:
    rows = [_cube_row(cube, settings) for cube in cubes]
    return pl.DataFrame(rows, schema=_CUBE_FRAME_SCHEMA)


def container_frame(
    container: Container, settings: GridSettings = DEFAULT_SETTINGS
) -> pl.DataFrame:
    """One row per entity, in container order."""

    return cubes_frame(container.all_coords(), settings)


def path_frame(result: PathResult, settings: GridSettings = DEFAULT_SETTINGS) -> pl.DataFrame:
    """One row per path step; empty for failed or degenerate queries."""

    rows = [
        {"step": step, **_cube_row(cube, settings)} for step, cube in enumerate(result.path)
    ]
    return pl.DataFrame(rows, schema=_PATH_FRAME_SCHEMA)


__all__ = ["container_frame", "cubes_frame", "path_frame"]

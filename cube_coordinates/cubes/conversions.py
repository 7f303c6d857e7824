from __future__ import annotations

import math

from ..config import DEFAULT_SETTINGS, GridSettings
from .coords import Axial, Cube, WorldPosition
from .geometry import round_axial


def axial_to_cube(a: Axial) -> Cube:
    """Axial ``(q, r)`` is cube ``(x, z)``; ``y`` is whatever balances the sum."""
    x = a.q
    z = a.r
    y = -x - z
    return Cube(x, y, z)


def cube_to_axial(c: Cube) -> Axial:
    return Axial(c.x, c.z)


def axial_to_world(a: Axial, settings: GridSettings = DEFAULT_SETTINGS) -> WorldPosition:
    """Centre of the flat-top hex ``a`` on the ground plane (y is always 0)."""
    return WorldPosition(
        a.q * settings.spacing_x,
        0.0,
        -(a.q * settings.spacing_z / 2.0 + a.r * settings.spacing_z),
    )


def cube_to_world(c: Cube, settings: GridSettings = DEFAULT_SETTINGS) -> WorldPosition:
    return axial_to_world(cube_to_axial(c), settings)


def world_to_axial(
    position: WorldPosition, settings: GridSettings = DEFAULT_SETTINGS
) -> Axial:
    """Axial coordinate of the hex containing ``position``."""
    q = (position.x * 2.0 / 3.0) / settings.radius
    r = (-position.x / 3.0 - (math.sqrt(3) / 3.0) * position.z) / settings.radius
    return round_axial(q, r)


def world_to_cube(
    position: WorldPosition, settings: GridSettings = DEFAULT_SETTINGS
) -> Cube:
    return axial_to_cube(world_to_axial(position, settings))

from .coords import ORIGIN, Axial, Cube, FractionalCube, WorldPosition
from .conversions import (
    axial_to_cube,
    axial_to_world,
    cube_to_axial,
    cube_to_world,
    world_to_axial,
    world_to_cube,
)
from .heuristics import distance, distance_axial
from .neighbors import (
    DIAGONALS,
    DIRECTIONS,
    diagonal_neighbor,
    diagonal_neighbors,
    direct_neighbors,
    neighbor,
    neighbors_within,
)
from .geometry import (
    lerp,
    line,
    point_on_line,
    ring,
    rotate_left,
    rotate_right,
    round_axial,
    round_cube,
    spiral,
)
from .boolean import combine, dedup, difference, intersect, symmetric_difference
from .astar import AStarSearch, astar

__all__ = [
    "ORIGIN",
    "Axial",
    "Cube",
    "FractionalCube",
    "WorldPosition",
    "axial_to_cube",
    "axial_to_world",
    "cube_to_axial",
    "cube_to_world",
    "world_to_axial",
    "world_to_cube",
    "distance",
    "distance_axial",
    "DIAGONALS",
    "DIRECTIONS",
    "diagonal_neighbor",
    "diagonal_neighbors",
    "direct_neighbors",
    "neighbor",
    "neighbors_within",
    "lerp",
    "line",
    "point_on_line",
    "ring",
    "rotate_left",
    "rotate_right",
    "round_axial",
    "round_cube",
    "spiral",
    "combine",
    "dedup",
    "difference",
    "intersect",
    "symmetric_difference",
    "AStarSearch",
    "astar",
]

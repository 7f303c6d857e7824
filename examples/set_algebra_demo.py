"""Carve shapes out of a hexagon with the boolean helpers and print a summary."""

from __future__ import annotations

from rich.console import Console

from cube_coordinates.__main__ import render_map
from cube_coordinates.builder import GridBuilder
from cube_coordinates.cubes import ORIGIN, Cube, difference, intersect, neighbors_within, ring
from cube_coordinates.index import SpatialIndex


def donut(radius: int, hole: int) -> list[Cube]:
    return difference(neighbors_within(ORIGIN, radius), neighbors_within(ORIGIN, hole))


if __name__ == "__main__":
    index = SpatialIndex()
    builder = GridBuilder(index)
    builder.build_from_list(donut(6, 2))
    builder.build_from_list([ORIGIN])

    band = intersect(ring(ORIGIN, 4), index.default.all_coords())
    index.get_or_create("band").add_many(index.default.get_many(band))

    console = Console()
    console.print(render_map(index.default, 6, highlight=index.get_or_create("band")))
    console.print(f"{len(index.default)} cubes, {len(band)} on the highlighted band")

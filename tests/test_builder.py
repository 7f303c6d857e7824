from __future__ import annotations

import logging
from typing import Any

import pytest

from cube_coordinates.builder import GridBuilder
from cube_coordinates.cubes import ORIGIN, Cube, ring
from cube_coordinates.index import Entity, SpatialIndex


class RecordingDisplay:
    """Display double that remembers what it was asked to create and release."""

    def __init__(self) -> None:
        self.created: list[Cube] = []
        self.released: list[Cube] = []

    def create(self, entity: Entity) -> Any:
        self.created.append(entity.cube)
        return f"tile@{entity.cube.as_tuple()}"

    def release(self, entity: Entity) -> None:
        self.released.append(entity.cube)


def test_build_radial_fills_hexagon_once() -> None:
    builder = GridBuilder(SpatialIndex())
    created = builder.build_radial(2)
    assert len(created) == 19
    assert len(builder.container) == 19
    assert builder.build_radial(2) == []
    assert len(builder.container) == 19


def test_build_radial_around_center() -> None:
    builder = GridBuilder(SpatialIndex())
    center = Cube(5, -2, -3)
    builder.build_radial(1, center=center)
    assert set(builder.container) == {center, *ring(center, 1)}


def test_build_radial_rejects_negative_radius() -> None:
    with pytest.raises(ValueError):
        GridBuilder(SpatialIndex()).build_radial(-1)


def test_build_from_list_skips_existing_cubes() -> None:
    builder = GridBuilder(SpatialIndex())
    builder.build_from_list([ORIGIN, Cube(1, -1, 0)])
    original = builder.container[ORIGIN]
    created = builder.build_from_list([ORIGIN, Cube(0, 1, -1)])
    assert [e.cube for e in created] == [Cube(0, 1, -1)]
    assert builder.container[ORIGIN] is original


def test_prune_to_reachable_drops_islands() -> None:
    builder = GridBuilder(SpatialIndex())
    builder.build_radial(4)
    builder.remove_many(ring(ORIGIN, 2))
    removed = builder.prune_to_reachable(ORIGIN, 10)
    assert len(builder.container) == 7
    assert set(removed) == set(ring(ORIGIN, 3)) | set(ring(ORIGIN, 4))


def test_prune_respects_step_limit() -> None:
    builder = GridBuilder(SpatialIndex())
    builder.build_radial(3)
    builder.prune_to_reachable(ORIGIN, 1)
    assert set(builder.container) == {ORIGIN, *ring(ORIGIN, 1)}


def test_prune_from_absent_origin_warns_and_keeps_grid(
    caplog: pytest.LogCaptureFixture,
) -> None:
    builder = GridBuilder(SpatialIndex())
    builder.build_radial(2)
    with caplog.at_level(logging.WARNING, logger="cube_coordinates.builder"):
        removed = builder.prune_to_reachable(Cube(9, -9, 0), 3)
    assert removed == []
    assert len(builder.container) == 19
    assert "cannot prune" in caplog.text


def test_realize_creates_visuals_once() -> None:
    display = RecordingDisplay()
    builder = GridBuilder(SpatialIndex())
    builder.build_radial(1)
    assert builder.realize(display) == 7
    assert builder.container[ORIGIN].payload == "tile@(0, 0, 0)"
    assert builder.realize() == 0
    assert len(display.created) == 7


def test_remove_releases_and_discards_everywhere() -> None:
    display = RecordingDisplay()
    index = SpatialIndex()
    builder = GridBuilder(index, display=display)
    builder.build_radial(1)
    index.get_or_create("path").add(builder.container[ORIGIN])

    removed = builder.remove(ORIGIN)
    assert removed is not None
    assert display.released == [ORIGIN]
    assert index.containers_holding(ORIGIN) == []
    assert builder.remove(ORIGIN) is None
    assert display.released == [ORIGIN]


def test_clear_releases_each_entity_once() -> None:
    display = RecordingDisplay()
    index = SpatialIndex()
    builder = GridBuilder(index, display=display)
    builder.build_radial(1)
    index.get_or_create("visible").add_many(builder.container.all())

    builder.clear()
    assert sorted(display.released, key=Cube.as_tuple) == sorted(
        [ORIGIN, *ring(ORIGIN, 1)], key=Cube.as_tuple
    )
    assert index.labels() == []
    assert len(builder.container) == 0

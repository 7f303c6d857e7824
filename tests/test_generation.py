import pytest

from cube_coordinates.builder import GridBuilder
from cube_coordinates.cubes import ORIGIN, Cube, distance
from cube_coordinates.generation import (
    MapRandomness,
    carve_random_map,
    happy_face_cubes,
    random_ring_path,
)
from cube_coordinates.graph import region_count
from cube_coordinates.index import SpatialIndex


def _carve(seed: int, radius: int = 6, chance: float = 0.3) -> GridBuilder:
    builder = GridBuilder(SpatialIndex())
    carve_random_map(builder, radius, randomness=MapRandomness(seed=seed), removal_chance=chance)
    return builder


def test_randomness_streams_are_cached_and_seeded() -> None:
    randomness = MapRandomness(seed=3)
    assert randomness.generator("carve") is randomness.generator("carve")
    first = MapRandomness(seed=3).generator("carve").random(4).tolist()
    again = MapRandomness(seed=3).generator("carve").random(4).tolist()
    other = MapRandomness(seed=4).generator("carve").random(4).tolist()
    assert first == again
    assert first != other


def test_carve_is_deterministic_per_seed() -> None:
    assert _carve(11).container.all_coords() == _carve(11).container.all_coords()


def test_carved_map_is_one_connected_region() -> None:
    for seed in range(5):
        builder = _carve(seed, chance=0.45)
        container = builder.container
        assert ORIGIN in container
        assert region_count(container) == 1
        assert all(distance(ORIGIN, cube) <= 6 for cube in container)


def test_carve_without_holes_keeps_full_hexagon() -> None:
    assert len(_carve(0, radius=3, chance=0.0).container) == 37


def test_carve_with_certain_removal_keeps_origin_only() -> None:
    assert _carve(0, radius=3, chance=1.0).container.all_coords() == [ORIGIN]


def test_carve_rejects_bad_chance() -> None:
    with pytest.raises(ValueError):
        _carve(0, chance=1.5)


def test_random_ring_path_stores_path_container() -> None:
    index = SpatialIndex()
    builder = GridBuilder(index)
    randomness = MapRandomness(seed=5)
    carve_random_map(builder, 3, randomness=randomness, removal_chance=0.0)

    result = random_ring_path(index, ORIGIN, 3, randomness=randomness)
    assert result is not None
    assert len(result.path) == 4
    assert distance(ORIGIN, result.target) == 3
    assert index.get_or_create("path").all_coords() == list(result.path)


def test_random_ring_path_without_targets_returns_none() -> None:
    index = SpatialIndex()
    GridBuilder(index).build_from_list([ORIGIN])
    assert random_ring_path(index, ORIGIN, 4, randomness=MapRandomness(seed=1)) is None
    assert "path" not in index


def test_happy_face_shape() -> None:
    face = happy_face_cubes()
    assert len(face) == len(set(face))
    assert all(distance(ORIGIN, cube) <= 10 for cube in face)
    assert ORIGIN in face
    # eyes and the explicit mouth corners are cut out
    assert Cube(-4, 5, -1) not in face
    assert Cube(4, 1, -5) not in face
    assert Cube(0, -5, 5) not in face
    # the chin cube is put back
    assert Cube(0, -7, 7) in face

"""Seeded map generators built from the coordinate primitives."""

from __future__ import annotations

import hashlib
import logging
from dataclasses import dataclass, field
from typing import Callable, Dict

from numpy.random import BitGenerator, Generator, PCG64

from .builder import GridBuilder
from .cubes import ORIGIN, Cube, difference, line, neighbors_within
from .index import SpatialIndex
from .pathfinding import PathFinder, PathResult
from .queries import ring_in

logger = logging.getLogger(__name__)

BitGeneratorFactory = Callable[[int], BitGenerator]


def _default_bit_generator(seed: int) -> BitGenerator:
    return PCG64(seed)


_BITGEN_MODULUS = 2**128


def _stable_hash(value: str, *, modulo: int) -> int:
    """Return a deterministic hash of ``value`` bounded by ``modulo``."""

    digest = hashlib.blake2b(value.encode("utf-8"), digest_size=16).digest()
    return int.from_bytes(digest, "big") % modulo


@dataclass
class MapRandomness:
    """Provides independent seeded RNG streams per generation step."""

    seed: int
    bit_generator_factory: BitGeneratorFactory = _default_bit_generator
    _generators: Dict[str, Generator] = field(default_factory=dict)

    def generator(self, stream: str = "default") -> Generator:
        """Return (and cache) a ``numpy.random.Generator`` for ``stream``."""

        if stream not in self._generators:
            derived = _stable_hash(f"{self.seed}:rng:{stream}", modulo=_BITGEN_MODULUS) or 1
            self._generators[stream] = Generator(self.bit_generator_factory(int(derived)))
        return self._generators[stream]


def carve_random_map(
    builder: GridBuilder,
    radius: int,
    *,
    randomness: MapRandomness,
    removal_chance: float = 0.3,
    origin: Cube = ORIGIN,
) -> list[Cube]:
    """Build a hexagon around ``origin`` with random holes, then keep only
    the region still connected to ``origin``.

    Returns the cubes that survive.
    """

    if not 0.0 <= removal_chance <= 1.0:
        raise ValueError("removal_chance must be within [0, 1]")
    candidates = neighbors_within(origin, radius)
    rng = randomness.generator("carve")
    rolls = rng.random(len(candidates))
    kept = [origin] + [
        cube for cube, roll in zip(candidates, rolls) if cube != origin and roll >= removal_chance
    ]
    builder.build_from_list(kept)
    # walking distance can exceed the radius once holes appear
    builder.prune_to_reachable(origin, len(kept))
    survivors = builder.container.all_coords()
    logger.info(
        "carved radius %d map: %d of %d cubes connected to %s",
        radius,
        len(survivors),
        len(candidates),
        origin,
    )
    return survivors


def random_ring_path(
    index: SpatialIndex,
    origin: Cube,
    steps: int,
    *,
    randomness: MapRandomness,
    pathfinder: PathFinder | None = None,
    label: str = "path",
) -> PathResult | None:
    """Path from ``origin`` to a random cube on the farthest populated ring.

    Rings are tried from ``steps`` inwards. The first path with at least two
    cubes is stored in the ``label`` container and returned; ``None`` means no
    ring offered a reachable target.
    """

    if pathfinder is None:
        pathfinder = PathFinder(index.settings)
    container = index.default
    rng = randomness.generator("ring-path")
    for distance in range(steps, 0, -1):
        candidates = ring_in(container, origin, distance)
        if not candidates:
            continue
        target = candidates[int(rng.integers(len(candidates)))].cube
        result = pathfinder.find(origin, target, container)
        if result and len(result.path) >= 2:
            index.get_or_create(label).add_many(result.entities(container))
            return result
    return None


def happy_face_cubes() -> list[Cube]:
    """A radius 10 hexagon with two eyes and a smile cut out of it."""

    face = neighbors_within(ORIGIN, 10)
    eye_left = neighbors_within(Cube(-4, 5, -1), 2)
    eye_right = neighbors_within(Cube(4, 1, -5), 2)

    mouth = difference(neighbors_within(Cube(0, 1, -1), 8), neighbors_within(Cube(0, 2, -2), 7))
    mouth = difference(mouth, line(Cube(8, 2, -10), Cube(8, -10, 2)))
    mouth = difference(mouth, line(Cube(-8, 10, -2), Cube(-8, -2, 10)))
    mouth += [Cube(-1, -4, 5), Cube(1, -5, 4), Cube(0, -5, 5)]
    mouth = [cube for cube in mouth if cube != Cube(0, -7, 7)]

    face = difference(face, eye_left)
    face = difference(face, eye_right)
    return difference(face, mouth)


__all__ = [
    "MapRandomness",
    "carve_random_map",
    "happy_face_cubes",
    "random_ring_path",
]

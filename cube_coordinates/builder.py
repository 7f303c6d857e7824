"""Bulk construction and pruning of the coordinates held by a spatial index."""

from __future__ import annotations

import logging
from typing import Iterable

from .cubes import ORIGIN, Cube, difference
from .display import NullDisplay, TileDisplay
from .index import Container, Entity, SpatialIndex
from .queries import reachable

logger = logging.getLogger(__name__)


class GridBuilder:
    """Creates entities in the index's default container and discards them.

    Entities are born in the default (``"all"``) container. Removal goes
    through :meth:`SpatialIndex.discard`, so an entity leaves every container
    at once and the display strategy is asked to release its visual.
    """

    def __init__(self, index: SpatialIndex, *, display: TileDisplay | None = None) -> None:
        self.index = index
        self.display: TileDisplay = display if display is not None else NullDisplay()

    @property
    def container(self) -> Container:
        return self.index.default

    # Construction -----------------------------------------------------

    def build_radial(self, radius: int, *, center: Cube = ORIGIN) -> list[Entity]:
        """Fill the hexagon of ``radius`` around ``center``."""

        if radius < 0:
            raise ValueError("radius must be non-negative")
        cubes: list[Cube] = []
        for x in range(-radius, radius + 1):
            for y in range(-radius, radius + 1):
                for z in range(-radius, radius + 1):
                    if x + y + z == 0:
                        cubes.append(center + Cube(x, y, z))
        return self.build_from_list(cubes)

    def build_from_list(self, cubes: Iterable[Cube]) -> list[Entity]:
        """Create entities for ``cubes``, skipping any already present."""

        container = self.container
        created: list[Entity] = []
        for cube in cubes:
            if cube in container:
                continue
            entity = self.index.create_entity(cube)
            container.add(entity)
            created.append(entity)
        logger.debug("built %d entities in %r", len(created), container.label)
        return created

    def realize(self, display: TileDisplay | None = None) -> int:
        """Ask the display strategy for a visual for every entity lacking one."""

        if display is not None:
            self.display = display
        count = 0
        for entity in self.container.values():
            if entity.payload is not None:
                continue
            entity.payload = self.display.create(entity)
            count += 1
        return count

    # Removal ----------------------------------------------------------

    def remove(self, cube: Cube) -> Entity | None:
        entity = self.index.discard(cube)
        if entity is not None:
            self.display.release(entity)
        return entity

    def remove_many(self, cubes: Iterable[Cube]) -> list[Entity]:
        removed: list[Entity] = []
        for cube in cubes:
            entity = self.remove(cube)
            if entity is not None:
                removed.append(entity)
        if removed:
            logger.debug("removed %d entities", len(removed))
        return removed

    def prune_to_reachable(self, origin: Cube, max_steps: int) -> list[Cube]:
        """Drop every entity not walkable from ``origin`` within ``max_steps``.

        Returns the removed cubes. An origin missing from the default
        container leaves the grid untouched.
        """

        container = self.container
        if origin not in container:
            logger.warning(
                "cannot prune from %s: not in container %r", origin, container.label
            )
            return []
        visited = reachable(container, origin, max_steps)
        unreachable = difference(container.all_coords(), visited)
        self.remove_many(unreachable)
        logger.debug(
            "pruned %d unreachable cubes from %s (%d remain)",
            len(unreachable),
            origin,
            len(container),
        )
        return unreachable

    def clear(self) -> None:
        """Release every visual and drop all containers."""

        seen: set[int] = set()
        for label in self.index.labels():
            for entity in self.index.get_or_create(label).values():
                if id(entity) in seen:
                    continue
                seen.add(id(entity))
                self.display.release(entity)
        self.index.clear()


__all__ = ["GridBuilder"]

"""Spatial index: named containers mapping cube coordinates to entities."""

from __future__ import annotations

import itertools
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator

from .config import DEFAULT_SETTINGS, GridSettings
from .cubes import Cube, WorldPosition, cube_to_world, world_to_cube
from .errors import EntityNotFound

logger = logging.getLogger(__name__)

_container_tokens = itertools.count(1)


@dataclass(eq=False, slots=True)
class Entity:
    """A grid cell: its cube coordinate, world position and search scratch.

    ``payload`` is an opaque reference owned by the caller (for example a
    handle to a presentation object); the index never creates or destroys it.
    """

    cube: Cube
    position: WorldPosition
    g_cost: float = 0.0
    h_cost: float = 0.0
    payload: Any = field(default=None, repr=False)

    @property
    def f_cost(self) -> float:
        return self.g_cost + self.h_cost

    def reset_costs(self) -> None:
        self.g_cost = 0.0
        self.h_cost = 0.0


def _key(item: Cube | Entity) -> Cube:
    return item.cube if isinstance(item, Entity) else item


class Container(Mapping[Cube, Entity]):
    """One logical view of the grid, e.g. ``"all"``, ``"visible"`` or ``"path"``.

    Each cube holds at most one entity and the first entity added for a cube
    wins. Entities are shared by reference, so removing one here leaves its
    membership in other containers untouched.
    """

    def __init__(self, label: str) -> None:
        self._label = label
        self._contents: dict[Cube, Entity] = {}
        self._version = 0
        self._token = next(_container_tokens)

    @property
    def label(self) -> str:
        return self._label

    @property
    def version(self) -> int:
        """Counter bumped by every mutation; used to invalidate cached paths."""

        return self._version

    @property
    def token(self) -> int:
        """Process-unique identity, never reused after the container is gone."""

        return self._token

    # Mapping protocol -------------------------------------------------

    def __getitem__(self, cube: Cube) -> Entity:
        try:
            return self._contents[cube]
        except KeyError:
            raise EntityNotFound(self._label, cube) from None

    def __iter__(self) -> Iterator[Cube]:
        return iter(self._contents)

    def __len__(self) -> int:
        return len(self._contents)

    def __contains__(self, cube: object) -> bool:
        return cube in self._contents

    def __repr__(self) -> str:
        return f"Container(label={self._label!r}, size={len(self._contents)})"

    # Mutation ---------------------------------------------------------

    def add(self, entity: Entity) -> bool:
        if entity.cube in self._contents:
            return False
        self._contents[entity.cube] = entity
        self._version += 1
        return True

    def add_many(self, entities: Iterable[Entity]) -> int:
        return sum(1 for entity in entities if self.add(entity))

    def remove(self, item: Cube | Entity) -> Entity | None:
        entity = self._contents.pop(_key(item), None)
        if entity is not None:
            self._version += 1
        return entity

    def remove_many(self, items: Iterable[Cube | Entity]) -> list[Entity]:
        removed: list[Entity] = []
        for item in items:
            entity = self.remove(item)
            if entity is not None:
                removed.append(entity)
        return removed

    def clear(self) -> None:
        if self._contents:
            self._contents.clear()
            self._version += 1

    # Queries ----------------------------------------------------------

    def get(self, cube: Cube, default: Entity | None = None) -> Entity | None:
        return self._contents.get(cube, default)

    def get_many(self, cubes: Iterable[Cube]) -> list[Entity]:
        """Entities for ``cubes`` in input order; absent cubes are skipped."""

        return [self._contents[c] for c in cubes if c in self._contents]

    def get_from_world_position(
        self, position: WorldPosition, settings: GridSettings = DEFAULT_SETTINGS
    ) -> Entity | None:
        return self.get(world_to_cube(position, settings))

    def all(self) -> list[Entity]:
        return list(self._contents.values())

    def all_coords(self) -> list[Cube]:
        return list(self._contents.keys())


class SpatialIndex:
    """Caller-owned registry of containers plus the grid layout settings."""

    def __init__(self, settings: GridSettings | None = None) -> None:
        self.settings = settings if settings is not None else DEFAULT_SETTINGS
        self._containers: dict[str, Container] = {}

    def get_or_create(self, label: str | None = None) -> Container:
        if label is None:
            label = self.settings.default_label
        container = self._containers.get(label)
        if container is None:
            container = Container(label)
            self._containers[label] = container
            logger.debug("created container %r", label)
        return container

    @property
    def default(self) -> Container:
        return self.get_or_create(self.settings.default_label)

    def __contains__(self, label: object) -> bool:
        return label in self._containers

    def labels(self) -> list[str]:
        return list(self._containers)

    def create_entity(self, cube: Cube, payload: Any = None) -> Entity:
        return Entity(cube=cube, position=cube_to_world(cube, self.settings), payload=payload)

    def containers_holding(self, cube: Cube) -> list[Container]:
        return [c for c in self._containers.values() if cube in c]

    def discard(self, cube: Cube) -> Entity | None:
        """Remove ``cube`` from every container and return its entity, if any."""

        discarded: Entity | None = None
        for container in self._containers.values():
            entity = container.remove(cube)
            if entity is not None and discarded is None:
                discarded = entity
        return discarded

    def clear(self) -> None:
        self._containers.clear()


__all__ = ["Container", "Entity", "SpatialIndex"]

"""
A* path search over the entities of a container.

Primary goals:
- Answer ``find(origin, target, container)`` with a value, never an exception:
  failures come back as a ``PathResult`` carrying a ``PathNotFound``.
- Keep g/h/parent bookkeeping in a per-query table so searches never reuse
  stale cost state and independent queries may interleave.
- Cache results per container token and version, like a budget key: any
  add/remove on the container invalidates the cached answer automatically,
  and a replacement container never inherits another one's answers.

Usage:
    finder = PathFinder()
    result = finder.find(Cube(0, 0, 0), Cube(2, -2, 0), index.default)
    if result:
        walk(result.path)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .config import DEFAULT_SETTINGS, GridSettings
from .cubes import AStarSearch, Cube, astar, distance, neighbors_within
from .errors import PathNotFound
from .index import Container, Entity

logger = logging.getLogger(__name__)

# --- Result -------------------------------------------------------------------


@dataclass(frozen=True)
class PathResult:
    """Outcome of a single path query.

    ``path`` runs from origin to target inclusive; it is empty both for the
    degenerate origin == target query and for failures, which are told apart
    by ``error``. It is a tuple so a cached result cannot be edited in place.
    """

    origin: Cube
    target: Cube
    path: tuple[Cube, ...] = ()
    cost: float = 0.0
    explored: int = 0
    error: PathNotFound | None = None

    @property
    def found(self) -> bool:
        return self.error is None

    def __bool__(self) -> bool:
        return self.found

    def unwrap(self) -> list[Cube]:
        """Return the path, raising the carried :class:`PathNotFound` on failure."""
        if self.error is not None:
            raise self.error
        return list(self.path)

    def entities(self, container: Container) -> list[Entity]:
        return container.get_many(self.path)


# --- Path finder --------------------------------------------------------------


class PathFinder:
    """
    Hex A* facade over a :class:`~cube_coordinates.index.Container`.

    - Steps between direct neighbours cost ``distance(a, b)``, always 1.
    - The heuristic is the cube distance to the target.
    - ``record_costs`` publishes the per-query g/h onto the entities after the
      search, for debugging overlays; the search itself never reads them.
      Such finders always search afresh instead of answering from the cache.
    """

    def __init__(
        self,
        settings: GridSettings | None = None,
        *,
        max_iterations: int | None = None,
        record_costs: bool = False,
        use_cache: bool = True,
    ) -> None:
        settings = settings if settings is not None else DEFAULT_SETTINGS
        self.max_iterations = (
            max_iterations if max_iterations is not None else settings.max_search_iterations
        )
        self.record_costs = record_costs
        self.use_cache = use_cache
        self._cache: dict[tuple[Cube, Cube, int, int], PathResult] = {}

    # --------- Public API ---------

    def find(self, origin: Cube, target: Cube, container: Container) -> PathResult:
        if origin == target:
            return PathResult(origin, target)

        key = (origin, target, container.token, container.version)
        # recorded costs must come from a fresh search
        use_cache = self.use_cache and not self.record_costs
        if use_cache and key in self._cache:
            return self._cache[key]

        if target not in container:
            return self._fail(origin, target, "target is not in container " + repr(container.label))
        if origin not in container:
            return self._fail(origin, target, "origin is not in container " + repr(container.label))

        search = self._run_astar(origin, target, container)
        if self.record_costs:
            self._publish_costs(search, container)

        if search.path is None:
            reason = "iteration limit reached" if search.exhausted else "target is unreachable"
            result = self._fail(origin, target, reason, explored=search.explored)
        else:
            result = PathResult(
                origin, target, tuple(search.path), cost=search.cost, explored=search.explored
            )
            logger.debug(
                "path %s -> %s: %d steps, %d explored",
                origin,
                target,
                len(search.path) - 1,
                search.explored,
            )

        if use_cache:
            self._cache[key] = result
        return result

    def invalidate(self) -> None:
        """Clear cached results. Container mutations already bypass stale entries."""
        self._cache.clear()

    # --------- Internal helpers ---------

    def _run_astar(self, origin: Cube, target: Cube, container: Container) -> AStarSearch[Cube]:
        def neighbors(cube: Cube) -> list[Cube]:
            return [n for n in neighbors_within(cube, 1) if n in container]

        return astar(
            origin,
            target,
            neighbors,
            distance,
            cost=distance,
            max_iterations=self.max_iterations,
        )

    @staticmethod
    def _publish_costs(search: AStarSearch[Cube], container: Container) -> None:
        for entity in container.values():
            entity.reset_costs()
        for cube, g in search.g_cost.items():
            entity = container.get(cube)
            if entity is None:
                continue
            entity.g_cost = g
            entity.h_cost = search.h_cost.get(cube, 0.0)

    @staticmethod
    def _fail(origin: Cube, target: Cube, reason: str, *, explored: int = 0) -> PathResult:
        logger.debug("no path %s -> %s: %s", origin, target, reason)
        return PathResult(
            origin,
            target,
            explored=explored,
            cost=float("inf"),
            error=PathNotFound(origin, target, reason),
        )


__all__ = ["PathFinder", "PathResult"]

from __future__ import annotations

import heapq
from dataclasses import dataclass, field
from typing import Callable, Generic, Hashable, Iterable, TypeVar

N = TypeVar("N", bound=Hashable)


@dataclass
class AStarSearch(Generic[N]):
    """Outcome and scratch tables of one A* run."""

    path: list[N] | None
    cost: float
    g_cost: dict[N, float] = field(default_factory=dict)
    h_cost: dict[N, float] = field(default_factory=dict)
    explored: int = 0
    exhausted: bool = False

    @property
    def found(self) -> bool:
        return self.path is not None


def astar(
    start: N,
    goal: N,
    neighbors: Callable[[N], Iterable[N]],
    heuristic: Callable[[N, N], float],
    *,
    cost: Callable[[N, N], float] = lambda a, b: 1.0,
    passable: Callable[[N], bool] = lambda x: True,
    max_iterations: int | None = None,
) -> AStarSearch[N]:
    """Generic A* over hashable nodes.

    The open set is ordered by ``(f, h)`` with insertion order as the final
    tie-break. All cost bookkeeping lives in the returned record, so repeated
    searches never share state. ``exhausted`` is set when ``max_iterations``
    stopped the search before the open set ran dry.
    """
    g = {start: 0.0}
    h = {start: float(heuristic(start, goal))}
    came_from: dict[N, N] = {}
    open_heap: list[tuple[float, float, int, N]] = []
    push_id = 0
    heapq.heappush(open_heap, (g[start] + h[start], h[start], push_id, start))
    closed: set[N] = set()
    explored = 0

    while open_heap:
        if max_iterations is not None and explored >= max_iterations:
            return AStarSearch(None, float("inf"), g, h, explored, exhausted=True)
        f_entry, _, _, current = heapq.heappop(open_heap)
        if current in closed or f_entry > g[current] + h[current]:
            # stale entry superseded by a cheaper push
            continue
        closed.add(current)
        explored += 1
        if current == goal:
            rev = [current]
            while current in came_from:
                current = came_from[current]
                rev.append(current)
            rev.reverse()
            return AStarSearch(rev, g[goal], g, h, explored)

        for nxt in neighbors(current):
            if nxt in closed or not passable(nxt):
                continue
            tentative = g[current] + float(cost(current, nxt))
            if tentative < g.get(nxt, float("inf")):
                came_from[nxt] = current
                g[nxt] = tentative
                h[nxt] = float(heuristic(nxt, goal))
                push_id += 1
                heapq.heappush(open_heap, (tentative + h[nxt], h[nxt], push_id, nxt))

    return AStarSearch(None, float("inf"), g, h, explored)

"""Graph views of a container for connectivity analysis."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeAlias

import networkx as nx

from .cubes import Cube, DIRECTIONS
from .index import Container

if TYPE_CHECKING:  # pragma: no cover - typing only
    CubeGraph: TypeAlias = nx.Graph[Cube]
else:  # pragma: no cover - runtime alias without subscripting
    CubeGraph: TypeAlias = nx.Graph


def container_graph(container: Container) -> CubeGraph:
    """Return an undirected graph of the container's cubes and adjacencies.

    Nodes carry the entity under ``"entity"``; every edge joins two direct
    neighbours and weighs 1.
    """

    graph: CubeGraph = nx.Graph(label=container.label)
    for cube, entity in container.items():
        graph.add_node(cube, entity=entity)
    for cube in container:
        # half the directions suffice for an undirected graph
        for direction in DIRECTIONS[:3]:
            other = cube + direction
            if other in container:
                graph.add_edge(cube, other, weight=1.0)
    return graph


def connected_region(container: Container, origin: Cube) -> set[Cube]:
    """Return every cube connected to ``origin``, or an empty set if absent."""

    if origin not in container:
        return set()
    graph = container_graph(container)
    return set(nx.node_connected_component(graph, origin))


def region_count(container: Container) -> int:
    """Number of disconnected islands in the container."""

    return nx.number_connected_components(container_graph(container))


__all__ = ["CubeGraph", "connected_region", "container_graph", "region_count"]

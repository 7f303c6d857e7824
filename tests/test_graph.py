from cube_coordinates.builder import GridBuilder
from cube_coordinates.cubes import ORIGIN, Cube, ring
from cube_coordinates.graph import connected_region, container_graph, region_count
from cube_coordinates.index import SpatialIndex


def test_container_graph_edges_join_neighbours() -> None:
    builder = GridBuilder(SpatialIndex())
    builder.build_radial(1)
    graph = container_graph(builder.container)
    assert graph.number_of_nodes() == 7
    # six spokes plus six rim edges
    assert graph.number_of_edges() == 12
    assert graph.nodes[ORIGIN]["entity"] is builder.container[ORIGIN]
    assert graph.edges[ORIGIN, Cube(1, -1, 0)]["weight"] == 1.0
    assert graph.graph["label"] == "all"


def test_region_count_and_connected_region() -> None:
    builder = GridBuilder(SpatialIndex())
    builder.build_radial(2)
    assert region_count(builder.container) == 1
    builder.remove_many(ring(ORIGIN, 1))
    assert region_count(builder.container) == 2
    assert connected_region(builder.container, ORIGIN) == {ORIGIN}
    assert connected_region(builder.container, Cube(2, -2, 0)) == set(ring(ORIGIN, 2))
    assert connected_region(builder.container, Cube(1, -1, 0)) == set()

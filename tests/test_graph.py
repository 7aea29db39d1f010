from dataclasses import dataclass

from contestkit.graph import Edge, EdgeGraph, Graph


def test0():
    g = Graph()
    g.add_edge(0, 1).add_edge(0, 2).add_edge(1, 2)
    assert g.build_low_link(range(3)).bridges() == []


def test1():
    g = Graph()
    (
        g.add_edge(0, 1)
        .add_edge(0, 2)
        .add_edge(1, 2)
        .add_edge(1, 3)
        .add_edge(2, 3)
        .add_edge(1, 4)
        .add_edge(4, 5)
        .add_edge(5, 6)
        .add_edge(6, 4)
        .add_edge(2, 7)
        .add_edge(7, 8)
        .add_edge(7, 9)
    )
    assert g.build_low_link(range(10)).bridges() == [5, 10, 11, 9]


def test_counts():
    g = Graph()
    g.add_edge(0, 1).add_edge(1, 2).add_edge(1, 2)
    assert g.vertex_count() == 3
    assert g.edge_count == 3


def test_unidirected_edges_use_their_ids():
    g = Graph()
    for edge in (Edge(0, 1, 0), Edge(1, 2, 1), Edge(2, 0, 2), Edge(2, 3, 3)):
        g.add_unidirected_edge(edge)
    assert g.build_low_link(range(4)).bridges() == [3]
    assert g.vertex_count() == 4


def test_parallel_edges_are_not_bridges():
    g = Graph()
    g.add_edge(0, 1).add_edge(1, 2).add_edge(1, 2).add_edge(2, 0)
    assert g.build_low_link(range(3)).bridges() == []


def test_edge_other():
    edge = Edge(3, 9, 0)
    assert edge.other(3) == 9
    assert edge.other(9) == 3


@dataclass(frozen=True)
class WeightedEdge(Edge):
    weight: int = 0


def test_edge_graph_directed():
    g = EdgeGraph()
    edge = WeightedEdge(0, 10, 10, weight=1)
    g.add_directed_edge(edge)
    assert g.edges_from(0) == [edge]
    assert g.edges_from(10) == []
    assert g.edge_count == 1


def test_edge_graph_undirected():
    g = EdgeGraph()
    first = Edge(0, 1, 0)
    second = Edge(1, 2, 1)
    g.add_edge(first).add_edge(second)
    assert g.edges_from(1) == [first, second]
    assert g.edges_from(2) == [second]
    assert g.edge_count == 2
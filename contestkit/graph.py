"""Undirected multigraphs with bridge search, and graphs of edge objects."""

from dataclasses import dataclass
from typing import NamedTuple


@dataclass(frozen=True)
class Edge:
    """An edge between ``start`` and ``end`` carrying an identifier."""

    start: int
    end: int
    id: int

    def other(self, vertex):
        """Return the endpoint opposite to ``vertex``."""
        return self.start ^ self.end ^ vertex


class _Arc(NamedTuple):
    to: int
    id: int


class Graph:
    """Undirected multigraph whose edges are numbered as they are added."""

    def __init__(self):
        self._adjacency = {}
        self._edge_count = 0

    @property
    def edge_count(self):
        return self._edge_count

    def _link(self, start, end, edge_id):
        self._adjacency.setdefault(start, []).append(_Arc(end, edge_id))
        self._adjacency.setdefault(end, []).append(_Arc(start, edge_id))
        self._edge_count += 1
        return self

    def add_unidirected_edge(self, edge):
        """Add ``edge`` in both directions under its own identifier."""
        return self._link(edge.start, edge.end, edge.id)

    def add_edge(self, start, end):
        """Add an edge numbered by the count of edges added before it."""
        return self._link(start, end, self._edge_count)

    def vertex_count(self):
        """Return the number of vertices touched by at least one edge."""
        return len(self._adjacency)

    def build_low_link(self, vertices):
        """Run a depth-first search from each unvisited vertex in order."""
        return LowLink(self, vertices)


class LowLink:
    """Pre-order numbers, low links and bridges of a graph.

    A search root treats edge 0 as the edge it was reached by.
    """

    def __init__(self, graph, vertices):
        self._adjacency = graph._adjacency
        self._counter = 0
        self._pre_order = {}
        self._low_links = {}
        self._bridges = []
        for vertex in vertices:
            if vertex not in self._pre_order:
                self._search(vertex)

    def _visit(self, vertex, incoming):
        self._counter += 1
        self._pre_order[vertex] = self._counter
        self._low_links[vertex] = self._counter
        return vertex, incoming, iter(self._adjacency.get(vertex, ()))

    def _search(self, root):
        stack = [self._visit(root, 0)]
        while stack:
            cur, incoming, arcs = stack[-1]
            for arc in arcs:
                if arc.id == incoming:
                    continue
                if arc.to in self._pre_order:
                    self._low_links[cur] = min(self._low_links[cur], self._pre_order[arc.to])
                    continue
                stack.append(self._visit(arc.to, arc.id))
                break
            else:
                stack.pop()
                if stack:
                    parent = stack[-1][0]
                    self._low_links[parent] = min(self._low_links[parent], self._low_links[cur])
                    if self._low_links[cur] == self._pre_order[cur]:
                        self._bridges.append(incoming)

    def bridges(self):
        """Return the identifiers of the bridges in the order they were found."""
        return list(self._bridges)


class EdgeGraph:
    """Graph that keeps the edge objects themselves in its adjacency lists."""

    def __init__(self):
        self._edges = {}
        self._edge_count = 0

    @property
    def edge_count(self):
        return self._edge_count

    def add_directed_edge(self, edge):
        """Add ``edge`` under its start vertex only."""
        self._edges.setdefault(edge.start, []).append(edge)
        self._edge_count += 1
        return self

    def add_edge(self, edge):
        """Add ``edge`` under both of its endpoints."""
        self._edges.setdefault(edge.start, []).append(edge)
        self._edges.setdefault(edge.end, []).append(edge)
        self._edge_count += 1
        return self

    def edges_from(self, vertex):
        """Return the edges stored under ``vertex``."""
        return list(self._edges.get(vertex, ()))
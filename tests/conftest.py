"""Sample graphs shared across the test suite."""

from __future__ import annotations

import pytest

from pathgraph import Graph
from pathgraph.graph import from_edges


def build_graph(directed, values, edges) -> Graph:
    graph = Graph(directed=directed)
    for value in values:
        assert graph.add_node(value) is not None
    for u, v, weight in edges:
        assert graph.add_edge(u, v, weight)
    return graph


def build_nine_node(directed: bool) -> Graph:
    # Undirected variant skips the explicit reverse edges 4->1 and 5->4;
    # add_edge creates them anyway.
    #
    #   1 --2-- 2 <-1-- 3
    #   |       |       ^
    #   2       2       1
    #   |       v       |
    #   4 --2-- 5 <-1-- 6
    #   |       |       ^
    #   2       2       1
    #   v       v       |
    #   7 --2-> 8 --1-> 9
    graph = Graph(directed=directed)
    for value in range(1, 10):
        graph.add_node(value)

    graph.add_edge(1, 2, 2)
    graph.add_edge(1, 4, 2)
    if directed:
        graph.add_edge(4, 1, 2)
    graph.add_edge(2, 5, 2)
    graph.add_edge(3, 2, 1)
    graph.add_edge(4, 5, 2)
    if directed:
        graph.add_edge(5, 4, 2)
    graph.add_edge(4, 7, 2)
    graph.add_edge(5, 8, 2)
    graph.add_edge(6, 3, 1)
    graph.add_edge(6, 5, 1)
    graph.add_edge(7, 8, 2)
    graph.add_edge(8, 9, 1)
    graph.add_edge(9, 6, 1)
    return graph


@pytest.fixture
def small_directed() -> Graph:
    #       [1]       [2]
    #   1 ──────► 2 ──────► 5
    #   │                   │ [1]
    #   │ [3]     [3]       ▼
    #   └───────► 3 ──────► 4 ──[2]──► 6
    return build_graph(
        True,
        range(1, 7),
        [(1, 2, 1), (1, 3, 3), (2, 5, 2), (3, 4, 3), (5, 4, 1), (4, 6, 2)],
    )


@pytest.fixture
def complex_directed() -> Graph:
    graph = Graph(directed=True)
    for value in range(1, 12):
        graph.add_node(value)
    for u, v, weight in [
        (1, 2, 1),
        (1, 4, 1),
        (1, 3, 3),
        (2, 7, 5),
        (3, 4, 2),
        (3, 6, 2),
        (3, 6, 4),  # dropped: 3 already has an edge to 6
        (4, 5, 6),
        (4, 6, 1),
        (5, 8, 2),
        (5, 9, 2),
        (6, 8, 3),
        (7, 8, 6),
        (8, 10, 2),
        (9, 10, 2),
        (9, 11, 4),
        (10, 11, 3),
    ]:
        graph.add_edge(u, v, weight)
    return graph


@pytest.fixture
def nine_directed() -> Graph:
    return build_nine_node(directed=True)


@pytest.fixture
def nine_undirected() -> Graph:
    return build_nine_node(directed=False)


@pytest.fixture
def late_shortcut() -> Graph:
    # S is settled first, then A (distance 1) exposes E through a costly edge.
    # The cheap route through B is only known once B (distance 2) is settled.
    #
    #        [1]      [10]
    #   S ───────► A ───────► E
    #   │                     ▲
    #   │  [2]         [1]    │
    #   └────────► B ─────────┘
    return from_edges(
        [("S", "A", 1), ("S", "B", 2), ("A", "E", 10), ("B", "E", 1)],
        directed=True,
    )

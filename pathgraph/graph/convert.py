"""Conversion utilities between `Graph` and NetworkX graphs.

`to_networkx` produces a detached copy suitable for use with NetworkX
algorithms; `from_networkx` and `from_edges` build a `Graph` while applying
its insertion rules (first edge to a target wins).
"""

from __future__ import annotations

from typing import Any, Hashable, Iterable, Tuple, Union

import networkx as nx

from pathgraph.graph.weighted_graph import Graph

NxGraph = Union[nx.DiGraph, nx.Graph]


def to_networkx(graph: Graph, weight_attr: str = "weight") -> NxGraph:
    """Copy a `Graph` into a plain NetworkX graph.

    Args:
        graph: Graph to convert.
        weight_attr: Edge attribute name that receives the weight.

    Returns:
        ``nx.DiGraph`` for directed graphs, ``nx.Graph`` otherwise. Node keys
        are node values; no handle objects are carried over.

    Raises:
        ValueError: If the graph holds a node whose value is None, which
            NetworkX cannot store.
    """
    if graph.exists(None):
        raise ValueError("Node value None cannot be represented in NetworkX.")
    nx_graph: NxGraph = nx.DiGraph() if graph.directed else nx.Graph()
    nx_graph.add_nodes_from(node.value for node in graph.get_nodes())
    for src, dst, weight in graph.get_edges():
        nx_graph.add_edge(src.value, dst.value, **{weight_attr: weight})
    return nx_graph


def from_networkx(
    nx_graph: Any,
    weight_attr: str = "weight",
    default_weight: int = 1,
) -> Graph:
    """Build a `Graph` from a NetworkX ``Graph`` or ``DiGraph``.

    Args:
        nx_graph: Source graph. Directedness is preserved.
        weight_attr: Edge attribute holding the weight.
        default_weight: Weight used when an edge lacks ``weight_attr``.

    Returns:
        A new Graph with the same nodes (in NetworkX order) and edges.

    Raises:
        TypeError: If ``nx_graph`` is not a simple NetworkX graph. Multigraphs
            are rejected since a `Graph` keeps one edge per target.
        ValueError: If an edge weight is not a non-negative integer.
    """
    if isinstance(nx_graph, (nx.MultiGraph, nx.MultiDiGraph)) or not isinstance(
        nx_graph, nx.Graph
    ):
        raise TypeError(
            f"Expected NetworkX Graph or DiGraph, got {type(nx_graph).__name__}"
        )

    graph = Graph(directed=nx_graph.is_directed())
    for value in nx_graph.nodes:
        graph.add_node(value)
    for u, v, data in nx_graph.edges(data=True):
        graph.add_edge(u, v, data.get(weight_attr, default_weight))
    return graph


def from_edges(
    edges: Iterable[Tuple[Hashable, Hashable, int]],
    directed: bool = True,
) -> Graph:
    """Build a `Graph` from ``(source, target, weight)`` triples.

    Nodes are added the first time they are seen, source before target.
    """
    graph = Graph(directed=directed)
    for u, v, weight in edges:
        graph.add_node(u)
        graph.add_node(v)
        graph.add_edge(u, v, weight)
    return graph

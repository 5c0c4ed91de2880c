"""pathgraph: weighted graphs with shortest-path queries.

Primary API:
    Graph, Node, Edge - Weighted graph model with value-identified nodes
    find_path() - Dijkstra shortest path between two nodes
    calculate_path_cost() - Total edge weight along a node sequence
    from_networkx() / to_networkx() - NetworkX interoperability

Example:
    from pathgraph import Graph, find_path, calculate_path_cost

    graph = Graph(directed=True)
    a, b, c = graph.add_node("A"), graph.add_node("B"), graph.add_node("C")
    graph.add_edge(a, b, 1)
    graph.add_edge(b, c, 2)

    path = find_path(graph, a, c)
    cost = calculate_path_cost(path)  # 3
"""

from __future__ import annotations

from pathgraph import logging
from pathgraph.graph import Edge, Graph, Node, from_edges, from_networkx, to_networkx
from pathgraph.algorithms import (
    AlgorithmError,
    CannotFindClosestNodeError,
    CannotFindPathError,
    StopCondition,
    calculate_path_cost,
    find_path,
)
from pathgraph.config import SEARCH_CONFIG, SearchConfig

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Model
    "Graph",
    "Node",
    "Edge",
    # Algorithms
    "find_path",
    "calculate_path_cost",
    "StopCondition",
    # Errors
    "AlgorithmError",
    "CannotFindPathError",
    "CannotFindClosestNodeError",
    # Configuration
    "SearchConfig",
    "SEARCH_CONFIG",
    # NetworkX integration
    "from_edges",
    "from_networkx",
    "to_networkx",
    # Utilities
    "logging",
]

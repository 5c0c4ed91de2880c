"""Graph primitives and helpers.

This package provides the weighted graph type `Graph` with its `Node` and
`Edge` handles, and conversion helpers to and from NetworkX (`convert`).
"""

from pathgraph.graph.weighted_graph import Edge, Graph, Node
from pathgraph.graph.convert import from_edges, from_networkx, to_networkx

__all__ = [
    "Edge",
    "Graph",
    "Node",
    "from_edges",
    "from_networkx",
    "to_networkx",
]

from __future__ import annotations

from typing import Sequence

from pathgraph.graph.weighted_graph import Node


def calculate_path_cost(path: Sequence[Node]) -> int:
    """
    Sum the edge weights along a node sequence.

    For each consecutive pair, the weight of the first outgoing edge of the
    earlier node whose target equals the later node is added. Pairs without
    such an edge contribute nothing; the path is not validated.

    Args:
        path: Nodes in traversal order, as returned by ``find_path``.

    Returns:
        Total weight. 0 for sequences shorter than two nodes.
    """
    cost = 0
    for node, next_node in zip(path, path[1:]):
        for edge in node.edges:
            if edge.target.value == next_node.value:
                cost += edge.weight
                break
    return cost

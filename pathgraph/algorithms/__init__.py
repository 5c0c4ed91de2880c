"""Path-finding algorithms over `pathgraph.graph.Graph`."""

from pathgraph.algorithms.base import INFINITY, Cost, StopCondition
from pathgraph.algorithms.errors import (
    AlgorithmError,
    CannotFindClosestNodeError,
    CannotFindPathError,
)
from pathgraph.algorithms.spf import find_path
from pathgraph.algorithms.path_cost import calculate_path_cost

__all__ = [
    "INFINITY",
    "Cost",
    "StopCondition",
    "AlgorithmError",
    "CannotFindClosestNodeError",
    "CannotFindPathError",
    "find_path",
    "calculate_path_cost",
]

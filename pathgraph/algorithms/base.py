from __future__ import annotations

from enum import IntEnum
from typing import Union

#: Accumulated path cost. Edge weights are non-negative integers; only the
#: unreached sentinel is a float.
Cost = Union[int, float]

#: Tentative distance of a node that has not been reached yet.
INFINITY: float = float("inf")


class StopCondition(IntEnum):
    """
    When the shortest-path search stops and materializes the result.
    """

    #: Return as soon as the end node shows up as a neighbor of a settled node.
    #: Cheap, but a cheaper route discovered later is never considered.
    DISCOVERED = 1
    #: Classic Dijkstra: return only once the end node itself is settled.
    SETTLED = 2

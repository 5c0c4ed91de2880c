"""Single-source shortest path between two nodes of a `Graph`.

Dijkstra's algorithm over a binary heap with lazy decrease-key: improving a
node's distance pushes a fresh heap entry and outdated entries are skipped on
pop. Tentative distances and path prefixes live in a table allocated per
call, indexed by node insertion order, so queries never observe each other's
state.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from heapq import heapify, heappop, heappush
from typing import Dict, List, Optional, Set, Tuple

from pathgraph.algorithms.base import INFINITY, Cost, StopCondition
from pathgraph.algorithms.errors import CannotFindClosestNodeError, CannotFindPathError
from pathgraph.config import SEARCH_CONFIG
from pathgraph.graph.weighted_graph import Graph, Node, NodeLike
from pathgraph.logging import describe_path, get_logger

logger = get_logger(__name__)


@dataclass
class _SearchState:
    """Working table of one query.

    Attributes:
        nodes: Graph nodes in insertion order; positions serve as node indices.
        index: Maps a node value to its position in ``nodes``.
        distance: Tentative distance per node index.
        path: Best known path prefix per node index, excluding the start node.
        settled: Indices of nodes removed from the frontier.
        frontier: Heap of ``(distance, index)`` entries, possibly stale.
    """

    nodes: List[Node]
    index: Dict[object, int]
    distance: List[Cost]
    path: List[List[Node]]
    settled: Set[int] = field(default_factory=set)
    frontier: List[Tuple[Cost, int]] = field(default_factory=list)

    @classmethod
    def for_graph(cls, graph: Graph, start_value: object) -> _SearchState:
        nodes = graph.get_nodes()
        state = cls(
            nodes=nodes,
            index={node.value: i for i, node in enumerate(nodes)},
            distance=[INFINITY] * len(nodes),
            path=[[] for _ in nodes],
        )
        state.distance[state.index[start_value]] = 0
        # Every node starts in the frontier; ties resolve by insertion order
        state.frontier = [(dist, i) for i, dist in enumerate(state.distance)]
        heapify(state.frontier)
        return state

    def pop_closest(self) -> int:
        """Remove and return the unsettled node with the smallest distance.

        Raises:
            CannotFindClosestNodeError: If no live entry is left in the heap.
        """
        while self.frontier:
            dist, i = heappop(self.frontier)
            if i in self.settled or dist != self.distance[i]:
                continue
            self.settled.add(i)
            return i
        raise CannotFindClosestNodeError()

    def relax(self, closest: int, neighbor: int, weight: int) -> bool:
        """Lower ``neighbor``'s distance via ``closest`` if that is cheaper.

        Returns:
            True if the neighbor's distance and path were updated.
        """
        if neighbor in self.settled:
            return False
        candidate = self.distance[closest] + weight
        if candidate >= self.distance[neighbor]:
            return False
        self.distance[neighbor] = candidate
        self.path[neighbor] = self.path[closest] + [self.nodes[neighbor]]
        heappush(self.frontier, (candidate, neighbor))
        return True


def find_path(
    graph: Graph,
    start: NodeLike,
    end: NodeLike,
    stop_on: Optional[StopCondition] = None,
) -> List[Node]:
    """
    Find the cheapest path from ``start`` to ``end``.

    Two stop conditions are supported:
      - ``StopCondition.DISCOVERED``: return as soon as ``end`` is found as a
        neighbor of a settled node. The first route reaching ``end`` wins, even
        if a cheaper one would be found later.
      - ``StopCondition.SETTLED``: classic Dijkstra, return once ``end`` is
        removed from the frontier. The result is a minimum-cost path.

    Nodes with equal tentative distance are settled in insertion order, which
    makes results deterministic when several paths tie.

    Args:
        graph: Graph to search.
        start: Start node (handle or value).
        end: End node (handle or value).
        stop_on: Stop condition. Defaults to ``SEARCH_CONFIG.stop_on``.

    Returns:
        The path as graph node handles, starting with ``start`` and ending with
        ``end``.

    Raises:
        CannotFindPathError: If the graph is empty, ``start`` equals ``end``,
            either endpoint is missing, or ``end`` is unreachable.
        CannotFindClosestNodeError: If the frontier is unexpectedly exhausted.
    """
    if len(graph) == 0:
        raise CannotFindPathError("No nodes exist in graph")

    start_node = graph.get_node(start)
    end_node = graph.get_node(end)
    start_value = start.value if isinstance(start, Node) else start
    end_value = end.value if isinstance(end, Node) else end

    if start_value == end_value:
        raise CannotFindPathError("Start and end nodes are the same")
    if end_node is None:
        raise CannotFindPathError("End node does not exist in graph")
    if start_node is None:
        raise CannotFindPathError("Start node does not exist in graph")

    stop_on = SEARCH_CONFIG.resolve_stop_on(stop_on)
    state = _SearchState.for_graph(graph, start_node.value)
    end_idx = state.index[end_node.value]

    logger.debug(
        "Searching path %r -> %r over %d nodes (stop_on=%s)",
        start_node.value,
        end_node.value,
        len(state.nodes),
        stop_on.name,
    )

    while len(state.settled) < len(state.nodes):
        closest = state.pop_closest()
        closest_node = state.nodes[closest]

        if state.distance[closest] == INFINITY:
            # Everything left in the frontier is unreachable
            logger.debug("Node %r is unreachable; stopping", closest_node.value)
            break

        logger.debug(
            "Settled %r at distance %s", closest_node.value, state.distance[closest]
        )

        if stop_on == StopCondition.SETTLED and closest == end_idx:
            result = _materialize(start_node, state.path[closest])
            logger.debug("Settled end %r: %s", end_node.value, describe_path(result))
            return result

        for edge in closest_node.edges:
            neighbor = state.index[edge.target.value]

            if stop_on == StopCondition.DISCOVERED and neighbor == end_idx:
                result = _materialize(
                    start_node, state.path[closest] + [state.nodes[neighbor]]
                )
                logger.debug(
                    "Found end %r via %r: %s",
                    end_node.value,
                    closest_node.value,
                    describe_path(result),
                )
                return result

            if state.relax(closest, neighbor, edge.weight):
                if SEARCH_CONFIG.trace_paths:
                    logger.debug(
                        "Relaxed %r to %s via %r, path %s",
                        edge.target.value,
                        state.distance[neighbor],
                        closest_node.value,
                        describe_path(state.path[neighbor]),
                    )
                else:
                    logger.debug(
                        "Relaxed %r to %s via %r",
                        edge.target.value,
                        state.distance[neighbor],
                        closest_node.value,
                    )

    raise CannotFindPathError("No path found")


def _materialize(start_node: Node, prefix: List[Node]) -> List[Node]:
    return [start_node] + prefix

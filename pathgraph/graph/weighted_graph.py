"""Weighted graph with value-identified nodes.

`Graph` owns its storage, a `networkx.DiGraph` or `networkx.Graph` keyed by
node value, and hands out `Node` handles. A handle is stored as an attribute
of its networkx node, so every lookup returns the same object. Edges are
read back from the networkx adjacency as immutable `Edge` records.

Unlike `networkx`, node and edge insertion never raise on conflicts: a
duplicate node value yields ``None`` and a second edge to the same target is
ignored (the first weight wins). ``None`` is a valid node value; networkx
cannot store it, so it is kept under a private placeholder key.
"""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Integral
from typing import Any, Hashable, Iterator, List, Optional, Tuple, Union

import networkx as nx

from pathgraph.logging import get_logger

NodeValue = Hashable
EdgeTuple = Tuple["Node", "Node", int]

#: Node attribute under which the handle is stored in the networkx graph.
HANDLE_ATTR = "handle"
#: Edge attribute holding the integer weight.
WEIGHT_ATTR = "weight"

logger = get_logger(__name__)


@dataclass(frozen=True)
class Edge:
    """Outgoing weighted reference to another node of the same graph.

    Attributes:
        weight: Non-negative integer cost of traversing the edge.
        target: Node the edge points to.
    """

    weight: int
    target: Node


class Node:
    """Handle for a vertex of a `Graph`.

    Equality and hashing follow ``value``, so handles from different graphs
    holding equal values compare equal.
    """

    __slots__ = ("_value", "_graph")

    def __init__(self, value: NodeValue, graph: Graph) -> None:
        self._value = value
        self._graph = graph

    @property
    def value(self) -> NodeValue:
        return self._value

    @property
    def edges(self) -> List[Edge]:
        """Outgoing edges in insertion order."""
        return self._graph._edges_of(self._value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"Node({self._value!r})"


NodeLike = Union[Node, NodeValue]


class _NoneKey:
    """Storage key standing in for the node value ``None``."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "None"


_NONE_KEY = _NoneKey()


def _value_of(node: NodeLike) -> NodeValue:
    if isinstance(node, Node):
        return node.value
    return node


def _key_of(node: NodeLike) -> Hashable:
    value = _value_of(node)
    return _NONE_KEY if value is None else value


class Graph:
    """An owning collection of nodes and weighted edges.

    Args:
        directed: When False, every ``add_edge`` call also attempts the
            reverse edge with the same weight.
    """

    def __init__(self, directed: bool = True) -> None:
        self._directed = directed
        self._nx: Union[nx.DiGraph, nx.Graph] = nx.DiGraph() if directed else nx.Graph()

    @property
    def directed(self) -> bool:
        return self._directed

    #
    # Node management
    #
    def add_node(self, value: NodeValue) -> Optional[Node]:
        """Add a node holding ``value``.

        Args:
            value: Hashable identity of the node. Any hashable value, including
                None, is accepted.

        Returns:
            The new node, or None if a node with an equal value already exists.
        """
        key = _NONE_KEY if value is None else value
        if key in self._nx:
            logger.debug("Rejected duplicate node %r", value)
            return None
        node = Node(value, self)
        self._nx.add_node(key, **{HANDLE_ATTR: node})
        return node

    def exists(self, node: NodeLike) -> bool:
        """Return True if a node with an equal value is stored in this graph."""
        return _key_of(node) in self._nx

    def get_node(self, node: NodeLike) -> Optional[Node]:
        """Return this graph's handle for ``node``'s value, or None."""
        key = _key_of(node)
        if key not in self._nx:
            return None
        return self._nx.nodes[key][HANDLE_ATTR]

    def get_nodes(self) -> List[Node]:
        """Return all node handles in insertion order."""
        return [data[HANDLE_ATTR] for _, data in self._nx.nodes(data=True)]

    #
    # Edge management
    #
    def add_edge(self, from_node: NodeLike, to_node: NodeLike, weight: int) -> bool:
        """Add a weighted edge ``from_node -> to_node``.

        The edge is skipped if ``from_node`` already has an edge to
        ``to_node``; the existing weight is kept. In an undirected graph the
        reverse edge follows the same rule, and since storage is symmetric
        both directions are always added or skipped together.

        Args:
            from_node: Source node (handle or value). Must exist in the graph.
            to_node: Target node (handle or value). Must exist in the graph.
            weight: Non-negative integral weight (any ``numbers.Integral``,
                e.g. numpy integers); stored as a plain ``int``.

        Returns:
            False if either endpoint is missing, True otherwise.

        Raises:
            ValueError: If ``weight`` is not a non-negative integer.
        """
        if isinstance(weight, bool) or not isinstance(weight, Integral) or weight < 0:
            raise ValueError(f"Edge weight must be a non-negative integer, got {weight!r}.")

        u = _key_of(from_node)
        v = _key_of(to_node)
        if u not in self._nx or v not in self._nx:
            return False

        if self._nx.has_edge(u, v):
            logger.debug(
                "Edge %r -> %r already exists with weight %s; ignoring weight %s",
                u,
                v,
                self._nx[u][v][WEIGHT_ATTR],
                weight,
            )
            return True

        self._nx.add_edge(u, v, **{WEIGHT_ATTR: int(weight)})
        return True

    def get_edges(self) -> List[EdgeTuple]:
        """Return every stored edge as ``(source, target, weight)``.

        Undirected edges are reported once per direction.
        """
        edges: List[EdgeTuple] = []
        for node in self.get_nodes():
            for edge in node.edges:
                edges.append((node, edge.target, edge.weight))
        return edges

    def _edges_of(self, value: NodeValue) -> List[Edge]:
        nodes = self._nx.nodes
        return [
            Edge(attr[WEIGHT_ATTR], nodes[target][HANDLE_ATTR])
            for target, attr in self._nx.adj[_key_of(value)].items()
        ]

    #
    # Container protocol
    #
    def __len__(self) -> int:
        return self._nx.number_of_nodes()

    def __contains__(self, node: Any) -> bool:
        try:
            return self.exists(node)
        except TypeError:
            # Unhashable values cannot be node values
            return False

    def __iter__(self) -> Iterator[Node]:
        return iter(self.get_nodes())

    def __repr__(self) -> str:
        kind = "directed" if self._directed else "undirected"
        return (
            f"Graph({kind}, nodes={self._nx.number_of_nodes()}, "
            f"edges={self._nx.number_of_edges()})"
        )

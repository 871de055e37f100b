"""Directed labeled multigraph with strict insertion rules.

`Graph` stores its nodes and edges in a `networkx.MultiDiGraph` and uses the
edge label as the multi-edge key, so two edges between the same pair of nodes
may coexist only when their labels differ. Unlike plain NetworkX graphs it
never creates nodes implicitly, rejects duplicates, and rejects ``None`` as a
node or label. Nodes and edges are never removed.

`Edge` is the immutable value returned by the read accessors. It carries no
reference back to the graph that produced it.
"""

from __future__ import annotations

from dataclasses import dataclass
from itertools import count
from operator import itemgetter
from typing import FrozenSet, Generic, Hashable, Iterator, TypeVar

import networkx as nx

from pathgraph.errors import (
    DuplicateEntityError,
    GraphFrozenError,
    InvalidArgumentError,
    NodeNotFoundError,
)
from pathgraph.logging import get_logger

N = TypeVar("N", bound=Hashable)
E = TypeVar("E", bound=Hashable)

logger = get_logger(__name__)


@dataclass(frozen=True)
class Edge(Generic[N, E]):
    """A directed, labeled connection between two nodes.

    Two edges are equal, and hash equally, when source, destination and label
    are all equal.

    Attributes:
        source: Node the edge leaves.
        destination: Node the edge enters.
        label: Edge value, typically a numeric cost.

    Raises:
        InvalidArgumentError: If any field is ``None`` or unhashable.
    """

    source: N
    destination: N
    label: E

    def __post_init__(self) -> None:
        for name in ("source", "destination", "label"):
            value = getattr(self, name)
            if value is None:
                raise InvalidArgumentError(f"Edge {name} must not be None.")
            try:
                hash(value)
            except TypeError as exc:
                raise InvalidArgumentError(
                    f"Edge {name} must be hashable, got {type(value).__name__}."
                ) from exc

    def __str__(self) -> str:
        return f"({self.source}, {self.destination}, {self.label})"


class Graph(Generic[N, E]):
    """A mutable directed labeled multigraph.

    Invariants held after every call, including failed ones:
      - Nodes are unique and never ``None``.
      - Every edge's source and destination are nodes of the graph.
      - Edges leaving a node form a set; parallel edges must differ by label.

    A graph can be frozen once its build phase is over. A frozen graph rejects
    further mutation and may be shared by concurrent readers without locking.
    """

    def __init__(self) -> None:
        self._graph: nx.MultiDiGraph = nx.MultiDiGraph()
        # Edge insertion counter, stored on each edge as "seq"
        self._edge_seq = count()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(nodes={len(self)}, "
            f"edges={self.number_of_edges()}, frozen={self.is_frozen})"
        )

    def __len__(self) -> int:
        return self._graph.number_of_nodes()

    def __contains__(self, node: object) -> bool:
        return self.contains_node(node)

    #
    # Mutation
    #
    def add_node(self, node: N) -> None:
        """Add a node with an empty set of outgoing edges.

        Args:
            node: The node to add.

        Raises:
            InvalidArgumentError: If ``node`` is ``None`` or unhashable.
            DuplicateEntityError: If the node already exists.
            GraphFrozenError: If the graph is frozen.
        """
        self._check_mutable()
        if node is None:
            raise InvalidArgumentError("Node must not be None.")
        try:
            hash(node)
        except TypeError as exc:
            raise InvalidArgumentError(
                f"Node must be hashable, got {type(node).__name__}."
            ) from exc
        if node in self._graph:
            raise DuplicateEntityError(f"Node '{node}' already exists in this graph.")
        self._graph.add_node(node)
        logger.debug("Added node %r", node)

    def add_edge(self, source: N, destination: N, label: E) -> Edge[N, E]:
        """Add a directed edge from ``source`` to ``destination``.

        Both endpoints must already be nodes of the graph; nodes are never
        created implicitly.

        Args:
            source: The node the edge leaves.
            destination: The node the edge enters.
            label: The edge label.

        Returns:
            Edge: The edge that was inserted.

        Raises:
            InvalidArgumentError: If any argument is ``None``, or an endpoint
                is not a node of the graph.
            DuplicateEntityError: If an identical edge already exists.
            GraphFrozenError: If the graph is frozen.
        """
        self._check_mutable()
        edge = Edge(source, destination, label)
        if source not in self._graph:
            raise InvalidArgumentError(f"Source node '{source}' does not exist.")
        if destination not in self._graph:
            raise InvalidArgumentError(
                f"Destination node '{destination}' does not exist."
            )
        if self._graph.has_edge(source, destination, key=label):
            raise DuplicateEntityError(f"Edge {edge} already exists in this graph.")
        self._graph.add_edge(
            source, destination, key=label, seq=next(self._edge_seq)
        )
        logger.debug("Added edge %s", edge)
        return edge

    def freeze(self) -> Graph[N, E]:
        """Lock the graph against further mutation.

        Returns:
            Graph: This graph, to allow ``graph = build().freeze()``.
        """
        nx.freeze(self._graph)
        logger.debug("Froze %r", self)
        return self

    @property
    def is_frozen(self) -> bool:
        """True once `freeze` has been called."""
        return nx.is_frozen(self._graph)

    def _check_mutable(self) -> None:
        if self.is_frozen:
            raise GraphFrozenError("Graph is frozen and can no longer be modified.")

    #
    # Queries
    #
    def contains_node(self, node: object) -> bool:
        """Return True if ``node`` is a node of the graph.

        ``None`` and unhashable values are never nodes, so they yield False.
        """
        # NetworkX answers False for unhashable values
        return node is not None and node in self._graph

    def contains_edge(self, source: N, destination: N, label: E) -> bool:
        """Return True if the edge ``(source, destination, label)`` exists.

        Unhashable values are never part of the graph, so they yield False.

        Raises:
            InvalidArgumentError: If any argument is ``None``.
        """
        if source is None or destination is None or label is None:
            raise InvalidArgumentError(
                "Edge source, destination and label must not be None."
            )
        try:
            return self._graph.has_edge(source, destination, key=label)
        except TypeError:
            return False

    def nodes(self) -> FrozenSet[N]:
        """Return a snapshot of all nodes, in no particular order."""
        return frozenset(self._graph.nodes)

    def edges(self) -> FrozenSet[Edge[N, E]]:
        """Return a snapshot of every edge in the graph."""
        return frozenset(
            Edge(u, v, label) for u, v, label in self._graph.edges(keys=True)
        )

    def number_of_edges(self) -> int:
        return self._graph.number_of_edges()

    def children_of(self, node: N) -> FrozenSet[Edge[N, E]]:
        """Return a snapshot of the edges leaving ``node``.

        Raises:
            InvalidArgumentError: If ``node`` is ``None``.
            NodeNotFoundError: If ``node`` is not in the graph.
        """
        return frozenset(self.iter_children(node))

    def iter_children(self, node: N) -> Iterator[Edge[N, E]]:
        """Yield the edges leaving ``node`` in the order they were added.

        Raises:
            InvalidArgumentError: If ``node`` is ``None``.
            NodeNotFoundError: If ``node`` is not in the graph.
        """
        if node is None:
            raise InvalidArgumentError("Node must not be None.")
        if not self.contains_node(node):
            raise NodeNotFoundError(f"Node '{node}' does not exist.")
        # Sorted eagerly so errors surface on the call itself
        out_edges = sorted(
            self._graph.out_edges(node, keys=True, data="seq"), key=itemgetter(3)
        )
        return (Edge(u, v, label) for u, v, label, _ in out_edges)

    def to_networkx(self, label_attr: str = "weight") -> nx.MultiDiGraph:
        """Return an independent `networkx.MultiDiGraph` copy of this graph.

        Each edge keeps its label as the multi-edge key and also stores it
        under ``label_attr`` so NetworkX algorithms can read it as a weight.
        """
        # Import here to avoid circular import
        from pathgraph.graph.convert import to_networkx

        return to_networkx(self, label_attr=label_attr)

"""Conversion utilities between `Graph` and NetworkX graphs.

`to_networkx` exports a labeled graph as a `networkx.MultiDiGraph` whose edge
keys are the labels. `from_networkx` builds a labeled graph from any NetworkX
graph by reading each edge's label from an attribute; undirected inputs yield
one directed edge per direction.
"""

from typing import Any, Optional

import networkx as nx

from pathgraph.errors import InvalidArgumentError
from pathgraph.graph.labeled_graph import Graph


def to_networkx(graph: Graph, label_attr: str = "weight") -> nx.MultiDiGraph:
    """Convert a `Graph` to a new `networkx.MultiDiGraph`.

    Args:
        graph: The graph to convert.
        label_attr: Edge attribute that receives each edge's label.

    Returns:
        A mutable MultiDiGraph independent of ``graph``.
    """
    nx_graph = nx.MultiDiGraph()
    nx_graph.add_nodes_from(graph.nodes())
    for edge in graph.edges():
        nx_graph.add_edge(
            edge.source, edge.destination, key=edge.label, **{label_attr: edge.label}
        )
    return nx_graph


def from_networkx(
    nx_graph: nx.Graph,
    label_attr: str = "weight",
    default_label: Optional[Any] = None,
) -> Graph:
    """Build a `Graph` from a NetworkX graph.

    Args:
        nx_graph: Any NetworkX graph (directed or not, multi or not).
        label_attr: Edge attribute holding the label.
        default_label: Label for edges without ``label_attr``. When None,
            such edges are an error.

    Returns:
        A new, unfrozen `Graph`.

    Raises:
        InvalidArgumentError: If an edge has no label and no default is given.
        DuplicateEntityError: If two parallel edges carry the same label.
    """
    graph: Graph = Graph()
    for node in nx_graph.nodes:
        graph.add_node(node)

    directed = nx_graph.is_directed()
    for u, v, data in nx_graph.edges(data=True):
        label = data.get(label_attr, default_label)
        if label is None:
            raise InvalidArgumentError(
                f"Edge ({u}, {v}) has no '{label_attr}' attribute."
            )
        graph.add_edge(u, v, label)
        if not directed and u != v:
            graph.add_edge(v, u, label)
    return graph

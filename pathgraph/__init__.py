"""pathgraph: labeled multigraphs and shortest-path search.

Primary API:
    Graph, Edge - Directed labeled multigraph and its edge value type
    Path, Segment - Immutable walk through a graph
    shortest_path() - Dijkstra search between two nodes
    CampusMap - Read-only facade for building-to-building routes
    ScriptRunner - Text-command harness over graphs

Example:
    from pathgraph import Graph, shortest_path

    g = Graph()
    for node in ("A", "B", "C"):
        g.add_node(node)
    g.add_edge("A", "B", 1.0)
    g.add_edge("B", "C", 1.0)
    g.add_edge("A", "C", 5.0)

    path = shortest_path(g, "A", "C")
    assert path.nodes == ("A", "B", "C") and path.cost == 2.0
"""

from __future__ import annotations

from pathgraph import cli, logging
from pathgraph._version import __version__
from pathgraph.algorithms.spf import shortest_path
from pathgraph.campus import CampusBuilding, CampusMap, CampusPath, Point
from pathgraph.errors import (
    CommandError,
    DataFormatError,
    DuplicateEntityError,
    GraphFrozenError,
    InvalidArgumentError,
    NegativeWeightError,
    NodeNotFoundError,
    PathGraphError,
    UnknownBuildingError,
)
from pathgraph.graph import Edge, Graph
from pathgraph.graph.convert import from_networkx, to_networkx
from pathgraph.harness import ScriptRunner
from pathgraph.model.path import Path, Segment

__all__ = [
    # Version
    "__version__",
    # Core
    "Graph",
    "Edge",
    "Path",
    "Segment",
    "shortest_path",
    # Campus
    "CampusMap",
    "CampusBuilding",
    "CampusPath",
    "Point",
    # Harness
    "ScriptRunner",
    # Errors
    "PathGraphError",
    "InvalidArgumentError",
    "DuplicateEntityError",
    "NodeNotFoundError",
    "NegativeWeightError",
    "GraphFrozenError",
    "DataFormatError",
    "UnknownBuildingError",
    "CommandError",
    # Library integrations (NetworkX)
    "from_networkx",
    "to_networkx",
    # Utilities
    "cli",
    "logging",
]

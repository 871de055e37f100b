"""Graph primitives and helpers.

This package provides the labeled multigraph `Graph`, its `Edge` value type,
and NetworkX conversion helpers (`convert`).
"""

from pathgraph.graph.labeled_graph import Edge, Graph

__all__ = ["Edge", "Graph"]

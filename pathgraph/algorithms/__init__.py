"""Graph algorithms operating on `pathgraph.graph.Graph`."""

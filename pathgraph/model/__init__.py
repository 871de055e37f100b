"""Value types produced by graph algorithms."""

from pathgraph.model.path import Path, Segment

__all__ = ["Path", "Segment"]

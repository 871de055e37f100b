"""Exception hierarchy for pathgraph.

Core operations validate their arguments before mutating any state, so a
raised error never leaves a graph partially updated. A search that finds no
route is not an error: ``shortest_path`` returns ``None`` instead.
"""

from __future__ import annotations


class PathGraphError(Exception):
    """Base class for all pathgraph errors."""


class InvalidArgumentError(PathGraphError, ValueError):
    """An argument is ``None`` or violates a stated precondition."""


class DuplicateEntityError(InvalidArgumentError):
    """A node or edge being added already exists in the graph."""


class NodeNotFoundError(InvalidArgumentError, LookupError):
    """A node referenced by an operation is not a member of the graph."""


class NegativeWeightError(InvalidArgumentError):
    """A shortest-path search met an edge with a negative cost."""


class GraphFrozenError(PathGraphError):
    """A mutation was attempted on a frozen graph."""


class DataFormatError(PathGraphError, ValueError):
    """Campus data file is missing columns or holds malformed values."""


class UnknownBuildingError(PathGraphError, LookupError):
    """A building short name is not known to the campus map."""


class CommandError(PathGraphError):
    """A harness command has the wrong number or shape of arguments."""

"""Immutable representation of a walk through a graph.

A ``Path`` starts at a single node and grows one ``Segment`` at a time through
``extend``, which always returns a new instance. Because ``Path(start)`` and
``extend`` are the only ways to obtain a path, every instance is consistent:
segments are contiguous and ``cost`` is the sum of the segment costs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property
from typing import (
    Any,
    Callable,
    Dict,
    Generic,
    Hashable,
    Iterator,
    Optional,
    Tuple,
    TypeVar,
)

from pathgraph.errors import InvalidArgumentError

N = TypeVar("N", bound=Hashable)

Cost = float


@dataclass(frozen=True)
class Segment(Generic[N]):
    """One traversed edge of a path: ``start`` to ``end`` at ``cost``."""

    start: N
    end: N
    cost: Cost


@dataclass(frozen=True)
class Path(Generic[N]):
    """A walk from ``start`` through zero or more segments.

    Attributes:
        start: First node of the walk.
        segments: Traversed segments in order, start to end.
        cost: Sum of all segment costs; ``0.0`` when there are no segments.

    Example:
        >>> p = Path("A").extend("B", 1.5).extend("C", 2.0)
        >>> p.end, p.cost
        ('C', 3.5)
    """

    start: N
    segments: Tuple[Segment[N], ...] = field(default=(), init=False)
    cost: Cost = field(default=0.0, init=False)

    def __post_init__(self) -> None:
        if self.start is None:
            raise InvalidArgumentError("Path start must not be None.")

    @property
    def end(self) -> N:
        """Last node of the walk; the start node when there are no segments."""
        if not self.segments:
            return self.start
        return self.segments[-1].end

    @cached_property
    def nodes(self) -> Tuple[N, ...]:
        """Visited nodes in order, including ``start``."""
        return (self.start,) + tuple(seg.end for seg in self.segments)

    def extend(self, next_node: N, cost: Cost) -> Path[N]:
        """Return a new path with one more segment from ``end`` to ``next_node``.

        The receiver is left untouched. Costs are added as-is, without
        rounding or sign checks.

        Raises:
            InvalidArgumentError: If ``next_node`` or ``cost`` is ``None``.
        """
        if next_node is None or cost is None:
            raise InvalidArgumentError("Cannot extend a path with None.")
        extended: Path[N] = Path(self.start)
        object.__setattr__(
            extended, "segments", self.segments + (Segment(self.end, next_node, cost),)
        )
        object.__setattr__(extended, "cost", self.cost + cost)
        return extended

    def __iter__(self) -> Iterator[Segment[N]]:
        return iter(self.segments)

    def __len__(self) -> int:
        """Return the number of segments."""
        return len(self.segments)

    def __str__(self) -> str:
        hops = " -> ".join(str(node) for node in self.nodes)
        return f"{hops} (cost {self.cost})"

    def to_dict(
        self, node_encoder: Optional[Callable[[N], Any]] = None
    ) -> Dict[str, Any]:
        """Return a JSON-ready representation of the path.

        Args:
            node_encoder: Converts nodes to JSON values. Defaults to the node's
                own ``to_dict()`` when it has one, else the node itself.

        Returns:
            Dict with ``start``, ``cost`` and ``path`` (list of segments as
            ``{"start", "end", "cost"}`` mappings).
        """
        encode = node_encoder or _default_node_encoder
        return {
            "start": encode(self.start),
            "cost": self.cost,
            "path": [
                {"start": encode(seg.start), "end": encode(seg.end), "cost": seg.cost}
                for seg in self.segments
            ],
        }


def _default_node_encoder(node: Any) -> Any:
    to_dict = getattr(node, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    return node

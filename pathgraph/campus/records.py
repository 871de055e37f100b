"""Record types for the campus domain."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True, order=True)
class Point:
    """An immutable ``(x, y)`` location on the campus map."""

    x: float
    y: float

    def to_dict(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y}

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


@dataclass(frozen=True)
class CampusBuilding:
    """A named building located at ``(x, y)``.

    Attributes:
        short_name: Abbreviated name used as the lookup key (e.g. ``"CSE"``).
        long_name: Full display name.
        x: Horizontal map coordinate.
        y: Vertical map coordinate.
    """

    short_name: str
    long_name: str
    x: float
    y: float

    @property
    def point(self) -> Point:
        return Point(self.x, self.y)


@dataclass(frozen=True)
class CampusPath:
    """A walkable segment between two locations, usable in both directions."""

    x1: float
    y1: float
    x2: float
    y2: float
    distance: float

    @property
    def start(self) -> Point:
        return Point(self.x1, self.y1)

    @property
    def end(self) -> Point:
        return Point(self.x2, self.y2)

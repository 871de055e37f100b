"""Read-only campus facade over a frozen `Graph` of map locations."""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from pathgraph.algorithms.spf import shortest_path
from pathgraph.campus.loader import load_buildings, load_paths
from pathgraph.campus.records import CampusBuilding, CampusPath, Point
from pathgraph.config import CampusConfig
from pathgraph.errors import UnknownBuildingError
from pathgraph.graph.labeled_graph import Graph
from pathgraph.logging import get_logger
from pathgraph.model.path import Path

logger = get_logger(__name__)


def build_graph(
    buildings: Iterable[CampusBuilding], paths: Iterable[CampusPath]
) -> Graph[Point, float]:
    """Build the campus graph from parsed records.

    One node is created per distinct location, buildings first and then path
    endpoints. Every path record yields an edge in each direction labeled
    with its distance; repeated records are skipped.

    Returns:
        An unfrozen graph of `Point` nodes and float distances.
    """
    graph: Graph[Point, float] = Graph()
    for building in buildings:
        if not graph.contains_node(building.point):
            graph.add_node(building.point)

    for record in paths:
        start, end = record.start, record.end
        for node in (start, end):
            if not graph.contains_node(node):
                graph.add_node(node)
        if not graph.contains_edge(start, end, record.distance):
            graph.add_edge(start, end, record.distance)
        if not graph.contains_edge(end, start, record.distance):
            graph.add_edge(end, start, record.distance)
    return graph


class CampusMap:
    """Answers building lookups and building-to-building routes.

    The graph is built and frozen once in the constructor, after which the
    map is read-only and can serve concurrent queries.

    Example:
        >>> campus = CampusMap.from_files()
        >>> route = campus.find_shortest_path("CSE", "MGH")
    """

    def __init__(
        self, buildings: Iterable[CampusBuilding], paths: Iterable[CampusPath]
    ) -> None:
        buildings = list(buildings)
        self._buildings: Mapping[str, CampusBuilding] = MappingProxyType(
            {b.short_name: b for b in buildings}
        )
        self._graph: Graph[Point, float] = build_graph(buildings, paths).freeze()
        logger.info(
            "Campus map ready: %d building(s), %d location(s), %d edge(s)",
            len(self._buildings),
            len(self._graph),
            self._graph.number_of_edges(),
        )

    @classmethod
    def from_files(cls, config: Optional[CampusConfig] = None) -> CampusMap:
        """Load buildings and paths from the files named by ``config``.

        Without ``config``, file locations are read from the environment at
        call time.
        """
        config = config or CampusConfig()
        return cls(
            load_buildings(config.buildings_file, separator=config.separator),
            load_paths(config.paths_file, separator=config.separator),
        )

    @property
    def graph(self) -> Graph[Point, float]:
        """The frozen location graph."""
        return self._graph

    def short_name_exists(self, short_name: str) -> bool:
        return short_name in self._buildings

    def long_name_for_short(self, short_name: str) -> str:
        """Return the full name of a building.

        Raises:
            UnknownBuildingError: If ``short_name`` is not a known building.
        """
        return self._building(short_name).long_name

    def building_names(self) -> Mapping[str, str]:
        """Return a read-only mapping of every short name to its long name."""
        return MappingProxyType(
            {short: b.long_name for short, b in self._buildings.items()}
        )

    def find_shortest_path(
        self, start_short_name: str, end_short_name: str
    ) -> Optional[Path[Point]]:
        """Return the shortest walk between two buildings, or None if none exists.

        Raises:
            UnknownBuildingError: If either short name is not a known building.
        """
        start = self._building(start_short_name).point
        end = self._building(end_short_name).point
        return shortest_path(self._graph, start, end)

    def _building(self, short_name: str) -> CampusBuilding:
        try:
            return self._buildings[short_name]
        except KeyError:
            raise UnknownBuildingError(f"Unknown building '{short_name}'.") from None

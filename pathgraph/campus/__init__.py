"""Campus domain: location records, data file loading, and the map facade."""

from pathgraph.campus.campus_map import CampusMap, build_graph
from pathgraph.campus.loader import load_buildings, load_paths
from pathgraph.campus.records import CampusBuilding, CampusPath, Point

__all__ = [
    "CampusBuilding",
    "CampusMap",
    "CampusPath",
    "Point",
    "build_graph",
    "load_buildings",
    "load_paths",
]

"""Configuration classes for pathgraph components."""

import os
from dataclasses import dataclass, field
from pathlib import Path

BUILDINGS_FILE_ENV = "PATHGRAPH_BUILDINGS_FILE"
PATHS_FILE_ENV = "PATHGRAPH_PATHS_FILE"


def _env_path(var: str, default: str) -> Path:
    return Path(os.environ.get(var, default))


@dataclass
class CampusConfig:
    """Locations of the campus data files.

    Defaults point at ``campus_buildings.tsv`` and ``campus_paths.tsv`` in the
    working directory and can be overridden through the
    ``PATHGRAPH_BUILDINGS_FILE`` and ``PATHGRAPH_PATHS_FILE`` environment
    variables.
    """

    buildings_file: Path = field(
        default_factory=lambda: _env_path(BUILDINGS_FILE_ENV, "campus_buildings.tsv")
    )
    paths_file: Path = field(
        default_factory=lambda: _env_path(PATHS_FILE_ENV, "campus_paths.tsv")
    )

    # Column separator of both data files
    separator: str = "\t"


@dataclass
class HarnessConfig:
    """Formatting rules for the script harness."""

    # Digits after the decimal point for edge weights and path costs
    cost_precision: int = 3

    # Lines starting with this prefix are echoed untouched
    comment_prefix: str = "#"

    def format_cost(self, value: float) -> str:
        """Render a cost with the configured precision."""
        return f"{value:.{self.cost_precision}f}"


# Global configuration instances
CAMPUS_CONFIG = CampusConfig()
HARNESS_CONFIG = HarnessConfig()

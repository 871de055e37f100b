"""Shared fixtures: small sample graphs and campus data files."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from pathgraph.graph.labeled_graph import Graph
from pathgraph.logging import configure_logging


@pytest.fixture(autouse=True)
def _restore_log_level():
    """Undo log level changes made by CLI flags or logging tests."""
    yield
    configure_logging(logging.INFO)


def make_graph(nodes, edges) -> Graph:
    """Build a graph from node names and ``(source, destination, label)`` triples."""
    g = Graph()
    for node in nodes:
        g.add_node(node)
    for source, destination, label in edges:
        g.add_edge(source, destination, label)
    return g


@pytest.fixture
def graph_factory():
    """Return `make_graph` for tests that build their own graphs."""
    return make_graph


@pytest.fixture
def detour1() -> Graph:
    # Cost:
    #     [1]       [1]
    #  A──────►B──────►C
    #  │               ▲
    #  └───────────────┘
    #         [5]
    return make_graph(
        "ABC",
        [("A", "B", 1.0), ("B", "C", 1.0), ("A", "C", 5.0)],
    )


@pytest.fixture
def line1() -> Graph:
    # Cost:
    #      [1]      [1,3,2]
    #  A◄───────►B◄───────►C
    #
    # Parallel B-C edges differ by label only.
    return make_graph(
        "ABC",
        [
            ("A", "B", 1.0),
            ("B", "A", 1.0),
            ("B", "C", 1.0),
            ("C", "B", 1.0),
            ("B", "C", 3.0),
            ("C", "B", 3.0),
            ("B", "C", 2.0),
            ("C", "B", 2.0),
        ],
    )


@pytest.fixture
def square1() -> Graph:
    # Cost:
    #       [1]        [1]
    #   ┌────────►B─────────┐
    #   │                   │
    #   │                   ▼
    #   A                   C
    #   │                   ▲
    #   │   [2]        [2]  │
    #   └────────►D─────────┘
    return make_graph(
        "ABCD",
        [("A", "B", 1.0), ("B", "C", 1.0), ("A", "D", 2.0), ("D", "C", 2.0)],
    )


@pytest.fixture
def square_tie() -> Graph:
    # Two equal-cost routes A->C; A->B was added before A->D.
    #       [1]        [1]
    #   ┌────────►B─────────┐
    #   A                   C
    #   └────────►D─────────┘
    #       [1]        [1]
    return make_graph(
        "ABCD",
        [("A", "B", 1.0), ("A", "D", 1.0), ("B", "C", 1.0), ("D", "C", 1.0)],
    )


@pytest.fixture
def two_islands() -> Graph:
    # A◄──►B    D◄──►E
    return make_graph(
        "ABDE",
        [("A", "B", 1.0), ("B", "A", 1.0), ("D", "E", 1.0), ("E", "D", 1.0)],
    )


BUILDINGS_TSV = (
    "shortName\tlongName\tx\ty\n"
    "CSE\tPaul G. Allen Center for Computer Science & Engineering\t0\t0\n"
    "MGH\tMary Gates Hall\t20\t0\n"
    "KNE\tKane Hall\t20\t20\n"
    "ISL\tLonely Island Hall\t100\t100\n"
)

PATHS_TSV = (
    "x1\ty1\tx2\ty2\tdistance\n"
    "0\t0\t10\t0\t10.0\n"
    "10\t0\t20\t0\t10.0\n"
    "0\t0\t20\t0\t25.0\n"
    "20\t0\t20\t20\t20.0\n"
    "10\t0\t20\t20\t40.0\n"
)


@pytest.fixture
def campus_files(tmp_path: Path) -> tuple[Path, Path]:
    """Write a tiny campus to ``tmp_path`` and return (buildings, paths) files."""
    buildings = tmp_path / "campus_buildings.tsv"
    paths = tmp_path / "campus_paths.tsv"
    buildings.write_text(BUILDINGS_TSV, encoding="utf-8")
    paths.write_text(PATHS_TSV, encoding="utf-8")
    return buildings, paths

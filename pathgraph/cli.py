"""Command-line interface for pathgraph."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from pathgraph.campus.campus_map import CampusMap
from pathgraph.config import CampusConfig
from pathgraph.errors import DataFormatError, UnknownBuildingError
from pathgraph.harness import ScriptRunner
from pathgraph.logging import configure_logging, get_logger, level_for_flags

logger = get_logger(__name__)


def _load_campus(args: argparse.Namespace) -> CampusMap:
    # Unset flags fall back to the environment as it is now, not at import
    config = CampusConfig()
    if args.buildings is not None:
        config.buildings_file = args.buildings
    if args.paths is not None:
        config.paths_file = args.paths
    return CampusMap.from_files(config)


def _run_script(script: Optional[Path]) -> None:
    """Run a harness script from ``script`` or, when None, from stdin."""
    if script is None:
        ScriptRunner(sys.stdin, sys.stdout).run()
        return
    with script.open("r", encoding="utf-8") as reader:
        ScriptRunner(reader, sys.stdout).run()


def _print_buildings(args: argparse.Namespace) -> None:
    campus = _load_campus(args)
    names = dict(sorted(campus.building_names().items()))
    print(json.dumps(names, indent=2))


def _print_route(args: argparse.Namespace) -> int:
    """Print the route between two buildings as JSON.

    Returns:
        Process exit status: 0 on success, 1 for unknown buildings or when
        no route exists.
    """
    campus = _load_campus(args)
    try:
        route = campus.find_shortest_path(args.start, args.end)
    except UnknownBuildingError as exc:
        print(f"❌ ERROR: {exc}", file=sys.stderr)
        return 1
    if route is None:
        print(f"❌ ERROR: No route from {args.start} to {args.end}.", file=sys.stderr)
        return 1
    print(json.dumps(route.to_dict(), indent=2))
    return 0


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``pathgraph`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="pathgraph",
        description="Build labeled graphs and find shortest paths.",
    )

    # Global options
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{script,buildings,route}",
        help="Available commands",
    )

    script_parser = subparsers.add_parser(
        "script", help="Run a harness script (stdin when no file is given)"
    )
    script_parser.add_argument(
        "script", type=Path, nargs="?", default=None, help="Path to script file"
    )

    buildings_parser = subparsers.add_parser(
        "buildings", help="List campus buildings as JSON"
    )

    route_parser = subparsers.add_parser(
        "route", help="Find the shortest route between two buildings"
    )
    route_parser.add_argument("start", help="Short name of the start building")
    route_parser.add_argument("end", help="Short name of the destination building")

    for p in (buildings_parser, route_parser):
        p.add_argument(
            "--buildings",
            type=Path,
            default=None,
            help="Buildings TSV file (default: $PATHGRAPH_BUILDINGS_FILE or "
            "campus_buildings.tsv)",
        )
        p.add_argument(
            "--paths",
            type=Path,
            default=None,
            help="Paths TSV file (default: $PATHGRAPH_PATHS_FILE or "
            "campus_paths.tsv)",
        )

    effective_args = sys.argv[1:] if argv is None else argv

    # If no arguments are provided, show help and exit cleanly
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    configure_logging(level_for_flags(args.verbose, args.quiet))
    logger.debug("Debug logging enabled")

    try:
        if args.command == "script":
            _run_script(args.script)
        elif args.command == "buildings":
            _print_buildings(args)
        elif args.command == "route":
            status = _print_route(args)
            if status:
                raise SystemExit(status)
    except (FileNotFoundError, DataFormatError) as exc:
        logger.error("Failed to load input: %s", exc)
        print(f"❌ ERROR: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc


if __name__ == "__main__":
    main()

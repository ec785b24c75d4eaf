from __future__ import annotations

import argparse
import logging
import os
from typing import Optional

from .errors import GraphConstructionError
from .framework import ALGORITHMS, PathfindingFramework
from .maze import default_maze, load_maze
from .render import format_maze_result, format_station_list, format_transit_result, render_maze
from .transit import build_transit_graph, default_network, load_transit_network

LOG_LEVEL_ENV = "PATHFINDING_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]

logger = logging.getLogger(__name__)


def _env_log_level() -> Optional[str]:
    """Return the valid level from the environment, or None if unset or unknown."""

    value = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    return value if value in LOG_LEVELS else None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Maze and transit path finding (BFS, DFS, Dijkstra)")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        default=_env_log_level() or DEFAULT_LOG_LEVEL,
        choices=LOG_LEVELS,
        help=f"Logging level (defaults to ${LOG_LEVEL_ENV} or {DEFAULT_LOG_LEVEL})",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    maze_parser = subparsers.add_parser("maze", help="Solve a character maze with BFS and/or DFS")
    maze_parser.add_argument("--file", type=str, help="Path to maze text file (default: built-in maze)")
    maze_parser.add_argument(
        "--algorithm",
        type=str,
        default="both",
        choices=sorted(ALGORITHMS) + ["both"],
        help="Search algorithm to run",
    )
    maze_parser.add_argument("--quiet", action="store_true", help="Disable verbose logs")

    transit_parser = subparsers.add_parser("transit", help="Fastest route in a transit network")
    transit_parser.add_argument("--file", type=str, help="Path to network JSON (default: built-in network)")
    transit_parser.add_argument("--source", type=str, help="Origin station index or name")
    transit_parser.add_argument("--target", type=str, help="Destination station index or name")
    transit_parser.add_argument("--list", action="store_true", help="List stations and exit")
    transit_parser.add_argument("--quiet", action="store_true", help="Disable verbose logs")
    return parser


def _run_maze(args: argparse.Namespace) -> int:
    grid = load_maze(args.file) if args.file else default_maze()
    framework = PathfindingFramework(verbose=not args.quiet)
    algorithms = sorted(ALGORITHMS) if args.algorithm == "both" else [args.algorithm]

    print("Maze:")
    print(render_maze(grid))

    all_found = True
    for algorithm in algorithms:
        result = framework.solve_maze(grid, algorithm=algorithm)
        print()
        print(format_maze_result(result))
        if result["status"] == "success":
            print(render_maze(grid, result["path"]))
        else:
            all_found = False
    return 0 if all_found else 1


def _run_transit(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    network = load_transit_network(args.file) if args.file else default_network()

    if args.list or args.source is None or args.target is None:
        print("Available stations:")
        print(format_station_list(network.names))
        if args.list:
            return 0
        parser.error("transit requires --source and --target (or --list)")

    try:
        source = network.resolve(args.source)
        target = network.resolve(args.target)
    except KeyError as exc:
        print(f"Error: {exc.args[0]}")
        return 2

    graph = build_transit_graph(network)
    framework = PathfindingFramework(verbose=not args.quiet)
    result = framework.route_transit(network, source, target, graph=graph)

    print()
    print(format_transit_result(result))
    return 0 if result["status"] in {"success", "same_node"} else 1


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    raw_env_level = os.environ.get(LOG_LEVEL_ENV)
    if raw_env_level and _env_log_level() is None:
        logger.warning(
            "Ignoring unknown %s=%r; expected one of %s, using %s.",
            LOG_LEVEL_ENV,
            raw_env_level,
            ", ".join(LOG_LEVELS),
            DEFAULT_LOG_LEVEL,
        )

    try:
        if args.command == "maze":
            return _run_maze(args)
        return _run_transit(args, parser)
    except (GraphConstructionError, OSError) as exc:
        print(f"Error: {exc}")
        return 2

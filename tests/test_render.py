from __future__ import annotations

from pathfinding_core import parse_maze
from pathfinding_core.render import (
    format_cell_path,
    format_maze_result,
    format_named_path,
    format_station_list,
    format_transit_result,
    render_maze,
)


def test_format_cell_path() -> None:
    assert format_cell_path([(0, 0), (0, 1), (1, 1)]) == "(0, 0) -> (0, 1) -> (1, 1)"
    assert format_cell_path([]) == ""


def test_format_named_path() -> None:
    assert format_named_path(["Centro", "Shopping"]) == "-> Centro -> Shopping"


def test_render_maze_marks_path_but_keeps_markers() -> None:
    grid = parse_maze(["S #", "  E"])
    assert render_maze(grid) == "S   #\n    E"
    path = [grid.index_of(0, 0), grid.index_of(1, 0), grid.index_of(1, 1), grid.index_of(1, 2)]
    assert render_maze(grid, path) == "S   #\n* * E"


def test_format_maze_result_success_and_failure() -> None:
    found = format_maze_result(
        {"status": "success", "algorithm": "bfs", "cells": [(0, 0), (0, 1)], "hop_count": 1}
    )
    assert "Path found by BFS (1 steps):" in found
    assert "(0, 0) -> (0, 1)" in found

    missing = format_maze_result({"status": "no_path", "algorithm": "dfs"})
    assert "No path found by DFS." in missing


def test_format_transit_result_variants() -> None:
    base = {"source_name": "Centro", "target_name": "Praia"}

    success = format_transit_result(
        {**base, "status": "success", "distance": 41, "names": ["Centro", "Praia"]}
    )
    assert "Minimum travel time: 41 minutes." in success
    assert "-> Centro -> Praia" in success

    unreachable = format_transit_result({**base, "status": "no_path", "distance": None})
    assert "Minimum travel time: -1 minutes." in unreachable
    assert "No route available" in unreachable

    same = format_transit_result(
        {"source_name": "Centro", "target_name": "Centro", "status": "same_node", "distance": 0}
    )
    assert "already at 'Centro'" in same


def test_format_station_list() -> None:
    assert format_station_list(["Centro", "Praia"]) == " 0. Centro\n 1. Praia"

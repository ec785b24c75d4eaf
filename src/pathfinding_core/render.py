from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Sequence

from .maze import END, START, Cell, MazeGrid

PATH_MARK = "*"


def format_cell_path(cells: Iterable[Cell]) -> str:
    return " -> ".join(f"({row}, {col})" for row, col in cells)


def format_named_path(names: Iterable[str]) -> str:
    return " ".join(f"-> {name}" for name in names)


def render_maze(grid: MazeGrid, path: Optional[Sequence[int]] = None) -> str:
    """Draw the grid one character per cell, marking path cells with ``*``."""

    on_path = {grid.cell_of(node) for node in path or []}
    lines: List[str] = []
    for row, text in enumerate(grid.rows):
        chars = []
        for col, char in enumerate(text):
            if (row, col) in on_path and char not in {START, END}:
                chars.append(PATH_MARK)
            else:
                chars.append(char)
        lines.append(" ".join(chars))
    return "\n".join(lines)


def format_maze_result(result: Dict[str, Any]) -> str:
    label = str(result.get("algorithm", "")).upper()
    lines = [f"--- {label} ---"]
    if result.get("status") != "success":
        lines.append(f"No path found by {label}.")
        return "\n".join(lines)

    cells = result.get("cells", [])
    lines.append(f"Path found by {label} ({result.get('hop_count')} steps):")
    lines.append(format_cell_path(cells))
    return "\n".join(lines)


def format_transit_result(result: Dict[str, Any]) -> str:
    source_name = result.get("source_name")
    target_name = result.get("target_name")
    distance = result.get("distance")
    minutes = -1 if distance is None else distance

    lines = [
        f"Route from '{source_name}' to '{target_name}'",
        f"Minimum travel time: {minutes} minutes.",
    ]
    if result.get("status") == "same_node":
        lines.append(f"You are already at '{source_name}'.")
    elif result.get("status") != "success":
        lines.append(f"No route available from '{source_name}' to '{target_name}'.")
    else:
        lines.append("Best route:")
        lines.append(format_named_path(result.get("names", [])))
    return "\n".join(lines)


def format_station_list(names: Sequence[Optional[str]]) -> str:
    return "\n".join(f"{index:2d}. {name}" for index, name in enumerate(names))

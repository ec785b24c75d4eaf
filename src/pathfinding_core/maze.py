from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from .errors import GraphConstructionError, MissingEndpointError
from .graph import GraphStore

logger = logging.getLogger(__name__)

WALL = "#"
START = "S"
END = "E"
OPEN = " "

Cell = Tuple[int, int]

# up, down, left, right
DIRECTIONS: Tuple[Cell, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))

DEFAULT_MAZE: Tuple[str, ...] = (
    "##########",
    "#S #   #E#",
    "#  # # # #",
    "# ## #   #",
    "#      # #",
    "###### # #",
    "#        #",
    "# ###### #",
    "#        #",
    "##########",
)


@dataclass(frozen=True)
class MazeGrid:
    """Rectangular character grid with one start and one end cell."""

    rows: Tuple[str, ...]
    start: Cell
    end: Cell

    @property
    def num_rows(self) -> int:
        return len(self.rows)

    @property
    def num_cols(self) -> int:
        return len(self.rows[0])

    @property
    def num_nodes(self) -> int:
        return self.num_rows * self.num_cols

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.num_rows and 0 <= col < self.num_cols

    def is_open(self, row: int, col: int) -> bool:
        return self.in_bounds(row, col) and self.rows[row][col] != WALL

    def index_of(self, row: int, col: int) -> int:
        return row * self.num_cols + col

    def cell_of(self, index: int) -> Cell:
        return (index // self.num_cols, index % self.num_cols)

    @property
    def start_node(self) -> int:
        return self.index_of(*self.start)

    @property
    def end_node(self) -> int:
        return self.index_of(*self.end)


def _find_marker(rows: Sequence[str], marker: str) -> Cell:
    found: List[Cell] = [
        (r, c) for r, line in enumerate(rows) for c, char in enumerate(line) if char == marker
    ]
    if not found:
        raise MissingEndpointError(f"Maze has no '{marker}' marker.")
    if len(found) > 1:
        raise MissingEndpointError(
            f"Maze has {len(found)} '{marker}' markers, expected exactly one: {found}."
        )
    return found[0]


def parse_maze(source: Union[str, Iterable[str]]) -> MazeGrid:
    if isinstance(source, str):
        lines = source.splitlines()
    else:
        lines = [line.rstrip("\r\n") for line in source]

    while lines and not lines[-1]:
        lines.pop()
    if not lines:
        raise GraphConstructionError("Maze is empty.")

    width = len(lines[0])
    if width == 0:
        raise GraphConstructionError("Maze rows must not be empty.")
    ragged = [idx for idx, line in enumerate(lines) if len(line) != width]
    if ragged:
        raise GraphConstructionError(
            f"Maze must be rectangular; rows {ragged} differ from width {width}."
        )

    rows = tuple(lines)
    return MazeGrid(rows=rows, start=_find_marker(rows, START), end=_find_marker(rows, END))


def load_maze(path: Union[str, Path]) -> MazeGrid:
    maze_path = Path(path)
    with maze_path.open("r", encoding="utf-8") as handle:
        return parse_maze(handle.read())


def default_maze() -> MazeGrid:
    return parse_maze(DEFAULT_MAZE)


def build_maze_graph(grid: MazeGrid) -> GraphStore:
    """
    Build the cell graph of ``grid``.

    Every cell is a node; walls stay isolated. Each pair of orthogonally
    adjacent open cells is joined by two directed unit-weight edges.
    """

    graph = GraphStore(grid.num_nodes)
    for row in range(grid.num_rows):
        for col in range(grid.num_cols):
            if not grid.is_open(row, col):
                continue
            u = grid.index_of(row, col)
            for dr, dc in DIRECTIONS:
                nr, nc = row + dr, col + dc
                # only look forward so every pair is joined once
                if (nr, nc) < (row, col) or not grid.is_open(nr, nc):
                    continue
                v = grid.index_of(nr, nc)
                graph.add_edge(u, v)
                graph.add_edge(v, u)

    logger.debug(
        "Built maze graph: %dx%d cells, %d directed edges.",
        grid.num_rows,
        grid.num_cols,
        graph.edge_count,
    )
    return graph


def path_to_cells(grid: MazeGrid, path: Optional[Sequence[int]]) -> List[Cell]:
    if not path:
        return []
    return [grid.cell_of(node) for node in path]

from __future__ import annotations

import time
from typing import Any, Dict, List, Optional, Union

from .graph import GraphStore
from .maze import MazeGrid, build_maze_graph, path_to_cells
from .models import UNREACHABLE, SearchRecord
from .paths import hop_count, reconstruct_path
from .render import format_cell_path, format_named_path
from .shortest_path import dijkstra
from .transit import TransitNetwork, build_transit_graph
from .traversal import bfs, dfs
from .validation import validate_path

DEFAULT_ALGORITHM = "bfs"
ALGORITHMS = {"bfs": bfs, "dfs": dfs}


class PathfindingFramework:
    """
    Builds maze and transit graphs and runs the matching search on them.

    Keeps a record of every run so callers can inspect statistics afterwards.
    """

    def __init__(self, *, verbose: bool = True) -> None:
        self.verbose = verbose
        self.records: List[SearchRecord] = []
        self.last_result: Optional[Dict[str, Any]] = None

        self._maze_cache: Dict[MazeGrid, GraphStore] = {}
        self._run_count = 0

    def _log(self, message: str) -> None:
        if self.verbose:
            print(message)

    def _record(
        self,
        *,
        domain: str,
        algorithm: str,
        source: int,
        target: int,
        path: Optional[List[int]],
        cost: Optional[float],
    ) -> None:
        self._run_count += 1
        self.records.append(
            SearchRecord(
                run_id=self._run_count,
                domain=domain,
                algorithm=algorithm,
                source=source,
                target=target,
                found=path is not None,
                path=list(path or []),
                cost=cost,
            )
        )

    def reset_state(self) -> None:
        self.records = []
        self.last_result = None
        self._maze_cache = {}
        self._run_count = 0

    def maze_graph(self, grid: MazeGrid) -> GraphStore:
        if grid not in self._maze_cache:
            self._maze_cache[grid] = build_maze_graph(grid)
        return self._maze_cache[grid]

    def solve_maze(self, grid: MazeGrid, algorithm: str = DEFAULT_ALGORITHM) -> Dict[str, Any]:
        algorithm = algorithm.lower()
        if algorithm not in ALGORITHMS:
            raise ValueError(f"algorithm must be one of: {', '.join(sorted(ALGORITHMS))}")

        solve_start = time.perf_counter()
        graph = self.maze_graph(grid)
        source = grid.start_node
        target = grid.end_node

        self._log("=" * 80)
        self._log(f"MAZE SEARCH ({algorithm.upper()})")
        self._log("=" * 80)
        self._log(f"Start: {grid.start}  End: {grid.end}")

        predecessors, found = ALGORITHMS[algorithm](graph, source, target)
        path = reconstruct_path(predecessors, source, target) if found else None
        cells = path_to_cells(grid, path)

        validation = None
        if path is not None:
            validation = validate_path(path, graph, source, target)
            self._log(f"Path: {format_cell_path(cells)}")
        else:
            self._log("No path found.")

        self._record(
            domain="maze",
            algorithm=algorithm,
            source=source,
            target=target,
            path=path,
            cost=hop_count(path),
        )

        result = {
            "status": "success" if path is not None else "no_path",
            "algorithm": algorithm,
            "start": grid.start,
            "end": grid.end,
            "path": list(path or []),
            "cells": cells,
            "hop_count": hop_count(path),
            "validation": validation,
            "solve_time_seconds": time.perf_counter() - solve_start,
        }
        self.last_result = result
        return result

    def route_transit(
        self,
        network: TransitNetwork,
        source: Union[int, str],
        target: Union[int, str],
        graph: Optional[GraphStore] = None,
    ) -> Dict[str, Any]:
        solve_start = time.perf_counter()
        source_idx = network.resolve(source)
        target_idx = network.resolve(target)
        if graph is None:
            graph = build_transit_graph(network)

        source_name = graph.label(source_idx)
        target_name = graph.label(target_idx)

        self._log("=" * 80)
        self._log("TRANSIT ROUTE (Dijkstra)")
        self._log("=" * 80)
        self._log(f"Computing route from '{source_name}' to '{target_name}'...")

        distances, predecessors = dijkstra(graph, source_idx)
        path = reconstruct_path(predecessors, source_idx, target_idx)
        distance = distances[target_idx]

        if source_idx == target_idx:
            status = "same_node"
        elif path is None:
            status = "no_path"
        else:
            status = "success"

        names = [graph.label(node) for node in path or []]
        validation = None
        if path is not None:
            validation = validate_path(
                path,
                graph,
                source_idx,
                target_idx,
                expected_distance=distance,
                weighted=True,
            )
            self._log(f"Best route ({distance} min): {format_named_path(names)}")
        else:
            self._log("No route available.")

        reported_distance = None if distance == UNREACHABLE else distance
        self._record(
            domain="transit",
            algorithm="dijkstra",
            source=source_idx,
            target=target_idx,
            path=path,
            cost=reported_distance,
        )

        result = {
            "status": status,
            "algorithm": "dijkstra",
            "source": source_idx,
            "target": target_idx,
            "source_name": source_name,
            "target_name": target_name,
            "path": list(path or []),
            "names": names,
            "distance": reported_distance,
            "validation": validation,
            "solve_time_seconds": time.perf_counter() - solve_start,
        }
        self.last_result = result
        return result

    def get_statistics(self) -> Dict[str, Any]:
        total_runs = len(self.records)
        found = sum(1 for record in self.records if record.found)
        by_algorithm: Dict[str, int] = {}
        for record in self.records:
            by_algorithm[record.algorithm] = by_algorithm.get(record.algorithm, 0) + 1
        return {
            "total_runs": total_runs,
            "found": found,
            "not_found": total_runs - found,
            "by_algorithm": by_algorithm,
        }

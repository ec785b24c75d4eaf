"""Public package interface."""

from .errors import (
    GraphConstructionError,
    MissingEndpointError,
    PathfindingError,
    PathReconstructionError,
)
from .framework import PathfindingFramework
from .graph import GraphStore
from .maze import MazeGrid, build_maze_graph, load_maze, parse_maze
from .models import NO_PREDECESSOR, UNREACHABLE, Edge
from .paths import reconstruct_path
from .shortest_path import dijkstra
from .transit import TransitNetwork, build_transit_graph, load_transit_network
from .traversal import bfs, dfs

__all__ = [
    "PathfindingFramework",
    "GraphStore",
    "Edge",
    "NO_PREDECESSOR",
    "UNREACHABLE",
    "bfs",
    "dfs",
    "dijkstra",
    "reconstruct_path",
    "MazeGrid",
    "parse_maze",
    "load_maze",
    "build_maze_graph",
    "TransitNetwork",
    "build_transit_graph",
    "load_transit_network",
    "PathfindingError",
    "GraphConstructionError",
    "MissingEndpointError",
    "PathReconstructionError",
]

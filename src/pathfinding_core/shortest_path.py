from __future__ import annotations

import logging
from typing import List, Optional, Tuple, Union

from .graph import GraphStore
from .models import NO_PREDECESSOR, UNREACHABLE

logger = logging.getLogger(__name__)

Distance = Union[int, float]


def _select_unsettled(distances: List[Distance], settled: List[bool]) -> Optional[int]:
    best: Optional[int] = None
    best_distance: Distance = UNREACHABLE
    for node, distance in enumerate(distances):
        # strict comparison keeps the lowest index among equal distances
        if not settled[node] and distance < best_distance:
            best = node
            best_distance = distance
    return best


def dijkstra(
    graph: GraphStore, source: int
) -> Tuple[List[Distance], List[Optional[int]]]:
    """
    Single-source shortest paths by the O(V^2) selection-scan Dijkstra.

    Returns ``(distances, predecessors)``. Unreached nodes keep distance
    ``UNREACHABLE`` and predecessor ``NO_PREDECESSOR``. Ties on the minimum
    distance are settled lowest index first.
    """

    if source not in graph:
        raise IndexError(f"source {source!r} is out of range [0, {graph.num_nodes}).")

    distances: List[Distance] = [UNREACHABLE] * graph.num_nodes
    predecessors: List[Optional[int]] = [NO_PREDECESSOR] * graph.num_nodes
    settled = [False] * graph.num_nodes
    distances[source] = 0

    rounds = 0
    for _ in range(graph.num_nodes - 1):
        current = _select_unsettled(distances, settled)
        if current is None:
            break
        settled[current] = True
        rounds += 1

        for neighbor, weight in graph.neighbors(current):
            if settled[neighbor]:
                continue
            candidate = distances[current] + weight
            if candidate < distances[neighbor]:
                distances[neighbor] = candidate
                predecessors[neighbor] = current

    logger.debug("dijkstra from %d: settled %d node(s)", source, rounds)
    return distances, predecessors

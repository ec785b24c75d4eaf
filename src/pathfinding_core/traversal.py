from __future__ import annotations

import logging
from collections import deque
from typing import Iterator, List, Optional, Tuple

from .graph import GraphStore
from .models import NO_PREDECESSOR

logger = logging.getLogger(__name__)

Predecessors = List[Optional[int]]


def _check_endpoints(graph: GraphStore, source: int, target: int) -> None:
    for role, node in (("source", source), ("target", target)):
        if node not in graph:
            raise IndexError(f"{role} {node!r} is out of range [0, {graph.num_nodes}).")


def bfs(graph: GraphStore, source: int, target: int) -> Tuple[Predecessors, bool]:
    """
    Breadth-first search from ``source`` until ``target`` is dequeued.

    Edge weights are ignored. Each node's predecessor is fixed the first time
    it is discovered, so the predecessor chain of ``target`` is a minimum-hop
    path. Neighbors are expanded in stored adjacency order.
    """

    _check_endpoints(graph, source, target)

    predecessors: Predecessors = [NO_PREDECESSOR] * graph.num_nodes
    visited = [False] * graph.num_nodes
    visited[source] = True
    queue: deque[int] = deque([source])
    found = False
    expanded = 0

    while queue:
        current = queue.popleft()
        if current == target:
            found = True
            break
        expanded += 1
        for neighbor, _weight in graph.neighbors(current):
            if visited[neighbor]:
                continue
            visited[neighbor] = True
            predecessors[neighbor] = current
            queue.append(neighbor)

    logger.debug("bfs %d->%d: found=%s expanded=%d", source, target, found, expanded)
    return predecessors, found


def dfs(graph: GraphStore, source: int, target: int) -> Tuple[Predecessors, bool]:
    """
    Depth-first search from ``source``, stopping as soon as ``target`` is reached.

    Uses an explicit stack of neighbor iterators, visiting nodes in the same
    order as the recursive formulation. The resulting path is not necessarily
    the shortest.
    """

    _check_endpoints(graph, source, target)

    predecessors: Predecessors = [NO_PREDECESSOR] * graph.num_nodes
    visited = [False] * graph.num_nodes
    visited[source] = True
    if source == target:
        return predecessors, True

    stack: List[Tuple[int, Iterator[Tuple[int, int]]]] = [
        (source, iter(graph.neighbors(source)))
    ]
    found = False

    while stack and not found:
        current, pending = stack[-1]
        for neighbor, _weight in pending:
            if visited[neighbor]:
                continue
            visited[neighbor] = True
            predecessors[neighbor] = current
            if neighbor == target:
                found = True
            else:
                stack.append((neighbor, iter(graph.neighbors(neighbor))))
            break
        else:
            stack.pop()

    logger.debug("dfs %d->%d: found=%s", source, target, found)
    return predecessors, found

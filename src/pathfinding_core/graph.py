from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Optional, Tuple

from .errors import GraphConstructionError
from .models import Edge

logger = logging.getLogger(__name__)


class GraphStore:
    """
    Fixed-size directed weighted graph over integer node indices.

    Adjacency is kept per node as an append-only list of ``(neighbor, weight)``
    pairs in insertion order. Parallel edges are kept as separate entries.
    """

    def __init__(self, num_nodes: int) -> None:
        if isinstance(num_nodes, bool) or not isinstance(num_nodes, int):
            raise GraphConstructionError(
                f"num_nodes must be an integer, got {type(num_nodes).__name__}."
            )
        if num_nodes <= 0:
            raise GraphConstructionError(f"num_nodes must be > 0, got {num_nodes}.")

        self.num_nodes = num_nodes
        self._adjacency: List[List[Tuple[int, int]]] = [[] for _ in range(num_nodes)]
        self._names: List[Optional[str]] = [None] * num_nodes
        self._edge_count = 0

    def __len__(self) -> int:
        return self.num_nodes

    def __contains__(self, node: object) -> bool:
        return isinstance(node, int) and 0 <= node < self.num_nodes

    def _check_node(self, node: int, role: str) -> None:
        if node not in self:
            raise GraphConstructionError(
                f"{role} index {node!r} is out of range [0, {self.num_nodes})."
            )

    def add_edge(self, src: int, dest: int, weight: int = 1) -> None:
        self._check_node(src, "Source")
        self._check_node(dest, "Destination")
        if isinstance(weight, bool) or not isinstance(weight, int):
            raise GraphConstructionError(
                f"Edge {src}->{dest} weight must be an integer, got {weight!r}."
            )
        if weight < 0:
            raise GraphConstructionError(
                f"Edge {src}->{dest} has negative weight {weight}."
            )
        self._adjacency[src].append((dest, weight))
        self._edge_count += 1

    def set_name(self, node: int, text: str) -> bool:
        """Assign a display name; out-of-range indices are reported, not raised."""

        if node not in self:
            logger.warning(
                "Cannot name node %r: index out of range [0, %d).", node, self.num_nodes
            )
            return False
        self._names[node] = str(text)
        return True

    def neighbors(self, node: int) -> List[Tuple[int, int]]:
        return self._adjacency[node]

    def edges(self) -> Iterator[Edge]:
        for source, adjacency in enumerate(self._adjacency):
            for target, weight in adjacency:
                yield Edge(source=source, target=target, weight=weight)

    @property
    def edge_count(self) -> int:
        return self._edge_count

    def name(self, node: int) -> Optional[str]:
        return self._names[node]

    def label(self, node: int) -> str:
        name = self._names[node]
        return name if name is not None else str(node)

    @property
    def names(self) -> List[Optional[str]]:
        return list(self._names)

    def to_dict(self) -> Dict[str, object]:
        return {
            "num_nodes": self.num_nodes,
            "names": self.names,
            "edges": [edge.to_dict() for edge in self.edges()],
        }

from __future__ import annotations

from typing import Optional

import networkx as nx

from .graph import GraphStore


def to_networkx(graph: GraphStore) -> nx.MultiDiGraph:
    """Build a directed multigraph view of ``graph``, keeping names and weights."""

    nx_graph = nx.MultiDiGraph()
    for node in range(graph.num_nodes):
        name = graph.name(node)
        if name is None:
            nx_graph.add_node(node)
        else:
            nx_graph.add_node(node, name=name)
    for edge in graph.edges():
        nx_graph.add_edge(edge.source, edge.target, weight=edge.weight)
    return nx_graph


def min_edge_weight(nx_graph: nx.MultiDiGraph, source: int, target: int) -> Optional[int]:
    if not nx_graph.has_edge(source, target):
        return None
    return min(int(attrs.get("weight", 1)) for attrs in nx_graph[source][target].values())

from __future__ import annotations

import math

import networkx as nx
import pytest

from pathfinding_core import (
    GraphStore,
    NO_PREDECESSOR,
    UNREACHABLE,
    build_transit_graph,
    dijkstra,
    reconstruct_path,
)
from pathfinding_core.transit import default_network
from pathfinding_core.utils import to_networkx


def build_weighted(num_nodes: int, edges: list[tuple[int, int, int]]) -> GraphStore:
    graph = GraphStore(num_nodes)
    for source, target, weight in edges:
        graph.add_edge(source, target, weight)
    return graph


def test_indirect_route_beats_expensive_direct_edge() -> None:
    graph = build_weighted(3, [(0, 1, 10), (1, 2, 5), (0, 2, 20)])
    distances, predecessors = dijkstra(graph, 0)
    assert distances == [0, 10, 15]
    assert reconstruct_path(predecessors, 0, 2) == [0, 1, 2]


def test_source_distance_is_zero_for_every_source() -> None:
    graph = build_transit_graph(default_network())
    for source in range(graph.num_nodes):
        distances, predecessors = dijkstra(graph, source)
        assert distances[source] == 0
        assert predecessors[source] is NO_PREDECESSOR


def test_relaxation_invariant_holds_on_transit_network() -> None:
    graph = build_transit_graph(default_network())
    for source in range(graph.num_nodes):
        distances, _ = dijkstra(graph, source)
        for edge in graph.edges():
            if distances[edge.source] == UNREACHABLE:
                continue
            assert distances[edge.target] <= distances[edge.source] + edge.weight


def test_distances_match_networkx() -> None:
    graph = build_transit_graph(default_network())
    nx_graph = to_networkx(graph)
    for source in range(graph.num_nodes):
        distances, predecessors = dijkstra(graph, source)
        expected = nx.single_source_dijkstra_path_length(nx_graph, source, weight="weight")
        for node in range(graph.num_nodes):
            if node in expected:
                assert distances[node] == expected[node]
                path = reconstruct_path(predecessors, source, node)
                assert path is not None
                assert nx.path_weight(nx_graph, path, weight="weight") == expected[node]
            else:
                assert distances[node] == UNREACHABLE


def test_default_network_centro_to_terminal_central() -> None:
    network = default_network()
    graph = build_transit_graph(network)
    distances, predecessors = dijkstra(graph, 0)
    path = reconstruct_path(predecessors, 0, 9)
    assert distances[9] == 63
    assert [graph.label(node) for node in path or []] == [
        "Centro",
        "Shopping",
        "Hospital",
        "Praia",
        "Terminal Central",
    ]


def test_unreachable_nodes_keep_sentinels() -> None:
    graph = build_transit_graph(default_network())
    distances, predecessors = dijkstra(graph, 0)
    # nothing leads into Bairro Norte
    assert distances[7] == UNREACHABLE
    assert math.isinf(distances[7])
    assert predecessors[7] is NO_PREDECESSOR
    assert reconstruct_path(predecessors, 0, 7) is None


def test_ties_settle_lowest_index_first() -> None:
    graph = build_weighted(4, [(0, 2, 1), (0, 1, 1), (2, 3, 1), (1, 3, 1)])
    distances, predecessors = dijkstra(graph, 0)
    assert distances == [0, 1, 1, 2]
    assert predecessors[3] == 1
    assert reconstruct_path(predecessors, 0, 3) == [0, 1, 3]


def test_parallel_edges_use_cheapest() -> None:
    graph = build_weighted(2, [(0, 1, 5), (0, 1, 3), (0, 1, 7)])
    distances, _ = dijkstra(graph, 0)
    assert distances[1] == 3


def test_zero_weight_edges() -> None:
    graph = build_weighted(3, [(0, 1, 0), (1, 2, 0), (0, 2, 1)])
    distances, predecessors = dijkstra(graph, 0)
    assert distances == [0, 0, 0]
    assert reconstruct_path(predecessors, 0, 2) == [0, 1, 2]


def test_single_node_graph() -> None:
    distances, predecessors = dijkstra(GraphStore(1), 0)
    assert distances == [0]
    assert predecessors == [NO_PREDECESSOR]


def test_repeated_runs_are_identical() -> None:
    graph = build_transit_graph(default_network())
    assert dijkstra(graph, 3) == dijkstra(graph, 3)


def test_out_of_range_source_raises() -> None:
    with pytest.raises(IndexError):
        dijkstra(GraphStore(2), 2)

from __future__ import annotations

import json
from pathlib import Path

import pytest

from pathfinding_core import (
    GraphConstructionError,
    TransitNetwork,
    build_transit_graph,
    load_transit_network,
)
from pathfinding_core.transit import DEFAULT_STATIONS, default_network, network_from_dict


def test_default_network_graph() -> None:
    graph = build_transit_graph(default_network())
    assert graph.num_nodes == 10
    assert graph.edge_count == 15
    assert graph.names == list(DEFAULT_STATIONS)
    # Centro <-> Rodoviaria take different times in each direction
    assert (1, 10) in graph.neighbors(0)
    assert (0, 12) in graph.neighbors(1)


def test_resolve_accepts_index_name_and_numeric_text() -> None:
    network = default_network()
    assert network.resolve(3) == 3
    assert network.resolve("Praia") == 6
    assert network.resolve(" 9 ") == 9


@pytest.mark.parametrize("station", [10, -1, "Lua", "42"])
def test_resolve_rejects_unknown_stations(station: object) -> None:
    with pytest.raises(KeyError):
        default_network().resolve(station)  # type: ignore[arg-type]


def test_network_from_dict_accepts_names_and_mappings() -> None:
    network = network_from_dict(
        {
            "stations": ["A", "B", "C"],
            "connections": [
                ["A", "B", 10],
                {"source": "B", "target": "C", "weight": 5},
                [0, 2, 20],
                ["C", "A"],
            ],
        }
    )
    assert network.names == ["A", "B", "C"]
    assert network.connections == [(0, 1, 10), (1, 2, 5), (0, 2, 20), (2, 0, 1)]


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"stations": []},
        {"stations": ["A", "A"]},
        {"stations": ["A"], "connections": {}},
        {"stations": ["A", "B"], "connections": [["A", "Z", 1]]},
        {"stations": ["A", "B"], "connections": [["A"]]},
        {"stations": ["A", "B"], "connections": [{"source": "A"}]},
        {"stations": ["A", "B"], "connections": [["A", "B", "slow"]]},
        {"stations": ["A", "B"], "connections": [["A", "B", 2.9]]},
        {"stations": ["A", "B"], "connections": [["A", "B", True]]},
        {"stations": ["A", "B"], "connections": [{"source": "A", "target": "B", "weight": None}]},
    ],
)
def test_network_from_dict_rejects_malformed_payloads(payload: dict) -> None:
    with pytest.raises(GraphConstructionError):
        network_from_dict(payload)


def test_build_rejects_out_of_range_and_negative_connections() -> None:
    with pytest.raises(GraphConstructionError):
        build_transit_graph(TransitNetwork(names=["A", "B"], connections=[(0, 2, 1)]))
    with pytest.raises(GraphConstructionError):
        build_transit_graph(TransitNetwork(names=["A", "B"], connections=[(0, 1, -4)]))


def test_load_transit_network_roundtrip(tmp_path: Path) -> None:
    network_file = tmp_path / "network.json"
    network_file.write_text(json.dumps(default_network().to_dict()), encoding="utf-8")
    loaded = load_transit_network(network_file)
    assert loaded == default_network()


def test_load_transit_network_rejects_bad_json(tmp_path: Path) -> None:
    network_file = tmp_path / "network.json"
    network_file.write_text("{not json", encoding="utf-8")
    with pytest.raises(GraphConstructionError):
        load_transit_network(network_file)

    network_file.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(GraphConstructionError):
        load_transit_network(network_file)

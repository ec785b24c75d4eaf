from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Sequence, Tuple, Union

from .errors import GraphConstructionError
from .graph import GraphStore

logger = logging.getLogger(__name__)

Connection = Tuple[int, int, int]

DEFAULT_STATIONS: Tuple[str, ...] = (
    "Centro",
    "Rodoviaria",
    "Shopping",
    "Parque",
    "Hospital",
    "Aeroporto",
    "Praia",
    "Bairro Norte",
    "Bairro Sul",
    "Terminal Central",
)

# (origin, destination, travel minutes); reverse trips may take a different time.
DEFAULT_CONNECTIONS: Tuple[Connection, ...] = (
    (0, 1, 10),
    (0, 2, 15),
    (1, 0, 12),
    (1, 3, 20),
    (2, 4, 8),
    (3, 5, 25),
    (4, 1, 7),
    (4, 6, 18),
    (5, 9, 30),
    (6, 9, 22),
    (7, 0, 5),
    (8, 0, 8),
    (9, 5, 28),
    (9, 6, 20),
    (3, 8, 10),
)


@dataclass
class TransitNetwork:
    """Named stations plus directed timed connections between them."""

    names: List[str]
    connections: List[Connection] = field(default_factory=list)

    @property
    def num_stations(self) -> int:
        return len(self.names)

    def resolve(self, station: Union[int, str]) -> int:
        """Map a station index, numeric string or name to its index."""

        if isinstance(station, int) and not isinstance(station, bool):
            index = station
        else:
            text = str(station).strip()
            if text in self.names:
                return self.names.index(text)
            if not text.lstrip("-").isdigit():
                raise KeyError(f"Unknown station '{text}'.")
            index = int(text)
        if not 0 <= index < self.num_stations:
            raise KeyError(
                f"Station index {index} is out of range [0, {self.num_stations})."
            )
        return index

    def to_dict(self) -> Dict[str, Any]:
        return {
            "stations": list(self.names),
            "connections": [list(connection) for connection in self.connections],
        }


def default_network() -> TransitNetwork:
    return TransitNetwork(names=list(DEFAULT_STATIONS), connections=list(DEFAULT_CONNECTIONS))


def build_transit_graph(network: TransitNetwork) -> GraphStore:
    graph = GraphStore(network.num_stations)
    for index, name in enumerate(network.names):
        graph.set_name(index, name)
    for source, target, weight in network.connections:
        graph.add_edge(source, target, weight)

    logger.debug(
        "Built transit graph: %d stations, %d connections.",
        graph.num_nodes,
        graph.edge_count,
    )
    return graph


def _parse_endpoint(value: Any, names: Sequence[str]) -> int:
    if isinstance(value, bool):
        raise GraphConstructionError(f"Invalid station reference {value!r}.")
    if isinstance(value, int):
        return value
    text = str(value)
    if text in names:
        return list(names).index(text)
    raise GraphConstructionError(f"Unknown station '{text}' in connection list.")


def _parse_connection(entry: Any, names: Sequence[str]) -> Connection:
    if isinstance(entry, dict):
        if "source" not in entry or "target" not in entry:
            raise GraphConstructionError(
                f"Connection {entry!r} needs 'source' and 'target' keys."
            )
        raw = (entry["source"], entry["target"], entry.get("weight", 1))
    elif isinstance(entry, (list, tuple)) and len(entry) in {2, 3}:
        raw = (entry[0], entry[1], entry[2] if len(entry) == 3 else 1)
    else:
        raise GraphConstructionError(f"Malformed connection entry {entry!r}.")

    source = _parse_endpoint(raw[0], names)
    target = _parse_endpoint(raw[1], names)
    weight = raw[2]
    if isinstance(weight, bool) or not isinstance(weight, int):
        raise GraphConstructionError(
            f"Invalid weight in connection {entry!r}: expected an integer."
        )
    return (source, target, weight)


def network_from_dict(payload: Dict[str, Any]) -> TransitNetwork:
    stations = payload.get("stations")
    if not isinstance(stations, list) or not stations:
        raise GraphConstructionError("Transit payload needs a non-empty 'stations' list.")
    names = [str(name) for name in stations]
    if len(set(names)) != len(names):
        raise GraphConstructionError("Station names must be unique.")

    raw_connections = payload.get("connections", [])
    if not isinstance(raw_connections, list):
        raise GraphConstructionError("'connections' must be a list.")
    connections = [_parse_connection(entry, names) for entry in raw_connections]
    return TransitNetwork(names=names, connections=connections)


def load_transit_network(path: Union[str, Path]) -> TransitNetwork:
    network_path = Path(path)
    with network_path.open("r", encoding="utf-8") as handle:
        try:
            payload = json.load(handle)
        except json.JSONDecodeError as exc:
            raise GraphConstructionError(f"{network_path} is not valid JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise GraphConstructionError(f"{network_path} must contain a JSON object.")
    return network_from_dict(payload)

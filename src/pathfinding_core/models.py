from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

NO_PREDECESSOR: Optional[int] = None
UNREACHABLE = math.inf


@dataclass(frozen=True)
class Edge:
    """One directed weighted adjacency entry."""

    source: int
    target: int
    weight: int = 1

    def to_dict(self) -> Dict[str, int]:
        return {"source": self.source, "target": self.target, "weight": self.weight}


@dataclass
class SearchRecord:
    """Normalized record for one search run made through the framework."""

    run_id: int
    domain: str
    algorithm: str
    source: int
    target: int
    found: bool
    path: List[int] = field(default_factory=list)
    cost: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "run_id": self.run_id,
            "domain": self.domain,
            "algorithm": self.algorithm,
            "source": self.source,
            "target": self.target,
            "found": self.found,
            "path": list(self.path),
            "cost": self.cost,
        }

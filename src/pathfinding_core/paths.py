from __future__ import annotations

from typing import List, Optional, Sequence

from .errors import PathReconstructionError
from .models import NO_PREDECESSOR


def reconstruct_path(
    predecessors: Sequence[Optional[int]], source: int, target: int
) -> Optional[List[int]]:
    """
    Walk ``predecessors`` back from ``target`` to ``source``.

    Returns the forward-ordered node list, or ``None`` when ``target`` was
    never reached. A chain that loops or dead-ends before ``source`` raises
    ``PathReconstructionError``.
    """

    if target == source:
        return [source]
    if predecessors[target] is NO_PREDECESSOR:
        return None

    path: List[int] = []
    current: Optional[int] = target
    for _ in range(len(predecessors)):
        if current == source:
            path.append(source)
            path.reverse()
            return path
        if current is NO_PREDECESSOR:
            raise PathReconstructionError(
                f"Predecessor chain from {target} ends before reaching {source}."
            )
        path.append(current)
        current = predecessors[current]

    raise PathReconstructionError(
        f"Predecessor chain from {target} does not reach {source} "
        f"within {len(predecessors)} steps."
    )


def hop_count(path: Optional[Sequence[int]]) -> Optional[int]:
    if path is None:
        return None
    return len(path) - 1

from __future__ import annotations


class PathfindingError(Exception):
    """Base exception for graph construction and path lookup failures."""


class GraphConstructionError(PathfindingError, ValueError):
    """Raised when a graph cannot be built from the given input."""


class MissingEndpointError(GraphConstructionError):
    """Raised when a maze has no (or more than one) start or end marker."""


class PathReconstructionError(PathfindingError, RuntimeError):
    """Raised when a predecessor map does not lead back to the source."""

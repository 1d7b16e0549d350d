"""Error types raised by the pathfinding engine."""

from __future__ import annotations


class PathfindingError(Exception):
    """Base error for grid pathfinding."""


class InvalidInputError(PathfindingError, ValueError):
    """Raised when the grid size or an endpoint is out of range."""


class FrontierAllocationError(PathfindingError, MemoryError):
    """Raised when the frontier storage cannot grow."""


__all__ = ["PathfindingError", "InvalidInputError", "FrontierAllocationError"]

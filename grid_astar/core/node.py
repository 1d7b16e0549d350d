"""Search bookkeeping records shared by the frontier and the A* driver."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


Coord = Tuple[int, int]


class CellState(Enum):
    """Frontier membership of a cell during one search."""

    UNVISITED = "unvisited"
    OPEN = "open"
    CLOSED = "closed"


class SearchState(Enum):
    """State of the A* driver loop."""

    RUNNING = "running"
    GOAL_REACHED = "goal_reached"
    EXHAUSTED = "exhausted"


@dataclass(slots=True)
class SearchNode:
    """Per-cell search state, created the first time a cell is discovered."""

    coord: Coord
    g_cost: float = 0.0
    h_cost: float = 0.0
    parent: Optional[Coord] = None
    state: CellState = CellState.UNVISITED

    @property
    def f_cost(self) -> float:
        return self.g_cost + self.h_cost


@dataclass(frozen=True)
class PathResult:
    """Outcome of :func:`grid_astar.search.astar.find_path`.

    ``path`` runs from start to goal inclusive when a path was found and is
    empty otherwise. A missing path is a normal result, not an error.
    """

    path: Tuple[Coord, ...]
    state: SearchState
    nodes_expanded: int = 0

    @classmethod
    def found_path(cls, path: list[Coord], nodes_expanded: int = 0) -> "PathResult":
        return cls(tuple(path), SearchState.GOAL_REACHED, nodes_expanded)

    @classmethod
    def not_found(cls, nodes_expanded: int = 0) -> "PathResult":
        return cls((), SearchState.EXHAUSTED, nodes_expanded)

    @property
    def found(self) -> bool:
        return self.state is SearchState.GOAL_REACHED

    @property
    def cost(self) -> int | None:
        """Number of unit steps along the path, ``None`` if no path exists."""

        if not self.found:
            return None
        return len(self.path) - 1

    def __bool__(self) -> bool:
        return self.found

    def __len__(self) -> int:
        return len(self.path)

    def __iter__(self):
        return iter(self.path)


__all__ = ["Coord", "CellState", "SearchState", "SearchNode", "PathResult"]

"""A* shortest-path search on a square grid with 4-neighbour unit moves."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterator, List, Tuple

from ..config import CONFIG, SearchConfig
from ..core.errors import InvalidInputError
from ..core.node import CellState, Coord, PathResult, SearchNode, SearchState
from .frontier import Frontier
from .heuristic import euclidean

logger = logging.getLogger(__name__)

# +x, -x, +y, -y
_STEPS: Tuple[Coord, ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))
STEP_COST = 1.0


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_input(start: Any, goal: Any, grid_size: Any) -> Tuple[Coord, Coord]:
    """Check the search arguments and return ``start`` and ``goal`` as tuples.

    Raises :class:`InvalidInputError` for a non-positive grid size or an
    endpoint that is not an integer pair inside ``[0, grid_size)``.
    """

    if not _is_int(grid_size) or grid_size <= 0:
        raise InvalidInputError(f"grid_size must be a positive integer, got {grid_size!r}")

    cells = []
    for name, cell in (("start", start), ("goal", goal)):
        try:
            x, y = cell
        except (TypeError, ValueError) as exc:
            raise InvalidInputError(f"{name} must be an (x, y) pair, got {cell!r}") from exc
        if not (_is_int(x) and _is_int(y)):
            raise InvalidInputError(f"{name} coordinates must be integers, got {cell!r}")
        if not (0 <= x < grid_size and 0 <= y < grid_size):
            raise InvalidInputError(
                f"{name} {(x, y)} is outside the {grid_size}x{grid_size} grid"
            )
        cells.append((x, y))
    return cells[0], cells[1]


def neighbors(cell: Coord, grid_size: int) -> Iterator[Coord]:
    """Yield the in-bounds cardinal neighbours of ``cell``."""

    x, y = cell
    for dx, dy in _STEPS:
        nx, ny = x + dx, y + dy
        if 0 <= nx < grid_size and 0 <= ny < grid_size:
            yield (nx, ny)


def reconstruct_path(nodes: Dict[Coord, SearchNode], goal: Coord) -> List[Coord]:
    """Walk parent links back from ``goal`` and return the start-to-goal path."""

    path = [goal]
    current = nodes[goal].parent
    while current is not None:
        path.append(current)
        current = nodes[current].parent
    path.reverse()
    return path


class AStarSearch:
    """Search state for one grid, reset at the start of every :meth:`run`.

    ``best_cost`` holds the lowest ``g`` ever assigned to each discovered
    cell. Frontier entries whose recorded ``g`` differs from it are stale
    and dropped on pop.
    """

    def __init__(self, grid_size: int, settings: SearchConfig | None = None) -> None:
        self.grid_size = grid_size
        self.settings = settings if settings is not None else CONFIG.search
        self.nodes: Dict[Coord, SearchNode] = {}
        self.best_cost: Dict[Coord, float] = {}
        self.frontier = self._new_frontier()
        self.state = SearchState.RUNNING
        self.iterations = 0
        self.nodes_expanded = 0
        self.stale_pops = 0

    def _new_frontier(self) -> Frontier:
        return Frontier(
            initial_capacity=self.settings.initial_capacity,
            max_capacity=self.settings.max_capacity,
            indexed=self.settings.frontier_strategy != "lazy",
        )

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def reset(self) -> None:
        """Forget everything from a previous search."""

        self.nodes.clear()
        self.best_cost.clear()
        self.frontier.clear()
        self.state = SearchState.RUNNING
        self.iterations = 0
        self.nodes_expanded = 0
        self.stale_pops = 0

    def run(self, start: Coord, goal: Coord) -> PathResult:
        """Return the shortest path from ``start`` to ``goal``."""

        start, goal = validate_input(start, goal, self.grid_size)
        self.reset()

        start_node = SearchNode(start, 0.0, euclidean(start, goal), None, CellState.OPEN)
        self.nodes[start] = start_node
        self.best_cost[start] = 0.0
        self.frontier.insert(start, start_node.f_cost, 0.0)
        logger.debug(
            "[AStar] Searching %s -> %s on %sx%s grid", start, goal, self.grid_size, self.grid_size
        )

        max_iterations = self.settings.max_iterations
        while self.state is SearchState.RUNNING:
            if self.frontier.is_empty():
                self.state = SearchState.EXHAUSTED
                break
            if max_iterations is not None and self.iterations >= max_iterations:
                logger.warning(
                    "[AStar] Iteration cap %s reached before finding %s", max_iterations, goal
                )
                self.state = SearchState.EXHAUSTED
                break
            self.iterations += 1

            entry = self.frontier.extract_min()
            cell = entry.cell
            current = self.nodes[cell]
            if entry.g_cost != self.best_cost[cell]:
                self.stale_pops += 1
                continue
            if current.state is CellState.CLOSED:
                continue

            current.state = CellState.CLOSED
            if cell == goal:
                self.state = SearchState.GOAL_REACHED
                break
            self._expand(current, goal)
            self.nodes_expanded += 1

        if self.state is SearchState.GOAL_REACHED:
            path = reconstruct_path(self.nodes, goal)
            logger.debug(
                "[AStar] Goal reached in %s steps, %s nodes expanded",
                len(path) - 1,
                self.nodes_expanded,
            )
            return PathResult.found_path(path, self.nodes_expanded)

        logger.info("[AStar] No path from %s to %s", start, goal)
        return PathResult.not_found(self.nodes_expanded)

    # ------------------------------------------------------------------
    # Expansion
    # ------------------------------------------------------------------
    def _expand(self, current: SearchNode, goal: Coord) -> None:
        tentative_g = current.g_cost + STEP_COST
        for cell in neighbors(current.coord, self.grid_size):
            node = self.nodes.get(cell)
            if node is None:
                node = SearchNode(cell, h_cost=euclidean(cell, goal))
                self.nodes[cell] = node
            elif node.state is CellState.CLOSED or tentative_g >= self.best_cost[cell]:
                continue

            self.best_cost[cell] = tentative_g
            node.g_cost = tentative_g
            node.parent = current.coord
            node.state = CellState.OPEN
            self.frontier.decrease_key(cell, node.f_cost, tentative_g)


def find_path(
    start: Coord,
    goal: Coord,
    grid_size: int,
    settings: SearchConfig | None = None,
) -> PathResult:
    """Return the shortest 4-neighbour path from ``start`` to ``goal``.

    Raises :class:`InvalidInputError` before any search work if the
    arguments are out of range. A missing path yields
    :meth:`PathResult.not_found` rather than an exception.
    """

    start, goal = validate_input(start, goal, grid_size)
    return AStarSearch(grid_size, settings).run(start, goal)


__all__ = [
    "AStarSearch",
    "STEP_COST",
    "find_path",
    "neighbors",
    "reconstruct_path",
    "validate_input",
]

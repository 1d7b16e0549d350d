"""Command line demo: find and print a path on an open grid."""

from __future__ import annotations

import logging
import sys
from typing import Iterable, List, Sequence

from .config import CONFIG, LoggingConfig
from .core.errors import InvalidInputError
from .core.node import Coord
from .search.astar import find_path


logger = logging.getLogger(__name__)

DEFAULT_START: Coord = (0, 0)
DEFAULT_GOAL: Coord = (5, 5)
DEFAULT_GRID_SIZE = 10


def configure_logging(log_cfg: LoggingConfig | None = None) -> None:
    """Configure the root logger and per-module levels from ``log_cfg``."""

    log_cfg = log_cfg if log_cfg is not None else CONFIG.logging
    numeric_level = getattr(logging, log_cfg.global_level, logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        force=True
    )

    # Apply per-module levels if defined
    for module_name, level_str in log_cfg.module_levels.items():
        module_numeric_level = getattr(logging, level_str.upper(), None)
        if module_numeric_level is not None:
            logging.getLogger(module_name).setLevel(module_numeric_level)
        else:
            logger.warning("Invalid log level '%s' for module '%s' in config.", level_str, module_name)


def parse_coord(text: str) -> Coord:
    """Parse ``"x,y"`` (optionally wrapped in braces or parentheses)."""

    cleaned = text.strip().strip("{}()")
    parts = [p.strip() for p in cleaned.split(",")]
    if len(parts) != 2:
        raise InvalidInputError(f"Invalid coordinate: {text!r}")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError as exc:
        raise InvalidInputError(f"Invalid coordinate: {text!r}") from exc


def format_path(path: Iterable[Coord]) -> str:
    """Return ``path`` as ``"(x, y) -> (x, y) -> ..."``."""

    return " -> ".join(f"({x}, {y})" for x, y in path)


def main(argv: Sequence[str] | None = None) -> int:
    """Run one search and print the result. Returns a process exit status."""

    configure_logging()
    args: List[str] = list(sys.argv[1:] if argv is None else argv)
    if args and len(args) != 3:
        print("usage: grid-astar [START GOAL SIZE]   e.g. grid-astar 0,0 5,5 10")
        return 2

    try:
        if args:
            start, goal = parse_coord(args[0]), parse_coord(args[1])
            try:
                grid_size = int(args[2])
            except ValueError as exc:
                raise InvalidInputError(f"Invalid grid size: {args[2]!r}") from exc
        else:
            start, goal, grid_size = DEFAULT_START, DEFAULT_GOAL, DEFAULT_GRID_SIZE
        result = find_path(start, goal, grid_size)
    except InvalidInputError as exc:
        print(f"Invalid input: {exc}")
        return 2

    if not result.found:
        print("No path found.")
        return 1

    print(format_path(result.path))
    print("Goal reached")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

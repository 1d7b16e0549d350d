"""Distance estimates between grid cells."""

from __future__ import annotations

import math

from ..core.node import Coord


def euclidean(a: Coord, b: Coord) -> float:
    """Return the straight-line distance between ``a`` and ``b``.

    Never exceeds the Manhattan distance, so it stays admissible and
    consistent for 4-neighbour unit-cost movement.
    """

    return math.hypot(a[0] - b[0], a[1] - b[1])


def manhattan(a: Coord, b: Coord) -> int:
    """Return the number of unit steps between ``a`` and ``b`` on an open grid."""

    return abs(a[0] - b[0]) + abs(a[1] - b[1])


__all__ = ["euclidean", "manhattan"]

"""Binary-heap open set used by the A* driver."""

from __future__ import annotations

import logging
from typing import Dict, List, NamedTuple, Optional

from ..core.errors import FrontierAllocationError
from ..core.node import Coord

logger = logging.getLogger(__name__)

DEFAULT_INITIAL_CAPACITY = 100


class FrontierEntry(NamedTuple):
    """Heap record. Tuple order is the priority: ``f``, then ``g``, then cell."""

    f_cost: float
    g_cost: float
    cell: Coord


class Frontier:
    """Min-heap of candidate cells keyed by estimated total cost.

    Storage is a pre-sized slot list whose capacity doubles when full. In
    ``indexed`` mode each cell appears at most once and a position table
    allows :meth:`decrease_key` to update an entry in place. With
    ``indexed=False`` a better key is simply pushed as a new entry and the
    caller is expected to discard stale pops.
    """

    def __init__(
        self,
        initial_capacity: int = DEFAULT_INITIAL_CAPACITY,
        max_capacity: int | None = None,
        indexed: bool = True,
    ) -> None:
        if initial_capacity <= 0:
            raise ValueError("initial_capacity must be positive")
        if max_capacity is not None and max_capacity < initial_capacity:
            raise ValueError("max_capacity must be at least initial_capacity")
        self.max_capacity = max_capacity
        self.indexed = indexed
        self._slots: List[Optional[FrontierEntry]] = [None] * initial_capacity
        self._size = 0
        self._index: Dict[Coord, int] = {}

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------
    @property
    def capacity(self) -> int:
        return len(self._slots)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, cell: Coord) -> bool:
        if self.indexed:
            return cell in self._index
        return any(
            entry.cell == cell for entry in self._slots[: self._size] if entry is not None
        )

    def is_empty(self) -> bool:
        return self._size == 0

    def peek(self) -> FrontierEntry | None:
        """Return the minimum entry without removing it."""

        return self._slots[0] if self._size else None

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def insert(self, cell: Coord, f_cost: float, g_cost: float) -> None:
        """Add ``cell`` with priority ``f_cost``, tie-broken on ``g_cost``.

        In indexed mode a cell that is already queued is routed through
        :meth:`decrease_key` instead of being duplicated.
        """

        if self.indexed and cell in self._index:
            self.decrease_key(cell, f_cost, g_cost)
            return
        self._push(FrontierEntry(f_cost, g_cost, cell))

    def decrease_key(self, cell: Coord, new_f_cost: float, new_g_cost: float) -> None:
        """Lower the priority of ``cell``, queueing it if absent.

        A key that does not improve on the queued one is ignored.
        """

        entry = FrontierEntry(new_f_cost, new_g_cost, cell)
        pos = self._index.get(cell) if self.indexed else None
        if pos is None:
            self._push(entry)
            return
        if not entry < self._slots[pos]:
            return
        self._place(pos, entry)
        self._sift_up(pos)

    def extract_min(self) -> FrontierEntry | None:
        """Remove and return the entry with the smallest key, or ``None``."""

        if self._size == 0:
            return None
        top = self._slots[0]
        self._size -= 1
        last = self._slots[self._size]
        self._slots[self._size] = None
        if self.indexed:
            self._index.pop(top.cell, None)
        if self._size:
            self._place(0, last)
            self._sift_down(0)
        return top

    def clear(self) -> None:
        """Drop every entry while keeping the current capacity."""

        for i in range(self._size):
            self._slots[i] = None
        self._size = 0
        self._index.clear()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _push(self, entry: FrontierEntry) -> None:
        if self._size == self.capacity:
            self._grow()
        self._place(self._size, entry)
        self._size += 1
        self._sift_up(self._size - 1)

    def _grow(self) -> None:
        old_capacity = self.capacity
        new_capacity = old_capacity * 2
        if self.max_capacity is not None:
            if old_capacity >= self.max_capacity:
                logger.error(
                    "[Frontier] Cannot grow beyond max capacity %s", self.max_capacity
                )
                raise FrontierAllocationError(
                    f"frontier is full at max capacity {self.max_capacity}"
                )
            new_capacity = min(new_capacity, self.max_capacity)
        try:
            self._slots.extend([None] * (new_capacity - old_capacity))
        except MemoryError as exc:
            logger.error("[Frontier] Resize from %s to %s failed", old_capacity, new_capacity)
            raise FrontierAllocationError(
                f"could not grow frontier from {old_capacity} to {new_capacity}"
            ) from exc
        logger.debug("[Frontier] Capacity grown %s -> %s", old_capacity, new_capacity)

    def _place(self, pos: int, entry: FrontierEntry) -> None:
        self._slots[pos] = entry
        if self.indexed:
            self._index[entry.cell] = pos

    def _sift_up(self, pos: int) -> None:
        entry = self._slots[pos]
        while pos > 0:
            parent = (pos - 1) // 2
            if not entry < self._slots[parent]:
                break
            self._place(pos, self._slots[parent])
            pos = parent
        self._place(pos, entry)

    def _sift_down(self, pos: int) -> None:
        size = self._size
        entry = self._slots[pos]
        while True:
            smallest = pos
            smallest_entry = entry
            for child in (2 * pos + 1, 2 * pos + 2):
                if child < size and self._slots[child] < smallest_entry:
                    smallest = child
                    smallest_entry = self._slots[child]
            if smallest == pos:
                break
            self._place(pos, smallest_entry)
            pos = smallest
        self._place(pos, entry)


__all__ = ["Frontier", "FrontierEntry", "DEFAULT_INITIAL_CAPACITY"]

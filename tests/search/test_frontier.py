import random

import pytest

from grid_astar.core.errors import FrontierAllocationError
from grid_astar.search.frontier import Frontier, FrontierEntry


def _drain(frontier: Frontier) -> list[FrontierEntry]:
    out = []
    while not frontier.is_empty():
        out.append(frontier.extract_min())
    return out


def test_empty_frontier():
    frontier = Frontier()
    assert frontier.is_empty()
    assert len(frontier) == 0
    assert frontier.extract_min() is None
    assert frontier.peek() is None


def test_extracts_in_priority_order():
    frontier = Frontier()
    frontier.insert((0, 0), 5.0, 0.0)
    frontier.insert((1, 0), 2.0, 0.0)
    frontier.insert((2, 0), 9.0, 0.0)
    frontier.insert((3, 0), 1.0, 0.0)
    assert [e.cell for e in _drain(frontier)] == [(3, 0), (1, 0), (0, 0), (2, 0)]


def test_ties_break_on_g_then_coordinate():
    frontier = Frontier()
    frontier.insert((4, 4), 3.0, 2.0)
    frontier.insert((2, 2), 3.0, 1.0)
    frontier.insert((1, 5), 3.0, 2.0)
    assert [e.cell for e in _drain(frontier)] == [(2, 2), (1, 5), (4, 4)]


@pytest.mark.parametrize("indexed", [True, False])
def test_random_interleaving_is_non_decreasing(indexed):
    rng = random.Random(1234)
    frontier = Frontier(initial_capacity=4, indexed=indexed)
    for i in range(500):
        if rng.random() < 0.6 or frontier.is_empty():
            frontier.insert((i, rng.randrange(50)), rng.uniform(0, 100), rng.uniform(0, 10))
        else:
            entry = frontier.extract_min()
            nxt = frontier.peek()
            if nxt is not None:
                assert entry.f_cost <= nxt.f_cost
    rest = [e.f_cost for e in _drain(frontier)]
    assert rest == sorted(rest)


def test_capacity_doubles_when_full():
    frontier = Frontier(initial_capacity=2)
    assert frontier.capacity == 2
    frontier.insert((0, 0), 1.0, 0.0)
    frontier.insert((0, 1), 1.0, 0.0)
    assert frontier.capacity == 2
    frontier.insert((0, 2), 1.0, 0.0)
    assert frontier.capacity == 4
    for i in range(3, 5):
        frontier.insert((0, i), 1.0, 0.0)
    assert frontier.capacity == 8
    assert len(frontier) == 5


def test_growth_stops_at_max_capacity():
    frontier = Frontier(initial_capacity=2, max_capacity=3)
    frontier.insert((0, 0), 1.0, 0.0)
    frontier.insert((0, 1), 1.0, 0.0)
    frontier.insert((0, 2), 1.0, 0.0)
    assert frontier.capacity == 3
    with pytest.raises(FrontierAllocationError):
        frontier.insert((0, 3), 1.0, 0.0)


def test_memory_error_during_resize_is_reported():
    frontier = Frontier(initial_capacity=1)
    frontier.insert((0, 0), 1.0, 0.0)

    class ExplodingList(list):
        def extend(self, other):
            raise MemoryError

    frontier._slots = ExplodingList(frontier._slots)
    with pytest.raises(FrontierAllocationError) as excinfo:
        frontier.insert((0, 1), 2.0, 0.0)
    assert isinstance(excinfo.value, MemoryError)
    assert isinstance(excinfo.value.__cause__, MemoryError)


def test_invalid_capacities_rejected():
    with pytest.raises(ValueError):
        Frontier(initial_capacity=0)
    with pytest.raises(ValueError):
        Frontier(initial_capacity=10, max_capacity=5)


def test_decrease_key_updates_in_place():
    frontier = Frontier()
    frontier.insert((0, 0), 5.0, 5.0)
    frontier.insert((1, 1), 4.0, 4.0)
    frontier.decrease_key((0, 0), 1.0, 1.0)
    assert len(frontier) == 2
    assert frontier.extract_min() == FrontierEntry(1.0, 1.0, (0, 0))
    assert frontier.extract_min().cell == (1, 1)
    assert frontier.is_empty()


def test_decrease_key_ignores_worse_key():
    frontier = Frontier()
    frontier.insert((0, 0), 2.0, 2.0)
    frontier.decrease_key((0, 0), 7.0, 7.0)
    assert frontier.peek() == FrontierEntry(2.0, 2.0, (0, 0))


def test_insert_existing_cell_does_not_duplicate():
    frontier = Frontier()
    frontier.insert((3, 3), 6.0, 3.0)
    frontier.insert((3, 3), 4.0, 1.0)
    assert len(frontier) == 1
    assert (3, 3) in frontier
    assert frontier.extract_min().f_cost == 4.0
    assert (3, 3) not in frontier


def test_decrease_key_on_absent_cell_inserts():
    frontier = Frontier()
    frontier.decrease_key((2, 0), 3.0, 1.0)
    assert (2, 0) in frontier
    assert len(frontier) == 1


def test_lazy_mode_keeps_duplicates():
    frontier = Frontier(indexed=False)
    frontier.insert((3, 3), 6.0, 3.0)
    frontier.decrease_key((3, 3), 4.0, 1.0)
    assert len(frontier) == 2
    entries = _drain(frontier)
    assert [e.g_cost for e in entries] == [1.0, 3.0]


def test_index_tracks_positions_after_many_updates():
    frontier = Frontier(initial_capacity=2)
    cells = [(x, y) for x in range(5) for y in range(5)]
    for i, cell in enumerate(cells):
        frontier.insert(cell, 100.0 - i, 100.0 - i)
    for i, cell in enumerate(reversed(cells)):
        frontier.decrease_key(cell, float(i), float(i))
    for pos, entry in enumerate(frontier._slots[: len(frontier)]):
        assert frontier._index[entry.cell] == pos
    assert [e.cell for e in _drain(frontier)] == list(reversed(cells))


def test_clear_keeps_capacity():
    frontier = Frontier(initial_capacity=1)
    for i in range(5):
        frontier.insert((i, 0), float(i), 0.0)
    cap = frontier.capacity
    frontier.clear()
    assert frontier.is_empty()
    assert frontier.capacity == cap
    assert (0, 0) not in frontier


def test_g_cost_is_required():
    frontier = Frontier()
    with pytest.raises(TypeError):
        frontier.insert((0, 0), 1.0)
    with pytest.raises(TypeError):
        frontier.decrease_key((0, 0), 1.0)
    assert frontier.is_empty()

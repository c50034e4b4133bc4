import pytest

from stepstar.search.errors import BrokenChain
from stepstar.search.grid import Grid
from stepstar.search.path import reconstruct, reconstruct_positions


def test_reconstruct_walks_goal_to_start() -> None:
    grid = Grid(3)
    a, b, c = grid.get(0, 0), grid.get(1, 0), grid.get(1, 1)
    b.came_from = a
    c.came_from = b

    assert reconstruct(c) == [c, b, a]
    assert reconstruct_positions(c) == [(1, 1), (1, 0), (0, 0)]
    assert reconstruct(a) == [a]


def test_reconstruct_detects_cycles() -> None:
    grid = Grid(3)
    a, b = grid.get(0, 0), grid.get(1, 0)
    a.came_from = b
    b.came_from = a

    with pytest.raises(BrokenChain):
        reconstruct(a)

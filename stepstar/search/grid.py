"""Square grid of cells with walls, scores and predecessor links."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterator

from stepstar.search.errors import InvalidEdit

logger = logging.getLogger(__name__)

DEFAULT_GRID_SIZE = 15

Position = tuple[int, int]


@dataclass(eq=False)
class Cell:
    x: int
    y: int
    is_wall: bool = False
    g_score: float = math.inf
    h_score: float = 0.0
    f_score: float = math.inf
    came_from: Cell | None = None

    @property
    def position(self) -> Position:
        return (self.x, self.y)

    @property
    def discovered(self) -> bool:
        return self.g_score != math.inf

    def clear_scores(self) -> None:
        self.g_score = math.inf
        self.h_score = 0.0
        self.f_score = math.inf
        self.came_from = None

    def reset(self) -> None:
        self.clear_scores()
        self.is_wall = False

    def __repr__(self) -> str:
        return f"Cell({self.x}, {self.y})"


class Grid:
    """Fixed N x N cells indexed by ``(x, y)``.

    The grid always has one start and one end cell, neither of them a wall.
    While ``locked`` is set (a search is active) every edit is rejected.
    """

    def __init__(
        self,
        size: int = DEFAULT_GRID_SIZE,
        *,
        start: Position | None = None,
        end: Position | None = None,
    ) -> None:
        if size < 1:
            raise ValueError(f"Grid size must be positive, got {size}.")
        self.size = size
        self._cells = [[Cell(x, y) for y in range(size)] for x in range(size)]
        self._default_start = start or (0, 0)
        self._default_end = end or (size - 1, size - 1)
        for x, y in (self._default_start, self._default_end):
            if not self.in_bounds(x, y):
                raise ValueError(f"Endpoint {x},{y} is outside a {size}x{size} grid.")
        self.start = self.get(*self._default_start)
        self.end = self.get(*self._default_end)
        self.locked = False

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def get(self, x: int, y: int) -> Cell:
        if not self.in_bounds(x, y):
            raise IndexError(f"Cell {x},{y} is outside a {self.size}x{self.size} grid.")
        return self._cells[x][y]

    def cells(self) -> Iterator[Cell]:
        for y in range(self.size):
            for x in range(self.size):
                yield self._cells[x][y]

    def walls(self) -> set[Position]:
        return {cell.position for cell in self.cells() if cell.is_wall}

    def neighbors(self, cell: Cell) -> list[Cell]:
        x, y = cell.x, cell.y
        candidates = [(x - 1, y), (x + 1, y), (x, y - 1), (x, y + 1)]
        return [self._cells[cx][cy] for cx, cy in candidates if self.in_bounds(cx, cy)]

    def set_wall(self, x: int, y: int, is_wall: bool) -> None:
        self._check_editable(x, y)
        cell = self._cells[x][y]
        if cell is self.start or cell is self.end:
            raise InvalidEdit(f"Cell {x},{y} is an endpoint and cannot be a wall.")
        cell.is_wall = is_wall

    def set_start(self, x: int, y: int) -> None:
        self.start = self._endpoint_target(x, y, label="start")

    def set_end(self, x: int, y: int) -> None:
        self.end = self._endpoint_target(x, y, label="end")

    def clear_scores(self) -> None:
        for column in self._cells:
            for cell in column:
                cell.clear_scores()

    def reset_all(self) -> None:
        for column in self._cells:
            for cell in column:
                cell.reset()
        self.start = self.get(*self._default_start)
        self.end = self.get(*self._default_end)
        logger.debug("Grid %sx%s reset", self.size, self.size)

    def _endpoint_target(self, x: int, y: int, *, label: str) -> Cell:
        self._check_editable(x, y)
        cell = self._cells[x][y]
        if cell.is_wall:
            raise InvalidEdit(f"Cannot place {label} on wall {x},{y}.")
        return cell

    def _check_editable(self, x: int, y: int) -> None:
        if self.locked:
            raise InvalidEdit("Grid cannot be edited while a search is active.")
        if not self.in_bounds(x, y):
            raise InvalidEdit(f"Cell {x},{y} is outside a {self.size}x{self.size} grid.")

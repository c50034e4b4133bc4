"""Incremental A* search over a Grid, advanced one expansion per step."""

from __future__ import annotations

import heapq
import logging

from stepstar.search.contracts import CellView, SearchSnapshot, SearchState
from stepstar.search.errors import InvalidEdit, InvalidEndpoints, SearchStateError
from stepstar.search.grid import Cell, Grid, Position
from stepstar.search.heuristic import estimate
from stepstar.search.path import reconstruct

logger = logging.getLogger(__name__)

# Heap entries: (f, h, x, y). Lower f wins, then lower h, then lower (x, y).
HeapEntry = tuple[float, float, int, int]


class SearchEngine:
    """Owns the frontier, visited set and path of one search session.

    The engine moves through ``idle -> running -> found | exhausted`` and
    back to ``idle`` on ``reset()``. Each ``step()`` either applies a whole
    expansion or changes nothing. Predecessor links are only ever pointed at
    cells that have already been expanded, so they form a tree rooted at the
    start cell.
    """

    def __init__(self, grid: Grid) -> None:
        self.grid = grid
        self._state = SearchState.IDLE
        self._heap: list[HeapEntry] = []
        self._frontier: set[Position] = set()
        self._visited: set[Position] = set()
        self._expanded: list[Position] = []
        self._path: tuple[Cell, ...] = ()
        self._goal: Cell | None = None
        self._steps = 0

    @property
    def state(self) -> SearchState:
        return self._state

    @property
    def steps(self) -> int:
        return self._steps

    @property
    def frontier(self) -> frozenset[Position]:
        return frozenset(self._frontier)

    @property
    def visited(self) -> frozenset[Position]:
        return frozenset(self._visited)

    @property
    def expanded(self) -> tuple[Position, ...]:
        return tuple(self._expanded)

    @property
    def path(self) -> tuple[Cell, ...]:
        """Cells from goal back to start; empty unless the goal was found."""
        return self._path

    @property
    def path_positions(self) -> tuple[Position, ...]:
        return tuple(cell.position for cell in self._path)

    @property
    def current(self) -> Position | None:
        return self._expanded[-1] if self._expanded else None

    def start(
        self, start: Position | None = None, end: Position | None = None
    ) -> SearchState:
        if self._state != SearchState.IDLE:
            raise SearchStateError(
                f"Cannot start a search while {self._state.value}; reset first."
            )
        start_cell = self._endpoint(start, self.grid.start)
        goal = self._endpoint(end, self.grid.end)
        if start_cell is None or goal is None:
            raise InvalidEndpoints("Both a start and an end cell are required.")
        if start_cell.is_wall or goal.is_wall:
            raise InvalidEndpoints("Start and end cells must not be walls.")

        self.grid.set_start(start_cell.x, start_cell.y)
        self.grid.set_end(goal.x, goal.y)
        self._clear_session()
        self.grid.clear_scores()
        self._goal = goal
        start_cell.g_score = 0.0
        start_cell.h_score = estimate(start_cell, goal)
        start_cell.f_score = start_cell.h_score
        self._push(start_cell)
        self.grid.locked = True
        self._state = SearchState.RUNNING
        logger.info(
            "Search started from %s to %s on %sx%s grid",
            start_cell.position,
            goal.position,
            self.grid.size,
            self.grid.size,
        )
        return self._state

    def step(self) -> SearchState:
        if self._state != SearchState.RUNNING:
            return self._state
        if not self._frontier:
            self._finish(SearchState.EXHAUSTED)
            return self._state

        current = self._peek()
        goal = self._goal
        self._steps += 1
        if current is goal:
            self._path = tuple(reconstruct(current))
            self._finish(SearchState.FOUND)
            return self._state

        heapq.heappop(self._heap)
        self._frontier.discard(current.position)
        self._visited.add(current.position)
        self._expanded.append(current.position)

        for neighbor in self.grid.neighbors(current):
            if neighbor.is_wall or neighbor.position in self._visited:
                continue
            tentative = current.g_score + 1
            in_frontier = neighbor.position in self._frontier
            if tentative < neighbor.g_score or not in_frontier:
                neighbor.g_score = tentative
                neighbor.h_score = estimate(neighbor, goal)
                neighbor.f_score = neighbor.g_score + neighbor.h_score
                neighbor.came_from = current
                self._push(neighbor)

        logger.debug(
            "Step %s expanded %s (f=%.3f), frontier=%s",
            self._steps,
            current.position,
            current.f_score,
            len(self._frontier),
        )
        if not self._frontier:
            self._finish(SearchState.EXHAUSTED)
        return self._state

    def run(self, *, max_steps: int | None = None) -> SearchState:
        taken = 0
        while self._state == SearchState.RUNNING:
            if max_steps is not None and taken >= max_steps:
                break
            self.step()
            taken += 1
        return self._state

    def reset(self) -> SearchState:
        if self._state == SearchState.RUNNING:
            logger.info("Search aborted after %s steps", self._steps)
        self._clear_session()
        self.grid.locked = False
        self.grid.reset_all()
        self._state = SearchState.IDLE
        return self._state

    # Shell command surface.

    def start_search(self) -> SearchState:
        return self.start()

    def step_search(self) -> SearchState:
        return self.step()

    def reset_search(self) -> SearchState:
        return self.reset()

    def toggle_wall(self, x: int, y: int, make_wall: bool) -> None:
        self._require_idle("edit walls")
        self.grid.set_wall(x, y, make_wall)

    def place_start(self, x: int, y: int) -> None:
        self._require_idle("move the start")
        self.grid.set_start(x, y)

    def place_end(self, x: int, y: int) -> None:
        self._require_idle("move the end")
        self.grid.set_end(x, y)

    def snapshot(self) -> SearchSnapshot:
        on_path = set(self.path_positions)
        cells = [
            CellView(
                x=cell.x,
                y=cell.y,
                is_wall=cell.is_wall,
                g_score=cell.g_score if cell.discovered else None,
                h_score=cell.h_score,
                f_score=cell.f_score if cell.discovered else None,
                in_frontier=cell.position in self._frontier,
                visited=cell.position in self._visited,
                on_path=cell.position in on_path,
            )
            for cell in self.grid.cells()
        ]
        return SearchSnapshot(
            size=self.grid.size,
            state=self._state,
            start=self.grid.start.position,
            end=self.grid.end.position,
            steps=self._steps,
            current=self.current,
            cells=cells,
            frontier=sorted(self._frontier),
            visited=sorted(self._visited),
            expanded=list(self._expanded),
            path=list(self.path_positions),
        )

    def _push(self, cell: Cell) -> None:
        heapq.heappush(self._heap, (cell.f_score, cell.h_score, cell.x, cell.y))
        self._frontier.add(cell.position)

    def _peek(self) -> Cell:
        # Entries left behind by a later, cheaper relaxation are dropped here.
        while self._heap:
            f_score, _, x, y = self._heap[0]
            cell = self.grid.get(x, y)
            if (x, y) in self._frontier and cell.f_score == f_score:
                return cell
            heapq.heappop(self._heap)
        raise SearchStateError("Frontier heap is out of sync with the frontier set.")

    def _endpoint(self, position: Position | None, fallback: Cell | None) -> Cell | None:
        if position is None:
            return fallback
        x, y = position
        if not self.grid.in_bounds(x, y):
            raise InvalidEndpoints(f"Endpoint {x},{y} is outside the grid.")
        return self.grid.get(x, y)

    def _finish(self, state: SearchState) -> None:
        self._state = state
        if state == SearchState.FOUND:
            logger.info(
                "Path found after %s steps, %s cells long", self._steps, len(self._path)
            )
        else:
            logger.info("Search exhausted after %s steps, no path", self._steps)

    def _clear_session(self) -> None:
        self._heap.clear()
        self._frontier.clear()
        self._visited.clear()
        self._expanded.clear()
        self._path = ()
        self._goal = None
        self._steps = 0

    def _require_idle(self, action: str) -> None:
        if self._state != SearchState.IDLE:
            logger.debug("Rejected attempt to %s while %s", action, self._state.value)
            raise InvalidEdit(f"Cannot {action} while the search is {self._state.value}.")

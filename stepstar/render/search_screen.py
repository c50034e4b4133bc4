"""Interactive Textual screen for editing the grid and stepping a search."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from rich.console import Group
from rich.panel import Panel
from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.screen import Screen
from textual.timer import Timer
from textual.widgets import Static

from stepstar.render.grid_map import render_grid_lines, render_legend
from stepstar.render.textual_widgets import CellPainted, GridRenderResult, GridWidget
from stepstar.render.viewer import render_cell_details, render_path, render_status
from stepstar.search.contracts import SearchSnapshot, SearchState
from stepstar.search.engine import SearchEngine
from stepstar.search.errors import SearchError

logger = logging.getLogger(__name__)

RIGHT_WIDTH = 40

CURSOR_MOVES = {
    "up": (0, -1),
    "down": (0, 1),
    "left": (-1, 0),
    "right": (1, 0),
}


@dataclass
class ScreenState:
    cursor: tuple[int, int] = (0, 0)
    auto_run: bool = False
    last_message: str = ""


class SearchScreen(Screen):
    CSS = """
    Screen {
        layout: vertical;
    }
    #main {
        layout: horizontal;
        height: 1fr;
    }
    #grid {
        width: 1fr;
        border: round $panel;
        padding: 0 1;
    }
    #side-pane {
        layout: vertical;
    }
    #status-bar {
        height: 3;
    }
    """

    BINDINGS = [
        ("s", "start_search", "Start"),
        ("n", "step_search", "Step"),
        ("space", "toggle_auto", "Run/Pause"),
        ("r", "reset_search", "Reset"),
        ("w", "toggle_wall", "Wall"),
        ("a", "place_start", "Set start"),
        ("e", "place_end", "Set end"),
        ("up", "move_cursor('up')", "Up"),
        ("down", "move_cursor('down')", "Down"),
        ("left", "move_cursor('left')", "Left"),
        ("right", "move_cursor('right')", "Right"),
        ("q", "quit", "Quit"),
    ]

    def __init__(self, engine: SearchEngine, *, step_delay: float = 0.1) -> None:
        super().__init__()
        self.engine = engine
        self.state = ScreenState(cursor=engine.grid.start.position)
        self._step_delay = step_delay
        self._snapshot: SearchSnapshot = engine.snapshot()
        self._timer: Timer | None = None
        self._grid_widget: GridWidget | None = None
        self._side_panel: Static | None = None
        self._status_bar: Static | None = None

    def compose(self) -> ComposeResult:
        with Vertical(id="root"):
            with Horizontal(id="main"):
                yield GridWidget(self._render_grid, id="grid")
                yield Static(id="side-pane")
            yield Static(id="status-bar")

    def on_mount(self) -> None:
        self._grid_widget = self.query_one("#grid", GridWidget)
        self._side_panel = self.query_one("#side-pane", Static)
        self._status_bar = self.query_one("#status-bar", Static)
        if self._side_panel:
            self._side_panel.styles.width = RIGHT_WIDTH
        self._timer = self.set_interval(self._step_delay, self._auto_step, pause=True)
        self._refresh_ui()

    def on_cell_painted(self, event: CellPainted) -> None:
        self.state.cursor = event.position
        x, y = event.position
        self._run_command(
            lambda: self.engine.toggle_wall(x, y, not event.erase),
            success=None,
        )

    def action_start_search(self) -> None:
        self._run_command(self.engine.start_search, success="Search started.")

    def action_step_search(self) -> None:
        self._stop_auto()
        if self.engine.state == SearchState.IDLE:
            self.state.last_message = "Press s to start a search."
            self._refresh_ui()
            return
        self._run_command(self.engine.step_search, success=None)

    def action_toggle_auto(self) -> None:
        if self.state.auto_run:
            self._stop_auto()
            self.state.last_message = "Paused."
            self._refresh_ui()
            return
        if self.engine.state == SearchState.IDLE:
            self._run_command(self.engine.start_search, success="Search started.")
        if self.engine.state in {SearchState.FOUND, SearchState.EXHAUSTED}:
            self.state.last_message = (
                f"Search {self.engine.state.value}. Press r to reset and run again."
            )
            self._refresh_ui()
            return
        if self.engine.state != SearchState.RUNNING:
            return
        self.state.auto_run = True
        if self._timer:
            self._timer.resume()
        self._refresh_ui()

    def action_reset_search(self) -> None:
        self._stop_auto()
        self._run_command(self.engine.reset_search, success="Grid reset.")

    def action_toggle_wall(self) -> None:
        x, y = self.state.cursor
        make_wall = not self.engine.grid.get(x, y).is_wall
        self._run_command(lambda: self.engine.toggle_wall(x, y, make_wall), success=None)

    def action_place_start(self) -> None:
        self._run_command(
            lambda: self.engine.place_start(*self.state.cursor),
            success="Start moved.",
        )

    def action_place_end(self) -> None:
        self._run_command(
            lambda: self.engine.place_end(*self.state.cursor),
            success="End moved.",
        )

    def action_move_cursor(self, direction: str) -> None:
        dx, dy = CURSOR_MOVES[direction]
        x, y = self.state.cursor
        size = self.engine.grid.size
        self.state.cursor = (
            max(0, min(size - 1, x + dx)),
            max(0, min(size - 1, y + dy)),
        )
        self._refresh_ui()

    def action_quit(self) -> None:
        self.app.exit()

    def _auto_step(self) -> None:
        self._run_command(self.engine.step_search, success=None)
        if self.engine.state != SearchState.RUNNING:
            self._stop_auto()
            self._refresh_ui()

    def _stop_auto(self) -> None:
        self.state.auto_run = False
        if self._timer:
            self._timer.pause()

    def _run_command(
        self, command: Callable[[], object], *, success: str | None
    ) -> None:
        try:
            command()
        except SearchError as exc:
            logger.debug("Command rejected: %s", exc)
            self.state.last_message = str(exc)
        else:
            if success is not None:
                self.state.last_message = success
            elif self.engine.state in {SearchState.FOUND, SearchState.EXHAUSTED}:
                self.state.last_message = f"Search {self.engine.state.value}."
        self._refresh_ui()

    def _refresh_ui(self) -> None:
        self._snapshot = self.engine.snapshot()
        if self._side_panel:
            self._side_panel.update(
                Group(
                    render_status(self._snapshot),
                    render_cell_details(self._snapshot, self.state.cursor),
                    render_path(self._snapshot),
                )
            )
        if self._status_bar:
            self._status_bar.update(Panel(Text(self._status_text()), padding=(0, 1)))
        if self._grid_widget:
            self._grid_widget.refresh()

    def _render_grid(self) -> GridRenderResult:
        lines = render_grid_lines(self._snapshot, cursor=self.state.cursor)
        return GridRenderResult(
            renderable=Group(*lines, Text(), render_legend()),
            grid_size=self._snapshot.size,
        )

    def _status_text(self) -> str:
        mode = "auto" if self.state.auto_run else "manual"
        text = (
            "s=start | n=step | space=run/pause | r=reset | w=wall | "
            "a/e=place start/end | click=wall | ctrl+click=erase | q=quit"
            f" | mode={mode}"
        )
        if self.state.last_message:
            text += f" | {self.state.last_message}"
        return text

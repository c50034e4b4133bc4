"""Textual app that hosts the search screen."""

from __future__ import annotations

from textual.app import App

from stepstar.render.search_screen import SearchScreen
from stepstar.search.engine import SearchEngine


class StepstarApp(App):
    """Open a `SearchScreen` over one engine and exit when it quits."""

    def __init__(
        self,
        engine: SearchEngine,
        *,
        step_delay: float = 0.1,
        title: str = "stepstar",
    ) -> None:
        super().__init__()
        self.engine = engine
        self.step_delay = step_delay
        self.title = title
        self.sub_title = f"{engine.grid.size}x{engine.grid.size} grid"

    def on_mount(self) -> None:
        self.push_screen(SearchScreen(self.engine, step_delay=self.step_delay))


def run_search_viewer(engine: SearchEngine, *, step_delay: float = 0.1) -> None:
    StepstarApp(engine, step_delay=step_delay).run()

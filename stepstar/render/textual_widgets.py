"""Shared Textual widgets for grid rendering."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from rich.console import RenderableType
from textual.events import MouseDown, MouseEvent, MouseMove
from textual.message import Message
from textual.widget import Widget

from stepstar.render.grid_map import cell_at


@dataclass(frozen=True)
class GridRenderResult:
    renderable: RenderableType
    grid_size: int
    offset_x: int = 0
    offset_y: int = 0


class CellPainted(Message):
    """Message emitted when a press or drag lands on a grid cell."""

    def __init__(self, *, position: tuple[int, int], erase: bool) -> None:
        super().__init__()
        self.position = position
        self.erase = erase


class GridWidget(Widget):
    """Render the search grid and emit paint events for mouse presses and drags."""

    def __init__(
        self,
        render_grid: Callable[[], GridRenderResult],
        *,
        id: str | None = None,
    ) -> None:
        super().__init__(id=id)
        self._render_grid = render_grid
        self._grid_size = 0
        self._offset_x = 0
        self._offset_y = 0
        self._last_painted: tuple[int, int] | None = None

    def render(self) -> RenderableType:
        result = self._render_grid()
        self._grid_size = result.grid_size
        self._offset_x = result.offset_x
        self._offset_y = result.offset_y
        return result.renderable

    def on_mouse_down(self, event: MouseDown) -> None:
        self._last_painted = None
        self._paint(event)

    def on_mouse_move(self, event: MouseMove) -> None:
        if not event.button:
            self._last_painted = None
            return
        self._paint(event)

    def _paint(self, event: MouseEvent) -> None:
        offset = event.get_content_offset(self)
        if offset is None:
            return
        position = cell_at(
            offset.x,
            offset.y,
            size=self._grid_size,
            offset_x=self._offset_x,
            offset_y=self._offset_y,
        )
        if position is None or position == self._last_painted:
            return
        self._last_painted = position
        self.post_message(CellPainted(position=position, erase=event.ctrl))

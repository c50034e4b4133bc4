"""Shared helpers for drawing the search grid as Rich text."""

from __future__ import annotations

from rich.text import Text

from stepstar.search.contracts import CellView, SearchSnapshot

CELL_WIDTH = 2

TILE_GLYPHS = {
    "start": "S",
    "end": "E",
    "wall": "#",
    "path": "*",
    "frontier": "o",
    "visited": "x",
    "open": ".",
}

TILE_STYLES = {
    "start": "bold bright_yellow",
    "end": "bold bright_cyan",
    "wall": "grey50",
    "path": "bold bright_blue",
    "frontier": "green3",
    "visited": "red3",
    "open": "grey70",
}

CURSOR_STYLE = "reverse"
CURRENT_STYLE = "bold bright_magenta"


def tile_kind(snapshot: SearchSnapshot, cell: CellView) -> str:
    # Endpoints draw over everything, then path over the search sets.
    if cell.position == snapshot.start:
        return "start"
    if cell.position == snapshot.end:
        return "end"
    if cell.is_wall:
        return "wall"
    if cell.on_path:
        return "path"
    if cell.visited:
        return "visited"
    if cell.in_frontier:
        return "frontier"
    return "open"


def render_grid_lines(
    snapshot: SearchSnapshot,
    *,
    cursor: tuple[int, int] | None = None,
) -> list[Text]:
    lines: list[Text] = []
    for y in range(snapshot.size):
        line = Text()
        for x in range(snapshot.size):
            cell = snapshot.cell(x, y)
            kind = tile_kind(snapshot, cell)
            style = TILE_STYLES[kind]
            if kind == "visited" and cell.position == snapshot.current:
                style = CURRENT_STYLE
            if cursor == (x, y):
                style = f"{style} {CURSOR_STYLE}"
            line.append(TILE_GLYPHS[kind], style=style)
            line.append(" " * (CELL_WIDTH - 1))
        lines.append(line)
    return lines


def render_legend() -> Text:
    legend = Text()
    for kind in ("start", "end", "wall", "frontier", "visited", "path"):
        legend.append(TILE_GLYPHS[kind], style=TILE_STYLES[kind])
        legend.append(f" {kind}  ")
    return legend


def cell_at(
    x: int | None,
    y: int | None,
    *,
    size: int,
    offset_x: int = 0,
    offset_y: int = 0,
) -> tuple[int, int] | None:
    """Map a screen offset to grid coordinates, or None when off the grid."""
    if x is None or y is None:
        return None
    column = x - offset_x
    row = y - offset_y
    if column < 0 or row < 0:
        return None
    grid_x = column // CELL_WIDTH
    if grid_x >= size or row >= size:
        return None
    return (grid_x, row)

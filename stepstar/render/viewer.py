"""Rich viewer rendering for SearchSnapshot."""

from __future__ import annotations

from rich.columns import Columns
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from stepstar.render.grid_map import render_grid_lines, render_legend
from stepstar.search.contracts import SearchSnapshot, SearchState

STATE_STYLES = {
    SearchState.IDLE: "grey70",
    SearchState.RUNNING: "bold yellow",
    SearchState.FOUND: "bold green",
    SearchState.EXHAUSTED: "bold red",
}


def render_snapshot(
    snapshot: SearchSnapshot,
    *,
    show_scores: bool = False,
    cursor: tuple[int, int] | None = None,
) -> RenderableType:
    grid = Group(*render_grid_lines(snapshot, cursor=cursor), Text(), render_legend())
    left = Panel(grid, title=f"Grid {snapshot.size}x{snapshot.size}")
    right = Group(render_status(snapshot), render_path(snapshot))
    sections: list[RenderableType] = [Columns([left, right])]
    if show_scores:
        sections.append(render_score_tables(snapshot))
    return Group(*sections)


def render_status(snapshot: SearchSnapshot) -> RenderableType:
    table = Table(show_header=False)
    table.add_column("Field")
    table.add_column("Value")
    table.add_row(
        "State",
        Text(snapshot.state.value, style=STATE_STYLES[snapshot.state]),
    )
    table.add_row("Steps", str(snapshot.steps))
    table.add_row("Start", _format_position(snapshot.start))
    table.add_row("End", _format_position(snapshot.end))
    table.add_row("Current", _format_position(snapshot.current))
    table.add_row("Frontier", str(len(snapshot.frontier)))
    table.add_row("Visited", str(len(snapshot.visited)))
    table.add_row("Walls", str(len(snapshot.walls)))
    return Panel(table, title="Search")


def render_path(snapshot: SearchSnapshot) -> RenderableType:
    if snapshot.state == SearchState.EXHAUSTED:
        return Panel(Text("No path: the goal is unreachable."), title="Path")
    if not snapshot.path:
        return Panel(Text("No path yet."), title="Path")
    ordered = list(reversed(snapshot.path))
    summary = Text()
    summary.append(f"{len(ordered)} cells, {len(ordered) - 1} moves\n", style="bold")
    summary.append(" -> ".join(_format_position(position) for position in ordered))
    return Panel(summary, title="Path")


def render_cell_details(
    snapshot: SearchSnapshot, position: tuple[int, int] | None
) -> RenderableType:
    if position is None:
        return Panel(Text("No cell selected."), title="Cell")
    cell = snapshot.cell(*position)
    table = Table(show_header=False)
    table.add_column("Field")
    table.add_column("Value")
    table.add_row("Cell", _format_position(position))
    table.add_row("Wall", "yes" if cell.is_wall else "no")
    table.add_row("g", _format_score(cell.g_score))
    table.add_row("h", _format_score(cell.h_score if cell.g_score is not None else None))
    table.add_row("f", _format_score(cell.f_score))
    if cell.in_frontier:
        membership = "frontier"
    elif cell.visited:
        membership = "visited"
    else:
        membership = "-"
    table.add_row("Set", membership)
    return Panel(table, title="Cell")


SCORE_FIELDS = ("g_score", "h_score", "f_score")


def render_score_tables(snapshot: SearchSnapshot) -> RenderableType:
    """g, h and f side by side, one table per score."""
    return Columns([render_score_table(snapshot, field) for field in SCORE_FIELDS])


def render_score_table(
    snapshot: SearchSnapshot, field: str = "f_score"
) -> RenderableType:
    if field not in SCORE_FIELDS:
        raise ValueError(f"Unknown score field: {field}")
    title = f"{field.split('_')[0]} scores"
    table = Table(title=title, show_header=True, header_style="bold")
    table.add_column("y\\x", justify="right")
    for x in range(snapshot.size):
        table.add_column(str(x), justify="right")
    for y in range(snapshot.size):
        row = [str(y)]
        for x in range(snapshot.size):
            cell = snapshot.cell(x, y)
            if cell.is_wall:
                row.append("#")
            elif field == "h_score" and cell.g_score is None:
                row.append("-")
            else:
                row.append(_format_score(getattr(cell, field)))
        table.add_row(*row)
    return table


def _format_position(position: tuple[int, int] | None) -> str:
    if position is None:
        return "-"
    return f"{position[0]},{position[1]}"


def _format_score(value: float | None) -> str:
    if value is None:
        return "-"
    return f"{value:.2f}"

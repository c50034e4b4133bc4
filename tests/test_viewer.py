from rich.console import Console

import pytest

from stepstar.render.viewer import (
    render_cell_details,
    render_score_table,
    render_snapshot,
)
from stepstar.search.engine import SearchEngine
from stepstar.search.grid import Grid


def export(renderable, width: int = 120) -> str:
    console = Console(width=width, record=True)
    console.print(renderable)
    return console.export_text()


def test_render_snapshot_contains_expected_sections() -> None:
    engine = SearchEngine(Grid(5))
    engine.start()
    engine.run()

    output = export(render_snapshot(engine.snapshot()))

    assert "Grid 5x5" in output
    assert "Search" in output
    assert "found" in output
    assert "9 cells, 8 moves" in output
    assert "0,0 -> " in output
    assert "S" in output
    assert "E" in output


def test_render_snapshot_idle_and_exhausted() -> None:
    grid = Grid(3)
    engine = SearchEngine(grid)
    assert "No path yet." in export(render_snapshot(engine.snapshot()))

    for y in range(3):
        grid.set_wall(1, y, True)
    engine.start()
    engine.run()
    output = export(render_snapshot(engine.snapshot()))

    assert "exhausted" in output
    assert "unreachable" in output


def test_render_snapshot_with_scores() -> None:
    engine = SearchEngine(Grid(3))
    engine.start()
    engine.step()

    output = export(render_snapshot(engine.snapshot(), show_scores=True))

    assert "g scores" in output
    assert "h scores" in output
    assert "f scores" in output
    assert "2.83" in output
    assert "-" in output


def test_score_tables_show_each_score() -> None:
    engine = SearchEngine(Grid(3))
    engine.start()
    engine.step()
    snapshot = engine.snapshot()

    g_table = export(render_score_table(snapshot, "g_score"))
    h_table = export(render_score_table(snapshot, "h_score"))
    f_table = export(render_score_table(snapshot, "f_score"))

    assert "g scores" in g_table
    assert "0.00" in g_table
    assert "1.00" in g_table
    assert "h scores" in h_table
    assert "2.24" in h_table
    assert "2.83" in h_table
    assert "3.24" in f_table

    with pytest.raises(ValueError):
        render_score_table(snapshot, "cost")


def test_render_cell_details() -> None:
    engine = SearchEngine(Grid(3))
    engine.start()
    engine.step()
    snapshot = engine.snapshot()

    output = export(render_cell_details(snapshot, (1, 0)))
    assert "frontier" in output
    assert "1.00" in output

    assert "No cell selected." in export(render_cell_details(snapshot, None))

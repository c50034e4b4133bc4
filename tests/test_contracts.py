import pytest
from pydantic import ValidationError

from stepstar.search.contracts import CellView, SearchSnapshot, SearchState
from stepstar.search.engine import SearchEngine
from stepstar.search.grid import Grid


def test_snapshot_reports_engine_state() -> None:
    grid = Grid(4)
    grid.set_wall(1, 1, True)
    engine = SearchEngine(grid)
    engine.start()
    engine.step()

    snapshot = engine.snapshot()

    assert snapshot.size == 4
    assert snapshot.state == SearchState.RUNNING
    assert snapshot.start == (0, 0)
    assert snapshot.end == (3, 3)
    assert snapshot.steps == 1
    assert snapshot.current == (0, 0)
    assert snapshot.visited == [(0, 0)]
    assert snapshot.frontier == [(0, 1), (1, 0)]
    assert snapshot.walls == {(1, 1)}
    assert snapshot.cell(0, 0).g_score == 0.0
    assert snapshot.cell(0, 0).visited
    assert snapshot.cell(1, 0).in_frontier
    assert snapshot.cell(1, 0).g_score == 1.0
    assert snapshot.cell(3, 3).g_score is None
    assert snapshot.cell(3, 3).f_score is None


def test_snapshot_does_not_mutate_engine() -> None:
    engine = SearchEngine(Grid(5))
    engine.start()
    engine.run(max_steps=3)

    first = engine.snapshot()
    second = engine.snapshot()

    assert first == second
    assert engine.steps == 3
    assert engine.state == SearchState.RUNNING


def test_snapshot_marks_found_path() -> None:
    engine = SearchEngine(Grid(4))
    engine.start()
    engine.run()

    snapshot = engine.snapshot()
    on_path = [cell.position for cell in snapshot.cells if cell.on_path]

    assert snapshot.state == SearchState.FOUND
    assert len(snapshot.path) == 7
    assert sorted(on_path) == sorted(snapshot.path)
    assert SearchSnapshot.model_validate_json(snapshot.model_dump_json()) == snapshot


def test_snapshot_rejects_inconsistent_data() -> None:
    with pytest.raises(ValidationError):
        SearchSnapshot(
            size=1,
            state=SearchState.RUNNING,
            start=(0, 0),
            end=(0, 0),
            cells=[CellView(x=0, y=0)],
            path=[(0, 0)],
        )
    with pytest.raises(ValidationError):
        SearchSnapshot(
            size=2,
            state=SearchState.IDLE,
            start=(0, 0),
            end=(1, 1),
            cells=[CellView(x=0, y=0)],
        )
    with pytest.raises(ValidationError):
        CellView(x=0, y=0, colour="red")

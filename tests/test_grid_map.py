from stepstar.render.grid_map import cell_at, render_grid_lines, tile_kind
from stepstar.search.engine import SearchEngine
from stepstar.search.grid import Grid


def test_render_grid_lines_draws_each_cell() -> None:
    grid = Grid(3)
    grid.set_wall(1, 1, True)
    engine = SearchEngine(grid)
    engine.start()
    engine.step()

    lines = [line.plain for line in render_grid_lines(engine.snapshot())]

    assert lines == ["S o . ", "o # . ", ". . E "]


def test_found_path_is_drawn_between_endpoints() -> None:
    engine = SearchEngine(Grid(3))
    engine.start()
    engine.run()
    snapshot = engine.snapshot()

    kinds = [tile_kind(snapshot, cell) for cell in snapshot.cells]

    assert kinds.count("start") == 1
    assert kinds.count("end") == 1
    assert kinds.count("path") == 3


def test_cell_at_maps_screen_offsets() -> None:
    assert cell_at(0, 0, size=5) == (0, 0)
    assert cell_at(3, 2, size=5) == (1, 2)
    assert cell_at(9, 4, size=5) == (4, 4)
    assert cell_at(10, 0, size=5) is None
    assert cell_at(0, 5, size=5) is None
    assert cell_at(None, 1, size=5) is None
    assert cell_at(4, 3, size=5, offset_x=2, offset_y=1) == (1, 2)
    assert cell_at(1, 0, size=5, offset_x=2, offset_y=1) is None

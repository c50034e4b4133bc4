"""Load grid layouts from ASCII maps."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from stepstar.search.grid import Grid, Position

WALL_TILE = "#"
OPEN_TILE = "."
START_TILE = "S"
END_TILE = "E"
KNOWN_TILES = {WALL_TILE, OPEN_TILE, START_TILE, END_TILE}


@dataclass(frozen=True)
class GridLayout:
    size: int
    walls: frozenset[Position]
    start: Position
    end: Position

    def build(
        self, *, start: Position | None = None, end: Position | None = None
    ) -> Grid:
        for label, position in (("start", start), ("end", end)):
            if position is not None and position in self.walls:
                x, y = position
                raise ValueError(f"Override {label} {x},{y} sits on a layout wall.")
        grid = Grid(self.size, start=start or self.start, end=end or self.end)
        for x, y in sorted(self.walls):
            grid.set_wall(x, y, True)
        return grid


def load_layout(path: Path) -> GridLayout:
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise FileNotFoundError(f"Missing grid layout file: {path}") from exc
    return parse_layout(text, source=str(path))


def parse_layout(text: str, *, source: str = "<layout>") -> GridLayout:
    rows = [line.rstrip() for line in text.splitlines() if line.strip()]
    if not rows:
        raise ValueError(f"Layout {source} is empty.")
    size = len(rows)
    walls: set[Position] = set()
    starts: list[Position] = []
    ends: list[Position] = []

    for y, row in enumerate(rows):
        if len(row) != size:
            raise ValueError(
                f"Layout {source} row {y} has {len(row)} tiles; expected {size}."
            )
        for x, tile in enumerate(row):
            if tile not in KNOWN_TILES:
                raise ValueError(f"Layout {source} has unknown tile {tile!r} at {x},{y}.")
            if tile == WALL_TILE:
                walls.add((x, y))
            elif tile == START_TILE:
                starts.append((x, y))
            elif tile == END_TILE:
                ends.append((x, y))

    start = _single(starts, START_TILE, source, default=(0, 0))
    end = _single(ends, END_TILE, source, default=(size - 1, size - 1))
    for label, position in (("start", start), ("end", end)):
        if position in walls:
            raise ValueError(f"Layout {source} places the {label} on a wall.")
    return GridLayout(size=size, walls=frozenset(walls), start=start, end=end)


def _single(
    found: list[Position], tile: str, source: str, *, default: Position
) -> Position:
    if len(found) > 1:
        raise ValueError(f"Layout {source} defines {tile} more than once.")
    return found[0] if found else default

"""Read-only snapshot contracts shared with the presentation shell."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class SearchState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    FOUND = "found"
    EXHAUSTED = "exhausted"


class CellView(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    x: int
    y: int
    is_wall: bool = False
    g_score: float | None = None
    h_score: float = 0.0
    f_score: float | None = None
    in_frontier: bool = False
    visited: bool = False
    on_path: bool = False

    @property
    def position(self) -> tuple[int, int]:
        return (self.x, self.y)


class SearchSnapshot(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    size: int
    state: SearchState
    start: tuple[int, int]
    end: tuple[int, int]
    steps: int = 0
    current: tuple[int, int] | None = None
    cells: list[CellView] = Field(default_factory=list)
    frontier: list[tuple[int, int]] = Field(default_factory=list)
    visited: list[tuple[int, int]] = Field(default_factory=list)
    expanded: list[tuple[int, int]] = Field(default_factory=list)
    path: list[tuple[int, int]] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_snapshot(self) -> "SearchSnapshot":
        if self.size < 1:
            raise ValueError("size must be positive")
        if self.cells and len(self.cells) != self.size * self.size:
            raise ValueError("cells must cover the whole grid")
        if self.path and self.state != SearchState.FOUND:
            raise ValueError("path is only available once the goal is found")
        return self

    def cell(self, x: int, y: int) -> CellView:
        return self.cells[y * self.size + x]

    @property
    def walls(self) -> set[tuple[int, int]]:
        return {cell.position for cell in self.cells if cell.is_wall}

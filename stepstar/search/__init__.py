"""Incremental A* search core."""

from stepstar.search.contracts import CellView, SearchSnapshot, SearchState
from stepstar.search.engine import SearchEngine
from stepstar.search.errors import (
    BrokenChain,
    InvalidEdit,
    InvalidEndpoints,
    SearchError,
    SearchStateError,
)
from stepstar.search.grid import DEFAULT_GRID_SIZE, Cell, Grid
from stepstar.search.heuristic import estimate
from stepstar.search.layout_loader import GridLayout, load_layout, parse_layout
from stepstar.search.path import reconstruct, reconstruct_positions

__all__ = [
    "BrokenChain",
    "Cell",
    "CellView",
    "DEFAULT_GRID_SIZE",
    "Grid",
    "GridLayout",
    "InvalidEdit",
    "InvalidEndpoints",
    "SearchEngine",
    "SearchError",
    "SearchSnapshot",
    "SearchState",
    "SearchStateError",
    "estimate",
    "load_layout",
    "parse_layout",
    "reconstruct",
    "reconstruct_positions",
]

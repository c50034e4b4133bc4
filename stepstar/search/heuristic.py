"""Straight-line distance heuristic."""

from __future__ import annotations

from math import sqrt

from stepstar.search.grid import Cell


def distance(ax: int, ay: int, bx: int, by: int) -> float:
    return sqrt((ax - bx) ** 2 + (ay - by) ** 2)


def estimate(a: Cell, b: Cell) -> float:
    """Euclidean distance; never exceeds the 4-connected step count."""
    return distance(a.x, a.y, b.x, b.y)

"""Rebuild a path by walking predecessor links."""

from __future__ import annotations

from stepstar.search.errors import BrokenChain
from stepstar.search.grid import Cell, Position


def reconstruct(goal: Cell) -> list[Cell]:
    """Return the cells from ``goal`` back to the start, goal first."""
    path: list[Cell] = []
    seen: set[int] = set()
    node: Cell | None = goal
    while node is not None:
        if id(node) in seen:
            raise BrokenChain(f"Predecessor chain loops at {node.x},{node.y}.")
        seen.add(id(node))
        path.append(node)
        node = node.came_from
    return path


def reconstruct_positions(goal: Cell) -> list[Position]:
    return [cell.position for cell in reconstruct(goal)]

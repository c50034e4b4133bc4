"""Errors raised by the grid and the search engine."""

from __future__ import annotations


class SearchError(Exception):
    """Base class for recoverable search and grid errors."""


class InvalidEndpoints(SearchError, ValueError):
    """Start or end cell is missing or blocked when a search starts."""


class InvalidEdit(SearchError, ValueError):
    """A grid edit was rejected (endpoint cell, out of bounds, or locked grid)."""


class BrokenChain(SearchError):
    """Predecessor links loop back on themselves."""


class SearchStateError(SearchError):
    """A command was issued in a state that does not accept it."""

"""Application entry for running searches headless or in the viewer."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from rich.logging import RichHandler

from stepstar.render.textual_app import run_search_viewer
from stepstar.search.contracts import SearchSnapshot
from stepstar.search.engine import SearchEngine
from stepstar.search.grid import DEFAULT_GRID_SIZE, Grid, Position
from stepstar.search.layout_loader import load_layout

logger = logging.getLogger(__name__)

DEFAULT_STEP_DELAY = 0.1
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class SearchSettings:
    size: int = DEFAULT_GRID_SIZE
    start: Position | None = None
    end: Position | None = None
    layout: Path | None = None
    step_delay: float = DEFAULT_STEP_DELAY
    log_level: str = DEFAULT_LOG_LEVEL


def resolve_settings(
    *,
    size: int | None = None,
    start: Position | None = None,
    end: Position | None = None,
    layout: Path | None = None,
    step_delay: float | None = None,
    log_level: str | None = None,
) -> SearchSettings:
    """Merge explicit values over ``STEPSTAR_*`` environment variables."""
    env_size = os.getenv("STEPSTAR_SIZE")
    env_layout = os.getenv("STEPSTAR_LAYOUT")
    env_delay = os.getenv("STEPSTAR_STEP_DELAY")
    if size is None:
        size = int(env_size) if env_size else DEFAULT_GRID_SIZE
    if size < 1:
        raise ValueError(f"Grid size must be at least 1, got {size}.")
    if step_delay is None:
        step_delay = float(env_delay) if env_delay else DEFAULT_STEP_DELAY
    if step_delay < 0:
        raise ValueError(f"Step delay must not be negative, got {step_delay}.")
    return SearchSettings(
        size=size,
        start=start,
        end=end,
        layout=layout or (Path(env_layout) if env_layout else None),
        step_delay=step_delay,
        log_level=(
            log_level or os.getenv("STEPSTAR_LOG_LEVEL") or DEFAULT_LOG_LEVEL
        ).upper(),
    )


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")
    logging.basicConfig(
        level=numeric_level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )


def build_grid(settings: SearchSettings) -> Grid:
    if settings.layout is not None:
        layout = load_layout(settings.layout)
        logger.info(
            "Loaded %sx%s layout from %s with %s walls",
            layout.size,
            layout.size,
            settings.layout,
            len(layout.walls),
        )
        return layout.build(start=settings.start, end=settings.end)
    return Grid(settings.size, start=settings.start, end=settings.end)


def run_search(settings: SearchSettings) -> SearchSnapshot:
    engine = SearchEngine(build_grid(settings))
    engine.start()
    state = engine.run()
    logger.info("Headless search finished: %s after %s steps", state.value, engine.steps)
    return engine.snapshot()


def run_viewer(settings: SearchSettings) -> None:
    engine = SearchEngine(build_grid(settings))
    logger.info("Opening viewer for %sx%s grid", engine.grid.size, engine.grid.size)
    run_search_viewer(engine, step_delay=settings.step_delay)

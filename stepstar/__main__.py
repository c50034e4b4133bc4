"""Module entry point for `python -m stepstar`."""

from __future__ import annotations

import argparse
from pathlib import Path

from rich.console import Console

from stepstar.app import configure_logging, resolve_settings, run_search, run_viewer
from stepstar.render.viewer import render_snapshot
from stepstar.search.contracts import SearchState


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Step through A* on a square grid.")
    parser.add_argument(
        "--run",
        action="store_true",
        help="Run the search headless and print the final grid.",
    )
    parser.add_argument(
        "--size",
        type=int,
        default=None,
        help="Grid size N for an N x N grid (ignored with --layout).",
    )
    parser.add_argument(
        "--start",
        type=_parse_position,
        default=None,
        help="Start cell as X,Y (defaults to 0,0).",
    )
    parser.add_argument(
        "--end",
        type=_parse_position,
        default=None,
        help="End cell as X,Y (defaults to the opposite corner).",
    )
    parser.add_argument(
        "--layout",
        type=Path,
        default=None,
        help="ASCII layout file: '.' open, '#' wall, 'S' start, 'E' end.",
    )
    parser.add_argument(
        "--step-delay",
        type=float,
        default=None,
        help="Seconds between steps when auto-running in the viewer.",
    )
    parser.add_argument(
        "--scores",
        action="store_true",
        help="Include the g, h and f score tables in headless output.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (DEBUG, INFO, WARNING, ...).",
    )
    args = parser.parse_args(argv)

    try:
        settings = resolve_settings(
            size=args.size,
            start=args.start,
            end=args.end,
            layout=args.layout,
            step_delay=args.step_delay,
            log_level=args.log_level,
        )
        configure_logging(settings.log_level)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc

    if args.run:
        try:
            snapshot = run_search(settings)
        except (FileNotFoundError, ValueError) as exc:
            raise SystemExit(str(exc)) from exc
        Console().print(render_snapshot(snapshot, show_scores=args.scores))
        return 0 if snapshot.state == SearchState.FOUND else 1

    try:
        run_viewer(settings)
    except (FileNotFoundError, ValueError) as exc:
        raise SystemExit(str(exc)) from exc
    return 0


def _parse_position(value: str) -> tuple[int, int]:
    try:
        x_text, y_text = value.split(",")
        return (int(x_text), int(y_text))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(
            f"Expected a position like 3,4, got {value!r}."
        ) from exc


if __name__ == "__main__":
    raise SystemExit(main())

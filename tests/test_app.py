import logging
from pathlib import Path

import pytest

from stepstar.__main__ import main
from stepstar.app import (
    SearchSettings,
    build_grid,
    configure_logging,
    resolve_settings,
    run_search,
)
from stepstar.search.contracts import SearchState


def test_resolve_settings_prefers_arguments_over_environment(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("STEPSTAR_SIZE", "7")
    monkeypatch.setenv("STEPSTAR_STEP_DELAY", "0.5")
    monkeypatch.setenv("STEPSTAR_LOG_LEVEL", "debug")

    from_env = resolve_settings()
    assert from_env.size == 7
    assert from_env.step_delay == 0.5
    assert from_env.log_level == "DEBUG"

    explicit = resolve_settings(size=9, step_delay=0.0, log_level="info")
    assert explicit.size == 9
    assert explicit.step_delay == 0.0
    assert explicit.log_level == "INFO"


def test_resolve_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "STEPSTAR_SIZE",
        "STEPSTAR_LAYOUT",
        "STEPSTAR_STEP_DELAY",
        "STEPSTAR_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)

    assert resolve_settings() == SearchSettings()


def test_build_grid_from_layout(tmp_path: Path) -> None:
    layout = tmp_path / "layout.txt"
    layout.write_text("S.#\n..#\n...\n", encoding="utf-8")

    grid = build_grid(SearchSettings(layout=layout, end=(2, 2)))

    assert grid.size == 3
    assert grid.walls() == {(2, 0), (2, 1)}
    assert grid.end.position == (2, 2)


def test_run_search_returns_final_snapshot() -> None:
    snapshot = run_search(SearchSettings(size=6, start=(0, 5), end=(5, 0)))

    assert snapshot.state == SearchState.FOUND
    assert len(snapshot.path) == 11


def test_configure_logging_sets_level() -> None:
    configure_logging("DEBUG")
    assert logging.getLogger().getEffectiveLevel() == logging.DEBUG

    with pytest.raises(ValueError):
        configure_logging("LOUD")
    configure_logging("WARNING")


def test_main_headless_run(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--run", "--size", "4"]) == 0
    output = capsys.readouterr().out
    assert "found" in output
    assert "Grid 4x4" in output


def test_main_headless_unreachable(tmp_path: Path) -> None:
    layout = tmp_path / "blocked.txt"
    layout.write_text("S#.\n.#.\n.#E\n", encoding="utf-8")

    assert main(["--run", "--layout", str(layout)]) == 1


def test_main_reports_bad_input(tmp_path: Path) -> None:
    with pytest.raises(SystemExit):
        main(["--run", "--layout", str(tmp_path / "missing.txt")])
    with pytest.raises(SystemExit):
        main(["--run", "--start", "nope"])


def test_resolve_settings_rejects_zero_size(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("STEPSTAR_SIZE", raising=False)
    with pytest.raises(ValueError, match="at least 1"):
        resolve_settings(size=0)

    monkeypatch.setenv("STEPSTAR_SIZE", "0")
    with pytest.raises(ValueError, match="at least 1"):
        resolve_settings()


def test_resolve_settings_rejects_negative_step_delay(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.delenv("STEPSTAR_STEP_DELAY", raising=False)
    with pytest.raises(ValueError, match="must not be negative"):
        resolve_settings(step_delay=-0.5)

    monkeypatch.setenv("STEPSTAR_STEP_DELAY", "-1")
    with pytest.raises(ValueError, match="must not be negative"):
        resolve_settings()


def test_main_rejects_bad_size_and_delay() -> None:
    with pytest.raises(SystemExit):
        main(["--run", "--size", "0"])
    with pytest.raises(SystemExit):
        main(["--run", "--step-delay", "-1"])

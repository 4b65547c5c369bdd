from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from tripboard.cli import app

runner = CliRunner()

# Between the March 2026 and January 2027 points of the bundled seed.
NOW = "2026-06-01T00:00:00Z"


def _positions(output: str, *ids: str) -> list[int]:
    return [output.index(point_id) for point_id in ids]


def test_points_lists_everything_by_date() -> None:
    result = runner.invoke(app, ["points", "--now", NOW])

    assert result.exit_code == 0, result.output
    positions = _positions(result.output, "pt-1", "pt-2", "pt-3", "pt-4")
    assert positions == sorted(positions)


def test_points_filters_future() -> None:
    result = runner.invoke(app, ["points", "--filter", "future", "--now", NOW])

    assert result.exit_code == 0, result.output
    assert "pt-3" in result.output and "pt-4" in result.output
    assert "pt-1" not in result.output


def test_points_sorts_by_price() -> None:
    result = runner.invoke(app, ["points", "--sort", "price", "--now", NOW])

    assert result.exit_code == 0, result.output
    positions = _positions(result.output, "pt-1", "pt-2", "pt-4", "pt-3")
    assert positions == sorted(positions)


def test_points_empty_filter_prints_message() -> None:
    result = runner.invoke(app, ["points", "--filter", "present", "--now", NOW])

    assert result.exit_code == 0, result.output
    assert "There are no present events now" in result.output


def test_points_reports_bad_seed(tmp_path: Path) -> None:
    seed = tmp_path / "seed.json"
    seed.write_text('{"points": [{"id": 1}]}', encoding="utf-8")

    result = runner.invoke(app, ["points", "--seed", str(seed)])

    assert result.exit_code == 1
    assert "Error" in result.output


def test_unknown_filter_is_a_usage_error() -> None:
    result = runner.invoke(app, ["points", "--filter", "tomorrow"])

    assert result.exit_code == 2

"""Typer-based CLI entry point."""

from __future__ import annotations

import functools
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

import typer
from rich import print
from rich.table import Table

from .config import SAMPLE_SEED_PATH
from .core.filters import empty_list_message, filter_points
from .core.sorting import sort_points
from .domain.models import DEFAULT_SORT_TYPE, FilterType, SortType
from .errors import SeedDataError, SettingsError, TripBoardError
from .io.seed import load_seed, parse_datetime

app = typer.Typer(help="Trip board with optimistic point editing")


def _handle_errors(func):
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except (SeedDataError, SettingsError) as exc:
            typer.echo(f"Error: {exc}", err=True)
            raise typer.Exit(1) from exc
        except TripBoardError as exc:
            typer.echo(f"Unexpected error: {exc}", err=True)
            raise typer.Exit(1) from exc

    return wrapper


@app.command()
@_handle_errors
def run(
    seed: Optional[Path] = typer.Option(None, "--seed", help="Seed fixture to load"),
    settings: Optional[Path] = typer.Option(None, "--settings", help="Settings file"),
) -> None:
    """Open the desktop board."""

    from .app import run as run_app

    raise typer.Exit(run_app(seed_path=seed, settings_path=settings))


@app.command()
@_handle_errors
def points(
    seed: Path = typer.Option(SAMPLE_SEED_PATH, "--seed", exists=True, dir_okay=False),
    filter_type: FilterType = typer.Option(FilterType.EVERYTHING, "--filter"),
    sort_type: SortType = typer.Option(DEFAULT_SORT_TYPE, "--sort"),
    now: Optional[str] = typer.Option(None, "--now", help="ISO-8601 reference time"),
) -> None:
    """Print the points the board would show for a filter and sort."""

    trip = load_seed(seed)
    moment = parse_datetime(now) if now else datetime.now(timezone.utc)
    visible = sort_points(filter_points(trip.points, filter_type, moment), sort_type)

    if not visible:
        print(f"[yellow]{empty_list_message(filter_type)}")
        return

    table = Table(title=f"{filter_type.value} / {sort_type.value}")
    table.add_column("Id", no_wrap=True)
    table.add_column("Type")
    table.add_column("Destination")
    table.add_column("From")
    table.add_column("To")
    table.add_column("Price", justify="right", no_wrap=True)
    table.add_column("★")
    for point in visible:
        destination = trip.reference.destination_by_id(point.destination)
        table.add_row(
            point.id or "",
            point.type.value,
            destination.name if destination else "",
            f"{point.date_from:%Y-%m-%d %H:%M}",
            f"{point.date_to:%Y-%m-%d %H:%M}",
            str(point.base_price),
            "★" if point.is_favorite else "",
        )
    print(table)


def main() -> None:
    app()


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""Print a leaderboard for one metric as seen by one viewer."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated

import typer

ROOT_DIR = Path(__file__).resolve().parents[1]
SRC_DIR = ROOT_DIR / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from db import DEFAULT_DB_URL, create_db_engine, create_session_factory, read_only_session
from domain.config_base import load_reporting_settings
from domain.errors import ReportingError
from domain.leaderboard import LeaderboardMetric, LeaderboardRanker
from logger import setup_logger
from repositories import sql_readers

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help="Show ranked players for a leaderboard metric.",
)


@app.command()
def show_leaderboard(
    metric: Annotated[
        LeaderboardMetric,
        typer.Argument(help="Ranking metric."),
    ],
    user_id: Annotated[
        int | None,
        typer.Option("--user-id", help="Viewer user id; required unless --privileged."),
    ] = None,
    privileged: Annotated[
        bool,
        typer.Option("--privileged", help="Rank every active player instead of the viewer's network."),
    ] = False,
    limit: Annotated[
        int | None,
        typer.Option("--limit", help="Number of entries to print. Defaults to the configured limit."),
    ] = None,
    db_url: Annotated[
        str,
        typer.Option("--db-url", help="Database URL. Defaults to the local pokerstats postgres instance."),
    ] = DEFAULT_DB_URL,
    config: Annotated[
        Path | None,
        typer.Option("--config", help="Optional reporting settings TOML file."),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Enable debug logging."),
    ] = False,
) -> None:
    """Print leaderboard entries plus the viewer's own row when it falls outside the window."""
    if limit is not None and limit <= 0:
        raise typer.BadParameter("--limit must be greater than 0")

    setup_logger(verbose=verbose)
    settings = load_reporting_settings(config)
    session_factory = create_session_factory(create_db_engine(db_url))

    with read_only_session(session_factory) as session:
        ranker = LeaderboardRanker(**sql_readers(session), settings=settings)
        try:
            leaderboard = ranker.get_leaderboard(
                metric,
                viewer_user_id=user_id,
                privileged=privileged,
                limit=limit,
            )
        except ReportingError as exc:
            typer.echo(exc.user_message, err=True)
            raise typer.Exit(code=1) from exc

    if not leaderboard.entries:
        typer.echo(f"No ranked players for metric={metric.value}.")
        return

    typer.echo(f"metric={metric.value} total_entries={leaderboard.total_entries}")
    for entry in leaderboard.entries:
        marker = "*" if entry.is_current_user else " "
        typer.echo(
            f"{marker}{entry.rank:3d}. {entry.player_name:<24} "
            f"{entry.formatted_value:>16} sessions={entry.sessions_played:4d}"
        )

    current = leaderboard.current_user_entry
    if current is not None and current.rank > len(leaderboard.entries):
        typer.echo("...")
        typer.echo(
            f"*{current.rank:3d}. {current.player_name:<24} "
            f"{current.formatted_value:>16} sessions={current.sessions_played:4d}"
        )


if __name__ == "__main__":
    app()

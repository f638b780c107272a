#!/usr/bin/env python3
"""List players who share at least one visible session with a viewer."""

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
from domain.network import PlayerNetworkResolver
from logger import setup_logger
from repositories import sql_readers

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help="Browse a viewer's shared-session network.",
)


@app.command()
def show_player_network(
    user_id: Annotated[
        int,
        typer.Option("--user-id", help="Viewer user id."),
    ],
    search: Annotated[
        str | None,
        typer.Option("--search", help="Case-insensitive name filter."),
    ] = None,
    limit: Annotated[
        int | None,
        typer.Option("--limit", help="Maximum players to print (capped by configuration)."),
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
    """Print connected players ordered by shared session count."""
    setup_logger(verbose=verbose)
    settings = load_reporting_settings(config)
    session_factory = create_session_factory(create_db_engine(db_url))

    with read_only_session(session_factory) as session:
        resolver = PlayerNetworkResolver(**sql_readers(session), settings=settings)
        try:
            summaries = resolver.search_visible_players(user_id, search, limit)
        except ReportingError as exc:
            typer.echo(exc.user_message, err=True)
            raise typer.Exit(code=1) from exc

    if not summaries:
        typer.echo(f"No connected players for user_id={user_id}.")
        return

    for summary in summaries:
        typer.echo(
            f"{summary.player_id:6d} {summary.name:<24} "
            f"shared_sessions={summary.shared_sessions_count:3d} "
            f"last_shared={summary.last_shared_session_at}"
        )


if __name__ == "__main__":
    app()

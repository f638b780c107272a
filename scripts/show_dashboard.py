#!/usr/bin/env python3
"""Print the player or admin dashboard."""

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
from domain.dashboard import DashboardBuilder, RecentSession
from domain.errors import ReportingError
from domain.leaderboard import format_signed_money
from logger import setup_logger
from repositories import sql_readers

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help="Show dashboard snapshots.",
)


def _print_recent(sessions: list[RecentSession], currency: str) -> None:
    for recent in sessions:
        profit = "" if recent.personal_profit is None else format_signed_money(recent.personal_profit, currency)
        typer.echo(
            f"  {recent.start_time:%Y-%m-%d %H:%M} {recent.location:<24} "
            f"{recent.game_type.value:<16} players={recent.player_count:2d} {profit}"
        )


@app.command()
def show_dashboard(
    user_id: Annotated[
        int | None,
        typer.Option("--user-id", help="Viewer user id (optional with --admin)."),
    ] = None,
    admin: Annotated[
        bool,
        typer.Option("--admin", help="Show the system-wide admin dashboard."),
    ] = False,
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
    """Print personal stats, system totals and recent sessions."""
    if not admin and user_id is None:
        raise typer.BadParameter("--user-id is required unless --admin is set")

    setup_logger(verbose=verbose)
    settings = load_reporting_settings(config)
    currency = settings.currency
    session_factory = create_session_factory(create_db_engine(db_url))

    with read_only_session(session_factory) as session:
        builder = DashboardBuilder(**sql_readers(session), settings=settings)
        if admin:
            dashboard = builder.admin_dashboard(user_id)
            system = dashboard.system_stats
            typer.echo(
                f"sessions={system.total_sessions} active={system.active_sessions} "
                f"players={system.total_players} "
                f"money_in_play={format_signed_money(system.total_money_in_play, currency)}"
            )
            if dashboard.personal_stats is not None:
                typer.echo(
                    "personal net_profit="
                    f"{format_signed_money(dashboard.personal_stats.net_profit, currency)}"
                )
            typer.echo("recent sessions:")
            _print_recent(dashboard.recent_sessions, currency)
            return

        try:
            player_dashboard = builder.player_dashboard(user_id)
        except ReportingError as exc:
            typer.echo(exc.user_message, err=True)
            raise typer.Exit(code=1) from exc

    stats = player_dashboard.personal_stats
    typer.echo(
        f"sessions={stats.total_sessions} "
        f"net_profit={format_signed_money(stats.net_profit, currency)} "
        f"streak={stats.current_streak}"
    )
    position = player_dashboard.leaderboard_position
    if position is not None:
        typer.echo(f"rank={position.position}/{position.total_players} value={position.value}")
    typer.echo("recent sessions:")
    _print_recent(player_dashboard.recent_sessions, currency)


if __name__ == "__main__":
    app()

#!/usr/bin/env python3
"""Print a player's complete stats report, optionally for a player in the viewer's network."""

from __future__ import annotations

import sys
from datetime import datetime
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
from domain.leaderboard import format_percentage, format_signed_money
from domain.stats.report import CompleteStats, PlayerReportBuilder
from logger import setup_logger
from repositories import sql_readers

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help="Show complete player statistics.",
)


def _print_report(stats: CompleteStats, currency: str) -> None:
    overview = stats.overview
    typer.echo(
        f"sessions={overview.total_sessions} "
        f"net_profit={format_signed_money(overview.net_profit, currency)} "
        f"roi={format_percentage(overview.roi)} "
        f"win_rate={format_percentage(overview.win_rate)} "
        f"streak={overview.current_streak}"
    )
    typer.echo(
        f"buy_in={format_signed_money(overview.total_buy_in, currency)} "
        f"cash_out={format_signed_money(overview.total_cash_out, currency)} "
        f"avg={format_signed_money(overview.average_session_profit, currency)} "
        f"best={format_signed_money(overview.biggest_win, currency)} "
        f"worst={format_signed_money(overview.biggest_loss, currency)}"
    )

    if stats.location_performance:
        typer.echo("locations:")
        for row in stats.location_performance:
            typer.echo(
                f"  {row.location:<24} sessions={row.sessions_played:3d} "
                f"total={format_signed_money(row.total_profit, currency)} "
                f"win_rate={format_percentage(row.win_rate)}"
            )

    if stats.best_sessions:
        typer.echo("best sessions:")
        for notable in stats.best_sessions:
            typer.echo(
                f"  {notable.started_at:%Y-%m-%d} {notable.location:<24} "
                f"{format_signed_money(notable.profit, currency)}"
            )


@app.command()
def show_player_stats(
    user_id: Annotated[
        int,
        typer.Option("--user-id", help="Viewer user id."),
    ],
    target_player_id: Annotated[
        int | None,
        typer.Option(
            "--target-player-id",
            help="Show another player's stats restricted to sessions shared with the viewer.",
        ),
    ] = None,
    start_date: Annotated[
        datetime | None,
        typer.Option("--start-date", formats=["%Y-%m-%d"], help="Inclusive start date."),
    ] = None,
    end_date: Annotated[
        datetime | None,
        typer.Option("--end-date", formats=["%Y-%m-%d"], help="Inclusive end date."),
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
    """Print the overview and breakdowns for the selected player."""
    if start_date is not None and end_date is not None and start_date > end_date:
        raise typer.BadParameter("--start-date must not be after --end-date")

    setup_logger(verbose=verbose)
    settings = load_reporting_settings(config)
    session_factory = create_session_factory(create_db_engine(db_url))
    start = start_date.date() if start_date is not None else None
    end = end_date.date() if end_date is not None else None

    with read_only_session(session_factory) as session:
        builder = PlayerReportBuilder(**sql_readers(session), settings=settings)
        try:
            if target_player_id is None:
                stats = builder.complete_stats(user_id, start, end)
            else:
                shared = builder.shared_player_stats(user_id, target_player_id, start, end)
                typer.echo(f"player={shared.player_name} shared_sessions={shared.shared_sessions_count}")
                stats = shared.stats
        except ReportingError as exc:
            typer.echo(exc.user_message, err=True)
            raise typer.Exit(code=1) from exc

    _print_report(stats, settings.currency)


if __name__ == "__main__":
    app()

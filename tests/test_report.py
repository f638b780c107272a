"""Tests for complete and shared player reports."""

from __future__ import annotations

from datetime import date

import pytest

from domain.common import Money
from domain.config_base import ReportingSettings
from domain.errors import PlayerAccessDeniedError, PlayerNotLinkedError
from domain.stats.report import PlayerReportBuilder
from repositories import InMemoryLedger


def _builder(ledger: InMemoryLedger, settings: ReportingSettings | None = None) -> PlayerReportBuilder:
    return PlayerReportBuilder(**ledger.readers(), settings=settings)


def test_complete_stats_skip_deleted_sessions(ledger: InMemoryLedger) -> None:
    report = _builder(ledger).complete_stats(101)

    assert report.overview.player_id == 1
    assert report.overview.total_sessions == 2
    assert report.overview.net_profit == Money(3000)
    assert [point.cumulative_profit for point in report.profit_over_time] == [Money(5000), Money(3000)]
    assert [row.location for row in report.location_performance] == ["Anna's place", "Club"]
    assert len(report.day_of_week_performance) == 7
    assert [session.session_id for session in report.best_sessions] == [10, 11]
    assert [session.session_id for session in report.worst_sessions] == [11, 10]


def test_complete_stats_respect_date_range(ledger: InMemoryLedger) -> None:
    report = _builder(ledger).complete_stats(101, start_date=date(2026, 3, 7))
    assert report.overview.total_sessions == 1
    assert report.overview.net_profit == Money(-2000)

    empty = _builder(ledger).complete_stats(101, end_date=date(2026, 3, 1))
    assert empty.overview.total_sessions == 0
    assert empty.profit_over_time == []
    assert empty.day_of_week_performance == []


def test_complete_stats_limit_notable_sessions(ledger: InMemoryLedger) -> None:
    report = _builder(ledger, ReportingSettings(notable_sessions=1)).complete_stats(102)
    assert [session.profit for session in report.best_sessions] == [Money(4000)]
    assert [session.profit for session in report.worst_sessions] == [Money(-2000)]


def test_complete_stats_exclude_spectating(ledger: InMemoryLedger) -> None:
    report = _builder(ledger).complete_stats(103)
    assert report.overview.total_sessions == 1
    assert report.overview.net_profit == Money(2000)


def test_shared_player_stats_are_scoped_to_shared_sessions(ledger: InMemoryLedger) -> None:
    shared = _builder(ledger).shared_player_stats(101, 2)

    assert shared.player_id == 2
    assert shared.player_name == "Bob"
    assert shared.avatar_url == "https://example.org/bob.png"
    assert shared.shared_sessions_count == 2
    assert shared.stats.overview.total_sessions == 2
    assert shared.stats.overview.net_profit == Money(2000)

    from_carol = _builder(ledger).shared_player_stats(103, 2)
    assert from_carol.shared_sessions_count == 2
    assert from_carol.stats.overview.net_profit == Money(-2000)


def test_shared_player_stats_require_access(ledger: InMemoryLedger) -> None:
    builder = _builder(ledger)
    with pytest.raises(PlayerAccessDeniedError):
        builder.shared_player_stats(101, 8)
    with pytest.raises(PlayerAccessDeniedError):
        builder.shared_player_stats(101, 6)
    with pytest.raises(PlayerNotLinkedError):
        builder.complete_stats(999)

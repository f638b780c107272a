"""Tests for visibility-scoped leaderboard ranking."""

from __future__ import annotations

import pytest

from domain.common import Money
from domain.config_base import ReportingSettings
from domain.errors import PlayerNotLinkedError
from domain.leaderboard import LeaderboardMetric, LeaderboardRanker
from domain.leaderboard.metrics import metric_value
from domain.stats import StatsCalculator
from repositories import InMemoryLedger


def _ranker(ledger: InMemoryLedger, settings: ReportingSettings | None = None) -> LeaderboardRanker:
    return LeaderboardRanker(**ledger.readers(), settings=settings)


def test_net_profit_ranking_for_network_viewer(ledger: InMemoryLedger) -> None:
    result = _ranker(ledger).get_leaderboard(LeaderboardMetric.NET_PROFIT, viewer_user_id=101)

    assert result.metric is LeaderboardMetric.NET_PROFIT
    assert result.total_entries == 3
    assert [(e.rank, e.player_name) for e in result.entries] == [(1, "Alice"), (2, "Bob"), (3, "Carol")]
    alice = result.entries[0]
    assert alice.value == pytest.approx(3000.0)
    assert alice.formatted_value == "+PLN 30.00"
    assert alice.sessions_played == 2
    assert alice.is_current_user
    assert not any(entry.is_current_user for entry in result.entries[1:])
    assert result.current_user_entry == alice


def test_ties_break_on_player_id(ledger: InMemoryLedger) -> None:
    result = _ranker(ledger).get_leaderboard(LeaderboardMetric.NET_PROFIT, viewer_user_id=103)
    bob, carol = result.entries[1], result.entries[2]
    assert bob.value == carol.value
    assert (bob.player_id, carol.player_id) == (2, 3)


@pytest.mark.parametrize("metric", list(LeaderboardMetric))
def test_non_privileged_viewer_only_sees_network(ledger: InMemoryLedger, metric: LeaderboardMetric) -> None:
    ranker = _ranker(ledger)

    alice_view = ranker.get_leaderboard(metric, viewer_user_id=101)
    assert {entry.player_id for entry in alice_view.entries} <= {1, 2, 3}

    dave_view = ranker.get_leaderboard(metric, viewer_user_id=104)
    assert {entry.player_id for entry in dave_view.entries} <= {4, 5}


def test_current_user_outside_window_keeps_true_rank(ledger: InMemoryLedger) -> None:
    result = _ranker(ledger).get_leaderboard(LeaderboardMetric.NET_PROFIT, viewer_user_id=103, limit=2)

    assert [entry.player_name for entry in result.entries] == ["Alice", "Bob"]
    assert result.total_entries == 3
    assert result.current_user_entry is not None
    assert result.current_user_entry.rank == 3
    assert result.current_user_entry.player_name == "Carol"
    assert result.current_user_entry.is_current_user


def test_viewer_without_sessions_is_filtered_except_for_total_sessions(ledger: InMemoryLedger) -> None:
    ranker = _ranker(ledger)

    profit = ranker.get_leaderboard(LeaderboardMetric.NET_PROFIT, viewer_user_id=107)
    assert profit.entries == []
    assert profit.current_user_entry is None
    assert profit.total_entries == 0

    sessions = ranker.get_leaderboard(LeaderboardMetric.TOTAL_SESSIONS, viewer_user_id=107)
    assert sessions.total_entries == 1
    assert sessions.current_user_entry is not None
    assert sessions.current_user_entry.value == pytest.approx(0.0)
    assert sessions.current_user_entry.formatted_value == "0"


def test_total_sessions_excludes_spectating_and_deleted(ledger: InMemoryLedger) -> None:
    result = _ranker(ledger).get_leaderboard(LeaderboardMetric.TOTAL_SESSIONS, viewer_user_id=103)
    assert [(e.player_name, e.formatted_value) for e in result.entries] == [
        ("Bob", "3"),
        ("Alice", "2"),
        ("Carol", "1"),
    ]


def test_privileged_viewer_ranks_all_active_players(ledger: InMemoryLedger) -> None:
    ranker = _ranker(ledger)

    anonymous = ranker.get_leaderboard(LeaderboardMetric.NET_PROFIT, privileged=True)
    assert [entry.player_name for entry in anonymous.entries] == ["Dave", "Alice", "Bob", "Carol", "Erin"]
    assert anonymous.current_user_entry is None
    assert not any(entry.is_current_user for entry in anonymous.entries)

    admin = ranker.get_leaderboard(LeaderboardMetric.NET_PROFIT, viewer_user_id=101, privileged=True)
    assert admin.current_user_entry is not None
    assert admin.current_user_entry.rank == 2

    sessions = ranker.get_leaderboard(LeaderboardMetric.TOTAL_SESSIONS, privileged=True)
    assert sessions.total_entries == 7
    assert [entry.player_name for entry in sessions.entries[-2:]] == ["Gina", "Hank"]


def test_non_privileged_viewer_must_be_linked(ledger: InMemoryLedger) -> None:
    ranker = _ranker(ledger)
    with pytest.raises(PlayerNotLinkedError):
        ranker.get_leaderboard(LeaderboardMetric.ROI)
    with pytest.raises(PlayerNotLinkedError):
        ranker.get_leaderboard(LeaderboardMetric.ROI, viewer_user_id=999)


def test_non_positive_limit_falls_back_to_default(ledger: InMemoryLedger) -> None:
    ranker = _ranker(ledger, ReportingSettings(leaderboard_default_limit=2))
    result = ranker.get_leaderboard(LeaderboardMetric.NET_PROFIT, viewer_user_id=101, limit=0)
    assert len(result.entries) == 2
    assert result.total_entries == 3


def test_formatted_values_per_metric(ledger: InMemoryLedger) -> None:
    ranker = _ranker(ledger)

    roi = ranker.get_leaderboard(LeaderboardMetric.ROI, viewer_user_id=101)
    assert [(e.player_name, e.formatted_value) for e in roi.entries] == [
        ("Carol", "20.0%"),
        ("Alice", "10.0%"),
        ("Bob", "6.7%"),
    ]

    win_rate = ranker.get_leaderboard(LeaderboardMetric.WIN_RATE, viewer_user_id=101)
    assert [(e.player_name, e.formatted_value) for e in win_rate.entries] == [
        ("Carol", "100.0%"),
        ("Alice", "50.0%"),
        ("Bob", "33.3%"),
    ]

    average = ranker.get_leaderboard(LeaderboardMetric.AVERAGE_PROFIT, viewer_user_id=101)
    assert [(e.player_name, e.formatted_value) for e in average.entries] == [
        ("Carol", "+PLN 20.00"),
        ("Alice", "+PLN 15.00"),
        ("Bob", "+PLN 6.66"),
    ]

    streak = ranker.get_leaderboard(LeaderboardMetric.CURRENT_STREAK, viewer_user_id=101)
    assert [(e.player_name, e.formatted_value) for e in streak.entries] == [
        ("Carol", "1"),
        ("Alice", "-1"),
        ("Bob", "-1"),
    ]


def test_metric_value_uses_configured_currency() -> None:
    stats = StatsCalculator().calculate_player_stats(1, [])
    value = metric_value(LeaderboardMetric.NET_PROFIT, stats, currency="EUR")
    assert value.value == pytest.approx(0.0)
    assert value.formatted == "+EUR 0.00"
    assert stats.net_profit == Money.ZERO


def test_leaderboard_is_idempotent(ledger: InMemoryLedger) -> None:
    ranker = _ranker(ledger)
    first = ranker.get_leaderboard(LeaderboardMetric.WIN_RATE, viewer_user_id=102, limit=2)
    second = ranker.get_leaderboard(LeaderboardMetric.WIN_RATE, viewer_user_id=102, limit=2)
    assert first == second

"""Per-player and system-wide aggregates over session results."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from domain.common import GameSession, Money, SessionResult


class StreakClass(str, Enum):
    """Two-state streak classification; break-even results count as NOT_WIN."""

    WIN = "win"
    NOT_WIN = "not_win"

    @classmethod
    def of(cls, result: SessionResult) -> StreakClass:
        return cls.WIN if result.is_winning() else cls.NOT_WIN


@dataclass(frozen=True)
class PlayerStats:
    """Immutable performance snapshot for one player over one result set."""

    player_id: int
    total_sessions: int
    total_buy_in: Money
    total_cash_out: Money
    net_profit: Money
    roi: float
    win_rate: float
    winning_sessions_count: int
    losing_sessions_count: int
    biggest_win: Money
    biggest_loss: Money
    average_session_profit: Money
    current_streak: int
    first_place_count: int = 0
    second_place_count: int = 0
    third_place_count: int = 0

    @classmethod
    def empty(cls, player_id: int) -> PlayerStats:
        return cls(
            player_id=player_id,
            total_sessions=0,
            total_buy_in=Money.ZERO,
            total_cash_out=Money.ZERO,
            net_profit=Money.ZERO,
            roi=0.0,
            win_rate=0.0,
            winning_sessions_count=0,
            losing_sessions_count=0,
            biggest_win=Money.ZERO,
            biggest_loss=Money.ZERO,
            average_session_profit=Money.ZERO,
            current_streak=0,
        )


@dataclass(frozen=True)
class SystemStats:
    """System-wide totals over a session/result snapshot."""

    total_sessions: int
    active_sessions: int
    total_players: int
    total_money_in_play: Money


class StatsCalculator:
    """Stateless reducer from result histories to stats snapshots."""

    def calculate_player_stats(self, player_id: int, results: Sequence[SessionResult]) -> PlayerStats:
        """Aggregate one player's results; an empty history yields the zero snapshot."""
        if not results:
            return PlayerStats.empty(player_id)

        total_sessions = len(results)
        total_buy_in = sum((result.buy_in for result in results), Money.ZERO)
        total_cash_out = sum((result.cash_out for result in results), Money.ZERO)
        net_profit = total_cash_out - total_buy_in

        if total_buy_in.cents > 0:
            roi = net_profit.cents / total_buy_in.cents * 100.0
        else:
            roi = 0.0

        profits = [result.profit() for result in results]
        winning_count = sum(1 for profit in profits if profit.is_positive())
        losing_count = sum(1 for profit in profits if profit.is_negative())
        placements = [result.placement for result in results]

        return PlayerStats(
            player_id=player_id,
            total_sessions=total_sessions,
            total_buy_in=total_buy_in,
            total_cash_out=total_cash_out,
            net_profit=net_profit,
            roi=roi,
            win_rate=winning_count / total_sessions * 100.0,
            winning_sessions_count=winning_count,
            losing_sessions_count=losing_count,
            biggest_win=max(profits),
            biggest_loss=min(profits),
            average_session_profit=net_profit.truncated_div(total_sessions),
            current_streak=calculate_streak(results),
            first_place_count=placements.count(1),
            second_place_count=placements.count(2),
            third_place_count=placements.count(3),
        )

    def calculate_system_stats(
        self,
        sessions: Sequence[GameSession],
        results: Sequence[SessionResult],
        active_players: int,
    ) -> SystemStats:
        """Count visible/running sessions and total buy-ins; player count passes through."""
        return SystemStats(
            total_sessions=sum(1 for session in sessions if not session.is_deleted),
            active_sessions=sum(1 for session in sessions if session.is_active()),
            total_players=active_players,
            total_money_in_play=sum((result.buy_in for result in results), Money.ZERO),
        )


def calculate_streak(results: Sequence[SessionResult]) -> int:
    """Signed length of the latest run of same-class results (+ for wins)."""
    ordered = sorted(results, key=lambda result: result.created_at)
    if not ordered:
        return 0

    latest_class = StreakClass.of(ordered[-1])
    count = 0
    for result in reversed(ordered):
        if StreakClass.of(result) is not latest_class:
            break
        count += 1

    return count if latest_class is StreakClass.WIN else -count


__all__ = ["PlayerStats", "StatsCalculator", "StreakClass", "SystemStats", "calculate_streak"]

"""Closed set of leaderboard metrics and their value/format mapping."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from domain.common import Money
from domain.stats.calculator import PlayerStats


class LeaderboardMetric(str, Enum):
    """Ranking metric; higher values rank first for every member."""

    NET_PROFIT = "NET_PROFIT"
    ROI = "ROI"
    WIN_RATE = "WIN_RATE"
    CURRENT_STREAK = "CURRENT_STREAK"
    TOTAL_SESSIONS = "TOTAL_SESSIONS"
    AVERAGE_PROFIT = "AVERAGE_PROFIT"


@dataclass(frozen=True)
class MetricValue:
    value: float
    formatted: str


def metric_value(metric: LeaderboardMetric, stats: PlayerStats, *, currency: str = "PLN") -> MetricValue:
    """Raw numeric value and display string of one metric for one player."""
    match metric:
        case LeaderboardMetric.NET_PROFIT:
            return _money_value(stats.net_profit, currency)
        case LeaderboardMetric.ROI:
            return MetricValue(stats.roi, format_percentage(stats.roi))
        case LeaderboardMetric.WIN_RATE:
            return MetricValue(stats.win_rate, format_percentage(stats.win_rate))
        case LeaderboardMetric.CURRENT_STREAK:
            return MetricValue(float(stats.current_streak), str(stats.current_streak))
        case LeaderboardMetric.TOTAL_SESSIONS:
            return MetricValue(float(stats.total_sessions), str(stats.total_sessions))
        case LeaderboardMetric.AVERAGE_PROFIT:
            return _money_value(stats.average_session_profit, currency)
    raise ValueError(f"Unsupported leaderboard metric: {metric!r}")


def format_signed_money(amount: Money, currency: str = "PLN") -> str:
    """Format cents as e.g. "+PLN 1,234.56" or "-PLN 0.05"; zero is "+"."""
    sign = "-" if amount.is_negative() else "+"
    units, cents = divmod(abs(amount.cents), 100)
    return f"{sign}{currency} {units:,}.{cents:02d}"


def format_percentage(value: float) -> str:
    return f"{value:.1f}%"


def _money_value(amount: Money, currency: str) -> MetricValue:
    return MetricValue(float(amount.cents), format_signed_money(amount, currency))


__all__ = [
    "LeaderboardMetric",
    "MetricValue",
    "format_percentage",
    "format_signed_money",
    "metric_value",
]

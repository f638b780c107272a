"""Leaderboard ranking."""

from domain.leaderboard.metrics import LeaderboardMetric, format_percentage, format_signed_money
from domain.leaderboard.ranker import LeaderboardEntry, LeaderboardRanker, LeaderboardResult

__all__ = [
    "LeaderboardEntry",
    "LeaderboardMetric",
    "LeaderboardRanker",
    "LeaderboardResult",
    "format_percentage",
    "format_signed_money",
]

"""Poker ledger statistics domain modules."""

from domain.common import GameSession, GameType, Money, Player, SessionResult
from domain.errors import PlayerAccessDeniedError, PlayerNotLinkedError, ReportingError

__all__ = [
    "GameSession",
    "GameType",
    "Money",
    "Player",
    "PlayerAccessDeniedError",
    "PlayerNotLinkedError",
    "ReportingError",
    "SessionResult",
]

"""ORM models for the poker ledger."""

from models.base import Base
from models.game_session import GameSessionRow
from models.player import PlayerRow
from models.session_result import SessionResultRow

__all__ = ["Base", "GameSessionRow", "PlayerRow", "SessionResultRow"]

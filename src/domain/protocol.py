"""Read-only collaborator contracts the statistics engine depends on."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from domain.common import GameSession, Player, SessionResult


@runtime_checkable
class PlayerReader(Protocol):
    """Player lookups."""

    def get(self, player_id: int) -> Player | None: ...

    def get_many(self, player_ids: Iterable[int]) -> list[Player]: ...

    def get_by_user_id(self, user_id: int) -> Player | None: ...

    def list_all(self, *, include_inactive: bool = False) -> list[Player]: ...


@runtime_checkable
class GameSessionReader(Protocol):
    """Game session lookups."""

    def get(self, session_id: int) -> GameSession | None: ...

    def list_all(self, *, include_deleted: bool = False) -> list[GameSession]: ...


@runtime_checkable
class SessionResultReader(Protocol):
    """Session result lookups."""

    def list_by_player(self, player_id: int) -> list[SessionResult]: ...

    def list_by_sessions(self, session_ids: Iterable[int]) -> list[SessionResult]: ...


__all__ = ["GameSessionReader", "PlayerReader", "SessionResultReader"]

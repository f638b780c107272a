"""In-memory ledger snapshot exposing the reader contracts over plain collections."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from domain.common import GameSession, Player, SessionResult


@dataclass
class InMemoryPlayers:
    players: dict[int, Player] = field(default_factory=dict)

    def get(self, player_id: int) -> Player | None:
        return self.players.get(player_id)

    def get_many(self, player_ids: Iterable[int]) -> list[Player]:
        return [self.players[player_id] for player_id in sorted(set(player_ids)) if player_id in self.players]

    def get_by_user_id(self, user_id: int) -> Player | None:
        for player in self.players.values():
            if player.user_id == user_id:
                return player
        return None

    def list_all(self, *, include_inactive: bool = False) -> list[Player]:
        return [
            self.players[player_id]
            for player_id in sorted(self.players)
            if include_inactive or self.players[player_id].is_active
        ]


@dataclass
class InMemorySessions:
    sessions: dict[int, GameSession] = field(default_factory=dict)

    def get(self, session_id: int) -> GameSession | None:
        return self.sessions.get(session_id)

    def list_all(self, *, include_deleted: bool = False) -> list[GameSession]:
        ordered = sorted(self.sessions.values(), key=lambda session: (session.start_time, session.id))
        return [session for session in ordered if include_deleted or not session.is_deleted]


@dataclass
class InMemoryResults:
    results: list[SessionResult] = field(default_factory=list)

    def list_by_player(self, player_id: int) -> list[SessionResult]:
        return [result for result in self._ordered() if result.player_id == player_id]

    def list_by_sessions(self, session_ids: Iterable[int]) -> list[SessionResult]:
        wanted = set(session_ids)
        if not wanted:
            return []
        return [result for result in self._ordered() if result.session_id in wanted]

    def _ordered(self) -> list[SessionResult]:
        return sorted(self.results, key=lambda result: (result.created_at, result.id))


class InMemoryLedger:
    """Immutable-by-convention snapshot of players, sessions and results."""

    def __init__(
        self,
        *,
        players: Iterable[Player] = (),
        sessions: Iterable[GameSession] = (),
        results: Iterable[SessionResult] = (),
    ) -> None:
        self.players = InMemoryPlayers({player.id: player for player in players})
        self.sessions = InMemorySessions({session.id: session for session in sessions})
        self.results = InMemoryResults(list(results))

    def readers(self) -> dict[str, object]:
        """Keyword arguments accepted by the reporting service constructors."""
        return {"players": self.players, "sessions": self.sessions, "results": self.results}


__all__ = ["InMemoryLedger", "InMemoryPlayers", "InMemoryResults", "InMemorySessions"]

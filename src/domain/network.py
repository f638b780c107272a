"""Shared-session network: which players a viewer is allowed to see."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from datetime import datetime
import logging

from domain.common import Player, SessionResult
from domain.config_base import ReportingSettings
from domain.errors import PlayerAccessDeniedError, PlayerNotLinkedError
from domain.protocol import GameSessionReader, PlayerReader, SessionResultReader

logger = logging.getLogger(__name__)

NO_SHARED_SESSIONS = "You do not share any sessions with this player"
PLAYER_UNAVAILABLE = "Player is unavailable"


@dataclass(frozen=True)
class SharedPlayerSummary:
    """One connected player as seen by a viewer."""

    player_id: int
    name: str
    avatar_url: str | None
    shared_sessions_count: int
    last_shared_session_at: datetime | None


class PlayerNetworkResolver:
    """Privacy boundary over the shared-session graph."""

    def __init__(
        self,
        *,
        players: PlayerReader,
        sessions: GameSessionReader,
        results: SessionResultReader,
        settings: ReportingSettings | None = None,
    ) -> None:
        self.players = players
        self.sessions = sessions
        self.results = results
        self.settings = settings or ReportingSettings()

    def resolve_viewer(self, viewer_user_id: int) -> Player:
        """Return the player linked to a user or raise PlayerNotLinkedError."""
        player = self.players.get_by_user_id(viewer_user_id)
        if player is None:
            raise PlayerNotLinkedError(viewer_user_id)
        return player

    def shared_session_ids(self, viewer_player_id: int) -> frozenset[int]:
        """Ids of the non-deleted sessions the viewer has a result in."""
        viewer_results = self.results.list_by_player(viewer_player_id)
        if not viewer_results:
            return frozenset()
        return self._non_deleted({result.session_id for result in viewer_results})

    def network_player_ids(self, viewer_player_id: int) -> frozenset[int]:
        """Active players, other than the viewer, who share a visible session with them."""
        grouped = self._shared_results_by_player(viewer_player_id)
        if not grouped:
            return frozenset()
        return frozenset(player.id for player in self.players.get_many(grouped) if player.is_active)

    def search_visible_players(
        self,
        viewer_user_id: int,
        search_term: str | None = None,
        limit: int | None = None,
    ) -> list[SharedPlayerSummary]:
        """Browse the viewer's network, most shared sessions first."""
        viewer = self.resolve_viewer(viewer_user_id)
        grouped = self._shared_results_by_player(viewer.id)
        if not grouped:
            logger.debug("viewer_player_id=%s has no shared sessions", viewer.id)
            return []

        players_by_id = {
            player.id: player for player in self.players.get_many(grouped) if player.is_active
        }
        normalized_search = search_term.strip() if search_term is not None else None

        summaries: list[SharedPlayerSummary] = []
        for player_id, shared_results in grouped.items():
            player = players_by_id.get(player_id)
            if player is None:
                continue
            if normalized_search and not player.matches_search(normalized_search):
                continue
            summaries.append(
                SharedPlayerSummary(
                    player_id=player.id,
                    name=player.name,
                    avatar_url=player.avatar_url,
                    shared_sessions_count=len({result.session_id for result in shared_results}),
                    last_shared_session_at=max(result.created_at for result in shared_results),
                )
            )

        summaries.sort(key=lambda summary: (-summary.shared_sessions_count, summary.name.lower()))
        return summaries[: self._effective_limit(limit)]

    def shared_session_ids_between(
        self,
        viewer_user_id: int,
        target_player_id: int,
    ) -> tuple[Player, frozenset[int]]:
        """Capability check: the target player and the sessions the viewer may inspect."""
        viewer = self.resolve_viewer(viewer_user_id)
        viewer_sessions = self.shared_session_ids(viewer.id)
        if not viewer_sessions:
            raise PlayerAccessDeniedError(viewer.id, target_player_id, NO_SHARED_SESSIONS)

        target_sessions = {
            result.session_id
            for result in self.results.list_by_player(target_player_id)
            if result.session_id in viewer_sessions
        }
        # Target-side ids come straight from the ledger, so deletion is re-checked.
        shared = self._non_deleted(target_sessions)
        if not shared:
            raise PlayerAccessDeniedError(viewer.id, target_player_id, NO_SHARED_SESSIONS)

        target = self.players.get(target_player_id)
        if target is None or not target.is_active:
            raise PlayerAccessDeniedError(viewer.id, target_player_id, PLAYER_UNAVAILABLE)

        logger.debug(
            "viewer_player_id=%s target_player_id=%s shared_sessions=%d",
            viewer.id,
            target_player_id,
            len(shared),
        )
        return target, shared

    def _shared_results_by_player(self, viewer_player_id: int) -> dict[int, list[SessionResult]]:
        session_ids = self.shared_session_ids(viewer_player_id)
        if not session_ids:
            return {}

        grouped: dict[int, list[SessionResult]] = defaultdict(list)
        for result in self.results.list_by_sessions(session_ids):
            if result.player_id != viewer_player_id:
                grouped[result.player_id].append(result)
        return dict(grouped)

    def _non_deleted(self, session_ids: set[int]) -> frozenset[int]:
        visible: set[int] = set()
        for session_id in sorted(session_ids):
            session = self.sessions.get(session_id)
            if session is not None and not session.is_deleted:
                visible.add(session_id)
        return frozenset(visible)

    def _effective_limit(self, limit: int | None) -> int:
        if limit is None or limit <= 0:
            return self.settings.network_default_limit
        return min(limit, self.settings.network_max_limit)


__all__ = ["PlayerNetworkResolver", "SharedPlayerSummary"]

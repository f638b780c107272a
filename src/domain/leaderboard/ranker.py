"""Visibility-scoped leaderboards over per-player stats."""

from __future__ import annotations

from dataclasses import dataclass
import logging

from domain.common import Player, SessionResult
from domain.config_base import ReportingSettings
from domain.errors import PlayerNotLinkedError
from domain.leaderboard.metrics import LeaderboardMetric, metric_value
from domain.network import PlayerNetworkResolver
from domain.protocol import GameSessionReader, PlayerReader, SessionResultReader
from domain.stats.calculator import PlayerStats, StatsCalculator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LeaderboardEntry:
    rank: int
    player_id: int
    player_name: str
    value: float
    formatted_value: str
    sessions_played: int
    is_current_user: bool


@dataclass(frozen=True)
class LeaderboardResult:
    metric: LeaderboardMetric
    entries: list[LeaderboardEntry]
    current_user_entry: LeaderboardEntry | None
    total_entries: int


@dataclass(frozen=True)
class _RankedPlayer:
    player: Player
    stats: PlayerStats
    value: float
    formatted: str


class LeaderboardRanker:
    """Ranks the viewer-visible player pool by one metric."""

    def __init__(
        self,
        *,
        players: PlayerReader,
        sessions: GameSessionReader,
        results: SessionResultReader,
        calculator: StatsCalculator | None = None,
        network: PlayerNetworkResolver | None = None,
        settings: ReportingSettings | None = None,
    ) -> None:
        self.players = players
        self.sessions = sessions
        self.results = results
        self.calculator = calculator or StatsCalculator()
        self.settings = settings or ReportingSettings()
        self.network = network or PlayerNetworkResolver(
            players=players,
            sessions=sessions,
            results=results,
            settings=self.settings,
        )

    def get_leaderboard(
        self,
        metric: LeaderboardMetric,
        *,
        viewer_user_id: int | None = None,
        privileged: bool = False,
        limit: int | None = None,
    ) -> LeaderboardResult:
        """Build the ranked leaderboard for a viewer.

        Privileged viewers rank every active player and may be anonymous.
        Everyone else must be linked to a player and only ranks their
        shared-session network plus themselves.
        """
        effective_limit = limit if limit is not None and limit > 0 else self.settings.leaderboard_default_limit
        viewer, pool = self._candidate_pool(viewer_user_id=viewer_user_id, privileged=privileged)

        ranked = self._rank(metric, pool)
        viewer_id = viewer.id if viewer is not None else None

        entries = [
            _to_entry(rank, item, is_current_user=item.player.id == viewer_id)
            for rank, item in enumerate(ranked[:effective_limit], start=1)
        ]

        current_user_entry: LeaderboardEntry | None = None
        if viewer_id is not None:
            for rank, item in enumerate(ranked, start=1):
                if item.player.id != viewer_id:
                    continue
                if rank <= effective_limit:
                    current_user_entry = entries[rank - 1]
                else:
                    current_user_entry = _to_entry(rank, item, is_current_user=True)
                break

        logger.debug(
            "metric=%s viewer_player_id=%s privileged=%s pool=%d ranked=%d",
            metric.value,
            viewer_id,
            privileged,
            len(pool),
            len(ranked),
        )
        return LeaderboardResult(
            metric=metric,
            entries=entries,
            current_user_entry=current_user_entry,
            total_entries=len(ranked),
        )

    def _candidate_pool(
        self,
        *,
        viewer_user_id: int | None,
        privileged: bool,
    ) -> tuple[Player | None, list[Player]]:
        if privileged:
            viewer = self.players.get_by_user_id(viewer_user_id) if viewer_user_id is not None else None
            return viewer, self.players.list_all()

        if viewer_user_id is None:
            raise PlayerNotLinkedError(None)
        viewer = self.network.resolve_viewer(viewer_user_id)
        pool_ids = set(self.network.network_player_ids(viewer.id))
        pool = [player for player in self.players.get_many(pool_ids) if player.is_active]
        if viewer.is_active:
            pool.append(viewer)
        return viewer, pool

    def _rank(self, metric: LeaderboardMetric, pool: list[Player]) -> list[_RankedPlayer]:
        if not pool:
            return []

        visible_sessions = {session.id for session in self.sessions.list_all()}
        ranked: list[_RankedPlayer] = []
        for player in pool:
            history = self._counted_results(player.id, visible_sessions)
            stats = self.calculator.calculate_player_stats(player.id, history)
            if stats.total_sessions == 0 and metric is not LeaderboardMetric.TOTAL_SESSIONS:
                continue
            measured = metric_value(metric, stats, currency=self.settings.currency)
            ranked.append(_RankedPlayer(player, stats, measured.value, measured.formatted))

        ranked.sort(key=lambda item: (-item.value, item.player.id))
        return ranked

    def _counted_results(self, player_id: int, visible_sessions: set[int]) -> list[SessionResult]:
        return [
            result
            for result in self.results.list_by_player(player_id)
            if not result.is_spectator and result.session_id in visible_sessions
        ]


def _to_entry(rank: int, item: _RankedPlayer, *, is_current_user: bool) -> LeaderboardEntry:
    return LeaderboardEntry(
        rank=rank,
        player_id=item.player.id,
        player_name=item.player.name,
        value=item.value,
        formatted_value=item.formatted,
        sessions_played=item.stats.total_sessions,
        is_current_user=is_current_user,
    )


__all__ = ["LeaderboardEntry", "LeaderboardResult", "LeaderboardRanker"]

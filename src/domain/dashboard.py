"""Dashboard snapshots for regular players and admins."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from datetime import datetime
import logging

from domain.common import GameSession, GameType, Money, SessionResult
from domain.config_base import ReportingSettings
from domain.leaderboard.metrics import LeaderboardMetric
from domain.leaderboard.ranker import LeaderboardRanker
from domain.network import PlayerNetworkResolver
from domain.protocol import GameSessionReader, PlayerReader, SessionResultReader
from domain.stats.calculator import PlayerStats, StatsCalculator, SystemStats

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecentSession:
    session_id: int
    start_time: datetime
    location: str
    game_type: GameType
    player_count: int
    personal_profit: Money | None = None
    is_winning: bool | None = None


@dataclass(frozen=True)
class LeaderboardPosition:
    position: int
    total_players: int
    metric: LeaderboardMetric
    value: str


@dataclass(frozen=True)
class PlayerDashboard:
    personal_stats: PlayerStats
    recent_sessions: list[RecentSession]
    leaderboard_position: LeaderboardPosition | None


@dataclass(frozen=True)
class AdminDashboard:
    personal_stats: PlayerStats | None
    system_stats: SystemStats
    recent_sessions: list[RecentSession]


class DashboardBuilder:
    """Combines stats, ranking and recent activity into dashboard payloads."""

    def __init__(
        self,
        *,
        players: PlayerReader,
        sessions: GameSessionReader,
        results: SessionResultReader,
        calculator: StatsCalculator | None = None,
        settings: ReportingSettings | None = None,
    ) -> None:
        self.players = players
        self.sessions = sessions
        self.results = results
        self.calculator = calculator or StatsCalculator()
        self.settings = settings or ReportingSettings()
        self.network = PlayerNetworkResolver(
            players=players,
            sessions=sessions,
            results=results,
            settings=self.settings,
        )
        self.ranker = LeaderboardRanker(
            players=players,
            sessions=sessions,
            results=results,
            calculator=self.calculator,
            network=self.network,
            settings=self.settings,
        )

    def player_dashboard(self, user_id: int) -> PlayerDashboard:
        """Personal stats, recent sessions and net-profit position within the viewer's network."""
        player = self.network.resolve_viewer(user_id)
        visible = {session.id: session for session in self.sessions.list_all()}
        history = self._counted_results(player.id, visible)

        leaderboard = self.ranker.get_leaderboard(
            LeaderboardMetric.NET_PROFIT,
            viewer_user_id=user_id,
            limit=1,
        )
        position: LeaderboardPosition | None = None
        entry = leaderboard.current_user_entry
        if entry is not None and leaderboard.total_entries > 1:
            position = LeaderboardPosition(
                position=entry.rank,
                total_players=leaderboard.total_entries,
                metric=leaderboard.metric,
                value=entry.formatted_value,
            )

        return PlayerDashboard(
            personal_stats=self.calculator.calculate_player_stats(player.id, history),
            recent_sessions=self._recent_sessions(
                visible,
                limit=self.settings.recent_sessions_player,
                own_results={result.session_id: result for result in history},
            ),
            leaderboard_position=position,
        )

    def admin_dashboard(self, user_id: int | None = None) -> AdminDashboard:
        """System-wide totals plus the admin's own stats when they are linked to a player."""
        all_sessions = self.sessions.list_all(include_deleted=True)
        visible = {session.id: session for session in all_sessions if not session.is_deleted}

        personal_stats: PlayerStats | None = None
        player = self.players.get_by_user_id(user_id) if user_id is not None else None
        if player is not None:
            personal_stats = self.calculator.calculate_player_stats(
                player.id,
                self._counted_results(player.id, visible),
            )

        visible_results = self.results.list_by_sessions(visible) if visible else []
        system_stats = self.calculator.calculate_system_stats(
            all_sessions,
            visible_results,
            active_players=len(self.players.list_all()),
        )
        logger.debug(
            "admin dashboard sessions=%d visible=%d results=%d",
            len(all_sessions),
            len(visible),
            len(visible_results),
        )

        return AdminDashboard(
            personal_stats=personal_stats,
            system_stats=system_stats,
            recent_sessions=self._recent_sessions(visible, limit=self.settings.recent_sessions_admin),
        )

    def _counted_results(self, player_id: int, visible: dict[int, GameSession]) -> list[SessionResult]:
        return [
            result
            for result in self.results.list_by_player(player_id)
            if not result.is_spectator and result.session_id in visible
        ]

    def _recent_sessions(
        self,
        visible: dict[int, GameSession],
        *,
        limit: int,
        own_results: dict[int, SessionResult] | None = None,
    ) -> list[RecentSession]:
        candidates = list(visible.values())
        if own_results is not None:
            candidates = [session for session in candidates if session.id in own_results]
        candidates.sort(key=lambda session: (session.start_time, session.id), reverse=True)
        candidates = candidates[:limit]
        if not candidates:
            return []

        player_counts = Counter(
            result.session_id for result in self.results.list_by_sessions(session.id for session in candidates)
        )

        recent: list[RecentSession] = []
        for session in candidates:
            own = own_results.get(session.id) if own_results is not None else None
            recent.append(
                RecentSession(
                    session_id=session.id,
                    start_time=session.start_time,
                    location=session.location,
                    game_type=session.game_type,
                    player_count=player_counts[session.id],
                    personal_profit=own.profit() if own is not None else None,
                    is_winning=own.is_winning() if own is not None else None,
                )
            )
        return recent


__all__ = [
    "AdminDashboard",
    "DashboardBuilder",
    "LeaderboardPosition",
    "PlayerDashboard",
    "RecentSession",
]

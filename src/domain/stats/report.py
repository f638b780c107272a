"""Complete stats reports for a viewer and for players in their network."""

from __future__ import annotations

from collections.abc import Collection
from dataclasses import dataclass
from datetime import date
import logging

from domain.common import GameSession, SessionResult
from domain.config_base import ReportingSettings
from domain.network import PlayerNetworkResolver
from domain.protocol import GameSessionReader, PlayerReader, SessionResultReader
from domain.stats.breakdown import (
    DayOfWeekPerformance,
    LocationPerformance,
    NotableSession,
    ProfitDataPoint,
    day_of_week_performance,
    filter_by_date_range,
    location_performance,
    notable_sessions,
    profit_over_time,
)
from domain.stats.calculator import PlayerStats, StatsCalculator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompleteStats:
    overview: PlayerStats
    profit_over_time: list[ProfitDataPoint]
    location_performance: list[LocationPerformance]
    day_of_week_performance: list[DayOfWeekPerformance]
    best_sessions: list[NotableSession]
    worst_sessions: list[NotableSession]


@dataclass(frozen=True)
class SharedPlayerStats:
    player_id: int
    player_name: str
    avatar_url: str | None
    shared_sessions_count: int
    stats: CompleteStats


class PlayerReportBuilder:
    """Assembles overview stats plus breakdowns for one player."""

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

    def complete_stats(
        self,
        user_id: int,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> CompleteStats:
        """The linked player's own report."""
        player = self.network.resolve_viewer(user_id)
        history = self.results.list_by_player(player.id)
        return self.build(player.id, history, start_date=start_date, end_date=end_date)

    def shared_player_stats(
        self,
        viewer_user_id: int,
        target_player_id: int,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> SharedPlayerStats:
        """Another player's report, restricted to sessions shared with the viewer."""
        target, shared_session_ids = self.network.shared_session_ids_between(viewer_user_id, target_player_id)
        history = [
            result
            for result in self.results.list_by_player(target.id)
            if result.session_id in shared_session_ids
        ]
        return SharedPlayerStats(
            player_id=target.id,
            player_name=target.name,
            avatar_url=target.avatar_url,
            shared_sessions_count=len(shared_session_ids),
            stats=self.build(target.id, history, start_date=start_date, end_date=end_date),
        )

    def build(
        self,
        player_id: int,
        history: Collection[SessionResult],
        *,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> CompleteStats:
        sessions_by_id = self._visible_sessions({result.session_id for result in history})
        counted = [
            result
            for result in history
            if not result.is_spectator and result.session_id in sessions_by_id
        ]
        filtered = filter_by_date_range(counted, start_date, end_date)
        logger.debug(
            "player_id=%s history=%d counted=%d in_range=%d",
            player_id,
            len(history),
            len(counted),
            len(filtered),
        )

        count = self.settings.notable_sessions
        return CompleteStats(
            overview=self.calculator.calculate_player_stats(player_id, filtered),
            profit_over_time=profit_over_time(filtered, sessions_by_id),
            location_performance=location_performance(filtered, sessions_by_id),
            day_of_week_performance=day_of_week_performance(filtered, sessions_by_id),
            best_sessions=notable_sessions(filtered, sessions_by_id, count=count, best=True),
            worst_sessions=notable_sessions(filtered, sessions_by_id, count=count, best=False),
        )

    def _visible_sessions(self, session_ids: set[int]) -> dict[int, GameSession]:
        visible: dict[int, GameSession] = {}
        for session_id in sorted(session_ids):
            session = self.sessions.get(session_id)
            if session is not None and not session.is_deleted:
                visible[session_id] = session
        return visible


__all__ = ["CompleteStats", "PlayerReportBuilder", "SharedPlayerStats"]

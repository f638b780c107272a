"""Time, location and weekday breakdowns of a player's results."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from datetime import date, datetime

from domain.common import GameSession, GameType, Money, SessionResult

# Monday-first, matching datetime.weekday().
DAY_NAMES = ("MONDAY", "TUESDAY", "WEDNESDAY", "THURSDAY", "FRIDAY", "SATURDAY", "SUNDAY")


@dataclass(frozen=True)
class ProfitDataPoint:
    played_on: date
    profit: Money
    cumulative_profit: Money


@dataclass(frozen=True)
class LocationPerformance:
    location: str
    sessions_played: int
    total_profit: Money
    average_profit: Money
    win_rate: float


@dataclass(frozen=True)
class DayOfWeekPerformance:
    """Weekday aggregate; day_of_week is 0 for Sunday through 6 for Saturday."""

    day_of_week: int
    day_name: str
    sessions_played: int
    total_profit: Money
    average_profit: Money


@dataclass(frozen=True)
class NotableSession:
    session_id: int
    started_at: datetime
    location: str
    game_type: GameType
    profit: Money


def filter_by_date_range(
    results: Sequence[SessionResult],
    start_date: date | None = None,
    end_date: date | None = None,
) -> list[SessionResult]:
    """Keep results whose created_at date falls inside the inclusive range."""
    if start_date is None and end_date is None:
        return list(results)

    filtered: list[SessionResult] = []
    for result in results:
        result_date = result.created_at.date()
        if start_date is not None and result_date < start_date:
            continue
        if end_date is not None and result_date > end_date:
            continue
        filtered.append(result)
    return filtered


def profit_over_time(
    results: Sequence[SessionResult],
    sessions_by_id: Mapping[int, GameSession],
) -> list[ProfitDataPoint]:
    """Cumulative profit series ordered by session start time."""
    dated = [
        (sessions_by_id[result.session_id], result)
        for result in results
        if result.session_id in sessions_by_id
    ]
    dated.sort(key=lambda pair: (pair[0].start_time, pair[1].id))

    cumulative = Money.ZERO
    points: list[ProfitDataPoint] = []
    for session, result in dated:
        profit = result.profit()
        cumulative = cumulative + profit
        points.append(
            ProfitDataPoint(
                played_on=session.start_time.date(),
                profit=profit,
                cumulative_profit=cumulative,
            )
        )
    return points


def location_performance(
    results: Sequence[SessionResult],
    sessions_by_id: Mapping[int, GameSession],
) -> list[LocationPerformance]:
    grouped: dict[str, list[SessionResult]] = defaultdict(list)
    for result in results:
        session = sessions_by_id.get(result.session_id)
        grouped[session.location if session is not None else "Unknown"].append(result)

    rows: list[LocationPerformance] = []
    for location, location_results in grouped.items():
        total_profit = _total_profit(location_results)
        winning = sum(1 for result in location_results if result.is_winning())
        rows.append(
            LocationPerformance(
                location=location,
                sessions_played=len(location_results),
                total_profit=total_profit,
                average_profit=total_profit.truncated_div(len(location_results)),
                win_rate=winning / len(location_results) * 100.0,
            )
        )
    rows.sort(key=lambda row: (-row.total_profit.cents, row.location))
    return rows


def day_of_week_performance(
    results: Sequence[SessionResult],
    sessions_by_id: Mapping[int, GameSession],
) -> list[DayOfWeekPerformance]:
    """Seven rows, Monday through Sunday, including days with no sessions."""
    if not results:
        return []

    grouped: dict[int, list[SessionResult]] = defaultdict(list)
    for result in results:
        session = sessions_by_id.get(result.session_id)
        if session is not None:
            grouped[session.start_time.weekday()].append(result)

    rows: list[DayOfWeekPerformance] = []
    for weekday, day_name in enumerate(DAY_NAMES):
        day_results = grouped.get(weekday, [])
        total_profit = _total_profit(day_results)
        rows.append(
            DayOfWeekPerformance(
                day_of_week=(weekday + 1) % 7,
                day_name=day_name,
                sessions_played=len(day_results),
                total_profit=total_profit,
                average_profit=total_profit.truncated_div(len(day_results)) if day_results else Money.ZERO,
            )
        )
    return rows


def notable_sessions(
    results: Sequence[SessionResult],
    sessions_by_id: Mapping[int, GameSession],
    *,
    count: int = 5,
    best: bool = True,
) -> list[NotableSession]:
    """Best (highest profit first) or worst (lowest profit first) sessions."""
    candidates = [result for result in results if result.session_id in sessions_by_id]
    direction = -1 if best else 1
    candidates.sort(key=lambda result: (direction * result.profit().cents, result.created_at, result.id))

    notable: list[NotableSession] = []
    for result in candidates[:count]:
        session = sessions_by_id[result.session_id]
        notable.append(
            NotableSession(
                session_id=session.id,
                started_at=session.start_time,
                location=session.location,
                game_type=session.game_type,
                profit=result.profit(),
            )
        )
    return notable


def _total_profit(results: Sequence[SessionResult]) -> Money:
    return sum((result.profit() for result in results), Money.ZERO)


__all__ = [
    "DAY_NAMES",
    "DayOfWeekPerformance",
    "LocationPerformance",
    "NotableSession",
    "ProfitDataPoint",
    "day_of_week_performance",
    "filter_by_date_range",
    "location_performance",
    "notable_sessions",
    "profit_over_time",
]

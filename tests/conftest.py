"""Shared ledger snapshot for the reporting service tests.

Players (id / user id):
    1 Alice / 101, 2 Bob / 102, 3 Carol / 103, 4 Dave / 104, 5 Erin / 105,
    6 Frank / 106 (inactive), 7 Gina / 107 (no results), 8 Hank (unlinked).

Sessions:
    10 (Mar 2)  Alice +50.00, Bob -20.00, Carol +20.00, Frank -50.00
    11 (Mar 7)  Alice -20.00, Bob +40.00
    12 (Mar 8)  deleted: Alice +200.00, Hank -100.00
    13 (Mar 9)  still running: Dave +40.00, Erin -40.00
    14 (Mar 10) Bob break-even, Carol spectating
"""

from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from domain.common import GameSession, GameType, Money, Player, SessionResult
from repositories import InMemoryLedger


def _session(
    session_id: int,
    start_time: datetime,
    *,
    hours: int | None = 4,
    location: str = "Home",
    is_deleted: bool = False,
) -> GameSession:
    return GameSession(
        id=session_id,
        start_time=start_time,
        end_time=None if hours is None else start_time + timedelta(hours=hours),
        location=location,
        game_type=GameType.TEXAS_HOLDEM,
        is_deleted=is_deleted,
    )


def _result(
    result_id: int,
    session: GameSession,
    player_id: int,
    *,
    buy_in: int,
    cash_out: int,
    is_spectator: bool = False,
) -> SessionResult:
    return SessionResult(
        id=result_id,
        session_id=session.id,
        player_id=player_id,
        buy_in=Money(buy_in),
        cash_out=Money(cash_out),
        created_at=session.start_time + timedelta(minutes=result_id),
        is_spectator=is_spectator,
    )


def build_ledger() -> InMemoryLedger:
    players = [
        Player(id=1, name="Alice", user_id=101),
        Player(id=2, name="Bob", user_id=102, avatar_url="https://example.org/bob.png"),
        Player(id=3, name="Carol", user_id=103),
        Player(id=4, name="Dave", user_id=104),
        Player(id=5, name="Erin", user_id=105),
        Player(id=6, name="Frank", user_id=106, is_active=False),
        Player(id=7, name="Gina", user_id=107),
        Player(id=8, name="Hank"),
    ]
    s10 = _session(10, datetime(2026, 3, 2, 19, 0, 0), location="Anna's place")
    s11 = _session(11, datetime(2026, 3, 7, 20, 0, 0), hours=5, location="Club")
    s12 = _session(12, datetime(2026, 3, 8, 18, 0, 0), is_deleted=True)
    s13 = _session(13, datetime(2026, 3, 9, 20, 0, 0), hours=None)
    s14 = _session(14, datetime(2026, 3, 10, 19, 0, 0), location="Club")

    results = [
        _result(1, s10, 1, buy_in=10000, cash_out=15000),
        _result(2, s10, 2, buy_in=10000, cash_out=8000),
        _result(3, s10, 3, buy_in=10000, cash_out=12000),
        _result(4, s10, 6, buy_in=10000, cash_out=5000),
        _result(5, s11, 1, buy_in=20000, cash_out=18000),
        _result(6, s11, 2, buy_in=10000, cash_out=14000),
        _result(7, s12, 1, buy_in=10000, cash_out=30000),
        _result(8, s12, 8, buy_in=10000, cash_out=0),
        _result(9, s13, 4, buy_in=5000, cash_out=9000),
        _result(10, s13, 5, buy_in=5000, cash_out=1000),
        _result(11, s14, 2, buy_in=10000, cash_out=10000),
        _result(12, s14, 3, buy_in=0, cash_out=0, is_spectator=True),
    ]
    return InMemoryLedger(players=players, sessions=[s10, s11, s12, s13, s14], results=results)


@pytest.fixture
def ledger() -> InMemoryLedger:
    return build_ledger()

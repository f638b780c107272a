"""SQLAlchemy-backed readers mapping ledger rows into domain records."""

from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy import inspect, select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from domain.common import GameSession, GameType, Money, Player, SessionResult
from models import GameSessionRow, PlayerRow, SessionResultRow

_LEDGER_TABLES = (PlayerRow, GameSessionRow, SessionResultRow)


def ensure_ledger_schema(engine: Engine) -> None:
    """Create ledger tables and indexes if they do not exist."""
    with engine.begin() as connection:
        existing_tables = set(inspect(connection).get_table_names())
        for model in _LEDGER_TABLES:
            table = getattr(model, "__table__")
            if table.name not in existing_tables:
                table.create(bind=connection, checkfirst=True)


def _to_player(row: PlayerRow) -> Player:
    return Player(
        id=int(row.id),
        name=row.name,
        user_id=None if row.user_id is None else int(row.user_id),
        is_active=bool(row.is_active),
        avatar_url=row.avatar_url,
    )


def _to_session(row: GameSessionRow) -> GameSession:
    try:
        game_type = GameType(row.game_type)
    except ValueError as exc:
        raise ValueError(f"session_id={row.id} has invalid game_type={row.game_type!r}") from exc
    return GameSession(
        id=int(row.id),
        start_time=row.start_time,
        end_time=row.end_time,
        location=row.location,
        game_type=game_type,
        is_deleted=bool(row.is_deleted),
    )


def _to_result(row: SessionResultRow) -> SessionResult:
    return SessionResult(
        id=int(row.id),
        session_id=int(row.session_id),
        player_id=int(row.player_id),
        buy_in=Money.of(int(row.buy_in_cents)),
        cash_out=Money.of(int(row.cash_out_cents)),
        created_at=row.created_at,
        placement=None if row.placement is None else int(row.placement),
        is_spectator=bool(row.is_spectator),
        notes=row.notes,
    )


class SqlPlayerRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, player_id: int) -> Player | None:
        row = self.session.get(PlayerRow, player_id)
        return None if row is None else _to_player(row)

    def get_many(self, player_ids: Iterable[int]) -> list[Player]:
        ids = sorted(set(player_ids))
        if not ids:
            return []
        rows = self.session.execute(
            select(PlayerRow).where(PlayerRow.id.in_(ids)).order_by(PlayerRow.id)
        ).scalars()
        return [_to_player(row) for row in rows]

    def get_by_user_id(self, user_id: int) -> Player | None:
        row = self.session.execute(
            select(PlayerRow).where(PlayerRow.user_id == user_id)
        ).scalar_one_or_none()
        return None if row is None else _to_player(row)

    def list_all(self, *, include_inactive: bool = False) -> list[Player]:
        statement = select(PlayerRow).order_by(PlayerRow.id)
        if not include_inactive:
            statement = statement.where(PlayerRow.is_active.is_(True))
        return [_to_player(row) for row in self.session.execute(statement).scalars()]


class SqlGameSessionRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, session_id: int) -> GameSession | None:
        row = self.session.get(GameSessionRow, session_id)
        return None if row is None else _to_session(row)

    def list_all(self, *, include_deleted: bool = False) -> list[GameSession]:
        statement = select(GameSessionRow).order_by(GameSessionRow.start_time, GameSessionRow.id)
        if not include_deleted:
            statement = statement.where(GameSessionRow.is_deleted.is_(False))
        return [_to_session(row) for row in self.session.execute(statement).scalars()]


class SqlSessionResultRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def list_by_player(self, player_id: int) -> list[SessionResult]:
        rows = self.session.execute(
            select(SessionResultRow)
            .where(SessionResultRow.player_id == player_id)
            .order_by(SessionResultRow.created_at, SessionResultRow.id)
        ).scalars()
        return [_to_result(row) for row in rows]

    def list_by_sessions(self, session_ids: Iterable[int]) -> list[SessionResult]:
        ids = sorted(set(session_ids))
        if not ids:
            return []
        rows = self.session.execute(
            select(SessionResultRow)
            .where(SessionResultRow.session_id.in_(ids))
            .order_by(SessionResultRow.created_at, SessionResultRow.id)
        ).scalars()
        return [_to_result(row) for row in rows]


def sql_readers(session: Session) -> dict[str, object]:
    """Keyword arguments accepted by the reporting service constructors."""
    return {
        "players": SqlPlayerRepository(session),
        "sessions": SqlGameSessionRepository(session),
        "results": SqlSessionResultRepository(session),
    }


__all__ = [
    "SqlGameSessionRepository",
    "SqlPlayerRepository",
    "SqlSessionResultRepository",
    "ensure_ledger_schema",
    "sql_readers",
]

"""session_results table model."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import (
    BigInteger,
    Boolean,
    CheckConstraint,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column

from models.base import Base


class SessionResultRow(Base):
    """One player's buy-in/cash-out in one session."""

    __tablename__ = "session_results"
    __table_args__ = (
        UniqueConstraint("session_id", "player_id", name="uq_session_results_session_player"),
        CheckConstraint("buy_in_cents >= 0", name="ck_session_results_buy_in"),
        CheckConstraint("cash_out_cents >= 0", name="ck_session_results_cash_out"),
        CheckConstraint("placement IS NULL OR placement >= 1", name="ck_session_results_placement"),
        CheckConstraint(
            "NOT is_spectator OR (buy_in_cents = 0 AND cash_out_cents = 0 AND placement IS NULL)",
            name="ck_session_results_spectator",
        ),
        Index("idx_session_results_player", "player_id"),
        Index("idx_session_results_session", "session_id"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    session_id: Mapped[int] = mapped_column(ForeignKey("game_sessions.id"), nullable=False)
    player_id: Mapped[int] = mapped_column(ForeignKey("players.id"), nullable=False)
    buy_in_cents: Mapped[int] = mapped_column(BigInteger, nullable=False)
    cash_out_cents: Mapped[int] = mapped_column(BigInteger, nullable=False)
    placement: Mapped[int | None] = mapped_column(Integer, nullable=True)
    is_spectator: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    notes: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=False),
        nullable=False,
        server_default=func.now(),
    )

"""game_sessions table model."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import BigInteger, Boolean, CheckConstraint, DateTime, Index, String, func
from sqlalchemy.orm import Mapped, mapped_column

from models.base import Base


class GameSessionRow(Base):
    """One home game; soft-deleted sessions stay in the table."""

    __tablename__ = "game_sessions"
    __table_args__ = (
        CheckConstraint("min_buy_in_cents >= 0", name="ck_game_sessions_min_buy_in"),
        CheckConstraint(
            "end_time IS NULL OR end_time > start_time",
            name="ck_game_sessions_end_after_start",
        ),
        Index("idx_game_sessions_start", "start_time"),
        Index("idx_game_sessions_deleted", "is_deleted"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    start_time: Mapped[datetime] = mapped_column(DateTime(timezone=False), nullable=False)
    end_time: Mapped[datetime | None] = mapped_column(DateTime(timezone=False), nullable=True)
    location: Mapped[str] = mapped_column(String(255), nullable=False)
    game_type: Mapped[str] = mapped_column(String(32), nullable=False)
    min_buy_in_cents: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    notes: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    is_deleted: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=False),
        nullable=False,
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=False),
        nullable=False,
        server_default=func.now(),
    )

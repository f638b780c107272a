"""Shared ledger records consumed by the statistics engine."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import ClassVar

_CENTS_PER_UNIT = 100


@dataclass(frozen=True, order=True)
class Money:
    """Exact monetary amount in minor currency units (cents)."""

    cents: int

    ZERO: ClassVar[Money]

    @classmethod
    def of(cls, cents: int) -> Money:
        """Build an amount from an external source; negative values are rejected."""
        if isinstance(cents, bool) or not isinstance(cents, int):
            raise ValueError(f"Money amount must be an integer number of cents, got {cents!r}")
        if cents < 0:
            raise ValueError(f"Money amount must be non-negative, got {cents}")
        return cls(cents)

    @classmethod
    def of_decimal(cls, amount: Decimal | str) -> Money:
        """Parse a major-unit amount such as "125.50"."""
        try:
            value = Decimal(amount)
        except InvalidOperation as exc:
            raise ValueError(f"Invalid money amount: {amount!r}") from exc
        if not value.is_finite():
            raise ValueError(f"Invalid money amount: {amount!r}")
        cents = value * _CENTS_PER_UNIT
        if cents != cents.to_integral_value():
            raise ValueError(f"Money amount has more than two decimal places: {amount!r}")
        return cls.of(int(cents))

    def __add__(self, other: Money) -> Money:
        return Money(self.cents + other.cents)

    def __sub__(self, other: Money) -> Money:
        return Money(self.cents - other.cents)

    def __neg__(self) -> Money:
        return Money(-self.cents)

    def truncated_div(self, divisor: int) -> Money:
        """Integer division that truncates toward zero (never floors)."""
        if divisor == 0:
            raise ZeroDivisionError("Money division by zero")
        quotient = abs(self.cents) // abs(divisor)
        if (self.cents < 0) != (divisor < 0):
            quotient = -quotient
        return Money(quotient)

    def is_positive(self) -> bool:
        return self.cents > 0

    def is_negative(self) -> bool:
        return self.cents < 0

    def is_zero(self) -> bool:
        return self.cents == 0

    def to_decimal(self) -> Decimal:
        return Decimal(self.cents) / _CENTS_PER_UNIT


Money.ZERO = Money(0)


class GameType(str, Enum):
    """Poker variant played in a session."""

    TEXAS_HOLDEM = "TEXAS_HOLDEM"
    OMAHA = "OMAHA"
    OMAHA_HI_LO = "OMAHA_HI_LO"
    SEVEN_CARD_STUD = "SEVEN_CARD_STUD"
    FIVE_CARD_DRAW = "FIVE_CARD_DRAW"
    MIXED_GAMES = "MIXED_GAMES"
    OTHER = "OTHER"


@dataclass(frozen=True)
class Player:
    """Read-only player profile."""

    id: int
    name: str
    user_id: int | None = None
    is_active: bool = True
    avatar_url: str | None = None

    def matches_search(self, term: str) -> bool:
        return term.lower() in self.name.lower()


@dataclass(frozen=True)
class GameSession:
    """Read-only game session header; only identity, deletion and end time feed the core."""

    id: int
    start_time: datetime
    end_time: datetime | None = None
    location: str = "Unknown"
    game_type: GameType = GameType.TEXAS_HOLDEM
    is_deleted: bool = False

    def __post_init__(self) -> None:
        if self.end_time is not None and self.end_time <= self.start_time:
            raise ValueError(f"session_id={self.id} end_time must be after start_time")

    def is_active(self) -> bool:
        return self.end_time is None and not self.is_deleted


@dataclass(frozen=True)
class SessionResult:
    """One player's buy-in/cash-out record in one session."""

    id: int
    session_id: int
    player_id: int
    buy_in: Money
    cash_out: Money
    created_at: datetime
    placement: int | None = None
    is_spectator: bool = False
    notes: str | None = None

    def __post_init__(self) -> None:
        if self.buy_in.is_negative():
            raise ValueError(f"result_id={self.id} buy_in must be non-negative")
        if self.cash_out.is_negative():
            raise ValueError(f"result_id={self.id} cash_out must be non-negative")
        if self.placement is not None and self.placement < 1:
            raise ValueError(f"result_id={self.id} placement must be >= 1")
        if self.is_spectator:
            if not (self.buy_in.is_zero() and self.cash_out.is_zero()):
                raise ValueError(f"result_id={self.id} spectator must have zero buy_in and cash_out")
            if self.placement is not None:
                raise ValueError(f"result_id={self.id} spectator cannot have a placement")

    def profit(self) -> Money:
        return self.cash_out - self.buy_in

    def is_winning(self) -> bool:
        return self.profit().is_positive()

    def is_losing(self) -> bool:
        return self.profit().is_negative()

    def is_break_even(self) -> bool:
        return self.profit().is_zero()


__all__ = ["GameSession", "GameType", "Money", "Player", "SessionResult"]

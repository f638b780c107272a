"""Ledger readers backing the reporting services."""

from repositories.ledger import (
    SqlGameSessionRepository,
    SqlPlayerRepository,
    SqlSessionResultRepository,
    ensure_ledger_schema,
    sql_readers,
)
from repositories.memory import InMemoryLedger

__all__ = [
    "InMemoryLedger",
    "SqlGameSessionRepository",
    "SqlPlayerRepository",
    "SqlSessionResultRepository",
    "ensure_ledger_schema",
    "sql_readers",
]

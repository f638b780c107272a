"""Typed failures surfaced by user-scoped reporting operations."""

from __future__ import annotations


class ReportingError(Exception):
    """Base class for reporting failures with a caller-presentable message."""

    def __init__(self, message: str, user_message: str | None = None) -> None:
        super().__init__(message)
        self.user_message = user_message or message


class PlayerNotLinkedError(ReportingError):
    """Raised when a user has no linked player profile."""

    def __init__(self, user_id: int | None) -> None:
        super().__init__(
            f"user_id={user_id} is not linked to any player",
            "User is not linked to any player",
        )
        self.user_id = user_id


class PlayerAccessDeniedError(ReportingError):
    """Raised when a viewer may not see a target player's data."""

    def __init__(self, viewer_player_id: int, target_player_id: int, reason: str) -> None:
        super().__init__(
            f"viewer_player_id={viewer_player_id} denied access to "
            f"target_player_id={target_player_id}: {reason}",
            reason,
        )
        self.viewer_player_id = viewer_player_id
        self.target_player_id = target_player_id


__all__ = ["PlayerAccessDeniedError", "PlayerNotLinkedError", "ReportingError"]

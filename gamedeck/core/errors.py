"""Exceptions raised when a caller skips the matching query method."""

from __future__ import annotations


class GameDeckError(Exception):
    """Base exception for gamedeck."""


class StateConflictError(GameDeckError):
    """Raised when an operation is not valid in the current state."""


class PlacementError(StateConflictError):
    """Raised when a value is placed into an occupied or out-of-order slot."""

    def __init__(self, value: int, position: int, message: str) -> None:
        self.value = value
        self.position = position
        super().__init__(message)


class TierLockedError(StateConflictError):
    """Raised when unlocking a tier whose mastery quota is not met."""


class NoMoreTiersError(StateConflictError):
    """Raised when every key of the alphabet is already unlocked."""

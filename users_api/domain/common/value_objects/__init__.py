"""Common value objects shared across all domain modules."""

from .ids import GameId, UserId

__all__ = [
    "GameId",
    "UserId",
]

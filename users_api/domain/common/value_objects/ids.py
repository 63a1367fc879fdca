from dataclasses import dataclass
from uuid import UUID

from ..entity import EntityId


@dataclass(frozen=True)
class UserId(EntityId):
    """Strongly-typed user identifier."""

    value: UUID


@dataclass(frozen=True)
class GameId(EntityId):
    """Strongly-typed identifier of the game a user is currently playing."""

    value: UUID

"""Identity infrastructure layer."""

from users_api.infrastructure.identity.repositories.user_repository import UserRepository

__all__ = [
    "UserRepository",
]

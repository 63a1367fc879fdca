"""Protocol for the User repository collaborator."""

from typing import Protocol

from users_api.application.common.pagination import Pagination
from users_api.domain.common.value_objects.ids import UserId
from users_api.domain.identity.entities.user import User


class UserRepositoryProtocol(Protocol):
    """
    Protocol for User storage operations.

    Implementations are expected to make each call atomic on its own; use cases
    never span a transaction across several calls.
    """

    def find_by_id(self, user_id: UserId) -> User | None:
        """
        Find a user by ID.

        Args:
            user_id: The user ID

        Returns:
            User entity if found, None otherwise
        """
        ...

    def insert(self, user: User) -> User:
        """
        Insert a new user, assigning an identifier if it is the nil placeholder.

        Args:
            user: The user entity to insert

        Returns:
            The stored user entity
        """
        ...

    def update_or_insert(self, user: User) -> tuple[User, bool]:
        """
        Store a user under its identifier, replacing any existing row.

        Args:
            user: The user entity to store

        Returns:
            Tuple of the stored user entity and whether it was inserted
        """
        ...

    def delete(self, user_id: UserId) -> bool:
        """
        Delete a user.

        Args:
            user_id: The user ID

        Returns:
            True if deleted, False if not found
        """
        ...

    def get_page(self, pagination: Pagination) -> tuple[list[User], int]:
        """
        Get one page of users.

        Args:
            pagination: Normalized page request

        Returns:
            Tuple of the users on the page and the total user count
        """
        ...

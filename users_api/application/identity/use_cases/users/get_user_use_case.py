"""Use case for reading a single user."""

from uuid import UUID

from users_api.application.identity.protocols.user_repository import UserRepositoryProtocol
from users_api.application.identity.use_cases.exceptions import UserNotFoundError
from users_api.domain.common.value_objects.ids import UserId
from users_api.domain.identity.entities.user import User


class GetUserUseCase:
    """Use case for reading users by identifier."""

    def __init__(self, user_repository: UserRepositoryProtocol) -> None:
        """Initialize use case with repository protocol."""
        self.user_repository = user_repository

    def get_user(self, user_id: UUID) -> User:
        """
        Get a user by ID.

        Raises:
            UserNotFoundError: If no user exists under the ID
        """
        user = self.user_repository.find_by_id(UserId(user_id))
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    def user_exists(self, user_id: UUID) -> None:
        """
        Existence probe.

        Raises:
            UserNotFoundError: If no user exists under the ID
        """
        self.get_user(user_id)

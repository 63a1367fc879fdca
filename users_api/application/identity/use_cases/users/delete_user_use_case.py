"""Use case for deleting users."""

from uuid import UUID

import structlog

from users_api.application.identity.protocols.user_repository import UserRepositoryProtocol
from users_api.application.identity.use_cases.exceptions import UserNotFoundError
from users_api.domain.common.value_objects.ids import UserId

logger = structlog.get_logger(__name__)


class DeleteUserUseCase:
    """Use case for deleting users."""

    def __init__(self, user_repository: UserRepositoryProtocol) -> None:
        """Initialize use case with repository protocol."""
        self.user_repository = user_repository

    def delete_user(self, user_id: UUID) -> None:
        """
        Delete a user.

        Args:
            user_id: ID of the user to delete

        Raises:
            UserNotFoundError: If user is not found
        """
        target = UserId(user_id)
        if self.user_repository.find_by_id(target) is None:
            raise UserNotFoundError(user_id)

        self.user_repository.delete(target)
        logger.info("deleted_user", user_id=str(user_id))

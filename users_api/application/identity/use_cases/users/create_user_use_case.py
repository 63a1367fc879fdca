"""Use case for creating users."""

import structlog

from users_api.application.identity.protocols.user_repository import UserRepositoryProtocol
from users_api.application.identity.use_cases.dtos.user_dtos import NewUser
from users_api.domain.identity.entities.user import User
from users_api.domain.identity.services.user_validation import validate_login_field
from users_api.exceptions import ClientInputError, ValidationError

logger = structlog.get_logger(__name__)


class CreateUserUseCase:
    """Use case for creating users from a login."""

    def __init__(self, user_repository: UserRepositoryProtocol) -> None:
        """Initialize use case with repository protocol."""
        self.user_repository = user_repository

    def create_user(self, new_user: NewUser | None) -> User:
        """
        Create a user with server-assigned identifier and default fields.

        Args:
            new_user: Requested login, None when no body was sent

        Returns:
            Created user entity with its assigned identifier

        Raises:
            ClientInputError: If the request has no body
            ValidationError: If the login is empty or not alphanumeric
        """
        if new_user is None:
            raise ClientInputError("Request body is required")

        errors = validate_login_field(new_user.login)
        if errors:
            raise ValidationError(errors)

        user = self.user_repository.insert(User.create(new_user.login or ""))
        logger.info("created_user", user_id=str(user.id), login=user.login)
        return user

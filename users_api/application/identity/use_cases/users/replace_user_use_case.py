"""Use case for replacing users by identifier."""

from uuid import UUID

import structlog

from users_api.application.identity.services.user_upsert_service import UserUpsertService
from users_api.application.identity.use_cases.dtos.user_dtos import UserNames
from users_api.domain.common.value_objects.ids import UserId
from users_api.domain.identity.entities.user import User
from users_api.domain.identity.services.user_validation import validate_user_names
from users_api.exceptions import ClientInputError, ValidationError

logger = structlog.get_logger(__name__)


class ReplaceUserUseCase:
    """Use case for full replacement of a user's mutable fields."""

    def __init__(self, upsert_service: UserUpsertService) -> None:
        """Initialize use case with the upsert service."""
        self.upsert_service = upsert_service

    def replace_user(self, user_id: UUID, names: UserNames | None) -> tuple[User, bool]:
        """
        Replace the user under ``user_id``, creating it when absent.

        Args:
            user_id: Target identifier taken from the address
            names: Desired first and last name, None when no body was sent

        Returns:
            Tuple of the stored user and whether it was inserted

        Raises:
            ClientInputError: If the identifier is nil or no body was sent
            ValidationError: If first or last name is empty
        """
        target = UserId(user_id)
        if target.is_empty or names is None:
            raise ClientInputError("A non-empty user id and a request body are required")

        errors = validate_user_names(names.first_name, names.last_name)
        if errors:
            raise ValidationError(errors)

        user, was_inserted = self.upsert_service.upsert(target, names)
        logger.info("replaced_user", user_id=str(user.id), inserted=was_inserted)
        return user, was_inserted

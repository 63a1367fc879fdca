"""Use case for partially updating users with patch documents."""

from collections.abc import Sequence
from uuid import UUID

import structlog

from users_api.application.identity.protocols.user_repository import UserRepositoryProtocol
from users_api.application.identity.services.user_patch_service import (
    PatchOperation,
    apply_patch,
)
from users_api.application.identity.services.user_upsert_service import UserUpsertService
from users_api.application.identity.use_cases.dtos.user_dtos import UserNames
from users_api.application.identity.use_cases.exceptions import UserNotFoundError
from users_api.domain.common.value_objects.ids import UserId
from users_api.domain.identity.services.user_validation import validate_user_names
from users_api.exceptions import ClientInputError, PatchApplicationError, ValidationError

logger = structlog.get_logger(__name__)


class PatchUserUseCase:
    """Use case for applying patch documents to existing users."""

    def __init__(
        self,
        user_repository: UserRepositoryProtocol,
        upsert_service: UserUpsertService,
    ) -> None:
        """Initialize use case with repository protocol and upsert service."""
        self.user_repository = user_repository
        self.upsert_service = upsert_service

    def patch_user(self, user_id: UUID, operations: Sequence[PatchOperation] | None) -> None:
        """
        Apply a patch document to the user under ``user_id``.

        The patched value is stored through the same upsert path as replace,
        so a user deleted between the lookup and the write is re-created
        under the same identifier.

        Args:
            user_id: Target identifier taken from the address
            operations: Patch document, None when no body was sent

        Raises:
            ClientInputError: If no patch document was sent
            UserNotFoundError: If the identifier is nil or no user exists under it
            PatchApplicationError: If an operation could not be applied
            ValidationError: If the patched value breaks the name rules
        """
        if operations is None:
            raise ClientInputError("A patch document is required")

        target = UserId(user_id)
        if target.is_empty:
            raise UserNotFoundError(user_id)

        user = self.user_repository.find_by_id(target)
        if user is None:
            raise UserNotFoundError(user_id)

        patched, errors = apply_patch(operations, UserNames.from_user(user))
        if errors:
            logger.info("patch_rejected", user_id=str(user_id), fields=sorted(errors))
            raise PatchApplicationError(errors)

        errors = validate_user_names(patched.first_name, patched.last_name)
        if errors:
            raise ValidationError(errors)

        stored, was_inserted = self.upsert_service.upsert(target, patched)
        logger.info("patched_user", user_id=str(stored.id), inserted=was_inserted)

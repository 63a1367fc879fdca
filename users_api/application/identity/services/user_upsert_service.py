"""Create-or-replace decisions for users addressed by identifier."""

import structlog

from users_api.application.identity.protocols.user_repository import UserRepositoryProtocol
from users_api.application.identity.use_cases.dtos.user_dtos import UserNames
from users_api.domain.common.value_objects.ids import UserId
from users_api.domain.identity.entities.user import User
from users_api.exceptions import ClientInputError

logger = structlog.get_logger(__name__)


class UserUpsertService:
    """
    Single write path shared by replace and patch.

    When no user exists under the identifier, one is created there with the
    desired names and an empty login. Otherwise only the names are overwritten;
    identifier, login and counters are preserved.
    """

    def __init__(self, user_repository: UserRepositoryProtocol) -> None:
        self.user_repository = user_repository

    def upsert(self, user_id: UserId, names: UserNames) -> tuple[User, bool]:
        """
        Store ``names`` under ``user_id``.

        Args:
            user_id: Target identifier, must not be the nil UUID
            names: Desired first and last name, already validated

        Returns:
            Tuple of the stored user and whether it was inserted

        Raises:
            ClientInputError: If user_id is the nil identifier
        """
        if user_id.is_empty:
            raise ClientInputError("User id must not be empty")

        first_name = names.first_name or ""
        last_name = names.last_name or ""

        existing = self.user_repository.find_by_id(user_id)
        if existing is None:
            desired = User.create_with_id(
                id=user_id, login="", first_name=first_name, last_name=last_name
            )
        else:
            existing.rename(first_name, last_name)
            desired = existing

        user, was_inserted = self.user_repository.update_or_insert(desired)
        logger.debug("upserted_user", user_id=str(user.id), inserted=was_inserted)
        return user, was_inserted

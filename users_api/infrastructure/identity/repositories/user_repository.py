"""Repository for User domain entities."""

import logging
import uuid

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from users_api.application.common.pagination import Pagination
from users_api.domain.common.value_objects.ids import UserId
from users_api.domain.identity.entities.user import User
from users_api.infrastructure.identity.mappers.user_mapper import UserMapper
from users_api.models import User as UserORM

logger = logging.getLogger(__name__)


class UserRepository:
    """Repository for User domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = UserMapper()

    def find_by_id(self, user_id: UserId) -> User | None:
        """
        Find a user by ID.

        Args:
            user_id: The user ID

        Returns:
            User entity if found, None otherwise
        """
        orm_model = self.db.get(UserORM, user_id.value)
        return self.mapper.to_domain(orm_model) if orm_model else None

    def insert(self, user: User) -> User:
        """
        Insert a new user.

        Args:
            user: The user entity to insert; a nil ID is replaced by a fresh UUID

        Returns:
            Stored user entity
        """
        if user.id.is_empty:
            user.id = UserId(uuid.uuid4())

        orm_model = self.mapper.to_orm(user)
        self.db.add(orm_model)
        self.db.commit()
        self.db.refresh(orm_model)
        logger.info(f"Created user {orm_model.id} with login: {orm_model.login}")
        return self.mapper.to_domain(orm_model)

    def update_or_insert(self, user: User) -> tuple[User, bool]:
        """
        Store a user under its ID, replacing any existing row.

        Args:
            user: The user entity to store

        Returns:
            Tuple of the stored user entity and whether it was inserted
        """
        orm_model = self.db.get(UserORM, user.id.value)
        was_inserted = orm_model is None
        if orm_model is None:
            orm_model = self.mapper.to_orm(user)
            self.db.add(orm_model)
        else:
            orm_model = self.mapper.to_orm(user, orm_model)

        self.db.commit()
        self.db.refresh(orm_model)
        logger.info(f"{'Inserted' if was_inserted else 'Updated'} user {orm_model.id}")
        return self.mapper.to_domain(orm_model), was_inserted

    def delete(self, user_id: UserId) -> bool:
        """
        Delete a user.

        Args:
            user_id: The user ID

        Returns:
            True if deleted, False if not found
        """
        orm_model = self.db.get(UserORM, user_id.value)
        if orm_model is None:
            return False

        self.db.delete(orm_model)
        self.db.commit()
        logger.info(f"Deleted user {user_id}")
        return True

    def get_page(self, pagination: Pagination) -> tuple[list[User], int]:
        """
        Get one page of users ordered by login.

        Args:
            pagination: Normalized page request

        Returns:
            Tuple of the users on the page and the total user count
        """
        total = self.db.execute(select(func.count(UserORM.id))).scalar() or 0
        # Past the last page; the offset may not even fit a database integer
        if pagination.offset >= total:
            return [], total

        stmt = (
            select(UserORM)
            .order_by(UserORM.login, UserORM.id)
            .offset(pagination.offset)
            .limit(pagination.limit)
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models], total

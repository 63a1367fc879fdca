"""Mapper for User ORM ↔ Domain conversion."""

from users_api.domain.common.value_objects.ids import GameId, UserId
from users_api.domain.identity.entities.user import User
from users_api.models import User as UserORM


class UserMapper:
    """Mapper for User ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: UserORM) -> User:
        """Convert ORM model to domain entity."""
        return User.create_with_id(
            id=UserId(orm_model.id),
            login=orm_model.login,
            first_name=orm_model.first_name,
            last_name=orm_model.last_name,
            games_played=orm_model.games_played,
            current_game_id=GameId(orm_model.current_game_id)
            if orm_model.current_game_id
            else None,
        )

    def to_orm(self, domain_entity: User, orm_model: UserORM | None = None) -> UserORM:
        """Convert domain entity to ORM model."""
        current_game_id = (
            domain_entity.current_game_id.value if domain_entity.current_game_id else None
        )
        if orm_model:
            # Update existing; the identifier is never rewritten
            orm_model.login = domain_entity.login
            orm_model.first_name = domain_entity.first_name
            orm_model.last_name = domain_entity.last_name
            orm_model.games_played = domain_entity.games_played
            orm_model.current_game_id = current_game_id
            return orm_model

        # Create new
        return UserORM(
            id=domain_entity.id.value,
            login=domain_entity.login,
            first_name=domain_entity.first_name,
            last_name=domain_entity.last_name,
            games_played=domain_entity.games_played,
            current_game_id=current_game_id,
        )

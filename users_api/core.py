from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from users_api.application.identity.services.user_upsert_service import UserUpsertService
from users_api.application.identity.use_cases.users.create_user_use_case import (
    CreateUserUseCase,
)
from users_api.application.identity.use_cases.users.delete_user_use_case import (
    DeleteUserUseCase,
)
from users_api.application.identity.use_cases.users.get_user_use_case import GetUserUseCase
from users_api.application.identity.use_cases.users.list_users_use_case import ListUsersUseCase
from users_api.application.identity.use_cases.users.patch_user_use_case import PatchUserUseCase
from users_api.application.identity.use_cases.users.replace_user_use_case import (
    ReplaceUserUseCase,
)
from users_api.infrastructure.identity.repositories.user_repository import UserRepository


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    # Repositories
    user_repository = providers.Factory(UserRepository, db=db)

    # Application services
    user_upsert_service = providers.Factory(UserUpsertService, user_repository=user_repository)

    # Identity use cases
    get_user_use_case = providers.Factory(GetUserUseCase, user_repository=user_repository)
    list_users_use_case = providers.Factory(ListUsersUseCase, user_repository=user_repository)
    create_user_use_case = providers.Factory(CreateUserUseCase, user_repository=user_repository)
    replace_user_use_case = providers.Factory(
        ReplaceUserUseCase,
        upsert_service=user_upsert_service,
    )
    patch_user_use_case = providers.Factory(
        PatchUserUseCase,
        user_repository=user_repository,
        upsert_service=user_upsert_service,
    )
    delete_user_use_case = providers.Factory(DeleteUserUseCase, user_repository=user_repository)


"""Identity context schemas."""

from users_api.infrastructure.identity.schemas.user_schemas import (
    PatchOperationRequest,
    UserCreateRequest,
    UserReplaceRequest,
    UserResponse,
)

__all__ = [
    "PatchOperationRequest",
    "UserCreateRequest",
    "UserReplaceRequest",
    "UserResponse",
]

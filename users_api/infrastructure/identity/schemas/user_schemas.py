"""Pydantic schemas for User API request/response validation."""

from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from users_api.application.identity.services.user_patch_service import MISSING, PatchOperation
from users_api.application.identity.use_cases.dtos.user_dtos import NewUser, UserNames


class CamelModel(BaseModel):
    """Base schema serialized with camelCase field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UserCreateRequest(CamelModel):
    """Schema for creating a user. Login rules are checked by the use case."""

    login: str | None = Field(None, description="Alphanumeric login")

    def to_dto(self) -> NewUser:
        return NewUser(login=self.login)


class UserReplaceRequest(CamelModel):
    """Schema for replacing a user's names. Emptiness is checked by the use case."""

    first_name: str | None = Field(None, description="First name")
    last_name: str | None = Field(None, description="Last name")

    def to_dto(self) -> UserNames:
        return UserNames(first_name=self.first_name, last_name=self.last_name)


class UserResponse(CamelModel):
    """Schema for User response."""

    id: UUID
    login: str
    first_name: str
    last_name: str
    games_played: int
    current_game_id: UUID | None = None


class PatchOperationRequest(BaseModel):
    """
    Schema for one JSON Patch operation.

    Members are loosely typed so that a malformed operation reaches the patch
    interpreter and is reported as a field error rather than a parse failure.
    """

    model_config = ConfigDict(populate_by_name=True)

    op: Any = Field(None, description="add, remove, replace, move, copy or test")
    path: Any = Field(None, description="JSON Pointer to the target field, e.g. /firstName")
    value: Any = Field(None, description="Value for add, replace and test")
    from_: Any = Field(None, alias="from", description="Source pointer for move and copy")

    def to_operation(self) -> PatchOperation:
        """Convert to a patch operation, keeping an omitted value distinct from null."""
        return PatchOperation(
            op=_as_text(self.op),
            path=_as_text(self.path),
            value=self.value if "value" in self.model_fields_set else MISSING,
            from_path=_as_text(self.from_),
        )


def _as_text(member: Any) -> str | None:
    return None if member is None else str(member)

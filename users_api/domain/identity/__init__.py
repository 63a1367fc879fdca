"""Identity domain layer."""

from users_api.domain.identity.entities.user import User
from users_api.domain.identity.services.user_validation import (
    validate_login,
    validate_login_field,
    validate_user_names,
)

__all__ = [
    "User",
    "validate_login",
    "validate_login_field",
    "validate_user_names",
]

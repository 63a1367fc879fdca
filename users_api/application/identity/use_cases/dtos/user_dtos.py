"""DTOs for user use cases."""

from dataclasses import dataclass

from users_api.domain.identity.entities.user import User


@dataclass
class UserNames:
    """Replace-shaped user value: the fields a client may overwrite."""

    first_name: str | None = None
    last_name: str | None = None

    @classmethod
    def from_user(cls, user: User) -> "UserNames":
        return cls(first_name=user.first_name, last_name=user.last_name)


@dataclass
class NewUser:
    """Create-shaped user value: only the login is client-supplied."""

    login: str | None = None

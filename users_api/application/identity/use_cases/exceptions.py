"""Exceptions for identity use cases."""

from users_api.exceptions import NotFoundError


class UserNotFoundError(NotFoundError):
    """User not found error."""

    def __init__(self, user_id: object) -> None:
        self.user_id = user_id
        super().__init__(f"User with id {user_id} not found")

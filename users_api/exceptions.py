"""Custom exception hierarchy for the Users API."""

from collections.abc import Mapping

from starlette import status


class UsersApiError(Exception):
    """Base exception for all Users API errors."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class ClientInputError(UsersApiError):
    """Malformed or missing required input."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 400 status code."""
        super().__init__(message, status_code=status.HTTP_400_BAD_REQUEST)


class NotFoundError(UsersApiError):
    """Resource not found error."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 404 status code."""
        super().__init__(message, status_code=status.HTTP_404_NOT_FOUND)


class ValidationError(UsersApiError):
    """Field-level semantic violation carrying a field name to messages mapping."""

    def __init__(
        self,
        errors: Mapping[str, list[str]],
        message: str = "One or more validation errors occurred",
    ) -> None:
        """Initialize with the field errors and 422 status code."""
        self.errors = {field: list(messages) for field, messages in errors.items()}
        super().__init__(message, status_code=status.HTTP_422_UNPROCESSABLE_CONTENT)


class PatchApplicationError(ValidationError):
    """A patch operation could not be applied."""

    def __init__(self, errors: Mapping[str, list[str]]) -> None:
        """Initialize with the errors reported by the failing operation."""
        super().__init__(errors, message="The patch document could not be applied")

"""
Validation rules for user input.

All rules are pure: they take plain values and return either a boolean or a
fresh FieldErrors report. Emptiness means length zero or None; whitespace is
not trimmed.
"""

from users_api.domain.common.field_errors import FieldErrors, field_error, merge_field_errors

LOGIN_FIELD = "login"
FIRST_NAME_FIELD = "firstName"
LAST_NAME_FIELD = "lastName"

INVALID_LOGIN = "Invalid login"
INVALID_FIRST_NAME = "Invalid First Name"
INVALID_LAST_NAME = "Invalid Last Name"


def validate_login(login: str | None) -> bool:
    """
    Check that a login is non-empty and made only of letters and digits.

    Unicode letters and digits are accepted; punctuation and whitespace are not.
    """
    if not login:
        return False
    return all(char.isalpha() or char.isdecimal() for char in login)


def validate_login_field(login: str | None) -> FieldErrors:
    """Report a ``login`` field error when the login is invalid."""
    if validate_login(login):
        return {}
    return field_error(LOGIN_FIELD, INVALID_LOGIN)


def validate_user_names(first_name: str | None, last_name: str | None) -> FieldErrors:
    """
    Check the fields of a replace-shaped value.

    Every failing field is reported; checking does not stop at the first one.
    """
    reports: list[FieldErrors] = []
    if not first_name:
        reports.append(field_error(FIRST_NAME_FIELD, INVALID_FIRST_NAME))
    if not last_name:
        reports.append(field_error(LAST_NAME_FIELD, INVALID_LAST_NAME))
    return merge_field_errors(*reports)

"""
Patch application for replace-shaped user values.

A small interpreter over the JSON Patch operation kinds, acting on the fixed
``UserNames`` schema rather than on a generic JSON document. Operations run
strictly in order against a copy of the target; the first failing operation
stops processing and its error is returned together with the partially
patched copy. The caller decides whether anything gets committed.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, replace
from enum import Enum

from users_api.application.identity.use_cases.dtos.user_dtos import UserNames
from users_api.domain.common.field_errors import FieldErrors, field_error


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"


# Distinguishes an omitted "value" member from an explicit null
MISSING = _Missing()


class PatchOp(str, Enum):
    """Supported patch operation kinds."""

    ADD = "add"
    REMOVE = "remove"
    REPLACE = "replace"
    MOVE = "move"
    COPY = "copy"
    TEST = "test"


@dataclass(frozen=True)
class PatchOperation:
    """One step of a patch document."""

    op: str | None
    path: str | None
    value: object = MISSING
    from_path: str | None = None


# Wire field name -> UserNames attribute
_PATCHABLE_FIELDS = {
    "firstname": ("firstName", "first_name"),
    "lastname": ("lastName", "last_name"),
}

PATCH_DOCUMENT_FIELD = "patch"


@dataclass(frozen=True)
class _Target:
    wire_name: str
    attribute: str


def _resolve(path: str | None) -> _Target | None:
    if not path or not path.startswith("/"):
        return None
    segment = path[1:]
    if "/" in segment:
        return None
    known = _PATCHABLE_FIELDS.get(segment.lower())
    if known is None:
        return None
    return _Target(wire_name=known[0], attribute=known[1])


def _error_key(path: str | None) -> str:
    target = _resolve(path)
    if target is not None:
        return target.wire_name
    if path and path.strip("/"):
        return path.strip("/")
    return PATCH_DOCUMENT_FIELD


def _unknown_path(path: str | None) -> FieldErrors:
    return field_error(
        _error_key(path), f"The target location specified by path '{path}' was not found."
    )


def _check_value(operation: PatchOperation, target: _Target) -> FieldErrors:
    if operation.value is MISSING:
        return field_error(
            target.wire_name, f"The '{operation.op}' operation requires a 'value' member."
        )
    if operation.value is not None and not isinstance(operation.value, str):
        return field_error(
            target.wire_name,
            f"The value '{operation.value}' is invalid for target location '{operation.path}'.",
        )
    return {}


def _set(document: UserNames, operation: PatchOperation) -> FieldErrors:
    # add and replace are the same edit on a fixed schema: every field always exists
    target = _resolve(operation.path)
    if target is None:
        return _unknown_path(operation.path)
    errors = _check_value(operation, target)
    if errors:
        return errors
    setattr(document, target.attribute, operation.value)
    return {}


def _remove(document: UserNames, operation: PatchOperation) -> FieldErrors:
    target = _resolve(operation.path)
    if target is None:
        return _unknown_path(operation.path)
    if getattr(document, target.attribute) is None:
        return field_error(
            target.wire_name, f"Cannot remove '{operation.path}': the field has no value."
        )
    setattr(document, target.attribute, None)
    return {}


def _transfer(document: UserNames, operation: PatchOperation, *, keep_source: bool) -> FieldErrors:
    source = _resolve(operation.from_path)
    if source is None:
        return _unknown_path(operation.from_path)
    destination = _resolve(operation.path)
    if destination is None:
        return _unknown_path(operation.path)

    value = getattr(document, source.attribute)
    if value is None:
        return field_error(
            source.wire_name,
            f"The location '{operation.from_path}' has no value to {operation.op}.",
        )
    if not keep_source and source != destination:
        setattr(document, source.attribute, None)
    setattr(document, destination.attribute, value)
    return {}


def _move(document: UserNames, operation: PatchOperation) -> FieldErrors:
    return _transfer(document, operation, keep_source=False)


def _copy(document: UserNames, operation: PatchOperation) -> FieldErrors:
    return _transfer(document, operation, keep_source=True)


def _test(document: UserNames, operation: PatchOperation) -> FieldErrors:
    target = _resolve(operation.path)
    if target is None:
        return _unknown_path(operation.path)
    errors = _check_value(operation, target)
    if errors:
        return errors
    current = getattr(document, target.attribute)
    if current != operation.value:
        return field_error(
            target.wire_name,
            f"The current value '{current}' at path '{operation.path}' "
            f"is not equal to the test value '{operation.value}'.",
        )
    return {}


_HANDLERS: dict[PatchOp, Callable[[UserNames, PatchOperation], FieldErrors]] = {
    PatchOp.ADD: _set,
    PatchOp.REPLACE: _set,
    PatchOp.REMOVE: _remove,
    PatchOp.MOVE: _move,
    PatchOp.COPY: _copy,
    PatchOp.TEST: _test,
}


def apply_patch(
    operations: Iterable[PatchOperation], target: UserNames
) -> tuple[UserNames, FieldErrors]:
    """
    Apply patch operations in order to a copy of ``target``.

    Args:
        operations: Patch operations, applied strictly in sequence
        target: Value to patch; it is never mutated

    Returns:
        Tuple of the patched copy and the errors of the first failing
        operation (empty when every operation applied). On failure the copy
        reflects the operations applied before the failing one.
    """
    document = replace(target)
    for operation in operations:
        try:
            kind = PatchOp((operation.op or "").lower())
        except ValueError:
            return document, field_error(
                _error_key(operation.path), f"Invalid JsonPatch operation '{operation.op}'."
            )
        errors = _HANDLERS[kind](document, operation)
        if errors:
            return document, errors
    return document, {}

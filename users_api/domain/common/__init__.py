"""
Domain common module.

Contains base classes for domain modeling:
- ValueObject: Immutable objects defined by their attributes
- Entity: Objects with identity and lifecycle
- FieldErrors: Field name to messages mapping produced by validation rules
"""

from .entity import Entity, EntityId
from .exceptions import DomainError, InvariantViolationError
from .field_errors import FieldErrors, field_error, merge_field_errors
from .value_object import ValueObject

__all__ = [
    "DomainError",
    "Entity",
    "EntityId",
    "FieldErrors",
    "InvariantViolationError",
    "ValueObject",
    "field_error",
    "merge_field_errors",
]

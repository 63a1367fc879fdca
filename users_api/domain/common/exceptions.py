"""
Domain layer exceptions.

These exceptions represent broken entity invariants. They are caught and
translated to responses by the infrastructure layer.
"""


class DomainError(Exception):
    """Base exception for all domain errors."""

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class InvariantViolationError(DomainError):
    """
    Raised when an entity invariant is violated.

    Example: A user's games-played counter going negative.
    """

    def __init__(self, entity: str, invariant: str) -> None:
        message = f"Invariant violation in {entity}: {invariant}"
        super().__init__(message, {"entity": entity, "invariant": invariant})
        self.entity = entity
        self.invariant = invariant

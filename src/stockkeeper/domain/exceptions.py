"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class InsufficientStockError(ValidationError):
    """A stock operation would push a variant's counters below zero."""


class InvalidArgumentError(DomainException, ValueError):
    """An argument has the wrong shape (e.g. not a sequence)."""


class UnexpectedTypeError(DomainException, TypeError):
    """A collection element is not of the expected entity type."""

    def __init__(self, value: object, expected: type) -> None:
        super().__init__(
            f"Expected argument of type \"{expected.__name__}\", "
            f"\"{type(value).__name__}\" given"
        )
        self.value = value
        self.expected = expected

"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so callers can catch them uniformly.  Each class carries the ``kind`` code
under which it is reported when converted into an ErrorEvent.
"""

from edu_records.domain.events import ErrorKind


class DomainException(Exception):
    """Base class for all domain errors."""

    kind: str = "DomainError"


class ValidationError(DomainException):
    """A business rule or invariant was violated by the supplied input."""

    kind = ErrorKind.INVALID_ARGUMENT.value


class DuplicateEntityError(ValidationError):
    """An entity with the same key already exists in its parent."""


class InsufficientFundsError(DomainException):
    """A withdrawal asked for more than the available balance."""

    kind = ErrorKind.INSUFFICIENT_FUNDS.value


class EvaluationError(DomainException):
    """A derived value could not be computed from the stored data."""

    kind = ErrorKind.EVALUATION_ERROR.value


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""

    kind = "NotFound"

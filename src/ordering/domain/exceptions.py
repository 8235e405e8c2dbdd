"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class InvalidArgumentError(DomainException):
    """A caller-supplied value violates a local precondition."""


class InvalidStateError(DomainException):
    """The operation conflicts with the aggregate's current lifecycle state."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""

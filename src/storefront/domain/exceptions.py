"""Domain-level exceptions.

Cart and catalog operations themselves never raise for ordinary misuse
(unknown ids, bad indexes); these exceptions cover invalid values and
records crossing into the domain, so the CLI layer can catch them
uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A value or record violates an invariant."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""

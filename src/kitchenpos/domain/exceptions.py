"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """The input is malformed or violates a business rule."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class InvalidStateError(DomainException):
    """The request is well-formed but the current state forbids it."""


class ProfanityServiceError(DomainException):
    """The profanity checking service could not answer."""

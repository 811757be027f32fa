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


class CartDataError(DomainException):
    """A persisted cart snapshot could not be read back."""


class OrderSubmissionError(DomainException):
    """An order could not be written to the store. Safe to retry."""


class ScannerError(DomainException):
    """The frame source or decoder failed while scanning."""

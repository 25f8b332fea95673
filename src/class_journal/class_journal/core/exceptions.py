class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is missing or has the wrong shape."""


class NotFoundError(DomainError):
    """Raised when a referenced record does not exist."""


class StoreError(Exception):
    """Raised by the record access layer when the database reports a fault.

    Carries the driver message (constraint violation, I/O error, bad SQL).
    """

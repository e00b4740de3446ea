class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a record id does not exist in the store."""


class DuplicateCheckInError(ValidationError):
    """Raised on a second check-in for the same employee and day."""

    def __init__(self, message: str = "Already checked in today"):
        super().__init__(message)


class NoActiveCheckInError(ValidationError):
    """Raised on check-out without an open check-in for today."""

    def __init__(self, message: str = "No active check-in found or already checked out"):
        super().__init__(message)

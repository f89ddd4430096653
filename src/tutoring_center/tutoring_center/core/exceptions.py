class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class RescheduleError(DomainError):
    """Raised when a course cannot be regenerated; aborts the unit of work."""

    def __init__(self, message: str, *, course_id: str | None = None):
        super().__init__(message)
        self.course_id = course_id

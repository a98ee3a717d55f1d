class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is missing or malformed."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class NotFoundError(DomainError):
    """Raised when a referenced entity does not exist."""

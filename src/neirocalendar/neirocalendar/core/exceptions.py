class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidDateRange(ValidationError):
    """Raised when a year/month pair does not name a displayable month."""


class StoreError(DomainError):
    """Raised when the attendance store fails (connectivity, constraints)."""

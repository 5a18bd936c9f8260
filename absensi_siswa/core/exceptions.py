class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class GatewayError(DomainError):
    """Raised when the Apps Script endpoint fails or rejects a request."""


class InvalidStatusError(ValueError):
    """Raised when code passes something that is not an AttendanceStatus.

    This is a programming defect, not a user error: the UI only offers the
    four known statuses.
    """


class ConfigurationError(RuntimeError):
    """Raised at startup when a required setting is missing."""

"""Domain exceptions."""

from typing import Any


class DomainException(Exception):
    """Base exception for all domain exceptions."""

    # Hey future me, message is stored as an attribute so handlers can read it without
    # parsing str(exception). Don't raise this directly - use a specific subclass so
    # callers (and the API exception handlers) can catch precisely.
    def __init__(self, message: str, *args: Any) -> None:
        super().__init__(message, *args)
        self.message = message


class ValidationError(DomainException):
    """Input validation failed.

    Raised when data fails validation rules (missing fields, invalid formats).
    Planning Center records without an ``id`` end up here.

    HTTP Status: 422

    Example:
        raise ValidationError("Invalid Plan record: missing id")
    """

    pass


class ConfigurationError(DomainException):
    """Application misconfiguration.

    Raised when required configuration is missing or invalid - most notably
    Planning Center credentials that are absent from both the settings table
    and the environment. Needs operator action, never retried.

    HTTP Status: 503 (Service Unavailable)

    Example:
        raise ConfigurationError("Planning Center credentials not configured")
    """

    pass


class NotInitializedError(DomainException):
    """A Provider call was attempted before the client was initialized.

    This is a caller ordering bug - initialization is never implicit. Call
    ``initialize()`` first (app startup or the settings screen does this).

    HTTP Status: 409 (Conflict)
    """

    def __init__(
        self, message: str = "Planning Center service not initialized"
    ) -> None:
        super().__init__(message)


class ExternalServiceError(DomainException):
    """External service returned an error.

    HTTP Status: 502 (Bad Gateway)
    """

    pass


class ProviderError(ExternalServiceError):
    """Planning Center returned a non-success response or could not be reached.

    Hey future me - status_code is None for transport failures (DNS, refused
    connection, timeout). Callers decide on retry/backoff with status_code and
    resource; we never retry internally.

    Example:
        raise ProviderError("Planning Center request failed", status_code=404,
                            resource="/people/v2/people/1")
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        resource: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.resource = resource

    @property
    def is_not_found(self) -> bool:
        """Check if the Provider reported the resource as missing."""
        return self.status_code == 404


__all__ = [
    "ConfigurationError",
    "DomainException",
    "ExternalServiceError",
    "NotInitializedError",
    "ProviderError",
    "ValidationError",
]

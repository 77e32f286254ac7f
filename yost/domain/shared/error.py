"""Error hierarchy for YOST.

Error layers:
- YostError: Base class for all YOST errors
- DomainError: Business rule violations, validation failures (4xx responses)
- InfrastructureError: System-level failures like storage/network issues (503 responses)

These errors are mapped to HTTP responses by the global exception handler in app.py.
"""


class YostError(Exception):
    """Base class for all YOST errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(message)


# =============================================================================
# Domain Errors (business logic violations - typically 4xx)
# =============================================================================


class DomainError(YostError):
    """Base class for domain/business errors."""


class NotFoundError(DomainError):
    """Resource not found."""


class ValidationError(DomainError):
    """Input validation failed."""

    def __init__(self, message: str, field: str | None = None, code: str | None = None) -> None:
        super().__init__(message, code=code or "VALIDATION_ERROR")
        self.field = field


class InvalidAttributeCombinationError(ValidationError):
    """Two record attributes contradict each other (e.g. a link flag without the link)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, field=field, code="INVALID_ATTRIBUTE_COMBINATION")


# =============================================================================
# Infrastructure Errors (system-level failures - typically 503)
# =============================================================================


class InfrastructureError(YostError):
    """Base class for infrastructure/system errors."""


class StorageUnavailableError(InfrastructureError):
    """Storage backend (record store, blob store) is unavailable."""


class ExternalServiceError(InfrastructureError):
    """External service (holdings provider) is unavailable or failed."""


class ConfigurationError(InfrastructureError):
    """System misconfiguration detected."""

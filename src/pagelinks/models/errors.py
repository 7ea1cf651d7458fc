"""Custom exception classes for the pagination core."""

from typing import Any

from pagelinks.utils.constants import (
    ERROR_CODE_CONFIGURATION,
    ERROR_CODE_INVALID_METADATA,
    ERROR_CODE_INVALID_OPTIONS,
)


class PaginationError(Exception):
    """
    Base exception for all pagination errors.

    All custom errors must inherit from this class.
    Callers must explicitly provide a message and error code.
    Optional contextual information can be supplied via `details`.
    """

    message: str
    error_code: str
    details: dict[str, Any]

    def __init__(
        self,
        *,
        message: str,
        error_code: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}

        super().__init__(self.message)


class ConfigurationError(PaginationError):
    """Raised when no renderer or strategy can be determined."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_CONFIGURATION,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class InvalidMetadataError(PaginationError):
    """Raised when page, page size or entry count cannot be paginated."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_INVALID_METADATA,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class InvalidOptionsError(PaginationError):
    """Raised when window sizes or other options are out of range."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_INVALID_OPTIONS,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )

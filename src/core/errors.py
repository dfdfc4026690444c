"""
Centralized error handling system for the Sign-Up Form GUI.

This module provides the error taxonomy and custom exception hierarchy used
throughout the application. User input that fails validation is reported as
data (see ``core.form_validators``); the exceptions below are reserved for
programming errors, configuration problems and unexpected failures.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)


class ErrorType(Enum):
    """Error type categories for consistent error handling."""

    SYSTEM = "system"
    VALIDATION = "validation"


class ErrorCode(Enum):
    """Specific error codes for common scenarios."""

    # Validation errors
    INVALID_INPUT = "INVALID_INPUT"
    UNKNOWN_FIELD = "UNKNOWN_FIELD"

    # System errors
    OS_ERROR = "OS_ERROR"
    TIMEOUT = "TIMEOUT"
    MEMORY_ERROR = "MEMORY_ERROR"

    # Generic
    UNKNOWN = "UNKNOWN"


class ErrorSeverity(Enum):
    """Error severity levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


@dataclass
class BaseAppError(Exception):
    """
    Base application error with comprehensive metadata.

    This is the root of all custom application errors, providing
    structured information for consistent error handling and user feedback.
    """

    type: ErrorType
    code: ErrorCode
    user_message: str
    technical_message: str | None = None
    severity: ErrorSeverity = ErrorSeverity.MEDIUM
    context: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        """Return user-friendly error message."""
        return self.user_message

    def __repr__(self) -> str:
        """Return detailed error representation for debugging."""
        return (
            f"{self.__class__.__name__}("
            f"type={self.type.value}, "
            f"code={self.code.value}, "
            f"message='{self.user_message}'"
            f")"
        )


class SystemError(BaseAppError):
    """System and presentation related errors."""

    def __init__(
        self,
        code: ErrorCode,
        user_message: str,
        technical_message: str | None = None,
        severity: ErrorSeverity = ErrorSeverity.HIGH,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(
            type=ErrorType.SYSTEM,
            code=code,
            user_message=user_message,
            technical_message=technical_message,
            severity=severity,
            context=context or {},
        )


class ValidationError(BaseAppError):
    """Raised when a form field is addressed incorrectly by code."""

    def __init__(
        self,
        code: ErrorCode,
        user_message: str,
        field: str | None = None,
        technical_message: str | None = None,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        context: dict[str, Any] | None = None,
    ):
        context = context or {}
        if field:
            context["field"] = field

        super().__init__(
            type=ErrorType.VALIDATION,
            code=code,
            user_message=user_message,
            technical_message=technical_message,
            severity=severity,
            context=context,
        )

    @property
    def field(self) -> str | None:
        """Get the field that caused the validation error."""
        return self.context.get("field")


# Built-in exceptions the form code can raise, with the error class and code
# each one is reported under.
_EXCEPTION_MAPPING: dict[type[Exception], tuple[type[BaseAppError], ErrorCode, str]] = {
    OSError: (SystemError, ErrorCode.OS_ERROR, "System error occurred"),
    ValueError: (ValidationError, ErrorCode.INVALID_INPUT, "Invalid input provided"),
    TypeError: (ValidationError, ErrorCode.INVALID_INPUT, "Invalid input provided"),
    TimeoutError: (SystemError, ErrorCode.TIMEOUT, "Operation timed out"),
    MemoryError: (SystemError, ErrorCode.MEMORY_ERROR, "Insufficient memory"),
}


def map_exception(exc: Exception, context: dict[str, Any] | None = None) -> BaseAppError:
    """
    Map a built-in exception to a custom application error.

    Args:
        exc: The exception to map
        context: Optional context information

    Returns:
        BaseAppError instance with appropriate type and metadata
    """
    if isinstance(exc, BaseAppError):
        return exc

    exc_type = type(exc)
    technical_message = f"{exc_type.__name__}: {exc}"

    if exc_type not in _EXCEPTION_MAPPING:
        logger.warning(f"Unknown exception type: {technical_message}")
        return SystemError(
            code=ErrorCode.UNKNOWN,
            user_message="An unexpected error occurred",
            technical_message=technical_message,
            context=context,
        )

    error_class, error_code, default_message = _EXCEPTION_MAPPING[exc_type]
    return error_class(  # type: ignore[call-arg]
        code=error_code,
        user_message=str(exc) or default_message,
        technical_message=technical_message,
        context=context,
    )


def from_exception(exc: Exception, context: dict[str, Any] | None = None) -> BaseAppError:
    """
    Convert any exception to a BaseAppError.

    This is an alias for map_exception for convenience.
    """
    return map_exception(exc, context)

"""
Standardized Exception Hierarchy for Class Stripper.

Every failure inside the cleaning pipeline is expressed as a CleanerError
carrying an error code and context. The orchestrator converts these into a
failed CleanResult; none of them escape the public clean() call.
"""

from typing import Any, Dict, Optional


class CleanerError(Exception):
    """
    Base exception for all cleaner-related errors.

    Provides a standardized interface with error codes and context.
    """

    def __init__(
        self,
        message: str,
        error_code: str,
        context: Optional[Dict[str, Any]] = None,
        original_exception: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = context or {}
        self.original_exception = original_exception

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "context": self.context,
            "original_exception": (
                str(self.original_exception) if self.original_exception else None
            ),
        }


class InvalidInputError(CleanerError):
    """Raised when the text handed to the cleaner is not a non-empty string."""

    def __init__(self, value: Any, **kwargs):
        super().__init__(
            message="Invalid input: expected a non-empty HTML string",
            error_code="INVALID_INPUT",
            context={"input_type": type(value).__name__},
            **kwargs,
        )


class ParsingError(CleanerError):
    """Raised when HTML parsing fails."""

    def __init__(self, message: str, parser: str = "unknown", **kwargs):
        super().__init__(
            message=f"Parsing failed ({parser}): {message}",
            error_code="PARSING_FAILED",
            context={"parser": parser},
            **kwargs,
        )


class ConfigurationError(CleanerError):
    """Raised when cleaning options are invalid."""

    def __init__(self, message: str, config_key: str, **kwargs):
        super().__init__(
            message=f"Configuration error for '{config_key}': {message}",
            error_code="CONFIG_ERROR",
            context={"config_key": config_key},
            **kwargs,
        )


class InternalFaultError(CleanerError):
    """Raised when a pipeline stage fails unexpectedly."""

    def __init__(self, stage: str, message: str, **kwargs):
        super().__init__(
            message=f"Cleaning failed during {stage}: {message}",
            error_code="INTERNAL_FAULT",
            context={"stage": stage},
            **kwargs,
        )


__all__ = [
    "CleanerError",
    "InvalidInputError",
    "ParsingError",
    "ConfigurationError",
    "InternalFaultError",
]

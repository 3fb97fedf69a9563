"""Exceptions raised by the analysis client and helpers for presenting them."""

from typing import Any, Optional

from arganalyzer.models import ValidationResult

UNKNOWN_ERROR_MESSAGE = "An unknown error occurred"


class AnalysisClientError(Exception):
    """Base class for all analysis client failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class TransportError(AnalysisClientError):
    """Network failure before a response was obtained."""


class ApiError(AnalysisClientError):
    """The service answered with a failing status or an unusable body."""

    def __init__(self, status_code: int, detail: Optional[str] = None):
        message = f"API error: {status_code}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
        self.status_code = status_code


class ProviderError(AnalysisClientError):
    """The model provider call failed or returned a malformed response."""


class ChatUnavailableError(ProviderError):
    """Raised by the placeholder chat backend."""


def get_error_message(error: Any) -> str:
    """Convert any caught failure into a human-readable string."""
    if isinstance(error, Exception):
        return str(error)
    return UNKNOWN_ERROR_MESSAGE


def to_validation_result(error: Any) -> ValidationResult:
    """Map a failed validation call to an invalid result for display."""
    return ValidationResult(
        is_valid=False,
        analysis=f"Error: {get_error_message(error)}",
        explanation="Please try again.",
    )

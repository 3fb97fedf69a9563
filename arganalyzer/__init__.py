"""Client for a remote argument analysis service."""

from arganalyzer.client import AnalysisClient
from arganalyzer.config import Config, get_config, set_config
from arganalyzer.errors import (
    AnalysisClientError,
    ApiError,
    ChatUnavailableError,
    ProviderError,
    TransportError,
    get_error_message,
    to_validation_result,
)
from arganalyzer.models import AnalysisResult, ChatResponse, Fallacy, ValidationResult

__version__ = "0.1.0"

__all__ = [
    "AnalysisClient",
    "AnalysisClientError",
    "AnalysisResult",
    "ApiError",
    "ChatResponse",
    "ChatUnavailableError",
    "Config",
    "Fallacy",
    "ProviderError",
    "TransportError",
    "ValidationResult",
    "get_config",
    "get_error_message",
    "set_config",
    "to_validation_result",
]

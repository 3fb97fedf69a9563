"""HTTP client for the argument analysis service."""

from typing import Any, Callable, Optional, TypeVar

import requests
from pydantic import TypeAdapter, ValidationError

from arganalyzer.chat.backends import ChatBackend, get_chat_backend
from arganalyzer.config import Config
from arganalyzer.errors import ApiError, TransportError
from arganalyzer.models import AnalysisResult, ChatResponse, Fallacy, ValidationResult
from arganalyzer.utils.logging_config import get_logger

logger = get_logger()

T = TypeVar("T")

_fallacy_list = TypeAdapter(list[Fallacy])

# Unset timeouts fall back to the configured default; None means no deadline
_DEFAULT: Any = object()


class AnalysisClient:
    """Client for the analysis service and the chat assistant.

    Each operation performs exactly one outbound call and either returns a
    normalized result or raises an ``AnalysisClientError``. Failures are
    logged and raised; nothing is retried.
    """

    def __init__(
        self,
        config: Config,
        session: Optional[requests.Session] = None,
        chat_backend: Optional[ChatBackend] = None,
    ):
        """Initialize the client.

        Args:
            config: Client configuration
            session: HTTP session to send requests with
            chat_backend: Chat strategy; built from ``config.chat_mode`` on first use if omitted
        """
        self.config = config
        self.base_url = config.api_url.rstrip("/")
        self.analyze_url = f"{self.base_url}/api/analyze"
        self.validate_url = f"{self.base_url}/api/validate"
        self.fallacies_url = f"{self.base_url}/api/fallacies"
        self._owns_session = session is None
        self.session = session or requests.Session()
        self._chat_backend = chat_backend

    def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "AnalysisClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @property
    def chat_backend(self) -> ChatBackend:
        if self._chat_backend is None:
            self._chat_backend = get_chat_backend(self.config)
        return self._chat_backend

    def analyze(self, text: str, timeout: Optional[float] = _DEFAULT) -> AnalysisResult:
        """Perform a complete analysis of argumentative text.

        Args:
            text: The text to analyze
            timeout: Deadline in seconds (defaults to ``config.request_timeout``)

        Returns:
            Analysis results

        Raises:
            TransportError: If the service could not be reached
            ApiError: If the service answered with a failing status or bad body
        """
        try:
            response = self._post(self.analyze_url, text, timeout)
            return self._decode(response, AnalysisResult.model_validate)
        except Exception as e:
            logger.error(f"Error analyzing text: {e}")
            raise

    def validate(self, text: str, timeout: Optional[float] = _DEFAULT) -> ValidationResult:
        """Validate the logical structure of an argument."""
        try:
            response = self._post(self.validate_url, text, timeout)
            return self._decode(response, ValidationResult.model_validate)
        except Exception as e:
            logger.error(f"Error validating argument: {e}")
            raise

    def detect_fallacies(self, text: str, timeout: Optional[float] = _DEFAULT) -> list[Fallacy]:
        """Detect logical fallacies in a text.

        Returns:
            Detected fallacies in the order the service reported them
        """
        try:
            response = self._post(self.fallacies_url, text, timeout)
            return self._decode(response, _fallacy_list.validate_python)
        except Exception as e:
            logger.error(f"Error detecting fallacies: {e}")
            raise

    def send_chat_message(
        self, message: str, timeout: Optional[float] = _DEFAULT
    ) -> ChatResponse:
        """Send a message to the chat assistant.

        Failures are logged by the backend and raised as ``ProviderError``.
        """
        backend = self.chat_backend
        logger.debug(f"Sending chat message via {backend.name} backend")
        return backend.send(message, timeout=self._timeout(timeout))

    def _timeout(self, timeout: Optional[float]) -> Optional[float]:
        return self.config.request_timeout if timeout is _DEFAULT else timeout

    def _post(self, url: str, text: str, timeout: Optional[float]) -> requests.Response:
        """POST ``{"text": text}`` as JSON.

        Raises:
            TransportError: If no response was obtained
            ApiError: If the status is not OK
        """
        logger.debug(f"POST {url}")

        try:
            response = self.session.post(
                url,
                json={"text": text},
                headers={"Content-Type": "application/json"},
                timeout=self._timeout(timeout),
            )
        except requests.RequestException as e:
            raise TransportError(f"Request to {url} failed: {e}") from e

        if not response.ok:
            raise ApiError(response.status_code)

        return response

    @staticmethod
    def _decode(response: requests.Response, parse: Callable[[Any], T]) -> T:
        """Decode the JSON body and normalize it with ``parse``."""
        try:
            return parse(response.json())
        except ValueError as e:
            # pydantic.ValidationError and JSON decode errors are both ValueErrors
            detail = (
                f"unexpected response body: {e.error_count()} errors"
                if isinstance(e, ValidationError)
                else "invalid JSON body"
            )
            raise ApiError(response.status_code, detail) from e

"""Chat backends: a placeholder that always fails and an OpenAI-backed one."""

import time
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Optional

import openai

from arganalyzer.config import Config
from arganalyzer.errors import ChatUnavailableError, ProviderError
from arganalyzer.models import ChatResponse
from arganalyzer.utils.logging_config import get_logger

logger = get_logger()

UNAVAILABLE_MESSAGE = "Chat service is currently unavailable. Please try again later."
NO_RESPONSE_MESSAGE = "No response from OpenIA API."


class ChatBackend(ABC):
    """Strategy answering a single chat message."""

    name: str = "base"

    @abstractmethod
    def send(self, message: str, timeout: Optional[float] = None) -> ChatResponse:
        """Send one user message and return the assistant reply.

        Args:
            message: User message
            timeout: Deadline in seconds for the provider call

        Returns:
            ChatResponse stamped with the time the reply was received

        Raises:
            ProviderError: If no reply could be obtained
        """
        pass


class StubChatBackend(ChatBackend):
    """Placeholder backend: waits, then always reports the service as unavailable."""

    name = "stub"

    def __init__(self, delay: float = 1.0):
        self.delay = delay

    def send(self, message: str, timeout: Optional[float] = None) -> ChatResponse:
        time.sleep(self.delay)
        error = ChatUnavailableError(UNAVAILABLE_MESSAGE)
        logger.error(f"Error sending chat message: {error}")
        raise error


class OpenAIChatBackend(ChatBackend):
    """Backend delegating to an OpenAI chat completion."""

    name = "openai"

    def __init__(
        self,
        api_key: Optional[str],
        model: str,
        system_prompt: str,
        client: Optional[Any] = None,
    ):
        """Initialize the backend.

        Args:
            api_key: Provider API key
            model: Model name (e.g., 'gpt-4o-mini')
            system_prompt: Instruction sent ahead of every user message
            client: Preconfigured ``openai.OpenAI`` instance (mainly for testing)

        Raises:
            ProviderError: If neither a client nor an API key is given
        """
        if client is None:
            if not api_key:
                error = ProviderError("OpenAI API key is not configured")
                logger.error(f"Error sending chat message: {error}")
                raise error
            client = openai.OpenAI(api_key=api_key, max_retries=0)

        self.model = model
        self.system_prompt = system_prompt
        self._client = client

    def send(self, message: str, timeout: Optional[float] = None) -> ChatResponse:
        messages = [
            {"role": "system", "content": self.system_prompt},
            {"role": "user", "content": message},
        ]

        kwargs: dict[str, Any] = {"model": self.model, "messages": messages}
        if timeout is not None:
            kwargs["timeout"] = timeout

        logger.debug(f"Requesting chat completion from {self.model}")

        try:
            completion = self._client.chat.completions.create(**kwargs)
        except openai.OpenAIError as e:
            logger.error(f"Error sending chat message: {e}")
            raise ProviderError(f"Chat completion failed: {e}") from e

        try:
            content = completion.choices[0].message.content if completion.choices else None
        except (AttributeError, TypeError) as e:
            logger.error(f"Error sending chat message: malformed completion: {e}")
            raise ProviderError(f"Malformed chat completion: {e}") from e

        return ChatResponse(
            message=content or NO_RESPONSE_MESSAGE,
            timestamp=datetime.now(timezone.utc),
        )


def get_chat_backend(config: Config) -> ChatBackend:
    """Build the chat backend selected by ``config.chat_mode``.

    Raises:
        ValueError: If the chat mode is unknown
        ProviderError: If provider mode lacks an API key
    """
    if config.chat_mode == "stub":
        return StubChatBackend(delay=config.chat_stub_delay)
    if config.chat_mode == "openai":
        return OpenAIChatBackend(
            api_key=config.openai_api_key,
            model=config.openai_model,
            system_prompt=config.chat_system_prompt,
        )
    raise ValueError(f"Unknown chat mode: {config.chat_mode}")

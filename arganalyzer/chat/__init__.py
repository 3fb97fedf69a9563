"""Interchangeable chat backends."""

from arganalyzer.chat.backends import (
    NO_RESPONSE_MESSAGE,
    UNAVAILABLE_MESSAGE,
    ChatBackend,
    OpenAIChatBackend,
    StubChatBackend,
    get_chat_backend,
)

__all__ = [
    "NO_RESPONSE_MESSAGE",
    "UNAVAILABLE_MESSAGE",
    "ChatBackend",
    "OpenAIChatBackend",
    "StubChatBackend",
    "get_chat_backend",
]

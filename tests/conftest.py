"""Pytest configuration and fixtures."""

import json
from types import SimpleNamespace
from typing import Any
from unittest.mock import MagicMock

import pytest
import requests

from arganalyzer.config import Config, reset_config


def make_response(status_code: int = 200, body: Any = None, raw: bytes = None) -> requests.Response:
    """Build a real ``requests.Response`` with the given status and JSON body."""
    response = requests.Response()
    response.status_code = status_code
    response._content = raw if raw is not None else json.dumps(body).encode("utf-8")
    response.headers["Content-Type"] = "application/json"
    return response


def make_completion(content):
    """Build an object shaped like an OpenAI chat completion."""
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=content))]
    )


@pytest.fixture
def test_config(monkeypatch):
    """Create a test configuration isolated from the environment."""
    for var in ("API_URL", "CHAT_MODE", "OPENAI_API_KEY", "OPENAI_MODEL", "REQUEST_TIMEOUT"):
        monkeypatch.delenv(var, raising=False)
    reset_config()

    config = Config(
        _env_file=None,
        api_url="http://analysis.test",
        chat_stub_delay=0,
        request_timeout=5.0,
    )

    yield config

    reset_config()


@pytest.fixture
def mock_session():
    """Mock HTTP session answering every POST with an empty object."""
    session = MagicMock(spec=requests.Session)
    session.post.return_value = make_response(200, {})
    return session


@pytest.fixture
def mock_openai_client():
    """Mock OpenAI client answering every completion with 'hello'."""
    client = MagicMock()
    client.chat.completions.create.return_value = make_completion("hello")
    return client

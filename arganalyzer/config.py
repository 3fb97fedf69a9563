"""Configuration management using Pydantic settings."""

from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SYSTEM_PROMPT = (
    "You are an assistant specialized in argument analysis and critical thinking. "
    "Help the user understand the structure of arguments, assess their validity "
    "and point out logical fallacies. Answer clearly and concisely."
)


class Config(BaseSettings):
    """Client configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Analysis backend
    api_url: str = Field(
        default="https://api.example.com",
        description="Base URL of the argument analysis service",
    )
    request_timeout: Optional[float] = Field(
        default=30.0,
        description="Default per-request deadline in seconds (None waits forever)",
    )

    # Chat
    chat_mode: Literal["stub", "openai"] = Field(
        default="stub",
        description="Chat backend: 'stub' always fails, 'openai' calls the model provider",
    )
    chat_stub_delay: float = Field(
        default=1.0,
        ge=0,
        description="Seconds the stub chat backend waits before failing",
    )
    chat_system_prompt: str = Field(
        default=DEFAULT_SYSTEM_PROMPT,
        description="System instruction sent with every chat message",
    )

    # Model provider
    openai_api_key: Optional[str] = Field(
        default=None,
        description="API key for the model provider",
    )
    openai_model: str = Field(
        default="gpt-4o-mini",
        description="Model used for chat completions",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    log_file: Optional[Path] = Field(
        default=None,
        description="Log file path",
    )
    log_json: bool = Field(
        default=False,
        description="Write the log file as JSON lines",
    )

    @field_validator("api_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")


# Global config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get or create the process-wide default config."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def set_config(config: Config) -> None:
    """Replace the process-wide default config."""
    global _config
    _config = config


def reset_config() -> None:
    """Reset global config (mainly for testing)."""
    global _config
    _config = None

"""Pydantic models for analysis results.

The service speaks camelCase JSON; attributes are snake_case and populated
through aliases, so ``AnalysisResult.model_validate(payload)`` accepts the raw
response body and ``model_dump(by_alias=True)`` reproduces it.
"""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field


class _ResultModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class AnalysisResult(_ResultModel):
    """Structural breakdown of an argument."""

    main_claim: str = Field(alias="mainClaim")
    supporting_arguments: list[str] = Field(alias="supportingArguments")
    structure: str
    strength: str


class ValidationResult(_ResultModel):
    """Verdict on the logical validity of an argument."""

    is_valid: bool = Field(alias="isValid")
    analysis: str
    explanation: str


class Fallacy(_ResultModel):
    """A logical fallacy detected in a text."""

    type: str
    description: str
    # Opaque: may be an offset, a quote or a description depending on the service
    location: str
    explanation: str


class ChatResponse(_ResultModel):
    """Reply from the chat assistant."""

    message: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

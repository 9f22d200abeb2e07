"""Pydantic models for the LLM subsystem."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

# Generation parameters shared by every backend.
TEMPERATURE = 0.1
MAX_OUTPUT_TOKENS = 8192

DEFAULT_MANAGED_MODEL = "gemini-2.5-flash"

ProviderKind = Literal["managed", "openai_compatible"]


class ProviderConfig(BaseModel):
    """Run-time configuration for one conversion call.

    ``base_url`` is only consulted by the OpenAI-compatible backend.
    """

    provider: ProviderKind = "managed"
    api_key: str = ""
    base_url: str = ""
    model: str = ""
    timeout: float = Field(default=120.0, gt=0)


class TokenUsage(BaseModel):
    """Token usage stats from a single LLM call."""

    input_tokens: int
    output_tokens: int


class LLMResponse(BaseModel):
    """Raw text returned by a provider, before sanitizing."""

    content: str
    model: str
    usage: TokenUsage | None = None

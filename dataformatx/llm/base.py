"""Abstract LLM interface for DataFormatX."""

from __future__ import annotations

from abc import ABC, abstractmethod

from dataformatx.llm.models import LLMResponse, ProviderConfig


class LLMProvider(ABC):
    """Provider-agnostic interface for one-shot conversion calls.

    Adapters turn a system instruction and a user prompt into raw model
    text, and raise ``ProviderError`` for any backend or transport failure.
    """

    name: str = "llm"

    def __init__(self, config: ProviderConfig) -> None:
        self.config = config

    @abstractmethod
    async def generate(self, system: str, user: str) -> LLMResponse:
        """Generate a complete response (one-shot)."""
        ...

"""LLM provider abstraction layer."""

from dataformatx.llm.base import LLMProvider
from dataformatx.llm.gemini import GeminiProvider
from dataformatx.llm.models import (
    DEFAULT_MANAGED_MODEL,
    MAX_OUTPUT_TOKENS,
    TEMPERATURE,
    LLMResponse,
    ProviderConfig,
    ProviderKind,
    TokenUsage,
)
from dataformatx.llm.openai_compat import OpenAICompatibleProvider, normalize_base_url

_PROVIDER_MAP: dict[str, type[LLMProvider]] = {
    "managed": GeminiProvider,
    "openai_compatible": OpenAICompatibleProvider,
}


def create_provider(config: ProviderConfig) -> LLMProvider:
    """Instantiate the backend selected by ``config.provider``."""
    cls = _PROVIDER_MAP.get(config.provider)
    if cls is None:
        raise ValueError(
            f"Unsupported LLM provider: {config.provider!r}. "
            f"Supported: {', '.join(_PROVIDER_MAP)}"
        )
    return cls(config)


__all__ = [
    "DEFAULT_MANAGED_MODEL",
    "GeminiProvider",
    "LLMProvider",
    "LLMResponse",
    "MAX_OUTPUT_TOKENS",
    "OpenAICompatibleProvider",
    "ProviderConfig",
    "ProviderKind",
    "TEMPERATURE",
    "TokenUsage",
    "create_provider",
    "normalize_base_url",
]

import os
from typing import Literal

from pydantic import BaseModel, Field

from dataformatx.llm.models import DEFAULT_MANAGED_MODEL, ProviderConfig, ProviderKind


MANAGED_API_KEY_ENV = "GEMINI_API_KEY"


class LLMSettings(BaseModel):
    provider: ProviderKind = "managed"
    model: str = DEFAULT_MANAGED_MODEL
    base_url: str = ""
    api_key: str = ""
    api_key_env: str = MANAGED_API_KEY_ENV
    timeout: float = Field(default=120.0, gt=0)

    def resolve_api_key(self) -> str:
        """Explicit key first, then the env var named by api_key_env."""
        if self.api_key:
            return self.api_key
        if self.api_key_env:
            return os.environ.get(self.api_key_env, "")
        return ""

    def to_provider_config(self) -> ProviderConfig:
        return ProviderConfig(
            provider=self.provider,
            api_key=self.resolve_api_key(),
            base_url=self.base_url,
            model=self.model,
            timeout=self.timeout,
        )


class DataFormatXConfig(BaseModel):
    llm: LLMSettings = Field(default_factory=LLMSettings)
    max_input_chars: int = Field(default=100_000, gt=0)
    log_level: Literal["debug", "info", "warn", "error"] = "info"

"""Google Gemini adapter for DataFormatX (the managed backend)."""

from __future__ import annotations

import logging

import google.generativeai as genai
from google.api_core import exceptions as google_exceptions

from dataformatx.errors import ProviderError
from dataformatx.llm.base import LLMProvider
from dataformatx.llm.models import (
    DEFAULT_MANAGED_MODEL,
    MAX_OUTPUT_TOKENS,
    TEMPERATURE,
    LLMResponse,
    ProviderConfig,
    TokenUsage,
)

logger = logging.getLogger(__name__)


class GeminiProvider(LLMProvider):
    """Gemini adapter using the google-generativeai async SDK."""

    name = "gemini"

    def __init__(self, config: ProviderConfig) -> None:
        super().__init__(config)
        self._api_key = config.api_key
        self._model_name = config.model or DEFAULT_MANAGED_MODEL

    async def generate(self, system: str, user: str) -> LLMResponse:
        # genai keeps one process-wide key; the model binds its client on the
        # first call, so configure right before it with no await in between.
        genai.configure(api_key=self._api_key)
        model = genai.GenerativeModel(self._model_name, system_instruction=system)
        logger.debug("Gemini request: model=%s prompt_chars=%d", self._model_name, len(user))
        try:
            response = await model.generate_content_async(
                user,
                generation_config=genai.types.GenerationConfig(
                    temperature=TEMPERATURE,
                    max_output_tokens=MAX_OUTPUT_TOKENS,
                ),
            )
        except google_exceptions.GoogleAPIError as e:
            logger.warning("Gemini request failed: %s", e)
            raise ProviderError(
                getattr(e, "message", None) or str(e),
                provider=self.name,
                status_code=getattr(e, "code", None),
                retryable=isinstance(e, google_exceptions.ResourceExhausted),
            ) from e

        return LLMResponse(
            content=_response_text(response),
            usage=_usage(response),
            model=self._model_name,
        )


def _response_text(response: object) -> str:
    # .text raises ValueError when the candidate was blocked or empty
    try:
        return getattr(response, "text", None) or ""
    except ValueError:
        return ""


def _usage(response: object) -> TokenUsage | None:
    usage = getattr(response, "usage_metadata", None)
    if usage is None:
        return None
    try:
        return TokenUsage(
            input_tokens=int(usage.prompt_token_count),
            output_tokens=int(usage.candidates_token_count),
        )
    except (AttributeError, TypeError, ValueError):
        return None

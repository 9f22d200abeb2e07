"""Conversion orchestrator: validate, dispatch to an LLM backend, sanitize."""

from __future__ import annotations

import logging
from collections.abc import Callable

from dataformatx.converter.models import ConversionRequest, ConversionResult
from dataformatx.converter.prompts import build_prompt
from dataformatx.converter.sanitizer import sanitize
from dataformatx.errors import ProviderError, ValidationError
from dataformatx.llm import create_provider
from dataformatx.llm.base import LLMProvider
from dataformatx.llm.models import ProviderConfig

logger = logging.getLogger(__name__)

MAX_INPUT_CHARS = 100_000  # roughly 25k tokens

SENTINEL_PREFIX = "ERROR:"

_FALLBACK_MESSAGE = "Failed to convert content. Please check your settings."


class FormatConverter:
    """Turns a ConversionRequest into converted text using the configured LLM.

    Pipeline:
        validate → build_prompt → provider.generate → sanitize → sentinel check

    Every failure surfaces as ``ValidationError`` (before any I/O) or
    ``ProviderError``. Nothing is retried.
    """

    def __init__(
        self,
        max_input_chars: int = MAX_INPUT_CHARS,
        provider_factory: Callable[[ProviderConfig], LLMProvider] = create_provider,
    ) -> None:
        self.max_input_chars = max_input_chars
        self._provider_factory = provider_factory

    def validate_request(self, request: ConversionRequest) -> bool:
        """Check local preconditions. Never suspends.

        Returns False when the content is blank and the call should
        short-circuit to an empty result.
        """
        if not request.content.strip():
            return False

        if len(request.content) > self.max_input_chars:
            raise ValidationError(
                f"Input too large. Limit is {self.max_input_chars:,} characters."
            )

        config = request.config
        if config.provider == "managed" and not config.api_key.strip():
            raise ValidationError("API Key is missing. Please check Settings.")
        return True

    async def convert(self, request: ConversionRequest) -> ConversionResult:
        """Run one conversion to completion.

        Raises:
            ValidationError: oversized input or missing credentials.
            ProviderError: backend failure, or the model answered ``ERROR: ...``.
        """
        logger.debug(
            "Validating %s -> %s (%d chars)",
            request.from_format.value,
            request.to_format.value,
            len(request.content),
        )
        if not self.validate_request(request):
            return ConversionResult(
                content="",
                from_format=request.from_format,
                to_format=request.to_format,
            )

        system, user = build_prompt(request.content, request.from_format, request.to_format)

        try:
            provider = self._provider_factory(request.config)
            logger.debug("Dispatching to %s", provider.name)
            response = await provider.generate(system, user)
        except ProviderError:
            raise
        except Exception as e:
            logger.warning("Conversion error: %s", e, exc_info=True)
            raise ProviderError(
                str(e) or _FALLBACK_MESSAGE,
                provider=request.config.provider,
            ) from e

        logger.debug("Sanitizing %d chars of model output", len(response.content))
        text = sanitize(response.content)

        # Known ambiguity: legitimate output that starts with "ERROR:" is
        # indistinguishable from a refusal.
        if text.startswith(SENTINEL_PREFIX):
            logger.warning("Model refused conversion: %s", text)
            raise ProviderError(text, provider=provider.name, sentinel=True)

        return ConversionResult(
            content=text,
            from_format=request.from_format,
            to_format=request.to_format,
            provider=provider.name,
            model=response.model,
        )

"""OpenAI-compatible chat-completions adapter (OpenAI, OpenRouter, Ollama, LM Studio)."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from dataformatx.errors import ProviderError
from dataformatx.llm.base import LLMProvider
from dataformatx.llm.models import (
    MAX_OUTPUT_TOKENS,
    TEMPERATURE,
    LLMResponse,
    ProviderConfig,
    TokenUsage,
)

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.openai.com/v1"

# Local model servers are often configured without the /v1 suffix.
_LOCAL_MARKERS = ("localhost", "127.0.0.1", "192.168.", ":1234", ":11434")


def normalize_base_url(base_url: str) -> str:
    """Normalize a user-supplied endpoint root.

    Blank falls back to the public OpenAI root, one trailing slash is
    dropped, and local-looking addresses get ``/v1`` appended. Applying
    this twice gives the same result as applying it once, unless the URL
    ends in more than one slash.
    """
    url = base_url.strip()
    if not url:
        url = DEFAULT_BASE_URL

    if url.endswith("/"):
        url = url[:-1]

    if any(marker in url for marker in _LOCAL_MARKERS) and not url.endswith("/v1"):
        url = f"{url}/v1"
    return url


class OpenAICompatibleProvider(LLMProvider):
    """Adapter for any endpoint speaking the chat/completions shape, via httpx."""

    name = "openai_compatible"

    def __init__(self, config: ProviderConfig) -> None:
        super().__init__(config)
        self._base_url = normalize_base_url(config.base_url)

    @property
    def endpoint(self) -> str:
        return f"{self._base_url}/chat/completions"

    async def generate(self, system: str, user: str) -> LLMResponse:
        payload = {
            "model": self.config.model,
            "messages": [
                {"role": "system", "content": system},
                {"role": "user", "content": user},
            ],
            "temperature": TEMPERATURE,
            "max_tokens": MAX_OUTPUT_TOKENS,
        }
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.config.api_key}",
        }
        logger.debug("POST %s model=%s prompt_chars=%d", self.endpoint, self.config.model, len(user))

        try:
            async with httpx.AsyncClient() as client:
                resp = await client.post(
                    self.endpoint,
                    json=payload,
                    headers=headers,
                    timeout=self.config.timeout,
                )
        except httpx.HTTPError as e:
            logger.warning("Request to %s failed: %s", self.endpoint, e)
            raise ProviderError(
                f"Could not reach {self._base_url}: {e}",
                provider=self.name,
                retryable=True,
            ) from e

        if not resp.is_success:
            message = _error_message(resp)
            logger.warning("%s returned %d: %s", self.endpoint, resp.status_code, message)
            raise ProviderError(
                message,
                provider=self.name,
                status_code=resp.status_code,
                retryable=resp.status_code == 429 or resp.status_code >= 500,
            )

        try:
            data = resp.json()
        except ValueError as e:
            raise ProviderError(
                "Invalid JSON in chat/completions response",
                provider=self.name,
                status_code=resp.status_code,
            ) from e

        return LLMResponse(
            content=_first_choice_content(data),
            usage=_usage(data),
            model=(data.get("model") if isinstance(data, dict) else None) or self.config.model,
        )


def _error_message(resp: httpx.Response) -> str:
    """Prefer the backend's ``error.message``, else the status line."""
    try:
        body = resp.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
    return f"API Error: {resp.status_code} {resp.reason_phrase}"


def _first_choice_content(data: Any) -> str:
    if not isinstance(data, dict):
        return ""
    choices = data.get("choices") or []
    if not choices or not isinstance(choices[0], dict):
        return ""
    message = choices[0].get("message")
    if not isinstance(message, dict):
        return ""
    content = message.get("content")
    return content if isinstance(content, str) else ""


def _usage(data: Any) -> TokenUsage | None:
    usage = data.get("usage") if isinstance(data, dict) else None
    if not isinstance(usage, dict):
        return None
    try:
        return TokenUsage(
            input_tokens=usage["prompt_tokens"],
            output_tokens=usage["completion_tokens"],
        )
    except (KeyError, TypeError, ValueError):
        return None

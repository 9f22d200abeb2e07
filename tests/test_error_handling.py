"""Error handling tests: hierarchy, attributes, and propagation through the pipeline."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest
from google.api_core import exceptions as google_exceptions

from dataformatx.converter import ConversionRequest, FormatConverter
from dataformatx.errors import ConversionError, ProviderError, ValidationError
from dataformatx.llm.gemini import GeminiProvider
from dataformatx.llm.models import ProviderConfig


# ========================================================================
# Exception types
# ========================================================================


def test_provider_error_defaults():
    """ProviderError carries optional context, all off by default."""
    err = ProviderError("boom")
    assert str(err) == "boom"
    assert err.provider is None
    assert err.status_code is None
    assert not err.retryable
    assert not err.sentinel


def test_provider_error_keyword_only_context():
    """Context arguments cannot be passed positionally."""
    with pytest.raises(TypeError):
        ProviderError("boom", "gemini")  # type: ignore[misc]


def test_one_except_clause_catches_everything():
    """Callers can handle every failure via ConversionError."""
    for exc in (ValidationError("too big"), ProviderError("down")):
        try:
            raise exc
        except ConversionError as caught:
            assert caught is exc


# ========================================================================
# Propagation through FormatConverter
# ========================================================================


@pytest.mark.asyncio
async def test_validation_happens_before_provider_construction():
    """A missing managed key never reaches the SDK."""
    with patch("dataformatx.llm.gemini.genai") as mock_genai:
        request = ConversionRequest(
            content="a,b", from_format="csv", to_format="json",
            config=ProviderConfig(provider="managed", api_key=""),
        )
        with pytest.raises(ValidationError):
            await FormatConverter().convert(request)
        mock_genai.configure.assert_not_called()
        mock_genai.GenerativeModel.assert_not_called()


@pytest.mark.asyncio
async def test_gemini_error_keeps_cause_chain():
    """The SDK exception stays reachable through __cause__."""
    with patch("dataformatx.llm.gemini.genai") as mock_genai:
        mock_model = MagicMock()
        mock_model.generate_content_async = AsyncMock(
            side_effect=google_exceptions.ServiceUnavailable("overloaded")
        )
        mock_genai.GenerativeModel.return_value = mock_model
        request = ConversionRequest(
            content="a,b", from_format="csv", to_format="json",
            config=ProviderConfig(provider="managed", api_key="k"),
        )

        with pytest.raises(ProviderError, match="overloaded") as exc_info:
            await FormatConverter().convert(request)

    assert exc_info.value.provider == GeminiProvider.name
    assert isinstance(exc_info.value.__cause__, google_exceptions.ServiceUnavailable)


@pytest.mark.asyncio
async def test_timeout_becomes_provider_error(mock_http_client):
    """httpx timeouts are transport failures, surfaced as ProviderError."""
    mock_http_client.post.side_effect = httpx.ReadTimeout("timed out")
    request = ConversionRequest(
        content="a,b", from_format="csv", to_format="json",
        config=ProviderConfig(provider="openai_compatible", base_url="http://127.0.0.1:8000", timeout=1),
    )
    with patch("dataformatx.llm.openai_compat.httpx.AsyncClient", return_value=mock_http_client):
        with pytest.raises(ProviderError, match="Could not reach http://127.0.0.1:8000/v1") as exc_info:
            await FormatConverter().convert(request)

    assert exc_info.value.retryable
    assert mock_http_client.post.call_args.kwargs["timeout"] == 1

"""Shared test fixtures for DataFormatX."""

import httpx
import pytest
from unittest.mock import AsyncMock, MagicMock

from dataformatx.config.models import DataFormatXConfig
from dataformatx.converter.models import ConversionRequest
from dataformatx.formats import FormatId
from dataformatx.llm.base import LLMProvider
from dataformatx.llm.models import LLMResponse, ProviderConfig, TokenUsage


@pytest.fixture
def managed_config():
    return ProviderConfig(provider="managed", api_key="gem-key", model="gemini-2.5-flash")


@pytest.fixture
def openai_config():
    return ProviderConfig(provider="openai_compatible", api_key="k", model="gpt-4o")


@pytest.fixture
def csv_to_json_request(openai_config):
    return ConversionRequest(
        content="id,name\n1,Alice",
        from_format=FormatId.CSV,
        to_format=FormatId.JSON,
        config=openai_config,
    )


@pytest.fixture
def mock_llm_provider():
    provider = MagicMock(spec=LLMProvider)
    provider.name = "openai_compatible"
    provider.config = ProviderConfig(provider="openai_compatible", model="test-model")
    provider.generate = AsyncMock(
        return_value=LLMResponse(
            content='[{"id":1,"name":"Alice"}]',
            usage=TokenUsage(input_tokens=100, output_tokens=20),
            model="test-model",
        )
    )
    return provider


@pytest.fixture
def provider_factory(mock_llm_provider):
    """Stands in for create_provider; records the config it was given."""
    return MagicMock(return_value=mock_llm_provider)


@pytest.fixture
def sample_config():
    return DataFormatXConfig()


@pytest.fixture
def http_response():
    """Factory for real httpx.Response objects bound to a POST request."""

    def _make(status_code, json_body=None, text="", url="https://api.openai.com/v1/chat/completions"):
        request = httpx.Request("POST", url)
        if json_body is not None:
            return httpx.Response(status_code, json=json_body, request=request)
        return httpx.Response(status_code, text=text, request=request)

    return _make


@pytest.fixture
def mock_http_client():
    """An AsyncMock httpx.AsyncClient usable as an async context manager."""
    client = AsyncMock()
    client.__aenter__ = AsyncMock(return_value=client)
    client.__aexit__ = AsyncMock(return_value=False)
    return client

"""DataFormatX - LLM-backed conversion between data, document, and code formats."""

from dataformatx.config import DataFormatXConfig, load_config
from dataformatx.converter import ConversionRequest, ConversionResult, FormatConverter
from dataformatx.errors import ConversionError, ProviderError, ValidationError
from dataformatx.formats import FormatDescriptor, FormatId, find_format, list_formats
from dataformatx.llm import LLMProvider, ProviderConfig, create_provider

__version__ = "0.1.0"

__all__ = [
    "ConversionError",
    "ConversionRequest",
    "ConversionResult",
    "DataFormatXConfig",
    "FormatConverter",
    "FormatDescriptor",
    "FormatId",
    "LLMProvider",
    "ProviderConfig",
    "ProviderError",
    "ValidationError",
    "create_provider",
    "find_format",
    "list_formats",
    "load_config",
]

"""Format catalog: descriptors, samples, and lookup."""

from dataformatx.formats.models import FormatDescriptor, FormatId
from dataformatx.formats.registry import (
    SAMPLE_DATA,
    SUPPORTED_FORMATS,
    find_by_extension,
    find_format,
    list_formats,
)

__all__ = [
    "FormatDescriptor",
    "FormatId",
    "SAMPLE_DATA",
    "SUPPORTED_FORMATS",
    "find_by_extension",
    "find_format",
    "list_formats",
]

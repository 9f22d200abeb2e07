"""Conversion subsystem: prompt building, LLM dispatch, output cleanup."""

from dataformatx.converter.converter import MAX_INPUT_CHARS, SENTINEL_PREFIX, FormatConverter
from dataformatx.converter.models import ConversionRequest, ConversionResult
from dataformatx.converter.prompts import SYSTEM_INSTRUCTION, build_prompt
from dataformatx.converter.sanitizer import sanitize

__all__ = [
    "ConversionRequest",
    "ConversionResult",
    "FormatConverter",
    "MAX_INPUT_CHARS",
    "SENTINEL_PREFIX",
    "SYSTEM_INSTRUCTION",
    "build_prompt",
    "sanitize",
]

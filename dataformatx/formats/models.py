"""Pydantic models for the format catalog."""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict


class FormatId(str, Enum):
    """Canonical format names, as they appear in conversion prompts."""

    JSON = "JSON"
    CSV = "CSV"
    XML = "XML"
    YAML = "YAML"
    SQL = "SQL"
    MARKDOWN = "Markdown"
    HTML = "HTML"
    TEXT = "Plain Text"
    LATEX = "LaTeX"
    PYTHON = "Python"
    JAVASCRIPT = "JavaScript"
    TYPESCRIPT = "TypeScript"


class FormatDescriptor(BaseModel):
    """One supported content format."""

    model_config = ConfigDict(frozen=True)

    value: FormatId
    label: str
    category: Literal["Data", "Document", "Code"]  # grouping only
    extension: str  # without the leading dot
    mime_type: str

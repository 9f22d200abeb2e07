"""Pydantic models for the conversion subsystem."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from dataformatx.formats import FormatId, find_format
from dataformatx.llm.models import ProviderConfig


class ConversionRequest(BaseModel):
    """One conversion call. Not persisted."""

    content: str
    from_format: FormatId
    to_format: FormatId
    config: ProviderConfig = Field(default_factory=ProviderConfig)

    @field_validator("from_format", "to_format", mode="before")
    @classmethod
    def _resolve_format(cls, v: object) -> object:
        # Accept "json", "Plain Text", "text" and the like.
        if isinstance(v, str) and not isinstance(v, FormatId):
            desc = find_format(v)
            if desc is not None:
                return desc.value
        return v


class ConversionResult(BaseModel):
    """Successful outcome of a conversion."""

    content: str
    from_format: FormatId
    to_format: FormatId
    provider: str | None = None  # None when no backend was called
    model: str | None = None

"""Exception hierarchy for the conversion pipeline."""

from __future__ import annotations


class ConversionError(Exception):
    """Base class for every failure a conversion can surface.

    ``str(exc)`` is always the user-facing message.
    """


class ValidationError(ConversionError):
    """The request was rejected locally before any network I/O."""


class ProviderError(ConversionError):
    """The LLM backend failed, or refused the conversion.

    ``sentinel`` is True when the model itself answered with an
    ``ERROR: ...`` string rather than converted content.
    """

    def __init__(
        self,
        message: str,
        *,
        provider: str | None = None,
        status_code: int | None = None,
        retryable: bool = False,
        sentinel: bool = False,
    ) -> None:
        super().__init__(message)
        self.provider = provider
        self.status_code = status_code
        self.retryable = retryable
        self.sentinel = sentinel

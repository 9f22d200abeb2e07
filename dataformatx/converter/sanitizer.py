"""Cleanup of raw model output."""

from __future__ import annotations

FENCE = "```"


def sanitize(raw: str) -> str:
    """Strip one wrapping code fence and surrounding whitespace.

    Models sometimes wrap output in ```lang ... ``` despite instructions.
    Only the opening line and a bare closing fence on the last line are
    removed; interior fences are left alone.
    """
    text = raw.strip()
    if text.startswith(FENCE):
        lines = text.split("\n")
        lines.pop(0)
        if lines and lines[-1].strip() == FENCE:
            lines.pop()
        text = "\n".join(lines)
    return text.strip()

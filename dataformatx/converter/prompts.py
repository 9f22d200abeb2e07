"""Prompt templates for format conversion."""

from __future__ import annotations

from dataformatx.formats import FormatId, find_format

SYSTEM_INSTRUCTION = """\
You are a highly precise, deterministic file conversion engine.
Your goal is to convert input data from one format to another strictly.
Do not add conversational filler, explanations, or markdown code blocks (unless the target format IS markdown).
Return ONLY the raw converted content.
If the input is malformed but repairable, repair it and convert.
If the input is completely unrecognizable or incompatible with the target format, return "ERROR: [Reason]".
"""

USER_PROMPT_TEMPLATE = """\
Source Format: {source}
Target Format: {target}

Input Content:
{content}

Convert the input content to the target format.
"""


def format_name(fmt: FormatId | str) -> str:
    """Canonical label for a format, or the input unchanged if unknown."""
    desc = find_format(fmt)
    if desc is not None:
        return desc.label
    return fmt.value if isinstance(fmt, FormatId) else fmt


def build_prompt(
    content: str, from_format: FormatId | str, to_format: FormatId | str
) -> tuple[str, str]:
    """Return ``(system_instruction, user_prompt)`` for one conversion.

    The content is inserted verbatim. The result depends only on the
    three arguments.
    """
    user = USER_PROMPT_TEMPLATE.format(
        source=format_name(from_format),
        target=format_name(to_format),
        content=content,
    )
    return SYSTEM_INSTRUCTION, user

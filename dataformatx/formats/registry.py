"""Static catalog of supported formats, with lookup helpers."""

from __future__ import annotations

from dataformatx.formats.models import FormatDescriptor, FormatId

SUPPORTED_FORMATS: tuple[FormatDescriptor, ...] = (
    # Data
    FormatDescriptor(value=FormatId.JSON, label="JSON", category="Data", extension="json", mime_type="application/json"),
    FormatDescriptor(value=FormatId.CSV, label="CSV", category="Data", extension="csv", mime_type="text/csv"),
    FormatDescriptor(value=FormatId.XML, label="XML", category="Data", extension="xml", mime_type="application/xml"),
    FormatDescriptor(value=FormatId.YAML, label="YAML", category="Data", extension="yaml", mime_type="text/yaml"),
    FormatDescriptor(value=FormatId.SQL, label="SQL", category="Data", extension="sql", mime_type="application/sql"),
    # Document
    FormatDescriptor(value=FormatId.MARKDOWN, label="Markdown", category="Document", extension="md", mime_type="text/markdown"),
    FormatDescriptor(value=FormatId.HTML, label="HTML", category="Document", extension="html", mime_type="text/html"),
    FormatDescriptor(value=FormatId.TEXT, label="Plain Text", category="Document", extension="txt", mime_type="text/plain"),
    FormatDescriptor(value=FormatId.LATEX, label="LaTeX", category="Document", extension="tex", mime_type="application/x-tex"),
    # Code
    FormatDescriptor(value=FormatId.PYTHON, label="Python", category="Code", extension="py", mime_type="text/x-python"),
    FormatDescriptor(value=FormatId.JAVASCRIPT, label="JavaScript", category="Code", extension="js", mime_type="text/javascript"),
    FormatDescriptor(value=FormatId.TYPESCRIPT, label="TypeScript", category="Code", extension="ts", mime_type="text/typescript"),
)

# Extra file extensions that map onto a catalog entry.
_EXTENSION_ALIASES: dict[str, FormatId] = {
    "yml": FormatId.YAML,
    "htm": FormatId.HTML,
    "markdown": FormatId.MARKDOWN,
    "text": FormatId.TEXT,
    "mjs": FormatId.JAVASCRIPT,
}

SAMPLE_DATA: dict[FormatId, str] = {
    FormatId.JSON: """\
[
  { "id": 1, "name": "Alice", "role": "Engineer" },
  { "id": 2, "name": "Bob", "role": "Designer" }
]""",
    FormatId.MARKDOWN: """\
# Project Title

## Introduction
This is a sample markdown file.

- Item 1
- Item 2""",
    FormatId.CSV: """\
id,name,role
1,Alice,Engineer
2,Bob,Designer""",
}

_BY_ID: dict[FormatId, FormatDescriptor] = {d.value: d for d in SUPPORTED_FORMATS}


def list_formats() -> list[FormatDescriptor]:
    """Return every descriptor in declared order (Data, Document, Code)."""
    return list(SUPPORTED_FORMATS)


def find_format(value: FormatId | str) -> FormatDescriptor | None:
    """Look up a descriptor by id, canonical name, label, or enum member name.

    String matching is case-insensitive, so ``"json"``, ``"Plain Text"`` and
    ``"text"`` all resolve.
    """
    if isinstance(value, FormatId):
        return _BY_ID.get(value)

    needle = value.strip().lower()
    if not needle:
        return None
    for fmt_id, desc in _BY_ID.items():
        if needle in (fmt_id.value.lower(), fmt_id.name.lower(), desc.label.lower()):
            return desc
    return None


def find_by_extension(extension: str) -> FormatDescriptor | None:
    """Map a file extension (with or without the dot) to a descriptor."""
    ext = extension.strip().lower().lstrip(".")
    if not ext:
        return None
    for desc in SUPPORTED_FORMATS:
        if desc.extension == ext:
            return desc
    alias = _EXTENSION_ALIASES.get(ext)
    return _BY_ID.get(alias) if alias is not None else None

"""Tests for prompt building and response sanitizing."""

from dataformatx.converter.prompts import SYSTEM_INSTRUCTION, build_prompt, format_name
from dataformatx.converter.sanitizer import sanitize
from dataformatx.formats import FormatId


# ---------------------------------------------------------------------------
# build_prompt
# ---------------------------------------------------------------------------


class TestBuildPrompt:
    def test_system_instruction_is_fixed(self):
        system, _ = build_prompt("a", FormatId.CSV, FormatId.JSON)
        assert system == SYSTEM_INSTRUCTION
        assert "deterministic file conversion engine" in system
        assert '"ERROR: [Reason]"' in system
        assert "unless the target format IS markdown" in system

    def test_user_prompt_order(self):
        _, user = build_prompt("id,name\n1,Alice", FormatId.CSV, FormatId.JSON)
        src = user.index("Source Format: CSV")
        tgt = user.index("Target Format: JSON")
        body = user.index("id,name\n1,Alice")
        assert src < tgt < body
        assert user.rstrip().endswith("Convert the input content to the target format.")

    def test_content_inserted_verbatim(self):
        content = '{"a": "{b}"}\n<tag attr="x">&amp;</tag>\n```'
        _, user = build_prompt(content, FormatId.JSON, FormatId.XML)
        assert content in user

    def test_uses_canonical_labels(self):
        _, user = build_prompt("x", FormatId.TEXT, FormatId.LATEX)
        assert "Source Format: Plain Text" in user
        assert "Target Format: LaTeX" in user

    def test_accepts_strings(self):
        _, user = build_prompt("x", "markdown", "html")
        assert "Source Format: Markdown" in user
        assert "Target Format: HTML" in user

    def test_is_pure(self):
        assert build_prompt("x", FormatId.CSV, FormatId.YAML) == build_prompt(
            "x", FormatId.CSV, FormatId.YAML
        )


def test_format_name_passes_unknown_through():
    assert format_name("Docx Content") == "Docx Content"


# ---------------------------------------------------------------------------
# sanitize
# ---------------------------------------------------------------------------


class TestSanitize:
    def test_strips_json_fence(self):
        assert sanitize('```json\n{"a":1}\n```') == '{"a":1}'

    def test_strips_bare_fence(self):
        assert sanitize("```\na,b\n1,2\n```") == "a,b\n1,2"

    def test_no_fence_is_trimmed_only(self):
        assert sanitize("  id: 1\nname: Alice \n\n") == "id: 1\nname: Alice"

    def test_unfenced_text_unchanged(self):
        text = "# Title\n\nBody"
        assert sanitize(text) == text

    def test_leading_whitespace_before_fence(self):
        assert sanitize('\n\n  ```json\n{"a":1}\n```\n') == '{"a":1}'

    def test_missing_closing_fence_keeps_body(self):
        assert sanitize("```yaml\nid: 1\nname: Alice") == "id: 1\nname: Alice"

    def test_interior_fences_untouched(self):
        raw = "```markdown\n# Doc\n\n```python\nprint(1)\n```\n\nEnd\n```"
        assert sanitize(raw) == "# Doc\n\n```python\nprint(1)\n```\n\nEnd"

    def test_fence_inside_text_not_at_start(self):
        raw = "Intro\n```\ncode\n```"
        assert sanitize(raw) == raw

    def test_only_a_fence(self):
        assert sanitize("```") == ""

    def test_empty(self):
        assert sanitize("") == ""
        assert sanitize("   \n ") == ""

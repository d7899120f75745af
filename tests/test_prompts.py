import pytest
from review_assistant.models.config import OutputFormat
from review_assistant.review.prompts import build_review_prompt


def test_build_prompt_includes_language_and_diff():
    prompt = build_review_prompt(language="Python", diff="+ print('world')")

    assert "<language>\nPython\n</language>" in prompt
    assert "<git_diff>\n+ print('world')\n</git_diff>" in prompt


def test_build_prompt_asks_for_ratings_and_flags():
    prompt = build_review_prompt(language="Python", diff="+x = 1")

    assert "scale of 1 to 3 stars" in prompt
    assert "Flag any major bugs" in prompt
    for aspect in ("Code quality", "Maintainability", "Readability", "Performance", "Security"):
        assert aspect in prompt


def test_structured_prompt_has_section_markers():
    prompt = build_review_prompt("Python", "+x = 1", OutputFormat.STRUCTURED)

    assert "<code_review_process>" in prompt
    assert "## Key Issues" in prompt
    assert "## Minor Improvements" in prompt
    assert "## Ratings" in prompt
    assert "## Major Flags" in prompt


def test_freeform_prompt_has_no_section_markers():
    prompt = build_review_prompt("Python", "+x = 1", OutputFormat.FREEFORM)

    assert "<code_review_process>" not in prompt
    assert "## Key Issues" not in prompt
    assert "GitHub Markdown" in prompt


def test_build_prompt_keeps_braces_verbatim():
    diff = "+const x = {a: 1};\n+const s = `${x}`;"
    prompt = build_review_prompt(language="JavaScript", diff=diff)

    assert diff in prompt


def test_build_prompt_is_deterministic():
    assert build_review_prompt("Rust", "+fn main() {}") == build_review_prompt("Rust", "+fn main() {}")


def test_build_prompt_accepts_format_string():
    assert build_review_prompt("Go", "+x", "freeform") == build_review_prompt("Go", "+x", OutputFormat.FREEFORM)

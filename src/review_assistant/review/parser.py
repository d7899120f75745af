# src/review_assistant/review/parser.py
import logging
from unidiff import PatchSet, UnidiffParseError
from review_assistant.models.review import DiffHunk


logger = logging.getLogger(__name__)


def _with_file_headers(patch: str, filename: str | None) -> str:
    """GitHub file patches start at the first hunk; unidiff needs file headers."""
    if not patch.lstrip().startswith("@@"):
        return patch
    name = filename or "file"
    return f"--- a/{name}\n+++ b/{name}\n{patch.lstrip()}"


def split_hunks(patch: str | None, filename: str | None = None) -> list[DiffHunk]:
    """Split a single-file unified diff into its hunks, in patch order."""
    if not patch or not patch.strip():
        return []

    text = _with_file_headers(patch, filename)
    if not text.endswith("\n"):
        text += "\n"

    try:
        patch_set = PatchSet(text)
    except UnidiffParseError as e:
        logger.warning(f"Could not parse patch for {filename or '<unknown>'}: {e}")
        return []

    if len(patch_set) == 0:
        return []

    hunks = []
    for hunk in patch_set[0]:
        hunks.append(DiffHunk(
            source_start=hunk.source_start,
            source_length=hunk.source_length,
            target_start=hunk.target_start,
            target_length=hunk.target_length,
            section_header=hunk.section_header,
            content=str(hunk),
            added_lines=[
                line.target_line_no
                for line in hunk
                if line.is_added and line.target_line_no is not None
            ],
        ))

    return hunks

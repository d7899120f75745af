from dataclasses import dataclass, field
from pydantic import BaseModel, ConfigDict


class PullRequestFile(BaseModel):
    model_config = ConfigDict(frozen=True)

    filename: str
    patch: str | None = None


@dataclass
class DiffHunk:
    """One contiguous change region of a patch."""
    source_start: int
    source_length: int
    target_start: int
    target_length: int
    section_header: str
    content: str
    added_lines: list[int] = field(default_factory=list)


class ReviewRequest(BaseModel):
    language: str
    diff: str


class ReviewResult(BaseModel):
    text: str

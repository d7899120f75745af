from .config import OutputFormat
from .review import DiffHunk, PullRequestFile, ReviewRequest, ReviewResult

__all__ = [
    "OutputFormat",
    "DiffHunk",
    "PullRequestFile",
    "ReviewRequest",
    "ReviewResult",
]

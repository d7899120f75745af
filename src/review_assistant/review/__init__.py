from .parser import split_hunks
from .prompts import build_review_prompt
from .engine import ReviewEngine

__all__ = ["split_hunks", "build_review_prompt", "ReviewEngine"]

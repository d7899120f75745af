# src/review_assistant/providers/base.py
from abc import ABC, abstractmethod
from review_assistant.models.review import ReviewResult


class LLMProvider(ABC):
    @abstractmethod
    async def review(self, prompt: str) -> ReviewResult:
        """Send prompt to the chat model and return its review."""
        pass

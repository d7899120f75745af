# src/review_assistant/providers/openai_chat.py
import logging
from openai import AsyncOpenAI
from .base import LLMProvider
from review_assistant.models.review import ReviewResult


logger = logging.getLogger(__name__)


class OpenAIProvider(LLMProvider):
    DEFAULT_MODEL = "gpt-4o-mini"

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        base_url: str | None = None,
        temperature: float = 0.2,
        client: AsyncOpenAI | None = None,
    ):
        self.model = model
        self.temperature = temperature
        self.client = client or AsyncOpenAI(api_key=api_key, base_url=base_url)

    async def review(self, prompt: str) -> ReviewResult:
        response = await self.client.chat.completions.create(
            model=self.model,
            messages=[{"role": "user", "content": prompt}],
            temperature=self.temperature,
        )

        text = response.choices[0].message.content or ""
        logger.info(f"{self.model} response length: {len(text)} chars")

        if not text.strip():
            raise ValueError(f"{self.model} returned empty response")

        return ReviewResult(text=text)

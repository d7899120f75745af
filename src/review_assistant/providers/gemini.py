# src/review_assistant/providers/gemini.py
import httpx
from .base import LLMProvider
from review_assistant.models.review import ReviewResult


class GeminiProvider(LLMProvider):
    API_URL = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"
    DEFAULT_MODEL = "gemini-2.5-flash"

    def __init__(self, api_key: str, model: str = DEFAULT_MODEL, temperature: float = 0.2):
        self.api_key = api_key
        self.model = model
        self.temperature = temperature

    async def review(self, prompt: str) -> ReviewResult:
        async with httpx.AsyncClient() as client:
            response = await client.post(
                f"{self.API_URL.format(model=self.model)}?key={self.api_key}",
                json={
                    "contents": [{
                        "parts": [{"text": prompt}]
                    }],
                    "generationConfig": {"temperature": self.temperature},
                },
                timeout=60.0
            )
            response.raise_for_status()

        data = response.json()
        text = data["candidates"][0]["content"]["parts"][0]["text"]

        if not text.strip():
            raise ValueError(f"Gemini returned empty response: {data}")

        return ReviewResult(text=text)

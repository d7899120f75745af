# src/review_assistant/providers/yandex.py
from openai import AsyncOpenAI
from .openai_chat import OpenAIProvider


class YandexProvider(OpenAIProvider):
    BASE_URL = "https://llm.api.cloud.yandex.net/v1"

    def __init__(self, api_key: str, folder_id: str, temperature: float = 0.5):
        self.folder_id = folder_id
        super().__init__(
            api_key=api_key,
            model=f"gpt://{folder_id}/yandexgpt/latest",
            temperature=temperature,
            client=AsyncOpenAI(
                api_key=api_key,
                base_url=self.BASE_URL,
                default_headers={"x-folder-id": folder_id},
            ),
        )

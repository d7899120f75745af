# src/review_assistant/providers/__init__.py
from .base import LLMProvider
from .openai_chat import OpenAIProvider
from .gemini import GeminiProvider
from .yandex import YandexProvider

__all__ = ["LLMProvider", "OpenAIProvider", "GeminiProvider", "YandexProvider"]

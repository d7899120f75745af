# src/review_assistant/main.py
import logging
from contextlib import asynccontextmanager
from functools import lru_cache
from fastapi import FastAPI
from pydantic import BaseModel

from review_assistant.config import Settings
from review_assistant.errors import ReviewAssistantError
from review_assistant.language import ExtensionLanguageDetector
from review_assistant.models.review import PullRequestFile
from review_assistant.providers.base import LLMProvider
from review_assistant.providers.gemini import GeminiProvider
from review_assistant.providers.openai_chat import OpenAIProvider
from review_assistant.providers.yandex import YandexProvider
from review_assistant.retry import RetryPolicy
from review_assistant.review.engine import ReviewEngine


logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@lru_cache
def get_settings() -> Settings:
    return Settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.getLogger().setLevel(get_settings().log_level.upper())
    logger.info("Review Assistant starting...")
    yield
    logger.info("Review Assistant shutting down...")


app = FastAPI(title="Review Assistant", lifespan=lifespan)


class ReviewFileRequest(BaseModel):
    filename: str
    patch: str | None = None
    by_hunks: bool = False


class ReviewResponse(BaseModel):
    status: str
    filename: str | None = None
    reviews: list[str] = []
    error: str | None = None


def get_provider(settings: Settings) -> LLMProvider | None:
    """Get LLM provider based on settings."""
    if settings.default_provider == "openai" and settings.openai_api_key:
        return OpenAIProvider(
            api_key=settings.openai_api_key,
            model=settings.openai_model,
            base_url=settings.openai_base_url,
            temperature=settings.temperature,
        )
    elif settings.default_provider == "gemini" and settings.gemini_api_key:
        return GeminiProvider(
            api_key=settings.gemini_api_key,
            model=settings.gemini_model,
            temperature=settings.temperature,
        )
    elif settings.default_provider == "yandex" and settings.yandex_api_key:
        return YandexProvider(
            api_key=settings.yandex_api_key,
            folder_id=settings.yandex_folder_id or "",
            temperature=settings.temperature,
        )
    return None


def build_engine(settings: Settings, provider: LLMProvider) -> ReviewEngine:
    return ReviewEngine(
        provider=provider,
        detector=ExtensionLanguageDetector(),
        retry_policy=RetryPolicy(
            max_attempts=settings.review_max_attempts,
            base_delay=settings.review_base_delay,
            max_delay=settings.review_max_delay,
        ),
        output_format=settings.review_output_format,
    )


@app.get("/health")
async def health():
    return {"status": "ok", "version": "0.1.0"}


@app.post("/api/review", response_model=ReviewResponse)
async def review(request: ReviewFileRequest):
    """Review a single pull request file, whole or hunk by hunk."""
    settings = get_settings()

    provider = get_provider(settings)
    if not provider:
        return ReviewResponse(status="error", error="No LLM provider configured")

    engine = build_engine(settings, provider)
    file = PullRequestFile(filename=request.filename, patch=request.patch)

    try:
        if request.by_hunks:
            results = await engine.review_file_by_hunks(file)
        else:
            results = [await engine.review_file(file)]
    except ReviewAssistantError as e:
        logger.warning(f"Review failed for {request.filename}: {e}")
        return ReviewResponse(status="error", filename=request.filename, error=str(e))

    return ReviewResponse(
        status="completed",
        filename=request.filename,
        reviews=[result.text for result in results],
    )

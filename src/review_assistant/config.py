# src/review_assistant/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from review_assistant.models.config import OutputFormat


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env")

    # LLM Providers
    openai_api_key: str | None = None
    openai_base_url: str | None = None
    openai_model: str = "gpt-4o-mini"
    gemini_api_key: str | None = None
    gemini_model: str = "gemini-2.5-flash"
    yandex_api_key: str | None = None
    yandex_folder_id: str | None = None
    temperature: float = 0.2

    # Retry
    review_max_attempts: int = 3
    review_base_delay: float = 1.0
    review_max_delay: float = 30.0

    # Defaults
    default_provider: str = "openai"
    review_output_format: OutputFormat = OutputFormat.STRUCTURED
    log_level: str = "INFO"

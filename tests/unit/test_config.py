# tests/test_config.py
import os
import pytest
from review_assistant.models.config import OutputFormat


def test_settings_loads_from_env(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "test-openai-key")
    monkeypatch.setenv("DEFAULT_PROVIDER", "gemini")
    monkeypatch.setenv("GEMINI_API_KEY", "test-gemini-key")
    monkeypatch.setenv("REVIEW_MAX_ATTEMPTS", "5")
    monkeypatch.setenv("REVIEW_OUTPUT_FORMAT", "freeform")

    from review_assistant.config import Settings
    settings = Settings()

    assert settings.openai_api_key == "test-openai-key"
    assert settings.default_provider == "gemini"
    assert settings.gemini_api_key == "test-gemini-key"
    assert settings.review_max_attempts == 5
    assert settings.review_output_format == OutputFormat.FREEFORM


def test_settings_defaults():
    from review_assistant.config import Settings
    settings = Settings(_env_file=None)

    assert settings.default_provider == "openai"
    assert settings.review_max_attempts == 3
    assert settings.review_output_format == OutputFormat.STRUCTURED
    assert settings.log_level == "INFO"

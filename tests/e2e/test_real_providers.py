# tests/e2e/test_real_providers.py
"""
End-to-end tests for LLM providers with real API calls.

These tests require valid API credentials set in environment variables:
- OPENAI_API_KEY: OpenAI API key
- GEMINI_API_KEY: Google Gemini API key

Run with: pytest tests/e2e/ -m e2e -v
"""
import os
import pytest
from review_assistant.language import ExtensionLanguageDetector
from review_assistant.models.review import PullRequestFile
from review_assistant.providers.gemini import GeminiProvider
from review_assistant.providers.openai_chat import OpenAIProvider
from review_assistant.review.engine import ReviewEngine
from review_assistant.review.prompts import build_review_prompt


SIMPLE_PATCH = """@@ -0,0 +1,2 @@
+def add(a, b):
+    return a + b
"""


@pytest.mark.e2e
@pytest.mark.asyncio
async def test_openai_real_review():
    """Test OpenAI provider through the engine with a real API call."""
    api_key = os.environ.get("OPENAI_API_KEY")
    if not api_key:
        pytest.skip("OPENAI_API_KEY not set")

    engine = ReviewEngine(
        provider=OpenAIProvider(api_key=api_key),
        detector=ExtensionLanguageDetector(),
    )
    result = await engine.review_file(PullRequestFile(filename="math.py", patch=SIMPLE_PATCH))

    assert result.text.strip()
    print(f"\nOpenAI review:\n{result.text}")


@pytest.mark.e2e
@pytest.mark.asyncio
async def test_gemini_real_review():
    """Test Gemini provider with real API call."""
    api_key = os.environ.get("GEMINI_API_KEY")
    if not api_key:
        pytest.skip("GEMINI_API_KEY not set")

    provider = GeminiProvider(api_key=api_key)
    result = await provider.review(build_review_prompt("Python", SIMPLE_PATCH))

    assert result.text.strip()
    print(f"\nGemini review:\n{result.text}")

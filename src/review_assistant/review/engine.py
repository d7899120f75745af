# src/review_assistant/review/engine.py
import asyncio
import logging
from review_assistant.language import LanguageDetector
from review_assistant.models.config import OutputFormat
from review_assistant.models.review import PullRequestFile, ReviewRequest, ReviewResult
from review_assistant.providers.base import LLMProvider
from review_assistant.retry import RetryPolicy
from .parser import split_hunks
from .prompts import build_review_prompt


logger = logging.getLogger(__name__)


class ReviewEngine:
    def __init__(
        self,
        provider: LLMProvider,
        detector: LanguageDetector,
        retry_policy: RetryPolicy | None = None,
        output_format: OutputFormat = OutputFormat.STRUCTURED,
    ):
        self.provider = provider
        self.detector = detector
        self.retry_policy = retry_policy or RetryPolicy()
        self.output_format = output_format

    async def review_file(self, file: PullRequestFile) -> ReviewResult:
        """Review the whole patch of a file with a single model call."""
        language = await self.detector.detect_language(file.filename)
        logger.info(f"Reviewing {file.filename} as {language}")
        return await self._review_diff(language, file.patch or "")

    async def review_file_by_hunks(self, file: PullRequestFile) -> list[ReviewResult]:
        """Review every hunk of a file's patch independently, in patch order."""
        language, hunks = await asyncio.gather(
            self.detector.detect_language(file.filename),
            asyncio.to_thread(split_hunks, file.patch, file.filename),
        )

        if not hunks:
            logger.info(f"No hunks to review in {file.filename}")
            return []

        logger.info(f"Reviewing {len(hunks)} hunks of {file.filename} as {language}")
        tasks = [
            asyncio.ensure_future(self._review_diff(language, hunk.content))
            for hunk in hunks
        ]
        try:
            return list(await asyncio.gather(*tasks))
        except BaseException:
            for task in tasks:
                task.cancel()
            raise

    async def _review_diff(self, language: str, diff: str) -> ReviewResult:
        request = ReviewRequest(language=language, diff=diff)
        prompt = build_review_prompt(**request.model_dump(), output_format=self.output_format)
        return await self.retry_policy.call(self.provider.review, prompt)

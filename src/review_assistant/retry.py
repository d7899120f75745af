# src/review_assistant/retry.py
import asyncio
import logging
import random
from typing import Any, Awaitable, Callable, TypeVar

from review_assistant.errors import ReviewInvocationError


logger = logging.getLogger(__name__)

T = TypeVar("T")


class RetryPolicy:
    """Bounded retry with exponential backoff and jitter for async calls.

    The delay after failed attempt ``n`` is ``base_delay * 2 ** (n - 1)``,
    capped at ``max_delay`` and scaled by a random factor drawn from
    ``[1 - jitter, 1 + jitter]``. No delay follows the final attempt.
    Consecutive delays grow strictly while jitter < 1/3 and the uncapped
    delay stays below ``max_delay``; once capped they only vary by jitter.
    """

    def __init__(
        self,
        max_attempts: int = 3,
        base_delay: float = 1.0,
        max_delay: float = 30.0,
        jitter: float = 0.2,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ):
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if not 0 <= jitter < 1:
            raise ValueError("jitter must be in [0, 1)")
        self.max_attempts = max_attempts
        self.base_delay = base_delay
        self.max_delay = max_delay
        self.jitter = jitter
        self._sleep = sleep

    def delay_for(self, attempt: int) -> float:
        """Backoff delay in seconds after the given (1-based) failed attempt."""
        delay = min(self.max_delay, self.base_delay * 2 ** (attempt - 1))
        return delay * random.uniform(1 - self.jitter, 1 + self.jitter)

    async def call(self, fn: Callable[..., Awaitable[T]], *args: Any, **kwargs: Any) -> T:
        last_error: Exception | None = None

        for attempt in range(1, self.max_attempts + 1):
            try:
                return await fn(*args, **kwargs)
            except Exception as e:
                last_error = e
                if attempt == self.max_attempts:
                    break
                delay = self.delay_for(attempt)
                logger.warning(
                    f"Attempt {attempt}/{self.max_attempts} failed: {e}; retrying in {delay:.2f}s"
                )
                await self._sleep(delay)

        logger.error(f"Giving up after {self.max_attempts} attempts: {last_error}")
        raise ReviewInvocationError(self.max_attempts, last_error) from last_error


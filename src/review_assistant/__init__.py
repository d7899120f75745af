from .errors import LanguageNotFoundError, ReviewAssistantError, ReviewInvocationError
from .language import ExtensionLanguageDetector, LanguageDetector
from .models import OutputFormat, PullRequestFile, ReviewResult
from .retry import RetryPolicy
from .review import ReviewEngine

__all__ = [
    "LanguageNotFoundError",
    "ReviewAssistantError",
    "ReviewInvocationError",
    "ExtensionLanguageDetector",
    "LanguageDetector",
    "OutputFormat",
    "PullRequestFile",
    "ReviewResult",
    "RetryPolicy",
    "ReviewEngine",
]

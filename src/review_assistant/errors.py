# src/review_assistant/errors.py


class ReviewAssistantError(Exception):
    """Base class for review assistant errors."""
    pass


class LanguageNotFoundError(ReviewAssistantError):
    """Raised when no programming language is mapped to a filename."""
    def __init__(self, filename: str):
        super().__init__(f"No language mapping found for {filename!r}")
        self.filename = filename


class ReviewInvocationError(ReviewAssistantError):
    """Raised when the model call still fails after every retry attempt."""
    def __init__(self, attempts: int, last_error: BaseException):
        super().__init__(f"Review failed after {attempts} attempts: {last_error}")
        self.attempts = attempts
        self.last_error = last_error

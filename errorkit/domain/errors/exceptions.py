"""
Exceptions raised by the error-handling domain itself.

Only classification can fail, and it does so in a controlled way:
the pipeline turns `UnclassifiableStatusError` into its Fallback outcome.
"""

from errorkit.domain.errors.entities import CanonicalError


class ErrorkitError(Exception):
    """Base error for all errorkit domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class UnclassifiableStatusError(ErrorkitError):
    """Raised when a status code is neither 4xx nor 5xx."""

    def __init__(self, error: CanonicalError) -> None:
        super().__init__(
            "The HTTP Status Code is neither 4xx nor 5xx. "
            "Refusing to treat as Error"
        )
        self.error = error

    def __str__(self) -> str:
        return f"{type(self).__name__}: {self.message} ({self.error})"

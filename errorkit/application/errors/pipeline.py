"""
Use case: Turn a failure value into a response payload.

Input: any failure value.
Output: NormalOutcome or FallbackOutcome.
Side effects: One log line through the injected sink.
Failure cases: None escape. Unclassifiable statuses end in the Fallback.
"""

import logging
from typing import Any

from errorkit.application.errors.dtos import (
    FallbackOutcome,
    NormalOutcome,
    PipelineOutcome,
)
from errorkit.domain.errors.classifier import ErrorClassifier
from errorkit.domain.errors.coercer import coerce_error
from errorkit.domain.errors.entities import CanonicalError
from errorkit.domain.errors.exceptions import UnclassifiableStatusError
from errorkit.domain.errors.ports import LoggerSink
from errorkit.domain.errors.renderer import PayloadRenderer

logger = logging.getLogger(__name__)

UNEXPECTED_PREFIX = "An unexpected exception has occurred."
UNEXPECTED_LOG_FORMAT = UNEXPECTED_PREFIX + " %s"


class ErrorPipeline:
    """Sequences coerce, classify and render for a single failure.

    Steps run strictly in order. A step never starts before the
    previous one has completed, and nothing is rendered if
    classification fails.

    Args:
        sink: Logging sink shared by every run.
        expose_internals: Include error detail in payloads.
        error_name: Optional fixed name applied to every error.
    """

    def __init__(
        self,
        sink: LoggerSink,
        expose_internals: bool = False,
        error_name: str | None = None,
    ) -> None:
        self._sink = sink
        self._error_name = error_name
        self._classifier = ErrorClassifier(sink)
        self._renderer = PayloadRenderer(expose_internals)

    @property
    def expose_internals(self) -> bool:
        return self._renderer.expose_internals

    def run(self, value: Any) -> PipelineOutcome:
        """Run the pipeline for one failure value.

        Args:
            value: The raw failure value.

        Returns:
            NormalOutcome when the status is 4xx or 5xx,
            FallbackOutcome otherwise.
        """
        logger.debug("Attempting to pre-process error: %r", value)
        error = coerce_error(value, self._error_name)

        try:
            category, handler = self._classifier.elect(error)
        except UnclassifiableStatusError as exc:
            return self._unexpected(exc)

        handler(error)
        return NormalOutcome(
            error=error,
            category=category,
            payload=self._renderer.render(error),
        )

    def _unexpected(self, exc: UnclassifiableStatusError) -> FallbackOutcome:
        logger.debug("Invoking UnexpectedError handler")
        self._sink.error(UNEXPECTED_LOG_FORMAT, str(exc))

        original = exc.error
        snapshot = CanonicalError(
            name=type(exc).__name__,
            message=exc.message,
            status=original.status,
            detail=f"{type(exc).__name__}: {exc.message}\n{original.detail or original}",
        )
        payload = self._renderer.render(
            snapshot, message=f"{UNEXPECTED_PREFIX} {original.message}"
        )
        return FallbackOutcome(error=original, reason=exc, payload=payload)

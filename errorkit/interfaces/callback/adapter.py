"""
Callback transport adapter.

Delivers the pipeline result to a continuation: `(None, payload)` on
the Normal outcome, `(fallback_payload,)` on the Fallback outcome.
"""

import logging
from typing import Any

from errorkit.application.errors.dtos import FallbackOutcome
from errorkit.application.errors.pipeline import ErrorPipeline
from errorkit.domain.errors.ports import Callback

logger = logging.getLogger(__name__)


def _noop(*_args: Any) -> None:
    return None


class CallbackErrorAdapter:
    """Error handler for callback-style transports such as websockets."""

    def __init__(self, pipeline: ErrorPipeline) -> None:
        self._pipeline = pipeline

    def __call__(self, err: Any, callback: Callback | None = None) -> Any:
        """Handle one failure and return what the continuation returns."""
        if not callable(callback):
            callback = _noop

        logger.debug("Invoking callback handler for error: %s", err)
        outcome = self._pipeline.run(err)

        if isinstance(outcome, FallbackOutcome):
            return callback(outcome.payload.as_dict())

        logger.debug("Submitting callback response")
        return callback(None, outcome.payload.as_dict())

"""
Synchronous transport adapter.

Runs the pipeline and writes exactly one response: status line,
`X-Content-Type-Options: nosniff`, then a negotiated body. On the
Fallback outcome nothing is written; the fallback payload is handed
to the framework's error path instead.
"""

import json
import logging
from typing import Any, Callable

from errorkit.application.errors.dtos import FallbackOutcome
from errorkit.application.errors.pipeline import ErrorPipeline
from errorkit.domain.errors.ports import RequestPort, ResponsePort

logger = logging.getLogger(__name__)

JSON_MEDIA_TYPE = "application/json"
TEXT_MEDIA_TYPE = "text/plain"
NEGOTIATED_TYPES = [JSON_MEDIA_TYPE, TEXT_MEDIA_TYPE]

NOSNIFF_HEADER = ("X-Content-Type-Options", "nosniff")

NextHandler = Callable[[dict[str, Any]], Any]


class HttpErrorAdapter:
    """Error handler for request/response transports.

    Args:
        pipeline: The pipeline to run for each failure.
    """

    def __init__(self, pipeline: ErrorPipeline) -> None:
        self._pipeline = pipeline

    def __call__(
        self,
        err: Any,
        request: RequestPort,
        response: ResponsePort,
        next_: NextHandler,
    ) -> Any:
        """Handle one failure.

        Args:
            err: The raw failure value.
            request: The incoming request.
            response: The response to write.
            next_: The framework's error path, called with the
                fallback payload when the error is unclassifiable.

        Returns:
            Whatever `next_` returns on the Fallback outcome, else None.
        """
        logger.debug("Invoking HTTP handler for error: %s", err)
        outcome = self._pipeline.run(err)

        if isinstance(outcome, FallbackOutcome):
            return next_(outcome.payload.as_dict())

        logger.debug("Submitting HTTP response")
        response.set_status(outcome.status)
        response.set_header(*NOSNIFF_HEADER)

        body = outcome.payload.as_dict()
        media_type = request.accepts(NEGOTIATED_TYPES)
        if media_type == JSON_MEDIA_TYPE:
            response.send_json(body)
        elif media_type == TEXT_MEDIA_TYPE:
            response.send_text(json.dumps(body))
        else:
            response.send_not_acceptable()
        return None

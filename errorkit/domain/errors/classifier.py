"""
Severity classification of canonical errors.

The leading digit of the status selects the category and, with it,
the logging policy applied to the error. Anything that is not 4xx
or 5xx is refused with UnclassifiableStatusError.
"""

import logging
from typing import Any, Callable

from errorkit.domain.errors.entities import CanonicalError, SeverityCategory
from errorkit.domain.errors.exceptions import UnclassifiableStatusError
from errorkit.domain.errors.ports import LoggerSink

logger = logging.getLogger(__name__)

_CATEGORY_BY_DIGIT = {
    "4": SeverityCategory.CLIENT,
    "5": SeverityCategory.SERVER,
}

CLIENT_LOG_FORMAT = "Client Error. %s"
SERVER_LOG_FORMAT = "Internal Server Error. %s"

ErrorLogHandler = Callable[[CanonicalError], None]


def classify(status: Any) -> SeverityCategory:
    """Return the severity category for a status value.

    Args:
        status: Any status value. Non-numeric values are unclassifiable.

    Returns:
        CLIENT for 4xx, SERVER for 5xx, UNCLASSIFIABLE otherwise.
    """
    if isinstance(status, bool):
        return SeverityCategory.UNCLASSIFIABLE
    text = str(status)
    if len(text) != 3 or not text.isdigit():
        return SeverityCategory.UNCLASSIFIABLE
    return _CATEGORY_BY_DIGIT.get(text[0], SeverityCategory.UNCLASSIFIABLE)


class ErrorClassifier:
    """Elects the logging handler matching an error's severity.

    Args:
        sink: Logging sink receiving client and server error lines.
    """

    def __init__(self, sink: LoggerSink) -> None:
        self._sink = sink

    def elect(self, error: CanonicalError) -> tuple[SeverityCategory, ErrorLogHandler]:
        """Select the handler for `error`.

        Raises:
            UnclassifiableStatusError: If the status is neither 4xx nor 5xx.
        """
        category = classify(error.status)
        if category is SeverityCategory.CLIENT:
            logger.debug("Elected Client handler")
            return category, self._log_client_error
        if category is SeverityCategory.SERVER:
            logger.debug("Elected Server handler")
            return category, self._log_server_error

        logger.debug("Failed to elect handler for status %r", error.status)
        raise UnclassifiableStatusError(error)

    def _log_client_error(self, error: CanonicalError) -> None:
        self._sink.error(CLIENT_LOG_FORMAT, str(error))

    def _log_server_error(self, error: CanonicalError) -> None:
        self._sink.error(SERVER_LOG_FORMAT, str(error))

"""
Public entry point.

`create_error_handler` builds one immutable pipeline and exposes the
two transport adapters over it.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from errorkit.application.errors.pipeline import ErrorPipeline
from errorkit.core.config import DEVELOPMENT, settings
from errorkit.domain.errors.entities import ExecutionError
from errorkit.domain.errors.ports import LoggerSink
from errorkit.interfaces.callback.adapter import CallbackErrorAdapter
from errorkit.interfaces.http.adapter import HttpErrorAdapter
from errorkit.shared.logging import default_sink

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ErrorHandler:
    """A configured error handler.

    Attributes:
        environment: The environment the handler was built for.
        pipeline: The shared pipeline.
        http: Adapter for request/response transports.
        ws: Adapter for callback transports.
    """

    environment: str
    pipeline: ErrorPipeline
    http: HttpErrorAdapter
    ws: CallbackErrorAdapter

    ExecutionError = ExecutionError


def create_error_handler(
    environment: Optional[str] = None,
    error_name: Optional[str] = None,
    logger: Optional[LoggerSink] = None,
) -> ErrorHandler:
    """Build an error handler.

    Arguments left as None fall back to the loaded settings.

    Args:
        environment: "development" exposes error internals.
        error_name: Fixed name applied to every handled error.
        logger: Sink receiving error log lines.

    Returns:
        The configured ErrorHandler.
    """
    env = environment or settings.environment
    name = error_name or settings.error_name
    sink = logger if logger is not None else default_sink()

    _log.debug("Setting up error handler for the %s environment", env)

    pipeline = ErrorPipeline(
        sink=sink,
        expose_internals=env == DEVELOPMENT,
        error_name=name,
    )
    return ErrorHandler(
        environment=env,
        pipeline=pipeline,
        http=HttpErrorAdapter(pipeline),
        ws=CallbackErrorAdapter(pipeline),
    )

"""
Coercion of arbitrary failure values into a CanonicalError.

Input: anything a request handler may fail with.
Output: CanonicalError with a positive status and a non-empty message.
Side effects: None. The input value is never mutated.
Failure cases: None. Unrecognized inputs produce the placeholder error.
"""

import logging
from collections.abc import Mapping
from dataclasses import replace
from typing import Any

from errorkit.domain.errors.entities import (
    DEFAULT_MESSAGE,
    DEFAULT_NAME,
    DEFAULT_STATUS,
    GENERIC_NAMES,
    STATUS_FIELDS,
    CanonicalError,
    ExecutionError,
    first_status,
    format_stack,
    valid_status,
)

logger = logging.getLogger(__name__)

MESSAGE_FIELDS = ("message", "detail")


def coerce_error(value: Any, error_name: str | None = None) -> CanonicalError:
    """Convert any failure value into a CanonicalError.

    Args:
        value: The raw failure value.
        error_name: Optional fixed name applied to every coerced error.

    Returns:
        A fresh CanonicalError.
    """
    if isinstance(value, CanonicalError):
        error = value
    elif isinstance(value, ExecutionError):
        error = _from_execution_error(value)
    elif isinstance(value, BaseException):
        error = _from_exception(value)
    elif isinstance(value, str):
        error = _build(message=value)
    elif isinstance(value, Mapping):
        error = _build(
            message=_first_message(value.get(f) for f in MESSAGE_FIELDS),
            status=first_status(value.get(f) for f in STATUS_FIELDS),
            name=value.get("name"),
        )
    elif value is not None and _has_error_fields(value):
        error = _build(
            message=_first_message(getattr(value, f, None) for f in MESSAGE_FIELDS),
            status=first_status(getattr(value, f, None) for f in STATUS_FIELDS),
            name=getattr(value, "name", None),
        )
    else:
        logger.debug("Unrecognized failure value of type %s", type(value).__name__)
        error = _build()

    if error_name and error.name != error_name:
        error = replace(error, name=error_name)
    return error


def _from_execution_error(exc: ExecutionError) -> CanonicalError:
    canonical = exc.to_canonical()
    status = valid_status(canonical.status) or DEFAULT_STATUS
    return replace(canonical, status=status)


def _from_exception(exc: BaseException) -> CanonicalError:
    # `name` on AttributeError, NameError and ImportError is the missing identifier.
    name = type(exc).__name__
    message = _first_message(getattr(exc, f, None) for f in MESSAGE_FIELDS)
    if message is None:
        message = str(exc) or None
    error = _build(
        message=message,
        status=first_status(getattr(exc, f, None) for f in STATUS_FIELDS),
        name=name,
    )
    return replace(error, detail=format_stack(error.name, error.message, exc))


def _build(
    message: str | None = None,
    status: int | None = None,
    name: Any = None,
) -> CanonicalError:
    if not isinstance(name, str) or not name or name in GENERIC_NAMES:
        name = DEFAULT_NAME
    message = message or DEFAULT_MESSAGE
    status = status or DEFAULT_STATUS
    return CanonicalError(
        name=name,
        message=message,
        status=status,
        detail=format_stack(name, message),
    )


def _has_error_fields(value: Any) -> bool:
    return any(hasattr(value, f) for f in MESSAGE_FIELDS + STATUS_FIELDS)


def _first_message(candidates: Any) -> str | None:
    for candidate in candidates:
        if isinstance(candidate, str) and candidate:
            return candidate
    return None


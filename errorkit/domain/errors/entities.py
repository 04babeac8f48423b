"""
Domain entities for error handling.

The canonical error is the single normalized representation every
failure value is coerced into. It is rebuilt for each invocation
and never shared between requests.
No framework imports and no IO operations.
"""

import traceback
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any

DEFAULT_STATUS = 500
DEFAULT_NAME = "ExecutionError"
DEFAULT_MESSAGE = "An unexpected error has occurred"

# Names carried by plain, unnamed errors. These are replaced by DEFAULT_NAME.
GENERIC_NAMES = frozenset({"Exception", "Error"})

STATUS_FIELDS = ("status", "status_code", "statusCode")


class SeverityCategory(Enum):
    """Severity of an error, derived from the leading digit of its status."""

    CLIENT = "client"
    SERVER = "server"
    UNCLASSIFIABLE = "unclassifiable"


@dataclass(frozen=True)
class CanonicalError:
    """Normalized error value produced by the coercer.

    Attributes:
        name: Short identifier of the error kind.
        message: Human-readable, non-empty description.
        status: Positive HTTP-style status code.
        detail: Optional stack snapshot, exposed only in development.
    """

    name: str = DEFAULT_NAME
    message: str = DEFAULT_MESSAGE
    status: int = DEFAULT_STATUS
    detail: str | None = None

    def __str__(self) -> str:
        return f"{self.name}: {self.message}"


@dataclass(frozen=True)
class ResponsePayload:
    """Transport-agnostic body sent back to the client.

    `error` is only populated in expose-internals mode. `as_dict`
    drops the key entirely when it is not.
    """

    message: str
    success: bool = False
    error: Any = None
    include_error: bool = False

    def as_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"success": self.success, "message": self.message}
        if self.include_error:
            body["error"] = self.error
        return body


def format_stack(name: str, message: str, exc: BaseException | None = None) -> str:
    """Render a stack snapshot headed by `name: message`.

    The traceback is appended when the exception was actually raised.
    """
    header = f"{name}: {message}"
    if exc is None or exc.__traceback__ is None:
        return header
    frames = "".join(traceback.format_tb(exc.__traceback__))
    return f"{header}\n{frames.rstrip()}"


def valid_status(candidate: Any) -> int | None:
    """Return `candidate` as a positive int, or None if it cannot be one."""
    if isinstance(candidate, bool):
        return None
    if isinstance(candidate, int):
        return candidate if candidate > 0 else None
    if isinstance(candidate, str) and candidate.isdigit():
        return int(candidate) or None
    return None


def first_status(candidates: Iterable[Any]) -> int | None:
    """Return the first valid status among `candidates`."""
    for candidate in candidates:
        status = valid_status(candidate)
        if status is not None:
            return status
    return None


class ExecutionError(Exception):
    """Library-level exception carrying a name, message and status.

    Accepts a message string, a bare status code, another exception
    or nothing at all::

        ExecutionError("Not found", 404)
        ExecutionError(404)
        ExecutionError(KeyError("id"))
        ExecutionError()

    Args:
        error: Message, status code or source exception.
        status: Explicit status code. Takes precedence over any status
            found on a source exception.
    """

    error_name: str | None = None

    def __init__(self, error: Any = None, status: int | None = None) -> None:
        source: BaseException | None = None
        message: str | None = None

        if isinstance(error, str):
            message = error
        elif isinstance(error, int) and not isinstance(error, bool):
            status = error
        elif isinstance(error, BaseException):
            source = error
            message = str(getattr(error, "message", "") or error)

        self.message = message or DEFAULT_MESSAGE
        self.name = self._resolve_name(source)
        self.status = (
            valid_status(status)
            or first_status(getattr(source, f, None) for f in STATUS_FIELDS)
            or DEFAULT_STATUS
        )
        self.source = source
        super().__init__(self.message)

    def _resolve_name(self, source: BaseException | None) -> str:
        if self.error_name:
            return self.error_name
        if source is None:
            return DEFAULT_NAME
        if isinstance(source, ExecutionError):
            return source.name
        source_name = type(source).__name__
        return DEFAULT_NAME if source_name in GENERIC_NAMES else source_name

    def __str__(self) -> str:
        return f"{self.name}: {self.message}"

    def to_canonical(self) -> CanonicalError:
        """Return the canonical view of this exception."""
        return CanonicalError(
            name=self.name,
            message=self.message,
            status=self.status,
            detail=format_stack(self.name, self.message, self.source or self),
        )


def define_error(name: str) -> type[ExecutionError]:
    """Build an `ExecutionError` subclass whose instances carry `name`.

    Args:
        name: The error name, also used as the class name.

    Returns:
        A new exception class.
    """
    return type(name, (ExecutionError,), {"error_name": name})

"""
Port interfaces for error handling.

Ports define what the pipeline needs from the outside world: a logging
sink, and for the synchronous transport a request and a response.
Transport wiring implements these interfaces.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional, Protocol


class LoggerSink(Protocol):
    """Anything exposing `error(msg, *args)`. A `logging.Logger` qualifies.

    Implementations must be safe for concurrent use and must not raise.
    """

    def error(self, msg: str, *args: Any) -> None: ...


class RequestPort(ABC):
    """Port over the incoming request, used for content negotiation."""

    @abstractmethod
    def accepts(self, offers: list[str]) -> Optional[str]:
        """Return the offered media type the client prefers, or None."""
        raise NotImplementedError


class ResponsePort(ABC):
    """Port over the outgoing response of the synchronous transport."""

    @abstractmethod
    def set_status(self, status: int) -> None:
        """Set the response status code."""
        raise NotImplementedError

    @abstractmethod
    def set_header(self, name: str, value: str) -> None:
        """Set a response header, replacing any previous value."""
        raise NotImplementedError

    @abstractmethod
    def send_json(self, body: dict[str, Any]) -> None:
        """Send `body` as an `application/json` document."""
        raise NotImplementedError

    @abstractmethod
    def send_text(self, text: str) -> None:
        """Send `text` as `text/plain`."""
        raise NotImplementedError

    @abstractmethod
    def send_not_acceptable(self) -> None:
        """Answer 406 with a plain-text `Not Acceptable` body."""
        raise NotImplementedError


# Continuation of the callback transport: (error, payload).
Callback = Callable[..., Any]

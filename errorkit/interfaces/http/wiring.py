"""
Starlette/FastAPI wiring for the synchronous adapter.

Implements the request and response ports over Starlette objects and
registers the adapter on an application. No policy decisions here.
"""

import logging
from typing import TYPE_CHECKING, Any, Optional

from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, PlainTextResponse, Response

from errorkit.domain.errors.ports import RequestPort, ResponsePort
from errorkit.interfaces.http.negotiation import best_match

if TYPE_CHECKING:
    from fastapi import FastAPI

    from errorkit.handler import ErrorHandler

logger = logging.getLogger(__name__)

HTTP_406 = 406
HTTP_500 = 500
NOT_ACCEPTABLE = "Not Acceptable"


class StarletteRequestPort(RequestPort):
    """Request port backed by a Starlette request."""

    def __init__(self, request: Request) -> None:
        self._request = request

    def accepts(self, offers: list[str]) -> Optional[str]:
        return best_match(offers, self._request.headers.get("accept"))


class StarletteResponsePort(ResponsePort):
    """Response port that collects writes and builds a Starlette response."""

    def __init__(self) -> None:
        self.status = HTTP_500
        self.headers: dict[str, str] = {}
        self._response: Response | None = None

    def set_status(self, status: int) -> None:
        self.status = status

    def set_header(self, name: str, value: str) -> None:
        self.headers[name] = value

    def send_json(self, body: dict[str, Any]) -> None:
        self._response = JSONResponse(
            content=body, status_code=self.status, headers=self.headers
        )

    def send_text(self, text: str) -> None:
        self._response = PlainTextResponse(
            content=text, status_code=self.status, headers=self.headers
        )

    def send_not_acceptable(self) -> None:
        self.status = HTTP_406
        self.send_text(NOT_ACCEPTABLE)

    def build(self) -> Response:
        """Return the response written so far.

        Raises:
            RuntimeError: If nothing was sent.
        """
        if self._response is None:
            raise RuntimeError("No response body has been sent")
        return self._response


def forward_to_framework(payload: dict[str, Any]) -> Response:
    """Framework error path: answer 500 with the fallback payload."""
    return JSONResponse(status_code=HTTP_500, content=payload)


def respond(handler: "ErrorHandler", exc: Any, request: Request) -> Response:
    """Run the synchronous adapter for `exc` and return the response.

    Args:
        handler: The configured error handler.
        exc: The failure raised while handling `request`.
        request: The incoming request.

    Returns:
        The negotiated response, or the framework's fallback response.
    """
    response = StarletteResponsePort()
    forwarded = handler.http(
        exc, StarletteRequestPort(request), response, forward_to_framework
    )
    if forwarded is not None:
        return forwarded
    return response.build()


class ErrorPipelineMiddleware(BaseHTTPMiddleware):
    """Middleware routing any exception escaping a route to the pipeline."""

    def __init__(self, app: Any, handler: "ErrorHandler") -> None:
        super().__init__(app)
        self._handler = handler

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        """Process request and turn unhandled exceptions into responses."""
        try:
            return await call_next(request)
        except Exception as exc:
            logger.debug("Unhandled %s on %s", type(exc).__name__, request.url.path)
            return respond(self._handler, exc, request)


def register_error_handlers(app: "FastAPI", handler: "ErrorHandler") -> None:
    """Register the error pipeline on a FastAPI (or Starlette) application.

    Args:
        app: The application instance.
        handler: The configured error handler.
    """

    async def handle_http_exception(
        request: Request, exc: StarletteHTTPException
    ) -> Response:
        """Handle framework HTTP errors such as 404 and 405."""
        return respond(handler, exc, request)

    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_middleware(ErrorPipelineMiddleware, handler=handler)

"""
Demo application entry point.

Creates a FastAPI application wired to the error pipeline:
- Error handlers (framework HTTP errors and unhandled exceptions)
- Logging configuration

No business logic belongs here.
"""

from fastapi import FastAPI

from errorkit.core.config import settings
from errorkit.handler import ErrorHandler, create_error_handler
from errorkit.interfaces.http.wiring import register_error_handlers
from errorkit.shared.logging import configure_logging


def create_app(handler: ErrorHandler | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    This is the composition root of the application.

    Args:
        handler: Error handler to install. Built from settings if omitted.

    Returns:
        A configured FastAPI application instance.
    """
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
    )

    # --- Error Handlers ---
    register_error_handlers(app, handler or create_error_handler())

    return app


app = create_app()

"""
Payload rendering.

Pure data shaping: no status codes, no headers.
"""

from errorkit.domain.errors.entities import CanonicalError, ResponsePayload


class PayloadRenderer:
    """Builds the response payload for a classified error.

    Args:
        expose_internals: Include the error detail in the payload.
    """

    def __init__(self, expose_internals: bool) -> None:
        self.expose_internals = expose_internals

    def render(self, error: CanonicalError, message: str | None = None) -> ResponsePayload:
        """Build a payload for `error`, optionally overriding its message."""
        return ResponsePayload(
            message=error.message if message is None else message,
            error=error.detail if self.expose_internals else None,
            include_error=self.expose_internals,
        )

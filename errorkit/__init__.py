"""
errorkit — error normalization and response formatting for web services.

Package root. Follows the same layered layout as a hexagonal service:

Layers:
    - domain: Canonical error, coercion, classification, payload rendering.
    - application: The pipeline orchestrating the domain steps.
    - interfaces: Transport adapters (synchronous HTTP, callback).
    - core: Configuration.
    - shared: Cross-cutting concerns (logging).
"""

from errorkit.domain.errors.entities import ExecutionError, define_error
from errorkit.handler import ErrorHandler, create_error_handler

__all__ = [
    "ErrorHandler",
    "ExecutionError",
    "create_error_handler",
    "define_error",
]

"""
Middleware and exception handlers.
"""

from profilesite.middleware.error_handler import (
    api_exception_handler,
    error_handler_middleware,
)

__all__ = ["api_exception_handler", "error_handler_middleware"]

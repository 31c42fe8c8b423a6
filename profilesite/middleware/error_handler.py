"""
Global error handling for consistent JSON error bodies.

- APIException subclasses render as `{"error": message, "code": ..., "details": ...}`
- Anything unhandled is logged with its traceback and rendered as
  `{"error": "Internal server error"}` with status 500
"""

import logging
import traceback
from typing import Any, Callable

from fastapi import Request, Response, status
from fastapi.responses import JSONResponse

from common.utils import error_response
from common.utils.exceptions import APIException

logger = logging.getLogger(__name__)


async def api_exception_handler(request: Request, exc: APIException) -> JSONResponse:
    """Render an APIException."""
    if exc.status_code >= 500:
        logger.error(f"API error {exc.status_code} on {request.url.path}: {exc.message}")
    else:
        logger.warning(f"API error {exc.status_code} on {request.url.path}: {exc.message}")

    return JSONResponse(
        status_code=exc.status_code,
        content=error_response(exc.message, code=exc.code, details=exc.details),
        headers=exc.headers,
    )


async def error_handler_middleware(request: Request, call_next: Callable[[Request], Any]) -> Response:
    """Catch unhandled exceptions and answer with a generic 500."""
    try:
        return await call_next(request)
    except Exception as e:
        logger.error(
            "Unhandled exception on %s: %s\n%s",
            request.url.path,
            str(e),
            traceback.format_exc(),
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_response("Internal server error"),
        )

"""
Standard API response helpers.

Success bodies are flat: ``{"success": True, "event": {...}}``. Error
bodies carry the message under ``error``.

Example:
    from common.utils import success_response, error_response

    @router.post("/events")
    async def save_event(body: dict):
        event = await event_service.save_event(body)
        return success_response(event=event)
"""

from typing import Any, Optional, Dict


def success_response(message: Optional[str] = None, **fields: Any) -> Dict[str, Any]:
    """
    Create a standard success response.

    Args:
        message: Optional success message
        **fields: Top-level payload fields (e.g. event=..., profile=...)

    Returns:
        Dictionary with success=True plus the given fields
    """
    response: Dict[str, Any] = {"success": True}

    if message:
        response["message"] = message

    response.update(fields)
    return response


def error_response(
    message: str,
    code: Optional[str] = None,
    details: Optional[Any] = None,
) -> Dict[str, Any]:
    """
    Create a standard error response.

    Args:
        message: Human-readable error message
        code: Machine-readable error code (e.g., "PROFILE_NOT_FOUND")
        details: Additional error details

    Returns:
        Dictionary with the error message and optional code/details
    """
    response: Dict[str, Any] = {"error": message}

    if code:
        response["code"] = code

    if details is not None:
        response["details"] = details

    return response

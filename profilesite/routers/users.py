"""
FastAPI router for user records.
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter

from common.utils import success_response
from profilesite.dependencies import get_user_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


@router.get("")
async def list_users():
    """Get all users as an object keyed by email."""
    user_service = get_user_service()
    return await user_service.list_users()


@router.post("")
async def save_users(body: Dict[str, Any]):
    """
    Upsert users.

    A body with `email` is a single user. Any other body is an
    `{email: user}` mapping.
    """
    user_service = get_user_service()

    if body.get("email"):
        await user_service.upsert_user(body)
    else:
        await user_service.upsert_many(body)

    return success_response()

"""
FastAPI router for profiles.

Plain CRUD plus the approval workflow of the authenticated variant.
"""

import logging
from typing import Annotated, List

from fastapi import APIRouter, Depends

from common.utils import success_response
from profilesite.dependencies import get_profile_service, require_admin, require_auth
from profilesite.schemas.content import ProfileDocument

logger = logging.getLogger(__name__)

router = APIRouter(tags=["profiles"])


# =============================================================================
# CRUD
# =============================================================================

@router.get("/profiles")
async def list_profiles():
    """Get all profiles."""
    profile_service = get_profile_service()
    return await profile_service.list_profiles()


@router.post("/profiles")
async def save_profile(body: ProfileDocument):
    """Create a profile, or upsert it when the body carries an id."""
    profile_service = get_profile_service()
    profile = await profile_service.save_profile(body.model_dump(exclude_unset=True))
    return success_response(profile=profile)


@router.put("/profiles")
async def replace_profiles(body: List[ProfileDocument]):
    """Upsert every profile in the array."""
    profile_service = get_profile_service()
    await profile_service.replace_all([p.model_dump(exclude_unset=True) for p in body])
    return success_response()


# =============================================================================
# Approval workflow
# =============================================================================

@router.get("/profiles/approved")
async def list_approved_profiles():
    """Get approved profiles, newest upload first."""
    profile_service = get_profile_service()
    return await profile_service.list_approved()


@router.get("/my-profiles")
async def list_my_profiles(claims: Annotated[dict, Depends(require_auth)]):
    """Get profiles uploaded by the current user, newest first."""
    profile_service = get_profile_service()
    return await profile_service.list_by_uploader(claims["sub"])


@router.patch("/profiles/{profile_id}/approve")
async def approve_profile(
    profile_id: str,
    claims: Annotated[dict, Depends(require_admin)],
):
    """Approve a profile (admin only)."""
    profile_service = get_profile_service()
    profile = await profile_service.approve(profile_id)
    logger.info(f"Profile {profile_id} approved by {claims['sub']}")
    return {"message": "プロフィールを承認しました", "profile": profile}

"""
Profile service for public profiles.

Profiles are never deleted. `isApproved` is the only visibility state.
"""

import logging
from typing import Any, Dict, List

from common.utils.exceptions import NotFoundException
from profilesite.services.identifiers import now_iso, timestamp_id
from profilesite.storage import DocumentStore

logger = logging.getLogger(__name__)

COLLECTION = "profiles"
NEWEST_UPLOAD_FIRST = [("uploadedAt", -1)]

# Set only by approve()
APPROVAL_FIELDS = ("isApproved",)


def without_approval(data: Dict[str, Any]) -> Dict[str, Any]:
    """Copy of profile input with approval state removed."""
    return {k: v for k, v in data.items() if k not in APPROVAL_FIELDS}


class ProfileService:
    """Manages profile documents."""

    def __init__(self, store: DocumentStore):
        """
        Initialize ProfileService.

        Args:
            store: Document store holding the profiles collection
        """
        self._store = store

    async def list_profiles(self) -> List[Dict[str, Any]]:
        """Get every profile regardless of approval."""
        return await self._store.find_all(COLLECTION)

    async def list_approved(self) -> List[Dict[str, Any]]:
        """Get approved profiles, newest upload first."""
        return await self._store.find_all(
            COLLECTION, {"isApproved": True}, sort=NEWEST_UPLOAD_FIRST
        )

    async def list_by_uploader(self, uploaded_by: str) -> List[Dict[str, Any]]:
        """Get profiles uploaded by a user, newest first."""
        return await self._store.find_all(
            COLLECTION, {"uploadedBy": uploaded_by}, sort=NEWEST_UPLOAD_FIRST
        )

    async def save_profile(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Upsert a profile by id, or create it when no id is given.

        Approval state in the input is ignored; new profiles start unapproved.

        Args:
            data: Profile fields

        Returns:
            The profile as stored
        """
        data = without_approval(data)
        if data.get("id"):
            return await self._store.upsert(COLLECTION, "id", data)

        profile = {
            **data,
            "id": timestamp_id("profile"),
            "createdAt": now_iso(),
            "isApproved": False,
        }
        logger.info(f"Creating profile: {profile['id']}")
        return await self._store.insert_one(COLLECTION, profile)

    async def replace_all(self, profiles: List[Dict[str, Any]]) -> int:
        """
        Upsert every profile in the list, ignoring approval state.

        Returns:
            Number of profiles written
        """
        for profile in profiles:
            profile = without_approval(profile)
            if not profile.get("id"):
                profile = {**profile, "id": timestamp_id("profile"), "createdAt": now_iso()}
            await self._store.upsert(COLLECTION, "id", profile)

        logger.info(f"Bulk-saved {len(profiles)} profiles")
        return len(profiles)

    async def create_draft(self, profile: Dict[str, Any]) -> Dict[str, Any]:
        """Insert an unapproved profile produced by the name-card importer."""
        draft = {**profile, "isApproved": False}
        stored = await self._store.insert_one(COLLECTION, draft)
        logger.info(f"Created draft profile {stored['id']} for {stored.get('uploadedBy')}")
        return stored

    async def approve(self, profile_id: str) -> Dict[str, Any]:
        """
        Mark a profile as approved.

        Raises:
            NotFoundException: Unknown profile id
        """
        profile = await self._store.update_one(
            COLLECTION, {"id": profile_id}, {"isApproved": True}
        )
        if profile is None:
            raise NotFoundException(
                message="プロフィールが見つかりません",
                code="PROFILE_NOT_FOUND",
            )

        logger.info(f"Approved profile: {profile_id}")
        return profile

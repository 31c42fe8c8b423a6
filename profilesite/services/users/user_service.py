"""
User service for community user records.

Users are keyed by email and are upsert-only.
"""

import logging
from typing import Any, Dict, Optional

from common.utils.exceptions import BadRequestException
from profilesite.storage import DocumentStore

logger = logging.getLogger(__name__)

COLLECTION = "users"

# Never readable or writable through the users endpoints
PRIVATE_FIELDS = ("passwordHash",)

# Owned by the account flow once a user has registered
ACCOUNT_FIELDS = ("role", "username")


def public_user(user: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """Copy of a user document without private fields."""
    if user is None:
        return None
    return {k: v for k, v in user.items() if k not in PRIVATE_FIELDS}


class UserService:
    """Manages user records."""

    def __init__(self, store: DocumentStore):
        """
        Initialize UserService.

        Args:
            store: Document store holding the users collection
        """
        self._store = store

    async def list_users(self) -> Dict[str, Dict[str, Any]]:
        """
        Get all users as a mapping of email to user.

        Returns:
            dict keyed by email
        """
        users = await self._store.find_all(COLLECTION)
        return {u["email"]: public_user(u) for u in users if u.get("email")}

    async def upsert_user(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create or update a user by email.

        `passwordHash` is always dropped from the input. `role` and `username`
        are dropped too when the email belongs to a registered account.

        Raises:
            BadRequestException: Missing email
        """
        if not data.get("email"):
            raise BadRequestException(message="メールアドレスが必要です", code="EMAIL_REQUIRED")

        fields = public_user(data)

        if any(f in fields for f in ACCOUNT_FIELDS):
            existing = await self._store.find_one(COLLECTION, {"email": fields["email"]})
            if existing and existing.get("passwordHash"):
                ignored = [f for f in ACCOUNT_FIELDS if f in fields]
                logger.warning(f"Ignoring account fields {ignored} for: {fields['email']}")
                fields = {k: v for k, v in fields.items() if k not in ACCOUNT_FIELDS}

        stored = await self._store.upsert(COLLECTION, "email", fields)
        return public_user(stored)

    async def upsert_many(self, users: Dict[str, Any]) -> int:
        """
        Upsert an `{email: user}` mapping, forcing each user's email to its key.

        Returns:
            Number of users written

        Raises:
            BadRequestException: A mapping value is not an object
        """
        for email, info in users.items():
            if not isinstance(info, dict):
                raise BadRequestException(
                    message=f"ユーザーデータが不正です: {email}",
                    code="INVALID_USER_DATA",
                )
            await self.upsert_user({**info, "email": email})

        logger.info(f"Bulk-saved {len(users)} users")
        return len(users)

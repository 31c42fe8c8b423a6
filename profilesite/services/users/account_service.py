"""
Account service for register, login and logout.

Accounts are User documents that also carry `username` and `passwordHash`.
The JWT subject is the account's email.
"""

import logging
from typing import Any, Dict, Tuple

from common.auth.base import AuthProvider
from common.utils.exceptions import BadRequestException, NotFoundException
from profilesite.services.identifiers import now_iso, timestamp_id
from profilesite.services.users.user_service import COLLECTION, public_user
from profilesite.storage import DocumentStore, DuplicateDocumentError

logger = logging.getLogger(__name__)


class AccountService:
    """Handles account creation and credential checks."""

    def __init__(self, store: DocumentStore, auth: AuthProvider):
        """
        Initialize AccountService.

        Args:
            store: Document store holding the users collection
            auth: Provider for password hashing and tokens
        """
        self._store = store
        self._auth = auth

    async def _issue_token(self, user: Dict[str, Any]) -> str:
        return await self._auth.create_token(
            user["email"],
            username=user.get("username"),
            role=user.get("role", "user"),
        )

    async def register(self, username: str, email: str, password: str) -> Tuple[Dict[str, Any], str]:
        """
        Create a `user`-role account and issue a token.

        Returns:
            (account summary, token)

        Raises:
            BadRequestException: Username or email already exists
        """
        existing = await self._store.find_one(
            COLLECTION, {"$or": [{"email": email}, {"username": username}]}
        )
        if existing:
            raise BadRequestException(
                message="ユーザーまたはメールアドレスが既に存在します",
                code="USER_EXISTS",
            )

        user = {
            "id": timestamp_id("user"),
            "username": username,
            "email": email,
            "passwordHash": self._auth.hash_password(password),
            "role": "user",
            "createdAt": now_iso(),
        }
        try:
            await self._store.insert_one(COLLECTION, user)
        except DuplicateDocumentError:
            # Lost a race with a concurrent registration
            raise BadRequestException(
                message="ユーザーまたはメールアドレスが既に存在します",
                code="USER_EXISTS",
            )
        logger.info(f"Registered account: {email}")

        token = await self._issue_token(user)
        return {"id": user["id"], "username": username, "email": email}, token

    async def login(self, username: str, password: str) -> Tuple[Dict[str, Any], str]:
        """
        Check credentials. `username` may be a username or an email.

        Returns:
            (account summary with role, token)

        Raises:
            BadRequestException: Unknown user or wrong password
        """
        user = await self._store.find_one(
            COLLECTION, {"$or": [{"username": username}, {"email": username}]}
        )
        if not user:
            raise BadRequestException(message="ユーザーが見つかりません", code="USER_NOT_FOUND")

        if not self._auth.verify_password(password, user.get("passwordHash", "")):
            logger.warning(f"Failed login for: {username}")
            raise BadRequestException(message="パスワードが間違っています", code="INVALID_PASSWORD")

        token = await self._issue_token(user)
        summary = {
            "id": user.get("id", user["email"]),
            "username": user.get("username"),
            "email": user["email"],
            "role": user.get("role", "user"),
        }
        return summary, token

    async def logout(self, token: str) -> None:
        """Revoke a token."""
        await self._auth.revoke_token(token)

    async def get_current(self, email: str) -> Dict[str, Any]:
        """
        Get the current account without its password hash.

        Raises:
            NotFoundException: The account no longer exists
        """
        user = await self._store.find_one(COLLECTION, {"email": email})
        if not user:
            raise NotFoundException(message="ユーザーが見つかりません", code="USER_NOT_FOUND")
        return public_user(user)

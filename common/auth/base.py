"""
Abstract authentication provider interface.

Defines the contract that token-based auth providers implement, so route
handlers depend on the interface rather than on a concrete JWT library.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any


class AuthProvider(ABC):
    """
    Abstract authentication provider.

    Implementations own password hashing and token handling. User storage
    stays with the application.
    """

    @abstractmethod
    def hash_password(self, password: str) -> str:
        """Hash a plaintext password for storage."""
        pass

    @abstractmethod
    def verify_password(self, password: str, hashed: str) -> bool:
        """Check a plaintext password against a stored hash."""
        pass

    @abstractmethod
    async def create_token(self, user_id: str, **claims: Any) -> str:
        """
        Create an authentication token for a user.

        Args:
            user_id: The user's identifier (stored as `sub`)
            **claims: Additional claims to include in the token

        Returns:
            The authentication token string
        """
        pass

    @abstractmethod
    async def verify_token(self, token: str) -> Dict[str, Any]:
        """
        Verify an authentication token.

        Returns:
            Dictionary containing decoded token claims

        Raises:
            ValueError: If token is invalid, expired, or revoked
        """
        pass

    @abstractmethod
    async def revoke_token(self, token: str) -> None:
        """Revoke/invalidate a token."""
        pass

"""
JWT + bcrypt authentication provider.

- JWT tokens for stateless authentication
- bcrypt for password hashing
- In-memory token revocation

Example:
    auth = JWTAuth(secret="your-secret-key", access_token_expire_minutes=1440)

    password_hash = auth.hash_password("secret")
    token = await auth.create_token("taro@example.com", role="user")

    claims = await auth.verify_token(token)
    print(claims["sub"])  # taro@example.com
"""

import base64
import hashlib
from datetime import datetime, timedelta, timezone
from typing import Dict, Any

import bcrypt as bcrypt_lib
from jose import jwt, JWTError

from common.auth.base import AuthProvider


class JWTAuth(AuthProvider):
    """
    JWT + bcrypt authentication provider.

    Handles token creation/verification and password hashing. Revoked
    tokens are kept in process memory until restart.
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        access_token_expire_minutes: int = 24 * 60,
        bcrypt_rounds: int = 12,
    ):
        """
        Initialize JWT auth provider.

        Args:
            secret: Secret key for JWT signing
            algorithm: JWT algorithm (default: HS256)
            access_token_expire_minutes: Token expiration time
            bcrypt_rounds: bcrypt cost factor
        """
        self.secret = secret
        self.algorithm = algorithm
        self.access_token_expire = timedelta(minutes=access_token_expire_minutes)
        self.bcrypt_rounds = bcrypt_rounds

        self._revoked_tokens: set = set()

    def _prehash_password(self, password: str) -> str:
        """
        Pre-hash password with SHA-256 before bcrypt.

        Keeps passwords longer than bcrypt's 72-byte limit distinct.
        """
        sha256_hash = hashlib.sha256(password.encode("utf-8")).digest()
        return base64.b64encode(sha256_hash).decode("utf-8")

    def hash_password(self, password: str) -> str:
        """Hash a password using bcrypt with SHA-256 pre-hashing."""
        prehashed = self._prehash_password(password)
        salt = bcrypt_lib.gensalt(rounds=self.bcrypt_rounds)
        return bcrypt_lib.hashpw(prehashed.encode("utf-8"), salt).decode("utf-8")

    def verify_password(self, password: str, hashed: str) -> bool:
        """Verify a password against its hash."""
        if not hashed:
            return False
        prehashed = self._prehash_password(password)
        try:
            return bcrypt_lib.checkpw(prehashed.encode("utf-8"), hashed.encode("utf-8"))
        except ValueError:
            # Malformed hash
            return False

    async def create_token(self, user_id: str, **claims: Any) -> str:
        """Create a JWT token for the user."""
        now = datetime.now(timezone.utc)
        payload = {
            "sub": user_id,
            "exp": now + self.access_token_expire,
            "iat": now,
            **claims,
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    async def verify_token(self, token: str) -> Dict[str, Any]:
        """Verify and decode a JWT token."""
        if token in self._revoked_tokens:
            raise ValueError("Token has been revoked")

        try:
            return jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except JWTError as e:
            raise ValueError(f"Invalid token: {e}")

    async def revoke_token(self, token: str) -> None:
        """Add token to revocation list."""
        self._revoked_tokens.add(token)

"""
FastAPI authentication dependencies.

Provides factory functions to create auth dependencies that can be
injected into route handlers. Tokens are read from a cookie first and
from the Authorization header second.

Example:
    from common.auth import JWTAuth, create_auth_dependency

    auth = JWTAuth(secret="your-secret")
    require_auth = create_auth_dependency(lambda: auth)

    @app.get("/me")
    async def me(claims: dict = Depends(require_auth)):
        return {"user_id": claims["sub"]}
"""

import logging
from typing import Any, Callable, Dict, Optional

from fastapi import Request

from common.auth.base import AuthProvider
from common.utils.exceptions import UnauthorizedException, ForbiddenException

logger = logging.getLogger(__name__)


def extract_token(
    request: Request,
    cookie_name: str = "token",
    scheme: str = "Bearer",
) -> Optional[str]:
    """
    Extract a token from the auth cookie or the Authorization header.

    Returns:
        Token string, or None if neither source carries one
    """
    token = request.cookies.get(cookie_name)
    if token:
        return token

    authorization = request.headers.get("Authorization")
    if not authorization:
        return None

    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != scheme.lower():
        return None

    return parts[1]


def create_auth_dependency(
    get_auth_provider: Callable[[], AuthProvider],
    cookie_name: str = "token",
    scheme: str = "Bearer",
):
    """
    Factory to create FastAPI auth dependencies.

    Args:
        get_auth_provider: Callable that returns the AuthProvider instance
        cookie_name: Cookie holding the token
        scheme: Auth scheme prefix for the Authorization header

    Returns:
        A FastAPI dependency that returns the verified token claims
    """

    async def get_current_claims(request: Request) -> Dict[str, Any]:
        """
        Verify the request token and return its claims.

        Raises:
            UnauthorizedException 401: If no token is present
            ForbiddenException 403: If the token is invalid or revoked
        """
        token = extract_token(request, cookie_name, scheme)
        if not token:
            raise UnauthorizedException(
                message="アクセストークンが必要です",
                code="TOKEN_REQUIRED",
            )

        auth = get_auth_provider()
        try:
            claims = await auth.verify_token(token)
        except ValueError as e:
            logger.warning(f"Token verification failed: {e}")
            raise ForbiddenException(message="無効なトークンです", code="INVALID_TOKEN")

        if not claims.get("sub"):
            raise ForbiddenException(message="無効なトークンです", code="INVALID_TOKEN")

        return claims

    return get_current_claims


def create_admin_dependency(
    get_auth_provider: Callable[[], AuthProvider],
    is_admin_check: Callable[[Dict[str, Any]], bool],
    cookie_name: str = "token",
    scheme: str = "Bearer",
):
    """
    Factory to create admin-only auth dependency.

    Args:
        get_auth_provider: Callable that returns the AuthProvider instance
        is_admin_check: Callable that decides admin status from token claims
        cookie_name: Cookie holding the token
        scheme: Auth scheme prefix

    Returns:
        A FastAPI dependency that returns claims for admin users only
    """
    get_current_claims = create_auth_dependency(get_auth_provider, cookie_name, scheme)

    async def get_admin_claims(request: Request) -> Dict[str, Any]:
        """
        Raises:
            UnauthorizedException 401: If not authenticated
            ForbiddenException 403: If not an admin
        """
        claims = await get_current_claims(request)

        if not is_admin_check(claims):
            logger.warning(f"Admin access denied for: {claims.get('sub')}")
            raise ForbiddenException(message="管理者権限が必要です", code="ADMIN_REQUIRED")

        return claims

    return get_admin_claims

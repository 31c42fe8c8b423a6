"""
FastAPI router for account endpoints.

Tokens are delivered in the httpOnly `token` cookie.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response

from common.auth import extract_token
from profilesite.dependencies import (
    get_account_service,
    get_app_settings,
    require_auth,
)
from profilesite.schemas.auth import LoginRequest, RegisterRequest

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])

TOKEN_COOKIE = "token"


def set_token_cookie(response: Response, token: str) -> None:
    """Attach the auth cookie to a response."""
    settings = get_app_settings()
    response.set_cookie(
        key=TOKEN_COOKIE,
        value=token,
        httponly=True,
        secure=settings.is_production(),
        samesite="lax",
        max_age=settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES * 60,
    )


@router.post("/register", status_code=201)
async def register(body: RegisterRequest, response: Response):
    """
    Create an account and log it in.

    Returns 400 when the username or email is taken.
    """
    account_service = get_account_service()
    user, token = await account_service.register(body.username, body.email, body.password)

    set_token_cookie(response, token)
    return {"message": "ユーザー登録成功", "user": user}


@router.post("/login")
async def login(body: LoginRequest, response: Response):
    """Log in with a username or email."""
    account_service = get_account_service()
    user, token = await account_service.login(body.username, body.password)

    set_token_cookie(response, token)
    logger.info(f"Login: {user['email']}")
    return {"message": "ログイン成功", "user": user}


@router.post("/logout")
async def logout(request: Request, response: Response):
    """Clear the auth cookie and revoke the presented token."""
    token = extract_token(request, TOKEN_COOKIE)
    if token:
        account_service = get_account_service()
        await account_service.logout(token)

    response.delete_cookie(TOKEN_COOKIE)
    return {"message": "ログアウトしました"}


@router.get("/user")
async def current_user(claims: Annotated[dict, Depends(require_auth)]):
    """Get the current account without its password hash."""
    account_service = get_account_service()
    return await account_service.get_current(claims["sub"])

"""
Pydantic models for account requests.
"""

from pydantic import BaseModel, Field

__all__ = ["RegisterRequest", "LoginRequest"]


class RegisterRequest(BaseModel):
    """POST /api/register"""
    username: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3)
    password: str = Field(..., min_length=1)


class LoginRequest(BaseModel):
    """POST /api/login"""
    username: str = Field(..., description="Username or email")
    password: str

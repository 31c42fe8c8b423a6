"""
Common library for reusable infrastructure components.

Generic modules that carry no knowledge of profiles or events:

- config: Base settings class (pydantic-settings)
- database: Async MongoDB connection manager (Motor)
- auth: JWT + bcrypt authentication and FastAPI dependencies
- ai: Pluggable AI providers (Claude)
- utils: Standard responses and HTTP exceptions
"""

from common.config import BaseAppSettings
from common.database import MongoDB
from common.auth import AuthProvider, JWTAuth, create_auth_dependency
from common.ai import AIProvider, ClaudeProvider
from common.utils import (
    success_response,
    error_response,
    APIException,
    BadRequestException,
    UnauthorizedException,
    ForbiddenException,
    NotFoundException,
    InternalServerException,
    ServiceUnavailableException,
)

__all__ = [
    # Config
    "BaseAppSettings",
    # Database
    "MongoDB",
    # Auth
    "AuthProvider",
    "JWTAuth",
    "create_auth_dependency",
    # AI
    "AIProvider",
    "ClaudeProvider",
    # Utils
    "success_response",
    "error_response",
    "APIException",
    "BadRequestException",
    "UnauthorizedException",
    "ForbiddenException",
    "NotFoundException",
    "InternalServerException",
    "ServiceUnavailableException",
]

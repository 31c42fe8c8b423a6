"""
FastAPI dependencies for the profile site.

Services are created once at startup by init_all_services() and handed to
route handlers through the getters below.
"""

import logging
from typing import Optional

from common.ai.base import AIProvider
from common.ai.claude import ClaudeProvider
from common.auth import JWTAuth, create_admin_dependency, create_auth_dependency
from common.auth.base import AuthProvider
from common.utils.exceptions import ServiceUnavailableException
from profilesite.config import Settings, get_settings
from profilesite.services.ai import ProfileEnhancer
from profilesite.services.events import EventService
from profilesite.services.namecard import NamecardOCR
from profilesite.services.profiles import ProfileService
from profilesite.services.users import AccountService, UserService
from profilesite.storage import DocumentStore

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────
# Global service instances
# ─────────────────────────────────────────────────────────────────

_settings: Optional[Settings] = None

# Auth
_auth_provider: Optional[AuthProvider] = None
_account_service: Optional[AccountService] = None

# Content
_event_service: Optional[EventService] = None
_profile_service: Optional[ProfileService] = None
_user_service: Optional[UserService] = None

# Name card
_namecard_ocr: Optional[NamecardOCR] = None

# AI
_profile_enhancer: Optional[ProfileEnhancer] = None


# ─────────────────────────────────────────────────────────────────
# Initialization functions
# ─────────────────────────────────────────────────────────────────

def init_auth_services(
    store: DocumentStore,
    settings: Settings,
    auth_provider: Optional[AuthProvider] = None,
) -> None:
    """Initialize auth services."""
    global _auth_provider, _account_service

    if auth_provider is None:
        secret = settings.JWT_SECRET
        if not secret:
            logger.warning("JWT_SECRET is not set, using an insecure development secret")
            secret = "dev-secret-change-me"
        auth_provider = JWTAuth(
            secret=secret,
            algorithm=settings.JWT_ALGORITHM,
            access_token_expire_minutes=settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES,
        )

    _auth_provider = auth_provider
    _account_service = AccountService(store=store, auth=auth_provider)


def init_content_services(store: DocumentStore) -> None:
    """Initialize event, profile and user services."""
    global _event_service, _profile_service, _user_service

    _event_service = EventService(store=store)
    _profile_service = ProfileService(store=store)
    _user_service = UserService(store=store)


def init_namecard_services(settings: Settings, ocr: Optional[NamecardOCR] = None) -> None:
    """Initialize the name-card OCR."""
    global _namecard_ocr

    _namecard_ocr = ocr or NamecardOCR(languages=settings.OCR_LANGUAGES)


def init_ai_services(settings: Settings, ai_provider: Optional[AIProvider] = None) -> None:
    """
    Initialize AI services.

    Without a provider or CLAUDE_API_KEY the AI endpoints answer 503.
    """
    global _profile_enhancer

    if ai_provider is None and settings.CLAUDE_API_KEY:
        ai_provider = ClaudeProvider(api_key=settings.CLAUDE_API_KEY, model=settings.CLAUDE_MODEL)

    if ai_provider is None:
        logger.info("CLAUDE_API_KEY not set, AI endpoints disabled")
        _profile_enhancer = None
        return

    _profile_enhancer = ProfileEnhancer(ai_provider=ai_provider)


def init_all_services(
    store: DocumentStore,
    settings: Optional[Settings] = None,
    auth_provider: Optional[AuthProvider] = None,
    ai_provider: Optional[AIProvider] = None,
    ocr: Optional[NamecardOCR] = None,
) -> None:
    """
    Initialize all services at application startup.

    Args:
        store: Document store (Mongo or JSON files)
        settings: Application settings (defaults to environment settings)
        auth_provider: Override for the JWT provider
        ai_provider: Override for the Claude provider
        ocr: Override for the name-card OCR
    """
    global _settings

    _settings = settings or get_settings()

    init_auth_services(store, _settings, auth_provider)
    init_content_services(store)
    init_namecard_services(_settings, ocr)
    init_ai_services(_settings, ai_provider)


# ─────────────────────────────────────────────────────────────────
# Getters
# ─────────────────────────────────────────────────────────────────

def get_app_settings() -> Settings:
    """Get the settings the services were initialized with."""
    if _settings is None:
        raise RuntimeError("Services not initialized.")
    return _settings


def get_auth_provider() -> AuthProvider:
    """Get the auth provider."""
    if _auth_provider is None:
        raise RuntimeError("Auth services not initialized.")
    return _auth_provider


def get_account_service() -> AccountService:
    """Get account service instance."""
    if _account_service is None:
        raise RuntimeError("Auth services not initialized.")
    return _account_service


def get_event_service() -> EventService:
    """Get event service instance."""
    if _event_service is None:
        raise RuntimeError("Content services not initialized.")
    return _event_service


def get_profile_service() -> ProfileService:
    """Get profile service instance."""
    if _profile_service is None:
        raise RuntimeError("Content services not initialized.")
    return _profile_service


def get_user_service() -> UserService:
    """Get user service instance."""
    if _user_service is None:
        raise RuntimeError("Content services not initialized.")
    return _user_service


def get_namecard_ocr() -> NamecardOCR:
    """Get name-card OCR instance."""
    if _namecard_ocr is None:
        raise RuntimeError("Name-card services not initialized.")
    return _namecard_ocr


def get_profile_enhancer() -> ProfileEnhancer:
    """
    Get profile enhancer instance.

    Raises:
        ServiceUnavailableException: No AI provider configured
    """
    if _profile_enhancer is None:
        raise ServiceUnavailableException(
            message="Claude APIが設定されていません",
            code="AI_NOT_CONFIGURED",
        )
    return _profile_enhancer


# ─────────────────────────────────────────────────────────────────
# Auth dependencies
# ─────────────────────────────────────────────────────────────────

def is_admin(claims: dict) -> bool:
    """Admin check on token claims."""
    return claims.get("role") == "admin"


require_auth = create_auth_dependency(get_auth_provider)
require_admin = create_admin_dependency(get_auth_provider, is_admin)

"""
Profile site API routers.

All routers are mounted under /api by the application entrypoint.
"""

from profilesite.routers.events import router as events_router
from profilesite.routers.profiles import router as profiles_router
from profilesite.routers.users import router as users_router
from profilesite.routers.auth import router as auth_router
from profilesite.routers.namecard import router as namecard_router
from profilesite.routers.ai import router as ai_router

__all__ = [
    "events_router",
    "profiles_router",
    "users_router",
    "auth_router",
    "namecard_router",
    "ai_router",
]

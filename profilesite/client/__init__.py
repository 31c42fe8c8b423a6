"""
API client with a local JSON cache fallback.
"""

from profilesite.client.local_cache import LocalCache
from profilesite.client.api_client import ProfileSiteClient

__all__ = ["LocalCache", "ProfileSiteClient"]

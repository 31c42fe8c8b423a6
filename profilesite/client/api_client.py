"""
HTTP client for the profile site API with offline fallback.

Reads go to the network first and fall back to the local cache, then to
defaults. Writes are attempted against the network and always mirrored
into the local cache. There is no retry and no reconciliation.

Example:
    from profilesite.client import LocalCache, ProfileSiteClient

    client = ProfileSiteClient("http://localhost:3001/api", LocalCache(".cache"))
    events = await client.get_events()
    await client.add_event({"id": "event1", "title": "勉強会"})
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from profilesite.client.local_cache import EVENTS_KEY, PROFILES_KEY, USERS_KEY, LocalCache
from profilesite.defaults import default_events

logger = logging.getLogger(__name__)


class ProfileSiteClient:
    """Async client for events, profiles and users."""

    def __init__(
        self,
        base_url: str,
        cache: LocalCache,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize ProfileSiteClient.

        Args:
            base_url: API base URL including the /api prefix
            cache: Local cache used as fallback and write mirror
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self._base_url = base_url.rstrip("/")
        self._cache = cache
        self._timeout = timeout
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._base_url,
            timeout=self._timeout,
            transport=self._transport,
        )

    async def _fetch(self, path: str) -> Any:
        async with self._client() as client:
            response = await client.get(path)
            response.raise_for_status()
            return response.json()

    async def _send(self, method: str, path: str, payload: Any) -> bool:
        """Attempt a write. Failures are logged, never raised."""
        try:
            async with self._client() as client:
                response = await client.request(method, path, json=payload)
                response.raise_for_status()
            return True
        except httpx.HTTPError as e:
            logger.warning(f"API write failed ({method} {path}), keeping local copy: {e}")
            return False

    async def _read(self, path: str, cache_key: str, fallback: Any) -> Any:
        try:
            return await self._fetch(path)
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"API read failed ({path}), using local cache: {e}")

        cached = self._cache.get(cache_key)
        if cached is not None:
            return cached
        return fallback

    # ─────────────────────────────────────────────────────────────────
    # Events
    # ─────────────────────────────────────────────────────────────────

    async def get_events(self) -> List[Dict[str, Any]]:
        """Events from the API, the cache, or the defaults."""
        return await self._read("/events", EVENTS_KEY, default_events())

    async def save_events(self, events: List[Dict[str, Any]]) -> None:
        """Replace all events remotely and locally."""
        await self._send("PUT", "/events", events)
        self._cache.set(EVENTS_KEY, events)

    async def add_event(self, event: Dict[str, Any]) -> Dict[str, Any]:
        """Prepend an event and save the whole list."""
        events = await self.get_events()
        events.insert(0, event)
        await self.save_events(events)
        return event

    # ─────────────────────────────────────────────────────────────────
    # Profiles
    # ─────────────────────────────────────────────────────────────────

    async def get_profiles(self) -> List[Dict[str, Any]]:
        """Profiles from the API, the cache, or an empty list."""
        return await self._read("/profiles", PROFILES_KEY, [])

    async def save_profiles(self, profiles: List[Dict[str, Any]]) -> None:
        """Replace all profiles remotely and locally."""
        await self._send("PUT", "/profiles", profiles)
        self._cache.set(PROFILES_KEY, profiles)

    # ─────────────────────────────────────────────────────────────────
    # Users
    # ─────────────────────────────────────────────────────────────────

    async def get_users(self) -> Dict[str, Dict[str, Any]]:
        """Users keyed by email from the API, the cache, or an empty dict."""
        return await self._read("/users", USERS_KEY, {})

    async def save_users(self, users: Dict[str, Dict[str, Any]]) -> None:
        """Upsert an `{email: user}` mapping remotely and locally."""
        await self._send("POST", "/users", users)
        self._cache.set(USERS_KEY, users)

"""Unit tests for ProfileSiteClient network-first fallback behaviour."""

import json

import httpx
import pytest

from profilesite.client import LocalCache, ProfileSiteClient


# ─────────────────────────────────────────────────────────────────
# Fixtures
# ─────────────────────────────────────────────────────────────────


@pytest.fixture
def cache(tmp_path):
    return LocalCache(tmp_path / "cache")


def offline_transport():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    return httpx.MockTransport(handler)


def make_client(cache, handler):
    return ProfileSiteClient(
        "http://api.test/api",
        cache,
        transport=httpx.MockTransport(handler),
    )


# ─────────────────────────────────────────────────────────────────
# Reads
# ─────────────────────────────────────────────────────────────────


class TestReads:
    @pytest.mark.asyncio
    async def test_online_read(self, cache):
        def handler(request):
            assert request.url.path == "/api/profiles"
            return httpx.Response(200, json=[{"id": "p1"}])

        profiles = await make_client(cache, handler).get_profiles()

        assert profiles == [{"id": "p1"}]

    @pytest.mark.asyncio
    async def test_offline_uses_cache(self, cache):
        cache.set("profiles", [{"id": "cached"}])
        client = ProfileSiteClient("http://api.test/api", cache, transport=offline_transport())

        assert await client.get_profiles() == [{"id": "cached"}]

    @pytest.mark.asyncio
    async def test_error_status_uses_cache(self, cache):
        cache.set("users", {"a@example.com": {"name": "A"}})

        users = await make_client(cache, lambda r: httpx.Response(500)).get_users()

        assert users == {"a@example.com": {"name": "A"}}

    @pytest.mark.asyncio
    async def test_offline_without_cache_uses_defaults(self, cache):
        client = ProfileSiteClient("http://api.test/api", cache, transport=offline_transport())

        events = await client.get_events()
        profiles = await client.get_profiles()
        users = await client.get_users()

        assert [e["id"] for e in events] == ["event005", "event1756988138911"]
        assert profiles == []
        assert users == {}


# ─────────────────────────────────────────────────────────────────
# Writes
# ─────────────────────────────────────────────────────────────────


class TestWrites:
    @pytest.mark.asyncio
    async def test_write_mirrors_to_cache_when_offline(self, cache):
        client = ProfileSiteClient("http://api.test/api", cache, transport=offline_transport())

        await client.save_profiles([{"id": "p1"}])

        assert cache.get("profiles") == [{"id": "p1"}]

    @pytest.mark.asyncio
    async def test_save_profiles_uses_put(self, cache):
        seen = []

        def handler(request):
            seen.append((request.method, request.url.path, json.loads(request.content)))
            return httpx.Response(200, json={"success": True})

        await make_client(cache, handler).save_profiles([{"id": "p1"}])

        assert seen == [("PUT", "/api/profiles", [{"id": "p1"}])]
        assert cache.get("profiles") == [{"id": "p1"}]

    @pytest.mark.asyncio
    async def test_add_event_prepends(self, cache):
        saved = {}

        def handler(request):
            if request.method == "GET":
                return httpx.Response(200, json=[{"id": "old"}])
            saved["events"] = json.loads(request.content)
            return httpx.Response(200, json={"success": True})

        event = await make_client(cache, handler).add_event({"id": "new"})

        assert event == {"id": "new"}
        assert [e["id"] for e in saved["events"]] == ["new", "old"]
        assert [e["id"] for e in cache.get("communityEvents")] == ["new", "old"]


class TestLocalCache:
    def test_unreadable_entry_is_ignored(self, tmp_path):
        cache = LocalCache(tmp_path)
        (tmp_path / "profiles.json").write_text("{not json", encoding="utf-8")

        assert cache.get("profiles") is None

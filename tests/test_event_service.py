"""Unit tests for EventService on the file-backed store."""

from unittest.mock import AsyncMock, patch

import pytest

from common.utils.exceptions import NotFoundException
from profilesite.services.events import EventService
from profilesite.storage import JsonFileDocumentStore


# ─────────────────────────────────────────────────────────────────
# Fixtures
# ─────────────────────────────────────────────────────────────────


@pytest.fixture
def event_service(file_store):
    return EventService(file_store)


@pytest.fixture
def empty_event_service(tmp_path):
    store = JsonFileDocumentStore(str(tmp_path / "empty"), seed_defaults=False)
    return EventService(store), store


# ─────────────────────────────────────────────────────────────────
# list_events
# ─────────────────────────────────────────────────────────────────


class TestListEvents:
    @pytest.mark.asyncio
    async def test_seeds_defaults_when_empty(self, empty_event_service):
        service, store = empty_event_service

        events = await service.list_events()

        assert [e["id"] for e in events] == ["event005", "event1756988138911"]
        assert await store.count("events") == 2

    @pytest.mark.asyncio
    async def test_does_not_reseed(self, empty_event_service):
        service, store = empty_event_service

        await service.list_events()
        await service.list_events()

        assert await store.count("events") == 2

    @pytest.mark.asyncio
    async def test_overlapping_first_reads_seed_once(self, empty_event_service):
        service, store = empty_event_service

        # Both callers saw an empty collection before either seeded
        with patch.object(store, "find_all", AsyncMock(return_value=[])):
            await service.list_events()
            await service.list_events()

        assert await store.count("events") == 2


# ─────────────────────────────────────────────────────────────────
# save_event / replace_all
# ─────────────────────────────────────────────────────────────────


class TestSaveEvent:
    @pytest.mark.asyncio
    async def test_generates_id_and_created_at(self, event_service):
        event = await event_service.save_event({"title": "勉強会"})

        assert event["id"].startswith("event")
        assert event["id"][len("event"):].isdigit()
        assert event["createdAt"].endswith("Z")

    @pytest.mark.asyncio
    async def test_upserts_existing_id(self, event_service, file_store):
        await event_service.save_event({"id": "event005", "title": "新しい朝会"})

        events = await file_store.find_all("events", {"id": "event005"})
        assert len(events) == 1
        assert events[0]["title"] == "新しい朝会"
        # Untouched fields survive
        assert events[0]["capacity"] == 50

    @pytest.mark.asyncio
    async def test_generated_ids_are_unique(self, event_service):
        first = await event_service.save_event({"title": "A"})
        second = await event_service.save_event({"title": "B"})

        assert first["id"] != second["id"]

    @pytest.mark.asyncio
    async def test_replace_all_upserts_each(self, event_service, file_store):
        count = await event_service.replace_all([
            {"id": "event005", "title": "X"},
            {"id": "eventNew", "title": "Y"},
        ])

        assert count == 2
        assert await file_store.count("events") == 3


# ─────────────────────────────────────────────────────────────────
# Membership
# ─────────────────────────────────────────────────────────────────


class TestMembership:
    @pytest.mark.asyncio
    async def test_join_twice_keeps_single_entry(self, event_service):
        await event_service.add_participant("event005", "taro@example.com")
        event = await event_service.add_participant("event005", "taro@example.com")

        assert event["participants"].count("taro@example.com") == 1

    @pytest.mark.asyncio
    async def test_check_in(self, event_service):
        event = await event_service.check_in("event1756988138911", "tomura@hackjpn.com")

        assert event["checkedInUsers"] == ["tomura@hackjpn.com"]

    @pytest.mark.asyncio
    async def test_unknown_event(self, event_service):
        with pytest.raises(NotFoundException) as exc_info:
            await event_service.add_participant("missing", "a@example.com")

        assert exc_info.value.status_code == 404

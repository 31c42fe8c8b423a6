"""
Event service for community events.

Handles listing (with default seeding), upserts, whole-collection writes
and participant/check-in membership.
"""

import logging
from typing import Any, Dict, List

from common.utils.exceptions import NotFoundException
from profilesite.defaults import default_events
from profilesite.services.identifiers import now_iso, timestamp_id
from profilesite.storage import DocumentStore

logger = logging.getLogger(__name__)

COLLECTION = "events"


class EventService:
    """Manages community events."""

    def __init__(self, store: DocumentStore):
        """
        Initialize EventService.

        Args:
            store: Document store holding the events collection
        """
        self._store = store

    async def list_events(self) -> List[Dict[str, Any]]:
        """
        Get all events, seeding the defaults into an empty collection.

        Returns:
            List of event documents
        """
        events = await self._store.find_all(COLLECTION)
        if events:
            return events

        logger.info("Event collection is empty, inserting default events")
        # Concurrent first reads may both seed; upsert by id
        return [await self._store.upsert(COLLECTION, "id", event) for event in default_events()]

    async def save_event(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Upsert an event by id, or create it when no id is given.

        Args:
            data: Event fields

        Returns:
            The event as stored
        """
        if data.get("id"):
            return await self._store.upsert(COLLECTION, "id", data)

        event = {**data, "id": timestamp_id("event"), "createdAt": now_iso()}
        logger.info(f"Creating event: {event['id']}")
        return await self._store.insert_one(COLLECTION, event)

    async def replace_all(self, events: List[Dict[str, Any]]) -> int:
        """
        Upsert every event in the list.

        Events missing from the list are left untouched. Elements without
        an id get a generated one.

        Returns:
            Number of events written
        """
        for event in events:
            if not event.get("id"):
                event = {**event, "id": timestamp_id("event"), "createdAt": now_iso()}
            await self._store.upsert(COLLECTION, "id", event)

        logger.info(f"Bulk-saved {len(events)} events")
        return len(events)

    async def add_participant(self, event_id: str, user_id: str) -> Dict[str, Any]:
        """
        Add a user to an event's participants.

        Adding the same user twice leaves a single entry.

        Raises:
            NotFoundException: Unknown event id
        """
        event = await self._store.add_to_set(COLLECTION, {"id": event_id}, "participants", user_id)
        if event is None:
            raise NotFoundException(message="イベントが見つかりません", code="EVENT_NOT_FOUND")
        return event

    async def check_in(self, event_id: str, user_id: str) -> Dict[str, Any]:
        """
        Record a user's check-in for an event.

        Raises:
            NotFoundException: Unknown event id
        """
        event = await self._store.add_to_set(COLLECTION, {"id": event_id}, "checkedInUsers", user_id)
        if event is None:
            raise NotFoundException(message="イベントが見つかりません", code="EVENT_NOT_FOUND")
        return event

"""
FastAPI router for community events.
"""

import logging
from typing import List

from fastapi import APIRouter

from common.utils import success_response
from profilesite.dependencies import get_event_service
from profilesite.schemas.content import EventDocument, MembershipRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/events", tags=["events"])


@router.get("")
async def list_events():
    """
    Get all events.

    An empty collection is seeded with the default events first.
    """
    event_service = get_event_service()
    return await event_service.list_events()


@router.post("")
async def save_event(body: EventDocument):
    """Create an event, or upsert it when the body carries an id."""
    event_service = get_event_service()
    event = await event_service.save_event(body.model_dump(exclude_unset=True))
    return success_response(event=event)


@router.put("")
async def replace_events(body: List[EventDocument]):
    """Upsert every event in the array."""
    event_service = get_event_service()
    await event_service.replace_all([e.model_dump(exclude_unset=True) for e in body])
    return success_response()


@router.post("/{event_id}/participants")
async def join_event(event_id: str, body: MembershipRequest):
    """Add a participant. Joining twice keeps a single entry."""
    event_service = get_event_service()
    event = await event_service.add_participant(event_id, body.userId)
    return success_response(event=event)


@router.post("/{event_id}/check-in")
async def check_in(event_id: str, body: MembershipRequest):
    """Record a check-in for a user."""
    event_service = get_event_service()
    event = await event_service.check_in(event_id, body.userId)
    return success_response(event=event)

"""
Pydantic models for events and profiles.

Documents are open: unknown fields are kept and stored as sent. Only the
fields the backend relies on are typed.
"""

from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

__all__ = ["EventDocument", "ProfileDocument", "MembershipRequest"]


# =============================================================================
# Documents
# =============================================================================

class EventDocument(BaseModel):
    """Event body for POST/PUT /api/events."""
    model_config = ConfigDict(extra="allow")

    id: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    date: Optional[str] = None
    location: Optional[str] = None
    price: Optional[Union[str, int]] = None
    capacity: Optional[int] = None
    participants: Optional[List[str]] = None
    checkedInUsers: Optional[List[str]] = None
    createdBy: Optional[str] = None
    category: Optional[str] = None


class ProfileDocument(BaseModel):
    """Profile body for POST/PUT /api/profiles."""
    model_config = ConfigDict(extra="allow")

    id: Optional[str] = None
    name: Optional[str] = None
    englishName: Optional[str] = None
    age: Optional[Union[int, str]] = None
    occupation: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    skills: Optional[List[str]] = None
    image: Optional[str] = None
    originalPage: Optional[str] = None


# =============================================================================
# Actions
# =============================================================================

class MembershipRequest(BaseModel):
    """POST /api/events/{id}/participants and /check-in"""
    userId: str = Field(..., min_length=1, description="User identifier (usually email)")

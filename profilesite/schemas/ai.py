"""
Pydantic models for AI endpoints.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel

__all__ = ["ChatRequest", "GenerateProfileRequest"]


class ChatRequest(BaseModel):
    """POST /api/claude"""
    message: Optional[str] = None
    systemPrompt: Optional[str] = None


class GenerateProfileRequest(BaseModel):
    """POST /api/generate-profile"""
    profileData: Optional[Dict[str, Any]] = None

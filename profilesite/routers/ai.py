"""
FastAPI router for Claude-backed endpoints.
"""

import logging

from fastapi import APIRouter

from common.utils import success_response
from common.utils.exceptions import BadRequestException, InternalServerException
from profilesite.dependencies import get_profile_enhancer
from profilesite.schemas.ai import ChatRequest, GenerateProfileRequest

logger = logging.getLogger(__name__)

router = APIRouter(tags=["ai"])


@router.post("/claude")
async def claude_chat(body: ChatRequest):
    """Send one message to Claude."""
    enhancer = get_profile_enhancer()

    if not body.message:
        raise BadRequestException(message="メッセージが必要です", code="MESSAGE_REQUIRED")

    try:
        reply = await enhancer.chat(body.message, body.systemPrompt)
    except Exception as e:
        logger.error(f"Claude API error: {e}")
        raise InternalServerException(
            message="Claude APIの呼び出しに失敗しました",
            code="AI_ERROR",
            details=str(e),
        )

    return success_response(response=reply)


@router.post("/generate-profile")
async def generate_profile(body: GenerateProfileRequest):
    """Suggest an enhanced bio, skills and strengths for a profile."""
    enhancer = get_profile_enhancer()

    profile = body.profileData
    if not profile or not profile.get("name") or not profile.get("bio"):
        raise BadRequestException(message="プロフィールデータが不完全です", code="INCOMPLETE_PROFILE")

    try:
        enhanced = await enhancer.enhance(profile)
    except Exception as e:
        logger.error(f"Profile generation error: {e}")
        raise InternalServerException(
            message="プロフィール生成に失敗しました",
            code="AI_ERROR",
            details=str(e),
        )

    return success_response(originalProfile=profile, enhancedProfile=enhanced)

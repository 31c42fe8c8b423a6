"""
AI profile enhancement using Claude.

Builds a Japanese prompt from profile fields and asks the model for a
JSON suggestion. Replies that are not valid JSON are wrapped as a plain
enhanced bio.
"""

import json
import logging
from typing import Any, Dict, Optional

from common.ai.base import AIProvider

logger = logging.getLogger(__name__)

DEFAULT_SYSTEM_PROMPT = "あなたは親切で知識豊富なAIアシスタントです。"

ENHANCE_SYSTEM_PROMPT = """
あなたはプロフェッショナルなプロフィール作成の専門家です。
提供された基本情報から、魅力的で詳細なプロフィール情報を生成してください。

以下の形式でJSONレスポンスを返してください：
{
    "enhancedBio": "より詳細で魅力的な自己紹介文",
    "suggestedSkills": ["追加推奨スキル1", "追加推奨スキル2"],
    "professionalSummary": "プロフェッショナルサマリー",
    "keyStrengths": ["強み1", "強み2", "強み3"]
}
"""


def build_profile_prompt(profile: Dict[str, Any]) -> str:
    """Render the profile fields as the user message."""
    lines = ["以下のプロフィール情報を分析し、改善提案を行ってください：", ""]
    lines.append(f"名前: {profile['name']}")
    if profile.get("age"):
        lines.append(f"年齢: {profile['age']}歳")
    lines.append(f"職業: {profile.get('occupation') or ''}")
    if profile.get("location"):
        lines.append(f"居住地: {profile['location']}")
    lines.append(f"自己紹介: {profile['bio']}")
    if profile.get("skills"):
        lines.append(f"現在のスキル: {', '.join(str(s) for s in profile['skills'])}")
    return "\n".join(lines)


def parse_enhancement(text: str) -> Dict[str, Any]:
    """Parse the model's JSON reply, falling back to the raw text as the bio."""
    try:
        parsed = json.loads(text)
    except json.JSONDecodeError:
        parsed = None

    if isinstance(parsed, dict):
        return parsed

    logger.info("Enhancement reply was not a JSON object, using raw text")
    return {
        "enhancedBio": text,
        "suggestedSkills": [],
        "professionalSummary": "",
        "keyStrengths": [],
    }


class ProfileEnhancer:
    """Free-form chat and profile enhancement on top of an AI provider."""

    def __init__(self, ai_provider: AIProvider):
        """
        Initialize ProfileEnhancer.

        Args:
            ai_provider: AI provider for completions
        """
        self._ai = ai_provider

    async def chat(self, message: str, system_prompt: Optional[str] = None) -> str:
        """Send a single message with an optional system prompt."""
        return await self._ai.chat(
            message=message,
            system_prompt=system_prompt or DEFAULT_SYSTEM_PROMPT,
            max_tokens=4000,
        )

    async def enhance(self, profile: Dict[str, Any]) -> Dict[str, Any]:
        """
        Ask for an enhanced bio, suggested skills, a summary and strengths.

        Args:
            profile: Profile data with at least name and bio

        Returns:
            dict with enhancedBio, suggestedSkills, professionalSummary,
            keyStrengths
        """
        reply = await self._ai.chat(
            message=build_profile_prompt(profile),
            system_prompt=ENHANCE_SYSTEM_PROMPT,
            max_tokens=2000,
        )
        return parse_enhancement(reply)

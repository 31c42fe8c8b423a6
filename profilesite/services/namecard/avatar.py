"""
Placeholder avatar images for imported profiles.
"""

import random
from typing import Optional
from urllib.parse import quote

MALE_INDICATORS = (
    "太郎", "一郎", "二郎", "三郎", "四郎", "五郎", "六郎", "七郎", "八郎", "九郎", "十郎",
    "光", "健", "誠", "洋", "博", "雄", "男", "夫", "彦", "介", "助", "朗", "輝", "大", "翔",
)

FEMALE_INDICATORS = (
    "子", "美", "恵", "香", "奈", "菜", "花", "華", "愛", "彩", "咲", "千", "沙", "紗",
    "里", "理", "絵", "江", "代", "世", "ちか", "あやか", "由", "佳", "加", "麻",
)

BACKGROUND_COLORS = ("667eea", "764ba2", "4CAF50", "2196F3", "ff6b6b", "ffa726")

ICONS = {
    "male": "👨‍💼",
    "female": "👩‍💼",
    "unknown": "👤",
}

PLACEHOLDER_BASE_URL = "https://via.placeholder.com/300x300"


def estimate_gender(name: Optional[str]) -> str:
    """
    Guess `male`, `female` or `unknown` from indicator characters in a name.

    Male indicators are checked first.
    """
    if not name:
        return "unknown"

    if any(indicator in name for indicator in MALE_INDICATORS):
        return "male"

    if any(indicator in name for indicator in FEMALE_INDICATORS):
        return "female"

    return "unknown"


def sample_image_url(
    name: Optional[str],
    gender: str = "unknown",
    rng: Optional[random.Random] = None,
) -> str:
    """
    Build a placeholder image URL with an icon and a random background colour.

    Args:
        name: Display name shown on the image
        gender: Result of estimate_gender
        rng: Random source (module-level random by default)
    """
    color = (rng or random).choice(BACKGROUND_COLORS)
    icon = ICONS.get(gender, ICONS["unknown"])
    label = quote(f"{icon} {name or '名前不明'}", safe="-_.!~*'()")
    return f"{PLACEHOLDER_BASE_URL}/{color}/ffffff?text={label}"

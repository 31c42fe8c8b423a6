"""
Heuristic extraction of profile fields from business-card text.

Each line goes through the checks in order (email, phone, website,
company, name, occupation). The first check that fills a still-empty field
consumes the line. A check whose field is already filled lets the line fall
through to the next one.
"""

import logging
import re
from typing import Dict

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"([a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,})")
PHONE_PATTERN = re.compile(r"([0-9]{2,4}-[0-9]{2,4}-[0-9]{4}|[0-9]{10,11})")
URL_PATTERN = re.compile(r"(https?://\S+|www\.\S+)")

# Hiragana, katakana, CJK unified ideographs
JAPANESE_PATTERN = re.compile(r"[\u3040-\u309F\u30A0-\u30FF\u4E00-\u9FFF]")

JAPANESE_COMPANY_SUFFIXES = ("株式会社", "有限会社", "合同会社")
COMPANY_SUFFIXES = JAPANESE_COMPANY_SUFFIXES + ("Corporation", "Inc.", "Ltd.")

TITLE_KEYWORDS = (
    "部長", "課長", "主任", "代表", "社長", "取締役",
    "マネージャー", "エンジニア", "ディレクター",
    "Manager", "Director", "CEO", "CTO",
)

PROFILE_FIELDS = ("name", "company", "occupation", "email", "phone", "website", "location")


def parse_profile_from_text(text: str) -> Dict[str, str]:
    """
    Extract profile fields from OCR text.

    Args:
        text: Raw OCR output

    Returns:
        dict with name, company, occupation, email, phone, website and
        location. Unmatched fields are empty strings.
    """
    profile = {field: "" for field in PROFILE_FIELDS}
    lines = [line.strip() for line in text.split("\n")]

    for line in lines:
        if not line:
            continue

        match = EMAIL_PATTERN.search(line)
        if match and not profile["email"]:
            profile["email"] = match.group(1)
            continue

        match = PHONE_PATTERN.search(line)
        if match and not profile["phone"]:
            profile["phone"] = match.group(1)
            continue

        match = URL_PATTERN.search(line)
        if match and not profile["website"]:
            profile["website"] = match.group(1)
            continue

        if not profile["company"] and any(s in line for s in COMPANY_SUFFIXES):
            profile["company"] = line
            continue

        if (
            not profile["name"]
            and JAPANESE_PATTERN.search(line)
            and not any(s in line for s in JAPANESE_COMPANY_SUFFIXES)
        ):
            profile["name"] = line
            continue

        if not profile["occupation"] and any(k in line for k in TITLE_KEYWORDS):
            profile["occupation"] = line

    logger.debug(f"Parsed name-card fields: {profile}")
    return profile

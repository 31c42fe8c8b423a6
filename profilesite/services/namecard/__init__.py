"""
Name-card import: OCR, text heuristics and placeholder avatars.
"""

from profilesite.services.namecard.parser import parse_profile_from_text
from profilesite.services.namecard.avatar import estimate_gender, sample_image_url
from profilesite.services.namecard.ocr import NamecardOCR

__all__ = [
    "parse_profile_from_text",
    "estimate_gender",
    "sample_image_url",
    "NamecardOCR",
]

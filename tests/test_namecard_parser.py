"""Unit tests for the business-card text heuristics and avatar helpers."""

import random
from urllib.parse import unquote

from profilesite.services.namecard import (
    estimate_gender,
    parse_profile_from_text,
    sample_image_url,
)


# ─────────────────────────────────────────────────────────────────
# parse_profile_from_text
# ─────────────────────────────────────────────────────────────────


class TestParseProfileFromText:
    def test_full_card(self):
        text = "\n".join([
            "株式会社Example",
            "山田花子",
            "営業部長",
            "hanako@example.co.jp",
            "03-1234-5678",
            "https://example.co.jp",
        ])

        profile = parse_profile_from_text(text)

        assert profile["company"] == "株式会社Example"
        assert profile["name"] == "山田花子"
        assert profile["occupation"] == "営業部長"
        assert profile["email"] == "hanako@example.co.jp"
        assert profile["phone"] == "03-1234-5678"
        assert profile["website"] == "https://example.co.jp"
        assert profile["location"] == ""

    def test_email_line_goes_to_email_only(self):
        profile = parse_profile_from_text("taro@example.com\n田中太郎")

        assert profile["email"] == "taro@example.com"
        assert "taro@example.com" not in (
            profile["name"], profile["company"], profile["occupation"],
            profile["phone"], profile["website"],
        )
        assert profile["name"] == "田中太郎"

    def test_company_assigned_once(self):
        text = "株式会社Example\n有限会社Second\n鈴木一郎"

        profile = parse_profile_from_text(text)

        assert profile["company"] == "株式会社Example"
        # The second company line is not a name either
        assert profile["name"] == "鈴木一郎"

    def test_english_company_suffix(self):
        profile = parse_profile_from_text("Example Inc.\nJohn Smith\nCTO")

        assert profile["company"] == "Example Inc."
        assert profile["occupation"] == "CTO"
        # No Japanese script, so no name
        assert profile["name"] == ""

    def test_filled_field_lets_line_fall_through(self):
        # Second email-looking line is ignored by the email check and
        # has no Japanese text, so it stays unassigned
        text = "a@example.com\nb@example.com"

        profile = parse_profile_from_text(text)

        assert profile["email"] == "a@example.com"
        assert profile["name"] == ""

    def test_phone_without_hyphens(self):
        profile = parse_profile_from_text("TEL 09012345678")
        assert profile["phone"] == "09012345678"

    def test_www_url(self):
        profile = parse_profile_from_text("www.example.jp")
        assert profile["website"] == "www.example.jp"

    def test_blank_lines_ignored(self):
        profile = parse_profile_from_text("\n\n   \n佐藤美咲\n\n")
        assert profile["name"] == "佐藤美咲"

    def test_empty_text(self):
        profile = parse_profile_from_text("")
        assert all(value == "" for value in profile.values())

    def test_first_japanese_line_is_name(self):
        profile = parse_profile_from_text("佐藤\n代表取締役社長")

        assert profile["name"] == "佐藤"
        assert profile["occupation"] == "代表取締役社長"


# ─────────────────────────────────────────────────────────────────
# Avatar helpers
# ─────────────────────────────────────────────────────────────────


class TestEstimateGender:
    def test_male_indicator(self):
        assert estimate_gender("田中太郎") == "male"

    def test_female_indicator(self):
        assert estimate_gender("山本さくら子") == "female"

    def test_male_checked_first(self):
        # 大 (male) and 子 (female) both present
        assert estimate_gender("大子") == "male"

    def test_unknown(self):
        assert estimate_gender("John") == "unknown"
        assert estimate_gender("") == "unknown"
        assert estimate_gender(None) == "unknown"


class TestSampleImageUrl:
    def test_uses_palette_and_icon(self):
        url = sample_image_url("田中太郎", "male", rng=random.Random(0))

        assert url.startswith("https://via.placeholder.com/300x300/")
        color = url.split("/")[4]
        assert color in ("667eea", "764ba2", "4CAF50", "2196F3", "ff6b6b", "ffa726")
        assert unquote(url.split("?text=")[1]) == "👨‍💼 田中太郎"

    def test_missing_name(self):
        url = sample_image_url("", rng=random.Random(1))
        assert unquote(url.split("?text=")[1]) == "👤 名前不明"

"""
Static profile site generator.

A pure transform from a list of profiles to HTML pages: `index.html` with
one card per profile plus `<id>.html` for every profile without an
`originalPage`. Identical input always yields identical output.

Example:
    from profilesite.sitegen import load_profiles, write_site

    profiles = load_profiles("profiles.json")
    summary = write_site(profiles, ".")
"""

import html
import json
import logging
import re
from pathlib import Path
from typing import Any, Dict, List, Union

from profilesite.sitegen.templates import (
    INDEX_TEMPLATE,
    PROFILE_CARD_TEMPLATE,
    PROFILE_TEMPLATE,
    SKILL_TAG_TEMPLATE,
    SKILLS_SECTION_TEMPLATE,
)

logger = logging.getLogger(__name__)

PLACEHOLDER_PATTERN = re.compile(r"\{\{([A-Z_]+)\}\}")
AGE_UNDISCLOSED = "非公開"


def fill(template: str, values: Dict[str, str]) -> str:
    """
    Substitute `{{KEY}}` placeholders in a single pass.

    Substituted text is never rescanned, so values that contain
    placeholder syntax are left as they are.
    """
    return PLACEHOLDER_PATTERN.sub(lambda m: values.get(m.group(1), m.group(0)), template)


def _text(profile: Dict[str, Any], field: str) -> str:
    value = profile.get(field)
    return html.escape(str(value)) if value not in (None, "") else ""


def profile_link(profile: Dict[str, Any]) -> str:
    """Card link target: the pre-existing page, or the generated one."""
    return profile.get("originalPage") or f"{profile['id']}.html"


def render_skills_section(skills: List[Any]) -> str:
    """Skills block, or an empty string for no skills."""
    if not skills:
        return ""
    tags = "".join(fill(SKILL_TAG_TEMPLATE, {"SKILL": html.escape(str(s))}) for s in skills)
    return fill(SKILLS_SECTION_TEMPLATE, {"SKILL_TAGS": tags})


def render_card(profile: Dict[str, Any]) -> str:
    """Render one index card."""
    english_name = ""
    if profile.get("englishName"):
        english_name = f'<span class="profile-english">{_text(profile, "englishName")}</span>'

    age_line = ""
    if profile.get("age"):
        age_line = f'                <div class="profile-age">{_text(profile, "age")}歳</div>\n'

    return fill(PROFILE_CARD_TEMPLATE, {
        "LINK": html.escape(profile_link(profile)),
        "IMAGE": _text(profile, "image"),
        "NAME": _text(profile, "name"),
        "ENGLISH_NAME": english_name,
        "AGE_LINE": age_line,
        "OCCUPATION": _text(profile, "occupation"),
        "BIO": _text(profile, "bio"),
    })


def render_index(profiles: List[Dict[str, Any]]) -> str:
    """Render the listing page."""
    cards = "".join(render_card(p) for p in profiles)
    return fill(INDEX_TEMPLATE, {"PROFILES": cards.rstrip("\n")})


def render_profile_page(profile: Dict[str, Any]) -> str:
    """Render a single profile page."""
    age = f"{_text(profile, 'age')}歳" if profile.get("age") else AGE_UNDISCLOSED

    return fill(PROFILE_TEMPLATE, {
        "NAME": _text(profile, "name"),
        "AGE": age,
        "OCCUPATION": _text(profile, "occupation"),
        "LOCATION": _text(profile, "location"),
        "BIO": _text(profile, "bio"),
        "IMAGE": _text(profile, "image"),
        "SKILLS_SECTION": render_skills_section(profile.get("skills") or []),
    })


def render_site(profiles: List[Dict[str, Any]]) -> Dict[str, str]:
    """
    Render every page of the site.

    Args:
        profiles: Profiles in display order

    Returns:
        Mapping of output filename to HTML, index.html first
    """
    pages = {"index.html": render_index(profiles)}

    for profile in profiles:
        if profile.get("originalPage"):
            logger.info(f"Using existing page: {profile.get('name')} -> {profile['originalPage']}")
            continue

        profile_id = str(profile["id"])
        if "/" in profile_id or "\\" in profile_id:
            logger.warning(f"Skipping profile with unsafe id: {profile_id!r}")
            continue

        pages[f"{profile_id}.html"] = render_profile_page(profile)

    return pages


def load_profiles(path: Union[str, Path]) -> List[Dict[str, Any]]:
    """Read a profiles.json list."""
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def write_site(profiles: List[Dict[str, Any]], output_dir: Union[str, Path]) -> Dict[str, Any]:
    """
    Render the site and write it to a directory.

    Returns:
        Summary with the written filenames, the page count and the number
        of profiles linked to an existing page
    """
    directory = Path(output_dir)
    directory.mkdir(parents=True, exist_ok=True)

    pages = render_site(profiles)
    for filename, content in pages.items():
        (directory / filename).write_text(content, encoding="utf-8")

    linked = sum(1 for p in profiles if p.get("originalPage"))
    summary = {
        "files": list(pages),
        "pages": len(pages),
        "linked": linked,
    }
    logger.info(f"Site generated: {summary['pages']} pages, {linked} existing pages linked")
    return summary

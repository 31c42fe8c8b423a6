"""
Static site generator for profile pages.
"""

from profilesite.sitegen.generator import (
    load_profiles,
    render_index,
    render_profile_page,
    render_site,
    write_site,
)

__all__ = [
    "load_profiles",
    "render_index",
    "render_profile_page",
    "render_site",
    "write_site",
]

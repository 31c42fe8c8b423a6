#!/usr/bin/env python3
"""
Generate the static profile site.

This script:
1. Reads profiles.json from the current directory
2. Writes index.html plus one <id>.html per profile next to it
3. Skips pages for profiles that link to an existing originalPage

Usage:
    python scripts/generate_site.py
"""

import logging
import os
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from profilesite.sitegen import load_profiles, write_site

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("generate_site")

PROFILES_FILE = "profiles.json"


def main() -> int:
    """Generate the site into the working directory."""
    source = Path.cwd() / PROFILES_FILE
    if not source.exists():
        logger.error(f"{PROFILES_FILE} not found in {Path.cwd()}")
        return 1

    profiles = load_profiles(source)
    summary = write_site(profiles, source.parent)

    logger.info(f"Generated pages: {summary['pages']} (index + {summary['pages'] - 1} profiles)")
    logger.info(f"Existing page links: {summary['linked']}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

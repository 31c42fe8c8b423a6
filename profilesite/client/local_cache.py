"""
Key-value cache backed by JSON files.

Each key is stored as `<directory>/<key>.json`.
"""

import json
import logging
from pathlib import Path
from typing import Any, Optional, Union

logger = logging.getLogger(__name__)

EVENTS_KEY = "communityEvents"
PROFILES_KEY = "profiles"
USERS_KEY = "users"


class LocalCache:
    """Persists client-side copies of API data."""

    def __init__(self, directory: Union[str, Path]):
        self._directory = Path(directory)

    def _path(self, key: str) -> Path:
        return self._directory / f"{key}.json"

    def get(self, key: str) -> Optional[Any]:
        """Return the cached value, or None when absent or unreadable."""
        path = self._path(key)
        if not path.exists():
            return None

        try:
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Ignoring unreadable cache entry {key}: {e}")
            return None

    def set(self, key: str, value: Any) -> None:
        """Store a value, replacing any previous one."""
        self._directory.mkdir(parents=True, exist_ok=True)
        with open(self._path(key), "w", encoding="utf-8") as f:
            json.dump(value, f, indent=2, ensure_ascii=False)

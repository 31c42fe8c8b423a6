"""
Flat JSON file document store.

Each collection lives in `<data_dir>/<collection>.json` as a JSON array.
Every write rewrites the whole file. Reads and writes are synchronous and
contain no awaits, so a single operation is never interleaved with another
on the same event loop.
"""

import copy
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

from profilesite.defaults import default_events
from profilesite.storage.base import (
    UNIQUE_FIELDS,
    DocumentStore,
    DuplicateDocumentError,
    SortSpec,
)

logger = logging.getLogger(__name__)

COLLECTIONS = ("events", "profiles", "users")


def matches(document: Dict[str, Any], query: Optional[Dict[str, Any]]) -> bool:
    """Evaluate an equality query (with optional $or) against a document."""
    if not query:
        return True

    for field, expected in query.items():
        if field == "$or":
            if not any(matches(document, clause) for clause in expected):
                return False
            continue

        actual = document.get(field)
        if isinstance(actual, list) and not isinstance(expected, list):
            if expected not in actual:
                return False
        elif actual != expected:
            return False

    return True


def sort_documents(documents: List[Dict[str, Any]], sort: SortSpec) -> List[Dict[str, Any]]:
    """
    Sort like Mongo: missing values first ascending, last descending.

    Values compare as strings so mixed types never raise.
    """
    result = list(documents)
    # Apply keys from least to most significant; sorted() is stable
    for field, direction in reversed(sort):
        result.sort(
            key=lambda d: (d.get(field) is not None, str(d.get(field)) if d.get(field) is not None else ""),
            reverse=direction < 0,
        )
    return result


class JsonFileDocumentStore(DocumentStore):
    """Document store that keeps each collection in a JSON file."""

    def __init__(self, data_dir: str, seed_defaults: bool = True):
        """
        Initialize the file store and create missing collection files.

        Args:
            data_dir: Directory holding the JSON files
            seed_defaults: Write the default events into a new events.json
        """
        self._data_dir = Path(data_dir)
        self._data_dir.mkdir(parents=True, exist_ok=True)

        for name in COLLECTIONS:
            path = self._path(name)
            if not path.exists():
                initial = default_events() if (name == "events" and seed_defaults) else []
                self._write(name, initial)
                logger.info(f"Created data file: {path}")

    def _path(self, collection: str) -> Path:
        return self._data_dir / f"{collection}.json"

    def _read(self, collection: str) -> List[Dict[str, Any]]:
        path = self._path(collection)
        if not path.exists():
            return []

        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)

        # Older users.json files are an object keyed by email
        if isinstance(data, dict):
            return [{**user, "email": email} for email, user in data.items()]

        return data

    def _write(self, collection: str, documents: List[Dict[str, Any]]) -> None:
        path = self._path(collection)
        tmp_path = path.with_suffix(".json.tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(documents, f, indent=2, ensure_ascii=False)
        os.replace(tmp_path, path)

    async def find_all(
        self,
        collection: str,
        query: Optional[Dict[str, Any]] = None,
        sort: Optional[SortSpec] = None,
    ) -> List[Dict[str, Any]]:
        documents = [d for d in self._read(collection) if matches(d, query)]
        if sort:
            documents = sort_documents(documents, sort)
        return copy.deepcopy(documents)

    async def find_one(self, collection: str, query: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        for document in self._read(collection):
            if matches(document, query):
                return copy.deepcopy(document)
        return None

    async def upsert(self, collection: str, key: str, document: Dict[str, Any]) -> Dict[str, Any]:
        documents = self._read(collection)
        value = document[key]

        for index, existing in enumerate(documents):
            if existing.get(key) == value:
                documents[index] = {**existing, **document}
                stored = documents[index]
                break
        else:
            stored = dict(document)
            documents.append(stored)

        self._write(collection, documents)
        return copy.deepcopy(stored)

    async def insert_one(self, collection: str, document: Dict[str, Any]) -> Dict[str, Any]:
        documents = self._read(collection)
        for field in UNIQUE_FIELDS.get(collection, ()):
            value = document.get(field)
            if value is not None and any(d.get(field) == value for d in documents):
                raise DuplicateDocumentError(collection, field)

        stored = dict(document)
        documents.append(stored)
        self._write(collection, documents)
        return copy.deepcopy(stored)

    async def update_one(
        self,
        collection: str,
        query: Dict[str, Any],
        fields: Dict[str, Any],
    ) -> Optional[Dict[str, Any]]:
        documents = self._read(collection)
        for document in documents:
            if matches(document, query):
                document.update(fields)
                self._write(collection, documents)
                return copy.deepcopy(document)
        return None

    async def add_to_set(
        self,
        collection: str,
        query: Dict[str, Any],
        field: str,
        value: Any,
    ) -> Optional[Dict[str, Any]]:
        documents = self._read(collection)
        for document in documents:
            if matches(document, query):
                values = document.setdefault(field, [])
                if value not in values:
                    values.append(value)
                    self._write(collection, documents)
                return copy.deepcopy(document)
        return None

    async def count(self, collection: str, query: Optional[Dict[str, Any]] = None) -> int:
        return sum(1 for d in self._read(collection) if matches(d, query))

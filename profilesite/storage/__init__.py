"""
Document storage backends.

- DocumentStore: abstract interface used by the services
- MongoDocumentStore: Motor-backed store
- JsonFileDocumentStore: flat JSON files, one per collection
"""

from profilesite.storage.base import (
    UNIQUE_FIELDS,
    DocumentStore,
    DuplicateDocumentError,
    SortSpec,
)
from profilesite.storage.mongo_store import MongoDocumentStore
from profilesite.storage.file_store import JsonFileDocumentStore

__all__ = [
    "DocumentStore",
    "DuplicateDocumentError",
    "SortSpec",
    "UNIQUE_FIELDS",
    "MongoDocumentStore",
    "JsonFileDocumentStore",
]

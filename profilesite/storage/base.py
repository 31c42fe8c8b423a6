"""
Abstract document store interface.

Documents are plain dicts keyed by an explicit identifier field (`id` for
events and profiles, `email` for users). Store-internal identifiers such
as Mongo's `_id` never leave the store.

Queries support field equality (a list field matches when it contains the
value) and a top-level ``$or`` of such clauses.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Tuple

# [(field, 1 | -1), ...]
SortSpec = List[Tuple[str, int]]

# Fields that identify a document. At most one document per value;
# documents without the field are not constrained.
UNIQUE_FIELDS: Dict[str, Tuple[str, ...]] = {
    "events": ("id",),
    "profiles": ("id",),
    "users": ("email", "username"),
}


class DuplicateDocumentError(Exception):
    """An insert would repeat a unique field value."""

    def __init__(self, collection: str, field: Optional[str] = None):
        self.collection = collection
        self.field = field
        super().__init__(f"Duplicate {field or 'key'} in {collection}")


class DocumentStore(ABC):
    """Abstract document store."""

    @abstractmethod
    async def find_all(
        self,
        collection: str,
        query: Optional[Dict[str, Any]] = None,
        sort: Optional[SortSpec] = None,
    ) -> List[Dict[str, Any]]:
        """
        Return all documents matching a query.

        Args:
            collection: Collection name
            query: Filter, or None for every document
            sort: Optional sort specification

        Returns:
            List of documents
        """
        pass

    @abstractmethod
    async def find_one(
        self,
        collection: str,
        query: Dict[str, Any],
    ) -> Optional[Dict[str, Any]]:
        """Return the first document matching a query, or None."""
        pass

    @abstractmethod
    async def upsert(
        self,
        collection: str,
        key: str,
        document: Dict[str, Any],
    ) -> Dict[str, Any]:
        """
        Create or update the document whose `key` field equals document[key].

        Fields present in `document` overwrite stored fields; other stored
        fields are kept.

        Returns:
            The stored document after the write
        """
        pass

    @abstractmethod
    async def insert_one(self, collection: str, document: Dict[str, Any]) -> Dict[str, Any]:
        """
        Insert a new document and return it.

        Raises:
            DuplicateDocumentError: A UNIQUE_FIELDS value is already taken
        """
        pass

    @abstractmethod
    async def update_one(
        self,
        collection: str,
        query: Dict[str, Any],
        fields: Dict[str, Any],
    ) -> Optional[Dict[str, Any]]:
        """
        Set fields on the first matching document.

        Returns:
            The updated document, or None if nothing matched
        """
        pass

    @abstractmethod
    async def add_to_set(
        self,
        collection: str,
        query: Dict[str, Any],
        field: str,
        value: Any,
    ) -> Optional[Dict[str, Any]]:
        """
        Append value to a list field unless it is already present.

        Returns:
            The updated document, or None if nothing matched
        """
        pass

    @abstractmethod
    async def count(self, collection: str, query: Optional[Dict[str, Any]] = None) -> int:
        """Count documents matching a query."""
        pass

    async def ensure_indexes(self) -> None:
        """Create backend indexes for UNIQUE_FIELDS. No-op by default."""
        return None

    async def close(self) -> None:
        """Release backend resources."""
        return None

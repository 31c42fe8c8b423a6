"""Unit tests for the JSON file document store."""

import json

import pytest

from profilesite.storage import DuplicateDocumentError, JsonFileDocumentStore
from profilesite.storage.file_store import matches, sort_documents


# ─────────────────────────────────────────────────────────────────
# Initialization
# ─────────────────────────────────────────────────────────────────


class TestInitialization:
    def test_creates_collection_files(self, data_dir, file_store):
        assert (data_dir / "profiles.json").read_text(encoding="utf-8").strip() == "[]"
        assert (data_dir / "users.json").exists()

        events = json.loads((data_dir / "events.json").read_text(encoding="utf-8"))
        assert [e["id"] for e in events] == ["event005", "event1756988138911"]

    def test_keeps_existing_files(self, data_dir):
        data_dir.mkdir(parents=True)
        (data_dir / "events.json").write_text("[]", encoding="utf-8")

        JsonFileDocumentStore(str(data_dir))

        assert (data_dir / "events.json").read_text(encoding="utf-8") == "[]"

    @pytest.mark.asyncio
    async def test_reads_legacy_users_object(self, data_dir):
        data_dir.mkdir(parents=True)
        (data_dir / "users.json").write_text(
            json.dumps({"a@example.com": {"name": "A"}}), encoding="utf-8"
        )
        store = JsonFileDocumentStore(str(data_dir))

        users = await store.find_all("users")

        assert users == [{"name": "A", "email": "a@example.com"}]


# ─────────────────────────────────────────────────────────────────
# Writes
# ─────────────────────────────────────────────────────────────────


class TestWrites:
    @pytest.mark.asyncio
    async def test_upsert_merges_existing(self, file_store):
        await file_store.upsert("profiles", "id", {"id": "p1", "name": "A", "bio": "x"})
        stored = await file_store.upsert("profiles", "id", {"id": "p1", "name": "B"})

        assert stored == {"id": "p1", "name": "B", "bio": "x"}
        assert await file_store.count("profiles") == 1

    @pytest.mark.asyncio
    async def test_writes_utf8_indented(self, data_dir, file_store):
        await file_store.insert_one("profiles", {"id": "p1", "name": "山田"})

        raw = (data_dir / "profiles.json").read_text(encoding="utf-8")
        assert "山田" in raw
        assert '\n  {' in raw

    @pytest.mark.asyncio
    async def test_insert_rejects_duplicate_identifier(self, file_store):
        await file_store.insert_one("users", {"email": "a@example.com", "username": "a"})

        with pytest.raises(DuplicateDocumentError) as exc_info:
            await file_store.insert_one("users", {"email": "b@example.com", "username": "a"})

        assert exc_info.value.field == "username"
        assert await file_store.count("users") == 1

    @pytest.mark.asyncio
    async def test_insert_allows_missing_optional_identifier(self, file_store):
        await file_store.insert_one("users", {"email": "a@example.com"})
        await file_store.insert_one("users", {"email": "b@example.com"})

        assert await file_store.count("users") == 2

    @pytest.mark.asyncio
    async def test_update_one_missing_returns_none(self, file_store):
        assert await file_store.update_one("profiles", {"id": "nope"}, {"x": 1}) is None

    @pytest.mark.asyncio
    async def test_add_to_set_is_idempotent(self, file_store):
        await file_store.add_to_set("events", {"id": "event005"}, "participants", "a@example.com")
        event = await file_store.add_to_set("events", {"id": "event005"}, "participants", "a@example.com")

        assert event["participants"] == ["a@example.com"]

    @pytest.mark.asyncio
    async def test_returned_documents_are_copies(self, file_store):
        await file_store.insert_one("profiles", {"id": "p1", "skills": ["a"]})
        found = await file_store.find_one("profiles", {"id": "p1"})
        found["skills"].append("b")

        again = await file_store.find_one("profiles", {"id": "p1"})
        assert again["skills"] == ["a"]


# ─────────────────────────────────────────────────────────────────
# Query helpers
# ─────────────────────────────────────────────────────────────────


class TestQueryHelpers:
    def test_matches_equality_and_or(self):
        doc = {"email": "a@example.com", "username": "a"}

        assert matches(doc, {"email": "a@example.com"})
        assert matches(doc, {"$or": [{"username": "x"}, {"email": "a@example.com"}]})
        assert not matches(doc, {"$or": [{"username": "x"}, {"email": "y"}]})

    def test_matches_list_membership(self):
        assert matches({"participants": ["a", "b"]}, {"participants": "b"})

    def test_sort_descending_missing_last(self):
        docs = [{"id": 1, "t": "2025-01-01"}, {"id": 2}, {"id": 3, "t": "2025-03-01"}]

        result = sort_documents(docs, [("t", -1)])

        assert [d["id"] for d in result] == [3, 1, 2]

    def test_sort_mixed_value_types(self):
        docs = [{"id": "a", "t": 1700000000000}, {"id": "b", "t": "2025-01-01T00:00:00Z"}]

        result = sort_documents(docs, [("t", -1)])

        assert [d["id"] for d in result] == ["b", "a"]

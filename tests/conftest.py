"""Shared test fixtures for profile site tests."""

import httpx
import pytest
import pytest_asyncio
from unittest.mock import AsyncMock, MagicMock

from common.auth import JWTAuth
from profilesite.config import Settings
from profilesite.dependencies import init_all_services
from profilesite.storage import JsonFileDocumentStore


@pytest.fixture
def mock_collection():
    collection = AsyncMock()
    # Motor's find() returns a cursor synchronously (not a coroutine),
    # so use MagicMock for it. Async methods like find_one, insert_one,
    # count_documents etc. stay as AsyncMock.
    collection.find = MagicMock()
    return collection


@pytest.fixture
def mock_db(mock_collection):
    db = MagicMock()
    db.__getitem__ = MagicMock(return_value=mock_collection)
    return db


@pytest.fixture
def data_dir(tmp_path):
    return tmp_path / "data"


@pytest.fixture
def file_store(data_dir):
    return JsonFileDocumentStore(str(data_dir))


@pytest.fixture
def auth():
    # Low bcrypt cost keeps the suite fast
    return JWTAuth(secret="test-secret", bcrypt_rounds=4)


@pytest.fixture
def settings(tmp_path, data_dir):
    return Settings(
        _env_file=None,
        STORAGE_BACKEND="file",
        DATA_DIR=str(data_dir),
        UPLOADS_DIR=str(tmp_path / "uploads"),
        STATIC_DIR=None,
        JWT_SECRET="test-secret",
        CLAUDE_API_KEY=None,
    )


@pytest.fixture
def mock_ai():
    ai = MagicMock()
    ai.chat = AsyncMock(return_value="了解しました")
    return ai


@pytest.fixture
def mock_ocr():
    ocr = MagicMock()
    ocr.extract_text = AsyncMock(return_value="")
    return ocr


@pytest_asyncio.fixture
async def client(file_store, settings, auth, mock_ai, mock_ocr):
    """In-process HTTP client against the app with a file-backed store."""
    from api import app

    init_all_services(
        store=file_store,
        settings=settings,
        auth_provider=auth,
        ai_provider=mock_ai,
        ocr=mock_ocr,
    )

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as http_client:
        yield http_client


@pytest.fixture
def sample_profile():
    return {
        "id": "tanaka",
        "name": "田中太郎",
        "englishName": "Taro Tanaka",
        "age": 32,
        "occupation": "エンジニア",
        "location": "東京",
        "bio": "Webアプリを作っています。",
        "skills": ["Python", "TypeScript"],
        "image": "images/tanaka.jpg",
    }

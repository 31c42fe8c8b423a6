"""Unit tests for UserService and AccountService."""

from unittest.mock import AsyncMock, patch

import pytest

from common.utils.exceptions import BadRequestException, NotFoundException
from profilesite.services.users import AccountService, UserService


@pytest.fixture
def user_service(file_store):
    return UserService(file_store)


@pytest.fixture
def account_service(file_store, auth):
    return AccountService(file_store, auth)


# ─────────────────────────────────────────────────────────────────
# UserService
# ─────────────────────────────────────────────────────────────────


class TestUserService:
    @pytest.mark.asyncio
    async def test_list_is_keyed_by_email(self, user_service):
        await user_service.upsert_user({"email": "a@example.com", "name": "A"})

        users = await user_service.list_users()

        assert users == {"a@example.com": {"email": "a@example.com", "name": "A"}}

    @pytest.mark.asyncio
    async def test_password_hash_cannot_be_set(self, user_service, file_store):
        await user_service.upsert_user({"email": "a@example.com", "passwordHash": "x"})

        stored = await file_store.find_one("users", {"email": "a@example.com"})
        assert "passwordHash" not in stored

    @pytest.mark.asyncio
    async def test_account_role_cannot_be_set(self, user_service, account_service, file_store):
        await account_service.register("eve", "eve@example.com", "secret")

        await user_service.upsert_user({
            "email": "eve@example.com", "role": "admin", "username": "root", "name": "Eve",
        })

        stored = await file_store.find_one("users", {"email": "eve@example.com"})
        assert stored["role"] == "user"
        assert stored["username"] == "eve"
        assert stored["name"] == "Eve"
        summary, _ = await account_service.login("eve", "secret")
        assert summary["role"] == "user"

    @pytest.mark.asyncio
    async def test_plain_user_role_is_settable(self, user_service, file_store):
        await user_service.upsert_user({"email": "a@example.com", "role": "admin"})

        stored = await file_store.find_one("users", {"email": "a@example.com"})
        assert stored["role"] == "admin"

    @pytest.mark.asyncio
    async def test_upsert_many_forces_email_key(self, user_service):
        await user_service.upsert_many({
            "a@example.com": {"name": "A", "email": "wrong@example.com"},
            "b@example.com": {"name": "B"},
        })

        users = await user_service.list_users()
        assert set(users) == {"a@example.com", "b@example.com"}

    @pytest.mark.asyncio
    async def test_upsert_many_rejects_non_objects(self, user_service):
        with pytest.raises(BadRequestException):
            await user_service.upsert_many({"a@example.com": "not a user"})

    @pytest.mark.asyncio
    async def test_upsert_requires_email(self, user_service):
        with pytest.raises(BadRequestException):
            await user_service.upsert_user({"name": "nobody"})


# ─────────────────────────────────────────────────────────────────
# AccountService
# ─────────────────────────────────────────────────────────────────


class TestAccountService:
    @pytest.mark.asyncio
    async def test_register_and_login(self, account_service, auth):
        user, token = await account_service.register("taro", "taro@example.com", "secret")

        assert user["email"] == "taro@example.com"
        claims = await auth.verify_token(token)
        assert claims["sub"] == "taro@example.com"
        assert claims["role"] == "user"

        summary, _ = await account_service.login("taro@example.com", "secret")
        assert summary["username"] == "taro"
        assert summary["role"] == "user"

    @pytest.mark.asyncio
    async def test_register_duplicate(self, account_service):
        await account_service.register("taro", "taro@example.com", "secret")

        with pytest.raises(BadRequestException) as exc_info:
            await account_service.register("taro", "other@example.com", "secret")

        assert exc_info.value.status_code == 400

    @pytest.mark.asyncio
    async def test_register_race_is_rejected(self, account_service, file_store):
        await file_store.insert_one("users", {"email": "taro@example.com", "username": "taro"})

        # A concurrent registration got in after the existence check
        with patch.object(file_store, "find_one", AsyncMock(return_value=None)):
            with pytest.raises(BadRequestException) as exc_info:
                await account_service.register("taro", "taro@example.com", "secret")

        assert exc_info.value.code == "USER_EXISTS"

    @pytest.mark.asyncio
    async def test_login_unknown_user(self, account_service):
        with pytest.raises(BadRequestException) as exc_info:
            await account_service.login("ghost", "secret")

        assert exc_info.value.message == "ユーザーが見つかりません"

    @pytest.mark.asyncio
    async def test_login_wrong_password(self, account_service):
        await account_service.register("taro", "taro@example.com", "secret")

        with pytest.raises(BadRequestException) as exc_info:
            await account_service.login("taro", "wrong")

        assert exc_info.value.message == "パスワードが間違っています"

    @pytest.mark.asyncio
    async def test_get_current_hides_password_hash(self, account_service):
        await account_service.register("taro", "taro@example.com", "secret")

        user = await account_service.get_current("taro@example.com")

        assert "passwordHash" not in user
        assert user["username"] == "taro"

    @pytest.mark.asyncio
    async def test_get_current_missing(self, account_service):
        with pytest.raises(NotFoundException):
            await account_service.get_current("ghost@example.com")

    @pytest.mark.asyncio
    async def test_logout_revokes_token(self, account_service, auth):
        _, token = await account_service.register("taro", "taro@example.com", "secret")

        await account_service.logout(token)

        with pytest.raises(ValueError):
            await auth.verify_token(token)

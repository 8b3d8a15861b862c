"""Unit tests for AuthService (signup / login / logout)."""

import pytest
from unittest.mock import AsyncMock, MagicMock
from pymongo.errors import DuplicateKeyError

from common.utils.exceptions import BadRequestException, InternalServerException
from social.services.auth_service import AuthService
from social.services.user_store import UserStore


# ─────────────────────────────────────────────────────────────────
# Fixtures
# ─────────────────────────────────────────────────────────────────


@pytest.fixture
def user_store(users_db):
    return UserStore(users_db)


@pytest.fixture
def auth_service(user_store, hasher, jwt_auth):
    return AuthService(users=user_store, hasher=hasher, tokens=jwt_auth)


SIGNUP = {
    "full_name": "Ann Lee",
    "username": "annl",
    "email": "ann@x.com",
    "password": "secret123",
}


# ─────────────────────────────────────────────────────────────────
# signup
# ─────────────────────────────────────────────────────────────────


class TestSignup:
    @pytest.mark.asyncio
    async def test_creates_user_and_sets_cookie(self, auth_service, stored_users, jwt_auth):
        result = await auth_service.signup(**SIGNUP)

        assert result.status_code == 201
        assert result.body["username"] == "annl"
        assert result.body["fullName"] == "Ann Lee"
        assert result.body["followers"] == []
        assert result.body["following"] == []
        assert "password" not in result.body
        assert len(stored_users) == 1

        cookie = result.cookies[0]
        assert cookie.name == "jwt"
        assert cookie.max_age == 15 * 24 * 60 * 60
        assert await jwt_auth.get_user_id(cookie.value) == result.body["_id"]

    @pytest.mark.asyncio
    async def test_stores_hash_not_plaintext(self, auth_service, stored_users, hasher):
        await auth_service.signup(**SIGNUP)

        stored = stored_users[0]["password"]
        assert stored != "secret123"
        assert hasher.verify("secret123", stored)

    @pytest.mark.asyncio
    async def test_new_user_has_empty_profile(self, auth_service, stored_users):
        await auth_service.signup(**SIGNUP)

        stored = stored_users[0]
        assert stored["likedPosts"] == []
        assert stored["profileImg"] == ""
        assert stored["coverImg"] == ""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("email", ["ann", "ann@x", "ann@.com", "@x.com", ""])
    async def test_rejects_malformed_email(self, auth_service, stored_users, email):
        with pytest.raises(BadRequestException) as exc:
            await auth_service.signup(**{**SIGNUP, "email": email})

        assert exc.value.status_code == 400
        assert exc.value.message == "Invalid email format"
        assert stored_users == []

    @pytest.mark.asyncio
    async def test_rejects_taken_username(self, auth_service, stored_users, make_user):
        make_user(username="annl", email="other@x.com")

        with pytest.raises(BadRequestException) as exc:
            await auth_service.signup(**{**SIGNUP, "email": "new@x.com"})

        assert exc.value.message == "Username is already taken"
        assert len(stored_users) == 1

    @pytest.mark.asyncio
    async def test_rejects_taken_email(self, auth_service, stored_users, make_user):
        make_user(username="someone", email="ann@x.com")

        with pytest.raises(BadRequestException) as exc:
            await auth_service.signup(**{**SIGNUP, "username": "fresh"})

        assert exc.value.message == "Email is already taken"
        assert len(stored_users) == 1

    @pytest.mark.asyncio
    async def test_rejects_short_password(self, auth_service, stored_users):
        with pytest.raises(BadRequestException) as exc:
            await auth_service.signup(**{**SIGNUP, "password": "abc"})

        assert exc.value.message == "Password must be at least 6 characters long"
        assert stored_users == []

    @pytest.mark.asyncio
    async def test_unique_index_violation_is_a_conflict(self, auth_service, users_collection):
        users_collection.insert_one = AsyncMock(
            side_effect=DuplicateKeyError(
                "E11000 duplicate key error",
                code=11000,
                details={"keyPattern": {"email": 1}},
            )
        )

        with pytest.raises(BadRequestException) as exc:
            await auth_service.signup(**SIGNUP)

        assert exc.value.message == "Email is already taken"

    @pytest.mark.asyncio
    async def test_store_failure_is_internal_error(self, auth_service, users_collection, jwt_auth):
        users_collection.insert_one = AsyncMock(side_effect=RuntimeError("connection reset"))
        jwt_auth.create_token = AsyncMock()

        with pytest.raises(InternalServerException) as exc:
            await auth_service.signup(**SIGNUP)

        assert exc.value.status_code == 500
        assert exc.value.message == "Internal server error"
        jwt_auth.create_token.assert_not_called()


# ─────────────────────────────────────────────────────────────────
# login
# ─────────────────────────────────────────────────────────────────


class TestLogin:
    @pytest.mark.asyncio
    async def test_correct_credentials(self, auth_service, make_user, jwt_auth):
        user = make_user()

        result = await auth_service.login("annl", "secret123")

        assert result.status_code == 200
        assert result.body["_id"] == str(user["_id"])
        assert "password" not in result.body
        assert await jwt_auth.get_user_id(result.cookies[0].value) == str(user["_id"])

    @pytest.mark.asyncio
    async def test_wrong_password(self, auth_service, make_user):
        make_user()

        with pytest.raises(BadRequestException) as exc:
            await auth_service.login("annl", "wrong")

        assert exc.value.message == "Invalid username or password"

    @pytest.mark.asyncio
    async def test_unknown_username_looks_the_same(self, auth_service, make_user):
        make_user()

        with pytest.raises(BadRequestException) as unknown:
            await auth_service.login("nobody", "secret123")
        with pytest.raises(BadRequestException) as wrong:
            await auth_service.login("annl", "wrong")

        assert unknown.value.status_code == wrong.value.status_code == 400
        assert unknown.value.message == wrong.value.message

    @pytest.mark.asyncio
    async def test_unknown_username_still_runs_bcrypt(self, auth_service, hasher):
        hasher.verify = MagicMock(wraps=hasher.verify)

        with pytest.raises(BadRequestException):
            await auth_service.login("nobody", "secret123")

        hasher.verify.assert_called_once()
        assert hasher.verify.call_args[0][0] == "secret123"

    @pytest.mark.asyncio
    async def test_corrupt_stored_hash_is_internal_error(self, auth_service, make_user):
        make_user(password="secret123")["password"] = "not-a-bcrypt-hash"

        with pytest.raises(InternalServerException):
            await auth_service.login("annl", "secret123")


# ─────────────────────────────────────────────────────────────────
# logout
# ─────────────────────────────────────────────────────────────────


class TestLogout:
    @pytest.mark.asyncio
    async def test_clears_cookie(self, auth_service):
        result = await auth_service.logout()

        assert result.status_code == 200
        assert result.body == {"message": "Logged out successfully"}
        assert result.cookies[0].name == "jwt"
        assert result.cookies[0].max_age == 0
        assert result.cookies[0].value == ""

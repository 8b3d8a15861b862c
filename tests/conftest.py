"""Shared test fixtures for the social backend tests."""

import pytest
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock
from bson import ObjectId
from fastapi.testclient import TestClient

from api import app
from common.auth import JWTAuth, PasswordHasher
from social.config import Settings
from social.dependencies import init_all_services

TEST_SECRET = "test-secret-not-real"


def make_cursor(docs):
    """Motor-style cursor: sort() chains, to_list() is awaited."""
    cursor = MagicMock()
    cursor.sort = MagicMock(return_value=cursor)
    cursor.to_list = AsyncMock(return_value=list(docs))
    return cursor


def _matches(doc, query):
    for key, expected in query.items():
        if isinstance(expected, dict):
            if "$in" in expected and doc.get(key) not in expected["$in"]:
                return False
            if "$ne" in expected and doc.get(key) == expected["$ne"]:
                return False
        elif doc.get(key) != expected:
            return False
    return True


def _apply_update(doc, operation):
    for key, value in operation.get("$set", {}).items():
        doc[key] = value
    for key, value in operation.get("$addToSet", {}).items():
        if value not in doc.setdefault(key, []):
            doc[key].append(value)
    for key, value in operation.get("$push", {}).items():
        doc.setdefault(key, []).append(value)
    for key, value in operation.get("$pull", {}).items():
        doc[key] = [item for item in doc.get(key, []) if item != value]


def _project(doc, projection):
    if not projection:
        return dict(doc)
    if any(flag == 1 for flag in projection.values()):
        return {k: v for k, v in doc.items() if k == "_id" or projection.get(k) == 1}
    return {k: v for k, v in doc.items() if projection.get(k, 1) != 0}


@pytest.fixture
def sample_user_id():
    return ObjectId()


@pytest.fixture
def test_settings():
    return Settings(
        _env_file=None,
        JWT_SECRET=TEST_SECRET,
        BCRYPT_ROUNDS=4,
        ENVIRONMENT="development",
    )


@pytest.fixture
def hasher():
    # Lowest bcrypt cost keeps the suite fast
    return PasswordHasher(rounds=4)


@pytest.fixture
def jwt_auth():
    return JWTAuth(secret=TEST_SECRET, session_expire_days=15)


@pytest.fixture
def mock_collection():
    collection = AsyncMock()
    # Motor's find() and aggregate() return cursors synchronously
    collection.find = MagicMock(return_value=make_cursor([]))
    collection.aggregate = MagicMock(return_value=make_cursor([]))
    return collection


@pytest.fixture
def mock_db(mock_collection):
    db = MagicMock()
    db.__getitem__ = MagicMock(return_value=mock_collection)
    return db


@pytest.fixture
def stored_users():
    """Backing list for the users collection double."""
    return []


@pytest.fixture
def users_collection(stored_users):
    """
    Users collection double that answers equality/$in queries from
    stored_users and records inserts.
    """
    collection = AsyncMock()

    async def find_one(query, projection=None):
        for doc in stored_users:
            if _matches(doc, query):
                return _project(doc, projection)
        return None

    async def insert_one(doc):
        doc.setdefault("_id", ObjectId())
        stored_users.append(doc)
        result = MagicMock()
        result.inserted_id = doc["_id"]
        return result

    def find(query, projection=None):
        return make_cursor([_project(d, projection) for d in stored_users if _matches(d, query)])

    async def update_one(query, operation):
        for doc in stored_users:
            if _matches(doc, query):
                _apply_update(doc, operation)
                break

    async def find_one_and_update(query, operation, projection=None, return_document=None):
        for doc in stored_users:
            if _matches(doc, query):
                _apply_update(doc, operation)
                return _project(doc, projection)
        return None

    collection.find_one = AsyncMock(side_effect=find_one)
    collection.insert_one = AsyncMock(side_effect=insert_one)
    collection.update_one = AsyncMock(side_effect=update_one)
    collection.find_one_and_update = AsyncMock(side_effect=find_one_and_update)
    collection.find = MagicMock(side_effect=find)
    collection.aggregate = MagicMock(return_value=make_cursor([]))
    return collection


@pytest.fixture
def users_db(users_collection, mock_collection):
    """Database double: "users" is stateful, other collections are plain mocks."""
    db = MagicMock()
    db.__getitem__ = MagicMock(
        side_effect=lambda name: users_collection if name == "users" else mock_collection
    )
    return db


@pytest.fixture
def make_user(stored_users, hasher):
    """Insert a user document directly into the users double."""

    def _make_user(username="annl", email="ann@x.com", password="secret123", **fields):
        now = datetime.now(timezone.utc)
        doc = {
            "_id": ObjectId(),
            "fullName": fields.pop("fullName", "Ann Lee"),
            "username": username,
            "email": email,
            "password": hasher.hash(password),
            "followers": [],
            "following": [],
            "likedPosts": [],
            "profileImg": "",
            "coverImg": "",
            "bio": "",
            "link": "",
            "createdAt": now,
            "updatedAt": now,
        }
        doc.update(fields)
        stored_users.append(doc)
        return doc

    return _make_user


@pytest.fixture
def cursor_of():
    """Build a Motor-style cursor over fixed documents."""
    return make_cursor


@pytest.fixture
def client(users_db, test_settings):
    """TestClient over the app with services bound to the database doubles."""
    init_all_services(db=users_db, settings=test_settings)
    return TestClient(app)

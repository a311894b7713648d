"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules:
in-memory stores standing in for Supabase, real services wired to them,
and a TestClient whose dependencies point at those services.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Optional
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from api import app
from api.dependencies import get_auth_service, get_media_service, reset_container
from modules.auth.exceptions import DuplicateEmailError
from modules.auth.models import UserRecord, UserRole
from modules.auth.service import AuthService
from modules.auth.tokens import TokenService
from modules.media.models import Media
from modules.media.service import MediaService
from modules.media.storage import LocalBlobStore


TEST_ACCESS_SECRET = "test-access-secret-for-testing-only"
TEST_REFRESH_SECRET = "test-refresh-secret-for-testing-only"

# Minimal JPEG: SOI marker, APP0 marker, padding, EOI marker
JPEG_BYTES = b"\xff\xd8\xff\xe0" + b"\x00" * 128 + b"\xff\xd9"


class InMemoryUserStore:
    """Dict-backed stand-in for UserRepository."""

    def __init__(self) -> None:
        self.users: dict[str, UserRecord] = {}

    def create(
        self,
        email: str,
        password_hash: str,
        name: str,
        role: UserRole = UserRole.USER,
    ) -> UserRecord:
        if self.get_by_email(email) is not None:
            raise DuplicateEmailError(email)
        now = datetime.now(timezone.utc)
        user = UserRecord(
            id=str(uuid4()),
            email=email,
            password_hash=password_hash,
            name=name,
            role=role,
            created_at=now,
            updated_at=now,
        )
        self.users[user.id] = user
        return user

    def get_by_id(self, user_id: str) -> Optional[UserRecord]:
        return self.users.get(user_id)

    def get_by_email(self, email: str) -> Optional[UserRecord]:
        return next((u for u in self.users.values() if u.email == email), None)


class InMemoryMediaStore:
    """Dict-backed stand-in for MediaRepository. Each record is one second newer than the last."""

    def __init__(self) -> None:
        self.records: dict[str, Media] = {}
        self._clock = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def create(self, data: dict[str, Any]) -> Media:
        self._clock += timedelta(seconds=1)
        media = Media(id=str(uuid4()), created_at=self._clock, **data)
        self.records[media.id] = media
        return media

    def get_by_id(self, media_id: str) -> Optional[Media]:
        return self.records.get(media_id)

    def list_by_owner(self, owner_id: str, page: int = 1, page_size: int = 10) -> tuple[list[Media], int]:
        owned = sorted(
            (m for m in self.records.values() if m.owner_id == owner_id),
            key=lambda m: m.created_at,
            reverse=True,
        )
        offset = (page - 1) * page_size
        return owned[offset:offset + page_size], len(owned)

    def update_allowed_users(self, media_id: str, allowed_user_ids: list[str]) -> Media:
        media = self.records[media_id].model_copy(update={"allowed_user_ids": list(allowed_user_ids)})
        self.records[media_id] = media
        return media

    def delete(self, media_id: str) -> bool:
        return self.records.pop(media_id, None) is not None


@pytest.fixture(autouse=True)
def reset_services():
    """Reset the service container and dependency overrides around each test."""
    reset_container()
    yield
    app.dependency_overrides.clear()
    reset_container()


@pytest.fixture
def token_service() -> TokenService:
    """Token service with test secrets and default lifetimes."""
    return TokenService(TEST_ACCESS_SECRET, TEST_REFRESH_SECRET)


@pytest.fixture
def user_store() -> InMemoryUserStore:
    return InMemoryUserStore()


@pytest.fixture
def media_store() -> InMemoryMediaStore:
    return InMemoryMediaStore()


@pytest.fixture
def blob_store(tmp_path) -> LocalBlobStore:
    return LocalBlobStore(tmp_path / "uploads")


@pytest.fixture
def auth_service(user_store, token_service) -> AuthService:
    """Auth service with the cheapest bcrypt cost so tests stay fast."""
    return AuthService(user_store, token_service, bcrypt_rounds=4)


@pytest.fixture
def media_service(media_store, blob_store) -> MediaService:
    return MediaService(media_store, blob_store, max_file_size=1024)


@pytest.fixture
def jpeg_bytes() -> bytes:
    return JPEG_BYTES


@pytest.fixture
def client(auth_service, media_service) -> TestClient:
    """TestClient with the auth and media services swapped for in-memory ones."""
    app.dependency_overrides[get_auth_service] = lambda: auth_service
    app.dependency_overrides[get_media_service] = lambda: media_service
    return TestClient(app)


@pytest.fixture
def register_user(client):
    """
    Register a user through the API.

    Returns a function taking an email (and optionally a name) that returns
    the user's ID and ready-to-use authorization headers.
    """

    def _register(email: str, name: str = "Test User", password: str = "secret123") -> tuple[str, dict[str, str]]:
        response = client.post(
            "/api/auth/register",
            json={"email": email, "password": password, "name": name},
        )
        assert response.status_code == 201, response.text
        body = response.json()
        return body["user"]["id"], {"Authorization": f"Bearer {body['accessToken']}"}

    return _register

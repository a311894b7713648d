"""Tests for modules/media/access.py."""

from datetime import datetime, timezone

import pytest

from modules.media.access import apply_permission, can_read, is_owner
from modules.media.models import Media, PermissionAction

OWNER = "owner-1"
FRIEND = "friend-1"
STRANGER = "stranger-1"


@pytest.fixture
def media():
    return Media(
        id="m1",
        owner_id=OWNER,
        file_name="photo.jpg",
        file_path="/tmp/photo.jpg",
        mime_type="image/jpeg",
        size=10,
        allowed_user_ids=[FRIEND],
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
    )


class TestReadAccess:
    def test_owner_can_read(self, media):
        assert is_owner(media, OWNER)
        assert can_read(media, OWNER)

    def test_allow_listed_can_read(self, media):
        assert not is_owner(media, FRIEND)
        assert can_read(media, FRIEND)

    def test_stranger_cannot_read(self, media):
        assert not can_read(media, STRANGER)


class TestApplyPermission:
    def test_add(self, media):
        assert apply_permission(media, STRANGER, PermissionAction.ADD) == [FRIEND, STRANGER]

    def test_add_is_idempotent(self, media):
        assert apply_permission(media, FRIEND, PermissionAction.ADD) == [FRIEND]

    def test_add_owner_is_noop(self, media):
        assert apply_permission(media, OWNER, PermissionAction.ADD) == [FRIEND]

    def test_remove(self, media):
        assert apply_permission(media, FRIEND, PermissionAction.REMOVE) == []

    def test_remove_absent_is_noop(self, media):
        assert apply_permission(media, STRANGER, PermissionAction.REMOVE) == [FRIEND]

    def test_does_not_mutate_record(self, media):
        apply_permission(media, STRANGER, PermissionAction.ADD)
        assert media.allowed_user_ids == [FRIEND]

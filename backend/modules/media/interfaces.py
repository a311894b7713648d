"""
Media module interfaces.

The API layer depends on IMediaService; the service depends on
IMediaStore and IBlobStore so both can be swapped in tests.
"""

from typing import Protocol, Optional, Any, runtime_checkable

from .models import (
    Media,
    MediaFile,
    MediaListResponse,
    MediaPermissions,
    PermissionAction,
)


@runtime_checkable
class IMediaStore(Protocol):
    """Persistence contract for media records."""

    def create(self, data: dict[str, Any]) -> Media:
        ...

    def get_by_id(self, media_id: str) -> Optional[Media]:
        ...

    def list_by_owner(self, owner_id: str, page: int = 1, page_size: int = 10) -> tuple[list[Media], int]:
        ...

    def update_allowed_users(self, media_id: str, allowed_user_ids: list[str]) -> Media:
        ...

    def delete(self, media_id: str) -> bool:
        ...


@runtime_checkable
class IBlobStore(Protocol):
    """Storage contract for raw file bytes."""

    def save(self, name: str, data: bytes) -> str:
        ...

    def exists(self, path: str) -> bool:
        ...

    def delete(self, path: str) -> None:
        ...


@runtime_checkable
class IMediaService(Protocol):
    """
    Interface for media operations.

    Every method takes the requesting user's ID and enforces the
    owner-or-allow-listed read rule and the owner-only write rule.
    """

    async def upload(
        self,
        data: bytes,
        original_filename: str,
        mime_type: str,
        owner_id: str,
    ) -> Media:
        """
        Validate and store an uploaded JPEG.

        Raises:
            InvalidInputError: If no bytes were provided
            UnsupportedMediaTypeError: If the MIME type is not JPEG
            FileTooLargeError: If the file exceeds the configured maximum
        """
        ...

    async def list_media(self, owner_id: str, page: int = 1, page_size: int = 10) -> MediaListResponse:
        """List the requester's own media, newest first."""
        ...

    async def get_media(self, media_id: str, requester_id: str) -> Media:
        """
        Get a media record the requester may read.

        Raises:
            MediaNotFoundError: If the record doesn't exist
            MediaAccessDeniedError: If the requester is neither owner nor allow-listed
        """
        ...

    async def get_media_file(self, media_id: str, requester_id: str) -> MediaFile:
        """
        Resolve the blob behind a readable media record.

        Raises:
            MediaFileMissingError: If the record exists but its blob does not
        """
        ...

    async def delete_media(self, media_id: str, requester_id: str) -> None:
        """Delete a record and its blob. Owner only."""
        ...

    async def get_permissions(self, media_id: str, requester_id: str) -> MediaPermissions:
        """Get the owner and allow-list of a record. Owner only."""
        ...

    async def set_permission(
        self,
        media_id: str,
        target_user_id: str,
        action: PermissionAction,
        requester_id: str,
    ) -> Media:
        """Add a user to or remove a user from the allow-list. Owner only."""
        ...

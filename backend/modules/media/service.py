"""
Media service implementation.

Uploads, listing, retrieval, deletion and allow-list management for
JPEG media. Records live in the media store and bytes in the blob store.

There is no transaction spanning the two stores. Upload writes the blob
before the record and delete removes the blob before the record, so a
failure between the two steps leaves an orphan that is not reconciled.
"""

import logging

from shared.exceptions import InvalidInputError

from . import access
from .exceptions import (
    FileTooLargeError,
    MediaAccessDeniedError,
    MediaFileMissingError,
    MediaNotFoundError,
    UnsupportedMediaTypeError,
)
from .interfaces import IBlobStore, IMediaService, IMediaStore
from .models import (
    JPEG_MIME_TYPES,
    Media,
    MediaFile,
    MediaListResponse,
    MediaPermissions,
    PermissionAction,
)
from .storage import generate_stored_name

logger = logging.getLogger(__name__)

DEFAULT_MAX_FILE_SIZE = 5 * 1024 * 1024


def is_jpeg_mime_type(mime_type: str | None) -> bool:
    """Accept image/jpeg and image/jpg, ignoring case and parameters."""
    if not mime_type:
        return False
    return mime_type.split(";", 1)[0].strip().lower() in JPEG_MIME_TYPES


class MediaService(IMediaService):
    """Media service backed by a media store and a blob store."""

    def __init__(
        self,
        repository: IMediaStore,
        blob_store: IBlobStore,
        max_file_size: int = DEFAULT_MAX_FILE_SIZE,
    ):
        self._repository = repository
        self._blobs = blob_store
        self._max_file_size = max_file_size

    @property
    def max_file_size(self) -> int:
        return self._max_file_size

    async def upload(
        self,
        data: bytes,
        original_filename: str,
        mime_type: str,
        owner_id: str,
    ) -> Media:
        """Validate an upload, write its bytes, then persist its record."""
        if not data:
            raise InvalidInputError("No file uploaded")

        if not is_jpeg_mime_type(mime_type):
            raise UnsupportedMediaTypeError(mime_type)

        if len(data) > self._max_file_size:
            raise FileTooLargeError(len(data), self._max_file_size)

        stored_path = self._blobs.save(generate_stored_name(original_filename), data)

        media = self._repository.create({
            "owner_id": owner_id,
            "file_name": original_filename,
            "file_path": stored_path,
            "mime_type": mime_type,
            "size": len(data),
            "allowed_user_ids": [],
        })
        logger.info("User %s uploaded media %s (%d bytes)", owner_id, media.id, media.size)
        return media

    async def list_media(self, owner_id: str, page: int = 1, page_size: int = 10) -> MediaListResponse:
        """List the requester's own media with offset pagination."""
        items, total = self._repository.list_by_owner(owner_id, page, page_size)
        return MediaListResponse(media=items, total=total, page=page, limit=page_size)

    async def get_media(self, media_id: str, requester_id: str) -> Media:
        """Get a record the requester owns or is allow-listed on."""
        media = self._get_existing(media_id)
        if not access.can_read(media, requester_id):
            raise MediaAccessDeniedError(media_id, requester_id)
        return media

    async def get_media_file(self, media_id: str, requester_id: str) -> MediaFile:
        """Resolve the blob of a readable record for download."""
        media = await self.get_media(media_id, requester_id)
        if not self._blobs.exists(media.file_path):
            logger.warning("Media %s has no blob at %s", media_id, media.file_path)
            raise MediaFileMissingError(media_id)
        return MediaFile(path=media.file_path, file_name=media.file_name, mime_type=media.mime_type)

    async def delete_media(self, media_id: str, requester_id: str) -> None:
        """Remove the blob, then the record. Owner only."""
        media = self._get_owned(media_id, requester_id, "Only the owner can delete this media")
        self._blobs.delete(media.file_path)
        self._repository.delete(media_id)
        logger.info("User %s deleted media %s", requester_id, media_id)

    async def get_permissions(self, media_id: str, requester_id: str) -> MediaPermissions:
        """Return the owner and allow-list. Owner only."""
        media = self._get_owned(media_id, requester_id, "Only the owner can view permissions")
        return MediaPermissions(owner_id=media.owner_id, allowed_user_ids=list(media.allowed_user_ids))

    async def set_permission(
        self,
        media_id: str,
        target_user_id: str,
        action: PermissionAction,
        requester_id: str,
    ) -> Media:
        """Apply an idempotent add or remove to the allow-list. Owner only."""
        media = self._get_owned(media_id, requester_id, "Only the owner can manage permissions")

        allowed = access.apply_permission(media, target_user_id, action)
        if allowed == media.allowed_user_ids:
            return media

        updated = self._repository.update_allowed_users(media_id, allowed)
        logger.info(
            "User %s applied %s for user %s on media %s",
            requester_id, action.value, target_user_id, media_id,
        )
        return updated

    def _get_existing(self, media_id: str) -> Media:
        media = self._repository.get_by_id(media_id)
        if media is None:
            raise MediaNotFoundError(media_id)
        return media

    def _get_owned(self, media_id: str, requester_id: str, message: str) -> Media:
        media = self._get_existing(media_id)
        if not access.is_owner(media, requester_id):
            raise MediaAccessDeniedError(media_id, requester_id, message)
        return media

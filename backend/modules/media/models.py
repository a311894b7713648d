"""
Media module data models.

Media records describe an uploaded JPEG: who owns it, where its bytes
live in the blob store, and which other users may read it.
"""

from datetime import datetime
from enum import Enum
from pathlib import Path
from uuid import UUID

from pydantic import BaseModel, Field

from shared.models import ApiModel

JPEG_MIME_TYPES = frozenset({"image/jpeg", "image/jpg"})


class PermissionAction(str, Enum):
    """Allow-list mutations."""

    ADD = "add"
    REMOVE = "remove"


class Media(ApiModel):
    """A stored media record."""

    id: str = Field(..., description="Media ID (UUID)")
    owner_id: str = Field(..., description="Owning user ID")
    file_name: str = Field(..., description="Original file name")
    file_path: str = Field(..., exclude=True, description="Blob store path")
    mime_type: str = Field(..., description="Declared MIME type")
    size: int = Field(..., ge=0, description="Size in bytes")
    allowed_user_ids: list[str] = Field(
        default_factory=list,
        description="Users granted read access besides the owner",
    )
    created_at: datetime = Field(..., description="Upload time")


class MediaListResponse(ApiModel):
    """Paginated list of the requester's own media, newest first."""

    media: list[Media]
    total: int = Field(..., description="Total records owned by the requester")
    page: int
    limit: int


class MediaPermissions(ApiModel):
    """Owner and allow-list of a media record."""

    owner_id: str
    allowed_user_ids: list[str]


class PermissionRequest(ApiModel):
    """Request body for POST /media/{id}/permissions."""

    user_id: UUID = Field(..., description="User to grant or revoke")
    action: PermissionAction


class MediaFile(BaseModel):
    """Everything needed to stream a media file back to a client."""

    path: Path
    file_name: str
    mime_type: str

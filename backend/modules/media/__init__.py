"""
Media module.

Handles JPEG uploads, per-file allow-lists and downloads.

Public API:
- IMediaService: Interface for media operations
- Media / MediaListResponse / MediaPermissions: Data models
- LocalBlobStore: Filesystem storage for file bytes
- Media exceptions: MediaNotFoundError, MediaAccessDeniedError, etc.
"""

from .interfaces import IMediaService, IMediaStore, IBlobStore
from .models import (
    Media,
    MediaFile,
    MediaListResponse,
    MediaPermissions,
    PermissionAction,
    PermissionRequest,
)
from .storage import LocalBlobStore
from .exceptions import (
    MediaNotFoundError,
    MediaFileMissingError,
    MediaAccessDeniedError,
    UnsupportedMediaTypeError,
    FileTooLargeError,
)

__all__ = [
    # Interfaces
    "IMediaService",
    "IMediaStore",
    "IBlobStore",
    # Models
    "Media",
    "MediaFile",
    "MediaListResponse",
    "MediaPermissions",
    "PermissionAction",
    "PermissionRequest",
    # Storage
    "LocalBlobStore",
    # Exceptions
    "MediaNotFoundError",
    "MediaFileMissingError",
    "MediaAccessDeniedError",
    "UnsupportedMediaTypeError",
    "FileTooLargeError",
]

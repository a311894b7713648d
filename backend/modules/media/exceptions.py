"""
Media module exceptions.
"""

from shared.exceptions import (
    NotFoundError,
    ValidationError,
    AuthorizationError,
)


class MediaNotFoundError(NotFoundError):
    """Raised when a media record is not found."""

    def __init__(self, media_id: str):
        super().__init__(
            "Media not found",
            code="MEDIA_NOT_FOUND",
            details={"media_id": media_id},
        )


class MediaFileMissingError(NotFoundError):
    """Raised when a record exists but its blob is gone from storage."""

    def __init__(self, media_id: str):
        super().__init__(
            "Media file not found on disk",
            code="MEDIA_FILE_MISSING",
            details={"media_id": media_id},
        )


class MediaAccessDeniedError(AuthorizationError):
    """Raised when a user may not read or manage a media record."""

    def __init__(self, media_id: str, user_id: str, message: str = "Access denied to this media"):
        super().__init__(
            message,
            code="MEDIA_ACCESS_DENIED",
            details={"media_id": media_id, "user_id": user_id},
        )


class UnsupportedMediaTypeError(ValidationError):
    """Raised when an upload is not a JPEG."""

    def __init__(self, mime_type: str):
        super().__init__(
            "Only JPEG files are allowed",
            code="UNSUPPORTED_MEDIA_TYPE",
            details={"mime_type": mime_type},
        )


class FileTooLargeError(ValidationError):
    """Raised when an upload exceeds the configured maximum size."""

    def __init__(self, size: int, max_size: int):
        super().__init__(
            f"File size exceeds limit of {max_size} bytes",
            code="FILE_TOO_LARGE",
            details={"size": size, "max_size": max_size},
        )

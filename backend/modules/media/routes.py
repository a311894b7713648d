"""
Media API endpoints.

Upload, listing, retrieval, download, deletion and permission management.
Every endpoint requires a bearer token.
"""

from typing import Optional

from fastapi import APIRouter, Depends, File, Query, UploadFile
from fastapi.responses import FileResponse

from api.middleware.auth import get_current_user
from api.dependencies import get_media_service
from shared.models import AuthenticatedUser

from .interfaces import IMediaService
from .models import Media, MediaListResponse, MediaPermissions, PermissionRequest

router = APIRouter()


@router.post("/upload", response_model=Media, status_code=201)
async def upload_media(
    file: Optional[UploadFile] = File(default=None, description="JPEG file"),
    user: AuthenticatedUser = Depends(get_current_user),
    service: IMediaService = Depends(get_media_service),
) -> Media:
    """
    Upload a JPEG file.

    The file is sent as multipart form data in the ``file`` field.
    """
    data = await file.read() if file is not None else b""
    filename = file.filename if file is not None else ""
    mime_type = file.content_type if file is not None else ""
    return await service.upload(data, filename or "", mime_type or "", user.id)


@router.get("/my", response_model=MediaListResponse)
async def list_my_media(
    page: int = Query(default=1, ge=1, description="Page number (1-indexed)"),
    limit: int = Query(default=10, ge=1, le=100, description="Items per page"),
    user: AuthenticatedUser = Depends(get_current_user),
    service: IMediaService = Depends(get_media_service),
) -> MediaListResponse:
    """
    List the current user's media.

    Returns paginated results, most recent first.
    """
    return await service.list_media(user.id, page, limit)


@router.get("/{media_id}", response_model=Media)
async def get_media(
    media_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IMediaService = Depends(get_media_service),
) -> Media:
    """Get a media record owned by or shared with the current user."""
    return await service.get_media(media_id, user.id)


@router.get("/{media_id}/download")
async def download_media(
    media_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IMediaService = Depends(get_media_service),
) -> FileResponse:
    """Download the file behind a media record as an attachment."""
    media_file = await service.get_media_file(media_id, user.id)
    return FileResponse(
        media_file.path,
        media_type=media_file.mime_type,
        filename=media_file.file_name,
    )


@router.delete("/{media_id}", status_code=204)
async def delete_media(
    media_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IMediaService = Depends(get_media_service),
) -> None:
    """Delete a media record and its file. Owner only."""
    await service.delete_media(media_id, user.id)


@router.get("/{media_id}/permissions", response_model=MediaPermissions)
async def get_permissions(
    media_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IMediaService = Depends(get_media_service),
) -> MediaPermissions:
    """Get the owner and allow-list of a media record. Owner only."""
    return await service.get_permissions(media_id, user.id)


@router.post("/{media_id}/permissions", response_model=Media)
async def manage_permissions(
    media_id: str,
    request: PermissionRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IMediaService = Depends(get_media_service),
) -> Media:
    """
    Grant or revoke read access for another user. Owner only.

    Both actions are idempotent.
    """
    return await service.set_permission(media_id, str(request.user_id), request.action, user.id)

"""
Media repository for database access.

Encapsulates all Supabase queries and data mapping for the ``media`` table.
"""

from typing import Optional, Any

from shared.repository import BaseRepository, is_valid_uuid
from .models import Media


class MediaRepository(BaseRepository[Media]):
    """
    Repository for media record access.

    Note: This repository does NOT perform authorization checks.
    The service layer is responsible for verifying ownership and access.
    """

    def create(self, data: dict[str, Any]) -> Media:
        """
        Create a new media record.

        Args:
            data: Dictionary with media fields (owner_id, file_name, file_path, ...)

        Returns:
            Created Media with generated ID and timestamp.
        """
        result = self._db.table("media").insert(data).execute()
        return self._map_to_media(result.data[0])

    def get_by_id(self, media_id: str) -> Optional[Media]:
        """Get a media record by ID, or None if absent or the ID is malformed."""
        if not is_valid_uuid(media_id):
            return None
        result = self._db.table("media").select("*").eq("id", media_id).execute()
        if not result.data:
            return None
        return self._map_to_media(result.data[0])

    def list_by_owner(
        self,
        owner_id: str,
        page: int = 1,
        page_size: int = 10,
    ) -> tuple[list[Media], int]:
        """
        List a user's media, newest first.

        Args:
            owner_id: The owner's user ID.
            page: Page number (1-indexed).
            page_size: Items per page.

        Returns:
            The page of records and the total count for the owner.
        """
        offset = (page - 1) * page_size

        count_result = (
            self._db.table("media")
            .select("id", count="exact")
            .eq("owner_id", owner_id)
            .execute()
        )
        total = count_result.count or 0

        result = (
            self._db.table("media")
            .select("*")
            .eq("owner_id", owner_id)
            .order("created_at", desc=True)
            .range(offset, offset + page_size - 1)
            .execute()
        )

        return [self._map_to_media(row) for row in result.data], total

    def update_allowed_users(self, media_id: str, allowed_user_ids: list[str]) -> Media:
        """Replace the allow-list of a record and return the updated record."""
        result = (
            self._db.table("media")
            .update({"allowed_user_ids": allowed_user_ids})
            .eq("id", media_id)
            .execute()
        )
        return self._map_to_media(result.data[0])

    def delete(self, media_id: str) -> bool:
        """
        Delete a media record.

        Returns:
            True if deletion was executed.
        """
        self._db.table("media").delete().eq("id", media_id).execute()
        return True

    def _map_to_media(self, data: dict[str, Any]) -> Media:
        """Map database row to Media model."""
        return Media(
            id=str(data["id"]),
            owner_id=str(data["owner_id"]),
            file_name=data["file_name"],
            file_path=data["file_path"],
            mime_type=data["mime_type"],
            size=data["size"],
            allowed_user_ids=[str(u) for u in data.get("allowed_user_ids") or []],
            created_at=data["created_at"],
        )

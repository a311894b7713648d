"""
User repository for database access.

Encapsulates all Supabase queries and data mapping for the ``users`` table.
"""

from typing import Optional, Any

from postgrest.exceptions import APIError

from shared.repository import BaseRepository, is_valid_uuid
from .exceptions import DuplicateEmailError
from .models import UserRecord, UserRole

# Postgres error code for unique constraint violations
UNIQUE_VIOLATION = "23505"


class UserRepository(BaseRepository[UserRecord]):
    """
    Repository for user credential data.

    Email uniqueness is enforced by a unique index on ``users.email``.
    """

    def create(
        self,
        email: str,
        password_hash: str,
        name: str,
        role: UserRole = UserRole.USER,
    ) -> UserRecord:
        """
        Insert a new user.

        Args:
            email: Email address, stored as given
            password_hash: bcrypt hash of the password
            name: Display name
            role: Account role

        Returns:
            Created UserRecord with generated ID and timestamps.

        Raises:
            DuplicateEmailError: If the email is already registered.
        """
        data = {
            "email": email,
            "password_hash": password_hash,
            "name": name,
            "role": role.value,
        }
        try:
            result = self._db.table("users").insert(data).execute()
        except APIError as e:
            if e.code == UNIQUE_VIOLATION:
                raise DuplicateEmailError(email)
            raise
        return self._map_to_user(result.data[0])

    def get_by_id(self, user_id: str) -> Optional[UserRecord]:
        """Get a user by ID, or None if absent or the ID is malformed."""
        if not is_valid_uuid(user_id):
            return None
        result = self._db.table("users").select("*").eq("id", user_id).execute()
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def get_by_email(self, email: str) -> Optional[UserRecord]:
        """Get a user by exact email match."""
        result = self._db.table("users").select("*").eq("email", email).execute()
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def _map_to_user(self, data: dict[str, Any]) -> UserRecord:
        """Map database row to UserRecord model."""
        return UserRecord(
            id=str(data["id"]),
            email=data["email"],
            password_hash=data["password_hash"],
            name=data.get("name") or "",
            role=UserRole(data.get("role", UserRole.USER.value)),
            created_at=data["created_at"],
            updated_at=data.get("updated_at") or data["created_at"],
        )

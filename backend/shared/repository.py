"""
Common base for the Supabase-backed repositories.

Repositories own the table names, the query chains and the mapping from
rows to pydantic models. They never check who is asking; that is the
service layer's job.
"""

from typing import Generic, TypeVar
from uuid import UUID

from supabase import Client


ModelT = TypeVar("ModelT")


def is_valid_uuid(value: str) -> bool:
    """Return True if value parses as a UUID."""
    try:
        UUID(str(value))
    except ValueError:
        return False
    return True


class BaseRepository(Generic[ModelT]):
    """
    Holds the Supabase client as ``self._db`` for subclasses.

    The type parameter names the model a subclass maps rows to, e.g.
    ``MediaRepository(BaseRepository[Media])``.
    """

    def __init__(self, db: Client) -> None:
        self._db = db

"""
Supabase connection for the Mediashare repositories.

One client is shared by the whole process. It authenticates with the
service role key, so row level security does not apply and every
ownership rule is enforced by the media service.
"""

from typing import Optional
from supabase import Client, create_client

from .config import get_settings

_client: Optional[Client] = None


def get_supabase_client() -> Client:
    """
    Return the process-wide Supabase client, creating it on first use.

    Raises:
        RuntimeError: If SUPABASE_URL or SUPABASE_SERVICE_ROLE_KEY is unset.
    """
    global _client

    if _client is not None:
        return _client

    settings = get_settings()
    url, key = settings.supabase_url, settings.supabase_service_role_key
    if not url or not key:
        raise RuntimeError(
            "Supabase configuration missing. "
            "Set SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY environment variables."
        )

    _client = create_client(url, key)
    return _client


def reset_client_cache() -> None:
    """Forget the shared client so the next call builds a new one."""
    global _client
    _client = None

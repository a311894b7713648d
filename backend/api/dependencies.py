"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.
"""

from typing import TYPE_CHECKING

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.interfaces import IAuthService, IUserStore
    from modules.auth.tokens import TokenService
    from modules.media.interfaces import IBlobStore, IMediaService, IMediaStore


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    All services are cached as singletons within the container.
    Use reset() to clear all cached services for testing.
    """

    def __init__(self) -> None:
        self._user_repository: "IUserStore | None" = None
        self._token_service: "TokenService | None" = None
        self._auth_service: "IAuthService | None" = None
        self._media_repository: "IMediaStore | None" = None
        self._blob_store: "IBlobStore | None" = None
        self._media_service: "IMediaService | None" = None

    @property
    def user_repository(self) -> "IUserStore":
        """Get the user repository instance."""
        if self._user_repository is None:
            from modules.auth.repository import UserRepository
            from shared.database import get_supabase_client
            self._user_repository = UserRepository(get_supabase_client())
        return self._user_repository

    @property
    def tokens(self) -> "TokenService":
        """Get the token service instance."""
        if self._token_service is None:
            from modules.auth.tokens import TokenService
            from shared.config import get_settings
            self._token_service = TokenService.from_settings(get_settings())
        return self._token_service

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            from shared.config import get_settings
            self._auth_service = AuthService(
                users=self.user_repository,
                tokens=self.tokens,
                bcrypt_rounds=get_settings().bcrypt_rounds,
            )
        return self._auth_service

    @property
    def media_repository(self) -> "IMediaStore":
        """Get the media repository instance."""
        if self._media_repository is None:
            from modules.media.repository import MediaRepository
            from shared.database import get_supabase_client
            self._media_repository = MediaRepository(get_supabase_client())
        return self._media_repository

    @property
    def blob_store(self) -> "IBlobStore":
        """Get the blob store instance."""
        if self._blob_store is None:
            from modules.media.storage import LocalBlobStore
            from shared.config import get_settings
            self._blob_store = LocalBlobStore(get_settings().upload_dir)
        return self._blob_store

    @property
    def media(self) -> "IMediaService":
        """Get the media service instance."""
        if self._media_service is None:
            from modules.media.service import MediaService
            from shared.config import get_settings
            self._media_service = MediaService(
                repository=self.media_repository,
                blob_store=self.blob_store,
                max_file_size=get_settings().max_file_size,
            )
        return self._media_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._user_repository = None
        self._token_service = None
        self._auth_service = None
        self._media_repository = None
        self._blob_store = None
        self._media_service = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_media_service() -> "IMediaService":
    """FastAPI dependency for media service."""
    return get_container().media

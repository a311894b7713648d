"""
Authentication module interface.

Other modules should depend on IAuthService, not the concrete implementation.
This enables testing with mocks and in-memory stores.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.models import AuthenticatedUser

from .models import AuthResult, TokenPair, UserRecord, UserRole


@runtime_checkable
class IUserStore(Protocol):
    """Persistence contract for user credentials."""

    def create(
        self,
        email: str,
        password_hash: str,
        name: str,
        role: UserRole = UserRole.USER,
    ) -> UserRecord:
        ...

    def get_by_id(self, user_id: str) -> Optional[UserRecord]:
        ...

    def get_by_email(self, email: str) -> Optional[UserRecord]:
        ...


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for authentication operations.

    This protocol defines the contract that the auth module exposes
    to the API layer and other modules.
    """

    async def register(self, email: str, password: str, name: str) -> AuthResult:
        """
        Create an account and issue its first token pair.

        Raises:
            DuplicateEmailError: If the email is already registered
        """
        ...

    async def login(self, email: str, password: str) -> AuthResult:
        """
        Check credentials and issue a token pair.

        Raises:
            InvalidCredentialsError: Unknown email or wrong password, same message
        """
        ...

    async def refresh(self, refresh_token: str) -> TokenPair:
        """
        Exchange a refresh token for a new token pair.

        Raises:
            InvalidCredentialsError: If the token fails verification or the
                user no longer exists
        """
        ...

    async def authenticate(self, access_token: str) -> AuthenticatedUser:
        """
        Resolve an access token to the user it was issued for.

        Raises:
            AuthenticationError: If the token is missing, invalid or expired,
                or the user no longer exists
        """
        ...

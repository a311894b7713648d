"""
Authentication module.

Handles registration, login, token issuance and access token resolution.

Public API:
- IAuthService: Interface for auth operations
- TokenService: Signs and verifies access and refresh tokens
- UserRecord / UserSummary: Stored and public views of a user
- Auth exceptions: InvalidTokenError, InvalidCredentialsError, etc.
"""

from .interfaces import IAuthService, IUserStore
from .models import (
    AuthResult,
    JWTPayload,
    TokenPair,
    TokenType,
    UserRecord,
    UserRole,
    UserSummary,
)
from .tokens import TokenService
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    UserNotFoundError,
    InvalidCredentialsError,
    DuplicateEmailError,
)

__all__ = [
    # Interfaces
    "IAuthService",
    "IUserStore",
    # Models
    "AuthResult",
    "JWTPayload",
    "TokenPair",
    "TokenType",
    "UserRecord",
    "UserRole",
    "UserSummary",
    # Services
    "TokenService",
    # Exceptions
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingTokenError",
    "UserNotFoundError",
    "InvalidCredentialsError",
    "DuplicateEmailError",
]

"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from datetime import datetime
from enum import Enum
from pydantic import BaseModel, EmailStr, Field

from shared.models import ApiModel, AuthenticatedUser


class UserRole(str, Enum):
    """Account roles."""

    USER = "user"
    ADMIN = "admin"


class TokenType(str, Enum):
    """Kinds of signed tokens issued by the token service."""

    ACCESS = "access"
    REFRESH = "refresh"


class JWTPayload(BaseModel):
    """Decoded claims of an access or refresh token."""

    sub: str = Field(..., description="Subject (user ID)")
    email: str = Field(..., description="User's email")
    type: TokenType = Field(..., description="Token kind")
    exp: int = Field(..., description="Expiration timestamp")
    iat: int = Field(..., description="Issued at timestamp")

    @property
    def user_id(self) -> str:
        return self.sub


class UserRecord(BaseModel):
    """
    A user row as stored in the credential store.

    The password hash is excluded from every serialization.
    """

    id: str = Field(..., description="User ID (UUID)")
    email: str = Field(..., description="Email address, unique")
    password_hash: str = Field(..., exclude=True, repr=False)
    name: str = Field(default="", description="Display name")
    role: UserRole = Field(default=UserRole.USER, description="User role")
    created_at: datetime = Field(..., description="Account creation time")
    updated_at: datetime = Field(..., description="Last update time")

    def to_authenticated_user(self) -> AuthenticatedUser:
        """Build the request identity for this user."""
        return AuthenticatedUser(
            id=self.id,
            email=self.email,
            name=self.name,
            role=self.role.value,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )


class UserSummary(ApiModel):
    """Public view of a user returned by register and login."""

    id: str
    email: str
    name: str
    role: UserRole
    created_at: datetime

    @classmethod
    def from_record(cls, record: UserRecord) -> "UserSummary":
        return cls(
            id=record.id,
            email=record.email,
            name=record.name,
            role=record.role,
            created_at=record.created_at,
        )


class RegisterRequest(ApiModel):
    """Request body for POST /auth/register."""

    email: EmailStr = Field(..., description="Email address")
    password: str = Field(..., min_length=6, description="Password, at least 6 characters")
    name: str = Field(..., min_length=2, max_length=50, description="Display name")


class LoginRequest(ApiModel):
    """Request body for POST /auth/login."""

    email: EmailStr
    password: str = Field(..., min_length=1)


class RefreshRequest(ApiModel):
    """Request body for POST /auth/refresh."""

    refresh_token: str = Field(..., min_length=1)


class TokenPair(ApiModel):
    """An access token and a refresh token issued together."""

    access_token: str
    refresh_token: str


class AuthResult(TokenPair):
    """Response of register and login: the user plus a fresh token pair."""

    user: UserSummary


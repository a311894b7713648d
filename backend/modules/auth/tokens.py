"""
Token service.

Issues and verifies the two kinds of signed tokens:

- access tokens, short-lived, sent as ``Authorization: Bearer <token>``
- refresh tokens, long-lived, used only to mint a new pair

Each kind is signed with its own secret so that a leaked token of one kind
cannot be used as the other. Tokens are stateless: nothing is stored and
nothing is revoked, so a token stays valid until its own expiry.
"""

import logging
from datetime import datetime, timedelta, timezone

import jwt
from pydantic import ValidationError as PydanticValidationError

from shared.config import Settings

from .exceptions import ExpiredTokenError, InvalidTokenError, MissingTokenError
from .models import JWTPayload, TokenPair, TokenType

logger = logging.getLogger(__name__)


class TokenService:
    """Signs and verifies access and refresh tokens with PyJWT."""

    def __init__(
        self,
        access_secret: str,
        refresh_secret: str,
        access_ttl: timedelta = timedelta(hours=24),
        refresh_ttl: timedelta = timedelta(days=7),
        algorithm: str = "HS256",
    ):
        if not access_secret or not refresh_secret:
            raise RuntimeError(
                "Token configuration missing. "
                "Set JWT_ACCESS_SECRET and JWT_REFRESH_SECRET environment variables."
            )
        self._secrets = {
            TokenType.ACCESS: access_secret,
            TokenType.REFRESH: refresh_secret,
        }
        self._ttls = {
            TokenType.ACCESS: access_ttl,
            TokenType.REFRESH: refresh_ttl,
        }
        self._algorithm = algorithm

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenService":
        """Build a token service from application settings."""
        return cls(
            access_secret=settings.jwt_access_secret,
            refresh_secret=settings.jwt_refresh_secret,
            access_ttl=timedelta(minutes=settings.access_token_expire_minutes),
            refresh_ttl=timedelta(minutes=settings.refresh_token_expire_minutes),
            algorithm=settings.jwt_algorithm,
        )

    def issue_token_pair(self, user_id: str, email: str) -> TokenPair:
        """
        Sign a fresh access token and refresh token for a user.

        Args:
            user_id: Subject of both tokens
            email: User's email, carried as a claim

        Returns:
            TokenPair with both encoded tokens
        """
        return TokenPair(
            access_token=self._encode(TokenType.ACCESS, user_id, email),
            refresh_token=self._encode(TokenType.REFRESH, user_id, email),
        )

    def verify_access(self, token: str) -> JWTPayload:
        """
        Verify an access token.

        Raises:
            MissingTokenError: If the token is empty
            ExpiredTokenError: If the token has expired
            InvalidTokenError: If the signature, format or kind is wrong
        """
        return self._decode(TokenType.ACCESS, token)

    def verify_refresh(self, token: str) -> JWTPayload:
        """Verify a refresh token. Same contract as verify_access."""
        return self._decode(TokenType.REFRESH, token)

    def _encode(self, token_type: TokenType, user_id: str, email: str) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            "sub": user_id,
            "email": email,
            "type": token_type.value,
            "iat": int(now.timestamp()),
            "exp": int((now + self._ttls[token_type]).timestamp()),
        }
        return jwt.encode(payload, self._secrets[token_type], algorithm=self._algorithm)

    def _decode(self, token_type: TokenType, token: str) -> JWTPayload:
        if not token:
            raise MissingTokenError()

        try:
            payload = jwt.decode(
                token,
                self._secrets[token_type],
                algorithms=[self._algorithm],
                options={"require": ["sub", "exp", "iat"]},
            )
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.InvalidTokenError as e:
            logger.debug("Rejected %s token: %s", token_type.value, e)
            raise InvalidTokenError(f"Invalid token: {e}")

        try:
            claims = JWTPayload(**payload)
        except PydanticValidationError:
            raise InvalidTokenError("Invalid token: malformed claims")

        if claims.type != token_type:
            raise InvalidTokenError(f"Invalid token: expected {token_type.value} token")

        return claims

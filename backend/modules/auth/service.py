"""
Authentication service implementation.

Registration, login and token refresh against the credential store,
plus access token resolution for the request authorization gate.
"""

import logging
from typing import Optional

from starlette.concurrency import run_in_threadpool

from shared.exceptions import AuthenticationError
from shared.models import AuthenticatedUser

from .exceptions import (
    DuplicateEmailError,
    InvalidCredentialsError,
    UserNotFoundError,
)
from .interfaces import IAuthService, IUserStore
from .models import AuthResult, TokenPair, UserRecord, UserSummary
from .passwords import DEFAULT_ROUNDS, hash_password, verify_password
from .tokens import TokenService

logger = logging.getLogger(__name__)


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Users live in the credential store; tokens are stateless JWTs,
    so no session state is kept server-side.
    """

    def __init__(
        self,
        users: IUserStore,
        tokens: TokenService,
        bcrypt_rounds: int = DEFAULT_ROUNDS,
    ):
        self._users = users
        self._tokens = tokens
        self._bcrypt_rounds = bcrypt_rounds
        self._dummy_hash: Optional[str] = None

    async def register(self, email: str, password: str, name: str) -> AuthResult:
        """Create a user with role ``user`` and issue its first token pair."""
        if self._users.get_by_email(email) is not None:
            raise DuplicateEmailError(email)

        password_hash = await run_in_threadpool(hash_password, password, self._bcrypt_rounds)
        user = self._users.create(email=email, password_hash=password_hash, name=name)
        logger.info("Registered user %s", user.id)
        return self._auth_result(user)

    async def login(self, email: str, password: str) -> AuthResult:
        """Check credentials and issue a token pair."""
        user = self._users.get_by_email(email)
        # Unknown emails still pay for a bcrypt check
        stored_hash = user.password_hash if user is not None else await self._get_dummy_hash()
        matches = await run_in_threadpool(verify_password, password, stored_hash)
        if user is None or not matches:
            logger.warning("Rejected login attempt")
            raise InvalidCredentialsError()

        logger.info("User %s logged in", user.id)
        return self._auth_result(user)

    async def refresh(self, refresh_token: str) -> TokenPair:
        """
        Exchange a refresh token for a new token pair.

        The presented refresh token is not revoked and stays valid until
        its own expiry.
        """
        try:
            claims = self._tokens.verify_refresh(refresh_token)
        except AuthenticationError:
            raise InvalidCredentialsError("Invalid refresh token")

        user = self._users.get_by_id(claims.user_id)
        if user is None:
            raise InvalidCredentialsError("Invalid refresh token")

        return self._tokens.issue_token_pair(user.id, user.email)

    async def authenticate(self, access_token: str) -> AuthenticatedUser:
        """Verify an access token and load the user it names."""
        claims = self._tokens.verify_access(access_token)

        user = self._users.get_by_id(claims.user_id)
        if user is None:
            raise UserNotFoundError(claims.user_id)

        return user.to_authenticated_user()

    async def _get_dummy_hash(self) -> str:
        if self._dummy_hash is None:
            self._dummy_hash = await run_in_threadpool(
                hash_password, "mediashare-dummy-password", self._bcrypt_rounds
            )
        return self._dummy_hash

    def _auth_result(self, user: UserRecord) -> AuthResult:
        pair = self._tokens.issue_token_pair(user.id, user.email)
        return AuthResult(
            user=UserSummary.from_record(user),
            access_token=pair.access_token,
            refresh_token=pair.refresh_token,
        )

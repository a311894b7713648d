"""
Bearer token authentication dependency.

Verifies the access token from the Authorization header, loads the user
it was issued for, and hands the resolved identity to the route.
"""

from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from modules.auth.exceptions import MissingTokenError
from modules.auth.interfaces import IAuthService
from shared.models import AuthenticatedUser

from ..dependencies import get_auth_service

# Bearer token extractor
bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth: IAuthService = Depends(get_auth_service),
) -> AuthenticatedUser:
    """
    Dependency that requires authentication.

    Use this for endpoints that require a logged-in user.

    Usage:
        @router.get("/protected")
        async def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}

    Raises:
        AuthenticationError: Missing, invalid or expired token, or the user
            no longer exists. Rendered as 401 by the API error handlers.
    """
    if credentials is None:
        raise MissingTokenError("Missing authorization header")

    return await auth.authenticate(credentials.credentials)

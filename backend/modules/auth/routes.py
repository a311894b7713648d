"""
Authentication API endpoints.

Registration, login and token refresh. None of these require a bearer token.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_auth_service

from .interfaces import IAuthService
from .models import AuthResult, LoginRequest, RefreshRequest, RegisterRequest, TokenPair

router = APIRouter()


@router.post("/register", response_model=AuthResult, status_code=201)
async def register(
    request: RegisterRequest,
    service: IAuthService = Depends(get_auth_service),
) -> AuthResult:
    """
    Register a new user.

    Returns the created user together with an access and refresh token.
    """
    return await service.register(request.email, request.password, request.name)


@router.post("/login", response_model=AuthResult)
async def login(
    request: LoginRequest,
    service: IAuthService = Depends(get_auth_service),
) -> AuthResult:
    """Log in with email and password."""
    return await service.login(request.email, request.password)


@router.post("/refresh", response_model=TokenPair)
async def refresh(
    request: RefreshRequest,
    service: IAuthService = Depends(get_auth_service),
) -> TokenPair:
    """Exchange a refresh token for a new token pair."""
    return await service.refresh(request.refresh_token)

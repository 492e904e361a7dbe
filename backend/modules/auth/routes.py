"""
Account and session endpoints.

Successful register, login and password change set the session cookie;
logout deletes it. Tokens are not revoked server-side.
"""

from fastapi import APIRouter, Depends, Response

from api.middleware.auth import get_current_user
from api.dependencies import get_auth_service
from shared.config import get_settings
from shared.models import AuthenticatedUser
from shared.responses import ApiResponse
from modules.users.models import User

from .interfaces import IAuthService
from .models import (
    IssuedSession,
    LoginRequest,
    PasswordUpdateRequest,
    ProfileUpdateRequest,
    RegisterRequest,
)

router = APIRouter()


def set_session_cookie(response: Response, session: IssuedSession) -> None:
    """Attach the session token as an HTTP-only cookie living as long as the token."""
    settings = get_settings()
    response.set_cookie(
        key=settings.cookie_name,
        value=session.token,
        max_age=settings.jwt_expires_in,
        httponly=True,
        secure=settings.is_production,
        samesite="strict",
    )


def clear_session_cookie(response: Response) -> None:
    settings = get_settings()
    response.delete_cookie(
        key=settings.cookie_name,
        httponly=True,
        secure=settings.is_production,
        samesite="strict",
    )


@router.post("/register", response_model=ApiResponse[User], response_model_exclude_none=True, status_code=201)
async def register(
    request: RegisterRequest,
    response: Response,
    service: IAuthService = Depends(get_auth_service),
) -> ApiResponse[User]:
    """Create an account and sign it in."""
    session = await service.register(request)
    set_session_cookie(response, session)
    return ApiResponse(message="Registration successful", data=session.user)


@router.post("/login", response_model=ApiResponse[User], response_model_exclude_none=True)
async def login(
    request: LoginRequest,
    response: Response,
    service: IAuthService = Depends(get_auth_service),
) -> ApiResponse[User]:
    """Sign in with email and password."""
    session = await service.login(request)
    set_session_cookie(response, session)
    return ApiResponse(message="Login successful", data=session.user)


@router.post("/logout", response_model=ApiResponse[None], response_model_exclude_none=True)
async def logout(
    response: Response,
    user: AuthenticatedUser = Depends(get_current_user),
) -> ApiResponse[None]:
    """Sign out by discarding the session cookie."""
    clear_session_cookie(response)
    return ApiResponse(message="Logged out successfully")


@router.get("/me", response_model=ApiResponse[User], response_model_exclude_none=True)
async def get_me(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IAuthService = Depends(get_auth_service),
) -> ApiResponse[User]:
    """Get the current user's account."""
    return ApiResponse(data=await service.get_me(user))


@router.put("/profile", response_model=ApiResponse[User], response_model_exclude_none=True)
async def update_profile(
    request: ProfileUpdateRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IAuthService = Depends(get_auth_service),
) -> ApiResponse[User]:
    """Update the current user's name and/or email."""
    updated = await service.update_profile(user, request)
    return ApiResponse(message="Profile updated successfully", data=updated)


@router.put("/password", response_model=ApiResponse[None], response_model_exclude_none=True)
async def update_password(
    request: PasswordUpdateRequest,
    response: Response,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IAuthService = Depends(get_auth_service),
) -> ApiResponse[None]:
    """Change the current user's password and reissue the session cookie."""
    session = await service.update_password(user, request)
    set_session_cookie(response, session)
    return ApiResponse(message="Password updated successfully")

"""
Account administration endpoints.

Every route here requires the admin role.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query

from api.middleware.auth import require_admin
from api.dependencies import get_user_service
from shared.models import AuthenticatedUser
from shared.responses import ApiResponse

from .interfaces import IUserService
from .models import RoleUpdateRequest, User, UserStats

router = APIRouter(dependencies=[Depends(require_admin)])


@router.get("", response_model=ApiResponse[list[User]], response_model_exclude_none=True)
async def list_users(
    page: int = Query(default=1, ge=1, description="Page number (1-indexed)"),
    limit: int = Query(default=10, ge=1, le=100, description="Items per page"),
    service: IUserService = Depends(get_user_service),
) -> ApiResponse[list[User]]:
    """List all users, newest first."""
    users, pagination = await service.list_users(page, limit)
    return ApiResponse(data=users, pagination=pagination)


@router.get("/stats", response_model=ApiResponse[UserStats], response_model_exclude_none=True)
async def get_user_stats(
    service: IUserService = Depends(get_user_service),
) -> ApiResponse[UserStats]:
    """Count users in total and per role."""
    return ApiResponse(data=await service.get_stats())


@router.get("/{user_id}", response_model=ApiResponse[User], response_model_exclude_none=True)
async def get_user(
    user_id: UUID,
    service: IUserService = Depends(get_user_service),
) -> ApiResponse[User]:
    """Get a single user."""
    return ApiResponse(data=await service.get_user(str(user_id)))


@router.put("/{user_id}/role", response_model=ApiResponse[User], response_model_exclude_none=True)
async def update_user_role(
    user_id: UUID,
    request: RoleUpdateRequest,
    admin: AuthenticatedUser = Depends(require_admin),
    service: IUserService = Depends(get_user_service),
) -> ApiResponse[User]:
    """
    Change a user's role.

    The user's existing session keeps its old role until they sign in again.
    """
    user = await service.update_role(admin, str(user_id), request.role)
    return ApiResponse(message="User role updated successfully", data=user)


@router.delete("/{user_id}", response_model=ApiResponse[None], response_model_exclude_none=True)
async def delete_user(
    user_id: UUID,
    admin: AuthenticatedUser = Depends(require_admin),
    service: IUserService = Depends(get_user_service),
) -> ApiResponse[None]:
    """Delete a user."""
    await service.delete_user(admin, str(user_id))
    return ApiResponse(message="User deleted successfully")

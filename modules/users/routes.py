"""
User endpoints.

Registration is public; every other endpoint requires a bearer credential.
"""

from fastapi import APIRouter, Depends

from api.middleware.auth import get_current_user
from api.dependencies import get_user_service
from shared.models import ApiResponse, AuthenticatedUser

from .interfaces import IUserService
from .models import UserCreate, UserUpdate

router = APIRouter()


@router.post("", response_model=ApiResponse, status_code=201)
async def register_user(
    request: UserCreate,
    service: IUserService = Depends(get_user_service),
) -> ApiResponse:
    """Register a new account. The password is never echoed back."""
    user = await service.register(request)
    return ApiResponse.ok("User created successfully", user)


@router.get("", response_model=ApiResponse)
async def list_users(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
) -> ApiResponse:
    users = await service.list_users()
    return ApiResponse.ok("Users retrieved successfully", users)


@router.get("/{user_id}", response_model=ApiResponse)
async def get_user(
    user_id: int,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
) -> ApiResponse:
    found = await service.get_user(user_id)
    return ApiResponse.ok("User was found", found)


@router.put("/{user_id}", response_model=ApiResponse)
async def update_user(
    user_id: int,
    request: UserUpdate,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
) -> ApiResponse:
    """
    Update an account.

    Allowed for the account owner and for admins; only admins may change roles.
    """
    updated = await service.update_user(user, user_id, request)
    return ApiResponse.ok("User updated successfully", updated)


@router.delete("/{user_id}", response_model=ApiResponse)
async def delete_user(
    user_id: int,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
) -> ApiResponse:
    await service.delete_user(user, user_id)
    return ApiResponse.ok("User successfully deleted")

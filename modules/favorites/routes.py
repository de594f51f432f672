"""
Favorite endpoints.

All endpoints require a bearer credential and only ever touch the
caller's own favorites.
"""

from fastapi import APIRouter, Depends

from api.middleware.auth import get_current_user
from api.dependencies import get_favorite_service
from shared.models import ApiResponse, AuthenticatedUser

from .interfaces import IFavoriteService
from .models import FavoriteCreate, FavoriteUpdate

router = APIRouter()


@router.post("", response_model=ApiResponse, status_code=201)
async def add_favorite(
    request: FavoriteCreate,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IFavoriteService = Depends(get_favorite_service),
) -> ApiResponse:
    """
    Add a product to the caller's favorites.

    Returns 409 if the product is already a favorite.
    """
    favorite = await service.add_favorite(user.id, request)
    return ApiResponse.ok("Product added to favorites", favorite)


@router.get("", response_model=ApiResponse)
async def list_favorites(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IFavoriteService = Depends(get_favorite_service),
) -> ApiResponse:
    favorites = await service.list_favorites(user.id)
    return ApiResponse.ok("Favorites retrieved successfully", favorites)


@router.get("/{favorite_id}", response_model=ApiResponse)
async def get_favorite(
    favorite_id: int,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IFavoriteService = Depends(get_favorite_service),
) -> ApiResponse:
    favorite = await service.get_favorite(user.id, favorite_id)
    return ApiResponse.ok("Favorite retrieved successfully", favorite)


@router.put("/{favorite_id}", response_model=ApiResponse)
async def update_favorite(
    favorite_id: int,
    request: FavoriteUpdate,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IFavoriteService = Depends(get_favorite_service),
) -> ApiResponse:
    favorite = await service.update_favorite(user.id, favorite_id, request)
    return ApiResponse.ok("Favorite updated successfully", favorite)


@router.delete("/product/{product_id}", response_model=ApiResponse)
async def remove_favorite_by_product(
    product_id: int,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IFavoriteService = Depends(get_favorite_service),
) -> ApiResponse:
    """Remove a favorite by product ID, as used by the favorite toggle."""
    await service.remove_favorite_by_product(user.id, product_id)
    return ApiResponse.ok("Favorite removed successfully")


@router.delete("/{favorite_id}", response_model=ApiResponse)
async def remove_favorite(
    favorite_id: int,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IFavoriteService = Depends(get_favorite_service),
) -> ApiResponse:
    await service.remove_favorite(user.id, favorite_id)
    return ApiResponse.ok("Favorite removed successfully")

"""
Product endpoints.

Catalog reads are public. Create, update and delete require a bearer
credential and, by default, the admin role.
"""

from fastapi import APIRouter, Depends

from api.middleware.auth import get_current_user
from api.dependencies import get_product_service
from shared.models import ApiResponse, AuthenticatedUser

from .interfaces import IProductService
from .models import ProductCreate, ProductUpdate

router = APIRouter()


@router.get("", response_model=ApiResponse)
async def list_products(
    service: IProductService = Depends(get_product_service),
) -> ApiResponse:
    products = await service.list_products()
    return ApiResponse.ok("Products retrieved successfully", products)


@router.get("/{product_id}", response_model=ApiResponse)
async def get_product(
    product_id: int,
    service: IProductService = Depends(get_product_service),
) -> ApiResponse:
    product = await service.get_product(product_id)
    return ApiResponse.ok("Product was found", product)


@router.post("", response_model=ApiResponse, status_code=201)
async def create_product(
    request: ProductCreate,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProductService = Depends(get_product_service),
) -> ApiResponse:
    """
    Create a single product.

    An unknown category is stored as "Other".
    """
    product = await service.create_product(user, request)
    return ApiResponse.ok("Product created successfully", product)


@router.post("/bulk", response_model=ApiResponse, status_code=201)
async def create_products(
    request: list[ProductCreate],
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProductService = Depends(get_product_service),
) -> ApiResponse:
    """Create several products from a JSON array."""
    products = await service.create_products(user, request)
    return ApiResponse.ok("Products created successfully", products)


@router.put("/{product_id}", response_model=ApiResponse)
async def update_product(
    product_id: int,
    request: ProductUpdate,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProductService = Depends(get_product_service),
) -> ApiResponse:
    product = await service.update_product(user, product_id, request)
    return ApiResponse.ok("Product updated successfully", product)


@router.delete("/{product_id}", response_model=ApiResponse)
async def delete_product(
    product_id: int,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProductService = Depends(get_product_service),
) -> ApiResponse:
    await service.delete_product(user, product_id)
    return ApiResponse.ok("Product successfully deleted")

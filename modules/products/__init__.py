"""
Products module.

Public catalog browsing and admin-managed product CRUD.

Public API:
- IProductService: Interface for product operations
- Product, ProductCreate, ProductUpdate, ProductCategory: Models
- ProductNotFoundError
"""

from .interfaces import IProductService
from .models import Product, ProductCreate, ProductUpdate, ProductCategory
from .exceptions import ProductNotFoundError

__all__ = [
    "IProductService",
    "Product",
    "ProductCreate",
    "ProductUpdate",
    "ProductCategory",
    "ProductNotFoundError",
]

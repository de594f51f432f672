"""
Favorites module data models.
"""

from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, Field, field_validator

from shared.models import CamelModel
from modules.products.models import ProductCategory


class Favorite(CamelModel):
    """A user's favorite with the product snapshot taken when it was added."""

    id: int
    user_id: int
    product_id: int
    name: str
    description: Optional[str] = None
    price: float
    category: ProductCategory
    image: Optional[str] = None
    stock: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class FavoriteCreate(CamelModel):
    """
    Payload for POST /favorites.

    productId, name, price and category are required; the rest of the
    snapshot is optional.
    """

    model_config = ConfigDict(extra="forbid")

    product_id: int = Field(..., ge=1)
    name: str = Field(..., min_length=1)
    price: float = Field(..., ge=0)
    category: ProductCategory
    description: Optional[str] = None
    image: Optional[str] = None
    stock: int = Field(default=0, ge=0)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name must not be empty")
        return v

    @field_validator("stock", mode="before")
    @classmethod
    def null_stock(cls, v):
        return 0 if v is None else v


class FavoriteUpdate(CamelModel):
    """
    Partial refresh of snapshot fields.

    Ownership and product reference cannot be changed, so userId and
    productId are rejected like any other unknown key.
    """

    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    price: Optional[float] = Field(None, ge=0)
    category: Optional[ProductCategory] = None
    image: Optional[str] = None
    stock: Optional[int] = Field(None, ge=0)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("name must not be empty")
        return v

"""
Products module data models.

Category is a closed set. Unknown or missing categories fall back to
OTHER instead of failing the request; price and stock default to 0 when
absent but must be valid non-negative numbers when given.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import ConfigDict, Field, field_validator

from shared.models import CamelModel


class ProductCategory(str, Enum):
    """Catalog categories."""

    ELECTRONICS = "Electronics"
    CLOTHING = "Clothing"
    BOOKS = "Books"
    HOME = "Home"
    SPORTS = "Sports"
    FOOD = "Food"
    OTHER = "Other"
    BRAKE_SYSTEMS = "Sisteme franare"
    CONSUMABLES = "Consumabile"
    HEADLIGHTS = "Sisteme luminare fata"
    WINDSHIELD_CLEANING = "Sisteme curatare parbriz"
    BATTERIES = "Baterii"
    PARKING_SYSTEMS = "Sisteme de parcare"

    @classmethod
    def coerce(cls, value: Any) -> "ProductCategory":
        """Map any input to a category, defaulting to OTHER."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.OTHER


def _clean_name(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("Product name is required")
    return value


class Product(CamelModel):
    """Product as returned to clients."""

    id: int
    name: str
    description: Optional[str] = None
    price: float = 0
    category: ProductCategory = ProductCategory.OTHER
    image: Optional[str] = None
    stock: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ProductCreate(CamelModel):
    """Payload for creating one product."""

    model_config = ConfigDict(extra="forbid")

    name: str
    description: Optional[str] = None
    price: float = Field(default=0, ge=0)
    category: ProductCategory = ProductCategory.OTHER
    image: Optional[str] = None
    stock: int = Field(default=0, ge=0)

    @field_validator("name")
    @classmethod
    def clean_name(cls, v: str) -> str:
        return _clean_name(v)

    @field_validator("category", mode="before")
    @classmethod
    def coerce_category(cls, v: Any) -> ProductCategory:
        return ProductCategory.coerce(v)

    @field_validator("price", "stock", mode="before")
    @classmethod
    def null_to_zero(cls, v: Any) -> Any:
        return 0 if v is None else v


class ProductUpdate(CamelModel):
    """Partial product update. Only provided fields are written."""

    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = Field(default=None, ge=0)
    category: Optional[ProductCategory] = None
    image: Optional[str] = None
    stock: Optional[int] = Field(default=None, ge=0)

    @field_validator("name")
    @classmethod
    def clean_name(cls, v: Optional[str]) -> Optional[str]:
        return _clean_name(v) if v is not None else v

    @field_validator("category", mode="before")
    @classmethod
    def coerce_category(cls, v: Any) -> Optional[ProductCategory]:
        return ProductCategory.coerce(v) if v is not None else None

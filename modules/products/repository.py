"""
Product repository for database access.

Encapsulates all Supabase queries and data mapping for the products table.
"""

from datetime import datetime, timezone
from typing import Optional, Any

from shared.repository import BaseRepository
from .models import Product, ProductCategory

TABLE = "products"


class ProductRepository(BaseRepository[Product]):
    """
    Repository for product data access.

    Note: This repository does NOT perform authorization checks.
    The service layer applies the access policy.
    """

    def create(self, data: dict[str, Any]) -> Product:
        result = self._db.table(TABLE).insert(data).execute()
        return self._map_to_product(result.data[0])

    def create_many(self, rows: list[dict[str, Any]]) -> list[Product]:
        """Insert several rows in a single statement."""
        result = self._db.table(TABLE).insert(rows).execute()
        return [self._map_to_product(row) for row in result.data]

    def get_by_id(self, product_id: int) -> Optional[Product]:
        result = self._db.table(TABLE).select("*").eq("id", product_id).execute()
        if not result.data:
            return None
        return self._map_to_product(result.data[0])

    def list_all(self) -> list[Product]:
        result = self._db.table(TABLE).select("*").order("id").execute()
        return [self._map_to_product(row) for row in result.data]

    def update(self, product_id: int, data: dict[str, Any]) -> Optional[Product]:
        """
        Update columns of a product row.

        Returns:
            The updated product, or None if no row matched.
        """
        data = {**data, "updated_at": datetime.now(timezone.utc).isoformat()}
        result = self._db.table(TABLE).update(data).eq("id", product_id).execute()
        if not result.data:
            return None
        return self._map_to_product(result.data[0])

    def delete(self, product_id: int) -> bool:
        """
        Delete a product row.

        Favorites keep their snapshot; product_id carries no foreign key.
        """
        result = self._db.table(TABLE).delete().eq("id", product_id).execute()
        return bool(result.data)

    def _map_to_product(self, data: dict[str, Any]) -> Product:
        """Map database row to Product model."""
        return Product(
            id=int(data["id"]),
            name=data["name"],
            description=data.get("description"),
            price=float(data.get("price") or 0),
            category=ProductCategory.coerce(data.get("category")),
            image=data.get("image"),
            stock=int(data.get("stock") or 0),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )

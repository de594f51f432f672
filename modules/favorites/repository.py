"""
Favorite repository for database access.

Encapsulates all Supabase queries and data mapping for the favorites table.
Every query is filtered by user_id, so a favorite owned by another user is
indistinguishable from a missing one.
"""

import logging
from datetime import datetime, timezone
from typing import Optional, Any

from postgrest.exceptions import APIError

from shared.repository import BaseRepository, is_foreign_key_violation, is_unique_violation
from modules.products.models import ProductCategory
from .models import Favorite
from .exceptions import FavoriteAlreadyExistsError, FavoriteOwnerMissingError

logger = logging.getLogger(__name__)

TABLE = "favorites"


class FavoriteRepository(BaseRepository[Favorite]):
    """
    Repository for favorite data access.

    The favorites_user_product_key constraint on (user_id, product_id) is
    the authority on duplicates; an insert that violates it raises
    FavoriteAlreadyExistsError.
    """

    def create(self, user_id: int, data: dict[str, Any]) -> Favorite:
        row = {**data, "user_id": user_id}
        try:
            result = self._db.table(TABLE).insert(row).execute()
        except APIError as e:
            if is_unique_violation(e):
                logger.info(
                    f"Unique constraint rejected duplicate favorite "
                    f"(user {user_id}, product {row.get('product_id')})"
                )
                raise FavoriteAlreadyExistsError(user_id, row["product_id"]) from e
            if is_foreign_key_violation(e):
                logger.warning(f"Favorite insert for missing user {user_id}")
                raise FavoriteOwnerMissingError(user_id) from e
            raise
        return self._map_to_favorite(result.data[0])

    def get(self, user_id: int, favorite_id: int) -> Optional[Favorite]:
        result = (
            self._db.table(TABLE)
            .select("*")
            .eq("id", favorite_id)
            .eq("user_id", user_id)
            .execute()
        )
        if not result.data:
            return None
        return self._map_to_favorite(result.data[0])

    def find_by_product(self, user_id: int, product_id: int) -> Optional[Favorite]:
        result = (
            self._db.table(TABLE)
            .select("*")
            .eq("user_id", user_id)
            .eq("product_id", product_id)
            .execute()
        )
        if not result.data:
            return None
        return self._map_to_favorite(result.data[0])

    def list_for_user(self, user_id: int) -> list[Favorite]:
        result = (
            self._db.table(TABLE)
            .select("*")
            .eq("user_id", user_id)
            .order("id")
            .execute()
        )
        return [self._map_to_favorite(row) for row in result.data]

    def update(self, user_id: int, favorite_id: int, data: dict[str, Any]) -> Optional[Favorite]:
        """
        Overwrite snapshot columns of one favorite.

        Returns:
            The updated favorite, or None if the caller owns no such row.
        """
        data = {**data, "updated_at": datetime.now(timezone.utc).isoformat()}
        result = (
            self._db.table(TABLE)
            .update(data)
            .eq("id", favorite_id)
            .eq("user_id", user_id)
            .execute()
        )
        if not result.data:
            return None
        return self._map_to_favorite(result.data[0])

    def delete(self, user_id: int, favorite_id: int) -> bool:
        """
        Delete one favorite in a single statement.

        Returns:
            True if a row was removed. Of two concurrent deletes, only one
            sees a removed row.
        """
        result = (
            self._db.table(TABLE)
            .delete()
            .eq("id", favorite_id)
            .eq("user_id", user_id)
            .execute()
        )
        return bool(result.data)

    def delete_by_product(self, user_id: int, product_id: int) -> bool:
        result = (
            self._db.table(TABLE)
            .delete()
            .eq("user_id", user_id)
            .eq("product_id", product_id)
            .execute()
        )
        return bool(result.data)

    def _map_to_favorite(self, data: dict[str, Any]) -> Favorite:
        """Map database row to Favorite model."""
        return Favorite(
            id=int(data["id"]),
            user_id=int(data["user_id"]),
            product_id=int(data["product_id"]),
            name=data["name"],
            description=data.get("description"),
            price=float(data.get("price") or 0),
            category=ProductCategory.coerce(data.get("category")),
            image=data.get("image"),
            stock=int(data.get("stock") or 0),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )

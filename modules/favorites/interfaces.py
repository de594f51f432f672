"""
Favorites module interfaces.

IFavoriteRepository is the storage contract: it must enforce uniqueness of
(user_id, product_id) itself and report a violation as
FavoriteAlreadyExistsError, and its deletes must be single statements that
report whether a row was removed.
"""

from typing import Any, Optional, Protocol, runtime_checkable

from .models import Favorite, FavoriteCreate, FavoriteUpdate


@runtime_checkable
class IFavoriteRepository(Protocol):
    """Storage operations, every one scoped by user ID."""

    def create(self, user_id: int, data: dict[str, Any]) -> Favorite:
        ...

    def get(self, user_id: int, favorite_id: int) -> Optional[Favorite]:
        ...

    def find_by_product(self, user_id: int, product_id: int) -> Optional[Favorite]:
        ...

    def list_for_user(self, user_id: int) -> list[Favorite]:
        ...

    def update(self, user_id: int, favorite_id: int, data: dict[str, Any]) -> Optional[Favorite]:
        ...

    def delete(self, user_id: int, favorite_id: int) -> bool:
        ...

    def delete_by_product(self, user_id: int, product_id: int) -> bool:
        ...


@runtime_checkable
class IFavoriteService(Protocol):
    """
    Interface for favorite operations.

    Every method takes the caller's user ID; favorites of other users are
    reported as not found.
    """

    async def add_favorite(self, user_id: int, request: FavoriteCreate) -> Favorite:
        """
        Raises:
            FavoriteAlreadyExistsError: If the product is already a favorite
        """
        ...

    async def list_favorites(self, user_id: int) -> list[Favorite]:
        ...

    async def get_favorite(self, user_id: int, favorite_id: int) -> Favorite:
        """
        Raises:
            FavoriteNotFoundError: If absent or owned by someone else
        """
        ...

    async def update_favorite(
        self,
        user_id: int,
        favorite_id: int,
        request: FavoriteUpdate,
    ) -> Favorite:
        ...

    async def remove_favorite(self, user_id: int, favorite_id: int) -> None:
        ...

    async def remove_favorite_by_product(self, user_id: int, product_id: int) -> None:
        ...

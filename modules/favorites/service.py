"""
Favorites service implementation.

Each (user, product) pair is either absent or present:
- add moves absent -> present, and fails with a conflict if already present
- remove moves present -> absent, and fails with not-found if already absent

The pre-insert lookup in add_favorite only short-circuits the common case.
Concurrent adds can both pass it; the repository's unique constraint then
lets exactly one insert through and reports the other as a conflict.
"""

import logging

from .interfaces import IFavoriteService, IFavoriteRepository
from .models import Favorite, FavoriteCreate, FavoriteUpdate
from .exceptions import FavoriteAlreadyExistsError, FavoriteNotFoundError

logger = logging.getLogger(__name__)


class FavoriteService(IFavoriteService):
    """Favorite service backed by an IFavoriteRepository."""

    def __init__(self, repository: IFavoriteRepository):
        self._repo = repository

    async def add_favorite(self, user_id: int, request: FavoriteCreate) -> Favorite:
        """Store a snapshot of the product for the user."""
        if self._repo.find_by_product(user_id, request.product_id) is not None:
            logger.info(f"User {user_id} already has product {request.product_id} in favorites")
            raise FavoriteAlreadyExistsError(user_id, request.product_id)

        favorite = self._repo.create(user_id, request.model_dump(mode="json"))
        logger.info(f"User {user_id} added product {request.product_id} to favorites")
        return favorite

    async def list_favorites(self, user_id: int) -> list[Favorite]:
        return self._repo.list_for_user(user_id)

    async def get_favorite(self, user_id: int, favorite_id: int) -> Favorite:
        favorite = self._repo.get(user_id, favorite_id)
        if favorite is None:
            raise FavoriteNotFoundError(user_id, favorite_id=favorite_id)
        return favorite

    async def update_favorite(
        self,
        user_id: int,
        favorite_id: int,
        request: FavoriteUpdate,
    ) -> Favorite:
        """Overwrite only the snapshot fields present in the request."""
        data = {
            key: value
            for key, value in request.model_dump(mode="json", exclude_unset=True).items()
            if value is not None or key in ("description", "image")
        }
        if not data:
            return await self.get_favorite(user_id, favorite_id)

        favorite = self._repo.update(user_id, favorite_id, data)
        if favorite is None:
            raise FavoriteNotFoundError(user_id, favorite_id=favorite_id)
        return favorite

    async def remove_favorite(self, user_id: int, favorite_id: int) -> None:
        if not self._repo.delete(user_id, favorite_id):
            raise FavoriteNotFoundError(user_id, favorite_id=favorite_id)
        logger.info(f"User {user_id} removed favorite {favorite_id}")

    async def remove_favorite_by_product(self, user_id: int, product_id: int) -> None:
        if not self._repo.delete_by_product(user_id, product_id):
            raise FavoriteNotFoundError(user_id, product_id=product_id)
        logger.info(f"User {user_id} removed product {product_id} from favorites")

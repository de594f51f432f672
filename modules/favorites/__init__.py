"""
Favorites module.

Per-user bookmarks of products with a snapshot of the product's fields.
At most one favorite exists per (user, product) pair.

Public API:
- IFavoriteService: Interface for favorite operations
- IFavoriteRepository: Storage contract the service relies on
- Favorite, FavoriteCreate, FavoriteUpdate: Models
- Favorite exceptions: FavoriteNotFoundError, FavoriteAlreadyExistsError,
  FavoriteOwnerMissingError
"""

from .interfaces import IFavoriteService, IFavoriteRepository
from .models import Favorite, FavoriteCreate, FavoriteUpdate
from .exceptions import FavoriteNotFoundError, FavoriteAlreadyExistsError, FavoriteOwnerMissingError

__all__ = [
    "IFavoriteService",
    "IFavoriteRepository",
    "Favorite",
    "FavoriteCreate",
    "FavoriteUpdate",
    "FavoriteNotFoundError",
    "FavoriteAlreadyExistsError",
    "FavoriteOwnerMissingError",
]

"""
Favorites module exceptions.
"""

from shared.exceptions import AuthenticationError, ConflictError, NotFoundError


class FavoriteNotFoundError(NotFoundError):
    """
    Raised when a favorite does not exist for the caller.

    Also used when the favorite belongs to another user, so callers cannot
    guess at other users' favorites.
    """

    def __init__(self, user_id: int, favorite_id: int | None = None, product_id: int | None = None):
        details: dict = {"user_id": user_id}
        if favorite_id is not None:
            details["favorite_id"] = favorite_id
        if product_id is not None:
            details["product_id"] = product_id
        super().__init__("Favorite not found", code="FAVORITE_NOT_FOUND", details=details)


class FavoriteAlreadyExistsError(ConflictError):
    """Raised when the (user, product) pair is already favorited."""

    def __init__(self, user_id: int, product_id: int):
        super().__init__(
            "Product already in favorites",
            code="FAVORITE_ALREADY_EXISTS",
            details={"user_id": user_id, "product_id": product_id},
        )


class FavoriteOwnerMissingError(AuthenticationError):
    """
    Raised when the caller's account no longer exists.

    Credentials are stateless, so a token can outlive its user; the
    favorites foreign key on user_id reports that case on insert.
    """

    def __init__(self, user_id: int):
        super().__init__(
            "User not found",
            code="FAVORITE_OWNER_MISSING",
            details={"user_id": user_id},
        )

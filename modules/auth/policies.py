"""
Authorization policy.

Decides, for an authenticated user and a target resource, whether an
operation may proceed. Favorites are not listed here: their ownership is
enforced by scoping every query to the caller's ID.
"""

from shared.config import Settings
from shared.models import AuthenticatedUser

from .exceptions import AccessDeniedError


class AccessPolicy:
    """
    Role and ownership rules for users and products.

    Args:
        product_mutations_require_admin: Restrict product create/update/delete to admins
        user_delete_requires_owner: Restrict account deletion to self or admin
    """

    def __init__(
        self,
        product_mutations_require_admin: bool = True,
        user_delete_requires_owner: bool = False,
    ):
        self.product_mutations_require_admin = product_mutations_require_admin
        self.user_delete_requires_owner = user_delete_requires_owner

    @classmethod
    def from_settings(cls, settings: Settings) -> "AccessPolicy":
        return cls(
            product_mutations_require_admin=settings.product_mutations_require_admin,
            user_delete_requires_owner=settings.user_delete_requires_owner,
        )

    @staticmethod
    def is_self_or_admin(actor: AuthenticatedUser, user_id: int) -> bool:
        return actor.id == user_id or actor.is_admin

    def ensure_can_update_user(self, actor: AuthenticatedUser, user_id: int) -> None:
        if not self.is_self_or_admin(actor, user_id):
            raise AccessDeniedError("Not the same user", action="update_user", user_id=actor.id)

    def ensure_can_change_role(self, actor: AuthenticatedUser) -> None:
        if not actor.is_admin:
            raise AccessDeniedError(
                "Only admins can change roles", action="change_role", user_id=actor.id
            )

    def ensure_can_delete_user(self, actor: AuthenticatedUser, user_id: int) -> None:
        if self.user_delete_requires_owner and not self.is_self_or_admin(actor, user_id):
            raise AccessDeniedError("Not the same user", action="delete_user", user_id=actor.id)

    def ensure_can_mutate_products(self, actor: AuthenticatedUser) -> None:
        if self.product_mutations_require_admin and not actor.is_admin:
            raise AccessDeniedError(
                "Admin role required", action="mutate_products", user_id=actor.id
            )

"""
Products module interface.
"""

from typing import Protocol, runtime_checkable

from shared.models import AuthenticatedUser

from .models import Product, ProductCreate, ProductUpdate


@runtime_checkable
class IProductService(Protocol):
    """
    Interface for product operations.

    Reads are public. Mutations take the acting user so the access policy
    can be applied before anything is written.
    """

    async def list_products(self) -> list[Product]:
        ...

    async def get_product(self, product_id: int) -> Product:
        """
        Raises:
            ProductNotFoundError: If the product does not exist
        """
        ...

    async def create_product(self, actor: AuthenticatedUser, request: ProductCreate) -> Product:
        ...

    async def create_products(
        self,
        actor: AuthenticatedUser,
        requests: list[ProductCreate],
    ) -> list[Product]:
        """Create several products in one insert."""
        ...

    async def update_product(
        self,
        actor: AuthenticatedUser,
        product_id: int,
        request: ProductUpdate,
    ) -> Product:
        ...

    async def delete_product(self, actor: AuthenticatedUser, product_id: int) -> None:
        ...

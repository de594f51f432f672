"""
Products service implementation.
"""

import logging

from modules.auth.policies import AccessPolicy
from shared.exceptions import ValidationError
from shared.models import AuthenticatedUser

from .interfaces import IProductService
from .models import Product, ProductCreate, ProductUpdate
from .repository import ProductRepository
from .exceptions import ProductNotFoundError

logger = logging.getLogger(__name__)


class ProductService(IProductService):
    """Product service backed by ProductRepository."""

    def __init__(self, repository: ProductRepository, policy: AccessPolicy):
        self._repo = repository
        self._policy = policy

    async def list_products(self) -> list[Product]:
        return self._repo.list_all()

    async def get_product(self, product_id: int) -> Product:
        product = self._repo.get_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    async def create_product(self, actor: AuthenticatedUser, request: ProductCreate) -> Product:
        self._policy.ensure_can_mutate_products(actor)
        product = self._repo.create(request.model_dump(mode="json"))
        logger.info(f"User {actor.id} created product {product.id}")
        return product

    async def create_products(
        self,
        actor: AuthenticatedUser,
        requests: list[ProductCreate],
    ) -> list[Product]:
        self._policy.ensure_can_mutate_products(actor)
        if not requests:
            raise ValidationError("At least one product is required", code="EMPTY_BULK_CREATE")

        products = self._repo.create_many([r.model_dump(mode="json") for r in requests])
        logger.info(f"User {actor.id} bulk-created {len(products)} products")
        return products

    async def update_product(
        self,
        actor: AuthenticatedUser,
        product_id: int,
        request: ProductUpdate,
    ) -> Product:
        self._policy.ensure_can_mutate_products(actor)
        existing = self._repo.get_by_id(product_id)
        if existing is None:
            raise ProductNotFoundError(product_id)

        data = {
            key: value
            for key, value in request.model_dump(mode="json", exclude_unset=True).items()
            if value is not None or key in ("description", "image")
        }
        if not data:
            return existing

        updated = self._repo.update(product_id, data)
        if updated is None:
            raise ProductNotFoundError(product_id)
        return updated

    async def delete_product(self, actor: AuthenticatedUser, product_id: int) -> None:
        self._policy.ensure_can_mutate_products(actor)
        if not self._repo.delete(product_id):
            raise ProductNotFoundError(product_id)
        logger.info(f"User {actor.id} deleted product {product_id}")

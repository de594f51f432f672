"""
Tests for the favorites service.

Run against the in-memory repository, which enforces (user, product)
uniqueness on insert like the database constraint.
"""

import pytest
from unittest.mock import patch
from pydantic import ValidationError

from modules.favorites.exceptions import FavoriteAlreadyExistsError, FavoriteNotFoundError
from modules.favorites.models import FavoriteCreate, FavoriteUpdate
from modules.favorites.service import FavoriteService
from modules.products.models import ProductCategory
from shared.exceptions import ConflictError, NotFoundError
from tests.conftest import InMemoryFavoriteRepository


def make_request(product_id: int = 10, **overrides) -> FavoriteCreate:
    data = {
        "productId": product_id,
        "name": "Brake disc",
        "description": "Front, ventilated",
        "price": 120.5,
        "category": "Sisteme franare",
        "image": "https://cdn.example.com/disc.png",
        "stock": 3,
    }
    data.update(overrides)
    return FavoriteCreate(**data)


@pytest.fixture
def repo():
    return InMemoryFavoriteRepository()


@pytest.fixture
def service(repo):
    return FavoriteService(repo)


class TestAddFavorite:
    @pytest.mark.asyncio
    async def test_snapshot_preserved(self, service):
        """Fields read back should equal the fields supplied on add."""
        request = make_request()

        created = await service.add_favorite(1, request)
        fetched = await service.get_favorite(1, created.id)

        assert fetched.user_id == 1
        assert fetched.product_id == 10
        assert fetched.name == "Brake disc"
        assert fetched.description == "Front, ventilated"
        assert fetched.price == 120.5
        assert fetched.category == ProductCategory.BRAKE_SYSTEMS
        assert fetched.image == "https://cdn.example.com/disc.png"
        assert fetched.stock == 3

    @pytest.mark.asyncio
    async def test_add_twice_conflicts(self, service, repo):
        """The second add fails and exactly one favorite remains."""
        await service.add_favorite(1, make_request())

        with pytest.raises(FavoriteAlreadyExistsError) as exc_info:
            await service.add_favorite(1, make_request())

        assert isinstance(exc_info.value, ConflictError)
        assert exc_info.value.message == "Product already in favorites"
        assert len(await service.list_favorites(1)) == 1

    @pytest.mark.asyncio
    async def test_constraint_catches_race(self, service, repo):
        """If two adds both pass the lookup, the insert still lets only one through."""
        await service.add_favorite(1, make_request())

        with patch.object(repo, "find_by_product", return_value=None):
            with pytest.raises(FavoriteAlreadyExistsError):
                await service.add_favorite(1, make_request())

        assert len(repo.rows) == 1

    @pytest.mark.asyncio
    async def test_same_product_for_different_users(self, service):
        await service.add_favorite(1, make_request())
        await service.add_favorite(2, make_request())
        assert len(await service.list_favorites(1)) == 1
        assert len(await service.list_favorites(2)) == 1

    @pytest.mark.asyncio
    async def test_zero_price_allowed(self, service):
        favorite = await service.add_favorite(1, make_request(price=0))
        assert favorite.price == 0


class TestRemoveFavorite:
    @pytest.mark.asyncio
    async def test_remove_by_product_then_again(self, service):
        """Removing returns the pair to absent; a second removal is not found."""
        await service.add_favorite(1, make_request(product_id=10))

        await service.remove_favorite_by_product(1, 10)
        assert await service.list_favorites(1) == []

        with pytest.raises(FavoriteNotFoundError):
            await service.remove_favorite_by_product(1, 10)

    @pytest.mark.asyncio
    async def test_add_after_remove(self, service):
        await service.add_favorite(1, make_request())
        await service.remove_favorite_by_product(1, 10)
        again = await service.add_favorite(1, make_request())
        assert again.product_id == 10

    @pytest.mark.asyncio
    async def test_remove_by_id(self, service):
        created = await service.add_favorite(1, make_request())
        await service.remove_favorite(1, created.id)
        with pytest.raises(FavoriteNotFoundError):
            await service.get_favorite(1, created.id)


class TestOwnership:
    @pytest.mark.asyncio
    async def test_other_user_cannot_see_favorite(self, service):
        """Reads, updates and deletes by another user look like a missing row."""
        created = await service.add_favorite(1, make_request())

        with pytest.raises(NotFoundError):
            await service.get_favorite(2, created.id)
        with pytest.raises(NotFoundError):
            await service.update_favorite(2, created.id, FavoriteUpdate(price=1))
        with pytest.raises(NotFoundError):
            await service.remove_favorite(2, created.id)
        with pytest.raises(NotFoundError):
            await service.remove_favorite_by_product(2, 10)

        still_there = await service.get_favorite(1, created.id)
        assert still_there.price == 120.5

    @pytest.mark.asyncio
    async def test_empty_update_of_foreign_favorite(self, service):
        created = await service.add_favorite(1, make_request())
        with pytest.raises(FavoriteNotFoundError):
            await service.update_favorite(2, created.id, FavoriteUpdate())

    @pytest.mark.asyncio
    async def test_list_only_own(self, service):
        await service.add_favorite(1, make_request(product_id=10))
        await service.add_favorite(2, make_request(product_id=11))
        favorites = await service.list_favorites(1)
        assert [f.product_id for f in favorites] == [10]


class TestUpdateFavorite:
    @pytest.mark.asyncio
    async def test_partial_update(self, service):
        created = await service.add_favorite(1, make_request())

        updated = await service.update_favorite(1, created.id, FavoriteUpdate(price=99, stock=0))

        assert updated.price == 99
        assert updated.stock == 0
        assert updated.name == "Brake disc"
        assert updated.product_id == 10

    @pytest.mark.asyncio
    async def test_empty_update_returns_current(self, service):
        created = await service.add_favorite(1, make_request())
        current = await service.update_favorite(1, created.id, FavoriteUpdate())
        assert current.id == created.id
        assert current.price == created.price

    @pytest.mark.asyncio
    async def test_blank_name_never_reaches_storage(self, service, repo):
        created = await service.add_favorite(1, make_request())

        with pytest.raises(ValidationError):
            await service.update_favorite(1, created.id, FavoriteUpdate(name="   "))

        assert repo.rows[created.id]["name"] == "Brake disc"

    @pytest.mark.asyncio
    async def test_update_trims_name(self, service):
        created = await service.add_favorite(1, make_request())
        updated = await service.update_favorite(1, created.id, FavoriteUpdate(name="  Rotor "))
        assert updated.name == "Rotor"

    @pytest.mark.asyncio
    async def test_update_missing(self, service):
        with pytest.raises(FavoriteNotFoundError):
            await service.update_favorite(1, 404, FavoriteUpdate(name="x"))

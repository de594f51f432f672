"""Tests for favorites module models."""

import pytest
from pydantic import ValidationError

from modules.favorites.models import Favorite, FavoriteCreate, FavoriteUpdate
from modules.products.models import ProductCategory

VALID = {"productId": 1, "name": "Battery", "price": 300, "category": "Baterii"}


class TestFavoriteCreate:
    def test_valid(self):
        request = FavoriteCreate(**VALID)
        assert request.product_id == 1
        assert request.category == ProductCategory.BATTERIES
        assert request.stock == 0

    @pytest.mark.parametrize("missing", ["productId", "name", "price", "category"])
    def test_required_fields(self, missing):
        data = {k: v for k, v in VALID.items() if k != missing}
        with pytest.raises(ValidationError):
            FavoriteCreate(**data)

    def test_invalid_category_rejected(self):
        with pytest.raises(ValidationError):
            FavoriteCreate(**{**VALID, "category": "Weapons"})

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError):
            FavoriteCreate(**{**VALID, "price": -1})

    def test_null_stock_defaults(self):
        assert FavoriteCreate(**{**VALID, "stock": None}).stock == 0

    def test_user_id_cannot_be_supplied(self):
        with pytest.raises(ValidationError):
            FavoriteCreate(**{**VALID, "userId": 5})

    def test_dump_uses_column_names(self):
        data = FavoriteCreate(**VALID).model_dump(mode="json")
        assert data["product_id"] == 1
        assert data["category"] == "Baterii"


class TestFavoriteUpdate:
    @pytest.mark.parametrize("field", ["userId", "productId", "color"])
    def test_identity_and_unknown_fields_rejected(self, field):
        with pytest.raises(ValidationError):
            FavoriteUpdate(**{field: 2})

    def test_partial(self):
        assert FavoriteUpdate(price=5).model_dump(exclude_unset=True) == {"price": 5}


class TestFavorite:
    def test_serializes_camel_case(self):
        favorite = Favorite(id=1, user_id=2, product_id=3, name="x", price=1, category="Other")
        data = favorite.model_dump(mode="json", by_alias=True)
        assert data["userId"] == 2
        assert data["productId"] == 3
        assert data["category"] == "Other"


class TestFavoriteUpdateName:
    """Updates apply the same name rules as creation."""

    def test_name_trimmed(self):
        assert FavoriteUpdate(name="  Battery ").name == "Battery"

    @pytest.mark.parametrize("name", ["", "   "])
    def test_blank_name_rejected(self, name):
        with pytest.raises(ValidationError):
            FavoriteUpdate(name=name)

    def test_name_may_be_omitted(self):
        assert FavoriteUpdate(price=1).name is None

"""Tests for the catalog data schema."""

import pytest
from pydantic import ValidationError

from catalog_browser.domain.exceptions import ServerError
from catalog_browser.domain.models import Product, ProductPage, parse_product


class TestProduct:
    """Tests for the Product schema."""

    def test_parses_api_fields(self) -> None:
        """Wire names map onto the schema fields."""
        product = Product.model_validate(
            {
                "id": 1,
                "title": "Essence Mascara Lash Princess",
                "price": 9.99,
                "discountPercentage": 7.17,
                "rating": 4.94,
                "stock": 5,
                "brand": "Essence",
                "category": "beauty",
                "thumbnail": "https://cdn.example/1/thumbnail.png",
                "images": ["https://cdn.example/1/1.png"],
            }
        )

        assert product.id == 1
        assert product.discount_percentage == 7.17
        assert product.images == ["https://cdn.example/1/1.png"]

    def test_only_id_and_title_required(self) -> None:
        """Optional fields default to empty values."""
        product = Product(id=2, title="Plain")

        assert product.price is None
        assert product.brand is None
        assert product.images == []

    def test_unknown_fields_pass_through(self) -> None:
        """Fields the schema doesn't name are kept."""
        product = Product.model_validate({"id": 3, "title": "Lamp", "sku": "LMP-3"})

        assert product.model_extra == {"sku": "LMP-3"}

    def test_products_are_immutable(self) -> None:
        """Cached records cannot be edited in place."""
        product = Product(id=4, title="Chair")

        with pytest.raises(ValidationError):
            product.title = "Table"


class TestProductPage:
    """Tests for paginated responses."""

    def test_from_api_response(self) -> None:
        """A list response maps products onto items."""
        page = ProductPage.from_api_response(
            {
                "products": [{"id": 1, "title": "A"}, {"id": 2, "title": "B"}],
                "total": 194,
                "skip": 0,
                "limit": 2,
            }
        )

        assert [p.id for p in page.items] == [1, 2]
        assert page.total == 194
        assert page.limit == 2

    def test_missing_total_is_server_error(self) -> None:
        """A response without a total cannot drive pagination."""
        with pytest.raises(ServerError) as exc_info:
            ProductPage.from_api_response({"products": []})

        assert exc_info.value.details["errors"]

    def test_non_object_body_is_server_error(self) -> None:
        """A body that is not an object is rejected."""
        with pytest.raises(ServerError):
            ProductPage.from_api_response(["not", "a", "page"])

    def test_parse_product_rejects_missing_id(self) -> None:
        """A product without an identifier is rejected."""
        with pytest.raises(ServerError):
            parse_product({"title": "Nameless"})

"""Catalog data schema.

Pydantic models for the product records passed through the list cache
and for the paginated responses of the catalog API.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from catalog_browser.domain.exceptions import ServerError


class Product(BaseModel):
    """Product record from the remote catalog.

    Only ``id`` and ``title`` are required. Fields the schema does not
    name are kept as extras so they pass through the cache untouched.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow", frozen=True)

    id: int = Field(..., description="Stable unique product identifier")
    title: str = Field(..., description="Display title")
    description: str | None = Field(default=None, description="Long description")
    price: float | None = Field(default=None, ge=0, description="Unit price")
    discount_percentage: float | None = Field(
        default=None,
        alias="discountPercentage",
        description="Discount applied to the price, in percent",
    )
    rating: float | None = Field(default=None, description="Average rating")
    stock: int | None = Field(default=None, description="Units in stock")
    brand: str | None = Field(default=None, description="Brand name")
    category: str | None = Field(default=None, description="Category slug")
    thumbnail: str | None = Field(default=None, description="Thumbnail image URL")
    images: list[str] = Field(default_factory=list, description="Image URLs")


class ProductPage(BaseModel):
    """One page of products plus the server-reported total."""

    model_config = ConfigDict(populate_by_name=True)

    items: list[Product] = Field(
        default_factory=list,
        alias="products",
        description="Products on this page, in server order",
    )
    total: int = Field(..., ge=0, description="Total number of matching products")
    skip: int = Field(default=0, ge=0, description="Offset of the first item")
    limit: int = Field(default=0, ge=0, description="Requested page size")

    @classmethod
    def from_api_response(cls, data: Any) -> "ProductPage":
        """Create from a list or search API response.

        Args:
            data: Decoded JSON body.

        Returns:
            ProductPage instance.

        Raises:
            ServerError: If the body does not have the expected shape.
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ServerError(
                "Unexpected product page response",
                details={"errors": e.errors(include_url=False)},
            ) from e


def parse_product(data: Any) -> Product:
    """Validate a single product response.

    Args:
        data: Decoded JSON body.

    Returns:
        Product instance.

    Raises:
        ServerError: If the body does not have the expected shape.
    """
    try:
        return Product.model_validate(data)
    except ValidationError as e:
        raise ServerError(
            "Unexpected product response",
            details={"errors": e.errors(include_url=False)},
        ) from e

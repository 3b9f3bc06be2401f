"""Domain layer for the catalog browser.

Exports the product schema and the fetch error taxonomy.
"""

from catalog_browser.domain.exceptions import (
    CatalogError,
    InvalidRequestError,
    NetworkError,
    NotFoundError,
    ServerError,
    error_for_status,
)
from catalog_browser.domain.models import Product, ProductPage, parse_product

__all__ = [
    # Models
    "Product",
    "ProductPage",
    "parse_product",
    # Exceptions
    "CatalogError",
    "InvalidRequestError",
    "NetworkError",
    "NotFoundError",
    "ServerError",
    "error_for_status",
]

"""Pytest configuration and shared fixtures."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from catalog_browser.catalog.cache import CatalogCache
from catalog_browser.catalog.scroll import ScrollRestorer
from catalog_browser.catalog.service import CatalogBrowser
from catalog_browser.infrastructure.product_client import ProductAPIClient
from tests.factories import FakeViewport


@pytest.fixture
def viewport() -> FakeViewport:
    """Create a fake viewport."""
    return FakeViewport()


@pytest.fixture
def cache() -> CatalogCache:
    """Create an empty cache with no settle delay."""
    return CatalogCache(page_size=10, restorer=ScrollRestorer(settle_delay=0))


@pytest.fixture
def mock_client() -> MagicMock:
    """Create a mock catalog API client."""
    client = MagicMock(spec=ProductAPIClient)

    client.fetch_page = AsyncMock()
    client.search_page = AsyncMock()
    client.fetch_by_id = AsyncMock()
    client.get_similar_products = AsyncMock()
    client.close = AsyncMock()

    return client


@pytest.fixture
def browser(
    mock_client: MagicMock,
    cache: CatalogCache,
    viewport: FakeViewport,
) -> CatalogBrowser:
    """Create a CatalogBrowser over the mock client."""
    return CatalogBrowser(
        client=mock_client,
        cache=cache,
        viewport=viewport,
        search_limit=12,
        similar_limit=8,
    )

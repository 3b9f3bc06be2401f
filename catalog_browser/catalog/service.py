"""Product list view controller.

Implements the list view's side of the cache protocol: render from cache
when possible, fetch the next page on scroll, save the scroll offset when
navigating to a product and restore it on return.
"""

import structlog

from catalog_browser.catalog.cache import CatalogCache
from catalog_browser.catalog.scroll import Viewport
from catalog_browser.domain.exceptions import InvalidRequestError
from catalog_browser.domain.models import Product, ProductPage
from catalog_browser.infrastructure.config import settings
from catalog_browser.infrastructure.product_client import ProductAPIClient

logger = structlog.get_logger()


class CatalogBrowser:
    """Drives the product list over a shared CatalogCache.

    Fetch errors from the client are not handled here; they propagate to
    the caller, which decides how to present them.

    Example usage:
        async with ProductAPIClient() as client:
            browser = CatalogBrowser(client, CatalogCache(), viewport)
            items = await browser.activate()
            await browser.load_more()
            product = await browser.open_product(items[0].id)
            await browser.activate()  # back on the list, no refetch
    """

    def __init__(
        self,
        client: ProductAPIClient,
        cache: CatalogCache,
        viewport: Viewport,
        search_limit: int | None = None,
        similar_limit: int | None = None,
    ) -> None:
        """Initialize the browser.

        Args:
            client: Catalog API client.
            cache: Shared list cache.
            viewport: Viewport the list is rendered into.
            search_limit: Page size for search results.
            similar_limit: Maximum number of similar products.
        """
        self.client = client
        self.cache = cache
        self.viewport = viewport
        self.search_limit = (
            search_limit if search_limit is not None else settings.search_limit
        )
        self.similar_limit = (
            similar_limit if similar_limit is not None else settings.similar_limit
        )
        self.query: str | None = None
        self.loading = False
        self._load_generation: int | None = None

    @property
    def items(self) -> tuple[Product, ...]:
        return self.cache.items

    def can_load_more(self) -> bool:
        return self.cache.has_more and not self.loading

    async def activate(self) -> tuple[Product, ...]:
        """Show the list view.

        Renders from the cache and restores the scroll offset when the
        cache holds data; otherwise loads the first page.

        Returns:
            Products to render.
        """
        if self.cache.has_cache():
            logger.debug(
                "Rendering list from cache",
                cursor=self.cache.cursor,
                scroll_offset=self.cache.scroll_offset,
            )
            await self.cache.restore_scroll_position(self.viewport)
        else:
            await self.load_more()
        return self.cache.items

    def deactivate(self) -> None:
        """Leave the list view, remembering where it was scrolled to."""
        self.cache.save_scroll_position(self.viewport)

    async def load_more(self) -> bool:
        """Fetch the page at the cache cursor and commit it.

        Returns:
            True if a page was committed; False if nothing was loaded
            (already loading, exhausted, or the response went stale).

        Raises:
            CatalogError: On any fetch failure.
        """
        if not self.can_load_more():
            return False

        generation = self.cache.begin_fetch()
        offset = self.cache.cursor
        self._load_generation = generation
        self.loading = True
        try:
            page = await self._fetch(offset)
        finally:
            # A load superseded by a newer one must not release its guard.
            if self._load_generation == generation:
                self.loading = False

        committed = self.cache.commit_page(page.items, page.total, generation=generation)
        if committed:
            logger.info(
                "Loaded products",
                query=self.query,
                offset=offset,
                count=len(page.items),
                total=page.total,
            )
        return committed

    async def _fetch(self, offset: int) -> ProductPage:
        if self.query:
            return await self.client.search_page(
                self.query,
                limit=self.search_limit,
                offset=offset,
            )
        return await self.client.fetch_page(offset=offset, limit=self.cache.page_size)

    async def search(self, query: str) -> tuple[Product, ...]:
        """Replace the list with the first page of search results.

        Args:
            query: Search text.

        Returns:
            Products to render.

        Raises:
            InvalidRequestError: If the query is blank.
            CatalogError: On any fetch failure.
        """
        if not query or not query.strip():
            raise InvalidRequestError("Search query is required")

        # Clearing invalidates any in-flight load, so it no longer blocks.
        self.cache.clear()
        self.loading = False
        self.query = query.strip()
        await self.load_more()
        return self.cache.items

    async def reset(self) -> tuple[Product, ...]:
        """Drop any search and reload the first listing page."""
        self.cache.clear()
        self.loading = False
        self.query = None
        await self.load_more()
        return self.cache.items

    async def open_product(self, product_id: int | str) -> Product:
        """Navigate from the list to a product's detail view.

        Args:
            product_id: Product identifier.

        Returns:
            Product data.

        Raises:
            CatalogError: On any fetch failure.
        """
        self.deactivate()
        return await self.client.fetch_by_id(product_id)

    async def similar_products(self, product: Product) -> list[Product]:
        """Get products related to ``product`` for its detail view."""
        search_term = product.category or product.title
        return await self.client.get_similar_products(
            search_term,
            exclude_id=product.id,
            limit=self.similar_limit,
        )

"""Browsing session lifecycle.

Creates the objects that live for one browsing session (client, list
cache, list view controller) and tears them down when it ends.
"""

from types import TracebackType

import structlog

from catalog_browser import __version__
from catalog_browser.catalog.cache import CatalogCache
from catalog_browser.catalog.scroll import ScrollRestorer, Viewport
from catalog_browser.catalog.service import CatalogBrowser
from catalog_browser.infrastructure.config import Settings, get_settings
from catalog_browser.infrastructure.logging import configure_logging
from catalog_browser.infrastructure.product_client import ProductAPIClient

logger = structlog.get_logger()


class BrowserSession:
    """Owns the session-scoped catalog state.

    Example usage:
        async with BrowserSession(viewport) as session:
            items = await session.browser.activate()
    """

    def __init__(
        self,
        viewport: Viewport,
        config: Settings | None = None,
        client: ProductAPIClient | None = None,
        setup_logging: bool = True,
    ) -> None:
        """Initialize the session.

        Args:
            viewport: Viewport the product list is rendered into.
            config: Settings to use (defaults to environment settings).
            client: Pre-built catalog client (defaults to one from config).
            setup_logging: Whether to configure logging on start.
        """
        self.config = config or get_settings()
        self.viewport = viewport
        self.setup_logging = setup_logging
        self.client = client or ProductAPIClient(
            base_url=self.config.api_base_url,
            timeout=self.config.api_timeout,
            search_limit=self.config.search_limit,
        )
        self.cache = CatalogCache(
            page_size=self.config.default_page_size,
            restorer=ScrollRestorer(settle_delay=self.config.scroll_settle_delay),
        )
        self.browser = CatalogBrowser(
            self.client,
            self.cache,
            viewport,
            search_limit=self.config.search_limit,
            similar_limit=self.config.similar_limit,
        )

    async def __aenter__(self) -> "BrowserSession":
        if self.setup_logging:
            configure_logging(self.config.log_level, self.config.log_json)
        logger.info(
            "Starting catalog browser session",
            version=__version__,
            api_base_url=self.config.api_base_url,
            page_size=self.cache.page_size,
        )
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    async def close(self) -> None:
        """End the session: drop cached state and close the client."""
        self.cache.clear()
        await self.client.close()
        logger.info("Catalog browser session closed")

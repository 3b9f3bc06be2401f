"""Incremental product list cache.

Accumulates paginated results into one growing list and keeps the
pagination cursor, exhaustion flag, server total and saved scroll offset,
so a list view can be left and re-entered without refetching.
"""

from collections.abc import Sequence

import structlog

from catalog_browser.catalog.scroll import ScrollRestorer, Viewport
from catalog_browser.domain.models import Product
from catalog_browser.infrastructure.config import settings

logger = structlog.get_logger()


class CatalogCache:
    """Session-scoped list state shared by the catalog views.

    One instance is created per session and handed to the views that use
    it. It is mutated only by ``commit_page`` and ``clear``.

    Attributes:
        page_size: Number of products requested per page.
        cursor: Offset of the next page; always ``len(items)``.
        has_more: False once the held items cover the server total.
        total: Last server-reported total.
        is_initial_load: True until the first page is committed.
        scroll_offset: Last saved scroll offset; 0 means nothing saved.

    Example usage:
        cache = CatalogCache(page_size=10)
        generation = cache.begin_fetch()
        page = await client.fetch_page(cache.cursor, cache.page_size)
        cache.commit_page(page.items, page.total, generation=generation)
    """

    def __init__(
        self,
        page_size: int | None = None,
        restorer: ScrollRestorer | None = None,
    ) -> None:
        """Initialize an empty cache.

        Args:
            page_size: Products per page (defaults to configured page size).
            restorer: Scroll restorer used by ``restore_scroll_position``.
        """
        self.page_size = page_size or settings.default_page_size
        self.restorer = restorer or ScrollRestorer()
        self._items: list[Product] = []
        self._generation = 0
        self.cursor = 0
        self.has_more = True
        self.total = 0
        self.is_initial_load = True
        self.scroll_offset = 0

    @property
    def items(self) -> tuple[Product, ...]:
        """Accumulated products in fetch order."""
        return tuple(self._items)

    @property
    def generation(self) -> int:
        """Token of the most recently started fetch."""
        return self._generation

    @property
    def has_saved_scroll(self) -> bool:
        return self.scroll_offset > 0

    def has_cache(self) -> bool:
        """Check whether any products are held.

        Returns:
            True if at least one product is cached.
        """
        return len(self._items) > 0

    def begin_fetch(self) -> int:
        """Issue a token for a fetch that is about to start.

        Only a page committed with the latest token is accepted, so a
        response that arrives after a newer fetch was started is dropped.

        Returns:
            The new generation token.
        """
        self._generation += 1
        return self._generation

    def commit_page(
        self,
        new_items: Sequence[Product],
        total: int,
        generation: int | None = None,
    ) -> bool:
        """Merge a fetched page into the cache.

        The first page after construction or ``clear`` replaces the held
        items; later pages are appended in order without deduplication.
        ``total`` always overwrites the previous total.

        Args:
            new_items: Products of the fetched page.
            total: Server-reported total at fetch time.
            generation: Token from ``begin_fetch``; omit to skip the check.

        Returns:
            False if the page was discarded as stale, True otherwise.
        """
        if generation is not None and generation != self._generation:
            logger.warning(
                "Discarding stale page",
                generation=generation,
                current_generation=self._generation,
                item_count=len(new_items),
            )
            return False

        if self.is_initial_load:
            self._items = list(new_items)
            self.is_initial_load = False
        else:
            self._items.extend(new_items)

        self.total = total
        self.cursor = len(self._items)
        self.has_more = self.cursor < total

        logger.debug(
            "Committed page",
            added=len(new_items),
            cursor=self.cursor,
            total=self.total,
            has_more=self.has_more,
        )
        return True

    def clear(self) -> None:
        """Return the cache to its initial empty state.

        Also invalidates any fetch already in flight.
        """
        self._items = []
        self.cursor = 0
        self.has_more = True
        self.total = 0
        self.scroll_offset = 0
        self.is_initial_load = True
        self._generation += 1
        logger.info("Catalog cache cleared")

    def save_scroll_position(self, viewport: Viewport) -> None:
        """Store the viewport's current scroll offset."""
        self.scroll_offset = viewport.get_scroll_offset()
        logger.debug("Scroll position saved", offset=self.scroll_offset)

    async def restore_scroll_position(self, viewport: Viewport) -> None:
        """Scroll the viewport back to the saved offset.

        Does nothing when no offset was saved.

        Args:
            viewport: Viewport to scroll.
        """
        if self.scroll_offset > 0:
            await self.restorer.restore(viewport, self.scroll_offset)

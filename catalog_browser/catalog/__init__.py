"""Product list caching.

Provides the incremental list cache, the scroll restoration protocol and
the list view controller that ties them to the catalog client.
"""

from catalog_browser.catalog.cache import CatalogCache
from catalog_browser.catalog.scroll import (
    LayoutObserver,
    ScrollBehavior,
    ScrollRestorer,
    Viewport,
)
from catalog_browser.catalog.service import CatalogBrowser

__all__ = [
    # Cache
    "CatalogCache",
    # Scroll
    "LayoutObserver",
    "ScrollBehavior",
    "ScrollRestorer",
    "Viewport",
    # Service
    "CatalogBrowser",
]

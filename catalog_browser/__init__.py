"""Catalog Browser.

Browsing client for a paginated remote product catalog.

This package provides:
- An incremental list cache that accumulates fetched pages and survives
  navigation between the list and detail views
- A scroll restoration protocol that reapplies a saved offset while the
  presentation layer is still reflowing
- A thin HTTP client for the product catalog API
"""

__version__ = "1.0.0"

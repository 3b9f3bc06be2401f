"""Product catalog HTTP client.

Thin client for the remote catalog API. Builds requests, classifies
failures into the fetch error taxonomy and parses responses. It does
not retry and does not cache; the list cache lives in the view layer.
"""

from typing import Any

import httpx
import structlog

from catalog_browser.domain.exceptions import (
    CatalogError,
    InvalidRequestError,
    NetworkError,
    ServerError,
    error_for_status,
)
from catalog_browser.domain.models import Product, ProductPage, parse_product
from catalog_browser.infrastructure.config import settings

logger = structlog.get_logger()


class ProductAPIClient:
    """HTTP client for the product catalog API.

    Example usage:
        async with ProductAPIClient() as client:
            page = await client.fetch_page(offset=0, limit=10)
            product = await client.fetch_by_id(page.items[0].id)
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        search_limit: int | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the API client.

        Args:
            base_url: Catalog API base URL.
            timeout: Request timeout in seconds.
            search_limit: Page size used when looking up similar products.
            transport: Optional httpx transport (used by tests).
        """
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.api_timeout
        self.search_limit = (
            search_limit if search_limit is not None else settings.search_limit
        )
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "ProductAPIClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
                headers={
                    "Content-Type": "application/json",
                    "Accept": "application/json",
                },
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def _get(
        self,
        path: str,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Make a GET request and return the decoded body.

        Args:
            path: API endpoint path.
            params: Query parameters.

        Returns:
            Decoded JSON body.

        Raises:
            NetworkError: On timeouts and transport failures.
            CatalogError: Subclass matching the HTTP error status.
            ServerError: If the body is not valid JSON.
        """
        client = await self._get_client()

        try:
            logger.debug("Making catalog request", path=path, params=params)
            response = await client.get(path, params=params)
        except httpx.TimeoutException as e:
            logger.error("Catalog request timeout", path=path, error=str(e))
            raise NetworkError(f"Request timed out: {path}") from e
        except httpx.RequestError as e:
            logger.error("Catalog request failed", path=path, error=str(e))
            raise NetworkError(details={"path": path, "error": str(e)}) from e

        if response.status_code >= 400:
            logger.warning(
                "Catalog request rejected",
                path=path,
                status_code=response.status_code,
            )
            raise error_for_status(
                response.status_code,
                details={"path": path, "body": response.text[:500]},
            )

        try:
            return response.json()
        except ValueError as e:
            logger.error("Catalog response is not JSON", path=path)
            raise ServerError(
                "Malformed response body",
                status_code=response.status_code,
                details={"path": path},
            ) from e

    async def fetch_page(self, offset: int = 0, limit: int = 10) -> ProductPage:
        """Get one page of the product listing.

        Args:
            offset: Number of products to skip.
            limit: Number of products to fetch.

        Returns:
            ProductPage with items and the server-reported total.

        Raises:
            CatalogError: On any fetch failure.
        """
        data = await self._get("/products", params={"limit": limit, "skip": offset})
        return ProductPage.from_api_response(data)

    async def search_page(
        self,
        query: str,
        limit: int = 12,
        offset: int = 0,
    ) -> ProductPage:
        """Search products by text query.

        Args:
            query: Search query. Surrounding whitespace is ignored.
            limit: Number of products to fetch.
            offset: Number of matches to skip.

        Returns:
            ProductPage with matching items and total match count.

        Raises:
            InvalidRequestError: If the query is empty or whitespace-only.
            CatalogError: On any fetch failure.
        """
        if not query or not query.strip():
            raise InvalidRequestError("Search query is required")

        data = await self._get(
            "/products/search",
            params={"q": query.strip(), "limit": limit, "skip": offset},
        )
        return ProductPage.from_api_response(data)

    async def fetch_by_id(self, product_id: int | str) -> Product:
        """Get a single product by ID.

        Args:
            product_id: Product identifier.

        Returns:
            Product data.

        Raises:
            InvalidRequestError: If no identifier is given.
            NotFoundError: If the product does not exist.
            CatalogError: On any other fetch failure.
        """
        if not product_id or not str(product_id).strip():
            raise InvalidRequestError("Product ID is required")

        data = await self._get(f"/products/{product_id}")
        return parse_product(data)

    async def get_similar_products(
        self,
        search_term: str,
        exclude_id: int | str,
        limit: int = 8,
    ) -> list[Product]:
        """Get products similar to a given one.

        Args:
            search_term: Term to search for (usually the category).
            exclude_id: Product ID to leave out of the results.
            limit: Maximum number of products to return.

        Returns:
            Up to ``limit`` products, excluding ``exclude_id``.

        Raises:
            CatalogError: On any fetch failure.
        """
        try:
            excluded = int(exclude_id)
        except (TypeError, ValueError) as e:
            raise InvalidRequestError(
                "Product ID must be numeric",
                details={"exclude_id": exclude_id},
            ) from e

        try:
            page = await self.search_page(search_term, limit=self.search_limit)
        except CatalogError:
            logger.warning(
                "Similar products lookup failed",
                search_term=search_term,
                exclude_id=excluded,
            )
            raise

        similar = [p for p in page.items if p.id != excluded]
        return similar[:limit]

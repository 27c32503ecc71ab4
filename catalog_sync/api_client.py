"""Catalog API client.

Thin HTTP client for the product catalog endpoint. Handles transport
failures, non-success responses, and response parsing, reporting every
failure as a FetchError.
"""

from typing import Any

import httpx
import structlog
from pydantic import ValidationError as SchemaValidationError

from catalog_sync.exceptions import FetchError
from catalog_sync.models import Product, ProductListResponse

logger = structlog.get_logger()


class CatalogAPIClient:
    """HTTP client for the product catalog endpoint.

    The endpoint takes no parameters, headers, or authentication. Requests
    are not retried and, unless a timeout is given, wait indefinitely.
    """

    def __init__(
        self,
        url: str,
        timeout: float | None = None,
    ) -> None:
        """Initialize the API client.

        Args:
            url: Catalog endpoint URL.
            timeout: Request timeout in seconds, or None to wait indefinitely.
        """
        self.url = url
        self.timeout = timeout
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                headers={"Accept": "application/json"},
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "CatalogAPIClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def fetch_products(self) -> list[Product]:
        """Fetch the product catalog.

        Returns:
            Products in the order the endpoint returned them.

        Raises:
            FetchError: On transport failure, non-success status, or a body
                that does not match the catalog schema.
        """
        client = await self._get_client()

        logger.debug("Fetching product catalog", url=self.url)

        try:
            response = await client.get(self.url)
        except httpx.TimeoutException as e:
            raise FetchError(self.url, f"Request timed out: {e}") from e
        except httpx.RequestError as e:
            raise FetchError(self.url, f"Request failed: {e}") from e

        if not response.is_success:
            raise FetchError(
                self.url,
                f"Unexpected response status: {response.status_code}",
                response.status_code,
            )

        try:
            body = ProductListResponse.model_validate_json(response.content)
        except SchemaValidationError as e:
            raise FetchError(
                self.url,
                f"Malformed catalog response: {e.error_count()} error(s)",
                response.status_code,
            ) from e

        return body.products

"""Pytest configuration and fixtures for catalog sync tests."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from catalog_sync.api_client import CatalogAPIClient
from catalog_sync.controller import CatalogSyncController
from catalog_sync.models import Product
from catalog_sync.presentation import ProductPanel

PRODUCTS_URL = "https://catalog.test/api/products"
SLOT_COUNT = 3


@pytest.fixture
def mock_api_client() -> MagicMock:
    """Create a mock catalog API client."""
    client = MagicMock(spec=CatalogAPIClient)
    client.url = PRODUCTS_URL
    client.fetch_products = AsyncMock(return_value=[])
    client.close = AsyncMock()
    return client


@pytest.fixture
def panel() -> ProductPanel:
    """Create a panel with three slots."""
    return ProductPanel.create(SLOT_COUNT)


@pytest.fixture
def controller(panel: ProductPanel, mock_api_client: MagicMock) -> CatalogSyncController:
    """Create a controller over the test panel and mock client."""
    return CatalogSyncController(panel=panel, api_client=mock_api_client)


@pytest.fixture
def make_products():
    """Factory for product lists."""

    def _make(count: int) -> list[Product]:
        return [
            Product(
                name=f"Product {i + 1}",
                description=f"Description {i + 1}" if i % 2 == 0 else "",
                price=10.0 * (i + 1),
            )
            for i in range(count)
        ]

    return _make


@pytest.fixture
def chair_catalog() -> list[Product]:
    """Catalog used by the editing scenarios."""
    return [
        Product(name="Chair", description="Wooden chair", price=10.0),
        Product(name="Table", price=45.5),
    ]

"""Catalog Sync.

Fetches a product catalog from a remote endpoint, projects it onto a fixed
pool of display slots, and applies in-place name/price edits chosen through
a selectable product list.

Example usage:
    from catalog_sync import CatalogAPIClient, CatalogSyncController, ProductPanel

    panel = ProductPanel.create(slot_count=3)
    controller = CatalogSyncController(
        panel=panel,
        api_client=CatalogAPIClient("https://homework.mocart.io/api/products"),
    )
    await controller.start()

    controller.on_select(1)
    panel.name_field.text = "Armchair"
    controller.on_submit()
"""

from catalog_sync.api_client import CatalogAPIClient
from catalog_sync.controller import CatalogSyncController
from catalog_sync.exceptions import CatalogSyncError, FetchError, ValidationError
from catalog_sync.models import Product
from catalog_sync.presentation import FeedbackStyle, ProductPanel

__version__ = "0.1.0"

__all__ = [
    "CatalogAPIClient",
    "CatalogSyncController",
    "CatalogSyncError",
    "FeedbackStyle",
    "FetchError",
    "Product",
    "ProductPanel",
    "ValidationError",
]

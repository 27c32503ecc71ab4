"""Catalog sync session entry point.

Runs one headless session: a single catalog fetch projected onto a fresh
product panel, then logs what the panel shows.
"""

import asyncio
import sys

import structlog

from catalog_sync.api_client import CatalogAPIClient
from catalog_sync.config import Settings, settings
from catalog_sync.controller import CatalogSyncController
from catalog_sync.logging_config import configure_logging
from catalog_sync.presentation import ProductPanel

logger = structlog.get_logger()


def build_controller(config: Settings) -> CatalogSyncController:
    """Create a controller over a fresh panel from settings.

    Args:
        config: Settings to build from.

    Returns:
        CatalogSyncController instance.
    """
    return CatalogSyncController(
        panel=ProductPanel.create(config.slot_count),
        api_client=CatalogAPIClient(
            url=config.products_url,
            timeout=config.fetch_timeout,
        ),
    )


async def run_session(controller: CatalogSyncController) -> bool:
    """Start the session and log the resulting panel state.

    Args:
        controller: Controller to run.

    Returns:
        True if the catalog was loaded.
    """
    try:
        loaded = await controller.start()
    finally:
        await controller.api.close()

    panel = controller.panel
    logger.info(
        "Catalog session ready" if loaded else "Catalog session failed",
        entries=panel.selectable_list.options,
        slots=[
            {"name": s.name.text, "price": s.price.text}
            for s in panel.slots.visible_slots()
        ],
    )
    return loaded


def main() -> int:
    """Run one catalog session with the configured settings."""
    configure_logging(settings.log_level, settings.log_json)
    logger.info(
        "Starting catalog sync",
        url=settings.products_url,
        slot_count=settings.slot_count,
    )

    controller = build_controller(settings)
    loaded = asyncio.run(run_session(controller))
    return 0 if loaded else 1


if __name__ == "__main__":
    sys.exit(main())

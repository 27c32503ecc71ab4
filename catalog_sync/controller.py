"""Catalog sync controller.

Fetches the product catalog once per session, projects it onto the
display slots and the selectable list, and applies name/price edits to
the selected product.

Edits are kept in memory only and are never written back to the server.
A name change is committed even when the price in the same submit is
rejected.
"""

import structlog

from catalog_sync.api_client import CatalogAPIClient
from catalog_sync.exceptions import FetchError, NoSelectionError, ValidationError
from catalog_sync.models import Product, format_price, parse_price
from catalog_sync.presentation import FeedbackStyle, ProductPanel

logger = structlog.get_logger()

LOADING_PLACEHOLDER = "Loading..."
ERROR_PLACEHOLDER = "Error loading products"
NO_SELECTION_PLACEHOLDER = "Select a product"
SUCCESS_MESSAGE = "Changes applied successfully."


class CatalogSyncController:
    """Binds the fetched catalog to the product panel."""

    def __init__(self, panel: ProductPanel, api_client: CatalogAPIClient) -> None:
        """Initialize the controller.

        Args:
            panel: Widgets to drive.
            api_client: Client for the catalog endpoint.
        """
        self.panel = panel
        self.api = api_client
        self.catalog: list[Product] = []
        self.fetch_error: FetchError | None = None
        self._fetched = False

    # =========================================================================
    # Session
    # =========================================================================

    async def start(self) -> bool:
        """Show the loading placeholder and run the session's only fetch.

        Returns:
            True if the catalog was loaded. Calls after the fetch has run
            return False without touching the panel.
        """
        if self._fetched:
            logger.warning("Catalog session already started")
            return False

        self.panel.selectable_list.set_options([LOADING_PLACEHOLDER])
        self.panel.feedback.hide()

        return await self.fetch_catalog()

    async def fetch_catalog(self) -> bool:
        """Fetch the catalog and populate the slots and selectable list.

        Runs at most once per session. On failure the catalog is left
        empty, the slots are left alone, and the selectable list shows a
        single error entry.

        Returns:
            True on success, False on failure or if the fetch already ran.
        """
        if self._fetched:
            logger.warning("Product catalog already fetched", url=self.api.url)
            return False
        self._fetched = True

        logger.info("Fetching product catalog", url=self.api.url)

        try:
            products = await self.api.fetch_products()
        except FetchError as e:
            self.catalog = []
            self.fetch_error = e
            logger.error(
                "Failed to fetch product data",
                url=e.url,
                status_code=e.status_code,
                error=e.message,
            )
            self.panel.selectable_list.set_options([ERROR_PLACEHOLDER])
            return False

        self.catalog = list(products)
        self.fetch_error = None
        logger.info("Product catalog loaded", product_count=len(self.catalog))

        self.populate_slots()
        self.populate_selectable_list()
        return True

    # =========================================================================
    # Projection
    # =========================================================================

    def populate_slots(self) -> None:
        """Assign the leading catalog entries to slots and hide the rest."""
        for index, slot in enumerate(self.panel.slots):
            if index < len(self.catalog):
                slot.assign(self.catalog[index])
            else:
                slot.clear()

        logger.debug(
            "Slots populated",
            shown=min(len(self.catalog), self.panel.slots.capacity),
            capacity=self.panel.slots.capacity,
        )

    def populate_selectable_list(self) -> None:
        """List every catalog name after the no-selection entry."""
        self.panel.selectable_list.set_options(
            [NO_SELECTION_PLACEHOLDER] + [p.name for p in self.catalog]
        )

    # =========================================================================
    # Selection & Editing
    # =========================================================================

    @property
    def selected_index(self) -> int | None:
        """Catalog index designated by the selectable list, if any."""
        index = self.panel.selectable_list.value - 1
        if 0 <= index < len(self.catalog):
            return index
        return None

    @property
    def selected_product(self) -> Product | None:
        index = self.selected_index
        return self.catalog[index] if index is not None else None

    def on_select(self, value: int) -> None:
        """Handle a change of the selectable list's value.

        Loads the chosen product into the edit fields. Choosing the
        no-selection entry leaves the fields holding whatever they had.

        Args:
            value: Selectable list entry index (0 means no selection).
        """
        self.panel.selectable_list.value = value
        self.panel.feedback.hide()

        product = self.selected_product
        if product is None:
            return

        self.panel.name_field.text = product.name
        self.panel.price_field.text = format_price(product.price)
        logger.debug("Product selected", index=self.selected_index, name=product.name)

    def on_submit(self) -> ValidationError | None:
        """Apply the edit fields to the selected product.

        Name and price are applied independently: a rejected price does
        not undo an accepted name.

        Returns:
            The validation error shown on the feedback label, or None if
            the changes were applied.
        """
        index = self.selected_index
        if index is None:
            return self._reject(NoSelectionError())

        self.panel.feedback.hide()

        product = self.catalog[index]
        slot = self.panel.slots.get(index)
        error: ValidationError | None = None

        new_name = self.panel.name_field.text
        if new_name:
            product.name = new_name
            if slot is not None:
                slot.name.text = new_name
            self.panel.selectable_list.set_label(index + 1, new_name)

        try:
            new_price = parse_price(self.panel.price_field.text)
        except ValidationError as e:
            error = e
        else:
            if new_price is not None:
                product.price = new_price
                if slot is not None:
                    slot.price.text = format_price(new_price)

        if error is not None:
            return self._reject(error)

        logger.info(
            "Product updated",
            index=index,
            name=product.name,
            price=product.price,
        )
        self.panel.feedback.show(SUCCESS_MESSAGE, FeedbackStyle.SUCCESS)
        return None

    def _reject(self, error: ValidationError) -> ValidationError:
        logger.info("Edit rejected", reason=error.message, **error.details)
        self.panel.feedback.show(error.message, FeedbackStyle.ERROR)
        return error

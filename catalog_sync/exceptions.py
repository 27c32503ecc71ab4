"""Catalog sync exceptions.

Two kinds of failure exist: fetching the catalog (terminal for the
session) and validating a user edit (surfaced on the feedback label).
"""

from typing import Any


class CatalogSyncError(Exception):
    """Base class for all catalog sync errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize catalog sync error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class FetchError(CatalogSyncError):
    """Raised when the product catalog cannot be fetched or parsed."""

    def __init__(
        self,
        url: str,
        message: str,
        status_code: int | None = None,
    ) -> None:
        """Initialize fetch error.

        Args:
            url: Endpoint that was requested.
            message: Description of the failure.
            status_code: HTTP status code, if a response was received.
        """
        super().__init__(
            message,
            details={"url": url, "status_code": status_code},
        )
        self.url = url
        self.status_code = status_code


class ValidationError(CatalogSyncError):
    """Raised when a submitted edit is rejected."""

    pass


class NoSelectionError(ValidationError):
    """Raised when changes are submitted with no product selected."""

    def __init__(self) -> None:
        super().__init__("Please select a product first.")


class InvalidPriceError(ValidationError):
    """Raised when the price field does not hold a valid price."""

    def __init__(self, raw_value: str) -> None:
        """Initialize invalid price error.

        Args:
            raw_value: Text entered in the price field.
        """
        super().__init__("Invalid price format.", details={"value": raw_value})

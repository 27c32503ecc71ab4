"""Catalog data models.

Pydantic models for the catalog response body plus the price helpers
shared by the slots and the edit fields.
"""

import math
import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

from catalog_sync.exceptions import InvalidPriceError

_PRICE_PATTERN = re.compile(r"\+?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


class Product(BaseModel):
    """A catalog product.

    Identity is the product's position in the fetched catalog. Name and
    price are overwritten in place by submitted edits.
    """

    model_config = ConfigDict(extra="ignore", validate_assignment=True)

    name: str = Field(..., description="Product name")
    description: str = Field(default="", description="Optional description")
    price: float = Field(..., ge=0, allow_inf_nan=False, description="Unit price")

    @field_validator("description", mode="before")
    @classmethod
    def _none_to_empty(cls, value: object) -> object:
        return "" if value is None else value


class ProductListResponse(BaseModel):
    """Body of the catalog endpoint."""

    model_config = ConfigDict(extra="ignore")

    products: list[Product]


def format_price(price: float) -> str:
    """Format a price with two decimals."""
    return f"{price:.2f}"


def parse_price(text: str) -> float | None:
    """Parse the contents of a price field.

    Accepts plain ASCII decimal notation with an optional leading ``+``
    and exponent, surrounded by optional whitespace.

    Args:
        text: Raw field text.

    Returns:
        The parsed price, or None if the field is empty.

    Raises:
        InvalidPriceError: If the text is not a finite, non-negative number.
    """
    if not text:
        return None

    stripped = text.strip()
    if not _PRICE_PATTERN.fullmatch(stripped):
        raise InvalidPriceError(text)

    value = float(stripped)
    if not math.isfinite(value):
        raise InvalidPriceError(text)
    return value

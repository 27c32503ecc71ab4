"""Presentation surface driven by the controller.

In-memory stand-ins for the scene widgets: a bounded pool of display
slots, the selectable product list, the name/price edit fields, and the
feedback label. Each slot holds direct references to its text surfaces.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator

from catalog_sync.models import Product, format_price


# ============================================================================
# Display Slots
# ============================================================================


@dataclass
class TextSurface:
    """A single text display."""

    text: str = ""


@dataclass
class Slot:
    """A pre-placed display slot bound to a catalog entry by position.

    Attributes:
        name: Product name text.
        price: Product price text.
        description: Product description text.
        visible: Whether the slot is shown.
    """

    name: TextSurface = field(default_factory=TextSurface)
    price: TextSurface = field(default_factory=TextSurface)
    description: TextSurface = field(default_factory=TextSurface)
    visible: bool = True

    def assign(self, product: Product) -> None:
        """Show the slot and render a product into it.

        The description text is only written when the product has one.
        """
        self.visible = True
        self.name.text = product.name
        self.price.text = format_price(product.price)
        if product.description:
            self.description.text = product.description

    def clear(self) -> None:
        """Hide the slot."""
        self.visible = False


class SlotPool:
    """Fixed-capacity pool of display slots."""

    def __init__(self, slots: list[Slot]) -> None:
        self._slots = list(slots)

    @classmethod
    def create(cls, capacity: int) -> "SlotPool":
        """Create a pool of fresh slots.

        Args:
            capacity: Number of slots.

        Returns:
            SlotPool instance.
        """
        return cls([Slot() for _ in range(capacity)])

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def get(self, index: int) -> Slot | None:
        """Get the slot bound to a catalog position, if there is one."""
        if 0 <= index < len(self._slots):
            return self._slots[index]
        return None

    def visible_slots(self) -> list[Slot]:
        return [s for s in self._slots if s.visible]

    def __iter__(self) -> Iterator[Slot]:
        return iter(self._slots)

    def __len__(self) -> int:
        return len(self._slots)


# ============================================================================
# Input Widgets
# ============================================================================


@dataclass
class SelectableList:
    """Dropdown-style list of entries with a current value."""

    options: list[str] = field(default_factory=list)
    value: int = 0

    def set_options(self, options: list[str]) -> None:
        """Replace all entries and reset the value to the first entry."""
        self.options = list(options)
        self.value = 0

    def set_label(self, index: int, label: str) -> None:
        self.options[index] = label


@dataclass
class TextField:
    """Single-line text entry."""

    text: str = ""


# ============================================================================
# Feedback
# ============================================================================


class FeedbackStyle(str, Enum):
    """Visual styles of the feedback label."""

    SUCCESS = "success"
    ERROR = "error"

    @property
    def rgb(self) -> tuple[int, int, int]:
        return _STYLE_COLORS[self]


_STYLE_COLORS: dict[FeedbackStyle, tuple[int, int, int]] = {
    FeedbackStyle.SUCCESS: (97, 255, 179),
    FeedbackStyle.ERROR: (255, 97, 97),
}


@dataclass
class FeedbackLabel:
    """Transient message surface, hidden until an action reports back."""

    text: str = ""
    style: FeedbackStyle | None = None
    visible: bool = False

    def show(self, text: str, style: FeedbackStyle) -> None:
        self.text = text
        self.style = style
        self.visible = True

    def hide(self) -> None:
        self.visible = False


# ============================================================================
# Panel
# ============================================================================


@dataclass
class ProductPanel:
    """The widgets the catalog controller drives."""

    slots: SlotPool
    selectable_list: SelectableList = field(default_factory=SelectableList)
    name_field: TextField = field(default_factory=TextField)
    price_field: TextField = field(default_factory=TextField)
    feedback: FeedbackLabel = field(default_factory=FeedbackLabel)

    @classmethod
    def create(cls, slot_count: int) -> "ProductPanel":
        """Create a panel with a fresh pool of slots.

        Args:
            slot_count: Number of display slots.

        Returns:
            ProductPanel instance.
        """
        return cls(slots=SlotPool.create(slot_count))

"""Cart aggregate: merge-by-name line items and discounted totals."""

from __future__ import annotations

import logging
from dataclasses import replace
from enum import Enum
from typing import Iterator, List, Optional

from shopcart.discounts.base import DiscountStrategy
from shopcart.models.item import Item
from shopcart.validation import validate_item

logger = logging.getLogger(__name__)


class CartChange(str, Enum):
    """What an upsert or discard did to the cart."""

    INSERTED = "inserted"
    MERGED = "merged"
    REMOVED = "removed"
    NOT_FOUND = "not_found"


class Cart:
    """Ordered collection of items keyed by exact item name.

    Adding an item whose name is already present increments the existing
    line's quantity and keeps the existing price. Removing a name that is
    not present does nothing. Neither operation raises unless the cart was
    created with ``validate=True``.
    """

    def __init__(self, validate: bool = False) -> None:
        self._items: List[Item] = []
        self.validate = validate

    def _index_of(self, name: str) -> Optional[int]:
        for index, item in enumerate(self._items):
            if item.name == name:
                return index
        return None

    def upsert(self, item: Item) -> CartChange:
        """Merge the item into an existing line or append it."""
        if self.validate:
            validate_item(item)

        index = self._index_of(item.name)
        if index is not None:
            existing = self._items[index]
            existing.quantity += item.quantity
            logger.debug("Merged %s x%s, quantity now %s", item.name, item.quantity, existing.quantity)
            return CartChange.MERGED

        self._items.append(item)
        logger.debug("Added %s x%s at %s", item.name, item.quantity, item.price)
        return CartChange.INSERTED

    def add_item(self, item: Item) -> None:
        self.upsert(item)

    def discard(self, name: str) -> CartChange:
        """Remove the line with this name, reporting whether it existed."""
        index = self._index_of(name)
        if index is None:
            logger.debug("Remove skipped, %s not in cart", name)
            return CartChange.NOT_FOUND

        del self._items[index]
        logger.debug("Removed %s", name)
        return CartChange.REMOVED

    def remove_item(self, name: str) -> None:
        self.discard(name)

    def get_items(self) -> List[Item]:
        """Return copies of the current lines in insertion order."""
        return [replace(item) for item in self._items]

    def get_item(self, name: str) -> Optional[Item]:
        index = self._index_of(name)
        if index is None:
            return None
        return replace(self._items[index])

    def get_subtotal(self) -> float:
        return float(sum(item.line_total for item in self._items))

    def total_quantity(self) -> int:
        return sum(item.quantity for item in self._items)

    def apply_discount(self, discount: DiscountStrategy) -> float:
        """Return the subtotal as transformed by the given strategy."""
        return discount.apply_discount(self.get_subtotal())

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self.get_items())

"""Optional item checks, enabled with ``Cart(validate=True)``."""

from __future__ import annotations

from shopcart.errors import InvalidItemError
from shopcart.models.item import Item


def validate_item(item: Item) -> None:
    """Raise InvalidItemError when the item cannot sensibly be priced."""
    if not str(item.name).strip():
        raise InvalidItemError("Item name must not be blank.")
    if item.price < 0:
        raise InvalidItemError(f"Price for '{item.name}' must not be negative: {item.price}.")
    if item.quantity <= 0:
        raise InvalidItemError(
            f"Quantity for '{item.name}' must be positive, got {item.quantity}."
        )

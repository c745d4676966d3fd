"""Shopping cart with pluggable discount strategies."""

from shopcart.cart import Cart, CartChange
from shopcart.discounts import (
    DiscountStrategy,
    FixedDiscount,
    NoDiscount,
    PercentageDiscount,
)
from shopcart.models import Item

__all__ = [
    "Cart",
    "CartChange",
    "DiscountStrategy",
    "FixedDiscount",
    "Item",
    "NoDiscount",
    "PercentageDiscount",
]

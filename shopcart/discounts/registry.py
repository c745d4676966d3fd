"""Build discount strategies from a kind name and a value."""

from __future__ import annotations

from typing import Callable, Dict

from shopcart.discounts.base import DiscountStrategy, NoDiscount
from shopcart.discounts.fixed import FixedDiscount
from shopcart.discounts.percentage import PercentageDiscount

DISCOUNT_KINDS: Dict[str, Callable[[float], DiscountStrategy]] = {
    "none": lambda _value: NoDiscount(),
    "fixed": FixedDiscount,
    "percentage": PercentageDiscount,
}


def make_discount(kind: str, value: float = 0.0) -> DiscountStrategy:
    try:
        factory = DISCOUNT_KINDS[kind.strip().lower()]
    except KeyError:
        raise ValueError(
            f"Unknown discount kind '{kind}'. Expected one of: {', '.join(DISCOUNT_KINDS)}"
        ) from None
    return factory(value)

"""Fixed-amount discount."""

from __future__ import annotations

from dataclasses import dataclass

from shopcart.discounts.base import DiscountStrategy, round_currency


@dataclass(frozen=True)
class FixedDiscount(DiscountStrategy):
    """Subtract a fixed amount; the result never drops below zero."""

    fixed_amount: float

    def apply_discount(self, amount: float) -> float:
        total = amount - self.fixed_amount
        if total < 0:
            return 0.0
        return round_currency(total)

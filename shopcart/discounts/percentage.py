"""Percentage discount."""

from __future__ import annotations

from dataclasses import dataclass

from shopcart.discounts.base import DiscountStrategy, round_currency


@dataclass(frozen=True)
class PercentageDiscount(DiscountStrategy):
    """Take ``percentage`` percent off the amount.

    Not clamped: a percentage above 100 produces a negative total.
    """

    percentage: float

    def apply_discount(self, amount: float) -> float:
        discounted = amount - amount * (self.percentage / 100.0)
        return round_currency(discounted)

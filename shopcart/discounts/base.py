"""Discount strategy interface and shared currency rounding."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext

from shopcart import config


def round_currency(amount: float, places: int = config.CURRENCY_PLACES) -> float:
    """Round half away from zero on the value's shortest decimal repr.

    ``round(2.675, 2)`` gives 2.67 because of binary representation;
    this returns 2.68. Infinities and NaN come back unchanged.
    """
    value = Decimal(str(amount))
    if not value.is_finite():
        return amount
    quantum = Decimal(1).scaleb(-places)
    with localcontext() as ctx:
        # quantize needs room for every integer digit plus the cents
        ctx.prec = max(ctx.prec, value.adjusted() + places + 2)
        return float(value.quantize(quantum, rounding=ROUND_HALF_UP))


class DiscountStrategy(ABC):
    """Maps a subtotal to the amount payable."""

    @abstractmethod
    def apply_discount(self, amount: float) -> float:
        raise NotImplementedError


@dataclass(frozen=True)
class NoDiscount(DiscountStrategy):
    def apply_discount(self, amount: float) -> float:
        return amount

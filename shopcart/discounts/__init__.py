from shopcart.discounts.base import DiscountStrategy, NoDiscount, round_currency
from shopcart.discounts.fixed import FixedDiscount
from shopcart.discounts.percentage import PercentageDiscount
from shopcart.discounts.registry import DISCOUNT_KINDS, make_discount

__all__ = [
    "DISCOUNT_KINDS",
    "DiscountStrategy",
    "FixedDiscount",
    "NoDiscount",
    "PercentageDiscount",
    "make_discount",
    "round_currency",
]

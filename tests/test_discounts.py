import math

import pytest

from shopcart.discounts import (
    DiscountStrategy,
    FixedDiscount,
    NoDiscount,
    PercentageDiscount,
    make_discount,
    round_currency,
)


def test_strategy_interface_is_abstract():
    with pytest.raises(TypeError):
        DiscountStrategy()


def test_custom_strategy_only_needs_apply_discount():
    class HalfOff(DiscountStrategy):
        def apply_discount(self, amount):
            return amount / 2

    assert HalfOff().apply_discount(10.0) == 5.0


@pytest.mark.parametrize(
    "fixed, amount, expected",
    [(15, 50, 35.00), (20, 10, 0.0), (10, 10, 0.0), (0, 12.345, 12.35), (0.1, 0.3, 0.2)],
)
def test_fixed_discount(fixed, amount, expected):
    assert FixedDiscount(fixed).apply_discount(amount) == expected


@pytest.mark.parametrize("fixed", [0, 0.01, 5, 99.99, 1000])
@pytest.mark.parametrize("amount", [0, 0.01, 4.99, 100])
def test_fixed_discount_is_never_negative(fixed, amount):
    assert FixedDiscount(fixed).apply_discount(amount) >= 0


@pytest.mark.parametrize(
    "percentage, amount, expected",
    [(10, 30, 27.00), (25, 200, 150.00), (15, 99.99, 84.99), (50, 0, 0.0), (0, 19.99, 19.99), (100, 42, 0.0)],
)
def test_percentage_discount(percentage, amount, expected):
    assert PercentageDiscount(percentage).apply_discount(amount) == expected


def test_percentage_over_hundred_is_not_clamped():
    # Fixed discounts clamp at zero, percentage discounts do not.
    assert PercentageDiscount(150).apply_discount(100) == -50.0
    assert FixedDiscount(150).apply_discount(100) == 0.0


def test_rounding_is_half_up():
    assert round_currency(2.675) == 2.68
    assert round_currency(0.125) == 0.13
    assert round_currency(-0.125) == -0.13
    assert FixedDiscount(0).apply_discount(2.675) == 2.68


def test_both_variants_round_the_same_way():
    assert FixedDiscount(0).apply_discount(1.005) == PercentageDiscount(0).apply_discount(1.005) == 1.01


def test_no_discount_returns_amount_unchanged():
    assert NoDiscount().apply_discount(12.3456) == 12.3456


def test_strategies_are_immutable():
    discount = FixedDiscount(5)
    with pytest.raises(AttributeError):
        discount.fixed_amount = 10


def test_strategies_compare_by_configuration():
    assert PercentageDiscount(10) == PercentageDiscount(10)
    assert FixedDiscount(10) != FixedDiscount(15)


@pytest.mark.parametrize(
    "kind, value, expected",
    [
        ("fixed", 5, FixedDiscount(5)),
        ("Percentage", 12.5, PercentageDiscount(12.5)),
        (" none ", 99, NoDiscount()),
    ],
)
def test_make_discount(kind, value, expected):
    assert make_discount(kind, value) == expected


def test_make_discount_unknown_kind():
    with pytest.raises(ValueError, match="Unknown discount kind"):
        make_discount("bogo", 1)


@pytest.mark.parametrize("amount", [1e27, 1e30, 123456789012345678901234567.5])
def test_huge_amounts_round_without_error(amount):
    assert FixedDiscount(0).apply_discount(amount) == pytest.approx(amount)
    assert PercentageDiscount(0).apply_discount(amount) == pytest.approx(amount)


def test_non_finite_amounts_pass_through():
    assert round_currency(float("inf")) == float("inf")
    assert round_currency(float("-inf")) == float("-inf")
    assert math.isnan(round_currency(float("nan")))

from __future__ import annotations

import math

import pytest

from storefront.models import CartItem, CartState, Choice, Product, SelectedOption
from storefront.pricing import (
    as_whole_units,
    commission_amount,
    line_total,
    preview_total,
    subtotal,
    total_price,
)


def _item(price: float, quantity: int = 1, deltas: tuple[float, ...] = ()) -> CartItem:
    options = tuple(SelectedOption(name=f"Extra {i}", price=d, group="Extra", choice=str(i)) for i, d in enumerate(deltas))
    return CartItem(id="x", product_id="p", product=Product(id="p", price=price), quantity=quantity, selected_options=options)


def test_line_total_without_options_is_product_price():
    assert line_total(_item(1500)) == 1500


def test_line_total_adds_option_deltas_before_quantity():
    assert line_total(_item(1500, quantity=3, deltas=(500, 200))) == (1500 + 500 + 200) * 3


def test_subtotal_sums_lines():
    state = CartState(items=[_item(1000, 2), _item(300, 1, (50,))])
    assert subtotal(state) == 2350


def test_empty_cart_totals_are_zero_for_any_commission():
    for pct in (0, 10, 100):
        state = CartState(commission_percentage=pct)
        assert commission_amount(state) == 0
        assert total_price(state) == 0


def test_zero_commission_total_equals_subtotal():
    state = CartState(items=[_item(1999, 3)], commission_percentage=0)
    assert commission_amount(state) == 0
    assert total_price(state) == subtotal(state)


def test_negative_commission_is_ignored():
    state = CartState(items=[_item(1000)], commission_percentage=-5)
    assert total_price(state) == 1000


def test_size_m_times_two_at_ten_percent():
    item = _item(1500, quantity=2, deltas=(500,))
    state = CartState(items=[item], commission_percentage=10)

    assert line_total(item) == 4000
    assert subtotal(state) == 4000
    assert commission_amount(state) == 400
    assert total_price(state) == 4400


@pytest.mark.parametrize(
    ("price", "pct", "expected"),
    [
        (4005, 10, 401),  # 400.5 rounds up
        (4004, 10, 400),  # 400.4 rounds down
        (4006, 10, 401),  # 400.6
        (25, 10, 3),  # 2.5
        (15, 10, 2),  # 1.5, half-up rather than half-even
        (1000, 12.5, 125),
        (333, 15, 50),  # 49.95
    ],
)
def test_commission_rounds_half_up(price, pct, expected):
    state = CartState(items=[_item(price)], commission_percentage=pct)
    assert commission_amount(state) == expected


def test_commission_monotonic_in_percentage():
    items = [_item(1234, 3, (99,)), _item(777)]
    totals = [total_price(CartState(items=items, commission_percentage=pct)) for pct in range(0, 101, 5)]
    assert totals == sorted(totals)


def test_nan_price_propagates():
    state = CartState(items=[_item(float("nan"))], commission_percentage=10)
    assert math.isnan(subtotal(state))
    assert math.isnan(commission_amount(state))
    assert math.isnan(total_price(state))


def test_infinite_commission_propagates():
    state = CartState(items=[_item(1000)], commission_percentage=float("inf"))
    assert commission_amount(state) == float("inf")
    assert total_price(state) == float("inf")


def test_infinite_price_propagates():
    state = CartState(items=[_item(float("inf"))], commission_percentage=10)
    assert commission_amount(state) == float("inf")


def test_huge_subtotal_does_not_raise():
    state = CartState(items=[_item(1e40)], commission_percentage=10)
    assert commission_amount(state) == pytest.approx(1e39)
    assert total_price(state) == pytest.approx(1.1e40)

    state = CartState(items=[_item(10**30 + 5)], commission_percentage=10)
    assert commission_amount(state) == pytest.approx(1e29)


def test_as_whole_units():
    assert as_whole_units("2.5") == 3
    assert as_whole_units(2.49) == 2
    assert as_whole_units(0) == 0


def test_preview_total():
    product = Product(id="p", price=1500)
    assert preview_total(product, {"Size": [Choice("L", 1000)]}, 2) == 5000
    assert preview_total(product, {}, 1) == 1500

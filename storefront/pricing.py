"""Cart pricing: line totals, subtotal and commission."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

from storefront.models import CartItem, CartState, Product
from storefront.options import Selections, options_total


def as_whole_units(x: Decimal | int | float | str) -> int:
    """Round to a whole display unit, halves away from zero."""
    return int(Decimal(str(x)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def unit_price(item: CartItem) -> float:
    return item.product.price + sum(option.price for option in item.selected_options)


def line_total(item: CartItem) -> float:
    """(unit price + option deltas) * quantity, unrounded."""
    return unit_price(item) * item.quantity


def subtotal(state: CartState) -> float:
    return sum(line_total(item) for item in state.items)


def commission_amount(state: CartState) -> float:
    """
    Commission on the subtotal, rounded half-up to a whole unit.

    The product is computed on decimals built from the values' string form,
    so 4005 at 10% gives exactly 400.5 and rounds to 401. Non-finite
    subtotals or rates come back as the plain float product (NaN or inf).
    """
    percentage = state.commission_percentage
    if math.isnan(percentage):
        return percentage
    if percentage <= 0:
        return 0
    base = subtotal(state)
    approx = base * percentage / 100
    # Floats past 2**53 are already whole numbers.
    if not math.isfinite(approx) or abs(approx) >= 2**53:
        return approx
    with localcontext() as ctx:
        ctx.prec = 64
        raw = Decimal(str(base)) * Decimal(str(percentage)) / Decimal(100)
        return as_whole_units(raw)


def total_price(state: CartState) -> float:
    return subtotal(state) + commission_amount(state)


def preview_total(product: Product, selections: Selections, quantity: int) -> float:
    """Live price of a product being configured, before it enters the cart."""
    return (product.price + options_total(selections)) * quantity

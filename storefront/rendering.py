"""Rendering helpers for prices, cart lines and totals."""

from __future__ import annotations

import math

from rich.text import Text

from storefront.config import CURRENCY_SYMBOL
from storefront.data import localized, translate
from storefront.models import CartItem, SelectedOption
from storefront.pricing import line_total


def format_price(amount: float) -> str:
    """Render an amount in whole display units, e.g. ``1500 ₸``."""
    if isinstance(amount, float) and math.isfinite(amount) and amount.is_integer():
        amount = int(amount)
    return f"{amount} {CURRENCY_SYMBOL}"


def group_selected_options(options: tuple[SelectedOption, ...]) -> list[tuple[str | None, list[SelectedOption]]]:
    """Group cart options by their structured group, keeping first-seen order."""
    grouped: dict[str | None, list[SelectedOption]] = {}
    for option in options:
        grouped.setdefault(option.group, []).append(option)
    return list(grouped.items())


def format_cart_line(item: CartItem, locale: str | None = None) -> Text:
    """Render one cart line with its options grouped underneath."""
    text = Text()
    text.append(localized(item.product, "name", locale), style="bold")
    text.append(f"  x{item.quantity}")
    text.append(f"  {format_price(line_total(item))}", style="bold #5fbf72")

    for group, options in group_selected_options(item.selected_options):
        if group is not None:
            text.append(f"\n      {group}", style="dim")
        for option in options:
            text.append(f"\n        {option.display_name}")
            if option.price > 0:
                text.append(f" +{format_price(option.price)}", style="dim")
    return text


def format_commission_banner(percentage: float, locale: str | None = None) -> Text:
    text = Text()
    if percentage and percentage > 0:
        text.append(f" {translate('commission_display', locale, percentage=percentage)} ", style="bold #ffffff on #b23a48")
    return text


def format_totals(subtotal: float, commission: float, total: float, percentage: float, locale: str | None = None) -> Text:
    """Render the subtotal / commission / total footer."""
    text = Text()
    if percentage and percentage > 0:
        text.append(f"{translate('subtotal', locale)}: {format_price(subtotal)}\n", style="dim")
        text.append(
            f"{translate('commission_display', locale, percentage=percentage)}: {format_price(commission)}\n",
            style="#b23a48",
        )
    text.append(f"{translate('total', locale)}: {format_price(total)}", style="bold")
    return text

"""Product option selection modal screen."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.reactive import reactive
from textual.screen import ModalScreen
from textual.widgets import Static

from storefront.cart import CartStore
from storefront.data import localized, translate
from storefront.models import SINGLE, CartItem, Choice, OptionGroup, Product
from storefront.options import (
    Selections,
    flatten_selection,
    is_selected,
    normalize_options,
    select_single,
    toggle_multiple,
    validate_selection,
)
from storefront.pricing import preview_total
from storefront.rendering import format_price


class ProductModal(ModalScreen[CartItem | None]):
    """Centered modal to pick options and quantity for one product."""

    BINDINGS = [
        ("escape", "close", "Close"),
        ("q", "close", "Close"),
        ("j", "move_cursor(1)", "Next"),
        ("k", "move_cursor(-1)", "Previous"),
        ("up", "move_cursor(-1)", "Previous"),
        ("down", "move_cursor(1)", "Next"),
        ("enter", "toggle_current", "Select"),
        ("space", "toggle_current", "Select"),
        ("plus", "change_quantity(1)", "More"),
        ("minus", "change_quantity(-1)", "Less"),
        ("a", "add_to_cart", "Add"),
    ]

    CSS = """
    ProductModal {
        align: center middle;
        background: $background 60%;
    }

    #product-dialog {
        width: 64;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #product-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #product-body {
        margin-bottom: 1;
        color: white;
    }

    #product-error {
        color: #ffb3b3;
    }

    #product-help {
        margin-top: 1;
        color: #dddddd;
    }
    """

    cursor_index = reactive(0)

    def __init__(self, product: Product, store: CartStore, locale: str | None = None) -> None:
        super().__init__()
        self.product = product
        self.store = store
        self.ui_locale = locale
        self.groups: list[OptionGroup] = normalize_options(product.options, locale)
        self.picked: Selections = {}
        self.quantity = 1
        self.error_message = ""

    def compose(self) -> ComposeResult:
        with Container(id="product-dialog"):
            yield Static(localized(self.product, "name", self.ui_locale), id="product-title")
            yield Static(id="product-body")
            yield Static(id="product-error")
            yield Static(id="product-help")

    def on_mount(self) -> None:
        self._refresh_content()

    def action_close(self) -> None:
        self.dismiss(None)

    def action_move_cursor(self, delta: int) -> None:
        rows = self._rows()
        if not rows:
            return
        self.cursor_index = (self.cursor_index + delta) % len(rows)
        self._refresh_content()

    def action_toggle_current(self) -> None:
        rows = self._rows()
        if not rows:
            return
        group, choice = rows[self.cursor_index]
        if group.type == SINGLE:
            self.picked = select_single(self.picked, group.name, choice)
        else:
            checked = not is_selected(self.picked, group.name, choice)
            self.picked = toggle_multiple(self.picked, group.name, choice, checked)
        self.error_message = ""
        self._refresh_content()

    def action_change_quantity(self, delta: int) -> None:
        self.quantity = max(1, self.quantity + delta)
        self._refresh_content()

    def action_add_to_cart(self) -> None:
        result = validate_selection(self.groups, self.picked)
        if not result.ok:
            self.error_message = result.message(self.ui_locale)
            self._refresh_content()
            return

        options = flatten_selection(self.groups, self.picked, self.ui_locale)
        item = self.store.add_item(self.product, self.quantity, options)
        self.dismiss(item)

    def _rows(self) -> list[tuple[OptionGroup, Choice]]:
        return [(group, choice) for group in self.groups for choice in group.choices]

    def _refresh_content(self) -> None:
        body = self.query_one("#product-body", Static)
        error_widget = self.query_one("#product-error", Static)
        help_text = self.query_one("#product-help", Static)

        content = Text(style="white")
        content.append(format_price(self.product.price), style="bold #5fbf72")
        description = localized(self.product, "description", self.ui_locale)
        if description:
            content.append(f"\n{description}", style="dim")

        row_index = 0
        for group in self.groups:
            content.append(f"\n\n{group.name}", style="bold")
            if group.type == SINGLE:
                content.append(" *", style="#b23a48")
            for choice in group.choices:
                pointer = "➤ " if row_index == self.cursor_index else "  "
                chosen = is_selected(self.picked, group.name, choice)
                if group.type == SINGLE:
                    marker = "(•)" if chosen else "( )"
                else:
                    marker = "[x]" if chosen else "[ ]"
                content.append(f"\n{pointer}{marker} {choice.name}", style="bold white" if chosen else "white")
                if choice.price > 0:
                    content.append(f"  +{format_price(choice.price)}", style="dim")
                row_index += 1

        total = preview_total(self.product, self.picked, self.quantity)
        content.append(f"\n\n- {self.quantity} +   ")
        content.append(f"{translate('add_to_order', self.ui_locale)} - {format_price(total)}", style="bold")

        body.update(content)
        error_widget.update(self.error_message)
        help_text.update("J/K/↑/↓ move, Enter select, +/- quantity, A add, Esc/q close")

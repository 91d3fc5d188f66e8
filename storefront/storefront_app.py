"""Main Textual app class."""

from __future__ import annotations

import logging

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.events import Key
from textual.reactive import reactive
from textual.widgets import Header, Static

from storefront.cart import CartStore
from storefront.config import SUPPORTED_LOCALES, resolve_debug_log_path, resolve_locale
from storefront.data import Catalog, has_options, load_catalog, localized, menu_sections, translate
from storefront.models import CartItem, Product
from storefront.product_modal import ProductModal
from storefront.rendering import format_cart_line, format_commission_banner, format_price, format_totals

logger = logging.getLogger(__name__)


class StorefrontApp(App):
    """A Textual app for browsing a restaurant menu and building an order."""

    TITLE = "Menu"

    CSS = """
    Screen {
        layout: vertical;
    }

    #commission-banner {
        height: auto;
        content-align: center middle;
    }

    #main-layout {
        height: 1fr;
    }

    #menu-pane {
        width: 3fr;
        border: round $primary;
        padding: 1;
    }

    #cart-pane {
        width: 2fr;
        border: round $secondary;
        padding: 1;
    }

    #kitchen-bar {
        height: 1;
        margin-bottom: 1;
    }

    #menu-list {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #cart-list {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #cart-totals {
        height: auto;
        margin-top: 1;
    }

    #status-bar {
        height: auto;
        color: #dddddd;
    }

    .pane-title {
        text-style: bold;
        margin-bottom: 1;
    }
    """

    active_pane = reactive("menu")
    menu_selected_index = reactive(0)
    cart_selected_index = reactive(None)

    BINDINGS = [
        ("tab", "switch_pane", "Menu / Cart"),
        ("up", "move_selection(-1)", "Previous"),
        ("down", "move_selection(1)", "Next"),
        ("left", "cycle_kitchen(-1)", "Previous kitchen"),
        ("right", "cycle_kitchen(1)", "Next kitchen"),
        ("enter", "activate_selected", "Add / configure"),
        ("plus", "increment_selected", "More"),
        ("minus", "decrement_selected", "Less"),
        Binding("ctrl+s", "checkout", "Checkout", priority=True),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self,
        store: CartStore | None = None,
        catalog: Catalog | None = None,
        locale: str | None = None,
    ) -> None:
        super().__init__()
        self.store = store if store is not None else CartStore()
        self.catalog = catalog if catalog is not None else load_catalog()
        self.ui_locale = resolve_locale(locale)
        self.kitchen_id = self.catalog.kitchens[0].id if self.catalog.kitchens else None
        self.system_status = ""
        self._unsubscribe = self.store.subscribe(self._refresh_cart)
        self.sub_title = self.catalog.restaurant.name

    def compose(self) -> ComposeResult:
        yield Header()
        yield Static(id="commission-banner")
        with Horizontal(id="main-layout"):
            with Vertical(id="menu-pane"):
                yield Static(id="kitchen-bar")
                yield Static(id="menu-list")
            with Vertical(id="cart-pane"):
                yield Static(classes="pane-title", id="cart-title")
                yield Static(id="cart-list")
                yield Static(id="cart-totals")
                yield Static(id="status-bar")

    def on_mount(self) -> None:
        self.store.set_commission(self.catalog.restaurant.commission_percentage)
        logger.debug(
            "on_mount restaurant=%s commission=%s items=%d",
            self.catalog.restaurant.slug,
            self.store.commission_percentage,
            len(self.store.items),
        )
        self._refresh_all()

    def on_unmount(self) -> None:
        self._unsubscribe()

    def on_key(self, event: Key) -> None:
        if isinstance(self.screen, ProductModal):
            return
        if not event.is_printable or not event.character or len(event.character) != 1:
            return

        key = event.character.lower()
        if key == "j":
            self.action_move_selection(1)
        elif key == "k":
            self.action_move_selection(-1)
        elif key == "d":
            self._delete_selected_item()
        elif key == "x":
            self.store.clear_cart()
            self.cart_selected_index = None
        elif key == "l":
            self._cycle_locale()
        else:
            return
        event.stop()

    def action_switch_pane(self) -> None:
        if isinstance(self.screen, ProductModal):
            return
        self.active_pane = "cart" if self.active_pane == "menu" else "menu"
        if self.active_pane == "cart" and self.cart_selected_index is None and self.store.items:
            self.cart_selected_index = 0
        self._refresh_all()

    def action_move_selection(self, delta: int) -> None:
        if isinstance(self.screen, ProductModal):
            return
        if self.active_pane == "menu":
            products = self._menu_products()
            if products:
                self.menu_selected_index = (self.menu_selected_index + delta) % len(products)
            self._refresh_menu()
            return

        items = self.store.items
        if not items:
            return
        if self.cart_selected_index is None:
            self.cart_selected_index = 0 if delta > 0 else len(items) - 1
        else:
            self.cart_selected_index = (self.cart_selected_index + delta) % len(items)
        self._refresh_cart()

    def action_cycle_kitchen(self, delta: int) -> None:
        if isinstance(self.screen, ProductModal) or not self.catalog.kitchens:
            return
        ids = [kitchen.id for kitchen in self.catalog.kitchens]
        idx = ids.index(self.kitchen_id) if self.kitchen_id in ids else 0
        self.kitchen_id = ids[(idx + delta) % len(ids)]
        self.menu_selected_index = 0
        self._refresh_menu()

    def action_activate_selected(self) -> None:
        if isinstance(self.screen, ProductModal) or self.active_pane != "menu":
            return
        product = self._selected_product()
        if product is None:
            return
        if not product.is_available:
            self._set_status(translate("unavailable", self.ui_locale))
            return
        if has_options(product):
            self.push_screen(ProductModal(product, self.store, self.ui_locale), self._on_product_added)
            return
        self._on_product_added(self.store.add_item(product, 1, []))

    def action_increment_selected(self) -> None:
        if isinstance(self.screen, ProductModal):
            return
        if self.active_pane == "menu":
            self.action_activate_selected()
            return
        item = self._selected_item()
        if item is not None:
            self.store.increment_item(item.id)

    def action_decrement_selected(self) -> None:
        if isinstance(self.screen, ProductModal):
            return
        if self.active_pane == "menu":
            product = self._selected_product()
            if product is not None:
                self.store.decrement_product(product.id)
            self._refresh_menu()
            return
        item = self._selected_item()
        if item is not None:
            self.store.decrement_item(item.id)

    def action_checkout(self) -> None:
        if isinstance(self.screen, ProductModal):
            return
        if not self.store.items:
            self._set_status(translate("empty_cart", self.ui_locale))
            return
        total = format_price(self.store.total_price())
        logger.debug("checkout items=%d total=%s", len(self.store.items), total)
        self._set_status(translate("checkout_done", self.ui_locale, total=total))

    def _on_product_added(self, item: CartItem | None) -> None:
        if item is None:
            return
        logger.debug("item_added id=%s product=%s qty=%d", item.id, item.product_id, item.quantity)
        self._set_status(translate("added", self.ui_locale, name=localized(item.product, "name", self.ui_locale)))
        self._refresh_menu()

    def _delete_selected_item(self) -> None:
        item = self._selected_item()
        if item is None:
            return
        self.store.remove_item(item.id)

    def _cycle_locale(self) -> None:
        idx = SUPPORTED_LOCALES.index(self.ui_locale) if self.ui_locale in SUPPORTED_LOCALES else 0
        self.ui_locale = SUPPORTED_LOCALES[(idx + 1) % len(SUPPORTED_LOCALES)]
        self._refresh_all()

    def _set_status(self, message: str) -> None:
        self.system_status = message
        self._refresh_cart()

    def _menu_products(self) -> list[Product]:
        return [product for section in menu_sections(self.catalog, self.kitchen_id) for product in section.products]

    def _selected_product(self) -> Product | None:
        products = self._menu_products()
        if not (0 <= self.menu_selected_index < len(products)):
            return None
        return products[self.menu_selected_index]

    def _selected_item(self) -> CartItem | None:
        items = self.store.items
        if self.cart_selected_index is None or not (0 <= self.cart_selected_index < len(items)):
            return None
        return items[self.cart_selected_index]

    def _visible_rows(self, widget: Static) -> int:
        height = widget.size.height
        if height <= 0:
            return 8
        return max(1, height)

    def _window_bounds(self, total: int, rows: int, selected: int | None) -> tuple[int, int]:
        if total <= 0:
            return (0, 0)

        rows = max(1, rows)
        if total <= rows:
            return (0, total)

        if selected is None:
            start = 0
        else:
            start = max(0, selected - rows // 2)
            start = min(start, total - rows)

        return (start, start + rows)

    def _refresh_all(self) -> None:
        self._refresh_banner()
        self._refresh_menu()
        self._refresh_cart()

    def _refresh_banner(self) -> None:
        try:
            banner = self.query_one("#commission-banner", Static)
        except NoMatches:
            return
        banner.update(format_commission_banner(self.store.commission_percentage, self.ui_locale))

    def _refresh_menu(self) -> None:
        try:
            kitchen_bar = self.query_one("#kitchen-bar", Static)
            menu_widget = self.query_one("#menu-list", Static)
        except NoMatches:
            return

        bar = Text()
        for idx, kitchen in enumerate(self.catalog.kitchens):
            if idx > 0:
                bar.append("  ")
            style = "bold #ffffff on #2f6db5" if kitchen.id == self.kitchen_id else "dim"
            bar.append(f" {localized(kitchen, 'name', self.ui_locale)} ", style=style)
        kitchen_bar.update(bar)

        # Flatten sections into display rows; product rows carry their selection index.
        rows: list[tuple[int | None, Text]] = []
        product_idx = 0
        for section in menu_sections(self.catalog, self.kitchen_id):
            rows.append((None, Text(localized(section.category, "name", self.ui_locale), style="bold underline")))
            for product in section.products:
                rows.append((product_idx, self._product_row(product, product_idx)))
                product_idx += 1

        if not rows:
            menu_widget.update("")
            return

        selected_row = next((i for i, (idx, _) in enumerate(rows) if idx == self.menu_selected_index), None)
        start, end = self._window_bounds(len(rows), self._visible_rows(menu_widget), selected_row)

        lines = Text()
        if start > 0:
            lines.append("⋮\n", style="dim")
        for i in range(start, end):
            if i > start:
                lines.append("\n")
            lines.append_text(rows[i][1])
        if end < len(rows):
            lines.append("\n⋮", style="dim")
        menu_widget.update(lines)

    def _product_row(self, product: Product, product_idx: int) -> Text:
        focused = self.active_pane == "menu" and product_idx == self.menu_selected_index
        text = Text()
        text.append("➤ " if focused else "  ")
        name_style = "white" if product.is_available else "dim strike"
        text.append(localized(product, "name", self.ui_locale), style=name_style)
        text.append(f"  {format_price(product.price)}", style="dim")
        if has_options(product):
            text.append(" …", style="dim")
        in_cart = self.store.product_quantity(product.id)
        if in_cart:
            text.append(f" ({in_cart})", style="bold #5fbf72")
        return text

    def _refresh_cart(self) -> None:
        try:
            title = self.query_one("#cart-title", Static)
            cart_widget = self.query_one("#cart-list", Static)
            totals_widget = self.query_one("#cart-totals", Static)
            status_widget = self.query_one("#status-bar", Static)
        except NoMatches:
            return

        items = self.store.items
        title.update(f"{translate('your_order', self.ui_locale)} ({self.store.item_count()})")
        status_widget.update(self.system_status)
        self._refresh_banner()

        if not items:
            self.cart_selected_index = None
            cart_widget.update(translate("empty_cart", self.ui_locale))
            totals_widget.update(format_totals(0, 0, 0, 0, self.ui_locale))
            return

        if self.cart_selected_index is not None and self.cart_selected_index >= len(items):
            self.cart_selected_index = len(items) - 1

        start, end = self._window_bounds(len(items), self._visible_rows(cart_widget), self.cart_selected_index)
        lines = Text()
        if start > 0:
            lines.append("⋮\n", style="dim")
        for idx in range(start, end):
            if idx > start:
                lines.append("\n")
            focused = self.active_pane == "cart" and idx == self.cart_selected_index
            lines.append("➤ " if focused else "  ")
            lines.append_text(format_cart_line(items[idx], self.ui_locale))
        if end < len(items):
            lines.append("\n⋮", style="dim")
        cart_widget.update(lines)

        totals_widget.update(
            format_totals(
                self.store.subtotal(),
                self.store.commission_amount(),
                self.store.total_price(),
                self.store.commission_percentage,
                self.ui_locale,
            )
        )


def configure_debug_log(path: str | None = None) -> None:
    """Send storefront debug logging to a file. Failures are ignored."""
    try:
        handler = logging.FileHandler(path or resolve_debug_log_path(), encoding="utf-8")
    except OSError:
        return
    handler.setFormatter(logging.Formatter("%(asctime)s %(name)s %(levelname)s %(message)s"))
    root = logging.getLogger("storefront")
    root.addHandler(handler)
    root.setLevel(logging.DEBUG)

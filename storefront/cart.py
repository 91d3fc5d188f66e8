"""Persisted client-side cart."""

from __future__ import annotations

import copy
import json
import logging
from collections.abc import Iterable
from dataclasses import replace
from typing import Any, Callable
from uuid import uuid4

from storefront import pricing
from storefront.config import CART_STORAGE_KEY
from storefront.models import CartItem, CartState, Product, ProductOption, SelectedOption
from storefront.persistence import MemoryStorage, Storage, read_safely, write_safely

logger = logging.getLogger(__name__)

_STORAGE_VERSION = 0


def _new_item_id() -> str:
    return uuid4().hex[:12]


def _as_selected(option: SelectedOption | ProductOption) -> SelectedOption:
    if isinstance(option, SelectedOption):
        return option
    return SelectedOption(name=option.name, price=option.price, choice=option.name)


class CartStore:
    """
    Cart state container.

    Construct one per session and hand it to whatever renders the menu.
    Every mutation writes the whole state to ``storage`` under
    ``storage_key``; a failed write is logged and the in-memory state stays
    authoritative.
    """

    def __init__(
        self,
        storage: Storage | None = None,
        storage_key: str = CART_STORAGE_KEY,
        id_factory: Callable[[], str] = _new_item_id,
    ) -> None:
        self.storage = storage if storage is not None else MemoryStorage()
        self.storage_key = storage_key
        self._id_factory = id_factory
        self._listeners: list[Callable[[], None]] = []
        self.state = self._restore()

    @property
    def items(self) -> list[CartItem]:
        return list(self.state.items)

    @property
    def commission_percentage(self) -> float:
        return self.state.commission_percentage

    def subscribe(self, listener: Callable[[], None]) -> Callable[[], None]:
        """Call ``listener`` after every change. Returns an unsubscribe callable."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def add_item(
        self,
        product: Product,
        quantity: int,
        options: Iterable[SelectedOption | ProductOption] = (),
    ) -> CartItem:
        """Append a new line. Identical configurations are never merged."""
        item = CartItem(
            id=self._id_factory(),
            product_id=product.id,
            product=copy.deepcopy(product),
            quantity=quantity,
            selected_options=tuple(_as_selected(o) for o in options),
        )
        self.state.items = [*self.state.items, item]
        self._commit()
        return item

    def remove_item(self, item_id: str) -> None:
        remaining = [item for item in self.state.items if item.id != item_id]
        if len(remaining) == len(self.state.items):
            return
        self.state.items = remaining
        self._commit()

    def update_quantity(self, item_id: str, quantity: int) -> None:
        """Set a line's quantity; zero or less removes the line."""
        if quantity <= 0:
            self.remove_item(item_id)
            return
        if self.get_item(item_id) is None:
            return
        self.state.items = [
            replace(item, quantity=quantity) if item.id == item_id else item for item in self.state.items
        ]
        self._commit()

    def increment_item(self, item_id: str) -> None:
        item = self.get_item(item_id)
        if item is not None:
            self.update_quantity(item_id, item.quantity + 1)

    def decrement_item(self, item_id: str) -> None:
        item = self.get_item(item_id)
        if item is not None:
            self.update_quantity(item_id, item.quantity - 1)

    def decrement_product(self, product_id: str) -> None:
        """Take one unit off the most recently added line of a product."""
        for item in reversed(self.state.items):
            if item.product_id == product_id:
                self.decrement_item(item.id)
                return

    def clear_cart(self) -> None:
        self.state.items = []
        self._commit()

    def set_commission(self, percentage: float) -> None:
        self.state.commission_percentage = percentage
        self._commit()

    def get_item(self, item_id: str) -> CartItem | None:
        for item in self.state.items:
            if item.id == item_id:
                return item
        return None

    def item_count(self) -> int:
        return sum(item.quantity for item in self.state.items)

    def product_quantity(self, product_id: str) -> int:
        return sum(item.quantity for item in self.state.items if item.product_id == product_id)

    def subtotal(self) -> float:
        return pricing.subtotal(self.state)

    def commission_amount(self) -> float:
        return pricing.commission_amount(self.state)

    def total_price(self) -> float:
        return pricing.total_price(self.state)

    def to_payload(self) -> dict[str, Any]:
        return {
            "state": {
                "items": [item.to_dict() for item in self.state.items],
                "commissionPercentage": self.state.commission_percentage,
            },
            "version": _STORAGE_VERSION,
        }

    def _commit(self) -> None:
        try:
            serialized = json.dumps(self.to_payload(), ensure_ascii=False)
        except (TypeError, ValueError) as exc:
            logger.warning("cart serialization failed error=%r", exc)
        else:
            write_safely(self.storage, self.storage_key, serialized)
        for listener in list(self._listeners):
            listener()

    def _restore(self) -> CartState:
        raw = read_safely(self.storage, self.storage_key)
        if raw is None:
            return CartState()
        try:
            payload = json.loads(raw)
            state = payload["state"]
            commission = state.get("commissionPercentage") or 0
            if not isinstance(commission, (int, float)) or isinstance(commission, bool):
                raise ValueError(f"bad commissionPercentage {commission!r}")
            raw_items = state.get("items") or []
            if not isinstance(raw_items, list):
                raise ValueError(f"items must be a list, got {type(raw_items).__name__}")
        except (ValueError, KeyError, TypeError, AttributeError) as exc:
            logger.warning("discarding unreadable cart key=%s error=%r", self.storage_key, exc)
            return CartState()

        items: list[CartItem] = []
        for raw_item in raw_items:
            try:
                items.append(CartItem.from_dict(raw_item))
            except (ValueError, KeyError, TypeError, AttributeError) as exc:
                logger.warning("dropping malformed cart item error=%r", exc)
        logger.debug("cart restored items=%d commission=%s", len(items), commission)
        return CartState(items=items, commission_percentage=commission)

from __future__ import annotations

import asyncio

from storefront.cart import CartStore
from storefront.models import Choice
from storefront.persistence import MemoryStorage
from storefront.product_modal import ProductModal
from storefront.storefront_app import StorefrontApp


def _run(coro):
    return asyncio.run(coro)


def test_commission_is_pushed_to_store_on_mount():
    store = CartStore(MemoryStorage())
    app = StorefrontApp(store=store, locale="en")

    async def scenario():
        async with app.run_test() as pilot:
            await pilot.pause()

    _run(scenario())
    assert store.commission_percentage == 10


def test_product_without_options_is_added_directly():
    store = CartStore(MemoryStorage())
    app = StorefrontApp(store=store, locale="en")

    async def scenario():
        async with app.run_test() as pilot:
            # Cheeseburger, Double Burger, then Chicken Burger (no options).
            await pilot.press("down", "down", "enter")
            await pilot.pause()

    _run(scenario())
    assert [i.product_id for i in store.items] == ["chicken_burger"]
    assert store.total_price() == 1400 + 140


def test_required_group_blocks_add_until_selected():
    store = CartStore(MemoryStorage())
    app = StorefrontApp(store=store, locale="en")

    async def scenario():
        async with app.run_test() as pilot:
            await pilot.press("enter")
            await pilot.pause()
            assert isinstance(app.screen, ProductModal)

            await pilot.press("a")
            await pilot.pause()
            assert isinstance(app.screen, ProductModal)
            assert app.screen.error_message == "Please select: Size"
            assert store.items == []

            # Move to "M" and select it.
            await pilot.press("down", "enter")
            await pilot.pause()
            assert app.screen.picked == {"Size": [Choice("M", 500)]}
            assert app.screen.error_message == ""

            await pilot.press("plus", "a")
            await pilot.pause()
            assert not isinstance(app.screen, ProductModal)

    _run(scenario())
    assert len(store.items) == 1
    item = store.items[0]
    assert item.quantity == 2
    assert [o.name for o in item.selected_options] == ["Size: M"]
    assert store.total_price() == 4400

from __future__ import annotations

from storefront.cart import CartStore
from storefront.models import Choice, Product, ProductOption, SelectedOption
from storefront.options import flatten_selection, normalize_options


def test_add_item_appends_new_line(store, burger):
    item = store.add_item(burger, 2, [SelectedOption(name="Size: M", price=500, group="Size", choice="M")])

    assert store.items == [item]
    assert item.id == "item-1"
    assert item.product_id == "burger"
    assert item.quantity == 2
    assert store.total_price() == 4000


def test_identical_adds_are_not_merged(store, water):
    first = store.add_item(water, 1, [])
    second = store.add_item(water, 1, [])

    assert first.id != second.id
    assert [i.quantity for i in store.items] == [1, 1]
    assert store.total_price() == 600


def test_default_ids_are_unique(water):
    store = CartStore()
    ids = {store.add_item(water, 1).id for _ in range(50)}
    assert len(ids) == 50


def test_product_snapshot_is_by_value(store):
    options = [{"name": "S", "price": 0}]
    product = Product(id="p", price=100, options=options)
    item = store.add_item(product, 1)

    options.append({"name": "XL", "price": 900})
    assert item.product.options == [{"name": "S", "price": 0}]


def test_legacy_product_options_are_accepted(store, water):
    item = store.add_item(water, 1, [ProductOption("Lemon", 100)])
    assert item.selected_options == (SelectedOption(name="Lemon", price=100, group=None, choice="Lemon"),)
    assert store.total_price() == 400


def test_remove_item_and_missing_id_is_noop(store, water):
    item = store.add_item(water, 1)
    store.remove_item("nope")
    assert len(store.items) == 1

    store.remove_item(item.id)
    assert store.items == []


def test_update_quantity_replaces_only_quantity(store, burger):
    options = [SelectedOption(name="Size: L", price=1000, group="Size", choice="L")]
    item = store.add_item(burger, 1, options)

    store.update_quantity(item.id, 5)

    updated = store.get_item(item.id)
    assert updated is not None
    assert updated.quantity == 5
    assert updated.selected_options == item.selected_options
    assert updated.product == item.product
    assert item.quantity == 1


def test_update_quantity_zero_matches_remove(burger, water):
    a = CartStore(id_factory=iter(["a", "b"]).__next__)
    b = CartStore(id_factory=iter(["a", "b"]).__next__)
    for store in (a, b):
        store.add_item(burger, 1)
        store.add_item(water, 2)

    a.update_quantity("a", 0)
    b.remove_item("a")

    assert a.items == b.items


def test_update_quantity_unknown_id_is_noop(store, water):
    store.add_item(water, 1)
    store.update_quantity("nope", 3)
    assert [i.quantity for i in store.items] == [1]


def test_quantity_three_then_one_then_negative_removes(store, water):
    item = store.add_item(water, 3)
    store.update_quantity(item.id, 1)
    store.update_quantity(item.id, -5)
    assert store.items == []


def test_clear_cart_keeps_commission(store, water):
    store.set_commission(10)
    store.add_item(water, 1)
    store.clear_cart()

    assert store.items == []
    assert store.commission_percentage == 10


def test_set_commission_is_idempotent(store, water):
    store.add_item(water, 10)
    store.set_commission(10)
    once = store.total_price()
    store.set_commission(10)
    assert store.total_price() == once == 3300


def test_increment_and_decrement_item(store, water):
    item = store.add_item(water, 1)
    store.increment_item(item.id)
    assert store.get_item(item.id).quantity == 2

    store.decrement_item(item.id)
    store.decrement_item(item.id)
    assert store.items == []


def test_decrement_product_hits_most_recent_line(store, burger):
    first = store.add_item(burger, 2)
    second = store.add_item(burger, 1)

    store.decrement_product("burger")
    assert store.get_item(second.id) is None
    assert store.get_item(first.id).quantity == 2

    store.decrement_product("burger")
    assert store.get_item(first.id).quantity == 1
    store.decrement_product("unknown")
    assert store.item_count() == 1


def test_item_count_and_product_quantity(store, burger, water):
    store.add_item(burger, 2)
    store.add_item(burger, 1)
    store.add_item(water, 4)

    assert store.item_count() == 7
    assert store.product_quantity("burger") == 3
    assert store.product_quantity("water") == 4
    assert store.product_quantity("nothing") == 0


def test_listeners_fire_on_change_and_unsubscribe(store, water):
    calls = []
    unsubscribe = store.subscribe(lambda: calls.append(len(store.items)))

    store.add_item(water, 1)
    unsubscribe()
    store.clear_cart()

    assert calls == [1]


def test_sessions_are_independent(burger):
    a = CartStore()
    b = CartStore()
    a.add_item(burger, 1)
    assert b.items == []


def test_end_to_end_size_selection(store, burger):
    groups = normalize_options(burger.options)
    selections = {"Size": [Choice("M", 500)]}
    store.set_commission(10)
    store.add_item(burger, 2, flatten_selection(groups, selections))

    assert store.subtotal() == 4000
    assert store.commission_amount() == 400
    assert store.total_price() == 4400

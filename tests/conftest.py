from __future__ import annotations

import itertools

import pytest

from storefront.cart import CartStore
from storefront.models import Product
from storefront.persistence import MemoryStorage

SIZE_GROUP = {
    "id": "size",
    "name": "Size",
    "type": "single",
    "choices": [
        {"name": "S", "price": 0},
        {"name": "M", "price": 500},
        {"name": "L", "price": 1000},
    ],
}


@pytest.fixture(autouse=True)
def _clear_locale_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("STOREFRONT_LOCALE", raising=False)
    monkeypatch.delenv("STOREFRONT_CART_DB", raising=False)


@pytest.fixture
def burger() -> Product:
    return Product(id="burger", price=1500, name_en="Cheeseburger", name_ru="Чизбургер", options=[SIZE_GROUP])


@pytest.fixture
def water() -> Product:
    return Product(id="water", price=300, name_en="Water")


@pytest.fixture
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def store(storage: MemoryStorage) -> CartStore:
    counter = itertools.count(1)
    return CartStore(storage, id_factory=lambda: f"item-{next(counter)}")

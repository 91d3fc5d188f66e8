"""Static catalog and translation lookup."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from storefront.config import resolve_locale
from storefront.constant import (
    CATEGORIES as _CATEGORIES_RAW,
    KITCHENS as _KITCHENS_RAW,
    MESSAGES,
    PRODUCTS as _PRODUCTS_RAW,
    RESTAURANT as _RESTAURANT_RAW,
)
from storefront.models import Product


@dataclass(frozen=True)
class Restaurant:
    """Restaurant configuration the storefront needs."""

    id: str
    name: str
    slug: str
    commission_percentage: float = 0


@dataclass(frozen=True)
class Kitchen:
    id: str
    name_en: str
    name_ru: str = ""
    name_kz: str = ""
    sort_order: int = 0


@dataclass(frozen=True)
class Category:
    id: str
    name_en: str
    name_ru: str = ""
    name_kz: str = ""
    kitchen_id: str | None = None
    sort_order: int = 0


@dataclass(frozen=True)
class MenuSection:
    """A category with the products shown under it."""

    category: Category
    products: list[Product]


@dataclass(frozen=True)
class Catalog:
    restaurant: Restaurant
    kitchens: list[Kitchen] = field(default_factory=list)
    categories: list[Category] = field(default_factory=list)
    products: list[Product] = field(default_factory=list)

    def product(self, product_id: str) -> Product | None:
        for product in self.products:
            if product.id == product_id:
                return product
        return None


def translate(key: str, locale: str | None = None, **params: Any) -> str:
    """Look up a UI string, falling back to English and then the key itself."""
    active = resolve_locale(locale)
    template = MESSAGES.get(active, {}).get(key) or MESSAGES["en"].get(key) or key
    if not params:
        return template
    return template.format(**params)


def localized(obj: Any, field_name: str, locale: str | None = None) -> str:
    """Read ``<field>_<locale>``, falling back to ``<field>_en`` and then ""."""
    active = resolve_locale(locale)
    value = getattr(obj, f"{field_name}_{active}", None) or getattr(obj, f"{field_name}_en", None)
    return value or ""


def has_options(product: Product) -> bool:
    """True when the product must go through option selection before adding."""
    return isinstance(product.options, (list, tuple)) and len(product.options) > 0


def load_catalog() -> Catalog:
    """Build the catalog from the static seed configuration."""
    restaurant = Restaurant(
        id=str(_RESTAURANT_RAW["id"]),
        name=str(_RESTAURANT_RAW["name"]),
        slug=str(_RESTAURANT_RAW["slug"]),
        commission_percentage=_RESTAURANT_RAW.get("commission_percentage") or 0,
    )
    kitchens = sorted((Kitchen(**raw) for raw in _KITCHENS_RAW), key=lambda k: k.sort_order)
    categories = sorted((Category(**raw) for raw in _CATEGORIES_RAW), key=lambda c: c.sort_order)
    products = [Product.from_row(raw) for raw in _PRODUCTS_RAW]
    return Catalog(restaurant=restaurant, kitchens=kitchens, categories=categories, products=products)


def menu_sections(catalog: Catalog, kitchen_id: str | None = None) -> list[MenuSection]:
    """Group products under their categories, optionally for one kitchen only."""
    categories = catalog.categories
    if kitchen_id is not None:
        categories = [c for c in categories if c.kitchen_id == kitchen_id]

    sections: list[MenuSection] = []
    for category in categories:
        products = sorted(
            (p for p in catalog.products if p.category_id == category.id),
            key=lambda p: p.sort_order,
        )
        if products:
            sections.append(MenuSection(category=category, products=products))
    return sections

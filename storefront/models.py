"""Domain models for the storefront cart engine."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Literal

GroupType = Literal["single", "multiple"]

SINGLE: GroupType = "single"
MULTIPLE: GroupType = "multiple"


def _price_value(value: Any) -> float:
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"price must be a number, got {value!r}")
    return value


@dataclass(frozen=True)
class ProductOption:
    """Legacy flat option: a named price delta without a group."""

    name: str
    price: float = 0


@dataclass(frozen=True)
class Choice:
    """One selectable value inside an option group."""

    name: str
    price: float = 0


@dataclass(frozen=True)
class OptionGroup:
    """A named set of choices with single or multiple selection."""

    name: str
    type: GroupType = MULTIPLE
    choices: tuple[Choice, ...] = ()
    id: str | None = None


@dataclass(frozen=True)
class Product:
    """Read-only product row as supplied by the catalog."""

    id: str
    price: float
    name_en: str = ""
    name_ru: str = ""
    name_kz: str = ""
    description_en: str | None = None
    description_ru: str | None = None
    description_kz: str | None = None
    category_id: str | None = None
    is_available: bool = True
    sort_order: int = 0
    # Raw stored shape: legacy flat list, grouped list or None.
    options: Any = None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "Product":
        return cls(
            id=str(row["id"]),
            price=_price_value(row.get("price")),
            name_en=row.get("name_en") or "",
            name_ru=row.get("name_ru") or "",
            name_kz=row.get("name_kz") or "",
            description_en=row.get("description_en"),
            description_ru=row.get("description_ru"),
            description_kz=row.get("description_kz"),
            category_id=row.get("category_id"),
            is_available=row.get("is_available", True) is not False,
            sort_order=int(row.get("sort_order") or 0),
            options=row.get("options"),
        )

    def to_row(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class SelectedOption:
    """
    A resolved option on a cart line.

    ``name`` keeps the display text ("Size: M", or the bare choice for the
    generic options group). ``group`` and ``choice`` carry the same data
    structurally; ``group`` is None for ungrouped options.
    """

    name: str
    price: float = 0
    group: str | None = None
    choice: str = ""

    @property
    def display_name(self) -> str:
        return self.choice or self.name

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "SelectedOption":
        name = str(raw["name"])
        return cls(
            name=name,
            price=_price_value(raw.get("price")),
            group=raw.get("group"),
            choice=raw.get("choice") or name,
        )

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "price": self.price, "group": self.group, "choice": self.choice}


@dataclass(frozen=True)
class CartItem:
    """One cart line. Only ``quantity`` changes after creation, by replacement."""

    id: str
    product_id: str
    product: Product
    quantity: int
    selected_options: tuple[SelectedOption, ...] = ()

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "CartItem":
        product = Product.from_row(raw["product"])
        quantity = raw["quantity"]
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise ValueError(f"quantity must be an integer, got {quantity!r}")
        if quantity < 1:
            raise ValueError(f"quantity must be >= 1, got {quantity}")
        return cls(
            id=str(raw["id"]),
            product_id=str(raw.get("productId") or product.id),
            product=product,
            quantity=quantity,
            selected_options=tuple(SelectedOption.from_dict(o) for o in raw.get("selectedOptions") or []),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "productId": self.product_id,
            "product": self.product.to_row(),
            "quantity": self.quantity,
            "selectedOptions": [o.to_dict() for o in self.selected_options],
        }


@dataclass
class CartState:
    """Cart contents plus the active restaurant's commission rate."""

    items: list[CartItem] = field(default_factory=list)
    commission_percentage: float = 0

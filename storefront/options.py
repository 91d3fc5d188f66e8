"""Option normalization, selection validation and flattening."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from storefront.constant import GENERIC_OPTIONS_GROUP, LEGACY_GROUP_ID
from storefront.data import translate
from storefront.models import MULTIPLE, SINGLE, Choice, OptionGroup, ProductOption, SelectedOption

Selections = Mapping[str, Sequence[Choice]]


@dataclass(frozen=True)
class SelectionResult:
    """Outcome of checking a selection against group rules."""

    missing_groups: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.missing_groups

    def message(self, locale: str | None = None) -> str:
        if self.ok:
            return ""
        return f"{translate('select_option', locale)}: {', '.join(self.missing_groups)}"


def _has_field(raw: Any, name: str) -> bool:
    if isinstance(raw, Mapping):
        return name in raw
    return hasattr(raw, name)


def _to_choice(raw: Any) -> Choice | None:
    if isinstance(raw, Choice):
        return raw
    if isinstance(raw, ProductOption):
        return Choice(name=raw.name, price=raw.price)
    if not isinstance(raw, Mapping):
        return None
    price = raw.get("price")
    return Choice(name=str(raw.get("name") or ""), price=0 if price is None else price)


def _to_group(raw: Any) -> OptionGroup | None:
    if isinstance(raw, OptionGroup):
        return raw
    if not isinstance(raw, Mapping):
        return None
    group_type = raw.get("type")
    choices = [choice for choice in (_to_choice(c) for c in raw.get("choices") or []) if choice is not None]
    group_id = raw.get("id")
    return OptionGroup(
        name=str(raw.get("name") or ""),
        type=SINGLE if group_type == SINGLE else MULTIPLE,
        choices=tuple(choices),
        id=None if group_id is None else str(group_id),
    )


def normalize_options(raw: Any, locale: str | None = None) -> list[OptionGroup]:
    """
    Turn a product's stored ``options`` value into option groups.

    Legacy products store a flat ``[{name, price}]`` list; it becomes one
    ``multiple`` group named with the localized "Options" label. Grouped
    data passes through with ``choices`` defaulting to empty. Anything
    unrecognized is skipped, so this never raises.
    """
    if not isinstance(raw, (list, tuple)) or not raw:
        return []

    first = raw[0]
    if _has_field(first, "price") and not _has_field(first, "choices"):
        choices = [choice for choice in (_to_choice(o) for o in raw) if choice is not None]
        return [
            OptionGroup(
                id=LEGACY_GROUP_ID,
                name=translate("options", locale),
                type=MULTIPLE,
                choices=tuple(choices),
            )
        ]

    return [group for group in (_to_group(g) for g in raw) if group is not None]


def validate_selection(groups: Sequence[OptionGroup], selections: Selections) -> SelectionResult:
    """Report every single-choice group that has nothing selected."""
    missing = [
        group.name
        for group in groups
        if group.type == SINGLE and not selections.get(group.name)
    ]
    return SelectionResult(missing_groups=tuple(missing))


def is_generic_group(group_name: str, locale: str | None = None) -> bool:
    return group_name in {GENERIC_OPTIONS_GROUP, translate("options", locale)}


def flatten_selection(
    groups: Sequence[OptionGroup],
    selections: Selections,
    locale: str | None = None,
) -> list[SelectedOption]:
    """Resolve selections into cart options, in group order."""
    flattened: list[SelectedOption] = []
    for group in groups:
        generic = is_generic_group(group.name, locale)
        for choice in selections.get(group.name) or ():
            flattened.append(
                SelectedOption(
                    name=choice.name if generic else f"{group.name}: {choice.name}",
                    price=choice.price,
                    group=None if generic else group.name,
                    choice=choice.name,
                )
            )
    return flattened


def select_single(selections: Selections, group_name: str, choice: Choice) -> dict[str, list[Choice]]:
    """Return new selections with ``choice`` as the only pick for the group."""
    updated = {name: list(picked) for name, picked in selections.items()}
    updated[group_name] = [choice]
    return updated


def toggle_multiple(
    selections: Selections,
    group_name: str,
    choice: Choice,
    checked: bool,
) -> dict[str, list[Choice]]:
    """Return new selections with ``choice`` added or removed by name."""
    updated = {name: list(picked) for name, picked in selections.items()}
    current = updated.get(group_name, [])
    if checked:
        if not any(c.name == choice.name for c in current):
            current = [*current, choice]
    else:
        current = [c for c in current if c.name != choice.name]
    updated[group_name] = current
    return updated


def is_selected(selections: Selections, group_name: str, choice: Choice) -> bool:
    return any(c.name == choice.name for c in selections.get(group_name) or ())


def options_total(selections: Selections) -> float:
    return sum(choice.price for picked in selections.values() for choice in picked)

"""
Immutable, in-process view of the menu used by the kiosk order state.

Every entry is tagged with its kind when the catalog is loaded. Combo anchors
carry their ComboType so the order state never has to look at item names.
"""
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Iterator, Optional

from .models import MenuItem


class ItemKind(str, Enum):
    COMBO_ANCHOR = "combo_anchor"
    COMBO = "combo"
    SIDE = "side"
    ENTREE = "entree"
    APPETIZER = "appetizer"
    DRINK = "drink"


_KIND_BY_CATEGORY = {
    MenuItem.Category.COMBOS: ItemKind.COMBO,
    MenuItem.Category.SIDE: ItemKind.SIDE,
    MenuItem.Category.ENTREE: ItemKind.ENTREE,
    MenuItem.Category.APPETIZER: ItemKind.APPETIZER,
    MenuItem.Category.DRINK: ItemKind.DRINK,
}


@dataclass(frozen=True)
class CatalogEntry:
    id: int
    name: str
    category: str
    price: Decimal
    kind: ItemKind
    combo_type: Optional[str] = None

    @property
    def is_combo_anchor(self) -> bool:
        return self.kind is ItemKind.COMBO_ANCHOR

    @classmethod
    def from_menu_item(cls, item: MenuItem) -> "CatalogEntry":
        combo_type = item.combo_type or None
        if item.item_type == MenuItem.Category.COMBOS and combo_type:
            kind = ItemKind.COMBO_ANCHOR
        else:
            kind = _KIND_BY_CATEGORY[item.item_type]
            combo_type = None
        return cls(
            id=item.id,
            name=item.name,
            category=item.item_type,
            price=Decimal(item.price),
            kind=kind,
            combo_type=combo_type,
        )


class MenuCatalog:
    """Read-only lookup of catalog entries by menu item id."""

    def __init__(self, entries: Iterable[CatalogEntry] = ()):
        self._entries = MappingProxyType({entry.id: entry for entry in entries})

    def __iter__(self) -> Iterator[CatalogEntry]:
        return iter(self._entries.values())

    def __len__(self):
        return len(self._entries)

    def __contains__(self, item_id):
        return item_id in self._entries

    def get(self, item_id) -> Optional[CatalogEntry]:
        return self._entries.get(item_id)

    def by_category(self, category) -> list:
        return [entry for entry in self if entry.category == category]

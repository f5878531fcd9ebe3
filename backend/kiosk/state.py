"""
The in-progress order built on a kiosk or cashier terminal.

OrderState is a plain value owned by one terminal session. Every mutation
goes through ComboConstraintPolicy and reports its outcome as a
MutationResult; a rejected mutation leaves the state untouched.
"""
import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import List, Optional

from menu.catalog import CatalogEntry, ItemKind
from .calculators import PriceCalculator
from .policies import (
    Category,
    ComboConstraintPolicy,
    MutationResult,
    RejectionReason,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OrderLine:
    """One added menu item. ``sequence`` is the order-local add counter."""

    sequence: int
    item_id: int
    name: str
    category: str
    price: Decimal
    kind: ItemKind
    combo_type: Optional[str] = None

    @property
    def is_combo_anchor(self) -> bool:
        return self.kind is ItemKind.COMBO_ANCHOR

    def to_dict(self) -> dict:
        return {
            "sequence": self.sequence,
            "item_id": self.item_id,
            "name": self.name,
            "category": self.category,
            "price": str(self.price),
            "kind": self.kind.value,
            "combo_type": self.combo_type,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "OrderLine":
        return cls(
            sequence=int(data["sequence"]),
            item_id=int(data["item_id"]),
            name=data["name"],
            category=data["category"],
            price=Decimal(data["price"]),
            kind=ItemKind(data["kind"]),
            combo_type=data.get("combo_type") or None,
        )


class OrderState:
    def __init__(self):
        self.lines: List[OrderLine] = []
        self.active_combo: Optional[str] = None
        self.side_count = 0
        self.entree_count = 0
        self.subtotal = Decimal("0")
        self._next_sequence = 1

    def __eq__(self, other):
        if not isinstance(other, OrderState):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __len__(self):
        return len(self.lines)

    @property
    def is_empty(self) -> bool:
        return not self.lines

    def add_item(self, entry: CatalogEntry, category: Optional[str] = None) -> MutationResult:
        """
        Add one catalog entry under ``category`` (the tab it was picked from;
        defaults to the entry's own category).

        A combo anchor picked from the Combos tab starts a new combo and
        resets both counters before anything else. Otherwise sides and
        entrees count against the active combo's ceiling.
        """
        category = category or entry.category

        if category == Category.COMBOS and entry.is_combo_anchor:
            self.active_combo = entry.combo_type
            self.side_count = 0
            self.entree_count = 0
            self._append(entry, category)
            return MutationResult.ok()

        if not ComboConstraintPolicy.is_allowed(
            self.active_combo, category, self.side_count, self.entree_count
        ):
            logger.debug(f"Rejected {entry.name}: {self.active_combo} already holds its {category} limit")
            return MutationResult.rejected(RejectionReason.CONSTRAINT_VIOLATION)

        self._append(entry, category)
        if category == Category.SIDE:
            self.side_count += 1
        elif category == Category.ENTREE:
            self.entree_count += 1
        return MutationResult.ok()

    def remove_item(self, position: int, selected_category: Optional[str] = None) -> MutationResult:
        """
        Remove the line at ``position`` (0-based index into ``lines``).

        The side/entree counter that is decremented follows
        ``selected_category``, the tab showing on the terminal when the
        customer pressed remove; without one the line's own category is
        used. Removing a combo anchor always ends the combo.
        """
        if isinstance(position, bool) or not isinstance(position, int) or not 0 <= position < len(self.lines):
            return MutationResult.rejected(RejectionReason.OUT_OF_RANGE)

        line = self.lines[position]
        category = selected_category or line.category

        if category == Category.SIDE:
            self.side_count = max(0, self.side_count - 1)
        elif category == Category.ENTREE:
            self.entree_count = max(0, self.entree_count - 1)

        del self.lines[position]
        self.subtotal -= line.price

        if line.is_combo_anchor:
            self.active_combo = None
            self.side_count = 0
            self.entree_count = 0

        return MutationResult.ok()

    def clear(self) -> MutationResult:
        self.__init__()
        return MutationResult.ok()

    def combo_progress(self) -> Optional[dict]:
        ceiling = ComboConstraintPolicy.ceiling_for(self.active_combo)
        if ceiling is None:
            return None
        return {
            "combo_type": self.active_combo,
            "sides": self.side_count,
            "max_sides": ceiling.max_sides,
            "entrees": self.entree_count,
            "max_entrees": ceiling.max_entrees,
            "can_add_side": ComboConstraintPolicy.is_allowed(
                self.active_combo, Category.SIDE, self.side_count, self.entree_count
            ),
            "can_add_entree": ComboConstraintPolicy.is_allowed(
                self.active_combo, Category.ENTREE, self.side_count, self.entree_count
            ),
        }

    def to_checkout_payload(self, calculator: Optional[PriceCalculator] = None) -> dict:
        """
        The shape handed to order placement: one id per line, duplicates
        kept, plus the taxed total.
        """
        calculator = calculator or PriceCalculator(self)
        return {
            "line_item_ids": [line.item_id for line in self.lines],
            "total": calculator.total(),
        }

    def to_dict(self) -> dict:
        return {
            "lines": [line.to_dict() for line in self.lines],
            "active_combo": self.active_combo,
            "side_count": self.side_count,
            "entree_count": self.entree_count,
            "subtotal": str(self.subtotal),
            "next_sequence": self._next_sequence,
        }

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "OrderState":
        state = cls()
        if not data:
            return state
        state.lines = [OrderLine.from_dict(line) for line in data.get("lines", [])]
        state.active_combo = data.get("active_combo") or None
        state.side_count = int(data.get("side_count", 0))
        state.entree_count = int(data.get("entree_count", 0))
        # Always the sum of the lines.
        state.subtotal = sum((line.price for line in state.lines), Decimal("0"))
        state._next_sequence = int(data.get("next_sequence", len(state.lines) + 1))
        return state

    def _append(self, entry: CatalogEntry, category: str):
        self.lines.append(
            OrderLine(
                sequence=self._next_sequence,
                item_id=entry.id,
                name=entry.name,
                category=str(category),
                price=entry.price,
                kind=entry.kind,
                combo_type=entry.combo_type,
            )
        )
        self._next_sequence += 1
        self.subtotal += entry.price

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from menu.models import MenuItem

ComboType = MenuItem.ComboType
Category = MenuItem.Category


@dataclass(frozen=True)
class ComboCeiling:
    max_sides: int
    max_entrees: int


class RejectionReason(str, Enum):
    CONSTRAINT_VIOLATION = "CONSTRAINT_VIOLATION"
    OUT_OF_RANGE = "OUT_OF_RANGE"


@dataclass(frozen=True)
class MutationResult:
    """
    Outcome of an order mutation. Rejections are values, not exceptions:
    a rejected mutation leaves the order exactly as it was.
    """

    accepted: bool
    reason: Optional[RejectionReason] = None

    @classmethod
    def ok(cls) -> "MutationResult":
        return cls(True)

    @classmethod
    def rejected(cls, reason: RejectionReason) -> "MutationResult":
        return cls(False, reason)


class ComboConstraintPolicy:
    """
    How many sides and entrees each combo may hold.

    Only sides and entrees are ever limited, and only while a combo is
    active. Combos, appetizers and drinks can always be added.
    """

    CEILINGS = {
        ComboType.BOWL: ComboCeiling(max_sides=1, max_entrees=1),
        ComboType.PLATE: ComboCeiling(max_sides=1, max_entrees=2),
        ComboType.BIGGER_PLATE: ComboCeiling(max_sides=1, max_entrees=3),
    }

    @staticmethod
    def ceiling_for(combo_type) -> Optional[ComboCeiling]:
        if not combo_type:
            return None
        return ComboConstraintPolicy.CEILINGS[ComboType(combo_type)]

    @staticmethod
    def is_allowed(active_combo, category, current_side_count: int, current_entree_count: int) -> bool:
        ceiling = ComboConstraintPolicy.ceiling_for(active_combo)
        if ceiling is None:
            return True

        if category == Category.SIDE:
            return current_side_count < ceiling.max_sides
        if category == Category.ENTREE:
            return current_entree_count < ceiling.max_entrees
        return True

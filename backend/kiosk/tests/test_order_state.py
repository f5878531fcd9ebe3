"""
Order State Tests

The in-progress order: combo activation, ceilings, position-based removal,
subtotal bookkeeping and session round-trips. Uses catalog entries directly,
no database.
"""
from decimal import Decimal

import pytest

from kiosk.calculators import PriceCalculator
from kiosk.policies import Category, ComboType, RejectionReason
from kiosk.state import OrderState
from menu.catalog import CatalogEntry, ItemKind


def entry(item_id, name, category, price, kind, combo_type=None):
    return CatalogEntry(
        id=item_id, name=name, category=category, price=Decimal(price),
        kind=kind, combo_type=combo_type,
    )


BOWL = entry(1, "Bowl", Category.COMBOS, "0.00", ItemKind.COMBO_ANCHOR, ComboType.BOWL)
PLATE = entry(2, "Plate", Category.COMBOS, "0.00", ItemKind.COMBO_ANCHOR, ComboType.PLATE)
BIGGER_PLATE = entry(3, "Bigger Plate", Category.COMBOS, "0.00", ItemKind.COMBO_ANCHOR, ComboType.BIGGER_PLATE)
WHITE_RICE = entry(10, "White Rice", Category.SIDE, "3.00", ItemKind.SIDE)
CHOW_MEIN = entry(11, "Chow Mein", Category.SIDE, "3.00", ItemKind.SIDE)
ORANGE_CHICKEN = entry(20, "Orange Chicken", Category.ENTREE, "3.50", ItemKind.ENTREE)
BEIJING_BEEF = entry(21, "Beijing Beef", Category.ENTREE, "3.50", ItemKind.ENTREE)
KUNG_PAO = entry(22, "Kung Pao Chicken", Category.ENTREE, "3.50", ItemKind.ENTREE)
EGG_ROLL = entry(30, "Chicken Egg Roll", Category.APPETIZER, "2.00", ItemKind.APPETIZER)
DRINK = entry(40, "Fountain Drink", Category.DRINK, "2.10", ItemKind.DRINK)


def build(*entries):
    state = OrderState()
    for item in entries:
        assert state.add_item(item).accepted
    return state


class TestAddItem:
    """Test adding items with and without an active combo"""

    def test_empty_state(self):
        state = OrderState()
        assert state.is_empty
        assert state.active_combo is None
        assert state.side_count == 0
        assert state.entree_count == 0
        assert state.subtotal == Decimal("0")

    def test_anchor_activates_combo(self):
        state = OrderState()
        result = state.add_item(BOWL)

        assert result.accepted
        assert result.reason is None
        assert state.active_combo == ComboType.BOWL
        assert len(state) == 1
        assert state.lines[0].is_combo_anchor

    def test_no_combo_means_no_limit(self):
        state = build(WHITE_RICE, CHOW_MEIN, ORANGE_CHICKEN, BEIJING_BEEF, KUNG_PAO)
        assert len(state) == 5
        assert state.subtotal == Decimal("16.50")

    def test_second_side_in_bowl_rejected(self):
        state = build(BOWL, WHITE_RICE)
        result = state.add_item(CHOW_MEIN)

        assert not result.accepted
        assert result.reason is RejectionReason.CONSTRAINT_VIOLATION
        assert state.side_count == 1
        assert len(state) == 2

    def test_third_entree_rejected_in_plate(self):
        state = build(PLATE, ORANGE_CHICKEN, BEIJING_BEEF)
        result = state.add_item(KUNG_PAO)

        assert result.reason is RejectionReason.CONSTRAINT_VIOLATION
        assert state.entree_count == 2

    def test_third_entree_accepted_in_bigger_plate(self):
        state = build(BIGGER_PLATE, ORANGE_CHICKEN, BEIJING_BEEF)
        result = state.add_item(KUNG_PAO)

        assert result.accepted
        assert state.entree_count == 3

    def test_rejected_add_leaves_state_unchanged(self):
        state = build(BOWL, WHITE_RICE, ORANGE_CHICKEN)
        before = state.to_dict()

        state.add_item(BEIJING_BEEF)
        state.add_item(CHOW_MEIN)

        assert state.to_dict() == before

    def test_extras_always_allowed_in_full_combo(self):
        state = build(BOWL, WHITE_RICE, ORANGE_CHICKEN)
        assert state.add_item(EGG_ROLL).accepted
        assert state.add_item(DRINK).accepted
        assert state.side_count == 1
        assert state.entree_count == 1

    def test_new_anchor_replaces_combo_and_resets_counters(self):
        state = build(BOWL, WHITE_RICE, ORANGE_CHICKEN)
        state.add_item(PLATE)

        assert state.active_combo == ComboType.PLATE
        assert state.side_count == 0
        assert state.entree_count == 0
        # The new combo has its own allowance.
        assert state.add_item(CHOW_MEIN).accepted
        assert state.add_item(BEIJING_BEEF).accepted
        assert state.add_item(KUNG_PAO).accepted

    def test_anchor_outside_combos_tab_does_not_start_combo(self):
        state = OrderState()
        state.add_item(BOWL, category=Category.APPETIZER)
        assert state.active_combo is None

    def test_category_override_counts_against_that_category(self):
        state = build(BOWL)
        assert state.add_item(EGG_ROLL, category=Category.SIDE).accepted
        assert state.side_count == 1
        assert not state.add_item(WHITE_RICE).accepted

    def test_duplicates_are_separate_lines(self):
        state = build(DRINK, DRINK)
        assert [line.item_id for line in state.lines] == [40, 40]
        assert [line.sequence for line in state.lines] == [1, 2]


class TestRemoveItem:
    """Test position-based removal"""

    @pytest.mark.parametrize("position", [-1, 3, 100])
    def test_out_of_range(self, position):
        state = build(BOWL, WHITE_RICE, ORANGE_CHICKEN)
        before = state.to_dict()

        result = state.remove_item(position)

        assert not result.accepted
        assert result.reason is RejectionReason.OUT_OF_RANGE
        assert state.to_dict() == before

    def test_remove_from_empty(self):
        assert OrderState().remove_item(0).reason is RejectionReason.OUT_OF_RANGE

    def test_remove_frees_combo_slot(self):
        state = build(BOWL, WHITE_RICE, ORANGE_CHICKEN)
        result = state.remove_item(1)

        assert result.accepted
        assert state.side_count == 0
        assert state.subtotal == Decimal("3.50")
        assert state.add_item(CHOW_MEIN).accepted

    def test_removing_anchor_resets_combo(self):
        state = build(BOWL, WHITE_RICE, ORANGE_CHICKEN)
        state.remove_item(0)

        assert state.active_combo is None
        assert state.side_count == 0
        assert state.entree_count == 0
        # The committed lines stay in the order.
        assert [line.name for line in state.lines] == ["White Rice", "Orange Chicken"]
        assert state.subtotal == Decimal("6.50")

    def test_selected_tab_drives_counter(self):
        """Removing a side while the Entree tab is showing decrements entrees"""
        state = build(PLATE, WHITE_RICE, ORANGE_CHICKEN)
        state.remove_item(1, selected_category=Category.ENTREE)

        assert state.side_count == 1
        assert state.entree_count == 0

    def test_counters_floor_at_zero(self):
        state = build(BOWL, EGG_ROLL)
        state.remove_item(1, selected_category=Category.ENTREE)
        assert state.entree_count == 0

    def test_removal_shifts_positions(self):
        state = build(WHITE_RICE, ORANGE_CHICKEN, DRINK)
        state.remove_item(0)
        assert [line.name for line in state.lines] == ["Orange Chicken", "Fountain Drink"]


class TestSubtotalAndClear:
    """Test subtotal bookkeeping and reset"""

    def test_subtotal_is_sum_of_lines(self):
        state = OrderState()
        for item in [BIGGER_PLATE, WHITE_RICE, ORANGE_CHICKEN, BEIJING_BEEF, EGG_ROLL, DRINK, CHOW_MEIN]:
            state.add_item(item)
            assert state.subtotal == sum((line.price for line in state.lines), Decimal("0"))

        while state.lines:
            state.remove_item(len(state.lines) - 1)
            assert state.subtotal == sum((line.price for line in state.lines), Decimal("0"))

    def test_clear_matches_fresh_state(self):
        state = build(BOWL, WHITE_RICE, ORANGE_CHICKEN, DRINK)
        result = state.clear()

        assert result.accepted
        assert state == OrderState()

    def test_bowl_example_total(self):
        """Bowl, rice and chicken come to 6.50; the rejected beef adds nothing"""
        state = build(BOWL, WHITE_RICE, ORANGE_CHICKEN)
        assert not state.add_item(BEIJING_BEEF).accepted
        assert state.entree_count == 1
        assert state.subtotal == Decimal("6.50")
        assert PriceCalculator(state, tax_rate=Decimal("0.0825")).total() == Decimal("7.04")


class TestCheckoutPayloadAndSerialization:
    """Test the checkout hand-off and the session round-trip"""

    def test_checkout_payload(self):
        state = build(BOWL, WHITE_RICE, ORANGE_CHICKEN, DRINK, DRINK)
        payload = state.to_checkout_payload(PriceCalculator(state, tax_rate=Decimal("0.0825")))

        assert payload["line_item_ids"] == [1, 10, 20, 40, 40]
        assert payload["total"] == Decimal("11.58")

    def test_round_trip(self):
        state = build(PLATE, WHITE_RICE, ORANGE_CHICKEN)
        restored = OrderState.from_dict(state.to_dict())

        assert restored == state
        assert restored.lines[0].kind is ItemKind.COMBO_ANCHOR
        assert restored.add_item(BEIJING_BEEF).accepted
        assert not restored.add_item(KUNG_PAO).accepted

    def test_from_dict_recomputes_subtotal(self):
        data = build(WHITE_RICE, DRINK).to_dict()
        data["subtotal"] = "999.99"
        assert OrderState.from_dict(data).subtotal == Decimal("5.10")

    def test_from_empty_session(self):
        assert OrderState.from_dict(None) == OrderState()

    def test_combo_progress(self):
        state = build(PLATE, ORANGE_CHICKEN)
        progress = state.combo_progress()

        assert progress["combo_type"] == ComboType.PLATE
        assert progress["entrees"] == 1
        assert progress["max_entrees"] == 2
        assert progress["can_add_side"] is True
        assert progress["can_add_entree"] is True
        assert OrderState().combo_progress() is None

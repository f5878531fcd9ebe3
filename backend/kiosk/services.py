import logging
from typing import Optional, Tuple

from menu.catalog import CatalogEntry
from menu.services import MenuService
from orders.models import Order
from orders.services import OrderService, OrderServiceError
from users.models import User
from .calculators import PriceCalculator
from .policies import MutationResult
from .state import OrderState

logger = logging.getLogger(__name__)


class KioskError(Exception):
    """Raised for requests the kiosk cannot act on (unknown item, empty checkout)."""


class KioskSessionStore:
    """
    Keeps the terminal's OrderState in its Django session as a plain dict.
    The session is the state's only owner.
    """

    SESSION_KEY = "kiosk_order"

    @staticmethod
    def load(session) -> OrderState:
        return OrderState.from_dict(session.get(KioskSessionStore.SESSION_KEY))

    @staticmethod
    def save(session, state: OrderState):
        session[KioskSessionStore.SESSION_KEY] = state.to_dict()
        session.modified = True

    @staticmethod
    def reset(session) -> OrderState:
        state = OrderState()
        KioskSessionStore.save(session, state)
        return state


class KioskService:
    @staticmethod
    def lookup_entry(menu_item_id: int) -> CatalogEntry:
        entry = MenuService.load_catalog().get(menu_item_id)
        if entry is None:
            raise KioskError(f"Menu item {menu_item_id} is not available")
        return entry

    @staticmethod
    def add_item(session, menu_item_id: int, category: Optional[str] = None) -> Tuple[OrderState, MutationResult]:
        entry = KioskService.lookup_entry(menu_item_id)
        state = KioskSessionStore.load(session)
        result = state.add_item(entry, category)
        if result.accepted:
            KioskSessionStore.save(session, state)
        return state, result

    @staticmethod
    def remove_item(session, position: int, selected_category: Optional[str] = None) -> Tuple[OrderState, MutationResult]:
        state = KioskSessionStore.load(session)
        result = state.remove_item(position, selected_category)
        if result.accepted:
            KioskSessionStore.save(session, state)
        return state, result

    @staticmethod
    def clear(session) -> OrderState:
        return KioskSessionStore.reset(session)

    @staticmethod
    def checkout(session, payment_type: str, staff: Optional[User] = None) -> Order:
        """
        Hand the session's order to order placement and, once it is stored,
        start the terminal on a fresh empty order.
        """
        state = KioskSessionStore.load(session)
        if state.is_empty:
            raise KioskError("Cannot check out an empty order")

        payload = state.to_checkout_payload(PriceCalculator(state))
        try:
            order = OrderService.place_order(payload, payment_type, staff=staff)
        except OrderServiceError as e:
            raise KioskError(str(e)) from e

        KioskSessionStore.reset(session)
        logger.info(f"Kiosk checkout complete: order {order.id}")
        return order

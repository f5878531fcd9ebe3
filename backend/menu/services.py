import logging

from .catalog import CatalogEntry, MenuCatalog
from .models import MenuItem

logger = logging.getLogger(__name__)


class MenuService:
    @staticmethod
    def active_items():
        return MenuItem.objects.all().order_by("id")

    @staticmethod
    def load_catalog() -> MenuCatalog:
        """
        Build the immutable catalog the kiosk order state works against.
        Only available items are purchasable.
        """
        catalog = MenuCatalog(
            CatalogEntry.from_menu_item(item) for item in MenuService.active_items()
        )
        logger.debug(f"Loaded menu catalog with {len(catalog)} items")
        return catalog

    @staticmethod
    def board() -> list:
        """
        Active items grouped by category in display order, for the menu
        boards and the kiosk tabs. Empty categories are kept so boards keep
        a stable layout.
        """
        grouped = {category: [] for category in MenuItem.CATEGORY_ORDER}
        for item in MenuService.active_items():
            grouped.setdefault(item.item_type, []).append(item)
        return [
            {"category": str(category), "items": items}
            for category, items in grouped.items()
        ]

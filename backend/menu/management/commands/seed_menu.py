"""
Load the default menu: the three combo anchors plus sides, entrees,
appetizers and drinks. Safe to run repeatedly.
"""
from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction

from menu.models import MenuItem

Category = MenuItem.Category

# Combo anchors are free: a combo costs the sum of its sides and entrees.
DEFAULT_MENU = [
    ("Bowl", Category.COMBOS, "0.00", "1 side and 1 entree"),
    ("Plate", Category.COMBOS, "0.00", "1 side and 2 entrees"),
    ("Bigger Plate", Category.COMBOS, "0.00", "1 side and 3 entrees"),
    ("White Steamed Rice", Category.SIDE, "3.00", ""),
    ("Fried Rice", Category.SIDE, "3.00", ""),
    ("Chow Mein", Category.SIDE, "3.00", ""),
    ("Super Greens", Category.SIDE, "3.00", ""),
    ("Orange Chicken", Category.ENTREE, "3.50", ""),
    ("Beijing Beef", Category.ENTREE, "3.50", ""),
    ("Broccoli Beef", Category.ENTREE, "3.50", ""),
    ("Kung Pao Chicken", Category.ENTREE, "3.50", ""),
    ("Honey Walnut Shrimp", Category.ENTREE, "4.75", ""),
    ("Chicken Egg Roll", Category.APPETIZER, "2.00", ""),
    ("Cream Cheese Rangoon", Category.APPETIZER, "2.00", ""),
    ("Fountain Drink", Category.DRINK, "2.10", ""),
    ("Bottled Water", Category.DRINK, "2.30", ""),
]


class Command(BaseCommand):
    help = 'Seed the menu with the default combos, sides, entrees, appetizers and drinks'

    def add_arguments(self, parser):
        parser.add_argument(
            '--reset-prices',
            action='store_true',
            help='Overwrite prices of items that already exist',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        created = 0
        updated = 0
        for name, category, price, description in DEFAULT_MENU:
            item = MenuItem.objects.with_archived().filter(name=name, item_type=category).first()
            if item is None:
                MenuItem.objects.create(
                    name=name,
                    item_type=category,
                    price=Decimal(price),
                    description=description,
                )
                created += 1
            elif options['reset_prices'] and item.price != Decimal(price):
                item.price = Decimal(price)
                item.save(update_fields=['price', 'updated_at'])
                updated += 1

        self.stdout.write(
            self.style.SUCCESS(f'Menu seeded: {created} created, {updated} prices updated')
        )

"""
Shared test fixtures for all backend tests.

This module provides reusable pytest fixtures for common test objects
like staff accounts, menu items, orders and authenticated API clients.
"""
import pytest
from decimal import Decimal

from inventory.models import InventoryItem
from menu.models import MenuItem
from users.models import User


# ============================================================================
# USER FIXTURES
# ============================================================================

@pytest.fixture
def manager_user(db):
    """Create a manager (full dashboard access)"""
    return User.objects.create_user(
        username='manager',
        password='password123',
        name='Morgan Manager',
        role=User.Role.MANAGER,
    )


@pytest.fixture
def cashier_user(db):
    """Create a cashier (terminal access, read-only dashboard)"""
    return User.objects.create_user(
        username='cashier',
        password='password123',
        name='Casey Cashier',
        role=User.Role.CASHIER,
    )


@pytest.fixture
def kitchen_user(db):
    """Create a kitchen employee (no terminal access)"""
    return User.objects.create_user(
        username='kitchen',
        password='password123',
        name='Kai Kitchen',
        role=User.Role.KITCHEN,
    )


# ============================================================================
# MENU FIXTURES
# ============================================================================

def _menu_item(name, item_type, price):
    return MenuItem.objects.create(name=name, item_type=item_type, price=Decimal(price))


@pytest.fixture
def bowl(db):
    return _menu_item('Bowl', MenuItem.Category.COMBOS, '0.00')


@pytest.fixture
def plate(db):
    return _menu_item('Plate', MenuItem.Category.COMBOS, '0.00')


@pytest.fixture
def bigger_plate(db):
    return _menu_item('Bigger Plate', MenuItem.Category.COMBOS, '0.00')


@pytest.fixture
def chow_mein(db):
    return _menu_item('Chow Mein', MenuItem.Category.SIDE, '3.00')


@pytest.fixture
def fried_rice(db):
    return _menu_item('Fried Rice', MenuItem.Category.SIDE, '3.00')


@pytest.fixture
def orange_chicken(db):
    return _menu_item('Orange Chicken', MenuItem.Category.ENTREE, '3.50')


@pytest.fixture
def beijing_beef(db):
    return _menu_item('Beijing Beef', MenuItem.Category.ENTREE, '3.50')


@pytest.fixture
def broccoli_beef(db):
    return _menu_item('Broccoli Beef', MenuItem.Category.ENTREE, '3.50')


@pytest.fixture
def egg_roll(db):
    return _menu_item('Chicken Egg Roll', MenuItem.Category.APPETIZER, '2.00')


@pytest.fixture
def fountain_drink(db):
    return _menu_item('Fountain Drink', MenuItem.Category.DRINK, '2.10')


@pytest.fixture
def menu(bowl, plate, bigger_plate, chow_mein, fried_rice, orange_chicken,
         beijing_beef, broccoli_beef, egg_roll, fountain_drink):
    """A small but complete menu: every category, every combo type"""
    return {
        'bowl': bowl,
        'plate': plate,
        'bigger_plate': bigger_plate,
        'chow_mein': chow_mein,
        'fried_rice': fried_rice,
        'orange_chicken': orange_chicken,
        'beijing_beef': beijing_beef,
        'broccoli_beef': broccoli_beef,
        'egg_roll': egg_roll,
        'fountain_drink': fountain_drink,
    }


# ============================================================================
# INVENTORY FIXTURES
# ============================================================================

@pytest.fixture
def inventory_items(db):
    return [
        InventoryItem.objects.create(item_name='Napkins', quantity=500),
        InventoryItem.objects.create(item_name='Cups', quantity=200),
        InventoryItem.objects.create(item_name='Cups', quantity=50),
    ]


# ============================================================================
# API CLIENT FIXTURES (for API Integration Tests)
# ============================================================================

@pytest.fixture
def api_client_factory():
    """
    Factory fixture for creating authenticated API clients.

    The JWT is set in cookies, matching what the login endpoint does.

    Usage:
        def test_list_orders(api_client_factory, manager_user):
            client = api_client_factory(manager_user)
            response = client.get('/api/orders/')
    """
    from django.conf import settings
    from rest_framework.test import APIClient
    from users.services import UserService

    def _create_client(user=None):
        client = APIClient()

        if user:
            tokens = UserService.generate_tokens_for_user(user)
            client.cookies[settings.SIMPLE_JWT['AUTH_COOKIE']] = tokens['access']
            client.cookies[settings.SIMPLE_JWT['AUTH_COOKIE_REFRESH']] = tokens['refresh']

        return client

    return _create_client


@pytest.fixture
def manager_client(api_client_factory, manager_user):
    return api_client_factory(manager_user)


@pytest.fixture
def cashier_client(api_client_factory, cashier_user):
    return api_client_factory(cashier_user)

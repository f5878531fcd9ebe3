"""
Order services.

Import from here rather than from the individual modules.
"""

from .order_service import OrderService, OrderServiceError

__all__ = [
    "OrderService",
    "OrderServiceError",
]

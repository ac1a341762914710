"""
Order Store Factory

Provides a single entry point for obtaining the order store instance.
The store is created once per process and, in any mode, optionally
preloaded with the demo orders.

Usage:
    from awesome_pizza.services.orders import get_order_store

    store = get_order_store()
    result = store.find_by_id("order-001")

Author: Khalil Bannouri
Version: 1.0.0
"""

import logging
from functools import lru_cache

from awesome_pizza.core.config import get_settings
from awesome_pizza.models import Order, OrderItem, OrderStatus
from awesome_pizza.services.orders.base import (
    BaseOrderStore,
    OrderErrorKind,
    OrderResult,
)
from awesome_pizza.services.orders.memory import InMemoryOrderStore, generate_order_id

logger = logging.getLogger(__name__)


def demo_orders() -> list[Order]:
    """Orders preloaded when SEED_DEMO_ORDERS is enabled."""
    return [
        Order(
            id="order-001",
            customer_name="John Doe",
            status=OrderStatus.RECEIVED,
            contents=[
                OrderItem(item_name="Margherita Pizza", quantity=2),
                OrderItem(item_name="Pepperoni Pizza", quantity=1),
            ],
        ),
        Order(
            id="order-002",
            customer_name="Jane Smith",
            status=OrderStatus.DELIVERING,
            contents=[
                OrderItem(item_name="Vegetarian Delight", quantity=1),
                OrderItem(item_name="BBQ Chicken Pizza", quantity=1),
            ],
        ),
        Order(
            id="order-003",
            customer_name="Mike Johnson",
            status=OrderStatus.DELIVERED,
            contents=[
                OrderItem(item_name="Quattro Stagioni", quantity=3),
            ],
        ),
    ]


@lru_cache()
def get_order_store() -> BaseOrderStore:
    """
    Get the configured order store instance.

    The instance is cached so every request handler shares the same
    collection for the lifetime of the process.

    Returns:
        BaseOrderStore: Configured order store
    """
    settings = get_settings()

    store = InMemoryOrderStore(max_id_attempts=settings.id_generation_attempts)
    logger.info(f"Order Store: Using InMemoryOrderStore ({settings.env_mode.value} mode)")

    if settings.seed_demo_orders:
        added = store.seed(demo_orders())
        logger.info(f"Order Store: Seeded {added} demo orders")

    return store


def reset_order_store() -> None:
    """
    Clear the cached order store instance.

    The next call to get_order_store() creates an empty (or freshly
    seeded) store. Useful for testing.
    """
    get_order_store.cache_clear()
    logger.debug("Order store cache cleared")


__all__ = [
    "get_order_store",
    "reset_order_store",
    "demo_orders",
    "generate_order_id",
    "BaseOrderStore",
    "InMemoryOrderStore",
    "OrderErrorKind",
    "OrderResult",
]

"""
                        Services Module

Contains the order-taking business logic.

Services:
    - catalog: Read-only daily menu
    - validation: Order payload validation
    - orders: In-memory order store
"""

from awesome_pizza.services.catalog import MenuCatalog, get_menu_catalog
from awesome_pizza.services.validation import OrderValidator, ValidationReason, ValidationResult

__all__ = [
    "MenuCatalog",
    "get_menu_catalog",
    "OrderValidator",
    "ValidationReason",
    "ValidationResult",
]

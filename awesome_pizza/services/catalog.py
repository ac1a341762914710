"""
Menu Catalog

Static, read-only daily menu. Populated once when the catalog is
created and never mutated afterwards.

Usage:
    from awesome_pizza.services.catalog import get_menu_catalog

    for entry in get_menu_catalog().list_menu():
        print(entry.name)

Author: Khalil Bannouri
Version: 1.0.0
"""

import logging
from functools import lru_cache
from typing import Iterable, Optional

from awesome_pizza.models import MenuEntry

logger = logging.getLogger(__name__)


DAILY_MENU: tuple[MenuEntry, ...] = (
    MenuEntry(
        name="Margherita Pizza",
        description="Classic pizza with fresh tomatoes, mozzarella cheese, and basil",
        image_reference="assets/margherita.png",
    ),
    MenuEntry(
        name="Pepperoni Pizza",
        description="Traditional pizza topped with pepperoni and mozzarella cheese",
        image_reference="assets/pepperoni.png",
    ),
    MenuEntry(
        name="Quattro Stagioni",
        description="Four seasons pizza with artichokes, ham, mushrooms, and olives",
        image_reference="assets/quattro.png",
    ),
    MenuEntry(
        name="Vegetarian Delight",
        description="Fresh vegetables including bell peppers, onions, mushrooms, and tomatoes",
        image_reference="assets/vegetarian.png",
    ),
    MenuEntry(
        name="BBQ Chicken Pizza",
        description="Grilled chicken with BBQ sauce, red onions, and cilantro",
        image_reference="assets/bbq-chicken.png",
    ),
)


class MenuCatalog:
    """
    Read-only collection of menu entries in insertion order.

    Entries are frozen models held in a tuple, so the sequence returned
    by list_menu() cannot be used to change the catalog.

    Example:
        >>> catalog = MenuCatalog()
        >>> catalog.list_menu()[0].name
        'Margherita Pizza'
    """

    def __init__(self, entries: Optional[Iterable[MenuEntry]] = None):
        self._entries: tuple[MenuEntry, ...] = tuple(
            DAILY_MENU if entries is None else entries
        )

        names = [e.name for e in self._entries]
        if len(names) != len(set(names)):
            raise ValueError("Menu entry names must be unique")

    def list_menu(self) -> tuple[MenuEntry, ...]:
        """Return the daily menu. Same sequence on every call."""
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)


@lru_cache()
def get_menu_catalog() -> MenuCatalog:
    """Get the process-wide menu catalog."""
    catalog = MenuCatalog()
    logger.info(f"Menu catalog loaded with {len(catalog)} entries")
    return catalog

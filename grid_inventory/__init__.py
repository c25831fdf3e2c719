"""grid_inventory
=================

In-memory model of items, grid inventories, players and guilds.

Typical use::

    from grid_inventory import Inventory, Item, ItemCategory

    inv = Inventory()
    inv.store(0, 0, Item("Sword", 5.0, ItemCategory.WEAPON))
    inv.get_count()  # 1

Library code logs through loguru but stays silent until
:func:`grid_inventory.log.configure_logging` is called.
"""

from loguru import logger

from .guild import Guild
from .inventory import Inventory
from .item import Item, empty_item
from .player import Player
from .types import ItemCategory

logger.disable("grid_inventory")

__all__ = [
    "Guild",
    "Inventory",
    "Item",
    "ItemCategory",
    "Player",
    "empty_item",
]

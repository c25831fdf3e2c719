"""Demonstration driver.

Builds a handful of items, stores and equips them, wraps the inventory in a
player, mutates it through the player, then enlists the player in a guild and
transfers them to another. Each stage is printed with
:mod:`grid_inventory.utils.render`.

Usage::

    from grid_inventory.config import Config
    from grid_inventory.examples.demo import run_demo

    guilds = run_demo(Config(rows=4, cols=4))
"""

from typing import Callable, Tuple

from loguru import logger

from grid_inventory.config import Config
from grid_inventory.guild import Guild
from grid_inventory.inventory import Inventory
from grid_inventory.item import Item
from grid_inventory.player import Player
from grid_inventory.types import ItemCategory
from grid_inventory.utils.grid import make_empty_grid
from grid_inventory.utils.render import format_guild, format_inventory, format_item

DEMO_ITEMS: Tuple[Item, ...] = (
    Item("Sword", 5.0, ItemCategory.WEAPON),
    Item("Shield", 8.0, ItemCategory.ARMOR),
    Item("Magic Ring", 1.0, ItemCategory.ACCESSORY),
    Item("Helmet", 3.5, ItemCategory.ARMOR),
    Item("Boots", 2.0, ItemCategory.ARMOR),
)


def _place(inventory: Inventory, row: int, col: int, item: Item) -> None:
    # Clamp onto the last slot so small demo grids still run.
    shape = inventory.shape
    row = min(row, len(shape) - 1)
    col = min(col, shape[row] - 1)
    if not inventory.store(row, col, item):
        logger.warning("Slot [{},{}] occupied, {} not stored", row, col, item.name)


def run_demo(config: Config, out: Callable[[str], None] = print) -> Tuple[Guild, Guild]:
    """Run the demo and return the two guilds it built."""
    sword, shield, ring, helmet, boots = (item.copy() for item in DEMO_ITEMS)

    out("===== Inventory & Player Demo =====")
    out("Items:")
    for item in DEMO_ITEMS:
        out(f"  {format_item(item)}")

    inventory = Inventory(make_empty_grid(config.rows, config.cols))
    _place(inventory, 0, 0, sword)
    _place(inventory, 1, 1, shield)
    _place(inventory, 2, 2, ring)
    inventory.equip(helmet)
    out(format_inventory(inventory))

    player = Player(config.player_name, inventory)
    out(f"Player Name: {player.get_name()}")
    out("Modifying inventory through player...")
    _place(player.get_inventory_ref(), 3, 3, boots)
    out(format_inventory(player.get_inventory_ref()))

    vanguard = Guild("Vanguard")
    rearguard = Guild("Rearguard")
    vanguard.enlist_player(player)
    out(format_guild(vanguard))
    vanguard.move_player_to(config.player_name, rearguard)
    out(format_guild(vanguard))
    out(format_guild(rearguard))
    return vanguard, rearguard

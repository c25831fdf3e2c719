"""Plain-text summaries of inventories and guilds."""

from typing import List

from grid_inventory.guild import Guild
from grid_inventory.inventory import Inventory
from grid_inventory.item import Item

SEPARATOR = "-" * 25


def format_item(item: Item) -> str:
    return f"{item.name} (Weight: {item.weight:g})"


def format_inventory(inventory: Inventory) -> str:
    """Render count, total weight, the equipped item and every stored item."""
    lines: List[str] = [
        f"Inventory contains {inventory.get_count()} items.",
        f"Total weight: {inventory.get_weight():g} lbs",
    ]
    equipped = inventory.get_equipped()
    if equipped is not None:
        lines.append(f"Equipped Item: {format_item(equipped)}")
    else:
        lines.append("No item equipped.")

    lines.append("Stored Items:")
    for row, col, item in inventory.occupied():
        # Unnamed items are counted but not listed.
        if item.name:
            lines.append(f"  [{row},{col}]: {format_item(item)}")
    lines.append(SEPARATOR)
    return "\n".join(lines)


def format_guild(guild: Guild) -> str:
    """Render the guild name and one line per member."""
    title = guild.name or "(unnamed guild)"
    lines = [f"Guild {title}: {len(guild)} members"]
    for player in guild.members:
        inventory = player.get_inventory_ref()
        lines.append(
            f"  {player.get_name()} - {inventory.get_count()} items, "
            f"{inventory.get_weight():g} lbs"
        )
    return "\n".join(lines)

"""Common type aliases and enumerations.

``Grid`` is the caller-facing shape of an inventory snapshot (a list of rows,
each row a list of items). Rows may differ in length; bounds are always
checked per row.
"""

from enum import StrEnum, auto
from typing import List, TYPE_CHECKING


if TYPE_CHECKING:
    from grid_inventory.item import Item


class ItemCategory(StrEnum):
    """Item category tag. ``NONE`` marks an empty slot."""

    NONE = auto()
    WEAPON = auto()
    ARMOR = auto()
    ACCESSORY = auto()


GridRow = List["Item"]
Grid = List[GridRow]

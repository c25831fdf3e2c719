"""Item value type.

An ``Item`` is a plain record: name, weight and category. A slot whose
category is :attr:`ItemCategory.NONE` counts as empty no matter what the
other fields say, so ``Item()`` doubles as the empty-slot value.
"""

import math
from dataclasses import dataclass, replace

from grid_inventory.types import ItemCategory


@dataclass
class Item:
    """Stored or equipped item.

    Attributes:
        name: Display name. Not unique; two items may share a name.
        weight: Non-negative weight contributed to an inventory's total.
        category: Category tag; ``NONE`` means the slot is empty.
    """

    name: str = ""
    weight: float = 0.0
    category: ItemCategory = ItemCategory.NONE

    def __post_init__(self) -> None:
        if not math.isfinite(self.weight) or self.weight < 0:
            raise ValueError(f"Item {self.name!r} has invalid weight: {self.weight}")

    @property
    def is_empty(self) -> bool:
        return self.category == ItemCategory.NONE

    def copy(self) -> "Item":
        """Return an independent copy."""
        return replace(self)


def empty_item() -> Item:
    """Return a fresh empty-slot value."""
    return Item()

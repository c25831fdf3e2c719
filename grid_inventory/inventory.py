"""Grid inventory with a single equipped slot.

An :class:`Inventory` owns:

* a fixed-shape grid of item slots (rows may differ in length),
* at most one *equipped* item held outside the grid,
* cached aggregates (``count`` and ``weight``) over non-empty grid slots.

Design notes:

* Aggregates are computed once at construction by scanning the grid. After
    that they are only adjusted by the operation that changes a cell
    (``store`` / ``take``), in the same call as the grid write. The equipped
    item is never part of either aggregate.
* The equipped item is exclusively owned. Construction, ``equip`` and
    ``copy`` all store their own copy, so no two inventories (and no caller)
    ever share the same ``Item`` object.
* ``move`` hands the grid, equipped item and aggregates to a new inventory
    and leaves the source empty but usable, mirroring move semantics.
* Coordinates are validated before anything is written; an out-of-range
    ``store`` or ``take`` leaves the inventory untouched.
"""

from typing import Iterator, Optional, Sequence, Tuple

from loguru import logger
from pyrsistent import pvector

from grid_inventory.item import Item, empty_item
from grid_inventory.types import Grid
from grid_inventory.utils.grid import (
    FrozenGrid,
    check_bounds,
    freeze_grid,
    grid_shape,
    iter_occupied,
    make_empty_grid,
    scan_aggregates,
    thaw_grid,
)

DEFAULT_ROWS = 4
DEFAULT_COLS = 4


class Inventory:
    """Grid of item slots plus one exclusively owned equipped item.

    Arguments:
        items: Initial rows of items. Cells with category ``NONE`` are empty.
            Defaults to a ``DEFAULT_ROWS`` x ``DEFAULT_COLS`` empty grid.
        equipped: Item to equip. A copy is stored; the caller keeps theirs.
    """

    def __init__(
        self,
        items: Optional[Sequence[Sequence[Item]]] = None,
        equipped: Optional[Item] = None,
    ) -> None:
        if items is None:
            items = make_empty_grid(DEFAULT_ROWS, DEFAULT_COLS)
        self._grid: FrozenGrid = freeze_grid(items)
        self._count, self._weight = scan_aggregates(self._grid)
        self._equipped: Optional[Item] = (
            equipped.copy() if equipped is not None else None
        )

    # -------- Copy / move --------

    def copy(self) -> "Inventory":
        """Return an independent copy.

        The grid is shared structurally (it is persistent), the equipped item
        is duplicated and the aggregates are carried over without a rescan.
        """
        clone = Inventory.__new__(Inventory)
        clone._grid = self._grid
        clone._count = self._count
        clone._weight = self._weight
        clone._equipped = (
            self._equipped.copy() if self._equipped is not None else None
        )
        return clone

    def __copy__(self) -> "Inventory":
        return self.copy()

    def __deepcopy__(self, memo: dict[int, object]) -> "Inventory":
        return self.copy()

    def move(self) -> "Inventory":
        """Transfer everything into a new inventory and empty this one."""
        moved = Inventory.__new__(Inventory)
        moved._grid = self._grid
        moved._count = self._count
        moved._weight = self._weight
        moved._equipped = self._equipped
        self._clear()
        return moved

    def assign(self, other: "Inventory") -> None:
        """Replace this inventory's contents with a copy of ``other``'s."""
        if other is self:
            return
        self._grid = other._grid
        self._count = other._count
        self._weight = other._weight
        self._equipped = (
            other._equipped.copy() if other._equipped is not None else None
        )

    def move_from(self, other: "Inventory") -> None:
        """Take over ``other``'s contents, leaving ``other`` empty."""
        if other is self:
            return
        self._grid = other._grid
        self._count = other._count
        self._weight = other._weight
        self._equipped = other._equipped
        other._clear()

    def _clear(self) -> None:
        self._grid = pvector()
        self._count = 0
        self._weight = 0.0
        self._equipped = None

    # -------- Equipped slot --------

    def get_equipped(self) -> Optional[Item]:
        """Return the equipped item, or None. Ownership stays here."""
        return self._equipped

    def equip(self, item: Item) -> None:
        """Equip ``item``, discarding whatever was equipped before."""
        if self._equipped is not None:
            logger.debug("Replacing equipped {}", self._equipped.name)
        self._equipped = item.copy()
        logger.debug("Equipped {} (weight {})", item.name, item.weight)

    def discard_equipped(self) -> None:
        """Drop the equipped item. No-op when nothing is equipped."""
        if self._equipped is None:
            return
        logger.debug("Discarded equipped {}", self._equipped.name)
        self._equipped = None

    # -------- Grid --------

    def get_items(self) -> Grid:
        """Return a snapshot of the grid. Changes to it do not write back."""
        return thaw_grid(self._grid)

    def get_weight(self) -> float:
        return self._weight

    def get_count(self) -> int:
        return self._count

    @property
    def shape(self) -> Tuple[int, ...]:
        """Length of each row."""
        return grid_shape(self._grid)

    def occupied(self) -> Iterator[Tuple[int, int, Item]]:
        """Yield ``(row, col, item)`` copies for every non-empty slot."""
        for row, col, item in iter_occupied(self._grid):
            yield row, col, item.copy()

    def at(self, row: int, col: int) -> Item:
        """Return a copy of the item at ``(row, col)``.

        Raises:
            IndexError: If ``row`` or ``col`` is outside that row's bounds.
        """
        check_bounds(self._grid, row, col)
        return self._grid[row][col].copy()

    def store(self, row: int, col: int, item: Item) -> bool:
        """Place a copy of ``item`` into an empty slot.

        Returns:
            bool: True if stored, False if the slot was already occupied.

        Raises:
            IndexError: If ``row`` or ``col`` is outside that row's bounds.
        """
        check_bounds(self._grid, row, col)
        if not self._grid[row][col].is_empty:
            return False

        self._grid = self._grid.set(row, self._grid[row].set(col, item.copy()))
        if not item.is_empty:
            self._count += 1
            self._weight += item.weight
        logger.debug(
            "Stored {} at [{},{}] (weight {})", item.name, row, col, item.weight
        )
        return True

    def take(self, row: int, col: int) -> Optional[Item]:
        """Remove and return the item at ``(row, col)``.

        Returns:
            Optional[Item]: The removed item, or None if the slot was empty.

        Raises:
            IndexError: If ``row`` or ``col`` is outside that row's bounds.
        """
        check_bounds(self._grid, row, col)
        item = self._grid[row][col]
        if item.is_empty:
            return None

        self._grid = self._grid.set(row, self._grid[row].set(col, empty_item()))
        self._count -= 1
        self._weight -= item.weight
        if self._count == 0:
            # drop float residue once the grid is empty
            self._weight = 0.0
        logger.debug("Took {} from [{},{}]", item.name, row, col)
        return item.copy()

    def __repr__(self) -> str:
        return (
            f"Inventory(shape={self.shape}, count={self._count}, "
            f"weight={self._weight}, equipped={self._equipped!r})"
        )

"""Grid construction and bounds helpers.

Inventories keep their slots in a persistent vector of persistent vectors so
that copying an inventory shares structure instead of duplicating every row.
Items themselves are mutable, so every item crossing the boundary in either
direction is copied; nothing stored in a frozen grid is reachable from the
outside.
"""

from typing import Iterator, Sequence, Tuple

from pyrsistent import pvector
from pyrsistent.typing import PVector

from grid_inventory.item import Item, empty_item
from grid_inventory.types import Grid

FrozenGrid = PVector[PVector[Item]]


def make_empty_grid(rows: int, cols: int) -> Grid:
    """Return a ``rows`` x ``cols`` grid of empty items."""
    return [[empty_item() for _ in range(cols)] for _ in range(rows)]


def freeze_grid(items: Sequence[Sequence[Item]]) -> FrozenGrid:
    """Copy ``items`` into a persistent grid. Row lengths are preserved."""
    return pvector(pvector(item.copy() for item in row) for row in items)


def thaw_grid(grid: FrozenGrid) -> Grid:
    """Return a plain list-of-lists snapshot with copied items."""
    return [[item.copy() for item in row] for row in grid]


def is_in_bounds(grid: FrozenGrid, row: int, col: int) -> bool:
    """Return True if ``(row, col)`` addresses a cell of that specific row."""
    return 0 <= row < len(grid) and 0 <= col < len(grid[row])


def check_bounds(grid: FrozenGrid, row: int, col: int) -> None:
    if not is_in_bounds(grid, row, col):
        raise IndexError(
            f"Out of bounds: {(row, col)} for grid with row lengths {grid_shape(grid)}"
        )


def grid_shape(grid: FrozenGrid) -> Tuple[int, ...]:
    """Length of every row, in order."""
    return tuple(len(row) for row in grid)


def iter_occupied(grid: FrozenGrid) -> Iterator[Tuple[int, int, Item]]:
    """Yield ``(row, col, item)`` for non-empty cells in row-major order."""
    for r, row in enumerate(grid):
        for c, item in enumerate(row):
            if not item.is_empty:
                yield r, c, item


def scan_aggregates(grid: FrozenGrid) -> Tuple[int, float]:
    """Return ``(count, weight)`` over non-empty cells.

    Only used when an inventory is built; afterwards the totals are kept up
    to date by each mutation.
    """
    count = 0
    weight = 0.0
    for _, _, item in iter_occupied(grid):
        count += 1
        weight += item.weight
    return count, weight

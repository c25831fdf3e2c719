"""Player: a name plus one owned inventory."""

from grid_inventory.inventory import Inventory


class Player:
    """Named owner of an :class:`Inventory`.

    The inventory passed in is copied, so later changes to the caller's
    inventory do not reach the player (and vice versa). Copying a player
    deep-copies its inventory; moving one transfers it.
    """

    def __init__(self, name: str, inventory: Inventory) -> None:
        self._name = name
        self._inventory = inventory.copy()

    def copy(self) -> "Player":
        return Player(self._name, self._inventory)

    def __copy__(self) -> "Player":
        return self.copy()

    def __deepcopy__(self, memo: dict[int, object]) -> "Player":
        return self.copy()

    def move(self) -> "Player":
        """Return a new player holding this one's name and inventory.

        This player is left with an empty name and an empty inventory.
        """
        moved = Player.__new__(Player)
        moved._name = self._name
        moved._inventory = self._inventory.move()
        self._name = ""
        return moved

    def get_name(self) -> str:
        return self._name

    def get_inventory_ref(self) -> Inventory:
        """Return the live inventory. Mutations through it are not checked."""
        return self._inventory

    def __repr__(self) -> str:
        return f"Player(name={self._name!r}, inventory={self._inventory!r})"

"""Guild roster keyed by player name.

Membership is a plain list searched linearly; uniqueness of names is enforced
on every insert (``enlist_player``, ``move_player_to``, ``copy_player_to``)
rather than by ``find_player`` itself. A transfer appends to the target and
removes from the source within one call, so a player is never observable in
both guilds afterwards.
"""

from typing import List, Optional, Tuple

from loguru import logger

from grid_inventory.player import Player


class Guild:
    """Ordered collection of uniquely named players."""

    def __init__(self, name: str = "") -> None:
        self.name = name
        self._members: List[Player] = []

    @property
    def members(self) -> Tuple[Player, ...]:
        """Read-only view of the roster, in enlistment order."""
        return tuple(self._members)

    def __len__(self) -> int:
        return len(self._members)

    def __contains__(self, player_name: object) -> bool:
        if not isinstance(player_name, str):
            return False
        return self.find_player(player_name) is not None

    def find_player(self, player_name: str) -> Optional[int]:
        """Return the index of the first member named ``player_name``, or None."""
        for index, player in enumerate(self._members):
            if player.get_name() == player_name:
                return index
        return None

    def get_player(self, player_name: str) -> Optional[Player]:
        index = self.find_player(player_name)
        return self._members[index] if index is not None else None

    def enlist_player(self, player: Player) -> bool:
        """Move ``player`` into the guild.

        Returns False (and leaves ``player`` untouched) if a member with the
        same name already exists. On success ``player`` is left empty.
        """
        if self.find_player(player.get_name()) is not None:
            logger.debug("{} already enlisted in {!r}", player.get_name(), self.name)
            return False
        self._members.append(player.move())
        logger.info("Enlisted {} in {!r}", self._members[-1].get_name(), self.name)
        return True

    def move_player_to(self, player_name: str, target: "Guild") -> bool:
        """Transfer the member named ``player_name`` to ``target``.

        Returns False if ``target`` already has a member with that name, or if
        this guild has none.
        """
        if target.find_player(player_name) is not None:
            return False
        index = self.find_player(player_name)
        if index is None:
            return False

        target._members.append(self._members[index].move())
        del self._members[index]
        logger.info("Moved {} from {!r} to {!r}", player_name, self.name, target.name)
        return True

    def copy_player_to(self, player_name: str, target: "Guild") -> bool:
        """Enlist a copy of the member named ``player_name`` in ``target``.

        Same checks as :meth:`move_player_to`; this guild keeps its member.
        """
        if target.find_player(player_name) is not None:
            return False
        index = self.find_player(player_name)
        if index is None:
            return False

        target._members.append(self._members[index].copy())
        logger.info("Copied {} from {!r} to {!r}", player_name, self.name, target.name)
        return True

    def __repr__(self) -> str:
        names = [player.get_name() for player in self._members]
        return f"Guild(name={self.name!r}, members={names!r})"

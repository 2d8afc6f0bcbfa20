from __future__ import annotations

from enum import Enum


class Player(Enum):
    """One of the two sides of the board."""
    ONE = 1
    TWO = 2

    def next(self) -> 'Player':
        return Player.TWO if self is Player.ONE else Player.ONE

    def pit_range(self, pits_per_player: int) -> range:
        """Half-open range of this player's sowing pits. Stores are excluded."""
        if self is Player.ONE:
            return range(0, pits_per_player)
        return range(pits_per_player + 1, 2 * pits_per_player + 1)

    def store_index(self, pits_per_player: int) -> int:
        """Index of the store sitting right after this player's sowing pits."""
        return self.pit_range(pits_per_player).stop

    def __str__(self) -> str:
        return 'Player One' if self is Player.ONE else 'Player Two'

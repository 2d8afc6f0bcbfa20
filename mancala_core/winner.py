from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .player import Player


@dataclass(frozen=True)
class PlayerWins:
    player: Player

    def message(self) -> str:
        return f"{self.player} wins!"


@dataclass(frozen=True)
class Tie:
    def message(self) -> str:
        return "It's a tie!"


Winner = Union[PlayerWins, Tie]

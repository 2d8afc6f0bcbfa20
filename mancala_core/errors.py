from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .player import Player

# Pit index reported when a violation is not about any particular pit.
NO_PIT = -1


class ErrorCode(Enum):
    PIT_DOES_NOT_EXIST = 'Invalid move for player {player} in pit {pit}! The pit does not exist.'
    WRONG_PLAYER_TURN = 'Invalid move for player {player} in pit {pit}! Only your own pits are allowed to be picked.'
    EMPTY_PIT = 'Invalid move for player {player} in pit {pit}! The pit is empty.'
    GAME_OVER = 'Game is over! Please restart the game.'
    GAME_NOT_OVER = 'Game is not over! Please continue playing.'

    def render(self, player: Player, pit_index: int) -> str:
        return self.value.format(player=player.value, pit=pit_index)


@dataclass(frozen=True)
class RuleViolation:
    """Why a requested operation was rejected. The board is left untouched."""
    code: ErrorCode
    player: Player
    pit_index: int

    def message(self) -> str:
        return self.code.render(self.player, self.pit_index)


class GameLogicError(ValueError):
    """Raised for any rule violation; branch on ``code`` rather than on type."""

    def __init__(self, violation: RuleViolation) -> None:
        super().__init__(violation.message())
        self.violation = violation

    @property
    def code(self) -> ErrorCode:
        return self.violation.code

    @property
    def player(self) -> Player:
        return self.violation.player

    @property
    def pit_index(self) -> int:
        return self.violation.pit_index

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .board import DEFAULT_PITS_PER_PLAYER, DEFAULT_STONES_PER_PIT, Board
from .errors import GameLogicError
from .move import Move
from .winner import Winner


@dataclass(frozen=True)
class DemoResult:
    """Outcome of a random playthrough."""
    moves: Tuple[Move, ...]
    winner: Winner
    attempts: int
    rejected: int


class GameSession:
    """One game in progress. Each session owns its own board and RNG.

    Calls on a session must be serialized by the caller; nothing here locks.
    """

    def __init__(
        self,
        pits_per_player: int = DEFAULT_PITS_PER_PLAYER,
        stones_per_pit: int = DEFAULT_STONES_PER_PIT,
        seed: Optional[int] = None,
    ) -> None:
        self._pits_per_player = pits_per_player
        self._stones_per_pit = stones_per_pit
        self._rng = random.Random(seed)
        self._board = Board(pits_per_player, stones_per_pit)

    @property
    def board(self) -> Board:
        return self._board

    def make_move(self, pit_index: int) -> List[Move]:
        return self._board.move_stones(pit_index)

    def is_game_over(self) -> bool:
        return self._board.is_game_over()

    def determine_winner(self) -> Winner:
        return self._board.determine_winner()

    def winner_message(self) -> str:
        return self.determine_winner().message()

    def random_pit_index(self) -> int:
        """Any pit on the board, stores and the opponent's side included."""
        return self._rng.randrange(self._board.total_pits)

    def play_random_until_over(self, max_attempts: int = 100_000) -> DemoResult:
        """Throws random pits at the board until the game ends.

        Rejected picks are discarded silently. Raises RuntimeError if the game
        is still running after ``max_attempts`` picks.
        """
        moves: List[Move] = []
        attempts = 0
        rejected = 0
        while not self._board.is_game_over():
            if attempts >= max_attempts:
                raise RuntimeError(f'game not finished after {max_attempts} random picks')
            attempts += 1
            try:
                moves.extend(self._board.move_stones(self.random_pit_index()))
            except GameLogicError:
                rejected += 1
        return DemoResult(moves=tuple(moves), winner=self._board.determine_winner(), attempts=attempts, rejected=rejected)

    def reset(self) -> None:
        """Drops the current board for a fresh one with the same configuration."""
        self._board = Board(self._pits_per_player, self._stones_per_pit)

    @staticmethod
    def error_message(err: GameLogicError) -> str:
        return err.violation.message()

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from .errors import NO_PIT, ErrorCode, GameLogicError, RuleViolation
from .move import Move
from .player import Player
from .winner import PlayerWins, Tie, Winner

DEFAULT_PITS_PER_PLAYER = 6
DEFAULT_STONES_PER_PIT = 6


class Board:
    """Mutable Mancala board: a flat row of pits plus whose turn it is.

    Layout for ``n`` pits per player: ``[0, n)`` are Player One's sowing pits,
    ``n`` is Player One's store, ``(n, 2n + 1)`` are Player Two's sowing pits
    and ``2n + 1`` is Player Two's store.
    """

    def __init__(
        self,
        pits_per_player: int = DEFAULT_PITS_PER_PLAYER,
        stones_per_pit: int = DEFAULT_STONES_PER_PIT,
    ) -> None:
        if pits_per_player < 1:
            raise ValueError(f'pits_per_player must be at least 1, got {pits_per_player}')
        if stones_per_pit < 0:
            raise ValueError(f'stones_per_pit must not be negative, got {stones_per_pit}')
        self._pits_per_player = pits_per_player
        self._stones_per_pit = stones_per_pit
        self._pits: List[int] = [stones_per_pit] * (pits_per_player * 2 + 2)
        for player in Player:
            self._pits[player.store_index(pits_per_player)] = 0
        self._current_player = Player.ONE

    @classmethod
    def from_pits(cls, pits: Iterable[int], current_player: Player = Player.ONE) -> 'Board':
        """Builds a board from an explicit pit layout (stores included)."""
        if not isinstance(current_player, Player):
            raise ValueError(f'current_player must be a Player, got {current_player!r}')
        values = [int(v) for v in pits]
        if len(values) < 4 or len(values) % 2:
            raise ValueError(f'pit layout needs an even length of at least 4, got {len(values)}')
        if any(v < 0 for v in values):
            raise ValueError('pit layout must not hold negative stone counts')
        board = cls(pits_per_player=len(values) // 2 - 1, stones_per_pit=0)
        board._pits = values
        board._current_player = current_player
        return board

    # Queries

    @property
    def pits(self) -> Tuple[int, ...]:
        return tuple(self._pits)

    @property
    def current_player(self) -> Player:
        return self._current_player

    @property
    def pits_per_player(self) -> int:
        return self._pits_per_player

    @property
    def stones_per_pit(self) -> int:
        return self._stones_per_pit

    @property
    def total_pits(self) -> int:
        return len(self._pits)

    def pit_range(self, player: Player) -> range:
        return player.pit_range(self._pits_per_player)

    def store_index(self, player: Player) -> int:
        return player.store_index(self._pits_per_player)

    def store(self, player: Player) -> int:
        return self._pits[self.store_index(player)]

    def stones_in_pit(self, pit_index: int) -> int:
        if not self.pit_exists(pit_index):
            raise IndexError(f'pit {pit_index} does not exist on a board of {len(self._pits)} pits')
        return self._pits[pit_index]

    def total_stones(self) -> int:
        return sum(self._pits)

    # Legality

    def pit_exists(self, pit_index: int) -> bool:
        return 0 <= pit_index < len(self._pits)

    def is_correct_players_turn(self, pit_index: int) -> bool:
        """True if the pit is one of the current player's sowing pits."""
        return pit_index in self.pit_range(self._current_player)

    def is_pit_empty(self, pit_index: int) -> bool:
        return self.stones_in_pit(pit_index) == 0

    def validate_move(self, pit_index: int) -> Optional[RuleViolation]:
        """Returns the first rule the move breaks, or None if it is legal.

        Checks run in a fixed order: existence, ownership, emptiness, game over.
        """
        code: Optional[ErrorCode] = None
        if not self.pit_exists(pit_index):
            code = ErrorCode.PIT_DOES_NOT_EXIST
        elif not self.is_correct_players_turn(pit_index):
            code = ErrorCode.WRONG_PLAYER_TURN
        elif self.is_pit_empty(pit_index):
            code = ErrorCode.EMPTY_PIT
        elif self.is_game_over():
            code = ErrorCode.GAME_OVER
        if code is None:
            return None
        return RuleViolation(code, self._current_player, pit_index)

    def check_move(self, pit_index: int) -> None:
        violation = self.validate_move(pit_index)
        if violation is not None:
            raise GameLogicError(violation)

    def legal_moves(self) -> List[int]:
        """Sowing pits the current player may pick right now."""
        return [i for i in self.pit_range(self._current_player) if self.validate_move(i) is None]

    # Sowing

    def move_stones(self, pit_index: int) -> List[Move]:
        """Sows the stones of ``pit_index`` and returns one Move per stone.

        Stones go into every following pit in wrap order, the opponent's store
        included. Raises GameLogicError without touching the board if the move
        is illegal.
        """
        self.check_move(pit_index)

        moves: List[Move] = []
        in_hand = self._pits[pit_index]
        self._pits[pit_index] = 0
        current = pit_index
        while in_hand > 0:
            current = (current + 1) % len(self._pits)
            self._pits[current] += 1
            in_hand -= 1
            moves.append(Move(pit_index, current))

        if current != self.store_index(self._current_player):
            self._current_player = self._current_player.next()
        if self.is_game_over():
            self.collect_remaining_stones()
        return moves

    # End of game

    def is_side_empty(self, player: Player) -> bool:
        return all(self._pits[i] == 0 for i in self.pit_range(player))

    def is_game_over(self) -> bool:
        return any(self.is_side_empty(player) for player in Player)

    def collect_remaining_stones(self) -> None:
        """Sweeps each side's sowing pits into that side's own store."""
        for player in Player:
            store = self.store_index(player)
            for i in self.pit_range(player):
                self._pits[store] += self._pits[i]
                self._pits[i] = 0

    def determine_winner(self) -> Winner:
        if not self.is_game_over():
            raise GameLogicError(RuleViolation(ErrorCode.GAME_NOT_OVER, self._current_player, NO_PIT))
        one, two = self.store(Player.ONE), self.store(Player.TWO)
        if one > two:
            return PlayerWins(Player.ONE)
        if two > one:
            return PlayerWins(Player.TWO)
        return Tie()

    def pretty(self) -> str:
        """Two-row text view: Player Two's pits right to left on top, stores at the ends."""
        top = ' '.join(f'{self._pits[i]:2d}' for i in reversed(self.pit_range(Player.TWO)))
        bottom = ' '.join(f'{self._pits[i]:2d}' for i in self.pit_range(Player.ONE))
        two_store = f'{self.store(Player.TWO):2d}'
        one_store = f'{self.store(Player.ONE):2d}'
        pad = ' ' * len(two_store)
        lines = [
            f'{pad}  {top}',
            f'{two_store}  {" " * len(top)}  {one_store}',
            f'{pad}  {bottom}',
            f'To move: {self._current_player}',
        ]
        return '\n'.join(lines)

    def __repr__(self) -> str:
        return f'Board(pits={self._pits!r}, current_player={self._current_player.name})'

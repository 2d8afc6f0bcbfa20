from __future__ import annotations

# Facade module that re-exports the Mancala core API.
# Single-responsibility modules live under mancala_core/*.

from mancala_core.board import Board, DEFAULT_PITS_PER_PLAYER, DEFAULT_STONES_PER_PIT
from mancala_core.errors import NO_PIT, ErrorCode, GameLogicError, RuleViolation
from mancala_core.move import Move
from mancala_core.player import Player
from mancala_core.session import DemoResult, GameSession
from mancala_core.winner import PlayerWins, Tie, Winner

__all__ = [
    'Board',
    'DEFAULT_PITS_PER_PLAYER',
    'DEFAULT_STONES_PER_PIT',
    'DemoResult',
    'ErrorCode',
    'GameLogicError',
    'GameSession',
    'Move',
    'NO_PIT',
    'Player',
    'PlayerWins',
    'RuleViolation',
    'Tie',
    'Winner',
    'main',
]


def main() -> None:
    # CLI driver delegated to mancala_core.cli
    from mancala_core.cli import main as _main
    raise SystemExit(_main())


if __name__ == '__main__':
    main()

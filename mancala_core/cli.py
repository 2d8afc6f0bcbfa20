from __future__ import annotations

import argparse
import os
from typing import List, Optional

from .board import DEFAULT_PITS_PER_PLAYER, DEFAULT_STONES_PER_PIT
from .errors import GameLogicError
from .session import GameSession


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == '':
        return default
    try:
        return int(raw)
    except ValueError:
        print(f"warning: ignoring {name}={raw!r}, expected an integer")
        return default


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Mancala rules engine: hot-seat play or random demo')
    parser.add_argument('--pits', type=int, default=_env_int('MANCALA_PITS_PER_PLAYER', DEFAULT_PITS_PER_PLAYER),
                        help='Sowing pits per player')
    parser.add_argument('--stones', type=int, default=_env_int('MANCALA_STONES_PER_PIT', DEFAULT_STONES_PER_PIT),
                        help='Stones initially in each sowing pit')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for the random demo')
    parser.add_argument('--demo', action='store_true', help='Play random moves until the game is over')
    return parser


def run_demo(session: GameSession) -> None:
    result = session.play_random_until_over()
    print(f"Random demo: {len(result.moves)} stones sown, "
          f"{result.attempts} picks ({result.rejected} rejected)")
    print(session.board.pretty())
    print(result.winner.message())


def run_interactive(session: GameSession) -> None:
    board = session.board
    print(board.pretty())
    while not session.is_game_over():
        text = input(f"{board.current_player}, pick a pit {board.legal_moves()} or q to quit: ").strip()
        if text.lower() in ('q', 'quit'):
            print('Bye.')
            return
        try:
            pit = int(text)
        except ValueError:
            print('Could not parse. Try again.')
            continue
        try:
            moves = session.make_move(pit)
        except GameLogicError as err:
            print(session.error_message(err))
            continue
        print(f"Sowed {len(moves)} stones from pit {pit}, last one in pit {moves[-1].to_pit}")
        print(board.pretty())
    print(session.winner_message())


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        session = GameSession(args.pits, args.stones, seed=args.seed)
    except ValueError as err:
        print(f"error: {err}")
        return 2
    if args.demo:
        run_demo(session)
    else:
        run_interactive(session)
    return 0


if __name__ == '__main__':
    raise SystemExit(main())

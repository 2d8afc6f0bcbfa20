#!/usr/bin/env python3
"""
Play many seeded random games and check the board invariants on each one.

- Every game starts from a fresh board and is driven by random pit picks.
- Checks after each game:
  * total stone count equals 2 * pits * stones
  * both sowing ranges are empty and every stone sits in a store
  * the winner agrees with the two store counts
- Prints a JSON summary with wins, ties and move statistics

Usage:
  python tools/simulate.py                 # 1000 games, 6 pits, 6 stones
  python tools/simulate.py 200 --pits 4 --stones 3 --seed 7
"""
from __future__ import annotations

import argparse
import json
import os
import sys
from typing import Any, Dict, List

# Ensure the repo root is importable when run as a script
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import game  # noqa: E402


def check_finished_board(board: game.Board, expected_total: int) -> List[str]:
    """Returns the invariant violations found on a finished board."""
    problems: List[str] = []
    if board.total_stones() != expected_total:
        problems.append(f'stone count {board.total_stones()} != {expected_total}')
    for player in game.Player:
        if not board.is_side_empty(player):
            problems.append(f'{player} still has stones in sowing pits')
    stores = board.store(game.Player.ONE) + board.store(game.Player.TWO)
    if stores != expected_total:
        problems.append(f'stores hold {stores} of {expected_total} stones')
    winner = board.determine_winner()
    one, two = board.store(game.Player.ONE), board.store(game.Player.TWO)
    if isinstance(winner, game.Tie) != (one == two):
        problems.append(f'winner {winner} disagrees with stores {one}:{two}')
    return problems


def simulate(games: int, pits: int, stones: int, seed: int) -> Dict[str, Any]:
    wins = {str(p): 0 for p in game.Player}
    ties = 0
    sown_total = 0
    rejected_total = 0
    failures: List[Dict[str, Any]] = []
    expected_total = 2 * pits * stones
    for i in range(games):
        session = game.GameSession(pits, stones, seed=seed + i)
        result = session.play_random_until_over()
        sown_total += len(result.moves)
        rejected_total += result.rejected
        if isinstance(result.winner, game.PlayerWins):
            wins[str(result.winner.player)] += 1
        else:
            ties += 1
        problems = check_finished_board(session.board, expected_total)
        if problems and len(failures) < 10:
            failures.append({'seed': seed + i, 'problems': problems})
    return {
        'games': games,
        'pits_per_player': pits,
        'stones_per_pit': stones,
        'wins': wins,
        'ties': ties,
        'avg_stones_sown': round(sown_total / games, 2) if games else 0.0,
        'avg_rejected_picks': round(rejected_total / games, 2) if games else 0.0,
        'failures': failures,
    }


def main() -> None:
    parser = argparse.ArgumentParser(description='Random-play invariant checker')
    parser.add_argument('games', nargs='?', type=int, default=1000)
    parser.add_argument('--pits', type=int, default=game.DEFAULT_PITS_PER_PLAYER)
    parser.add_argument('--stones', type=int, default=game.DEFAULT_STONES_PER_PIT)
    parser.add_argument('--seed', type=int, default=0)
    args = parser.parse_args()
    summary = simulate(args.games, args.pits, args.stones, args.seed)
    print(json.dumps(summary, indent=2))
    if summary['failures']:
        sys.exit(1)


if __name__ == '__main__':
    main()

"""
Mancala core Python package.

This package holds the rules engine and the thin glue around it, split into
small single-responsibility modules:
- player.py: Player and the per-player pit ranges
- move.py: Move
- winner.py: PlayerWins, Tie
- errors.py: ErrorCode, RuleViolation, GameLogicError
- board.py: Board (state, legality, sowing, end of game)
- session.py: GameSession (random play, reset)
- cli.py: command-line driver
"""

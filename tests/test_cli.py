import io
import os
import unittest
from contextlib import redirect_stdout
from unittest.mock import patch

from mancala_core import cli


def run_cli(argv, inputs=None):
    out = io.StringIO()
    with patch('builtins.input', side_effect=list(inputs or [])), redirect_stdout(out):
        code = cli.main(argv)
    return code, out.getvalue()


class TestCli(unittest.TestCase):
    def test_given_demo_flag_when_run_then_game_played_to_the_end(self):
        code, text = run_cli(['--demo', '--seed', '3'])
        self.assertEqual(code, 0)
        self.assertIn('Random demo:', text)
        self.assertTrue('wins!' in text or "It's a tie!" in text)

    def test_given_bad_config_when_run_then_error_exit(self):
        code, text = run_cli(['--pits', '0', '--demo'])
        self.assertEqual(code, 2)
        self.assertIn('error: pits_per_player', text)

    def test_given_env_defaults_when_building_parser_then_used_unless_overridden(self):
        with patch.dict(os.environ, {'MANCALA_PITS_PER_PLAYER': '4', 'MANCALA_STONES_PER_PIT': '3'}):
            args = cli.build_parser().parse_args([])
            self.assertEqual((args.pits, args.stones), (4, 3))
            args = cli.build_parser().parse_args(['--pits', '5'])
            self.assertEqual(args.pits, 5)

    def test_given_garbage_env_when_building_parser_then_default_kept(self):
        out = io.StringIO()
        with patch.dict(os.environ, {'MANCALA_PITS_PER_PLAYER': 'many'}), redirect_stdout(out):
            args = cli.build_parser().parse_args([])
        self.assertEqual(args.pits, 6)
        self.assertIn('warning: ignoring MANCALA_PITS_PER_PLAYER', out.getvalue())

    def test_given_interactive_input_when_playing_then_errors_reported_and_quit(self):
        code, text = run_cli(['--pits', '6', '--stones', '6'], ['x', '7', '0', 'q'])
        self.assertEqual(code, 0)
        self.assertIn('Could not parse. Try again.', text)
        self.assertIn('Invalid move for player 1 in pit 7! Only your own pits are allowed to be picked.', text)
        self.assertIn('Sowed 6 stones from pit 0, last one in pit 6', text)
        self.assertIn('Bye.', text)

    def test_given_tiny_board_when_played_out_then_winner_printed(self):
        code, text = run_cli(['--pits', '1', '--stones', '1'], ['0'])
        self.assertEqual(code, 0)
        self.assertIn("It's a tie!", text)


if __name__ == '__main__':
    unittest.main(verbosity=2)

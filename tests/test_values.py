import unittest

from game import (
    ErrorCode,
    GameLogicError,
    Move,
    NO_PIT,
    Player,
    PlayerWins,
    RuleViolation,
    Tie,
)


class TestPlayer(unittest.TestCase):
    def test_given_player_when_next_then_toggles(self):
        self.assertIs(Player.ONE.next(), Player.TWO)
        self.assertIs(Player.TWO.next(), Player.ONE)
        self.assertIs(Player.ONE.next().next(), Player.ONE)

    def test_given_pit_count_when_asking_ranges_then_stores_excluded(self):
        self.assertEqual(Player.ONE.pit_range(6), range(0, 6))
        self.assertEqual(Player.TWO.pit_range(6), range(7, 13))
        self.assertEqual(Player.ONE.store_index(6), 6)
        self.assertEqual(Player.TWO.store_index(6), 13)
        self.assertEqual(Player.TWO.pit_range(1), range(2, 3))
        self.assertEqual(Player.TWO.store_index(1), 3)

    def test_given_player_when_str_then_readable_name(self):
        self.assertEqual(str(Player.ONE), 'Player One')
        self.assertEqual(str(Player.TWO), 'Player Two')


class TestMoveAndWinner(unittest.TestCase):
    def test_given_move_when_comparing_and_exporting_then_value_semantics(self):
        self.assertEqual(Move(0, 1), Move(0, 1))
        self.assertNotEqual(Move(0, 1), Move(1, 0))
        self.assertEqual(Move(3, 13).as_dict(), {'fromPitIndex': 3, 'toPitIndex': 13})
        with self.assertRaises(AttributeError):
            Move(0, 1).to_pit = 2  # type: ignore[misc]

    def test_given_outcomes_when_rendering_then_messages(self):
        self.assertEqual(PlayerWins(Player.ONE).message(), 'Player One wins!')
        self.assertEqual(PlayerWins(Player.TWO).message(), 'Player Two wins!')
        self.assertEqual(Tie().message(), "It's a tie!")
        self.assertEqual(Tie(), Tie())
        self.assertNotEqual(PlayerWins(Player.ONE), PlayerWins(Player.TWO))


class TestErrors(unittest.TestCase):
    def test_given_error_codes_when_rendering_then_player_and_pit_filled_in(self):
        self.assertEqual(
            ErrorCode.PIT_DOES_NOT_EXIST.render(Player.ONE, 14),
            'Invalid move for player 1 in pit 14! The pit does not exist.',
        )
        self.assertEqual(
            ErrorCode.WRONG_PLAYER_TURN.render(Player.TWO, 3),
            'Invalid move for player 2 in pit 3! Only your own pits are allowed to be picked.',
        )
        self.assertEqual(
            ErrorCode.EMPTY_PIT.render(Player.ONE, 0),
            'Invalid move for player 1 in pit 0! The pit is empty.',
        )
        self.assertEqual(ErrorCode.GAME_OVER.render(Player.ONE, 2), 'Game is over! Please restart the game.')

    def test_given_violation_when_raised_then_error_carries_context(self):
        violation = RuleViolation(ErrorCode.GAME_NOT_OVER, Player.TWO, NO_PIT)
        err = GameLogicError(violation)
        self.assertIsInstance(err, ValueError)
        self.assertIs(err.violation, violation)
        self.assertEqual(err.code, ErrorCode.GAME_NOT_OVER)
        self.assertEqual(err.player, Player.TWO)
        self.assertEqual(err.pit_index, NO_PIT)
        self.assertEqual(str(err), violation.message())


if __name__ == '__main__':
    unittest.main(verbosity=2)

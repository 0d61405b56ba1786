import io
import unittest
from contextlib import redirect_stdout
from unittest import mock

from connectfour.debug import debug
from connectfour.interfaces.cli import SimpleCLI, main
from connectfour.utils import ROWS, COLS, Player

from tests.helpers import TIE_MOVES


def run_cli(argv, inputs=None):
    out = io.StringIO()
    with redirect_stdout(out):
        if inputs is None:
            status = main(argv)
        else:
            with mock.patch('builtins.input', side_effect=inputs):
                status = main(argv)
    return status, out.getvalue()


class TestCliCommands(unittest.TestCase):
    def setUp(self):
        self._level = debug.level

    def tearDown(self):
        debug.configure(level=self._level)

    def test_given_winning_moves_when_replaying_then_winner_and_ignored_moves_reported(self):
        status, output = run_cli(['replay', '--moves', '0,0,1,1,2,2,3,4'])
        self.assertEqual(status, 0)
        self.assertIn("Move 7: player 1 plays column 3 (row 5)", output)
        self.assertIn("Move 8: column 4 ignored (GAME_ALREADY_OVER)", output)
        self.assertIn("Player 1 (X) wins!", output)

    def test_given_drawn_moves_when_replaying_then_tie_reported(self):
        moves = ",".join(str(col) for col in TIE_MOVES)
        status, output = run_cli(['replay', '--moves', moves])
        self.assertEqual(status, 0)
        self.assertIn("It's a tie!", output)

    def test_given_full_column_when_replaying_then_column_full_reported(self):
        status, output = run_cli(['replay', '--moves', '0,0,0,0,0,0,0'])
        self.assertEqual(status, 0)
        self.assertIn("Move 7: column 0 ignored (COLUMN_FULL)", output)
        self.assertIn("Game in progress, player 1 to move.", output)

    def test_given_negative_first_move_when_replaying_with_equals_form_then_invalid_column(self):
        status, output = run_cli(['replay', '--moves=-1,0'])
        self.assertEqual(status, 0)
        self.assertIn("Move 1: column -1 ignored (INVALID_COLUMN)", output)
        self.assertIn("Move 2: player 1 plays column 0 (row 5)", output)

    def test_given_non_numeric_moves_when_replaying_then_error_status(self):
        status, output = run_cli(['replay', '--moves', '0,a'])
        self.assertEqual(status, 1)
        self.assertIn("Error:", output)

    def test_given_bottom_row_four_when_checking_position_then_reported(self):
        values = [0] * (ROWS * COLS)
        for col in range(4):
            values[(ROWS - 1) * COLS + col] = 1
        status, output = run_cli(['check', '--position', ",".join(map(str, values))])
        self.assertEqual(status, 0)
        self.assertIn("Gravity: ok", output)
        self.assertIn("Player 1 (X) four-in-a-row: yes", output)
        self.assertIn("Player 2 (O) four-in-a-row: no", output)
        self.assertIn("Empty spaces: 38", output)
        self.assertIn("Valid moves: [0, 1, 2, 3, 4, 5, 6]", output)

    def test_given_short_position_when_checking_then_error_status(self):
        status, output = run_cli(['check', '--position', '0,1,2'])
        self.assertEqual(status, 1)
        self.assertIn("Error: Position must have 42 values", output)

    def test_given_seed_when_benchmarking_then_scans_agree(self):
        status, output = run_cli(['benchmark', '--iterations', '5', '--seed', '11'])
        self.assertEqual(status, 0)
        self.assertIn("Win checks:", output)

    def test_given_no_command_when_running_then_usage_hint(self):
        status, output = run_cli([])
        self.assertEqual(status, 1)
        self.assertIn("Please specify a command", output)


class TestCliPlay(unittest.TestCase):
    def test_given_vertical_moves_when_playing_then_player_one_wins(self):
        status, output = run_cli(['play'], inputs=['0', '1', '0', '1', '0', '1', '0', 'q'])
        self.assertEqual(status, 0)
        self.assertIn("Player 1 (X) wins!", output)
        self.assertIn("Quitting game.", output)

    def test_given_finished_game_when_choosing_new_game_then_next_move_on_fresh_board(self):
        cli = SimpleCLI()
        inputs = ['0', '1', '0', '1', '0', '1', '0', 'maybe', 'r', '3', 'q']
        out = io.StringIO()
        with redirect_stdout(out), mock.patch('builtins.input', side_effect=inputs) as fake_input:
            status = cli.run(['play'])

        self.assertEqual(status, 0)
        self.assertEqual(fake_input.call_count, len(inputs))
        self.assertIn("Player 1 (X) wins!", out.getvalue())
        self.assertIn("Please enter 'r' or 'q'.", out.getvalue())
        self.assertIn("New game.", out.getvalue())
        self.assertFalse(cli.engine.is_game_over())
        self.assertEqual(cli.engine.moves_made, 1)
        self.assertIs(cli.engine.board.cell(ROWS - 1, 3), Player.ONE)
        self.assertIs(cli.engine.board.cell(ROWS - 1, 0), Player.EMPTY)

    def test_given_finished_game_when_input_ends_then_quits(self):
        status, output = run_cli(['play'], inputs=['0', '1', '0', '1', '0', '1', '0', EOFError()])
        self.assertEqual(status, 0)
        self.assertIn("Quitting game.", output)

    def test_given_bad_input_when_playing_then_messages_and_quit(self):
        status, output = run_cli(['play'], inputs=['x', '9', 'q'])
        self.assertEqual(status, 0)
        self.assertIn("Invalid input.", output)
        self.assertIn("Column must be between 0 and 6.", output)
        self.assertIn("Quitting game.", output)

    def test_given_full_column_when_playing_then_same_player_asked_again(self):
        inputs = ['5'] * ROWS + ['5', 'q']
        status, output = run_cli(['play'], inputs=inputs)
        self.assertEqual(status, 0)
        self.assertIn("Column 5 is full. Choose another column.", output)

    def test_given_restart_when_playing_then_board_cleared(self):
        cli = SimpleCLI()
        out = io.StringIO()
        with redirect_stdout(out), mock.patch('builtins.input', side_effect=['3', 'r', 'q']):
            cli.run(['play'])
        self.assertIn("Game restarted.", out.getvalue())
        self.assertEqual(cli.engine.moves_made, 0)

    def test_given_end_of_input_when_playing_then_quits(self):
        status, output = run_cli(['play'], inputs=EOFError())
        self.assertEqual(status, 0)
        self.assertIn("Quitting game.", output)


if __name__ == '__main__':
    unittest.main()

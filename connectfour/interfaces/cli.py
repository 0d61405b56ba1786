"""
cli.py - Command-line interface for Connect Four

Provides a hot-seat game for two players sharing a terminal, plus commands
to replay a move sequence, inspect a board position and compare the two
win-scan strategies.
"""

import argparse
import random
import sys
import time
from typing import List, Optional

from connectfour.debug import debug, DebugLevel
from connectfour.game.board import Board
from connectfour.game.engine import GameEngine, MoveOutcome, PlacementResult
from connectfour.utils import ROWS, COLS, Player, parse_int_list

QUIT = 'q'
RESTART = 'r'


class SimpleCLI:
    """Terminal front end driving a GameEngine."""

    def __init__(self):
        self.engine = GameEngine()
        self.args = None

    @staticmethod
    def build_parser() -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(description='Connect Four')
        parser.add_argument('--debug', action='store_true',
                            help='Enable debug logging (same as --debug_level debug)')
        parser.add_argument('--debug_level',
                            choices=[level.name.lower() for level in DebugLevel],
                            help='Logging verbosity (default: warning, or $CONNECTFOUR_DEBUG_LEVEL)')
        parser.add_argument('--log_file', help='Also write log records to this file')

        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        subparsers.add_parser('play', help='Play a two-player game on this terminal')

        replay_parser = subparsers.add_parser('replay', help='Apply a sequence of moves')
        replay_parser.add_argument('--moves', required=True,
                                   help="Comma-separated column indices, e.g. 0,0,1,1,2,2,3; "
                                        "write --moves=-1,0 when the first value is negative")

        check_parser = subparsers.add_parser('check', help='Inspect a board position')
        check_parser.add_argument('--position', required=True,
                                  help=f'{ROWS * COLS} comma-separated cell values '
                                       f'(0 empty, 1, 2), top row first')

        benchmark_parser = subparsers.add_parser(
            'benchmark', help='Time the whole-board and last-move win scans')
        benchmark_parser.add_argument('--iterations', type=int, default=200,
                                      help='Number of random games to play')
        benchmark_parser.add_argument('--seed', type=int, default=None,
                                      help='Random seed for reproducible games')
        return parser

    def parse_args(self, argv: Optional[List[str]] = None) -> None:
        self.args = self.build_parser().parse_args(argv)

        debug.configure_from_env()
        if self.args.debug:
            debug.configure(level=DebugLevel.DEBUG)
        elif self.args.debug_level:
            debug.configure(level=DebugLevel.from_string(self.args.debug_level))
        if self.args.log_file:
            debug.configure(log_file=self.args.log_file)

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Run the selected command and return a process exit status."""
        if self.args is None:
            self.parse_args(argv)

        command = self.args.command
        debug.debug(f"Running command {command!r}", "cli")
        try:
            if command == 'play':
                return self.play_game()
            if command == 'replay':
                return self.replay(parse_int_list(self.args.moves))
            if command == 'check':
                return self.check_position(parse_int_list(self.args.position))
            if command == 'benchmark':
                return self.benchmark(self.args.iterations, self.args.seed)
        except ValueError as e:
            print(f"Error: {e}")
            return 1

        print("Please specify a command. Use --help for options.")
        return 1

    # Interactive play

    def play_game(self) -> int:
        print("Starting a new Connect Four game!")
        print(f"Enter a column number (0-{COLS - 1}), '{RESTART}' to restart or '{QUIT}' to quit.")

        self.engine.initialize()
        print(self.engine.render())

        while True:
            move = self.get_human_move(self.engine.current_player)

            if move == QUIT:
                print("Quitting game.")
                return 0
            if move == RESTART:
                self.engine.initialize()
                print("Game restarted.")
                print(self.engine.render())
                continue
            if move is None:
                continue

            placement = self.engine.drop_piece(move)
            if not placement.accepted:
                print(self.describe_rejection(placement))
                continue

            print(self.engine.render())
            if not self.engine.is_game_over():
                continue

            print(self.describe_result())
            if self.ask_new_game() == QUIT:
                print("Quitting game.")
                return 0
            self.engine.initialize()
            print("New game.")
            print(self.engine.render())

    def get_human_move(self, player: Player):
        """
        Read one move from the terminal.

        Returns:
            A column index, QUIT, RESTART, or None for unreadable input
        """
        try:
            user_input = input(f"Player {player.value} ({player.symbol}) column: ").strip().lower()
        except EOFError:
            return QUIT

        if user_input in (QUIT, RESTART):
            return user_input

        try:
            return int(user_input)
        except ValueError:
            print("Invalid input. Please enter a column number or a command.")
            return None

    def ask_new_game(self) -> str:
        """
        Wait for the players to start another game or leave.

        Returns:
            RESTART or QUIT; end of input counts as QUIT
        """
        while True:
            try:
                answer = input(f"Game over. '{RESTART}' for a new game, '{QUIT}' to quit: ")
            except EOFError:
                return QUIT

            answer = answer.strip().lower()
            if answer in (QUIT, RESTART):
                return answer
            print(f"Please enter '{RESTART}' or '{QUIT}'.")

    def describe_rejection(self, placement: PlacementResult) -> str:
        if placement.outcome == MoveOutcome.COLUMN_FULL:
            return f"Column {placement.column} is full. Choose another column."
        if placement.outcome == MoveOutcome.INVALID_COLUMN:
            return f"Column must be between 0 and {self.engine.cols - 1}."
        return "The game is over."

    def describe_result(self) -> str:
        winner = self.engine.get_winner()
        if winner is not None:
            return f"Player {winner.value} ({winner.symbol}) wins!"
        if self.engine.is_tie():
            return "It's a tie!"
        return f"Game in progress, player {self.engine.current_player.value} to move."

    # Non-interactive commands

    def replay(self, moves: List[int]) -> int:
        """Apply ``moves`` in order, printing every placement and the result."""
        self.engine.initialize()

        for number, column in enumerate(moves, start=1):
            placement = self.engine.drop_piece(column)
            if not placement.accepted:
                print(f"Move {number}: column {column} ignored ({placement.outcome.name})")
                continue

            print(f"\nMove {number}: player {placement.player.value} plays column {column} "
                  f"(row {placement.row})")
            print(self.engine.render())

        print(self.describe_result())
        return 0

    def check_position(self, values: List[int]) -> int:
        board = Board.from_values(values)
        print("Loaded position:")
        print(board.render())

        print(f"Gravity: {'ok' if board.is_settled() else 'floating pieces found'}")
        for player in (Player.ONE, Player.TWO):
            found = 'yes' if board.has_four(player) else 'no'
            print(f"Player {player.value} ({player.symbol}) four-in-a-row: {found}")

        if board.is_full():
            print("Board is full")
        else:
            print(f"Empty spaces: {int((board.grid == Player.EMPTY.value).sum())}")

        valid = [col for col in range(board.cols) if board.find_landing_row(col) is not None]
        print(f"Valid moves: {valid}")
        return 0

    def benchmark(self, iterations: int, seed: Optional[int] = None) -> int:
        """
        Play random games and time both win scans after every move.

        Returns 1 if the scans ever disagree.
        """
        if iterations < 1:
            raise ValueError("iterations must be positive")

        rng = random.Random(seed)
        full_scan = 0.0
        local_scan = 0.0
        checks = 0

        print(f"Running benchmark with {iterations} games...")
        for _ in range(iterations):
            self.engine.initialize()
            while not self.engine.is_game_over():
                placement = self.engine.drop_piece(rng.choice(self.engine.get_valid_moves()))
                board = self.engine.board

                start = time.perf_counter()
                full = board.has_four(placement.player)
                full_scan += time.perf_counter() - start

                start = time.perf_counter()
                local = board.has_four_through(placement.row, placement.column)
                local_scan += time.perf_counter() - start

                checks += 1
                if full != local:
                    print(f"Scan mismatch after {self.engine.moves_made} moves:")
                    print(board.render())
                    return 1

        print(f"Win checks: {checks}")
        print(f"Whole-board scan: {full_scan / checks * 1e6:.2f} us per check")
        print(f"Last-move scan:   {local_scan / checks * 1e6:.2f} us per check")
        return 0


def main(argv: Optional[List[str]] = None) -> int:
    return SimpleCLI().run(argv)


if __name__ == "__main__":
    sys.exit(main())

"""
engine.py - Game state and move processing for Connect Four

GameEngine owns one board and the turn state for a single game session.
Callers submit a column per turn through :meth:`GameEngine.drop_piece` and
receive a :class:`PlacementResult` describing what happened; rejected moves
are reported as results and never raised.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, List, Optional

from connectfour.debug import debug
from connectfour.game.board import Board
from connectfour.utils import ROWS, COLS, Player, GameResult


class MoveOutcome(Enum):
    """What a call to drop_piece did."""
    PLACED = auto()
    WIN = auto()
    TIE = auto()
    COLUMN_FULL = auto()
    INVALID_COLUMN = auto()
    GAME_ALREADY_OVER = auto()

    def is_accepted(self) -> bool:
        """True when a piece was written to the board."""
        return self in (MoveOutcome.PLACED, MoveOutcome.WIN, MoveOutcome.TIE)

    def is_terminal(self) -> bool:
        return self in (MoveOutcome.WIN, MoveOutcome.TIE)


@dataclass(frozen=True)
class PlacementResult:
    """Outcome of one drop_piece call; row and player are None for rejected moves."""
    outcome: MoveOutcome
    column: Any
    row: Optional[int] = None
    player: Optional[Player] = None

    @property
    def accepted(self) -> bool:
        return self.outcome.is_accepted()


class GameEngine:
    """
    Two-player Connect Four game.

    Player ONE always moves first. After a win or tie the engine refuses
    further moves until :meth:`initialize` starts a new game.
    """

    def __init__(self, rows: int = ROWS, cols: int = COLS):
        """
        Create the board and start a game.

        Raises:
            ValueError: if either dimension is too small for a four-in-a-row
        """
        self.board = Board(rows, cols)
        self.initialize()

    def initialize(self) -> None:
        """Start a new game: empty board, player ONE to move."""
        debug.debug("Starting new game", "engine")
        self.board.reset()
        self.current_player = Player.ONE
        self.result = GameResult.IN_PROGRESS
        self.moves_made = 0
        self.last_placement: Optional[PlacementResult] = None

    @property
    def rows(self) -> int:
        return self.board.rows

    @property
    def cols(self) -> int:
        return self.board.cols

    def find_landing_row(self, column: int) -> Optional[int]:
        """
        Row a piece dropped into ``column`` would land in, or None if the
        column is full. Raises ValueError for a column outside the board.
        """
        return self.board.find_landing_row(column)

    def drop_piece(self, column) -> PlacementResult:
        """
        Drop the current player's piece into ``column``.

        Args:
            column: Column index, 0 being the leftmost column

        Returns:
            PlacementResult with outcome PLACED, WIN or TIE when a piece was
            placed, or INVALID_COLUMN, GAME_ALREADY_OVER or COLUMN_FULL when
            the move was rejected and nothing changed
        """
        if not self.board.is_valid_column(column):
            debug.warning(f"Rejected move: column {column!r} out of range", "engine")
            return PlacementResult(MoveOutcome.INVALID_COLUMN, column)
        column = int(column)

        if self.result.is_game_over():
            debug.debug(f"Rejected move in column {column}: game is over ({self.result.name})",
                        "engine")
            return PlacementResult(MoveOutcome.GAME_ALREADY_OVER, column)

        row = self.find_landing_row(column)
        if row is None:
            debug.debug(f"Rejected move: column {column} is full", "engine")
            return PlacementResult(MoveOutcome.COLUMN_FULL, column)

        mover = self.current_player
        self.board.place(row, column, mover)
        self.moves_made += 1

        # A move that completes four and fills the board is a win, not a tie
        if self.check_for_win():
            self.result = GameResult.win_for(mover)
            outcome = MoveOutcome.WIN
            debug.info(f"Player {mover.name} wins with ({row}, {column})", "engine")
        elif self.board.is_full():
            self.result = GameResult.TIE
            outcome = MoveOutcome.TIE
            debug.info("Board full: tie", "engine")
        else:
            self.current_player = mover.other()
            outcome = MoveOutcome.PLACED
            debug.debug(f"Player {mover.name} placed at ({row}, {column}); "
                        f"{self.current_player.name} to move", "engine")

        self.last_placement = PlacementResult(outcome, column, row, mover)
        return self.last_placement

    def check_for_win(self) -> bool:
        """Whether the current player owns a four-in-a-row anywhere on the board."""
        debug.start_timer("win_check")
        found = self.board.has_four(self.current_player)
        debug.end_timer("win_check", "engine")
        return found

    def is_tie(self) -> bool:
        """True once the board filled up without a winner."""
        return self.result == GameResult.TIE

    def is_game_over(self) -> bool:
        """True after a win or a tie."""
        return self.result.is_game_over()

    def get_winner(self) -> Optional[Player]:
        """
        Get the winner of the game.

        Returns:
            The winning player, or None while in progress or after a tie
        """
        return self.result.winner()

    def get_valid_moves(self) -> List[int]:
        """Columns that can still take a piece; empty once the game is over."""
        if self.is_game_over():
            return []
        return [col for col in range(self.cols) if self.board.find_landing_row(col) is not None]

    def render(self) -> str:
        """String drawing of the current board."""
        return self.board.render()

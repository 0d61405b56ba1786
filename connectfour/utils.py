"""
utils.py - Constants, enumerations and helpers for the Connect Four engine

This module holds the board dimensions, the cell/player enumeration, the game
result enumeration and the direction vectors used by the win scan.
"""

from enum import Enum, auto
from typing import Optional

import numpy as np

# Game constants
ROWS = 6
COLS = 7
CONNECT_N = 4  # Number of pieces in a row to win


class Player(Enum):
    """Cell contents: empty, or owned by one of the two players."""
    EMPTY = 0
    ONE = 1
    TWO = 2

    def other(self) -> 'Player':
        """Get the opposing player."""
        if self == Player.ONE:
            return Player.TWO
        if self == Player.TWO:
            return Player.ONE
        raise ValueError("EMPTY has no opponent")

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]

    def __str__(self):
        return self.symbol


_SYMBOLS = {Player.EMPTY: ".", Player.ONE: "X", Player.TWO: "O"}


class GameResult(Enum):
    """Outcome of the game so far."""
    IN_PROGRESS = auto()
    PLAYER_ONE_WIN = auto()
    PLAYER_TWO_WIN = auto()
    TIE = auto()

    @classmethod
    def win_for(cls, player: Player) -> 'GameResult':
        if player == Player.ONE:
            return cls.PLAYER_ONE_WIN
        if player == Player.TWO:
            return cls.PLAYER_TWO_WIN
        raise ValueError(f"No win result for {player!r}")

    def is_game_over(self) -> bool:
        return self != GameResult.IN_PROGRESS

    def winner(self) -> Optional[Player]:
        if self == GameResult.PLAYER_ONE_WIN:
            return Player.ONE
        if self == GameResult.PLAYER_TWO_WIN:
            return Player.TWO
        return None


class Direction(Enum):
    """Ray directions scanned for four-in-a-row."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_DOWN_RIGHT = auto()
    DIAGONAL_DOWN_LEFT = auto()


# (row, col) step for each direction; row grows downwards
DIRECTION_VECTORS = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_DOWN_RIGHT: (1, 1),
    Direction.DIAGONAL_DOWN_LEFT: (1, -1),
}


def validate_dimensions(rows: int, cols: int) -> None:
    """
    Fail fast on a board too small to ever hold a four-in-a-row.

    Raises:
        ValueError: if either dimension is below CONNECT_N
    """
    if rows < CONNECT_N or cols < CONNECT_N:
        raise ValueError(
            f"Board must be at least {CONNECT_N}x{CONNECT_N}, got {rows}x{cols}")


def is_column_index(value) -> bool:
    """True for plain or numpy integers; bools are rejected."""
    return isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_))


def parse_int_list(text: str) -> list:
    """Parse a comma-separated list of integers such as "0,0,1,1"."""
    items = [item.strip() for item in text.split(',') if item.strip()]
    try:
        return [int(item) for item in items]
    except ValueError:
        raise ValueError(f"Expected comma-separated integers, got {text!r}") from None


def render_board_ascii(grid: np.ndarray) -> str:
    """
    Render a grid of Player values as ASCII art.

    Args:
        grid: 2D array of cell values (0 empty, 1 player one, 2 player two)

    Returns:
        Board drawing with column numbers underneath
    """
    rows, cols = grid.shape
    border = "|" + "-" * (cols * 2 - 1) + "|"

    lines = [border]
    for row in range(rows):
        cells = (Player(int(value)).symbol for value in grid[row])
        lines.append("|" + " ".join(cells) + "|")
    lines.append(border)
    lines.append("|" + " ".join(str(col % 10) for col in range(cols)) + "|")

    return "\n".join(lines)

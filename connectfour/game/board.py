"""
board.py - Board representation for Connect Four

This module implements the Board class: a fixed-size grid with gravity,
landing-row lookup and the four-in-a-row scans. Row 0 is the top of the
board and row ``rows - 1`` the bottom.
"""

from typing import Iterable, Optional

import numpy as np

from connectfour.debug import debug
from connectfour.utils import (ROWS, COLS, CONNECT_N, DIRECTION_VECTORS, Player,
                               is_column_index, render_board_ascii, validate_dimensions)


class Board:
    """
    A Connect Four grid.

    Cells are stored as ``Player`` values in a numpy array and are always read
    back as ``Player`` members through :meth:`cell`.
    """

    def __init__(self, rows: int = ROWS, cols: int = COLS):
        validate_dimensions(rows, cols)
        self.rows = rows
        self.cols = cols
        self.reset()

    @classmethod
    def from_values(cls, values: Iterable[int], rows: int = ROWS, cols: int = COLS) -> 'Board':
        """
        Build a board from a flat, row-major sequence of cell values.

        Args:
            values: rows * cols integers, each 0 (empty), 1 or 2
            rows: Number of rows
            cols: Number of columns

        Raises:
            ValueError: on a wrong number of values or an unknown cell value
        """
        values = list(values)
        if len(values) != rows * cols:
            raise ValueError(f"Position must have {rows * cols} values, got {len(values)}")

        allowed = {player.value for player in Player}
        unknown = sorted(set(values) - allowed)
        if unknown:
            raise ValueError(f"Unknown cell values: {unknown}")

        board = cls(rows, cols)
        board.grid = np.array(values, dtype=np.int8).reshape(rows, cols)
        return board

    def reset(self) -> None:
        """Empty every cell."""
        debug.trace("Resetting board", "board")
        self.grid = np.zeros((self.rows, self.cols), dtype=np.int8)

    def copy(self) -> 'Board':
        """
        Create an independent copy of the board.

        Returns:
            A new Board with the same dimensions and cell values
        """
        new_board = Board(self.rows, self.cols)
        new_board.grid = self.grid.copy()
        return new_board

    def get_state(self) -> np.ndarray:
        """Copy of the underlying grid."""
        return self.grid.copy()

    def in_bounds(self, row: int, col: int) -> bool:
        """Check whether (row, col) lies on the board."""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def is_valid_column(self, col) -> bool:
        """
        Check whether ``col`` names a column of this board.

        Args:
            col: Candidate column; only integers (not bools) qualify

        Returns:
            True if ``col`` is an integer in 0..cols-1
        """
        return is_column_index(col) and 0 <= col < self.cols

    def cell(self, row: int, col: int) -> Player:
        """Contents of a cell as a Player member (EMPTY when unoccupied)."""
        return Player(int(self.grid[row, col]))

    def find_landing_row(self, col: int) -> Optional[int]:
        """
        Find the row a piece dropped into ``col`` would occupy.

        Scans from the bottom row upwards and returns the first empty row.

        Returns:
            Row index, or None if the column is full

        Raises:
            ValueError: if ``col`` is not a column of this board
        """
        if not self.is_valid_column(col):
            raise ValueError(f"Column {col!r} is outside 0..{self.cols - 1}")

        for row in range(self.rows - 1, -1, -1):
            if self.grid[row, col] == Player.EMPTY.value:
                return row
        return None

    def place(self, row: int, col: int, player: Player) -> None:
        """
        Write a piece into a cell. Callers pick ``row`` with find_landing_row.

        Args:
            row: Row index
            col: Column index
            player: Owner of the piece

        Raises:
            ValueError: if ``player`` is EMPTY
        """
        if player == Player.EMPTY:
            raise ValueError("Cannot place an EMPTY piece")
        debug.trace(f"Placing {player.name} at ({row}, {col})", "board")
        self.grid[row, col] = player.value

    def column_height(self, col: int) -> int:
        """Number of pieces currently in the column."""
        return int(np.count_nonzero(self.grid[:, col]))

    def is_full(self) -> bool:
        """True when no empty cell remains."""
        return not np.any(self.grid == Player.EMPTY.value)

    def is_settled(self) -> bool:
        """
        Check that every column is stacked from the bottom with no gaps.

        Returns:
            False if any occupied cell has an empty cell below it
        """
        for col in range(self.cols):
            occupied = self.grid[:, col] != Player.EMPTY.value
            height = int(np.count_nonzero(occupied))
            if height and not occupied[self.rows - height:].all():
                return False
        return True

    def _ray_owned(self, row: int, col: int, dr: int, dc: int, value: int) -> bool:
        for k in range(CONNECT_N):
            r, c = row + k * dr, col + k * dc
            if not self.in_bounds(r, c) or self.grid[r, c] != value:
                return False
        return True

    def has_four(self, player: Player) -> bool:
        """
        Whole-board scan for a four-in-a-row owned by ``player``.

        Every cell is tried as the origin of a ray in each direction.
        """
        if player == Player.EMPTY:
            return False

        value = player.value
        for row in range(self.rows):
            for col in range(self.cols):
                for dr, dc in DIRECTION_VECTORS.values():
                    if self._ray_owned(row, col, dr, dc, value):
                        return True
        return False

    def has_four_through(self, row: int, col: int) -> bool:
        """
        Check only the lines passing through ``(row, col)``.

        Equivalent to :meth:`has_four` for the owner of the cell when the cell
        holds the most recently placed piece.
        """
        value = self.grid[row, col]
        if value == Player.EMPTY.value:
            return False

        for dr, dc in DIRECTION_VECTORS.values():
            count = 1

            r, c = row + dr, col + dc
            while self.in_bounds(r, c) and self.grid[r, c] == value:
                count += 1
                r += dr
                c += dc

            r, c = row - dr, col - dc
            while self.in_bounds(r, c) and self.grid[r, c] == value:
                count += 1
                r -= dr
                c -= dc

            if count >= CONNECT_N:
                return True

        return False

    def render(self) -> str:
        """
        Render the board as a string.

        Returns:
            ASCII drawing with X for player one and O for player two
        """
        return render_board_ascii(self.grid)

    def __str__(self) -> str:
        """String representation of the board."""
        return self.render()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.grid.shape == other.grid.shape and bool(np.array_equal(self.grid, other.grid))

    __hash__ = None

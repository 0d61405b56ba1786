from connectfour.game.engine import GameEngine


def column_pair(left, right):
    """Twelve moves filling two columns as 1,1,2,2,1,1 and 2,2,1,1,2,2 (bottom up)."""
    return [left, right, left, right,
            right, left, right, left,
            left, right, left, right]


# 42 alternating moves that fill a 6x7 board without any four-in-a-row.
# Columns 0-5 are stacked in pairs of two and column 6 alternates 1,2,1,2,1,2.
TIE_MOVES = column_pair(0, 1) + column_pair(2, 3) + column_pair(4, 5) + [6] * 6

# 42 alternating moves whose last move, player two into the top of column 6,
# completes O O O O along the top row while filling the board. Column 1 is
# stacked 2,2,1,1,1,2 and column 4 is 1,1,2,2,1,2 (bottom up); no other
# four-in-a-row exists on the final board.
WIN_ON_LAST_CELL_MOVES = (column_pair(2, 3)
                          + [4, 1, 4, 1, 1, 4, 1, 4, 1, 1, 4, 4]
                          + column_pair(0, 5)
                          + [6] * 6)

# Player one builds columns 0-3 on the bottom row, player two stacks on top
BOTTOM_ROW_WIN_MOVES = [0, 0, 1, 1, 2, 2, 3]


def play(engine: GameEngine, moves):
    return [engine.drop_piece(column) for column in moves]

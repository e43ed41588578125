"""Board engine: pure grid logic with no knowledge of rooms or sockets."""

from typing import List

ROWS = 9
COLS = 9
WIN_LENGTH = 5

EMPTY = 0
FULL = -1

Board = List[List[int]]

# (row step, col step) for horizontal, vertical and both diagonals
_AXES = ((0, 1), (1, 0), (1, 1), (-1, 1))


def create_board() -> Board:
    return [[EMPTY for _ in range(COLS)] for _ in range(ROWS)]


def get_open_row(board: Board, col: int) -> int:
    """Return the lowest empty row in ``col``, or FULL when there is none.

    Row 0 is the top of the grid, so the search runs bottom-up. Columns
    outside the grid are reported as FULL rather than raising.
    """
    if not isinstance(col, int) or isinstance(col, bool) or not 0 <= col < len(board[0]):
        return FULL
    for row in range(len(board) - 1, -1, -1):
        if board[row][col] == EMPTY:
            return row
    return FULL


def legal_columns(board: Board) -> List[int]:
    return [c for c in range(len(board[0])) if board[0][c] == EMPTY]


def _run_length(board: Board, row: int, col: int, d_row: int, d_col: int, player: int) -> int:
    count = 0
    r, c = row + d_row, col + d_col
    while 0 <= r < len(board) and 0 <= c < len(board[0]) and board[r][c] == player:
        count += 1
        r += d_row
        c += d_col
    return count


def check_winner(board: Board, row: int, col: int, player: int) -> bool:
    """True if the mark just placed at (row, col) completed a run of WIN_LENGTH.

    Only the four lines through the placed cell are scanned, so this must be
    called once per placement, at the placed cell.
    """
    for d_row, d_col in _AXES:
        count = 1
        count += _run_length(board, row, col, d_row, d_col, player)
        count += _run_length(board, row, col, -d_row, -d_col, player)
        if count >= WIN_LENGTH:
            return True
    return False

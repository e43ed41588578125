"""Turn arbiter: the only place a move is allowed to touch a board."""

from dropfive.errors import ColumnFull, MatchAlreadyDecided, OutOfTurn
from dropfive.models import GameState, MoveResult, PLAYER_COLORS
from dropfive.services.games.board import FULL, check_winner, get_open_row


def other_seat(player_number: int) -> int:
    return 2 if player_number == 1 else 1


def make_move(game_state: GameState, col: int, player_number: int) -> MoveResult:
    """Apply a drop for ``player_number`` in ``col``.

    Raises MatchAlreadyDecided, OutOfTurn or ColumnFull without touching the
    state. On a winning drop the winner is recorded and the turn is left as
    is; otherwise the turn passes to the other seat.
    """
    if game_state.winner:
        raise MatchAlreadyDecided()
    if game_state.turn != player_number:
        raise OutOfTurn()

    row = get_open_row(game_state.board, col)
    if row == FULL:
        raise ColumnFull()

    game_state.board[row][col] = player_number
    game_state.last_drop = {'row': row, 'col': col}

    if check_winner(game_state.board, row, col, player_number):
        game_state.winner = PLAYER_COLORS[player_number]
    else:
        game_state.turn = other_seat(player_number)

    return MoveResult(
        success=True,
        row=row,
        col=col,
        player_number=player_number,
        winner=game_state.winner,
    )

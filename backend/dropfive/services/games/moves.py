"""Submit-move service shared by the Socket.IO and HTTP adapters.

Both adapters resolve the room and seat their own way and then call
``submit_move``; the arbiter call and the room broadcast live only here.
"""

import re
from dataclasses import replace
from typing import Optional

from flask import current_app

from dropfive.errors import MalformedRequest
from dropfive.models import MoveResult, Participant, Room
from dropfive.realtime import broadcast
from dropfive.services.games.arbiter import make_move

MOVE_ID_PATTERN = re.compile(r'^[A-Za-z0-9_-]{1,64}$')


def validate_move_id(move_id) -> Optional[str]:
    if move_id is None:
        return None
    if not isinstance(move_id, str) or not MOVE_ID_PATTERN.fullmatch(move_id):
        raise MalformedRequest('move_id must be 1-64 characters of [A-Za-z0-9_-]')
    return move_id


def parse_column(value) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedRequest('col must be an integer')
    return value


def _remember(room: Room, key, result: MoveResult) -> None:
    limit = int(current_app.config.get('MAX_TRACKED_MOVE_IDS', 300))
    room.applied_moves[key] = result
    while len(room.applied_moves) > limit:
        room.applied_moves.popitem(last=False)


def submit_move(room: Room, participant: Participant, col, move_id: Optional[str] = None) -> MoveResult:
    """Run one drop through the arbiter and broadcast the new state.

    A ``move_id`` this seat already used in the current game returns the stored
    result flagged as a duplicate; the arbiter is not called again and nothing
    is broadcast.
    """
    col = parse_column(col)
    move_id = validate_move_id(move_id)
    key = (participant.player_number, move_id)
    if move_id is not None and key in room.applied_moves:
        previous = room.applied_moves[key]
        current_app.logger.info(f"[move-duplicate] code={room.code} move_id={move_id}")
        return replace(previous, duplicate=True)

    result = make_move(room.game_state, col, participant.player_number)
    if move_id is not None:
        _remember(room, key, result)

    current_app.logger.info(
        f"[move] code={room.code} seat={participant.player_number} col={result.col} row={result.row}"
    )
    broadcast(room.code, 'move-made', {'gameState': room.game_state.to_dict()})
    if result.winner:
        current_app.logger.info(f"[game-over] code={room.code} winner={result.winner}")
        broadcast(room.code, 'game-over', {'winner': result.winner})
    return result

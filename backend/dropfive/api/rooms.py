from flask import Blueprint, current_app, jsonify, request

from dropfive.errors import GameError, MalformedRequest
from dropfive.realtime import get_store
from dropfive.services.games.moves import submit_move
from dropfive.services.games.readiness import ready_status

rooms = Blueprint('rooms', __name__)


@rooms.errorhandler(GameError)
def handle_game_error(exc):
    current_app.logger.info(f"[rejected] path={request.path} code={exc.code} reason={exc.message}")
    return jsonify(exc.to_dict()), exc.status


@rooms.route('/<string:room_code>/state', methods=['GET'])
def get_room_state(room_code):
    room = get_store().get_room(room_code)
    payload = room.game_state.to_dict()
    payload['phase'] = room.phase
    payload['readyStatus'] = ready_status(room).to_dict()
    return jsonify(payload)


@rooms.route('/<string:room_code>/moves', methods=['POST'])
def submit_move_call(room_code):
    """Fallback for clients whose socket is unavailable.

    The caller names its room and identity explicitly. The resulting state is
    returned directly and also broadcast to the room's sockets, exactly as a
    `make-move` event would.
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise MalformedRequest('A JSON object body is required')
    player_id = data.get('player_id')
    if not isinstance(player_id, str) or not player_id:
        raise MalformedRequest('player_id is required')
    if 'col' not in data:
        raise MalformedRequest('col is required')

    store = get_store()
    room = store.get_room(room_code)
    participant = store.participant_for(room, player_id)
    result = submit_move(room, participant, data['col'], data.get('move_id'))

    payload = result.to_dict()
    payload['gameState'] = room.game_state.to_dict()
    return jsonify(payload)

from functools import wraps

from flask import current_app, request
from flask_socketio import emit, join_room, leave_room

from dropfive.errors import GameError, MalformedRequest
from dropfive.realtime import broadcast, get_store, namespace, room_channel
from dropfive.services.games.moves import submit_move
from dropfive.services.games.readiness import ready_status, set_ready, should_start


def _get_sid() -> str:
    # request.sid exists in Socket.IO context
    return request.sid  # type: ignore


def _rejects_to_caller(handler):
    """Turn a GameError into an `error` event for the requesting socket only."""
    @wraps(handler)
    def wrapper(*args, **kwargs):
        try:
            return handler(*args, **kwargs)
        except GameError as exc:
            current_app.logger.info(f"[rejected] sid={_get_sid()} code={exc.code} reason={exc.message}")
            emit('error', {'message': exc.message, 'code': exc.code})
    return wrapper


def _payload(data) -> dict:
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise MalformedRequest('Event payload must be an object')
    return data


def _handle_leave(sid: str) -> None:
    result = get_store().leave(sid)
    if result is None:
        return
    leave_room(room_channel(result.room_code), sid=sid, namespace=namespace())
    if result.destroyed:
        current_app.logger.info(f"[room-deleted] code={result.room_code} (empty)")
        return
    current_app.logger.info(f"[left] code={result.room_code} sid={sid} seat={result.player_number}")
    broadcast(result.room_code, 'opponent-left')


def _start_if_ready(room) -> None:
    if should_start(room):
        current_app.logger.info(f"[game-start] code={room.code}")
        broadcast(room.code, 'game-start', {'gameState': room.game_state.to_dict()})


def handle_connect(auth=None):
    current_app.logger.info(f"[connect] sid={_get_sid()}")


def handle_disconnect(reason=None):
    sid = _get_sid()
    current_app.logger.info(f"[disconnect] sid={sid}")
    _handle_leave(sid)


@_rejects_to_caller
def handle_create_room(data=None):
    sid = _get_sid()
    _handle_leave(sid)
    room = get_store().create_room(sid)
    join_room(room_channel(room.code))
    current_app.logger.info(f"[room-created] code={room.code} sid={sid}")
    emit('room-created', {'roomCode': room.code})


@_rejects_to_caller
def handle_join_room(data=None):
    sid = _get_sid()
    code = _payload(data).get('roomCode')
    if not isinstance(code, str) or not code.strip():
        raise MalformedRequest('roomCode is required')
    store = get_store()
    target = store.get_room(code.strip())
    # rejected joins must not disturb the room the caller is leaving
    store.check_joinable(target, sid)
    if store.player_rooms.get(sid) not in (None, target.code):
        _handle_leave(sid)

    room, player_number = store.join_room(target.code, sid)
    join_room(room_channel(room.code))
    current_app.logger.info(f"[room-joined] code={room.code} sid={sid} seat={player_number}")
    emit('room-joined', {'gameState': room.game_state.to_dict(), 'playerNumber': player_number})

    broadcast(room.code, 'player-joined-waiting', {'playerCount': len(room.player_ids)})
    broadcast(room.code, 'ready-update', {'readyStatus': ready_status(room).to_dict()})
    _start_if_ready(room)


@_rejects_to_caller
def handle_set_ready(data=None):
    sid = _get_sid()
    ready = _payload(data).get('ready')
    if not isinstance(ready, bool):
        raise MalformedRequest('ready must be true or false')
    store = get_store()
    room = store.room_for(sid)
    store.participant_for(room, sid)

    status = set_ready(room, sid, ready)
    broadcast(room.code, 'ready-update', {'readyStatus': status.to_dict()})
    _start_if_ready(room)


@_rejects_to_caller
def handle_make_move(data=None):
    sid = _get_sid()
    payload = _payload(data)
    store = get_store()
    room = store.room_for(sid)
    participant = store.participant_for(room, sid)
    result = submit_move(room, participant, payload.get('col'), payload.get('move_id'))
    # Returned value is delivered as the Socket.IO ack when the client asks for one
    return result.to_dict()


@_rejects_to_caller
def handle_play_again(data=None):
    store = get_store()
    room = store.room_for(_get_sid())
    state = store.reset_for_rematch(room)
    current_app.logger.info(f"[rematch] code={room.code}")
    broadcast(room.code, 'game-restart', {'gameState': state.to_dict()})


def handle_leave_room(data=None):
    _handle_leave(_get_sid())


def register_socketio_handlers(ns: str = '/ws') -> None:
    """Register Socket.IO event handlers on the given namespace."""
    from dropfive import socketio

    socketio.on_event('connect', handle_connect, namespace=ns)
    socketio.on_event('disconnect', handle_disconnect, namespace=ns)
    socketio.on_event('create-room', handle_create_room, namespace=ns)
    socketio.on_event('join-room', handle_join_room, namespace=ns)
    socketio.on_event('set-ready', handle_set_ready, namespace=ns)
    socketio.on_event('make-move', handle_make_move, namespace=ns)
    socketio.on_event('play-again', handle_play_again, namespace=ns)
    socketio.on_event('leave-room', handle_leave_room, namespace=ns)

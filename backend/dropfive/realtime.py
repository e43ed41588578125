from flask import current_app

from dropfive import socketio


def room_channel(code: str) -> str:
    return f"room:{code}"


def namespace() -> str:
    return current_app.config.get('SOCKETIO_NAMESPACE', '/ws')


def broadcast(code: str, event: str, payload=None) -> None:
    """Emit ``event`` to every connection subscribed to the room's channel."""
    if payload is None:
        socketio.emit(event, to=room_channel(code), namespace=namespace())
    else:
        socketio.emit(event, payload, to=room_channel(code), namespace=namespace())


def get_store():
    return current_app.extensions['dropfive.store']

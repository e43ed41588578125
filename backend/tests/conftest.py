import os
import sys
import pytest

# Ensure the backend root (containing the `dropfive` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from dropfive import create_app, socketio


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    CORS_ORIGINS = ['http://localhost:5173']
    SOCKETIO_NAMESPACE = '/ws'
    MAX_TRACKED_MOVE_IDS = 300


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def store(flask_app):
    return flask_app.extensions['dropfive.store']


@pytest.fixture()
def sio_factory(flask_app):
    """Build Socket.IO test clients on /ws; all are disconnected on teardown."""
    created = []

    def _make():
        test_client = socketio.test_client(
            flask_app,
            flask_test_client=flask_app.test_client(),
            namespace='/ws'
        )
        created.append(test_client)
        return test_client

    yield _make
    for test_client in created:
        try:
            if test_client.is_connected('/ws'):
                test_client.disconnect(namespace='/ws')
        except Exception:
            pass


def payloads(received, name):
    """Args of every `name` packet in a get_received() batch."""
    return [pkt['args'][0] if pkt['args'] else None for pkt in received if pkt['name'] == name]


@pytest.fixture()
def seated_pair(sio_factory, store, monkeypatch):
    """Two connected sockets seated in room WXYZ, queues flushed."""
    monkeypatch.setattr(store, '_code_factory', lambda: 'WXYZ')
    host = sio_factory()
    guest = sio_factory()
    host.emit('create-room', namespace='/ws')
    guest.emit('join-room', {'roomCode': 'wxyz'}, namespace='/ws')
    host.get_received('/ws')
    guest.get_received('/ws')
    room = store.get_room('WXYZ')
    host_id, guest_id = (p.id for p in room.game_state.players)
    return host, guest, host_id, guest_id

from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from config import Config

socketio = SocketIO(async_mode=None)

def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    allowed_origins = flask_app.config.get('CORS_ORIGINS') or []

    CORS(flask_app, origins=allowed_origins)
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    # One store per application; handlers reach it through get_store()
    from dropfive.rooms import RoomStore
    flask_app.extensions['dropfive.store'] = RoomStore()

    from dropfive.main import main
    flask_app.register_blueprint(main)

    from dropfive.api.rooms import rooms
    flask_app.register_blueprint(rooms, url_prefix='/api/rooms')

    from dropfive.socketio_events import register_socketio_handlers
    register_socketio_handlers(flask_app.config.get('SOCKETIO_NAMESPACE', '/ws'))

    return flask_app

import os

def _split_origins(raw):
    return [o.strip() for o in raw.split(',') if o.strip()]

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    # Comma-separated list of origins allowed for HTTP and Socket.IO
    CORS_ORIGINS = _split_origins(os.environ.get('CORS_ORIGINS', 'http://localhost:5173,http://localhost:5174'))
    SOCKETIO_NAMESPACE = os.environ.get('SOCKETIO_NAMESPACE', '/ws')
    HOST = os.environ.get('HOST', '0.0.0.0')
    PORT = int(os.environ.get('PORT', '3001'))
    # How many client move ids each room remembers for duplicate suppression
    MAX_TRACKED_MOVE_IDS = int(os.environ.get('MAX_TRACKED_MOVE_IDS', '300'))

from flask import Blueprint, jsonify

from dropfive.realtime import get_store

main = Blueprint('main', __name__)

@main.route('/')
def index():
    return jsonify({'message': 'Welcome to the Drop Five game server!'})

@main.route('/health')
def health():
    return jsonify({'status': 'ok', 'rooms': len(get_store())})

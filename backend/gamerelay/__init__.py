from flask import Flask, request
from flask_cors import CORS
from flask_socketio import SocketIO
import click
from gamerelay.config import Config
from gamerelay.services import BackendRelay, RelayError

CORS_ALLOW_METHODS = 'POST, GET, OPTIONS'
CORS_ALLOW_HEADERS = 'Content-Type'

socketio = SocketIO(cors_allowed_origins='*', async_mode=None)

def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    CORS(flask_app, origins='*', send_wildcard=True, methods=CORS_ALLOW_METHODS.split(', '), allow_headers=[CORS_ALLOW_HEADERS])
    socketio.init_app(flask_app, cors_allowed_origins='*')

    # One relay per app; every call still opens its own connection
    flask_app.extensions['relay'] = BackendRelay.from_config(flask_app.config, logger=flask_app.logger)

    @flask_app.before_request
    def answer_preflight():
        # Any path, routed or not, gets a permissive preflight answer
        if request.method == 'OPTIONS':
            response = flask_app.response_class(status=200)
            response.headers['Access-Control-Allow-Origin'] = '*'
            response.headers['Access-Control-Allow-Methods'] = CORS_ALLOW_METHODS
            response.headers['Access-Control-Allow-Headers'] = CORS_ALLOW_HEADERS
            return response

    from gamerelay.main import main
    flask_app.register_blueprint(main)

    from gamerelay.api.relay import relay_api
    flask_app.register_blueprint(relay_api)

    try:
        from gamerelay.socketio_events import register_socketio_handlers
        register_socketio_handlers(testing=flask_app.config.get('TESTING', False))
    except Exception as exc:
        flask_app.logger.warning(f"SocketIO events not loaded: {exc}")

    @click.command('relay-send')
    @click.argument('command')
    def relay_send_command(command):
        """Sends COMMAND to the game server and prints its reply."""
        relay = flask_app.extensions['relay']
        try:
            response = relay.send(command)
        except RelayError as exc:
            raise click.ClickException(f"Relay to {relay.address} failed: {exc.reason}")
        click.echo(response)

    flask_app.cli.add_command(relay_send_command)

    return flask_app

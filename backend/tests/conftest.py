import os
import sys
import socketserver
import threading
import pytest

# Ensure the backend root (containing the `gamerelay` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from gamerelay import create_app, socketio


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    BACKEND_HOST = '127.0.0.1'
    BACKEND_PORT = 12345
    RELAY_TIMEOUT_SEC = 2.0
    RELAY_READ_SIZE = 4096
    RELAY_ENCODING = 'utf-8'
    RELAY_STRICT_ERRORS = False
    LOG_LEVEL = 'DEBUG'


class _BackendHandler(socketserver.BaseRequestHandler):
    def handle(self):
        server = self.server
        data = self.request.recv(1024)
        with server.lock:
            server.received.append(data)
            server.connections += 1
            index = server.connections
        if server.barrier is not None:
            server.barrier.wait()
        if server.mode == 'hang':
            server.release.wait(timeout=10)
            return
        if server.mode == 'close':
            return
        reply = server.reply(data, index) if callable(server.reply) else server.reply
        self.request.sendall(reply)


class FakeBackend(socketserver.ThreadingTCPServer):
    """In-process game server: records each command and answers per test setup.

    mode 'reply' sends ``reply`` (bytes, or callable(data, index) -> bytes),
    'close' hangs up without answering, 'hang' keeps the socket open silently.
    """
    daemon_threads = True
    allow_reuse_address = True

    def __init__(self):
        super().__init__(('127.0.0.1', 0), _BackendHandler)
        self.lock = threading.Lock()
        self.received = []
        self.connections = 0
        self.mode = 'reply'
        self.reply = b'OK'
        self.barrier = None
        self.release = threading.Event()

    @property
    def port(self):
        return self.server_address[1]


@pytest.fixture()
def backend():
    server = FakeBackend()
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield server
    server.release.set()
    server.shutdown()
    server.server_close()


@pytest.fixture()
def unused_port():
    # Bind then release so nothing is listening on the returned port
    with socketserver.TCPServer(('127.0.0.1', 0), socketserver.BaseRequestHandler) as probe:
        port = probe.server_address[1]
    return port


def make_config(**overrides):
    return type('TestConfig', (TestConfig,), overrides)


@pytest.fixture()
def app_factory(backend):
    """Build an app pointed at the fake backend, with config overrides."""
    def _factory(**overrides):
        overrides.setdefault('BACKEND_PORT', backend.port)
        return create_app(make_config(**overrides))
    return _factory


@pytest.fixture()
def flask_app(app_factory):
    application = app_factory()
    with application.app_context():
        yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def runner(flask_app):
    return flask_app.test_cli_runner()


@pytest.fixture()
def sio_client(flask_app):
    test_client = socketio.test_client(
        flask_app,
        flask_test_client=flask_app.test_client(),
        namespace='/ws'
    )
    yield test_client
    try:
        test_client.disconnect(namespace='/ws')
    except Exception:
        pass

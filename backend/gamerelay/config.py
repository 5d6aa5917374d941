import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    # Game server the relay forwards commands to
    BACKEND_HOST = os.environ.get('BACKEND_HOST', 'localhost')
    BACKEND_PORT = int(os.environ.get('BACKEND_PORT', '12345'))
    # Address the relay itself listens on
    RELAY_HOST = os.environ.get('RELAY_HOST', '0.0.0.0')
    RELAY_PORT = int(os.environ.get('RELAY_PORT', '3000'))
    # Upper bound (seconds) on connect + first read for a single relay call
    RELAY_TIMEOUT_SEC = float(os.environ.get('RELAY_TIMEOUT_SEC', '5'))
    # Size of the one-shot read; larger backend replies are truncated
    RELAY_READ_SIZE = int(os.environ.get('RELAY_READ_SIZE', '4096'))
    RELAY_ENCODING = os.environ.get('RELAY_ENCODING', 'utf-8')
    # Respond 502 instead of 200 + null when the backend can't be reached
    RELAY_STRICT_ERRORS = os.environ.get('RELAY_STRICT_ERRORS', '').lower() in ('1', 'true', 'yes')
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

import logging
import socket
import time
from enum import Enum
from typing import Optional


class Command(str, Enum):
    """Commands the game server understands."""
    JOIN = 'JOIN'
    GET_GAME_STATE = 'GET_GAME_STATE'


class RelayError(Exception):
    """Backend unreachable, or the connection failed before a reply arrived."""

    def __init__(self, command: str, reason: str):
        super().__init__(f"{command}: {reason}")
        self.command = command
        self.reason = reason


class BackendRelay:
    """Forward one command per call to the game server over a fresh TCP connection.

    Each call connects, writes the raw command bytes (no framing, no
    terminator), reads once, and closes. The first chunk received is the whole
    response; anything the backend sends after it is dropped. Connect and read
    share one ``timeout`` deadline in seconds.
    """

    def __init__(self, host: str, port: int, timeout: float = 5.0,
                 read_size: int = 4096, encoding: str = 'utf-8',
                 logger: Optional[logging.Logger] = None):
        self.host = host
        self.port = port
        self.timeout = timeout
        self.read_size = read_size
        self.encoding = encoding
        self.logger = logger or logging.getLogger(__name__)

    @classmethod
    def from_config(cls, config, logger: Optional[logging.Logger] = None) -> 'BackendRelay':
        return cls(
            host=config.get('BACKEND_HOST', 'localhost'),
            port=int(config.get('BACKEND_PORT', 12345)),
            timeout=float(config.get('RELAY_TIMEOUT_SEC', 5)),
            read_size=int(config.get('RELAY_READ_SIZE', 4096)),
            encoding=config.get('RELAY_ENCODING', 'utf-8'),
            logger=logger,
        )

    @property
    def address(self) -> str:
        return f"{self.host}:{self.port}"

    def send(self, command: str) -> str:
        """Send ``command`` and return the decoded first chunk of the reply.

        ``timeout`` is one deadline for the whole exchange: the write and the
        read only get what the connect left over. Connect itself may try every
        address the host resolves to, each with the full timeout.

        Raises RelayError on any connection-level failure, on timeout, when the
        command can't be encoded, and when the backend closes the connection
        without sending anything.
        """
        command = _command_text(command)
        try:
            payload = command.encode(self.encoding)
        except UnicodeEncodeError as exc:
            raise RelayError(command, f"cannot encode command as {self.encoding}: {exc}") from exc

        deadline = time.monotonic() + self.timeout
        try:
            sock = socket.create_connection((self.host, self.port), timeout=self.timeout)
        except OSError as exc:
            raise RelayError(command, f"connect to {self.address} failed: {exc}") from exc

        try:
            sock.settimeout(self._remaining(command, deadline))
            sock.sendall(payload)
            sock.settimeout(self._remaining(command, deadline))
            chunk = sock.recv(self.read_size)
        except OSError as exc:
            raise RelayError(command, f"exchange with {self.address} failed: {exc}") from exc
        finally:
            sock.close()

        if not chunk:
            raise RelayError(command, f"{self.address} closed the connection without responding")
        return chunk.decode(self.encoding, errors='replace')

    def _remaining(self, command: str, deadline: float) -> float:
        remaining = deadline - time.monotonic()
        if remaining <= 0:
            raise RelayError(command, f"timed out after {self.timeout}s waiting on {self.address}")
        return remaining

    def relay(self, command: str) -> Optional[str]:
        """Send ``command``; return the reply text, or None if the backend call failed."""
        try:
            response = self.send(command)
        except RelayError as exc:
            self.logger.warning(f"[relay-error] {exc}")
            return None
        self.logger.info(f"[relay] command={_command_text(command)} backend={self.address} chars={len(response)}")
        return response


def _command_text(command) -> str:
    # Command members carry their wire value; plain strings pass through untouched
    if isinstance(command, Command):
        return command.value
    return command

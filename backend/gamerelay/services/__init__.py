"""Relay services: forwarding commands to the TCP game server.

Transport-agnostic logic lives here so that HTTP routes, Socket.IO handlers
and CLI commands all share one implementation of the backend call.
"""

from .relay import BackendRelay, Command, RelayError

__all__ = ['BackendRelay', 'Command', 'RelayError']

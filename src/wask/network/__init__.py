"""
Network backend components for wask.

This module provides the low-level networking abstractions:
the blocking network stream, the backend that opens it, and
in-memory mocks of both.
"""

from .backend import NetworkBackend, SocketNetworkBackend
from .stream import NetworkStream
from .socket_stream import SocketNetworkStream
from .mock import MockNetworkBackend, MockNetworkStream
from .utils import (
    DEFAULT_PORT,
    create_socket,
    resolve_ipv4,
    is_ipv4_address,
    validate_port,
)

__all__ = [
    "NetworkBackend",
    "SocketNetworkBackend",
    "NetworkStream",
    "SocketNetworkStream",
    "MockNetworkBackend",
    "MockNetworkStream",
    "DEFAULT_PORT",
    "create_socket",
    "resolve_ipv4",
    "is_ipv4_address",
    "validate_port",
]

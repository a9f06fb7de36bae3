"""
Network backend interface for wask.

This module defines the NetworkBackend interface that turns a host
name into a connected NetworkStream, and the socket implementation
used by the command line client.
"""

import logging
from abc import ABC, abstractmethod

from .socket_stream import SocketNetworkStream
from .stream import NetworkStream
from .utils import resolve_ipv4

logger = logging.getLogger(__name__)


class NetworkBackend(ABC):
    """
    Interface for network backend implementations.

    A backend resolves host names and opens TCP connections. Failures
    are fatal: no retries and no fallback addresses.
    """

    @abstractmethod
    def resolve(self, host: str) -> str:
        """
        Resolve a host name.

        Args:
            host: The host name taken from the URL.

        Returns:
            The IPv4 address to connect to.

        Raises:
            ResolutionFailed: If the name does not resolve.
        """
        pass

    @abstractmethod
    def connect_tcp(self, address: str, port: int) -> NetworkStream:
        """
        Connect to a TCP endpoint.

        Args:
            address: The IPv4 address to connect to.
            port: The port number to connect to.

        Returns:
            A NetworkStream representing the TCP connection.

        Raises:
            SocketCreationFailed: If the socket cannot be created.
            ConnectFailed: If the connection fails.
        """
        pass


class SocketNetworkBackend(NetworkBackend):
    """NetworkBackend using the system resolver and blocking sockets."""

    def resolve(self, host: str) -> str:
        address = resolve_ipv4(host)
        logger.debug(f"Resolved {host} to {address}")
        return address

    def connect_tcp(self, address: str, port: int) -> SocketNetworkStream:
        return SocketNetworkStream.connect(address, port)

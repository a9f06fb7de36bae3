"""
Socket-backed network stream for wask.
"""

import logging
import socket

from ..exceptions import (
    ConnectFailed,
    ReadFailed,
    SocketCreationFailed,
    StreamClosed,
    WriteFailed,
)
from .stream import NetworkStream
from .utils import DEFAULT_PORT, create_socket

logger = logging.getLogger(__name__)


class SocketNetworkStream(NetworkStream):
    """
    NetworkStream over a connected blocking TCP socket.

    No timeout is set on the socket: a peer that stops sending without
    closing blocks ``read_chunk`` indefinitely.
    """

    def __init__(self, sock: socket.socket) -> None:
        """
        Wrap an already connected socket.

        Args:
            sock: Connected socket; the stream takes ownership of it.
        """
        self._sock = sock
        self._closed = False

    @classmethod
    def connect(cls, address: str, port: int = DEFAULT_PORT) -> "SocketNetworkStream":
        """
        Open a TCP connection to an IPv4 address.

        Args:
            address: Dotted-quad IPv4 address.
            port: TCP port to connect to.

        Returns:
            A connected SocketNetworkStream.

        Raises:
            SocketCreationFailed: If the socket cannot be created.
            ConnectFailed: If the connection cannot be established.
        """
        try:
            sock = create_socket()
        except OSError as e:
            raise SocketCreationFailed(cause=e) from e

        try:
            sock.connect((address, port))
        except OSError as e:
            sock.close()
            raise ConnectFailed(address, port, cause=e) from e

        logger.debug(f"Connected to {address}:{port}")
        return cls(sock)

    def write_all(self, data: bytes) -> None:
        if self._closed:
            raise StreamClosed()

        view = memoryview(data)
        offset = 0
        while offset < len(view):
            try:
                sent = self._sock.send(view[offset:])
            except OSError as e:
                raise WriteFailed(cause=e) from e
            offset += sent

        logger.debug(f"Sent {offset} bytes")

    def read_chunk(self, capacity: int) -> bytes:
        if self._closed:
            raise StreamClosed()

        try:
            return self._sock.recv(capacity)
        except OSError as e:
            raise ReadFailed(cause=e) from e

    def close(self) -> None:
        if not self._closed:
            self._closed = True
            self._sock.close()

    @property
    def is_closed(self) -> bool:
        return self._closed

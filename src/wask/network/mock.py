"""
Mock network implementations for testing.

This module provides mock implementations of NetworkStream and NetworkBackend
that serve scripted reads and record writes, so the read loop can be tested
without actual network connections.
"""

from typing import Dict, Iterable, List, Optional, Tuple

from ..exceptions import (
    ConnectFailed,
    ReadFailed,
    ResolutionFailed,
    StreamClosed,
    WriteFailed,
)
from .backend import NetworkBackend
from .stream import NetworkStream


class MockNetworkStream(NetworkStream):
    """
    Mock network stream for testing.

    Reads return the scripted chunks one per call, each cut down to the
    requested capacity, then ``b""``. Writes are recorded; ``max_write``
    limits how many bytes a single write call accepts.
    """

    def __init__(
        self,
        chunks: Iterable[bytes] = (),
        max_write: Optional[int] = None,
        read_error: Optional[OSError] = None,
        write_error: Optional[OSError] = None,
    ):
        """
        Initialize the mock stream.

        Args:
            chunks: Data returned by successive reads.
            max_write: Maximum bytes accepted per write call, None for all.
            read_error: Raised as ReadFailed once the chunks are exhausted.
            write_error: Raised as WriteFailed on the first write call.
        """
        self._chunks: List[bytes] = list(chunks)
        self._max_write = max_write
        self._read_error = read_error
        self._write_error = write_error
        self._closed = False
        self._write_buffer: List[bytes] = []
        self.close_count = 0
        self.read_calls = 0

    def write_all(self, data: bytes) -> None:
        if self._closed:
            raise StreamClosed()

        offset = 0
        while offset < len(data):
            if self._write_error is not None:
                raise WriteFailed(cause=self._write_error)
            end = len(data)
            if self._max_write is not None:
                end = min(offset + self._max_write, end)
            self._write_buffer.append(data[offset:end])
            offset = end

    def read_chunk(self, capacity: int) -> bytes:
        if self._closed:
            raise StreamClosed()

        self.read_calls += 1
        if not self._chunks:
            if self._read_error is not None:
                raise ReadFailed(cause=self._read_error)
            return b""

        chunk = self._chunks.pop(0)
        if len(chunk) > capacity:
            self._chunks.insert(0, chunk[capacity:])
            chunk = chunk[:capacity]
        return chunk

    def close(self) -> None:
        self.close_count += 1
        self._closed = True

    @property
    def is_closed(self) -> bool:
        """Check if the mock stream is closed."""
        return self._closed

    @property
    def written_data(self) -> bytes:
        """Get all data that was written to the stream."""
        return b"".join(self._write_buffer)

    @property
    def write_calls(self) -> List[bytes]:
        """Get the pieces accepted by each write call, in order."""
        return list(self._write_buffer)

    def add_data(self, data: bytes) -> None:
        """
        Add a chunk to be returned by a later read.

        Args:
            data: The data to add.
        """
        self._chunks.append(data)


class MockNetworkBackend(NetworkBackend):
    """
    Mock network backend for testing.

    Host names resolve through a fixed table; every connection returns
    the same scripted stream.
    """

    def __init__(
        self,
        stream: Optional[MockNetworkStream] = None,
        hosts: Optional[Dict[str, str]] = None,
        refuse: bool = False,
    ):
        """
        Initialize the mock backend.

        Args:
            stream: Stream handed out by ``connect_tcp``.
            hosts: Host name to address table; unknown names fail to resolve.
            refuse: Make every ``connect_tcp`` call fail.
        """
        self.stream = stream if stream is not None else MockNetworkStream()
        self._hosts = hosts if hosts is not None else {"example.com": "93.184.216.34"}
        self._refuse = refuse
        self.connections: List[Tuple[str, int]] = []

    def resolve(self, host: str) -> str:
        try:
            return self._hosts[host]
        except KeyError:
            raise ResolutionFailed(host, cause=OSError("Unknown host"))

    def connect_tcp(self, address: str, port: int) -> MockNetworkStream:
        self.connections.append((address, port))
        if self._refuse:
            raise ConnectFailed(address, port, cause=OSError("Connection refused"))
        return self.stream

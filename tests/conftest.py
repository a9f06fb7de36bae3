"""
Pytest configuration for wask tests.

This file contains shared fixtures and configuration
for all tests in the project.
"""

import socket
import threading
import time
from typing import Iterator, List

import pytest

from wask.network.mock import MockNetworkBackend, MockNetworkStream


@pytest.fixture
def mock_stream():
    """Create a mock network stream serving the given chunks."""
    def _create_stream(chunks: List[bytes], **kwargs) -> MockNetworkStream:
        return MockNetworkStream(chunks, **kwargs)
    return _create_stream


@pytest.fixture
def mock_backend():
    """Create a mock backend whose connections serve the given chunks."""
    def _create_backend(chunks: List[bytes], **kwargs) -> MockNetworkBackend:
        return MockNetworkBackend(MockNetworkStream(chunks), **kwargs)
    return _create_backend


@pytest.fixture
def sample_headers():
    """Sample header block terminated by CRLF CRLF."""
    return (
        b"HTTP/1.0 200 OK\r\n"
        b"Content-Type: text/html; charset=utf-8\r\n"
        b"Server: nginx/1.18.0\r\n"
        b"\r\n"
    )


@pytest.fixture
def sample_body():
    """Sample body with bytes that look like header terminators."""
    return b"<html>\r\n\r\n\n\n\0body\r</html>"


class StubServer:
    """One-shot HTTP/1.0 server sending a canned response in pieces."""

    def __init__(self, pieces: List[bytes], delay: float = 0.05) -> None:
        self.pieces = pieces
        self.delay = delay
        self.request = b""
        self._listener = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        self._listener.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        self._listener.bind(("127.0.0.1", 0))
        self._listener.listen(1)
        self.port = self._listener.getsockname()[1]
        self._thread = threading.Thread(target=self._serve, daemon=True)

    def _serve(self) -> None:
        conn, _ = self._listener.accept()
        with conn:
            while b"\r\n\r\n" not in self.request:
                data = conn.recv(1024)
                if not data:
                    break
                self.request += data
            for piece in self.pieces:
                conn.sendall(piece)
                time.sleep(self.delay)

    def start(self) -> None:
        self._thread.start()

    def stop(self) -> None:
        self._thread.join(timeout=5)
        self._listener.close()


@pytest.fixture
def stub_server() -> Iterator:
    """Start a stub server for the given response pieces."""
    servers: List[StubServer] = []

    def _start(pieces: List[bytes]) -> StubServer:
        server = StubServer(pieces)
        server.start()
        servers.append(server)
        return server

    yield _start

    for server in servers:
        server.stop()

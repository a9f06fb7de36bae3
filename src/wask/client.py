"""
HTTP/1.0 client for wask.

This module implements the HTTP10Client class that sends one GET
request over a NetworkStream and streams the response body to a sink.
"""

import logging
from typing import Optional

from .http_primitives import build_request, split_url
from .network.backend import NetworkBackend, SocketNetworkBackend
from .network.utils import DEFAULT_PORT, validate_port
from .response_parser import ResponseStreamParser
from .sink import Sink
from .exceptions import OutputWriteFailed, WaskError

logger = logging.getLogger(__name__)


class HTTP10Client:
    """
    Single-request HTTP/1.0 client.

    The response is delimited by the server closing the connection, so
    the body is read until end-of-stream with no length or chunk framing.
    No timeouts are applied to any step.
    """

    # Default configuration
    DEFAULT_PORT = DEFAULT_PORT
    DEFAULT_CHUNK_SIZE = 1024

    def __init__(
        self,
        backend: Optional[NetworkBackend] = None,
        port: Optional[int] = None,
        chunk_size: Optional[int] = None,
    ):
        """
        Initialize the client.

        Args:
            backend: Network backend, a SocketNetworkBackend by default
            port: Server port
            chunk_size: Maximum bytes per read

        Raises:
            ValueError: If the port or chunk size is invalid
        """
        self._backend = backend or SocketNetworkBackend()
        self._port = validate_port(port if port is not None else self.DEFAULT_PORT)
        self._chunk_size = chunk_size if chunk_size is not None else self.DEFAULT_CHUNK_SIZE

        if self._chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {self._chunk_size}")

    def fetch(self, url: str, sink: Sink) -> int:
        """
        Fetch ``url`` and write the response body to ``sink``.

        Args:
            url: URL in ``host/path`` form
            sink: Binary destination for the body

        Returns:
            Number of body bytes written

        Raises:
            OutputWriteFailed: If the sink rejects a write
            WaskError: On any resolution, transport or protocol failure
        """
        target = split_url(url)
        request = build_request(target)

        try:
            address = self._backend.resolve(target.host)
            with self._backend.connect_tcp(address, self._port) as stream:
                stream.write_all(request)

                parser = ResponseStreamParser()
                written = 0
                while True:
                    chunk = stream.read_chunk(self._chunk_size)
                    if not chunk:
                        break
                    body = parser.feed(chunk)
                    if body:
                        try:
                            sink.write(body)
                            sink.flush()
                        except OSError as e:
                            raise OutputWriteFailed(
                                getattr(sink, "name", "output"), cause=e
                            ) from e
                        written += len(body)
        except WaskError as e:
            logger.debug(f"GET {target.request_path} from {target.host} failed: {e}")
            raise

        if not parser.in_body:
            logger.debug("Connection closed before end of header, empty body")
        logger.debug(f"Received {written} body bytes from {target.host}")
        return written

    @property
    def port(self) -> int:
        return self._port

    @property
    def chunk_size(self) -> int:
        return self._chunk_size


def fetch(url: str, sink: Sink, **kwargs) -> int:
    """Convenience wrapper: fetch ``url`` into ``sink`` with a fresh client."""
    return HTTP10Client(**kwargs).fetch(url, sink)

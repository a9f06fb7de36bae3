"""
HTTP primitives for wask.

This module splits a command-line URL into its host and path and
composes the single HTTP/1.0 request the client ever sends.
"""

from typing import NamedTuple


DEFAULT_PATH = "/"
REQUEST_ENCODING = "utf-8"
REQUEST_ERRORS = "surrogateescape"


class Target(NamedTuple):
    """Immutable (host, path) pair extracted from a URL."""
    host: str
    path: str

    @property
    def request_path(self) -> str:
        """Path to put on the request line; empty paths become ``/``."""
        return self.path or DEFAULT_PATH


def split_url(url: str) -> Target:
    """
    Split a URL at its first ``/``.

    Everything before the slash is the host and everything from the
    slash (inclusive) is the path. A URL without a slash yields an empty
    path. No scheme handling, validation or decoding is performed.

    Args:
        url: URL string such as ``example.com/index.html?q=1``

    Returns:
        Target with the host and the verbatim path
    """
    host, slash, rest = url.partition("/")
    return Target(host=host, path=slash + rest)


def build_request(target: Target) -> bytes:
    """
    Compose the HTTP/1.0 GET request for a target.

    HTTP/1.0 keeps the server from using chunked transfer encoding and
    makes it close the connection after the response, which is how the
    end of the body is detected.

    The URL goes on the wire as the bytes it was given on the command
    line: text is UTF-8 encoded and undecodable argv bytes, which Python
    carries as surrogate escapes, are restored unchanged.

    Args:
        target: Host and path to request

    Returns:
        Request bytes, ready to be written to the socket
    """
    request = (
        f"GET {target.request_path} HTTP/1.0\r\n"
        f"Host: {target.host}\r\n"
        "Accept: */*\r\n"
        "\r\n"
    )
    return request.encode(REQUEST_ENCODING, REQUEST_ERRORS)

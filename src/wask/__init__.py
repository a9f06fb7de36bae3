"""
wask - minimal HTTP/1.0 client

Sends a single GET request over a plain TCP connection and streams
the response body, without its headers, to standard output or a file.
"""

__version__ = "0.1.0"
__author__ = "Developer"
__email__ = "dev@example.com"

# Import main components for easy access
from .http_primitives import Target, split_url, build_request
from .response_parser import ParserState, ResponseStreamParser, iter_body, next_state
from .client import HTTP10Client, fetch
from .sink import Sink, open_sink
from .exceptions import (
    WaskError,
    UsageError,
    OutputOpenFailed,
    OutputWriteFailed,
    TransportError,
    ResolutionFailed,
    SocketCreationFailed,
    ConnectFailed,
    WriteFailed,
    ReadFailed,
    ProtocolError,
    MalformedHeaderTermination,
    StreamClosed,
)

__all__ = [
    "Target",
    "split_url",
    "build_request",
    "ParserState",
    "ResponseStreamParser",
    "iter_body",
    "next_state",
    "HTTP10Client",
    "fetch",
    "Sink",
    "open_sink",
    "WaskError",
    "UsageError",
    "OutputOpenFailed",
    "OutputWriteFailed",
    "TransportError",
    "ResolutionFailed",
    "SocketCreationFailed",
    "ConnectFailed",
    "WriteFailed",
    "ReadFailed",
    "ProtocolError",
    "MalformedHeaderTermination",
    "StreamClosed",
]

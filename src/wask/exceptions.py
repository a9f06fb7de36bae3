"""
Custom exceptions for wask.

This module defines the exception hierarchy used throughout
the client. Every error here is fatal for a run: the CLI reports
it once on stderr and exits with a non-zero status.
"""

from typing import Optional


class WaskError(Exception):
    """Base exception for all wask errors."""

    def __init__(self, message: str, cause: Optional[Exception] = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause


class UsageError(WaskError):
    """Raised when the command line is missing or malformed."""


class OutputOpenFailed(WaskError):
    """Raised when the ``-o`` target cannot be opened for writing."""

    def __init__(self, path: str, cause: Optional[Exception] = None) -> None:
        super().__init__(f"Can't open {path} for writing", cause)
        self.path = path


class OutputWriteFailed(WaskError):
    """Raised when body bytes cannot be written to the output."""

    def __init__(self, destination: str, cause: Optional[Exception] = None) -> None:
        message = f"Can't write to {destination}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message, cause)
        self.destination = destination


class TransportError(WaskError):
    """Raised when there's an error with the TCP transport."""

    def __init__(self, message: str, cause: Optional[Exception] = None) -> None:
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(f"Connection error: {message}", cause)


class ResolutionFailed(TransportError):
    """Raised when a host name does not resolve to an IPv4 address."""

    def __init__(self, host: str, cause: Optional[Exception] = None) -> None:
        super().__init__(f"gethostbyname({host!r}) failed", cause)
        self.host = host


class SocketCreationFailed(TransportError):
    """Raised when the TCP socket cannot be created."""

    def __init__(self, cause: Optional[Exception] = None) -> None:
        super().__init__("socket() failed", cause)


class ConnectFailed(TransportError):
    """Raised when the TCP connection cannot be established."""

    def __init__(
        self, address: str, port: int, cause: Optional[Exception] = None
    ) -> None:
        super().__init__(f"connect() to {address}:{port} failed", cause)
        self.address = address
        self.port = port


class WriteFailed(TransportError):
    """Raised when an underlying write call fails (short writes are not failures)."""

    def __init__(self, cause: Optional[Exception] = None) -> None:
        super().__init__("write() failed", cause)


class ReadFailed(TransportError):
    """Raised when an underlying read call fails."""

    def __init__(self, cause: Optional[Exception] = None) -> None:
        super().__init__("read() failed", cause)


class ProtocolError(WaskError):
    """Raised when the response violates the framing we rely on."""

    def __init__(self, message: str, cause: Optional[Exception] = None) -> None:
        super().__init__(f"Protocol error: {message}", cause)


class MalformedHeaderTermination(ProtocolError):
    """Raised when a CR inside the header terminator is not followed by LF."""


class StreamClosed(WaskError):
    """Raised when a closed network stream is read from or written to."""

    def __init__(self, message: str = "Stream is closed") -> None:
        super().__init__(f"Stream error: {message}")

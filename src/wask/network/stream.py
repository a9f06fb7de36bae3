"""
Network stream interface for wask.

This module defines the NetworkStream interface that every connection
implementation follows, so the read loop can run against a real socket
or an in-memory mock.
"""

from abc import ABC, abstractmethod
from types import TracebackType
from typing import Optional, Type


class NetworkStream(ABC):
    """
    Interface for blocking, connected byte streams.

    A stream owns exactly one connection. It is closed exactly once,
    either explicitly or by leaving a ``with`` block.
    """

    @abstractmethod
    def write_all(self, data: bytes) -> None:
        """
        Write the whole payload to the stream.

        Implementations keep issuing write calls from the current offset
        until every byte has been accepted; a short write is not an error.

        Args:
            data: The bytes to send.

        Raises:
            StreamClosed: If the stream is closed.
            WriteFailed: If an underlying write call fails.
        """
        pass

    @abstractmethod
    def read_chunk(self, capacity: int) -> bytes:
        """
        Read the next chunk from the stream.

        Args:
            capacity: Maximum number of bytes to return.

        Returns:
            Up to ``capacity`` bytes, or ``b""`` once the peer has closed.

        Raises:
            StreamClosed: If the stream is closed.
            ReadFailed: If the underlying read call fails.
        """
        pass

    @abstractmethod
    def close(self) -> None:
        """Close the stream. Closing twice is a no-op."""
        pass

    @property
    @abstractmethod
    def is_closed(self) -> bool:
        """
        Check if the stream is closed.

        Returns:
            True if the stream is closed, False otherwise.
        """
        pass

    def __enter__(self) -> "NetworkStream":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_value: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        self.close()

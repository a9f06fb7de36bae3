"""
Output sinks for wask.

The response body goes either to standard output or to a file given
with ``-o``. Both are binary streams written verbatim.
"""

import sys
from contextlib import contextmanager
from typing import Iterator, Optional

from typing_extensions import Protocol

from .exceptions import OutputOpenFailed, OutputWriteFailed


class Sink(Protocol):
    """Binary destination for body bytes."""

    def write(self, data: bytes) -> int:
        ...

    def flush(self) -> None:
        ...


@contextmanager
def open_sink(path: Optional[str] = None) -> Iterator[Sink]:
    """
    Open the destination for the response body.

    Standard output is flushed but never closed; a file is truncated on
    open and closed on exit.

    Args:
        path: Output file, or None for standard output

    Yields:
        A binary sink

    Raises:
        OutputOpenFailed: If the file cannot be opened for writing
        OutputWriteFailed: If buffered bytes cannot be flushed on exit
    """
    if path is None:
        stdout = sys.stdout.buffer
        try:
            yield stdout
        finally:
            try:
                stdout.flush()
            except OSError as e:
                raise OutputWriteFailed("standard output", cause=e) from e
        return

    try:
        output = open(path, "wb")
    except OSError as e:
        raise OutputOpenFailed(path, cause=e) from e

    try:
        yield output
    finally:
        try:
            output.close()
        except OSError as e:
            raise OutputWriteFailed(path, cause=e) from e

"""
Streaming response parser for wask.

This module finds the end of the response header section in an
unbounded sequence of read chunks and passes everything after it
through untouched. The blank line may straddle any number of reads,
so state is carried across chunks one byte at a time rather than by
searching each chunk for the terminator.
"""

import logging
from enum import Enum
from typing import Iterable, Iterator

from .exceptions import MalformedHeaderTermination

logger = logging.getLogger(__name__)

CR = 0x0D
LF = 0x0A


class ParserState(Enum):
    """Position of the parser relative to the header terminator."""
    HEAD = "head"                # Inside the status line or a header field
    SAW_CR = "saw_cr"            # Just read CR, LF must follow
    SAW_LF = "saw_lf"            # Just ended a line
    SAW_CRLF_CR = "saw_crlf_cr"  # Ended a line and read CR, LF must follow
    BODY = "body"                # Header consumed, everything is body


def next_state(state: ParserState, byte: int) -> ParserState:
    """
    Transition function of the header scanner.

    A bare LF is accepted wherever CRLF is, so ``\\n\\n`` ends the
    header just like ``\\r\\n\\r\\n``.

    Args:
        state: Current state, never BODY
        byte: Next byte of the response

    Returns:
        The state after consuming ``byte``

    Raises:
        MalformedHeaderTermination: If a CR is not followed by LF
    """
    if state is ParserState.HEAD:
        if byte == CR:
            return ParserState.SAW_CR
        if byte == LF:
            return ParserState.SAW_LF
        return ParserState.HEAD

    if state is ParserState.SAW_CR:
        if byte == LF:
            return ParserState.SAW_LF
        raise MalformedHeaderTermination("no LF after CR")

    if state is ParserState.SAW_LF:
        if byte == CR:
            return ParserState.SAW_CRLF_CR
        if byte == LF:
            return ParserState.BODY
        return ParserState.HEAD

    if state is ParserState.SAW_CRLF_CR:
        if byte == LF:
            return ParserState.BODY
        raise MalformedHeaderTermination("no LF after CRLF CR")

    raise ValueError(f"No transition out of {state}")


class ResponseStreamParser:
    """
    Header-skipping filter over raw response chunks.

    Feed every chunk read from the connection, in order, and write
    whatever ``feed`` returns to the output. Header bytes are never
    returned; body bytes are returned exactly once and in order.
    """

    def __init__(self) -> None:
        self._state = ParserState.HEAD
        self._header_bytes = 0

    def feed(self, chunk: bytes) -> bytes:
        """
        Consume one chunk and return the body bytes it contains.

        Args:
            chunk: The bytes of one read; all of them are scanned

        Returns:
            The part of ``chunk`` that belongs to the body, possibly empty

        Raises:
            MalformedHeaderTermination: If the header terminator is malformed
        """
        if self._state is ParserState.BODY:
            return chunk

        state = self._state
        for index, byte in enumerate(chunk):
            try:
                state = next_state(state, byte)
            except MalformedHeaderTermination:
                self._state = state
                self._header_bytes += index
                raise
            if state is ParserState.BODY:
                self._state = state
                self._header_bytes += index + 1
                logger.debug(f"End of header found after {self._header_bytes} bytes")
                return chunk[index + 1:]

        self._state = state
        self._header_bytes += len(chunk)
        return b""

    @property
    def state(self) -> ParserState:
        """Current parser state."""
        return self._state

    @property
    def in_body(self) -> bool:
        """Check if the header terminator has been consumed."""
        return self._state is ParserState.BODY

    @property
    def header_bytes(self) -> int:
        """Number of bytes consumed as header so far."""
        return self._header_bytes


def iter_body(chunks: Iterable[bytes]) -> Iterator[bytes]:
    """
    Lazily yield the body bytes of a chunked raw response.

    A response that ends before the header terminator simply has no
    body; nothing is yielded and no error is raised.

    Args:
        chunks: Raw reads from the connection, in order

    Yields:
        Non-empty body fragments, in order
    """
    parser = ResponseStreamParser()
    for chunk in chunks:
        body = parser.feed(chunk)
        if body:
            yield body

"""
Tests for the HTTP/1.0 client read loop.

Runs HTTP10Client against the mock backend and checks what reaches
the sink and that the connection is closed on every path.
"""

import io

import pytest

from wask.client import HTTP10Client, fetch
from wask.exceptions import (
    ConnectFailed,
    MalformedHeaderTermination,
    OutputWriteFailed,
    ReadFailed,
    ResolutionFailed,
    WriteFailed,
)
from wask.network.mock import MockNetworkBackend, MockNetworkStream

HELLO_RESPONSE = b"HTTP/1.0 200 OK\r\nContent-Type: text/plain\r\n\r\nhello"


class RecordingSink(io.BytesIO):
    """BytesIO that remembers every write call."""

    def __init__(self) -> None:
        super().__init__()
        self.writes = []
        self.flushes = 0

    def write(self, data) -> int:
        self.writes.append(bytes(data))
        return super().write(data)

    def flush(self) -> None:
        self.flushes += 1
        super().flush()


class TestHTTP10Client:
    """Test HTTP10Client functionality."""

    def test_configuration_defaults(self) -> None:
        """Test default port and chunk size."""
        client = HTTP10Client(MockNetworkBackend())
        assert client.port == 80
        assert client.chunk_size == 1024

    @pytest.mark.parametrize("kwargs", [{"port": 0}, {"port": 70000}, {"chunk_size": 0}])
    def test_invalid_configuration(self, kwargs) -> None:
        """Test that bad settings are rejected up front."""
        with pytest.raises(ValueError):
            HTTP10Client(MockNetworkBackend(), **kwargs)

    def test_fetch_body(self, mock_backend) -> None:
        """Test the body of a response split over three reads."""
        backend = mock_backend([HELLO_RESPONSE[:20], HELLO_RESPONSE[20:44], HELLO_RESPONSE[44:]])
        sink = RecordingSink()

        written = HTTP10Client(backend).fetch("example.com/greeting", sink)

        assert sink.getvalue() == b"hello"
        assert written == 5
        assert backend.connections == [("93.184.216.34", 80)]
        assert backend.stream.written_data == (
            b"GET /greeting HTTP/1.0\r\n"
            b"Host: example.com\r\n"
            b"Accept: */*\r\n"
            b"\r\n"
        )
        assert backend.stream.close_count == 1

    def test_each_emission_is_flushed(self, mock_backend, sample_headers) -> None:
        """Test that body bytes reach the sink chunk by chunk."""
        backend = mock_backend([sample_headers + b"ab", b"cd", b"ef"])
        sink = RecordingSink()

        HTTP10Client(backend).fetch("example.com", sink)

        assert sink.writes == [b"ab", b"cd", b"ef"]
        assert sink.flushes == 3

    def test_reads_use_chunk_size(self, sample_headers) -> None:
        """Test that no read asks for more than chunk_size bytes."""
        body = bytes(range(256)) * 8
        stream = MockNetworkStream([sample_headers + body])
        sink = RecordingSink()

        HTTP10Client(MockNetworkBackend(stream), chunk_size=100).fetch("example.com/", sink)

        assert sink.getvalue() == body
        assert all(len(w) <= 100 for w in sink.writes)

    def test_partial_writes(self) -> None:
        """Test that the whole request is sent even with short writes."""
        stream = MockNetworkStream([HELLO_RESPONSE], max_write=5)
        sink = RecordingSink()

        HTTP10Client(MockNetworkBackend(stream)).fetch("example.com/x", sink)

        assert stream.written_data.startswith(b"GET /x HTTP/1.0\r\n")
        assert stream.written_data.endswith(b"Accept: */*\r\n\r\n")
        assert all(len(piece) <= 5 for piece in stream.write_calls)
        assert sink.getvalue() == b"hello"

    def test_zero_body(self, mock_backend, sample_headers) -> None:
        """Test a response with an empty body."""
        backend = mock_backend([sample_headers])
        sink = RecordingSink()

        assert HTTP10Client(backend).fetch("example.com", sink) == 0
        assert sink.getvalue() == b""
        assert backend.stream.close_count == 1

    def test_empty_response(self, mock_backend) -> None:
        """Test a server that closes without sending anything."""
        backend = mock_backend([])
        sink = RecordingSink()

        assert HTTP10Client(backend).fetch("example.com", sink) == 0
        assert sink.writes == []

    def test_malformed_header(self, mock_backend) -> None:
        """Test that a bad terminator stops the read loop and closes."""
        backend = mock_backend([b"HTTP/1.0 200 OK\r\n\r", b"Xhello", b"more"])
        sink = RecordingSink()

        with pytest.raises(MalformedHeaderTermination):
            HTTP10Client(backend).fetch("example.com", sink)

        assert sink.getvalue() == b""
        assert backend.stream.close_count == 1
        assert backend.stream.read_calls == 2

    def test_read_failed(self, mock_backend, sample_headers) -> None:
        """Test that a read error after some body is still fatal."""
        backend = mock_backend([sample_headers + b"part"])
        backend.stream._read_error = ConnectionResetError("reset")
        sink = RecordingSink()

        with pytest.raises(ReadFailed):
            HTTP10Client(backend).fetch("example.com", sink)

        assert sink.getvalue() == b"part"
        assert backend.stream.close_count == 1

    def test_write_failed(self) -> None:
        """Test that a failing write closes the connection."""
        stream = MockNetworkStream([HELLO_RESPONSE], write_error=BrokenPipeError("pipe"))

        with pytest.raises(WriteFailed):
            HTTP10Client(MockNetworkBackend(stream)).fetch("example.com", RecordingSink())

        assert stream.close_count == 1
        assert stream.read_calls == 0

    def test_resolution_failed(self, mock_backend) -> None:
        """Test that an unknown host never connects."""
        backend = mock_backend([HELLO_RESPONSE])

        with pytest.raises(ResolutionFailed):
            HTTP10Client(backend).fetch("nowhere.invalid/", RecordingSink())

        assert backend.connections == []

    def test_connect_failed(self) -> None:
        """Test that a refused connection propagates."""
        backend = MockNetworkBackend(refuse=True)

        with pytest.raises(ConnectFailed):
            HTTP10Client(backend).fetch("example.com", RecordingSink())

    def test_module_fetch(self, mock_backend) -> None:
        """Test the convenience wrapper."""
        sink = RecordingSink()
        assert fetch("example.com", sink, backend=mock_backend([HELLO_RESPONSE])) == 5
        assert sink.getvalue() == b"hello"

    def test_sink_write_failed(self, mock_backend, sample_headers) -> None:
        """Test that an output error becomes OutputWriteFailed and closes."""
        backend = mock_backend([sample_headers + b"body"])

        class BrokenSink(io.BytesIO):
            name = "<stdout>"

            def write(self, data) -> int:
                raise BrokenPipeError(32, "Broken pipe")

        with pytest.raises(OutputWriteFailed) as exc_info:
            HTTP10Client(backend).fetch("example.com", BrokenSink())

        assert exc_info.value.destination == "<stdout>"
        assert isinstance(exc_info.value.cause, BrokenPipeError)
        assert backend.stream.close_count == 1

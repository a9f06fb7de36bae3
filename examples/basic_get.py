"""
Basic example using wask as a library.

This example fetches a page over HTTP/1.0, first into memory and then
body-only into a file, logging what happens along the way.
"""

import io
import logging
import sys

from wask import HTTP10Client, WaskError, open_sink

# Configure logging
logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)
logger = logging.getLogger(__name__)


def fetch_into_memory(url: str) -> bytes:
    """Fetch a URL and return its body."""
    logger.info(f"Fetching {url} into memory...")

    buffer = io.BytesIO()
    written = HTTP10Client().fetch(url, buffer)
    logger.info(f"Body length: {written} bytes")
    return buffer.getvalue()


def fetch_into_file(url: str, path: str) -> None:
    """Fetch a URL straight into a file."""
    logger.info(f"Fetching {url} into {path}...")

    with open_sink(path) as sink:
        HTTP10Client(chunk_size=4096).fetch(url, sink)


def main() -> int:
    url = sys.argv[1] if len(sys.argv) > 1 else "example.com/"

    try:
        body = fetch_into_memory(url)
        logger.info(f"First line: {body.splitlines()[:1]}")
        fetch_into_file(url, "example_body.html")
    except WaskError as e:
        logger.error(f"Request failed: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())

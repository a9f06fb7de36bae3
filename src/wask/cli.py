"""
Command line interface for wask.

    wask [-o OUTPUT_PATH] URL

Fetches ``URL`` over HTTP/1.0 on port 80 and writes the response body
to standard output, or to ``OUTPUT_PATH`` when ``-o`` is given.
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from .client import HTTP10Client
from .exceptions import OutputWriteFailed, UsageError, WaskError
from .network.backend import NetworkBackend
from .sink import open_sink

logger = logging.getLogger(__name__)

SYNOPSIS = "wask [-o OUTPUT_PATH] URL"
USAGE = f"Usage: {SYNOPSIS}"
LOG_LEVEL_ENV = "WASK_LOG_LEVEL"

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


class ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting with status 2."""

    def error(self, message: str) -> None:
        raise UsageError(message)


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="wask",
        usage=SYNOPSIS,
        description="Fetch a URL over HTTP/1.0 and print the response body.",
    )
    parser.add_argument(
        "-o",
        dest="output",
        metavar="OUTPUT_PATH",
        help="write the body to OUTPUT_PATH instead of standard output",
    )
    parser.add_argument("url", metavar="URL", help="host[/path], no scheme")
    return parser


def configure_logging() -> None:
    """Send log records to stderr at the level named by WASK_LOG_LEVEL."""
    level_name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )


def discard_stdout() -> None:
    """Point stdout at /dev/null so the interpreter's exit flush cannot fail again."""
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())
    os.close(devnull)


def main(
    argv: Optional[List[str]] = None,
    backend: Optional[NetworkBackend] = None,
) -> int:
    """
    Run the client.

    Args:
        argv: Arguments without the program name, ``sys.argv[1:]`` by default
        backend: Network backend override, used by tests

    Returns:
        Process exit status
    """
    configure_logging()

    try:
        args = build_parser().parse_args(argv)
    except UsageError as e:
        logger.debug(f"Bad arguments: {e}")
        print(USAGE, file=sys.stderr)
        return EXIT_FAILURE

    client = HTTP10Client(backend=backend)
    try:
        with open_sink(args.output) as sink:
            client.fetch(args.url, sink)
    except WaskError as e:
        if (
            args.output is None
            and isinstance(e, OutputWriteFailed)
            and isinstance(e.cause, BrokenPipeError)
        ):
            discard_stdout()
        print(f"wask: {e}", file=sys.stderr)
        return EXIT_FAILURE

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())

"""
Network utilities for wask.

This module provides the thin wrappers around the socket module
used to reach the server: socket creation, IPv4 resolution and
port validation.
"""

import socket
from typing import Union

from ..exceptions import ResolutionFailed


DEFAULT_PORT = 80


def create_socket(
    family: int = socket.AF_INET,
    type: int = socket.SOCK_STREAM,
    proto: int = 0
) -> socket.socket:
    """
    Create a blocking TCP socket.

    Args:
        family: Address family (default: AF_INET)
        type: Socket type (default: SOCK_STREAM)
        proto: Protocol (default: 0 for auto)

    Returns:
        Socket object, not yet connected

    Raises:
        OSError: If socket creation fails
    """
    sock = socket.socket(family, type, proto)

    # The request is written once and in full, don't hold it back
    sock.setsockopt(socket.IPPROTO_TCP, socket.TCP_NODELAY, 1)

    return sock


def resolve_ipv4(host: str) -> str:
    """
    Resolve a host name to an IPv4 address.

    Args:
        host: Host name or dotted-quad address

    Returns:
        Dotted-quad IPv4 address

    Raises:
        ResolutionFailed: If the name does not resolve
    """
    # gethostbyname("") answers INADDR_ANY instead of failing
    if not host:
        raise ResolutionFailed(host, cause=OSError("Empty host name"))

    if is_ipv4_address(host):
        return host

    try:
        return socket.gethostbyname(host)
    except (OSError, UnicodeError) as e:
        raise ResolutionFailed(host, cause=e) from e


def is_ipv4_address(host: str) -> bool:
    """
    Check if a host string is an IPv4 address.

    Args:
        host: Host string to check

    Returns:
        True if the host is an IPv4 address
    """
    try:
        socket.inet_pton(socket.AF_INET, host)
        return True
    except (OSError, socket.error):
        return False


def validate_port(port: Union[int, str]) -> int:
    """
    Validate and convert port to integer.

    Args:
        port: Port number (int or string)

    Returns:
        Port as integer

    Raises:
        ValueError: If port is invalid
    """
    try:
        port_int = int(port)
    except (ValueError, TypeError):
        raise ValueError(f"Invalid port: {port}")

    if not (1 <= port_int <= 65535):
        raise ValueError(f"Port must be between 1 and 65535, got {port_int}")

    return port_int

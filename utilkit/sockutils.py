"""Helpers to open listening and connected stream sockets."""

from __future__ import annotations

import contextlib
import os
import socket


def sock_unix_listen(path: str, max_clients: int) -> socket.socket:
    """Listen on a Unix stream socket at ``path``, replacing any stale file."""
    sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
    try:
        with contextlib.suppress(OSError):
            os.unlink(path)
        sock.bind(path)
        sock.listen(max_clients)
    except BaseException:
        sock.close()
        raise
    return sock


def sock_unix_connect(path: str) -> socket.socket:
    """Connect to the Unix stream socket at ``path``."""
    sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
    try:
        sock.connect(path)
    except BaseException:
        sock.close()
        raise
    return sock


def sock_stream_connect(host: str, port: int) -> socket.socket:
    """Connect over TCP to the IPv4 address ``host`` on ``port``.

    Raises ValueError when ``host`` is not a dotted IPv4 address.
    """
    try:
        socket.inet_pton(socket.AF_INET, host)
    except OSError:
        raise ValueError(f"invalid IPv4 address: {host!r}") from None
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        sock.connect((host, port))
    except BaseException:
        sock.close()
        raise
    return sock


def sock_stream_listen(port: int, nr_clients: int) -> socket.socket:
    """Listen for TCP connections on ``port`` on all IPv4 interfaces."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind(("", port))
        sock.listen(nr_clients)
    except BaseException:
        sock.close()
        raise
    return sock


def sock_wait(listening: socket.socket) -> socket.socket:
    """Block until a client connects and return its socket."""
    conn, _ = listening.accept()
    return conn


def sock_shutdown(sock: socket.socket) -> None:
    """Shut down both directions of ``sock``."""
    sock.shutdown(socket.SHUT_RDWR)
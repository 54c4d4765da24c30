"""Command socket for incoming requests and a sender for status messages."""

from __future__ import annotations

import os
import re
import socket
from pathlib import Path

_NEWLINES = re.compile(r"\r\n|\r|\n")
_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")
_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1
_READ_SIZE = 1023


def parse_address(name: str) -> str | tuple[str, str]:
    """Return ``(host, port)`` for ``host:port`` names, else the socket path."""
    host, colon, port = name.partition(":")
    if colon:
        return host, port
    return name


def parse_command_message(message: str) -> tuple[int, str] | None:
    """Parse ``screen;function`` into its parts, or None if malformed."""
    screen_part, sep, rest = message.partition(";")
    if not message:
        return None
    match = _LEADING_INT.match(screen_part)
    if not match:
        return None
    screen = int(match.group(1))
    if not _INT_MIN <= screen <= _INT_MAX:
        return None
    if not sep or not rest:
        return None
    return screen, rest.split(";", 1)[0]


def _tcp_addrinfo(host: str, port: str):
    infos = socket.getaddrinfo(
        host,
        port,
        socket.AF_UNSPEC,
        socket.SOCK_STREAM,
        socket.IPPROTO_TCP,
        socket.AI_ADDRCONFIG,
    )
    return infos[0]


class CommandListener:
    """A listening stream socket that receives one-line commands."""

    def __init__(self, name: str) -> None:
        address = parse_address(name)
        if isinstance(address, tuple):
            family, socktype, proto, _, sockaddr = _tcp_addrinfo(*address)
            self._path = None
        else:
            path = Path(address)
            path.parent.mkdir(parents=True, exist_ok=True)
            if path.exists() or path.is_symlink():
                path.unlink()
            family, socktype, proto, sockaddr = socket.AF_UNIX, socket.SOCK_STREAM, 0, address
            self._path = path

        self._sock = socket.socket(family, socktype, proto)
        try:
            self._sock.bind(sockaddr)
            if self._path is not None:
                os.chmod(self._path, 0o700)
            self._sock.listen(5)
        except OSError:
            self._sock.close()
            raise

    @property
    def address(self):
        """The address the socket is bound to."""
        return self._sock.getsockname()

    def fileno(self) -> int:
        return self._sock.fileno()

    def receive(self) -> str:
        """Accept one connection and return its message without line breaks."""
        conn, _ = self._sock.accept()
        with conn:
            data = conn.recv(_READ_SIZE)
        text = data.split(b"\0", 1)[0].decode("utf-8", errors="replace")
        return _NEWLINES.sub("", text)

    def close(self) -> None:
        self._sock.close()

    def __enter__(self) -> CommandListener:
        return self

    def __exit__(self, *exc) -> None:
        self.close()


class MessageSender:
    """Sends newline-terminated messages to a listening socket."""

    def __init__(self, name: str) -> None:
        address = parse_address(name)
        if isinstance(address, tuple):
            family, socktype, proto, _, sockaddr = _tcp_addrinfo(*address)
            self._target = (family, socktype, proto, sockaddr)
        else:
            self._target = (socket.AF_UNIX, socket.SOCK_STREAM, 0, address)

    def send(self, message: str) -> int:
        """Open a connection, send the message and a newline; return bytes sent."""
        family, socktype, proto, sockaddr = self._target
        payload = (message + "\n").encode("utf-8")
        with socket.socket(family, socktype, proto) as sock:
            sock.connect(sockaddr)
            sock.sendall(payload)
        return len(payload)
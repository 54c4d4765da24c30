"""Starting external commands given as a single command line."""

from __future__ import annotations

import re
import subprocess

_WORD = re.compile(r'"((?:\\.|[^"\\])*)(?:"|\\?\Z)|(\S+)', re.DOTALL)
_ESCAPE = re.compile(r"\\(.)", re.DOTALL)


def split_command(command: str) -> list[str]:
    """Split a command line into words; double quotes group, backslash escapes."""
    words = []
    for match in _WORD.finditer(command):
        quoted, plain = match.groups()
        words.append(plain if plain is not None else _ESCAPE.sub(r"\1", quoted))
    return words


def _argv(command: str) -> list[str]:
    args = split_command(command)
    if not args:
        raise ValueError("empty command")
    return args


def spawn(command: str) -> subprocess.Popen:
    """Start a command in its own session without waiting for it.

    Raises ValueError for an empty command and OSError if it cannot start.
    """
    return subprocess.Popen(_argv(command), start_new_session=True, close_fds=True)


def run(command: str) -> int:
    """Run a command in its own session, wait for it and return its exit status.

    Raises ValueError for an empty command and OSError if it cannot start.
    """
    completed = subprocess.run(_argv(command), start_new_session=True, close_fds=True)
    return completed.returncode
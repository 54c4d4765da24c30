"""Low-level parsing of the configuration file's lines and values."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator

from .process import split_command

_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def read_logical_lines(lines: Iterable[str]) -> Iterator[str]:
    """Yield lines with trailing-backslash continuations joined.

    The iterator over ``lines`` is consumed lazily, so a caller may pull a
    few logical lines, hand the same generator to another reader and carry on.
    """
    source = iter(lines)
    for first in source:
        line = first.removesuffix("\n")
        while line.endswith("\\"):
            line = line[:-1]
            try:
                line += next(source).removesuffix("\n")
            except StopIteration:
                break
        yield line


def tokenize(line: str) -> list[str]:
    """Split a line into words, honouring double quotes.

    A line that is empty or starts with ``#`` gives no words, and a word
    that is exactly ``#`` ends the line.
    """
    if not line or line.startswith("#"):
        return []
    tokens = []
    for word in split_command(line):
        if word == "#":
            break
        tokens.append(word)
    return tokens


def split_string(s: str, separator: str) -> list[str]:
    """Split on ``separator``; a trailing empty field is not produced."""
    if not s:
        return []
    parts = s.split(separator)
    if parts[-1] == "":
        parts.pop()
    return parts


def parse_grid_mode(mode: str) -> tuple[int, int]:
    """Parse a grid mode such as ``2x3`` into ``(rows, cols)``.

    Anything that is not two fields separated by ``x`` gives ``(0, 0)``.
    """
    values = split_string(mode, "x")
    if len(values) != 2:
        return 0, 0
    return _leading_int(values[0]), _leading_int(values[1])


def get_name_class(s: str) -> tuple[str, str]:
    """Split ``name:class`` into its parts; the class is empty if absent."""
    name, _, rclass = s.partition(":")
    return name, rclass
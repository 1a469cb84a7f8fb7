"""Count lines, words and characters."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Union

from tinyunix.fmt import printf

# The terminating NUL is found by the whitespace lookup too.
_WHITESPACE = frozenset(" \r\t\n\v\0")


@dataclass(frozen=True)
class Counts:
    """Line, word and character totals."""

    lines: int = 0
    words: int = 0
    chars: int = 0


def count(data: Union[bytes, bytearray, str]) -> Counts:
    """Count newlines, whitespace-separated words and characters in data."""
    if isinstance(data, (bytes, bytearray)):
        data = bytes(data).decode("latin-1")
    lines = words = 0
    inword = False
    for ch in data:
        if ch == "\n":
            lines += 1
        if ch in _WHITESPACE:
            inword = False
        elif not inword:
            words += 1
            inword = True
    return Counts(lines, words, len(data))


def _report(stream, name: str) -> bool:
    try:
        data = stream.read()
    except OSError:
        printf("wc: read error\n")
        return False
    c = count(data)
    printf("%d %d %d %s\n", c.lines, c.words, c.chars, name)
    return True


def main(argv: list[str] | None = None) -> int:
    """Print counts for each named file, or for standard input."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0 if _report(getattr(sys.stdin, "buffer", sys.stdin), "") else 1
    for path in args:
        try:
            f = open(path, "rb")
        except OSError:
            printf("wc: cannot open %s\n", path)
            return 1
        with f:
            if not _report(f, path):
                return 1
    return 0
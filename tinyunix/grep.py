"""A simple grep supporting only the ^ . * $ operators."""

from __future__ import annotations

import sys
from typing import TextIO

from tinyunix.fmt import fprintf, printf

_BUF_SIZE = 1024


def match(re: str, text: str) -> bool:
    """Report whether the pattern re matches anywhere in text."""
    if re.startswith("^"):
        return _matchhere(re[1:], text)
    return any(_matchhere(re, text[start:]) for start in range(len(text) + 1))


def _matchhere(re: str, text: str) -> bool:
    if not re:
        return True
    if len(re) > 1 and re[1] == "*":
        return _matchstar(re[0], re[2:], text)
    if re == "$":
        return not text
    if text and re[0] in (".", text[0]):
        return _matchhere(re[1:], text[1:])
    return False


def _matchstar(c: str, re: str, text: str) -> bool:
    while True:
        if _matchhere(re, text):
            return True
        if not text or (text[0] != c and c != "."):
            return False
        text = text[1:]


def grep(pattern: str, stream: TextIO, out: TextIO) -> None:
    """Write every newline-terminated line of stream that matches pattern."""
    pending = ""
    while True:
        room = _BUF_SIZE - 1 - len(pending)
        # A full buffer without a newline ends the search.
        chunk = stream.read(room) if room > 0 else ""
        if not chunk:
            break
        pending += chunk
        *lines, pending = pending.split("\n")
        for line in lines:
            if match(pattern, line):
                out.write(line + "\n")


def main(argv: list[str] | None = None) -> int:
    """Run grep on the files named in argv, or on standard input."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        fprintf(sys.stderr, "usage: grep pattern [file ...]\n")
        return 1
    pattern, *paths = args
    if not paths:
        grep(pattern, sys.stdin, sys.stdout)
        return 0
    for path in paths:
        try:
            f = open(path, encoding="utf-8", errors="surrogateescape", newline="")
        except OSError:
            printf("grep: cannot open %s\n", path)
            return 1
        with f:
            grep(pattern, f, sys.stdout)
    return 0
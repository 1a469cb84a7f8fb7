"""Small string helpers used by the user programs."""

from __future__ import annotations

import itertools
from typing import BinaryIO, TextIO, Union

_DIGITS = "0123456789"


def atoi(s: str) -> int:
    """Parse an optional sign and leading decimal digits; 0 if none."""
    sign = 1
    if s[:1] == "-":
        sign = -1
        s = s[1:]
    elif s[:1] == "+":
        s = s[1:]
    digits = "".join(itertools.takewhile(lambda ch: ch in _DIGITS, s))
    return sign * int(digits or "0")


def _cstring(s: Union[str, bytes]) -> bytes:
    data = s.encode("utf-8") if isinstance(s, str) else bytes(s)
    return data.split(b"\0", 1)[0]


def strcmp(p: Union[str, bytes], q: Union[str, bytes]) -> int:
    """Compare as C strings; return the difference of the first differing bytes."""
    a, b = _cstring(p), _cstring(q)
    for x, y in zip(a, b):
        if x != y:
            return x - y
    if len(a) > len(b):
        return a[len(b)]
    if len(b) > len(a):
        return -b[len(a)]
    return 0


def gets(stream: Union[TextIO, BinaryIO], max_len: int):
    """Read one character at a time, up to max_len - 1, stopping after a newline or CR."""
    parts = []
    empty = ""
    while len(parts) + 1 < max_len:
        c = stream.read(1)
        empty = c[:0]
        if not c:
            break
        parts.append(c)
        if c in ("\n", "\r", b"\n", b"\r"):
            break
    return empty.join(parts)
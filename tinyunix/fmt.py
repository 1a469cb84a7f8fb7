"""A small printf that understands %d, %u, %x (with l/ll), %p, %c, %s and %%."""

from __future__ import annotations

import re
import sys
from typing import Any, Callable, TextIO

_DIGITS = "0123456789ABCDEF"
_SPEC = re.compile(r"%(ll[dux]|l[dux]|.)?", re.DOTALL)
_INT_CONVERSIONS = {"d": (10, True), "u": (10, False), "x": (16, False)}
_U32 = 1 << 32
_U64_MASK = (1 << 64) - 1


def _to_int32(value: Any) -> int:
    v = int(value) & 0xFFFFFFFF
    return v - _U32 if v & 0x80000000 else v


def _format_int(value: Any, base: int, signed: bool) -> str:
    # Every integer conversion goes through a 32-bit int, as the
    # printing routine takes an int argument.
    xx = _to_int32(value)
    negative = signed and xx < 0
    x = (-xx if negative else xx) % _U32
    digits = []
    while True:
        digits.append(_DIGITS[x % base])
        x //= base
        if x == 0:
            break
    if negative:
        digits.append("-")
    return "".join(reversed(digits))


def _format_ptr(value: Any) -> str:
    return "0x" + format(int(value) & _U64_MASK, "016X")


def _format_char(value: Any) -> str:
    if isinstance(value, str) and len(value) == 1:
        return value
    return chr(int(value) & 0xFF)


def _format_str(value: Any) -> str:
    if value is None:
        return "(null)"
    if isinstance(value, (bytes, bytearray)):
        value = bytes(value).decode("latin-1")
    return str(value).split("\0", 1)[0]


def format_printf(fmt: str, *args: Any) -> str:
    """Expand a printf-style format string and return the text."""
    remaining = iter(args)

    def next_arg() -> Any:
        try:
            return next(remaining)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None

    def expand(m: re.Match) -> str:
        spec = m.group(1)
        if spec is None:
            return ""
        if len(spec) > 1 or spec in _INT_CONVERSIONS:
            base, signed = _INT_CONVERSIONS[spec[-1]]
            return _format_int(next_arg(), base, signed)
        handlers: dict[str, Callable[[Any], str]] = {
            "p": _format_ptr,
            "c": _format_char,
            "s": _format_str,
        }
        if spec in handlers:
            return handlers[spec](next_arg())
        if spec == "%":
            return "%"
        # Unknown conversion: print it to draw attention.
        return "%" + spec

    return _SPEC.sub(expand, fmt)


def fprintf(stream: TextIO, fmt: str, *args: Any) -> None:
    """Format and write to the given text stream."""
    stream.write(format_printf(fmt, *args))


def printf(fmt: str, *args: Any) -> None:
    """Format and write to standard output."""
    fprintf(sys.stdout, fmt, *args)
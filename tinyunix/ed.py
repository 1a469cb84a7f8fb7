"""A tiny line editor: append, print, delete, read and write lines of a file."""

from __future__ import annotations

import os
import sys
from typing import TextIO

from tinyunix.fmt import format_printf
from tinyunix.ulib import atoi

MAXLINES = 100
MAXLEN = 256
_CMD_LEN = 16
_FILENAME_LEN = 512
_BACKSPACES = ("\b", "\x7f")

_HELP = (
    "Simple ed editor commands:\n"
    "a - append lines\n"
    "p - print all lines\n"
    "d - delete line\n"
    "w - write to file\n"
    "q - quit\n"
    "h - help\n"
)


def _encode(text: str) -> bytes:
    return text.encode("utf-8", "surrogateescape")


def _decode(data: bytes) -> str:
    return data.decode("utf-8", "surrogateescape")


def read_line(stdin: TextIO, stdout: TextIO, max_len: int) -> str:
    """Read and echo one line, handling backspace; return it with a newline.

    At most max_len - 1 characters are kept. End of input gives "".
    """
    chars: list[str] = []
    while True:
        c = stdin.read(1)
        if not c:
            return ""
        if c in _BACKSPACES:
            if chars:
                chars.pop()
                stdout.write("\b \b")
            continue
        if c in ("\n", "\r"):
            stdout.write("\n")
            return "".join(chars) + "\n"
        if len(chars) < max_len - 1:
            chars.append(c)
            stdout.write(c)


class Editor:
    """An interactive editor holding up to MAXLINES lines in memory."""

    def __init__(self, stdin: TextIO, stdout: TextIO, filename: str = "") -> None:
        self.stdin = stdin
        self.stdout = stdout
        self.filename = filename
        self.lines: list[str] = []

    def _print(self, fmt: str, *args: object) -> None:
        self.stdout.write(format_printf(fmt, *args))

    def _read(self, max_len: int) -> str:
        return read_line(self.stdin, self.stdout, max_len)

    def _ask_filename(self) -> str:
        self._print("Enter filename: ")
        return self._read(_FILENAME_LEN).removesuffix("\n")

    def print_help(self) -> None:
        """Show the list of commands."""
        self._print("%s", _HELP)

    def append_lines(self) -> None:
        """Append typed lines until a line holding a single dot."""
        self._print("Enter lines (single . on line to end):\n")
        while True:
            line = self._read(MAXLEN)
            # End of input ends appending as a lone dot would.
            if not line or line == ".\n":
                break
            if len(self.lines) >= MAXLINES:
                self._print("Buffer full\n")
                break
            self.lines.append(line)

    def print_lines(self) -> None:
        """Print every line with its 1-based number."""
        for number, line in enumerate(self.lines, start=1):
            self._print("%d: %s", number, line)

    def delete_line(self) -> None:
        """Ask for a line number and delete that line."""
        self._print("Enter line number to delete: ")
        n = atoi(self._read(_CMD_LEN))
        if not 1 <= n <= len(self.lines):
            self._print("Invalid line number\n")
            return
        del self.lines[n - 1]

    def write_file(self) -> None:
        """Write the lines to the current file, asking for a name if none is set.

        The file is not truncated first, so older, longer contents keep their tail.
        """
        if not self.filename:
            self.filename = self._ask_filename()
        try:
            fd = os.open(self.filename, os.O_CREAT | os.O_WRONLY, 0o666)
        except OSError:
            self._print("Error opening file\n")
            return
        try:
            with os.fdopen(fd, "wb") as f:
                for line in self.lines:
                    f.write(_encode(line))
        except OSError:
            self._print("Write error\n")
            return
        self._print("%d lines written to %s\n", len(self.lines), self.filename)

    def read_file(self) -> None:
        """Ask for a file name and replace the lines with that file's lines.

        The file is read in chunks of MAXLEN - 1 bytes; only lines that end
        within a chunk are kept.
        """
        self.filename = self._ask_filename()
        try:
            f = open(self.filename, "rb")
        except OSError:
            self._print("Error opening file\n")
            return
        self.lines = []
        with f:
            while len(self.lines) < MAXLINES:
                try:
                    chunk = f.read(MAXLEN - 1)
                except OSError:
                    break
                if not chunk:
                    break
                *complete, _partial = chunk.split(b"\0", 1)[0].split(b"\n")
                for piece in complete:
                    if len(self.lines) >= MAXLINES:
                        break
                    self.lines.append(_decode(piece) + "\n")
        self._print("%d lines read from %s\n", len(self.lines), self.filename)

    def run(self) -> int:
        """Read and carry out commands until q or end of input; return the exit status."""
        self._print("Simple ed editor (type 'h' for help)\n")
        actions = {
            "a": self.append_lines,
            "p": self.print_lines,
            "d": self.delete_line,
            "w": self.write_file,
            "r": self.read_file,
            "h": self.print_help,
        }
        while True:
            self._print("> ")
            cmd = self._read(_CMD_LEN)
            if not cmd:
                return 0
            key = cmd[0]
            if key == "q":
                return 0
            action = actions.get(key)
            if action is None:
                self._print("Unknown command '%c'. Type 'h' for help.\n", key)
            else:
                action()


def main(argv: list[str] | None = None) -> int:
    """Start the editor on standard input and output."""
    args = sys.argv[1:] if argv is None else list(argv)
    editor = Editor(sys.stdin, sys.stdout, args[0] if args else "")
    if args:
        editor.read_file()
    return editor.run()
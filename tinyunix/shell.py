"""Parser for the shell's command language: words, redirections, pipes, lists, background jobs and blocks."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterator, Optional, Union

from tinyunix.layout import OpenFlag

MAXARGS = 10

WHITESPACE = " \t\r\n\v"
SYMBOLS = "<|>&;()"

_LEXEME_PATTERN = re.compile(
    r"(?P<append>>>)|(?P<sym>[<|>&;()])|(?P<word>[^ \t\r\n\v<|>&;()]+)"
)

_REDIRECTS = {
    "<": (OpenFlag.RDONLY, 0),
    ">": (OpenFlag.WRONLY | OpenFlag.CREATE | OpenFlag.TRUNC, 1),
    "+": (OpenFlag.WRONLY | OpenFlag.CREATE, 1),
}


class ShellSyntaxError(ValueError):
    """Raised when a command line cannot be parsed."""

    def __init__(self, message: str, leftover: str = "") -> None:
        super().__init__(message)
        self.leftover = leftover


@dataclass
class ExecCmd:
    """A program name followed by its arguments."""

    argv: list[str] = field(default_factory=list)


@dataclass
class RedirCmd:
    """A command whose file descriptor fd is reopened on file with mode."""

    cmd: "Command"
    file: str
    mode: OpenFlag
    fd: int


@dataclass
class PipeCmd:
    """Two commands with the output of the left feeding the right."""

    left: "Command"
    right: "Command"


@dataclass
class ListCmd:
    """Two commands run one after the other."""

    left: "Command"
    right: "Command"


@dataclass
class BackCmd:
    """A command run in the background."""

    cmd: "Command"


Command = Union[ExecCmd, RedirCmd, PipeCmd, ListCmd, BackCmd]


@dataclass(frozen=True)
class _Lexeme:
    kind: str
    text: str
    start: int


def _scan(line: str) -> Iterator[_Lexeme]:
    line = line.split("\0", 1)[0]
    for m in _LEXEME_PATTERN.finditer(line):
        text = m.group()
        if m.lastgroup == "append":
            kind = "+"
        elif m.lastgroup == "sym":
            kind = text
        else:
            kind = "a"
        yield _Lexeme(kind, text, m.start())


def tokenize(line: str) -> list[tuple[str, str]]:
    """Split a line into (kind, text) pairs.

    kind is "a" for a word, "+" for ">>", and the symbol itself otherwise.
    """
    return [(lex.kind, lex.text) for lex in _scan(line)]


class _Parser:
    def __init__(self, line: str) -> None:
        self.line = line
        self.lexemes = list(_scan(line))
        self.pos = 0

    def peek(self, chars: str) -> bool:
        return self.pos < len(self.lexemes) and self.lexemes[self.pos].text[0] in chars

    def next(self) -> Optional[_Lexeme]:
        if self.pos >= len(self.lexemes):
            return None
        lex = self.lexemes[self.pos]
        self.pos += 1
        return lex

    def leftover(self) -> Optional[str]:
        if self.pos >= len(self.lexemes):
            return None
        return self.line[self.lexemes[self.pos].start:]

    def parse_line(self) -> Command:
        cmd = self.parse_pipe()
        while self.peek("&"):
            self.next()
            cmd = BackCmd(cmd)
        if self.peek(";"):
            self.next()
            cmd = ListCmd(cmd, self.parse_line())
        return cmd

    def parse_pipe(self) -> Command:
        cmd = self.parse_exec()
        if self.peek("|"):
            self.next()
            cmd = PipeCmd(cmd, self.parse_pipe())
        return cmd

    def parse_redirs(self, cmd: Command) -> Command:
        while self.peek("<>"):
            op = self.next()
            target = self.next()
            if target is None or target.kind != "a":
                raise ShellSyntaxError("missing file for redirection")
            mode, fd = _REDIRECTS[op.kind]
            cmd = RedirCmd(cmd, target.text, mode, fd)
        return cmd

    def parse_block(self) -> Command:
        if not self.peek("("):
            raise ShellSyntaxError("parseblock")
        self.next()
        cmd = self.parse_line()
        if not self.peek(")"):
            raise ShellSyntaxError("syntax - missing )")
        self.next()
        return self.parse_redirs(cmd)

    def parse_exec(self) -> Command:
        if self.peek("("):
            return self.parse_block()
        ecmd = ExecCmd()
        cmd = self.parse_redirs(ecmd)
        while not self.peek("|)&;"):
            lex = self.next()
            if lex is None:
                break
            if lex.kind != "a":
                raise ShellSyntaxError("syntax")
            ecmd.argv.append(lex.text)
            if len(ecmd.argv) >= MAXARGS:
                raise ShellSyntaxError("too many args")
            cmd = self.parse_redirs(cmd)
        return cmd


def parse_cmd(line: str) -> Command:
    """Parse a whole command line into a command tree."""
    parser = _Parser(line)
    cmd = parser.parse_line()
    leftover = parser.leftover()
    if leftover is not None:
        raise ShellSyntaxError("syntax", leftover=leftover)
    return cmd
"""Small file and process utilities: cat, echo, ls, mkdir, rm, ln, touch, kill, clear."""

from __future__ import annotations

import os
import signal
import stat as _statmod
import sys
from typing import Optional

from tinyunix.fmt import fprintf, printf
from tinyunix.layout import FileType
from tinyunix.ulib import atoi

DIRSIZ = 14
_CHUNK = 512
_LS_BUF = 512
CLEAR_SCREEN = "\033[2J\033[H"


def _args(argv: Optional[list[str]]) -> list[str]:
    return sys.argv[1:] if argv is None else list(argv)


def _write_bytes(data: bytes) -> None:
    out = sys.stdout
    binary = getattr(out, "buffer", None)
    if binary is None:
        out.write(data.decode("utf-8", "surrogateescape"))
        return
    out.flush()
    binary.write(data)
    binary.flush()


def _copy(stream) -> bool:
    """Copy stream to standard output; report errors and return False on failure."""
    while True:
        try:
            chunk = stream.read(_CHUNK)
        except OSError:
            fprintf(sys.stderr, "cat: read error\n")
            return False
        if not chunk:
            return True
        try:
            if isinstance(chunk, str):
                sys.stdout.write(chunk)
            else:
                _write_bytes(chunk)
        except OSError:
            fprintf(sys.stderr, "cat: write error\n")
            return False


def cat(argv: Optional[list[str]] = None) -> int:
    """Concatenate the named files, or standard input, to standard output."""
    args = _args(argv)
    if not args:
        return 0 if _copy(getattr(sys.stdin, "buffer", sys.stdin)) else 1
    for path in args:
        try:
            f = open(path, "rb")
        except OSError:
            fprintf(sys.stderr, "cat: cannot open %s\n", path)
            return 1
        with f:
            if not _copy(f):
                return 1
    return 0


def echo(argv: Optional[list[str]] = None) -> int:
    """Write the arguments separated by spaces and ended by a newline."""
    args = _args(argv)
    if args:
        sys.stdout.write(" ".join(args) + "\n")
    return 0


def fmtname(path: str) -> str:
    """Return the last path component, blank-padded to DIRSIZ characters."""
    name = path.rsplit("/", 1)[-1]
    if len(name) >= DIRSIZ:
        return name
    return name.ljust(DIRSIZ)


def _file_type(st: os.stat_result) -> FileType:
    if _statmod.S_ISDIR(st.st_mode):
        return FileType.DIR
    if _statmod.S_ISREG(st.st_mode):
        return FileType.FILE
    return FileType.DEVICE


def _print_entry(path: str, st: os.stat_result) -> None:
    printf("%s %d %d %d\n", fmtname(path), int(_file_type(st)), st.st_ino, st.st_size)


def _ls(path: str) -> None:
    try:
        st = os.stat(path)
    except OSError:
        fprintf(sys.stderr, "ls: cannot open %s\n", path)
        return
    if _file_type(st) is not FileType.DIR:
        _print_entry(path, st)
        return
    if len(path) + 1 + DIRSIZ + 1 > _LS_BUF:
        printf("ls: path too long\n")
        return
    try:
        names = sorted(os.listdir(path))
    except OSError:
        fprintf(sys.stderr, "ls: cannot open %s\n", path)
        return
    for name in [".", ".."] + names:
        full = f"{path}/{name}"
        try:
            entry = os.stat(full)
        except OSError:
            printf("ls: cannot stat %s\n", full)
            continue
        _print_entry(full, entry)


def ls(argv: Optional[list[str]] = None) -> int:
    """List files and directory contents with type, inode number and size."""
    args = _args(argv) or ["."]
    for path in args:
        _ls(path)
    return 0


def mkdir(argv: Optional[list[str]] = None) -> int:
    """Create directories, stopping at the first failure."""
    args = _args(argv)
    if not args:
        fprintf(sys.stderr, "Usage: mkdir files...\n")
        return 1
    for path in args:
        try:
            os.mkdir(path)
        except OSError:
            fprintf(sys.stderr, "mkdir: %s failed to create\n", path)
            break
    return 0


def _unlink(path: str) -> None:
    if os.path.isdir(path) and not os.path.islink(path):
        os.rmdir(path)
    else:
        os.unlink(path)


def rm(argv: Optional[list[str]] = None) -> int:
    """Remove files or empty directories, stopping at the first failure."""
    args = _args(argv)
    if not args:
        fprintf(sys.stderr, "Usage: rm files...\n")
        return 1
    for path in args:
        try:
            _unlink(path)
        except OSError:
            fprintf(sys.stderr, "rm: %s failed to delete\n", path)
            break
    return 0


def ln(argv: Optional[list[str]] = None) -> int:
    """Make a hard link named new to the file old."""
    args = _args(argv)
    if len(args) != 2:
        fprintf(sys.stderr, "Usage: ln old new\n")
        return 1
    old, new = args
    try:
        os.link(old, new)
    except OSError:
        fprintf(sys.stderr, "link %s %s: failed\n", old, new)
    return 0


def touch(argv: Optional[list[str]] = None) -> int:
    """Create each named file if it does not exist."""
    args = _args(argv)
    if not args:
        fprintf(sys.stderr, "Usage: touch file...\n")
        return 1
    for path in args:
        try:
            fd = os.open(path, os.O_CREAT | os.O_RDWR, 0o666)
        except OSError:
            fprintf(sys.stderr, "touch: cannot touch %s\n", path)
            continue
        os.close(fd)
    return 0


def kill(argv: Optional[list[str]] = None) -> int:
    """Kill each process named by pid; failures are ignored."""
    args = _args(argv)
    if not args:
        fprintf(sys.stderr, "usage: kill pid...\n")
        return 1
    sig = getattr(signal, "SIGKILL", signal.SIGTERM)
    for arg in args:
        pid = atoi(arg)
        # No process has a pid of zero or below.
        if pid <= 0:
            continue
        try:
            os.kill(pid, sig)
        except (OSError, OverflowError):
            pass
    return 0


def clear(argv: Optional[list[str]] = None) -> int:
    """Clear the terminal and move the cursor to the top-left corner."""
    sys.stdout.write(CLEAR_SCREEN)
    return 0
"""ELF executable header and program-header records."""

from __future__ import annotations

import dataclasses
import struct
from dataclasses import dataclass

ELF_MAGIC = 0x464C457F  # "\x7FELF" read as a little-endian word

ELF_PROG_LOAD = 1

ELF_PROG_FLAG_EXEC = 1
ELF_PROG_FLAG_WRITE = 2
ELF_PROG_FLAG_READ = 4

_ELF_HEADER = struct.Struct("<I12sHHIQQQIHHHHHH")
_PROG_HEADER = struct.Struct("<IIQQQQQQ")

ELF_HEADER_SIZE = _ELF_HEADER.size
PROGRAM_HEADER_SIZE = _PROG_HEADER.size


class ElfFormatError(ValueError):
    """Raised when bytes do not hold a valid ELF record."""


@dataclass(frozen=True)
class ElfHeader:
    """The file header of an ELF executable."""

    magic: int = ELF_MAGIC
    elf: bytes = bytes(12)
    type: int = 0
    machine: int = 0
    version: int = 0
    entry: int = 0
    phoff: int = 0
    shoff: int = 0
    flags: int = 0
    ehsize: int = 0
    phentsize: int = 0
    phnum: int = 0
    shentsize: int = 0
    shnum: int = 0
    shstrndx: int = 0

    def pack(self) -> bytes:
        """Encode the header in its little-endian on-disk form."""
        if len(self.elf) > 12:
            raise ValueError("ELF identification field exceeds 12 bytes")
        try:
            return _ELF_HEADER.pack(*dataclasses.astuple(self))
        except struct.error as exc:
            raise ValueError(f"field out of range: {exc}") from exc


@dataclass(frozen=True)
class ProgramHeader:
    """One program section header of an ELF executable."""

    type: int = 0
    flags: int = 0
    off: int = 0
    vaddr: int = 0
    paddr: int = 0
    filesz: int = 0
    memsz: int = 0
    align: int = 0

    def pack(self) -> bytes:
        """Encode the program header in its little-endian on-disk form."""
        try:
            return _PROG_HEADER.pack(*dataclasses.astuple(self))
        except struct.error as exc:
            raise ValueError(f"field out of range: {exc}") from exc


def parse_elf_header(data: bytes) -> ElfHeader:
    """Decode an ELF file header from the start of data."""
    if len(data) < ELF_HEADER_SIZE:
        raise ElfFormatError(
            f"need {ELF_HEADER_SIZE} bytes for an ELF header, got {len(data)}"
        )
    header = ElfHeader(*_ELF_HEADER.unpack_from(data))
    if header.magic != ELF_MAGIC:
        raise ElfFormatError(f"bad ELF magic {header.magic:#x}")
    return header


def parse_program_header(data: bytes) -> ProgramHeader:
    """Decode a program header from the start of data."""
    if len(data) < PROGRAM_HEADER_SIZE:
        raise ElfFormatError(
            f"need {PROGRAM_HEADER_SIZE} bytes for a program header, got {len(data)}"
        )
    return ProgramHeader(*_PROG_HEADER.unpack_from(data))
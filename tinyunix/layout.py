"""Memory layout, page-table arithmetic and shared system constants."""

from __future__ import annotations

import enum
from dataclasses import dataclass

UINT64_MASK = (1 << 64) - 1

# System-wide limits.
NPROC = 64
NCPU = 8
NOFILE = 16
NFILE = 100
NINODE = 50
NDEV = 10
ROOTDEV = 1
MAXARG = 32
MAXOPBLOCKS = 10
LOGSIZE = MAXOPBLOCKS * 3
NBUF = MAXOPBLOCKS * 3
FSSIZE = 2000
MAXPATH = 128
USERSTACK = 1

# Machine status register.
MSTATUS_MPP_MASK = 3 << 11
MSTATUS_MPP_M = 3 << 11
MSTATUS_MPP_S = 1 << 11
MSTATUS_MPP_U = 0 << 11
MSTATUS_MIE = 1 << 3

# Supervisor status register.
SSTATUS_SPP = 1 << 8
SSTATUS_SPIE = 1 << 5
SSTATUS_UPIE = 1 << 4
SSTATUS_SIE = 1 << 1
SSTATUS_UIE = 1 << 0

# Supervisor interrupt enable.
SIE_SEIE = 1 << 9
SIE_STIE = 1 << 5
SIE_SSIE = 1 << 1

# Machine-mode interrupt enable.
MIE_STIE = 1 << 5

# Sv39 paging.
SATP_SV39 = 8 << 60

PGSIZE = 4096
PGSHIFT = 12

PTE_V = 1 << 0
PTE_R = 1 << 1
PTE_W = 1 << 2
PTE_X = 1 << 3
PTE_U = 1 << 4

PXMASK = 0x1FF

# One beyond the highest usable virtual address.
MAXVA = 1 << (9 + 9 + 9 + 12 - 1)

# Physical memory layout of the virt machine.
UART0 = 0x10000000
UART0_IRQ = 10
VIRTIO0 = 0x10001000
VIRTIO0_IRQ = 1

PLIC = 0x0C000000
PLIC_PRIORITY = PLIC + 0x0
PLIC_PENDING = PLIC + 0x1000

KERNBASE = 0x80000000
PHYSTOP = KERNBASE + 128 * 1024 * 1024

TRAMPOLINE = MAXVA - PGSIZE
TRAPFRAME = TRAMPOLINE - PGSIZE


def pgroundup(sz: int) -> int:
    """Round a size up to the next page boundary (64-bit wrap-around)."""
    return ((sz + PGSIZE - 1) & ~(PGSIZE - 1)) & UINT64_MASK


def pgrounddown(a: int) -> int:
    """Round an address down to its page boundary."""
    return (a & ~(PGSIZE - 1)) & UINT64_MASK


def pa2pte(pa: int) -> int:
    """Shift a physical address into the position it takes in a PTE."""
    return ((pa & UINT64_MASK) >> 12) << 10


def pte2pa(pte: int) -> int:
    """Extract the physical address held by a PTE."""
    return (((pte & UINT64_MASK) >> 10) << 12) & UINT64_MASK


def pte_flags(pte: int) -> int:
    """Return the low ten flag bits of a PTE."""
    return pte & 0x3FF


def pxshift(level: int) -> int:
    """Bit position of the page-table index for the given level."""
    return PGSHIFT + 9 * level


def px(level: int, va: int) -> int:
    """Extract the 9-bit page-table index of a virtual address at a level."""
    return ((va & UINT64_MASK) >> pxshift(level)) & PXMASK


def kstack(p: int) -> int:
    """Virtual address of process slot p's kernel stack, below the trampoline."""
    return TRAMPOLINE - (p + 1) * 2 * PGSIZE


def make_satp(pagetable: int) -> int:
    """Build the satp register value selecting Sv39 and the given page table."""
    return SATP_SV39 | ((pagetable & UINT64_MASK) >> 12)


def plic_senable(hart: int) -> int:
    """Address of the supervisor interrupt-enable bits for a hart."""
    return PLIC + 0x2080 + hart * 0x100


def plic_spriority(hart: int) -> int:
    """Address of the supervisor priority threshold for a hart."""
    return PLIC + 0x201000 + hart * 0x2000


def plic_sclaim(hart: int) -> int:
    """Address of the supervisor claim/complete register for a hart."""
    return PLIC + 0x201004 + hart * 0x2000


class OpenFlag(enum.IntFlag):
    """Flags accepted by open()."""

    RDONLY = 0x000
    WRONLY = 0x001
    RDWR = 0x002
    CREATE = 0x200
    TRUNC = 0x400


class FileType(enum.IntEnum):
    """Kinds of file-system objects."""

    DIR = 1
    FILE = 2
    DEVICE = 3


@dataclass(frozen=True)
class Stat:
    """Metadata of a file as reported by fstat()."""

    dev: int
    ino: int
    type: FileType
    nlink: int
    size: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "type", FileType(self.type))
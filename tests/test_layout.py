import pytest

from tinyunix.layout import (
    KERNBASE,
    MAXVA,
    NPROC,
    PGSHIFT,
    PGSIZE,
    PLIC,
    PTE_R,
    PTE_U,
    PTE_V,
    PTE_W,
    PXMASK,
    SATP_SV39,
    TRAMPOLINE,
    UINT64_MASK,
    FileType,
    OpenFlag,
    Stat,
    kstack,
    make_satp,
    pa2pte,
    pgrounddown,
    pgroundup,
    plic_sclaim,
    plic_senable,
    plic_spriority,
    pte2pa,
    pte_flags,
    px,
    pxshift,
)

SAMPLES = [0, 1, PGSIZE - 1, PGSIZE, PGSIZE + 1, KERNBASE + 123, MAXVA - 1]


@pytest.mark.parametrize("value", SAMPLES)
def test_pgrounddown_is_aligned_and_not_above(value):
    down = pgrounddown(value)
    assert down % PGSIZE == 0
    assert down <= value < down + PGSIZE


@pytest.mark.parametrize("value", SAMPLES)
def test_pgroundup_is_aligned_and_not_below(value):
    up = pgroundup(value)
    assert up % PGSIZE == 0
    assert value <= up < value + PGSIZE


def test_pgroundup_next_page():
    assert pgroundup(PGSIZE + 1) == 2 * PGSIZE
    assert pgroundup(PGSIZE) == PGSIZE


def test_pgroundup_wraps_at_64_bits():
    assert pgroundup(UINT64_MASK) == 0


@pytest.mark.parametrize("pa", [KERNBASE, KERNBASE + 5 * PGSIZE, KERNBASE + 77])
def test_pte_round_trip(pa):
    pte = pa2pte(pa) | PTE_V | PTE_R | PTE_W
    assert pte2pa(pte) == pgrounddown(pa)
    assert pte_flags(pte) == PTE_V | PTE_R | PTE_W


def test_pte_flags_ignore_address():
    assert pte_flags(pa2pte(KERNBASE)) == 0
    assert pte_flags(pa2pte(KERNBASE) | PTE_U) == PTE_U


def test_pxshift_steps():
    assert pxshift(0) == PGSHIFT
    assert pxshift(1) - pxshift(0) == 9
    assert pxshift(2) - pxshift(1) == 9


@pytest.mark.parametrize("va", [0, PGSIZE, TRAMPOLINE, KERNBASE + 0x1234, MAXVA - 1])
def test_px_decomposes_address(va):
    rebuilt = sum(px(level, va) << pxshift(level) for level in range(3))
    rebuilt |= va & (PGSIZE - 1)
    assert rebuilt == va
    assert all(0 <= px(level, va) <= PXMASK for level in range(3))


def test_kstacks_are_separated_by_guard_pages():
    stacks = [kstack(p) for p in range(NPROC)]
    assert stacks[0] == TRAMPOLINE - 2 * PGSIZE
    assert all(a - b == 2 * PGSIZE for a, b in zip(stacks, stacks[1:]))
    assert all(s % PGSIZE == 0 for s in stacks)


def test_make_satp():
    satp = make_satp(KERNBASE + 3 * PGSIZE)
    assert satp & SATP_SV39 == SATP_SV39
    assert satp & ~SATP_SV39 == (KERNBASE + 3 * PGSIZE) >> 12


def test_plic_addresses():
    assert plic_senable(0) == PLIC + 0x2080
    assert plic_senable(1) - plic_senable(0) == 0x100
    assert plic_spriority(1) - plic_spriority(0) == 0x2000
    assert plic_sclaim(2) == plic_spriority(2) + 4


def test_open_flags_combine():
    flags = OpenFlag(0x202)
    assert flags == OpenFlag.CREATE | OpenFlag.RDWR
    assert OpenFlag.CREATE in flags
    assert OpenFlag.TRUNC not in flags
    assert OpenFlag(0) == OpenFlag.RDONLY
    assert OpenFlag(0x401) == OpenFlag.TRUNC | OpenFlag.WRONLY


def test_stat_coerces_type():
    st = Stat(dev=1, ino=2, type=2, nlink=1, size=10)
    assert st.type is FileType.FILE


def test_stat_rejects_unknown_type():
    with pytest.raises(ValueError):
        Stat(dev=1, ino=2, type=9, nlink=1, size=0)
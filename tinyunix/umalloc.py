"""A first-fit free-list allocator over a simulated program break."""

from __future__ import annotations

from dataclasses import dataclass

HEADER_SIZE = 16
MIN_MORECORE_UNITS = 4096

# The sentinel header lives below the heap, as a static variable would.
_BASE = -HEADER_SIZE


@dataclass
class _Header:
    ptr: int
    size: int  # in units of HEADER_SIZE, header included


class Allocator:
    """Memory allocator handing out addresses in a heap that grows by sbrk."""

    def __init__(self, heap_limit: int) -> None:
        if heap_limit < 0:
            raise ValueError("heap limit must not be negative")
        self.heap_limit = heap_limit
        self._brk = 0
        self._headers: dict[int, _Header] = {}
        self._freep: int | None = None
        self._allocated: set[int] = set()

    def sbrk(self, n: int) -> int:
        """Move the break by n bytes and return the old break."""
        old = self._brk
        new = old + n
        if new < 0 or new > self.heap_limit:
            raise MemoryError(f"cannot move break from {old} by {n}")
        self._brk = new
        return old

    def malloc(self, nbytes: int) -> int:
        """Allocate nbytes and return the address of the block."""
        if nbytes < 0:
            raise ValueError("size must not be negative")
        nunits = (nbytes + HEADER_SIZE - 1) // HEADER_SIZE + 1
        h = self._headers
        if self._freep is None:
            h[_BASE] = _Header(_BASE, 0)
            self._freep = _BASE
        prevp = self._freep
        p = h[prevp].ptr
        while True:
            hdr = h[p]
            if hdr.size >= nunits:
                if hdr.size == nunits:
                    h[prevp].ptr = hdr.ptr
                else:
                    hdr.size -= nunits
                    p += hdr.size * HEADER_SIZE
                    h[p] = _Header(0, nunits)
                self._freep = prevp
                self._allocated.add(p)
                return p + HEADER_SIZE
            if p == self._freep:
                p = self._morecore(nunits)
            prevp, p = p, h[p].ptr

    def free(self, addr: int) -> None:
        """Return a block obtained from malloc to the free list."""
        bp = addr - HEADER_SIZE
        if bp not in self._allocated:
            raise ValueError(f"address {addr:#x} is not an allocated block")
        self._allocated.remove(bp)
        self._release(bp)

    def _morecore(self, nu: int) -> int:
        nu = max(nu, MIN_MORECORE_UNITS)
        hp = self.sbrk(nu * HEADER_SIZE)
        self._headers[hp] = _Header(0, nu)
        self._release(hp)
        assert self._freep is not None
        return self._freep

    def _release(self, bp: int) -> None:
        h = self._headers
        p = self._freep
        assert p is not None
        while not (p < bp < h[p].ptr):
            if p >= h[p].ptr and (bp > p or bp < h[p].ptr):
                break
            p = h[p].ptr
        blk = h[bp]
        cur = h[p]
        if bp + blk.size * HEADER_SIZE == cur.ptr:
            nxt = h.pop(cur.ptr)
            blk.size += nxt.size
            blk.ptr = nxt.ptr
        else:
            blk.ptr = cur.ptr
        if p + cur.size * HEADER_SIZE == bp:
            cur.size += blk.size
            cur.ptr = blk.ptr
            del h[bp]
        else:
            cur.ptr = bp
        self._freep = p
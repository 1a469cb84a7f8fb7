"""The Park-Miller minimal standard pseudo-random generator."""

from __future__ import annotations

_UINT64_MASK = (1 << 64) - 1


def do_rand(ctx: int) -> int:
    """Advance the generator state ctx and return the new state.

    Computes (7^5 * x) mod (2^31 - 1) by Schrage's method; the result
    lies in [0, 0x7ffffffd] and is also the next state.
    """
    x = (ctx & _UINT64_MASK) % 0x7FFFFFFE + 1
    hi, lo = divmod(x, 127773)
    x = 16807 * lo - 2836 * hi
    if x < 0:
        x += 0x7FFFFFFF
    return x - 1


class Random:
    """A generator whose state can be read and perturbed directly."""

    def __init__(self, seed: int = 1) -> None:
        self.state = seed & _UINT64_MASK

    def rand(self) -> int:
        """Return the next pseudo-random number."""
        self.state = do_rand(self.state)
        return self.state
"""
Deterministic xorshift32 random stream.

The maze generator and the navigator draw every random number they need from
an explicit ``XorShiftRandom`` instance, so one seed reproduces the whole
sequence of mazes, goals and paths.

Reference: G. Marsaglia, "Xorshift RNGs", Journal of Statistical Software (2003)
"""

from __future__ import annotations

import time

from mazepath.utils.exceptions import DegenerateSeedError, InvalidConfigurationError

MASK32 = 0xFFFFFFFF


def _time_seed() -> int:
    """Derive a non-zero 32-bit seed from the clock."""
    seed = time.time_ns() & MASK32
    while seed == 0:
        seed = time.time_ns() & MASK32
    return seed


class XorShiftRandom:
    """
    xorshift32 pseudo-random generator.

    Cheap and non-cryptographic; good enough for uniform-ish selection among
    small neighbor sets. A zero state is a fixed point of the recurrence, so
    seeds whose low 32 bits are zero are rejected.

    Example:
        >>> rng = XorShiftRandom(12345)
        >>> rng.next()
        3336926330
    """

    def __init__(self, seed: int | None = None):
        """
        Args:
            seed: Initial state. ``None`` derives one from the clock.
        """
        self._state = 0
        self.seed(_time_seed() if seed is None else seed)

    def seed(self, value: int) -> None:
        """
        Reset the internal state.

        Raises:
            DegenerateSeedError: If ``value`` masks to zero
        """
        state = int(value) & MASK32
        if state == 0:
            raise DegenerateSeedError(int(value), component="XorShiftRandom")
        self._state = state

    @property
    def state(self) -> int:
        return self._state

    def next(self) -> int:
        """Advance the recurrence and return the new 32-bit state."""
        s = self._state
        s ^= (s << 13) & MASK32
        s ^= s >> 17
        s ^= (s << 5) & MASK32
        self._state = s
        return s

    def randrange(self, n: int) -> int:
        """Return ``next() % n`` for ``n >= 1``."""
        if n < 1:
            raise InvalidConfigurationError("n", n, valid_range=(1, None), component="XorShiftRandom")
        return self.next() % n

    def __repr__(self) -> str:
        return f"XorShiftRandom(state={self._state})"

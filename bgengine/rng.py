"""Deterministic PCG32 random number generator."""

from __future__ import annotations

_MULTIPLIER = 6364136223846793005
_MASK64 = (1 << 64) - 1
_MASK32 = (1 << 32) - 1


class Random:
    """PCG-XSH-RR generator with 64-bit state and a 32-bit output.

    Without a seed the generator starts with zero state and zero increment.
    """

    def __init__(self, seed: int | None = None, sequence: int = 0) -> None:
        self._state = 0
        self._increment = 0
        if seed is not None:
            self.seed(seed, sequence)

    def seed(self, seed: int, sequence: int) -> None:
        """Reinitialise the generator from a seed and a stream selector."""
        self._state = 0
        self._increment = ((sequence << 1) | 1) & _MASK64
        self.next_u32()
        self._state = (self._state + seed) & _MASK64
        self.next_u32()

    def next_u32(self) -> int:
        """Return the next 32-bit value."""
        old = self._state
        self._state = (old * _MULTIPLIER + self._increment) & _MASK64
        xorshifted = (((old >> 18) ^ old) >> 27) & _MASK32
        rotation = old >> 59
        return ((xorshifted >> rotation) | (xorshifted << ((-rotation) & 31))) & _MASK32

    def next_below(self, bound: int) -> int:
        """Return an unbiased value in [0, bound); a bound of 0 yields 0."""
        if bound == 0:
            return 0
        threshold = ((-bound) & _MASK32) % bound
        while True:
            value = self.next_u32()
            if value >= threshold:
                return value % bound

    def state(self) -> int:
        return self._state

    def increment(self) -> int:
        return self._increment
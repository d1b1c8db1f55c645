"""Checksum of simulation state built from typed values."""

from __future__ import annotations

from bgengine.fixed import Scalar
from bgengine.hashing import Hasher64
from bgengine.vec2 import Vec2


class StateHash:
    """Typed front end to a 64-bit FNV-1a hasher."""

    def __init__(self) -> None:
        self._hasher = Hasher64()

    def reset(self) -> None:
        self._hasher.reset()

    def add_u32(self, value: int) -> None:
        self._hasher.add_u32(value)

    def add_i32(self, value: int) -> None:
        self._hasher.add_i32(value)

    def add_u64(self, value: int) -> None:
        self._hasher.add_u64(value)

    def add_i64(self, value: int) -> None:
        self._hasher.add_i64(value)

    def add_bool(self, value: bool) -> None:
        """Hash a flag as a single byte, 1 or 0."""
        self._hasher.add_u8(1 if value else 0)

    def add_scalar(self, value: Scalar) -> None:
        """Hash a fixed-point value by its raw 64-bit representation."""
        self._hasher.add_i64(value.raw)

    def add_vec2(self, value: Vec2) -> None:
        self.add_scalar(value.x)
        self.add_scalar(value.y)

    def value(self) -> int:
        return self._hasher.value()
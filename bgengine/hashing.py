"""64-bit FNV-1a hashing used for deterministic state checksums."""

from __future__ import annotations

OFFSET_BASIS = 14695981039346656037
PRIME = 1099511628211
_MASK64 = (1 << 64) - 1


class Hasher64:
    """Incremental FNV-1a hasher.

    Integers are fed as their little-endian byte representation of the
    stated width. A value that does not fit the width raises OverflowError.
    """

    OFFSET_BASIS = OFFSET_BASIS
    PRIME = PRIME

    def __init__(self) -> None:
        self._value = OFFSET_BASIS

    def reset(self) -> None:
        """Return the hasher to its initial state."""
        self._value = OFFSET_BASIS

    def add_bytes(self, data: bytes | bytearray | memoryview) -> None:
        """Mix every byte of a bytes-like object into the hash."""
        value = self._value
        for byte in memoryview(data).tobytes():
            value = ((value ^ byte) * PRIME) & _MASK64
        self._value = value

    def _add_int(self, value: int, size: int, signed: bool) -> None:
        self.add_bytes(int(value).to_bytes(size, "little", signed=signed))

    def add_u8(self, value: int) -> None:
        self._add_int(value, 1, False)

    def add_u16(self, value: int) -> None:
        self._add_int(value, 2, False)

    def add_u32(self, value: int) -> None:
        self._add_int(value, 4, False)

    def add_u64(self, value: int) -> None:
        self._add_int(value, 8, False)

    def add_i8(self, value: int) -> None:
        self._add_int(value, 1, True)

    def add_i16(self, value: int) -> None:
        self._add_int(value, 2, True)

    def add_i32(self, value: int) -> None:
        self._add_int(value, 4, True)

    def add_i64(self, value: int) -> None:
        self._add_int(value, 8, True)

    def value(self) -> int:
        """The current 64-bit hash value."""
        return self._value
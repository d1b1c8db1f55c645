"""Signed 48.16 fixed-point scalar for deterministic simulation maths."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

FRACTION_BITS = 16
ONE_RAW = 1 << FRACTION_BITS
HALF_RAW = 1 << (FRACTION_BITS - 1)

I64_MIN = -(1 << 63)
I64_MAX = (1 << 63) - 1


@dataclass(frozen=True, order=True)
class Scalar:
    """Fixed-point number stored as a signed 64-bit raw value.

    Results that leave the 64-bit range raise OverflowError; division by
    zero raises ZeroDivisionError. Multiplication and division truncate
    toward zero.
    """

    raw: int = 0

    FRACTION_BITS: ClassVar[int] = FRACTION_BITS
    ONE_RAW: ClassVar[int] = ONE_RAW
    HALF_RAW: ClassVar[int] = HALF_RAW

    def __post_init__(self) -> None:
        if not isinstance(self.raw, int):
            raise TypeError("raw value must be an integer")
        if not I64_MIN <= self.raw <= I64_MAX:
            raise OverflowError("fixed-point value exceeds 64 bits")

    @staticmethod
    def from_raw(raw: int) -> Scalar:
        return Scalar(raw)

    @staticmethod
    def from_int(value: int) -> Scalar:
        return Scalar(value << FRACTION_BITS)

    @staticmethod
    def zero() -> Scalar:
        return Scalar(0)

    @staticmethod
    def one() -> Scalar:
        return Scalar(ONE_RAW)

    @staticmethod
    def half() -> Scalar:
        return Scalar(HALF_RAW)

    def is_zero(self) -> bool:
        return self.raw == 0

    def __pos__(self) -> Scalar:
        return self

    def __neg__(self) -> Scalar:
        return Scalar(-self.raw)

    def __abs__(self) -> Scalar:
        return self if self.raw >= 0 else Scalar(-self.raw)

    def __add__(self, other: object) -> Scalar:
        if not isinstance(other, Scalar):
            return NotImplemented
        return Scalar(self.raw + other.raw)

    def __sub__(self, other: object) -> Scalar:
        if not isinstance(other, Scalar):
            return NotImplemented
        return Scalar(self.raw - other.raw)

    def __mul__(self, other: object) -> Scalar:
        if not isinstance(other, Scalar):
            return NotImplemented
        negative = (self.raw < 0) != (other.raw < 0)
        magnitude = (abs(self.raw) * abs(other.raw)) >> FRACTION_BITS
        if magnitude > I64_MAX:
            raise OverflowError("fixed-point multiplication overflows")
        return Scalar(-magnitude if negative else magnitude)

    def __truediv__(self, other: object) -> Scalar:
        if not isinstance(other, Scalar):
            return NotImplemented
        if other.raw == 0:
            raise ZeroDivisionError("fixed-point division by zero")
        negative = (self.raw < 0) != (other.raw < 0)
        quotient = (abs(self.raw) << FRACTION_BITS) // abs(other.raw)
        if quotient > I64_MAX:
            raise OverflowError("fixed-point division overflows")
        return Scalar(-quotient if negative else quotient)

    def trunc_to_int(self) -> int:
        """Integer part, truncated toward zero."""
        whole = abs(self.raw) // ONE_RAW
        return -whole if self.raw < 0 else whole

    def to_float(self) -> float:
        return self.raw / ONE_RAW

    @staticmethod
    def min(a: Scalar, b: Scalar) -> Scalar:
        return a if a.raw < b.raw else b

    @staticmethod
    def max(a: Scalar, b: Scalar) -> Scalar:
        return a if a.raw > b.raw else b
"""Square root, length and normalisation on fixed-point values."""

from __future__ import annotations

import math

from bgengine.fixed import FRACTION_BITS, Scalar
from bgengine.vec2 import Vec2


def sqrt(value: Scalar) -> Scalar:
    """Floor square root; non-positive input gives zero.

    The raw value must leave its top 16 bits clear, otherwise
    OverflowError is raised.
    """
    raw = value.raw
    if raw <= 0:
        return Scalar.zero()
    if raw >> (64 - FRACTION_BITS):
        raise OverflowError("value too large for fixed-point square root")
    return Scalar.from_raw(math.isqrt(raw << FRACTION_BITS))


def length(value: Vec2) -> Scalar:
    return sqrt(Vec2.length_sq(value))


def distance(a: Vec2, b: Vec2) -> Scalar:
    return sqrt(Vec2.distance_sq(a, b))


def normalize_approx(value: Vec2) -> Vec2:
    """Unit vector in the same direction; the zero vector stays zero."""
    size = length(value)
    if size.is_zero():
        return Vec2.zero()
    return value / size
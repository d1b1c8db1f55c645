"""Two-dimensional vector of fixed-point scalars."""

from __future__ import annotations

from dataclasses import dataclass, field

from bgengine.fixed import Scalar


@dataclass(frozen=True)
class Vec2:
    """Immutable 2D vector with fixed-point components."""

    x: Scalar = field(default_factory=Scalar.zero)
    y: Scalar = field(default_factory=Scalar.zero)

    @staticmethod
    def zero() -> Vec2:
        return Vec2(Scalar.zero(), Scalar.zero())

    def __pos__(self) -> Vec2:
        return self

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __add__(self, other: object) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: object) -> Vec2:
        if not isinstance(scalar, Scalar):
            return NotImplemented
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: object) -> Vec2:
        if not isinstance(scalar, Scalar):
            return NotImplemented
        return Vec2(self.x / scalar, self.y / scalar)

    @staticmethod
    def dot(a: Vec2, b: Vec2) -> Scalar:
        return a.x * b.x + a.y * b.y

    @staticmethod
    def length_sq(value: Vec2) -> Scalar:
        return Vec2.dot(value, value)

    @staticmethod
    def distance_sq(a: Vec2, b: Vec2) -> Scalar:
        return Vec2.length_sq(a - b)
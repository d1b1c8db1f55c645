"""Value types describing a unit's movement and the tuning of its steering."""

from __future__ import annotations

from dataclasses import dataclass, field

from bgengine.fixed import ONE_RAW, Scalar
from bgengine.vec2 import Vec2


@dataclass(frozen=True)
class MovementTarget:
    """World position a unit is heading for."""

    position: Vec2 = field(default_factory=Vec2.zero)


@dataclass
class MovementState:
    """Kinematic state of one moving unit."""

    position: Vec2 = field(default_factory=Vec2.zero)
    velocity: Vec2 = field(default_factory=Vec2.zero)
    desired_velocity: Vec2 = field(default_factory=Vec2.zero)
    target: MovementTarget = field(default_factory=MovementTarget)
    max_speed: Scalar = field(default_factory=Scalar.zero)
    radius: Scalar = field(default_factory=Scalar.zero)
    has_target: bool = False


@dataclass(frozen=True)
class ArrivalSettings:
    """Distances at which a unit starts braking and counts as arrived."""

    slow_down_distance: Scalar = field(default_factory=lambda: Scalar.from_int(2))
    stop_distance: Scalar = field(default_factory=lambda: Scalar.from_raw(ONE_RAW // 10))


@dataclass(frozen=True)
class SeparationSettings:
    """Strength and reach of the push between neighbouring units."""

    weight: Scalar = field(default_factory=Scalar.one)
    max_distance: Scalar = field(default_factory=lambda: Scalar.from_int(1))
"""Arrival steering: head for a target and slow down when close."""

from __future__ import annotations

from bgengine.fixed import Scalar
from bgengine.fixmath import distance, length, normalize_approx
from bgengine.movement_types import ArrivalSettings, MovementTarget
from bgengine.vec2 import Vec2


def has_arrived(position: Vec2, target: MovementTarget, settings: ArrivalSettings) -> bool:
    """True when the position lies within the stop distance of the target."""
    return distance(position, target.position) <= settings.stop_distance


def compute_desired_velocity(
    position: Vec2,
    target: MovementTarget,
    max_speed: Scalar,
    settings: ArrivalSettings,
) -> Vec2:
    """Velocity toward the target, scaled down linearly inside the slow-down radius."""
    to_target = target.position - position
    dist = length(to_target)
    if dist <= settings.stop_distance:
        return Vec2.zero()
    direction = normalize_approx(to_target)
    if dist >= settings.slow_down_distance:
        return direction * max_speed
    return direction * ((max_speed * dist) / settings.slow_down_distance)
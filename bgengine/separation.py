"""Separation steering that pushes overlapping units apart."""

from __future__ import annotations

from bgengine.fixed import Scalar
from bgengine.fixmath import length, normalize_approx
from bgengine.movement_types import MovementState, SeparationSettings
from bgengine.vec2 import Vec2


def compute_separation_offset(
    own: MovementState, other: MovementState, settings: SeparationSettings
) -> Vec2:
    """Push on `own` away from `other`.

    Full weight while the units overlap, fading linearly to zero at the
    larger of the combined radius and the configured maximum distance.
    """
    delta = own.position - other.position
    dist = length(delta)
    desired_distance = own.radius + other.radius
    max_distance = Scalar.max(desired_distance, settings.max_distance)

    if dist >= max_distance:
        return Vec2.zero()

    if dist.is_zero():
        # Fixed direction keeps coincident units deterministic.
        direction = Vec2(Scalar.one(), Scalar.zero())
    else:
        direction = normalize_approx(delta)

    if dist < desired_distance:
        strength = settings.weight
    else:
        span = max_distance - desired_distance
        if span.is_zero():
            strength = Scalar.zero()
        else:
            strength = (settings.weight * (max_distance - dist)) / span

    return direction * strength


def apply_pairwise_separation(
    a: MovementState, b: MovementState, settings: SeparationSettings
) -> None:
    """Add each unit's push away from the other to its desired velocity."""
    offset_ab = compute_separation_offset(a, b, settings)
    offset_ba = compute_separation_offset(b, a, settings)
    a.desired_velocity = a.desired_velocity + offset_ab
    b.desired_velocity = b.desired_velocity + offset_ba
"""Per-tick integration of a unit's movement toward its target."""

from __future__ import annotations

from bgengine.arrival import compute_desired_velocity, has_arrived
from bgengine.fixed import Scalar
from bgengine.fixmath import length, normalize_approx
from bgengine.movement_types import ArrivalSettings, MovementState
from bgengine.vec2 import Vec2


def _snap_to_target(state: MovementState) -> None:
    state.position = state.target.position
    state.desired_velocity = Vec2.zero()
    state.velocity = Vec2.zero()
    state.has_target = False


def tick_movement(
    state: MovementState,
    arrival_settings: ArrivalSettings,
    separation_offset: Vec2,
    delta_time: Scalar,
) -> None:
    """Advance one unit by one tick, updating its state in place.

    A unit that reaches its target is snapped onto it and loses the target.
    """
    if not state.has_target:
        state.desired_velocity = Vec2.zero()
        state.velocity = Vec2.zero()
        return

    if has_arrived(state.position, state.target, arrival_settings):
        _snap_to_target(state)
        return

    desired = compute_desired_velocity(
        state.position, state.target, state.max_speed, arrival_settings
    )
    desired = clamp_to_max_speed(desired + separation_offset, state.max_speed)
    state.desired_velocity = desired
    state.velocity = desired
    state.position = state.position + state.velocity * delta_time

    if has_arrived(state.position, state.target, arrival_settings):
        _snap_to_target(state)


def clamp_to_max_speed(velocity: Vec2, max_speed: Scalar) -> Vec2:
    """Shorten the velocity to max_speed if it is longer."""
    size = length(velocity)
    if size.is_zero():
        return Vec2.zero()
    if size <= max_speed:
        return velocity
    return normalize_approx(velocity) * max_speed
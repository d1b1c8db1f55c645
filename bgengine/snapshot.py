"""Read-only picture of the simulation handed to the debug view."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import IntEnum

from bgengine.vec2 import Vec2

INVALID_ENTITY_INDEX = 0xFFFFFFFF


class DebugInputMode(IntEnum):
    IDLE = 0
    DRAG_SELECTING = 1


@dataclass
class SnapshotUnit:
    entity_index: int = 0
    position: Vec2 = field(default_factory=Vec2.zero)
    velocity: Vec2 = field(default_factory=Vec2.zero)
    target_position: Vec2 = field(default_factory=Vec2.zero)
    has_target: bool = False
    selected: bool = False


@dataclass
class SnapshotSelectionBox:
    active: bool = False
    start_screen_x: int = 0
    start_screen_y: int = 0
    current_screen_x: int = 0
    current_screen_y: int = 0


@dataclass
class Snapshot:
    """Simulation, selection and replay state for one drawn frame."""

    current_tick: int = 0
    state_hash: int = 0

    primary_selected_entity_index: int = INVALID_ENTITY_INDEX
    selected_count: int = 0
    total_unit_count: int = 0
    tick_rate_hz: int = 0

    input_mode: DebugInputMode = DebugInputMode.IDLE

    recording: bool = False
    playing_back: bool = False
    parity_known: bool = False
    parity_match: bool = False

    recorded_command_count: int = 0
    playback_command_count: int = 0
    playback_next_index: int = 0

    record_start_tick: int = 0
    record_end_tick: int = 0
    record_end_hash: int = 0

    playback_start_tick: int = 0
    playback_end_tick: int = 0
    playback_end_hash: int = 0

    status_message: str = "Ready"

    units: list[SnapshotUnit] = field(default_factory=list)
    selection_box: SnapshotSelectionBox = field(default_factory=SnapshotSelectionBox)

    def clear(self) -> None:
        """Return every field to its default value."""
        fresh = Snapshot()
        for f in fields(self):
            setattr(self, f.name, getattr(fresh, f.name))
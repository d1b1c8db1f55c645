"""Recorder that collects commands as they are issued."""

from __future__ import annotations

from bgengine.entity import Entity
from bgengine.recorded_command import RecordedCommand
from bgengine.vec2 import Vec2


class CommandRecorder:
    """Append-only log of recorded commands."""

    def __init__(self) -> None:
        self._commands: list[RecordedCommand] = []

    def clear(self) -> None:
        self._commands.clear()

    def record_move(self, tick: int, entity: Entity, target_position: Vec2) -> None:
        self._commands.append(RecordedCommand.make_move(tick, entity, target_position))

    def commands(self) -> list[RecordedCommand]:
        """The recorded commands in order; the list is the recorder's own."""
        return self._commands

    def is_empty(self) -> bool:
        return not self._commands

    def count(self) -> int:
        return len(self._commands)
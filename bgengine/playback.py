"""Replays recorded commands into a session at their recorded ticks."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

from bgengine.entity import Entity
from bgengine.recorded_command import RecordedCommand, RecordedCommandType
from bgengine.vec2 import Vec2


class MoveCommandSink(Protocol):
    """Anything that accepts queued move orders, such as a game session."""

    def queue_move_command(self, entity: Entity, target_position: Vec2) -> None: ...


class CommandPlayback:
    """Cursor over a list of recorded commands, sorted by tick.

    Commands whose tick has already passed are skipped without being issued.
    """

    def __init__(self) -> None:
        self._commands: list[RecordedCommand] = []
        self._next_command_index = 0

    def set_commands(self, commands: Iterable[RecordedCommand]) -> None:
        """Load a copy of the commands and rewind to the first."""
        self._commands = list(commands)
        self._next_command_index = 0

    def clear(self) -> None:
        self._commands.clear()
        self._next_command_index = 0

    def reset(self) -> None:
        """Rewind to the first command, keeping the list."""
        self._next_command_index = 0

    def playback_tick(self, tick: int, session: MoveCommandSink) -> None:
        """Issue every command recorded for this tick to the session."""
        while self._next_command_index < len(self._commands):
            command = self._commands[self._next_command_index]
            if command.tick > tick:
                break
            if (
                command.tick == tick
                and command.type is RecordedCommandType.MOVE
                and command.move.entity.is_valid()
            ):
                session.queue_move_command(command.move.entity, command.move.target_position)
            self._next_command_index += 1

    def is_finished(self) -> bool:
        return self._next_command_index >= len(self._commands)

    def next_command_index(self) -> int:
        return self._next_command_index

    def command_count(self) -> int:
        return len(self._commands)

    def commands(self) -> tuple[RecordedCommand, ...]:
        return tuple(self._commands)
"""Commands captured for replay, stamped with the tick they were issued on."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from bgengine.entity import Entity
from bgengine.vec2 import Vec2


class RecordedCommandType(IntEnum):
    NONE = 0
    MOVE = 1


@dataclass(frozen=True)
class RecordedMoveCommand:
    """Order for one entity to move to a world position."""

    entity: Entity = field(default_factory=Entity.invalid)
    target_position: Vec2 = field(default_factory=Vec2.zero)


@dataclass(frozen=True)
class RecordedCommand:
    """A command together with the tick at which it takes effect."""

    tick: int = 0
    type: RecordedCommandType = RecordedCommandType.NONE
    move: RecordedMoveCommand = field(default_factory=RecordedMoveCommand)

    @staticmethod
    def make_move(tick: int, entity: Entity, target_position: Vec2) -> RecordedCommand:
        return RecordedCommand(
            tick, RecordedCommandType.MOVE, RecordedMoveCommand(entity, target_position)
        )

    def is_valid(self) -> bool:
        """A move with a valid entity is valid; every other command is not."""
        if self.type is RecordedCommandType.MOVE:
            return self.move.entity.is_valid()
        return False
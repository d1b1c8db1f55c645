"""Entity handles: an index paired with a generation counter."""

from __future__ import annotations

from dataclasses import dataclass

INVALID_INDEX = 0xFFFFFFFF


@dataclass(frozen=True)
class Entity:
    """Handle to an entity slot.

    The generation tells a live entity apart from an older one that
    used the same slot.
    """

    index: int = INVALID_INDEX
    generation: int = 0

    INVALID_INDEX = INVALID_INDEX

    @staticmethod
    def invalid() -> Entity:
        return Entity(INVALID_INDEX, 0)

    def is_valid(self) -> bool:
        return self.index != INVALID_INDEX
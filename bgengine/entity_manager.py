"""Allocation and deferred destruction of entity handles."""

from __future__ import annotations

from bgengine.entity import Entity


class EntityManager:
    """Hands out entity handles and recycles their slots.

    Destruction is deferred: marked entities stay alive until
    process_deferred_destroy() runs. Freed slots are reused lowest index
    first, with the generation bumped.
    """

    def __init__(self) -> None:
        self._generations: list[int] = []
        self._alive: list[bool] = []
        self._pending_destroy: list[bool] = []
        self._free_list: list[int] = []
        self._deferred_destroy_queue: list[Entity] = []
        self._alive_count = 0

    def create(self) -> Entity:
        index = self._allocate_index()
        self._ensure_capacity(index)
        self._alive[index] = True
        self._alive_count += 1
        return Entity(index, self._generations[index])

    def mark_for_destroy(self, entity: Entity) -> None:
        """Queue a live entity for destruction; repeated marks are ignored."""
        if not self.is_alive(entity) or self._pending_destroy[entity.index]:
            return
        self._pending_destroy[entity.index] = True
        self._deferred_destroy_queue.append(entity)

    def process_deferred_destroy(self) -> None:
        """Destroy every queued entity that is still the live occupant of its slot."""
        for entity in self._deferred_destroy_queue:
            index = entity.index
            if index >= len(self._generations):
                continue
            if not self._alive[index]:
                continue
            if self._generations[index] != entity.generation:
                continue
            self._alive[index] = False
            self._pending_destroy[index] = False
            self._generations[index] += 1
            self._free_list.append(index)
            self._alive_count -= 1
        self._deferred_destroy_queue.clear()

    def is_alive(self, entity: Entity) -> bool:
        if not entity.is_valid() or not self.exists(entity.index):
            return False
        if not self._alive[entity.index]:
            return False
        return self._generations[entity.index] == entity.generation

    def exists(self, index: int) -> bool:
        return 0 <= index < len(self._generations)

    def capacity(self) -> int:
        return len(self._generations)

    def alive_count(self) -> int:
        return self._alive_count

    def alive_mask(self) -> tuple[bool, ...]:
        """Liveness flag of every slot, by index."""
        return tuple(self._alive)

    def deferred_destroy_queue(self) -> tuple[Entity, ...]:
        return tuple(self._deferred_destroy_queue)

    def _allocate_index(self) -> int:
        if not self._free_list:
            return len(self._generations)
        best = min(self._free_list)
        self._free_list.remove(best)
        return best

    def _ensure_capacity(self, index: int) -> None:
        missing = index + 1 - len(self._generations)
        if missing <= 0:
            return
        self._generations.extend([0] * missing)
        self._alive.extend([False] * missing)
        self._pending_destroy.extend([False] * missing)
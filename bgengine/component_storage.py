"""Dense per-entity component storage indexed by entity slot."""

from __future__ import annotations

from collections.abc import Callable
from typing import Generic, TypeVar

from bgengine.entity import Entity
from bgengine.entity_manager import EntityManager

T = TypeVar("T")


class ComponentStorage(Generic[T]):
    """Holds one component of type T per entity slot.

    New slots are filled by calling the factory. A slot keeps its data
    after removal; add() marks it present again and returns the same object.
    """

    def __init__(self, factory: Callable[[], T]) -> None:
        self._factory = factory
        self._data: list[T] = []
        self._has_component: list[bool] = []

    def ensure_capacity(self, capacity: int) -> None:
        missing = capacity - len(self._data)
        if missing <= 0:
            return
        self._data.extend(self._factory() for _ in range(missing))
        self._has_component.extend([False] * missing)

    def has(self, entity: Entity, entity_manager: EntityManager) -> bool:
        if not entity_manager.is_alive(entity):
            return False
        return self.has_index(entity.index)

    def try_get(self, entity: Entity, entity_manager: EntityManager) -> T | None:
        """The entity's component, or None when it has none or is not alive."""
        if not self.has(entity, entity_manager):
            return None
        return self._data[entity.index]

    def add(self, entity: Entity, entity_manager: EntityManager) -> T:
        """Mark the entity as having a component and return it.

        Raises ValueError if the entity is not alive.
        """
        if not entity_manager.is_alive(entity):
            raise ValueError(f"entity {entity} is not alive")
        self.ensure_capacity(entity.index + 1)
        self._has_component[entity.index] = True
        return self._data[entity.index]

    def remove(self, entity: Entity) -> None:
        if not entity.is_valid() or entity.index >= len(self._has_component):
            return
        self._has_component[entity.index] = False

    def clear(self) -> None:
        self._data.clear()
        self._has_component.clear()

    def remove_destroyed(self, entity_manager: EntityManager) -> None:
        """Drop components whose slots are no longer alive."""
        alive = entity_manager.alive_mask()
        for index, present in enumerate(self._has_component):
            if present and (not entity_manager.exists(index) or not alive[index]):
                self._has_component[index] = False

    def capacity(self) -> int:
        return len(self._data)

    def has_index(self, index: int) -> bool:
        return 0 <= index < len(self._has_component) and self._has_component[index]

    def get_by_index(self, index: int) -> T:
        """The component in a slot; raises KeyError if the slot holds none."""
        if not self.has_index(index):
            raise KeyError(f"no component at index {index}")
        return self._data[index]
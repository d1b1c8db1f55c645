"""Fixed-tick simulation core: entities, command queues and state hash."""

from __future__ import annotations

from bgengine.command_queue import Command, CommandQueue
from bgengine.entity_manager import EntityManager
from bgengine.state_hash import StateHash
from bgengine.tick_clock import TickClock


class Simulation:
    """Advances the world one deterministic tick at a time.

    Commands enqueued during a tick become the current commands of the
    next tick. The state hash covers the tick number and every entity
    slot's liveness.
    """

    def __init__(self) -> None:
        self._tick_clock = TickClock()
        self._entity_manager = EntityManager()
        self._current_commands = CommandQueue()
        self._next_commands = CommandQueue()
        self._state_hash = StateHash()
        self._current_state_hash = 0

    def enqueue_command(self, command: Command) -> None:
        self._next_commands.push(command)

    def tick(self) -> None:
        """Promote queued commands, apply deferred destruction, hash, advance."""
        current = self._current_commands.items()
        pending = self._next_commands.items()
        current[:] = pending
        pending.clear()

        self._entity_manager.process_deferred_destroy()
        self._update_state_hash()
        self._tick_clock.advance()

    def current_tick(self) -> int:
        return self._tick_clock.current_tick()

    def current_state_hash(self) -> int:
        return self._current_state_hash

    def entities(self) -> EntityManager:
        return self._entity_manager

    def current_commands(self) -> CommandQueue:
        return self._current_commands

    def next_commands(self) -> CommandQueue:
        return self._next_commands

    def _update_state_hash(self) -> None:
        state = self._state_hash
        state.reset()
        state.add_u32(self._tick_clock.current_tick())
        for index, alive in enumerate(self._entity_manager.alive_mask()):
            state.add_u32(index)
            state.add_bool(alive)
        self._current_state_hash = state.value()
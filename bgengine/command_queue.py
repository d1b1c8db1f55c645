"""Commands issued to the simulation and the queue that holds them."""

from __future__ import annotations


class Command:
    """Base class of every command the simulation accepts."""


class CommandQueue:
    """Ordered list of pending commands."""

    def __init__(self) -> None:
        self._items: list[Command] = []

    def push(self, command: Command) -> None:
        """Append a command; anything that is not a Command raises TypeError."""
        if not isinstance(command, Command):
            raise TypeError("only Command instances can be queued")
        self._items.append(command)

    def clear(self) -> None:
        self._items.clear()

    def is_empty(self) -> bool:
        return not self._items

    def items(self) -> list[Command]:
        """The queued commands in order; the list is the queue's own."""
        return self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self):
        return iter(self._items)
"""Counter of fixed simulation ticks."""

from __future__ import annotations

_MASK32 = 0xFFFFFFFF


class TickClock:
    """Counts ticks as an unsigned 32-bit value."""

    TICKS_PER_SECOND = 20
    MILLISECONDS_PER_TICK = 50

    def __init__(self) -> None:
        self._current_tick = 0

    def current_tick(self) -> int:
        return self._current_tick

    def advance(self) -> None:
        self._current_tick = (self._current_tick + 1) & _MASK32

    def reset(self) -> None:
        self._current_tick = 0
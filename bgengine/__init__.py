"""Deterministic fixed-point simulation core for real-time strategy games.

It provides fixed-point maths, entities and components, grids and A* path
finding, unit steering, a tick-based simulation with state hashing, and
command recording and replay.
"""

__version__ = "0.1.0"
"""Grid paths and the outcome of a path query."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from bgengine.world_types import GridCoord


@dataclass(frozen=True)
class PathStep:
    coord: GridCoord = field(default_factory=GridCoord)


@dataclass
class Path:
    """Ordered cells from start to goal, both included."""

    steps: list[PathStep] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.steps

    def step_count(self) -> int:
        return len(self.steps)

    def clear(self) -> None:
        self.steps.clear()


class PathQueryStatus(IntEnum):
    SUCCESS = 0
    START_OUT_OF_BOUNDS = 1
    GOAL_OUT_OF_BOUNDS = 2
    START_BLOCKED = 3
    GOAL_BLOCKED = 4
    NO_PATH = 5


@dataclass
class PathQueryResult:
    status: PathQueryStatus = PathQueryStatus.NO_PATH
    path: Path = field(default_factory=Path)

    def succeeded(self) -> bool:
        return self.status is PathQueryStatus.SUCCESS

    def clear(self) -> None:
        self.status = PathQueryStatus.NO_PATH
        self.path.clear()
"""Grid coordinates, sizes and conversions between cells and world space."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from bgengine.fixed import Scalar
from bgengine.vec2 import Vec2


@dataclass(frozen=True)
class CellIndex:
    """Flat index of a cell in row-major order."""

    value: int = 0


class CellType(IntEnum):
    EMPTY = 0
    BLOCKED = 1


@dataclass(frozen=True)
class GridCoord:
    x: int = 0
    y: int = 0

    @staticmethod
    def invalid() -> GridCoord:
        return GridCoord(-1, -1)

    def is_valid(self) -> bool:
        return self.x >= 0 and self.y >= 0


@dataclass(frozen=True)
class GridSize:
    width: int = 0
    height: int = 0

    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    def cell_count(self) -> int:
        return self.width * self.height


@dataclass(frozen=True)
class WorldRect:
    min: GridCoord = field(default_factory=GridCoord)
    max: GridCoord = field(default_factory=GridCoord)


def is_inside(coord: GridCoord, size: GridSize) -> bool:
    return 0 <= coord.x < size.width and 0 <= coord.y < size.height


def flatten(coord: GridCoord, size: GridSize) -> CellIndex:
    """Row-major index of a coordinate; bounds are not checked."""
    return CellIndex(coord.y * size.width + coord.x)


def world_to_cell(position: Vec2) -> GridCoord:
    """Cell holding a world position, truncating toward zero."""
    return GridCoord(position.x.trunc_to_int(), position.y.trunc_to_int())


def cell_to_world_center(coord: GridCoord) -> Vec2:
    return Vec2(
        Scalar.from_int(coord.x) + Scalar.half(),
        Scalar.from_int(coord.y) + Scalar.half(),
    )


def cell_to_world_min(coord: GridCoord) -> Vec2:
    return Vec2(Scalar.from_int(coord.x), Scalar.from_int(coord.y))


def cell_to_world_max(coord: GridCoord) -> Vec2:
    return Vec2(Scalar.from_int(coord.x + 1), Scalar.from_int(coord.y + 1))
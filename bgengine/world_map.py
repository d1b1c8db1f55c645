"""Walkability map built on a grid of cell types."""

from __future__ import annotations

from bgengine.grid import Grid
from bgengine.world_types import CellType, GridCoord, GridSize


class Map:
    """Static terrain: each cell is either walkable or blocked.

    Cells outside the map count as blocked. Writing outside raises IndexError.
    """

    def __init__(self, size: GridSize | None = None) -> None:
        self._cells = Grid(size)

    def resize(self, size: GridSize) -> None:
        self._cells.resize(size)

    def clear(self, value: CellType = CellType.EMPTY) -> None:
        self._cells.clear(value)

    def size(self) -> GridSize:
        return self._cells.size()

    def width(self) -> int:
        return self._cells.width()

    def height(self) -> int:
        return self._cells.height()

    def is_empty(self) -> bool:
        return self._cells.is_empty()

    def is_in_bounds(self, coord: GridCoord) -> bool:
        return self._cells.is_in_bounds(coord)

    def is_walkable(self, coord: GridCoord) -> bool:
        return self.is_in_bounds(coord) and self.get_cell(coord) is CellType.EMPTY

    def is_blocked(self, coord: GridCoord) -> bool:
        return not self.is_walkable(coord)

    def set_walkable(self, coord: GridCoord, walkable: bool) -> None:
        self.set_cell(coord, CellType.EMPTY if walkable else CellType.BLOCKED)

    def set_blocked(self, coord: GridCoord, blocked: bool) -> None:
        self.set_cell(coord, CellType.BLOCKED if blocked else CellType.EMPTY)

    def set_cell(self, coord: GridCoord, cell_type: CellType) -> None:
        self._cells.set(coord, cell_type)

    def get_cell(self, coord: GridCoord) -> CellType:
        return self._cells.get(coord)

    def cells(self) -> Grid:
        return self._cells
"""Rectangular grid of cell types."""

from __future__ import annotations

from bgengine.world_types import CellIndex, CellType, GridCoord, GridSize


class Grid:
    """Row-major grid of CellType values.

    Accessing a coordinate or index outside the grid raises IndexError.
    """

    def __init__(self, size: GridSize | None = None) -> None:
        self._size = GridSize()
        self._cells: list[CellType] = []
        if size is not None:
            self.resize(size)

    def resize(self, size: GridSize) -> None:
        """Change the size, keeping the leading cells and filling new ones empty."""
        self._size = size
        count = size.cell_count()
        del self._cells[count:]
        self._cells.extend([CellType.EMPTY] * (count - len(self._cells)))

    def clear(self, value: CellType = CellType.EMPTY) -> None:
        self._cells[:] = [value] * len(self._cells)

    def size(self) -> GridSize:
        return self._size

    def width(self) -> int:
        return self._size.width

    def height(self) -> int:
        return self._size.height

    def is_empty(self) -> bool:
        return self._size.is_empty()

    def is_in_bounds(self, coord: GridCoord) -> bool:
        return 0 <= coord.x < self._size.width and 0 <= coord.y < self._size.height

    def to_index(self, coord: GridCoord) -> CellIndex:
        if not self.is_in_bounds(coord):
            raise IndexError(f"{coord} is outside the grid")
        return CellIndex(coord.y * self._size.width + coord.x)

    def to_coord(self, index: CellIndex) -> GridCoord:
        if self._size.width <= 0 or not 0 <= index.value < self._size.cell_count():
            raise IndexError(f"{index} is outside the grid")
        y, x = divmod(index.value, self._size.width)
        return GridCoord(x, y)

    def get(self, coord: GridCoord) -> CellType:
        return self._cells[self.to_index(coord).value]

    def set(self, coord: GridCoord, value: CellType) -> None:
        self._cells[self.to_index(coord).value] = value

    def cells(self) -> list[CellType]:
        """The underlying row-major cell list."""
        return self._cells
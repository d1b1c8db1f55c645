"""Per-cell static blocking and dynamic unit occupancy."""

from __future__ import annotations

from dataclasses import dataclass, field

from bgengine.entity import Entity
from bgengine.world_types import CellType, GridCoord, GridSize, flatten, is_inside

_PLACEHOLDER_OCCUPANT = Entity(0, 0)


@dataclass
class OccupancyCell:
    """State of one cell: terrain blocking and the unit standing on it."""

    blocked_static: bool = False
    occupied_dynamic: bool = False
    dynamic_occupant: Entity = field(default_factory=Entity.invalid)


class Occupancy:
    """Grid of occupancy cells.

    Writes outside the grid are ignored. Queries outside the grid report
    the cell as blocked and occupied, with no dynamic occupant.
    """

    def __init__(self, size: GridSize | None = None) -> None:
        self._size = GridSize()
        self._cells: list[OccupancyCell] = []
        if size is not None:
            self.resize(size)

    def resize(self, size: GridSize) -> None:
        """Change the size; every cell starts out free."""
        self._size = size
        self._cells = [OccupancyCell() for _ in range(size.width * size.height)]

    def clear(self) -> None:
        """Free every cell, static and dynamic."""
        for cell in self._cells:
            cell.blocked_static = False
            cell.occupied_dynamic = False
            cell.dynamic_occupant = Entity.invalid()

    def clear_dynamic(self) -> None:
        """Remove every dynamic occupant, keeping static blocking."""
        for cell in self._cells:
            cell.occupied_dynamic = False
            cell.dynamic_occupant = Entity.invalid()

    def size(self) -> GridSize:
        return self._size

    def is_empty(self) -> bool:
        return not self._cells

    def is_inside(self, coord: GridCoord) -> bool:
        return is_inside(coord, self._size)

    def set_static_blocked(self, coord: GridCoord, blocked: bool) -> None:
        cell = self._cell(coord)
        if cell is not None:
            cell.blocked_static = blocked

    def is_static_blocked(self, coord: GridCoord) -> bool:
        cell = self._cell(coord)
        return True if cell is None else cell.blocked_static

    def set_dynamic_occupied(self, coord: GridCoord, occupant: Entity) -> None:
        cell = self._cell(coord)
        if cell is not None:
            cell.occupied_dynamic = True
            cell.dynamic_occupant = occupant

    def clear_dynamic_occupied(self, coord: GridCoord) -> None:
        cell = self._cell(coord)
        if cell is not None:
            cell.occupied_dynamic = False
            cell.dynamic_occupant = Entity.invalid()

    def has_dynamic_occupant(self, coord: GridCoord) -> bool:
        cell = self._cell(coord)
        return False if cell is None else cell.occupied_dynamic

    def get_dynamic_occupant(self, coord: GridCoord) -> Entity:
        cell = self._cell(coord)
        return Entity.invalid() if cell is None else cell.dynamic_occupant

    def is_occupied(self, coord: GridCoord) -> bool:
        cell = self._cell(coord)
        return True if cell is None else cell.occupied_dynamic

    def is_blocked(self, coord: GridCoord) -> bool:
        cell = self._cell(coord)
        if cell is None:
            return True
        return cell.blocked_static or cell.occupied_dynamic

    def set(self, coord: GridCoord, value: CellType | int | bool) -> None:
        """Mark a cell dynamically occupied or free.

        A CellType marks it occupied when BLOCKED; an integer or bool when
        non-zero. The occupant recorded is a placeholder entity.
        """
        cell = self._cell(coord)
        if cell is None:
            return
        if isinstance(value, CellType):
            occupied = value is CellType.BLOCKED
        else:
            occupied = bool(value)
        cell.occupied_dynamic = occupied
        cell.dynamic_occupant = _PLACEHOLDER_OCCUPANT if occupied else Entity.invalid()

    def get(self, coord: GridCoord) -> CellType:
        """BLOCKED if the cell is blocked or occupied, or lies outside the grid."""
        return CellType.BLOCKED if self.is_blocked(coord) else CellType.EMPTY

    def _cell(self, coord: GridCoord) -> OccupancyCell | None:
        if not self.is_inside(coord):
            return None
        return self._cells[flatten(coord, self._size).value]
"""Deterministic four-way A* search over a map and its occupancy."""

from __future__ import annotations

import heapq
from dataclasses import dataclass

from bgengine.occupancy import Occupancy
from bgengine.path_types import Path, PathQueryResult, PathQueryStatus, PathStep
from bgengine.world_map import Map
from bgengine.world_types import GridCoord

_STEP_COST = 10


@dataclass
class _NodeRecord:
    parent: int = -1
    g_cost: int = 0
    h_cost: int = 0
    in_open_set: bool = False
    in_closed_set: bool = False

    @property
    def f_cost(self) -> int:
        return self.g_cost + self.h_cost


def _heuristic(a: GridCoord, b: GridCoord) -> int:
    return (abs(a.x - b.x) + abs(a.y - b.y)) * _STEP_COST


class Pathfinder:
    """A* search on a grid with unit step cost and Manhattan heuristic.

    Ties are broken by lowest f, then lowest h, then lowest cell index,
    so the same inputs always give the same path. Occupied cells are
    avoided except for the goal itself.
    """

    def find_path(
        self,
        grid_map: Map,
        occupancy: Occupancy,
        start: GridCoord,
        goal: GridCoord,
    ) -> PathQueryResult:
        if not grid_map.is_in_bounds(start):
            return PathQueryResult(PathQueryStatus.START_OUT_OF_BOUNDS)
        if not grid_map.is_in_bounds(goal):
            return PathQueryResult(PathQueryStatus.GOAL_OUT_OF_BOUNDS)
        if grid_map.is_blocked(start) or occupancy.is_occupied(start):
            return PathQueryResult(PathQueryStatus.START_BLOCKED)
        if grid_map.is_blocked(goal):
            return PathQueryResult(PathQueryStatus.GOAL_BLOCKED)
        if start == goal:
            return PathQueryResult(PathQueryStatus.SUCCESS, Path([PathStep(start)]))

        width = grid_map.width()
        records = [_NodeRecord() for _ in range(grid_map.size().cell_count())]

        def index_of(coord: GridCoord) -> int:
            return coord.y * width + coord.x

        def coord_of(index: int) -> GridCoord:
            y, x = divmod(index, width)
            return GridCoord(x, y)

        start_index = index_of(start)
        start_record = records[start_index]
        start_record.h_cost = _heuristic(start, goal)
        start_record.in_open_set = True
        open_heap = [(start_record.f_cost, start_record.h_cost, start_index)]

        while open_heap:
            f_cost, h_cost, index = heapq.heappop(open_heap)
            record = records[index]
            if (
                not record.in_open_set
                or record.f_cost != f_cost
                or record.h_cost != h_cost
            ):
                continue
            record.in_open_set = False
            record.in_closed_set = True

            current = coord_of(index)
            if current == goal:
                return PathQueryResult(
                    PathQueryStatus.SUCCESS, self._build_path(records, index, start, coord_of)
                )

            for neighbor in (
                GridCoord(current.x, current.y - 1),
                GridCoord(current.x - 1, current.y),
                GridCoord(current.x + 1, current.y),
                GridCoord(current.x, current.y + 1),
            ):
                if not grid_map.is_in_bounds(neighbor):
                    continue
                if grid_map.is_blocked(neighbor):
                    continue
                if neighbor != goal and occupancy.is_occupied(neighbor):
                    continue
                neighbor_index = index_of(neighbor)
                node = records[neighbor_index]
                if node.in_closed_set:
                    continue
                tentative_g = record.g_cost + _STEP_COST
                if not node.in_open_set or tentative_g < node.g_cost:
                    node.parent = index
                    node.g_cost = tentative_g
                    node.h_cost = _heuristic(neighbor, goal)
                    node.in_open_set = True
                    heapq.heappush(open_heap, (node.f_cost, node.h_cost, neighbor_index))

        return PathQueryResult(PathQueryStatus.NO_PATH)

    @staticmethod
    def _build_path(records, goal_index, start, coord_of) -> Path:
        steps: list[PathStep] = []
        index = goal_index
        while True:
            coord = coord_of(index)
            steps.append(PathStep(coord))
            if coord == start:
                break
            index = records[index].parent
            if index < 0:
                raise RuntimeError("path reconstruction lost its parent chain")
        steps.reverse()
        return Path(steps)
"""Structural and path checks for carved mazes."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Sequence, Set, Tuple

import numpy as np

from ..grid import Cell, CellState, Grid


@dataclass
class MazeStructureReport:
    rows: int
    cols: int
    room_count: int
    open_rooms: int
    open_wall_candidates: int
    border_intact: bool
    lattice_intact: bool
    connected: bool
    acyclic: bool
    message: str

    @property
    def is_perfect(self) -> bool:
        return (
            self.open_rooms == self.room_count
            and self.border_intact
            and self.lattice_intact
            and self.connected
            and self.acyclic
        )

    def to_dict(self) -> dict:
        return {
            "rows": self.rows,
            "cols": self.cols,
            "room_count": self.room_count,
            "open_rooms": self.open_rooms,
            "open_wall_candidates": self.open_wall_candidates,
            "border_intact": self.border_intact,
            "lattice_intact": self.lattice_intact,
            "connected": self.connected,
            "acyclic": self.acyclic,
            "is_perfect": self.is_perfect,
            "message": self.message,
        }


@dataclass
class PathEvaluationResult:
    path_length: int
    starts_at_entrance: bool
    reaches_exit: bool
    simple: bool
    contiguous: bool
    stray_in_walls: bool
    message: str

    @property
    def is_valid(self) -> bool:
        return (
            self.starts_at_entrance
            and self.reaches_exit
            and self.simple
            and self.contiguous
            and not self.stray_in_walls
        )

    def to_dict(self) -> dict:
        return {
            "path_length": self.path_length,
            "starts_at_entrance": self.starts_at_entrance,
            "reaches_exit": self.reaches_exit,
            "simple": self.simple,
            "contiguous": self.contiguous,
            "stray_in_walls": self.stray_in_walls,
            "is_valid": self.is_valid,
            "message": self.message,
        }


class MazeEvaluator:
    """Check that a grid is a perfect maze and that a path actually solves it."""

    def evaluate_structure(self, grid: Grid) -> MazeStructureReport:
        cells = grid.to_array()
        passable = cells != CellState.WALL

        # Slices stay inside the border, so they hold rooms and interior wall candidates only.
        rooms = passable[1:-1:2, 1:-1:2]
        between_columns = passable[1:-1:2, 2:-1:2]
        between_rows = passable[2:-1:2, 1:-1:2]
        open_rooms = int(np.count_nonzero(rooms))
        open_candidates = int(np.count_nonzero(between_columns) + np.count_nonzero(between_rows))

        border_intact = not (
            passable[0, :].any() or passable[-1, :].any() or passable[:, 0].any() or passable[:, -1].any()
        )
        lattice_intact = not passable[::2, ::2].any()

        reached = self._reachable(passable, grid.entrance)
        connected = all(room in reached for room in grid.rooms())
        acyclic = grid.room_count > 0 and open_candidates == grid.room_count - 1

        if grid.room_count == 0:
            message = "Grid has no rooms."
        elif open_rooms != grid.room_count:
            message = "Some rooms are still walls."
        elif not border_intact:
            message = "The outer border has been opened."
        elif not lattice_intact:
            message = "A corner cell between rooms has been opened."
        elif not connected:
            message = "Some rooms cannot be reached from the entrance."
        elif not acyclic:
            message = "The corridors contain a loop."
        else:
            message = "Grid is a perfect maze."

        return MazeStructureReport(
            rows=grid.rows,
            cols=grid.cols,
            room_count=grid.room_count,
            open_rooms=open_rooms,
            open_wall_candidates=open_candidates,
            border_intact=border_intact,
            lattice_intact=lattice_intact,
            connected=connected,
            acyclic=acyclic,
            message=message,
        )

    def evaluate_path(self, grid: Grid, path: Sequence[Cell]) -> PathEvaluationResult:
        cells = [tuple(map(int, cell)) for cell in path]
        starts_at_entrance = bool(cells) and cells[0] == grid.entrance
        reaches_exit = bool(cells) and cells[-1] == grid.exit
        simple = len(set(cells)) == len(cells)
        contiguous = all(
            abs(r1 - r2) + abs(c1 - c2) == 1 for (r1, c1), (r2, c2) in zip(cells, cells[1:])
        )
        stray_in_walls = any(
            not grid.in_bounds(r, c) or grid.cell_state(r, c) == CellState.WALL for r, c in cells
        )

        if not cells:
            message = "Path is empty."
        elif stray_in_walls:
            message = "Path passes through walls."
        elif not starts_at_entrance:
            message = "Path does not start at the entrance."
        elif not reaches_exit:
            message = "Path does not reach the exit."
        elif not contiguous:
            message = "Path skips between non-adjacent cells."
        elif not simple:
            message = "Path visits a cell more than once."
        else:
            message = "Path connects the entrance to the exit."

        return PathEvaluationResult(
            path_length=len(cells),
            starts_at_entrance=starts_at_entrance,
            reaches_exit=reaches_exit,
            simple=simple,
            contiguous=contiguous,
            stray_in_walls=stray_in_walls,
            message=message,
        )

    @staticmethod
    def _reachable(passable: np.ndarray, start: Tuple[int, int]) -> Set[Tuple[int, int]]:
        rows, cols = passable.shape
        r0, c0 = start
        if not (0 <= r0 < rows and 0 <= c0 < cols) or not passable[r0, c0]:
            return set()
        queue = deque([start])
        visited = {start}
        while queue:
            r, c = queue.popleft()
            for dr, dc in ((1, 0), (-1, 0), (0, 1), (0, -1)):
                nr, nc = r + dr, c + dc
                if 0 <= nr < rows and 0 <= nc < cols and passable[nr, nc] and (nr, nc) not in visited:
                    visited.add((nr, nc))
                    queue.append((nr, nc))
        return visited


__all__ = ["MazeEvaluator", "MazeStructureReport", "PathEvaluationResult"]
